"""
Custom exceptions for weight-and-balance configuration documents.

This module defines the exception hierarchy for document errors:
- ConfigError: Base exception for all document errors
- ParseError: Text could not be turned into a document
- DocumentSyntaxError: Malformed text
- DocumentEncodingError: Invalid byte sequence
- ValidationError: A document failed validation and the caller asked to raise
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .validation import ValidationIssue

__all__ = [
    "ConfigError",
    "DocumentEncodingError",
    "DocumentSyntaxError",
    "ParseError",
    "ParseErrorKind",
    "ValidationError",
]


class ConfigError(Exception):
    """Base exception for all configuration document errors."""

    pass


class ParseErrorKind(Enum):
    """Why text could not be parsed into a document."""

    SYNTAX = "SyntaxError"
    ENCODING = "EncodingError"


class ParseError(ConfigError):
    """
    Raised when imported text cannot be turned into a document.

    Parsing never applies a partial document: when this is raised the caller's
    current document is untouched.

    Parameters
    ----------
    message
        Human-readable reason.
    kind
        Syntax or encoding failure.
    """

    def __init__(self, message: str, kind: ParseErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class DocumentSyntaxError(ParseError):
    """
    Raised for text that is not well-formed.

    Parameters
    ----------
    message
        Description of the problem.
    line
        1-based line of the problem, when known.
    column
        1-based column of the problem, when known.
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message, ParseErrorKind.SYNTAX)
        self.line = line
        self.column = column


class DocumentEncodingError(ParseError):
    """Raised when imported bytes are not valid UTF-8."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ParseErrorKind.ENCODING)


class ValidationError(ConfigError):
    """
    Raised for validation failures.

    Validation itself reports problems as data; this exception is only raised
    when a caller asks for it via ``ValidationResult.raise_for_errors``.

    Parameters
    ----------
    issues
        Every error found in the document.
    """

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        lines = [f"{len(issues)} validation error(s):"]
        lines.extend(f"  {issue}" for issue in issues)
        super().__init__("\n".join(lines))
        self.issues = tuple(issues)
