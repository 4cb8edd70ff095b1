"""
Weight-and-balance configuration documents.

This package defines the configuration document describing an aircraft's
weight-and-balance parameters and provides:
- The document model (``ConfigDocument`` and its entities) with defaults
- Exhaustive validation with path-addressed findings
- JSON import/export (TOML import) independent of validation
- Typed edit helpers such as variation renumbering

Example:
    >>> from wabconfig import deserialize, serialize, validate
    >>> document = deserialize(text)
    >>> result = validate(document)
    >>> for issue in result.errors:
    ...     print(issue)
    >>> exported = serialize(result.raise_for_errors())
"""

from __future__ import annotations

from .base import (
    CabinType,
    DigitalSignature,
    HighlightedResult,
    ManualInputRange,
    Point,
    Range,
    WeightUnit,
)
from .docs import export_schema_json, generate_field_docs
from .document import (
    ConfigDocument,
    effective_digital_signature,
    effective_disclaimer,
    effective_highlighted_results,
    make_default_document,
)
from .editing import (
    add_variation,
    remove_variation,
    renumber,
    set_default_variation,
    update,
)
from .exceptions import (
    ConfigError,
    DocumentEncodingError,
    DocumentSyntaxError,
    ParseError,
    ParseErrorKind,
    ValidationError,
)
from .models import Variation, make_default_variation
from .serialization import (
    deserialize,
    load_document,
    save_document,
    serialize,
    suggested_filename,
)
from .validation import ErrorKind, ValidationIssue, ValidationResult, validate

__all__ = [
    "CabinType",
    "ConfigDocument",
    "ConfigError",
    "DigitalSignature",
    "DocumentEncodingError",
    "DocumentSyntaxError",
    "ErrorKind",
    "HighlightedResult",
    "ManualInputRange",
    "ParseError",
    "ParseErrorKind",
    "Point",
    "Range",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
    "Variation",
    "WeightUnit",
    "add_variation",
    "deserialize",
    "effective_digital_signature",
    "effective_disclaimer",
    "effective_highlighted_results",
    "export_schema_json",
    "generate_field_docs",
    "load_document",
    "make_default_document",
    "make_default_variation",
    "remove_variation",
    "renumber",
    "save_document",
    "serialize",
    "set_default_variation",
    "suggested_filename",
    "update",
    "validate",
]
