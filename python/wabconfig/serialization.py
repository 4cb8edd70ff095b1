"""
Conversion between configuration documents and interchange text.

This module provides:
- serialize: document -> JSON text (never fails, valid or not)
- deserialize: JSON or TOML text -> document (syntax only, no validation)
- load_document / save_document: file-level import and export
- suggested_filename: export name derived from the registration

Deserialization keeps values as found: a number where a string is expected or
a missing section is left for :func:`wabconfig.validation.validate` to report,
so that a well-formed but invalid document can still be imported and fixed.
"""

from __future__ import annotations

import json
import logging
import math
import re
import tomllib
from collections.abc import Mapping
from dataclasses import is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

from .document import ConfigDocument
from .exceptions import DocumentEncodingError, DocumentSyntaxError
from .models.table import Table
from .schema import FieldMetadata, get_field_metadata

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_FILENAME",
    "deserialize",
    "find_unknown_keys",
    "from_dict",
    "load_document",
    "save_document",
    "serialize",
    "suggested_filename",
    "to_dict",
]

T = TypeVar("T")

DEFAULT_FILENAME = "config.json"

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def find_unknown_keys(data: Mapping[str, object], known_keys: set[str]) -> list[str]:
    """
    Find keys in data that are not in the set of known keys.

    Parameters
    ----------
    data
        Mapping to check for unknown keys.
    known_keys
        Set of valid/known key names.

    Returns
    -------
    list[str]
        Keys present in data but not in known_keys, sorted alphabetically.

    Examples
    --------
    >>> find_unknown_keys({"registration": "DABCD", "colour": "red"}, {"registration"})
    ['colour']
    """
    unknown = {str(key) for key in data} - known_keys
    return sorted(unknown)


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def from_dict(cls: type[T], data: Mapping[str, Any], path: str = "") -> T:
    """
    Build an entity from its wire representation.

    Missing keys become ``None``. Nested objects are converted to their entity
    types and enum strings to enum members; any other value is stored as found.
    Unknown keys are logged and ignored.

    Parameters
    ----------
    cls
        Entity dataclass to build
    data
        Decoded mapping using wire keys
    path
        Location of ``data`` in the document, used in log messages

    Returns
    -------
    T
        The entity, not validated
    """
    metadata = get_field_metadata(cls)

    unknown = find_unknown_keys(data, {meta.key for meta in metadata.values()})
    if unknown:
        logger.warning(
            f"Unknown keys at {path or '<document>'}: {', '.join(unknown)}. "
            "These will be ignored."
        )

    values = {}
    for name, meta in metadata.items():
        value = data.get(meta.key)
        field_path = _join(path, meta.key)
        if cls is Table and isinstance(value, Mapping):
            # Older exports store a single row instead of a list of rows
            logger.info(f"Reading single-row table at {field_path} as a list")
            value = [value]
        values[name] = _load_field(value, meta, field_path)
    return cls(**values)


def _load_field(value: Any, meta: FieldMetadata, path: str) -> Any:
    if value is None:
        return None
    if not meta.many:
        return _load_value(value, meta, path)
    if not isinstance(value, list):
        return value
    return [_load_value(item, meta, f"{path}[{i}]") for i, item in enumerate(value)]


def _load_value(value: Any, meta: FieldMetadata, path: str) -> Any:
    if meta.is_entity and isinstance(value, Mapping):
        return from_dict(meta.kind, value, path)
    if meta.is_enum and isinstance(value, str):
        try:
            return meta.kind(value)
        except ValueError:
            return value
    return value


def to_dict(entity: Any) -> dict[str, Any]:
    """
    Convert an entity to its wire representation.

    Fields set to ``None`` are omitted and enum members are written as their
    values. Values of unexpected types are passed through unchanged.

    Parameters
    ----------
    entity
        Any document entity

    Returns
    -------
    dict[str, Any]
        Mapping using wire keys
    """
    result = {}
    for name, meta in get_field_metadata(type(entity)).items():
        value = getattr(entity, name)
        if value is not None:
            result[meta.key] = _dump(value)
    return result


def _dump(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        # JSON has no NaN or infinity
        return str(value)
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list | tuple):
        return [_dump(item) for item in value]
    if isinstance(value, set | frozenset):
        return [_dump(item) for item in sorted(value, key=str)]
    if isinstance(value, Mapping):
        return {str(key): _dump(item) for key, item in value.items()}
    return value


def _json_default(value: Any) -> str:
    return str(value)


def serialize(document: ConfigDocument, *, indent: int | None = 2) -> str:
    """
    Convert a document to JSON text.

    Serialization is independent of validation and succeeds for any document,
    so work in progress can always be exported.

    Parameters
    ----------
    document
        Document to export, valid or not
    indent
        Indentation of the JSON output; ``None`` for a single line

    Returns
    -------
    str
        JSON text
    """
    return json.dumps(
        _dump(document), indent=indent, ensure_ascii=False, default=_json_default
    )


def deserialize(
    text: str | bytes,
    *,
    format: str = "json",  # noqa: A002
) -> ConfigDocument:
    """
    Parse interchange text into a document.

    Only syntax is checked. The returned document may be invalid; pass it to
    ``validate`` before handing it to a calculation.

    Parameters
    ----------
    text
        Complete document text, or UTF-8 encoded bytes
    format
        ``"json"`` or ``"toml"``

    Returns
    -------
    ConfigDocument
        The parsed document

    Raises
    ------
    DocumentEncodingError
        If bytes are not valid UTF-8
    DocumentSyntaxError
        If the text is malformed or its top-level value is not an object
    ValueError
        If ``format`` is not supported
    """
    if isinstance(text, bytes | bytearray):
        try:
            text = bytes(text).decode("utf-8-sig")
        except UnicodeDecodeError as err:
            msg = f"Document is not valid UTF-8: {err.reason} at byte {err.start}"
            raise DocumentEncodingError(msg) from err

    if format == "json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as err:
            msg = f"Malformed JSON document: {err.msg}"
            raise DocumentSyntaxError(msg, line=err.lineno, column=err.colno) from err
        except RecursionError as err:
            msg = "Malformed JSON document: nesting is too deep"
            raise DocumentSyntaxError(msg) from err
    elif format == "toml":
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as err:
            msg = f"Malformed TOML document: {err}"
            raise DocumentSyntaxError(msg) from err
        except RecursionError as err:
            msg = "Malformed TOML document: nesting is too deep"
            raise DocumentSyntaxError(msg) from err
    else:
        msg = f"Unknown document format: {format!r}"
        raise ValueError(msg)

    if not isinstance(data, dict):
        msg = f"Document must be an object at the top level, got {type(data).__name__}"
        raise DocumentSyntaxError(msg)

    return from_dict(ConfigDocument, data)


def suggested_filename(document: ConfigDocument) -> str:
    """
    Return the export filename for a document.

    Examples
    --------
    >>> from wabconfig import make_default_document
    >>> suggested_filename(make_default_document("DABCD"))
    'DABCD.json'
    >>> suggested_filename(make_default_document(""))
    'config.json'
    """
    registration = getattr(document, "registration", None)
    if not isinstance(registration, str) or not registration.strip():
        return DEFAULT_FILENAME
    return f"{_UNSAFE_FILENAME_CHARS.sub('_', registration.strip())}.json"


def load_document(path: str | Path) -> ConfigDocument:
    """
    Load a document from a file.

    Files ending in ``.toml`` are read as TOML, anything else as JSON.

    Parameters
    ----------
    path
        Path to the document file.

    Returns
    -------
    ConfigDocument
        The parsed, unvalidated document
    """
    path = Path(path)
    format = "toml" if path.suffix.lower() == ".toml" else "json"  # noqa: A001
    document = deserialize(path.read_bytes(), format=format)
    logger.debug(f"Loaded document from {path}")
    return document


def save_document(
    document: ConfigDocument, directory: str | Path, *, indent: int | None = 2
) -> Path:
    """
    Export a document as JSON into a directory.

    Parameters
    ----------
    document
        Document to export, valid or not
    directory
        Target directory; the filename comes from :func:`suggested_filename`
    indent
        Indentation of the JSON output

    Returns
    -------
    Path
        Path of the written file
    """
    path = Path(directory) / suggested_filename(document)
    text = serialize(document, indent=indent) + "\n"
    # Lone surrogates are written as JSON escapes
    path.write_text(text, encoding="utf-8", errors="backslashreplace")
    logger.info(f"Exported document to {path}")
    return path
