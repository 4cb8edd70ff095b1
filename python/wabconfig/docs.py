"""
Documentation generation from field metadata.

This module provides:
- generate_field_docs: Generate markdown documentation for one entity
- export_schema_json: Export the nested field tree (for form renderers)
"""

from __future__ import annotations

import math
from typing import Any

from .schema import FieldMetadata, get_field_metadata

__all__ = ["export_schema_json", "generate_field_docs"]


def _type_name(meta: FieldMetadata) -> str:
    if meta.is_entity or meta.is_enum:
        name = meta.kind.__name__
    else:
        name = {float: "number", int: "integer", str: "string", bool: "boolean"}[
            meta.kind
        ]
    return f"list[{name}]" if meta.many else name


def _format_range(meta: FieldMetadata) -> str | None:
    if meta.range is not None:
        min_val, max_val = meta.range
        if max_val == math.inf:
            return f">= {min_val:g}"
        return f"[{min_val:g}, {max_val:g}]"
    if meta.positive:
        return "> 0"
    return None


def generate_field_docs(cls: type) -> str:
    """Generate markdown documentation from field metadata.

    Parameters
    ----------
    cls : type
        An entity dataclass with fields defined via document_field()

    Returns
    -------
    str
        Markdown-formatted documentation

    Examples
    --------
    >>> from wabconfig.models import Hold
    >>> md = generate_field_docs(Hold)
    >>> "### `indexShiftPerWeightUnit`" in md
    True
    """
    lines = []

    lines.append(f"# {cls.__name__}")
    lines.append("")

    if cls.__doc__:
        lines.append(cls.__doc__.strip())
        lines.append("")

    metadata = get_field_metadata(cls)
    if metadata:
        lines.append("## Fields")
        lines.append("")

        for meta in metadata.values():
            lines.append(f"### `{meta.key}`")
            lines.append("")

            if meta.description:
                lines.append(meta.description)
                lines.append("")

            lines.append(f"- **Type**: {_type_name(meta)}")
            lines.append(f"- **Required**: {'no' if meta.optional else 'yes'}")

            if meta.unit:
                lines.append(f"- **Unit**: {meta.unit}")

            valid = _format_range(meta)
            if valid is not None:
                lines.append(f"- **Valid range**: {valid}")

            if meta.length is not None:
                lines.append(f"- **Length**: exactly {meta.length} characters")

            if meta.is_enum:
                choices = ", ".join(f"`{member.value}`" for member in meta.kind)
                lines.append(f"- **Choices**: {choices}")

            lines.append("")

    return "\n".join(lines)


def export_schema_json(cls: type) -> dict[str, Any]:
    """Export the field tree of an entity as JSON-serializable data.

    Nested entities are expanded recursively, so exporting the document class
    describes the whole document shape.

    Parameters
    ----------
    cls : type
        An entity dataclass with fields defined via document_field()

    Returns
    -------
    dict
        Structure of the form::

            {
                "class": str,
                "description": str | None,
                "fields": [
                    {
                        "key": str,
                        "type": str,
                        "required": bool,
                        "unit": str | None,
                        "description": str | None,
                        "range": [min, max] | None,
                        "positive": bool,
                        "length": int | None,
                        "choices": [str] | None,
                        "schema": {...} | None,
                    }
                ]
            }

    Examples
    --------
    >>> from wabconfig.base import Range
    >>> data = export_schema_json(Range)
    >>> [f["key"] for f in data["fields"]]
    ['min', 'max']
    """
    fields = []
    for meta in get_field_metadata(cls).values():
        field_range = None
        if meta.range is not None:
            # JSON has no infinity
            field_range = [None if math.isinf(v) else v for v in meta.range]

        fields.append(
            {
                "key": meta.key,
                "type": _type_name(meta),
                "required": not meta.optional,
                "unit": meta.unit,
                "description": meta.description,
                "range": field_range,
                "positive": meta.positive,
                "length": meta.length,
                "choices": [m.value for m in meta.kind] if meta.is_enum else None,
                "schema": export_schema_json(meta.kind) if meta.is_entity else None,
            }
        )

    return {
        "class": cls.__name__,
        "description": cls.__doc__.strip() if cls.__doc__ else None,
        "fields": fields,
    }
