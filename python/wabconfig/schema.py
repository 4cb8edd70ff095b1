"""
Field metadata for configuration document entities.

Every entity in the document is a dataclass whose fields are declared with
:func:`document_field`. The attached metadata is the single description of
the document shape and is used to:
- Map Python attribute names to the stable wire keys of the interchange format
- Check leaf values (kind, range, length) during validation
- Generate field documentation for form-rendering collaborators

Example:
    >>> from dataclasses import dataclass
    >>> from wabconfig.schema import document_field, get_field_metadata
    >>>
    >>> @dataclass(kw_only=True)
    ... class Hold:
    ...     max_weight: float | None = document_field(
    ...         float, optional=True, range=(0, 10_000), unit="weight"
    ...     )
    >>>
    >>> get_field_metadata(Hold)["max_weight"].key
    'maxWeight'
"""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any

__all__ = [
    "FieldMetadata",
    "camelize",
    "document_field",
    "get_field_metadata",
    "is_entity",
]


def camelize(name: str) -> str:
    """
    Convert a snake_case attribute name to its camelCase wire key.

    Examples
    --------
    >>> camelize("index_shift_per_weight_unit")
    'indexShiftPerWeightUnit'
    >>> camelize("index1")
    'index1'
    """
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def is_entity(kind: Any) -> bool:
    """Return True if ``kind`` is an entity (dataclass) type."""
    return isinstance(kind, type) and is_dataclass(kind)


@dataclass
class FieldMetadata:
    """Metadata for a single field of a document entity.

    Attributes
    ----------
    name : str
        Python attribute name
    key : str
        Wire key used in the interchange format
    kind : type
        Expected value type: ``float``, ``int``, ``str``, ``bool``, an
        ``Enum`` subclass or an entity dataclass
    many : bool
        Whether the field holds an ordered sequence of ``kind``
    optional : bool
        Whether the field may be absent
    unit : str | None
        Physical unit family (e.g. "weight", "index")
    description : str | None
        Human-readable description
    range : tuple[float, float] | None
        Inclusive hard validation range (min, max)
    positive : bool
        Whether the value must be strictly greater than zero
    length : int | None
        Exact length required of a string value
    """

    name: str
    key: str
    kind: Any
    many: bool = False
    optional: bool = False
    unit: str | None = None
    description: str | None = None
    range: tuple[float, float] | None = None
    positive: bool = False
    length: int | None = None

    @property
    def is_enum(self) -> bool:
        """Whether values are members of an Enum."""
        return isinstance(self.kind, type) and issubclass(self.kind, Enum)

    @property
    def is_entity(self) -> bool:
        """Whether values are nested entities."""
        return is_entity(self.kind)


def document_field(  # noqa: PLR0913
    kind: Any,
    *,
    many: bool = False,
    optional: bool = False,
    key: str | None = None,
    unit: str | None = None,
    description: str | None = None,
    range: tuple[float, float] | None = None,
    positive: bool = False,
    length: int | None = None,
    default: Any = MISSING,
    default_factory: Any = MISSING,
) -> Any:
    """Create a dataclass field with document metadata.

    Optional fields default to ``None`` unless another default is given.
    Required fields have no default and must be passed to the constructor.

    Parameters
    ----------
    kind : type
        Expected value type (scalar type, Enum subclass or entity dataclass)
    many : bool
        Whether the field is an ordered sequence of ``kind``
    optional : bool
        Whether the field may be absent from a document
    key : str | None
        Wire key. Defaults to the camelCase form of the attribute name.
    unit : str | None
        Physical unit family
    description : str | None
        Human-readable description
    range : tuple[float, float] | None
        Inclusive hard validation range (min, max)
    positive : bool
        Whether the value must be strictly positive
    length : int | None
        Exact string length
    default : Any
        Explicit default value
    default_factory : Callable | None
        Factory for mutable defaults

    Returns
    -------
    Any
        A dataclass field with ``FieldMetadata`` attached
    """
    metadata = {
        "document": FieldMetadata(
            name="",  # Filled in by get_field_metadata
            key=key or "",
            kind=kind,
            many=many,
            optional=optional,
            unit=unit,
            description=description,
            range=range,
            positive=positive,
            length=length,
        )
    }

    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    if default is not MISSING:
        return field(default=default, metadata=metadata)
    if optional:
        return field(default=None, metadata=metadata)
    return field(metadata=metadata)


def get_field_metadata(cls: type) -> dict[str, FieldMetadata]:
    """Extract document metadata from an entity dataclass.

    Parameters
    ----------
    cls : type
        An entity dataclass with fields declared via document_field()

    Returns
    -------
    dict[str, FieldMetadata]
        Mapping from attribute name to metadata, in declaration order
    """
    result = {}
    for f in fields(cls):
        if "document" in f.metadata:
            meta = f.metadata["document"]
            meta.name = f.name
            if not meta.key:
                meta.key = camelize(f.name)
            result[f.name] = meta
    return result
