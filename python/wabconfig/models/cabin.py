"""Passenger cabin layout."""

from __future__ import annotations

from dataclasses import dataclass

from wabconfig.base import NON_NEGATIVE, CabinType
from wabconfig.schema import document_field

__all__ = ["Cabin", "CabinSection"]


@dataclass(kw_only=True)
class CabinSection:
    """Seating section of the cabin.

    ``row_from`` and ``row_to`` are optional, but when both are given
    ``row_from`` must not exceed ``row_to``.
    """

    id: int = document_field(int)
    index_shift_per_weight_unit: float = document_field(
        float,
        unit="index",
        description="Index change per weight unit loaded in this section",
    )
    jump_seat: bool | None = document_field(bool, optional=True)
    label: str = document_field(str)
    max: float = document_field(
        float, range=NON_NEGATIVE, description="Seating capacity of the section"
    )
    row_from: int | None = document_field(int, optional=True)
    row_to: int | None = document_field(int, optional=True)


@dataclass(kw_only=True)
class Cabin:
    type: CabinType = document_field(CabinType, default=CabinType.COMMERCIAL)
    sections: list[CabinSection] = document_field(
        CabinSection, many=True, default_factory=list
    )
