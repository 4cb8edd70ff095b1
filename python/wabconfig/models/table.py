"""
Lookup tables consumed by the weight-and-balance engine.

Each table is an ordered sequence of rows sorted ascending by its key:
``y`` for records and ``mac`` for lines.
"""

from __future__ import annotations

from dataclasses import dataclass

from wabconfig.schema import document_field

__all__ = ["TABLE_SORT_KEYS", "Line", "Record", "Table"]


@dataclass(kw_only=True)
class Record:
    y: float = document_field(float)
    value: float = document_field(float)


@dataclass(kw_only=True)
class Line:
    """Two-point line converting an index/weight pair to %MAC."""

    mac: float = document_field(float, unit="%MAC")
    index1: float = document_field(float, unit="index")
    weight1: float = document_field(float, unit="weight")
    index2: float = document_field(float, unit="index")
    weight2: float = document_field(float, unit="weight")


@dataclass(kw_only=True)
class Table:
    standard_fueling: list[Record] = document_field(
        Record, many=True, default_factory=list
    )
    cg_to_mac: list[Line] = document_field(
        Line,
        many=True,
        default_factory=list,
        description="Sorted ascending based on %MAC",
    )
    mac_to_ths: list[Record] = document_field(Record, many=True, default_factory=list)


# Attribute of each row used to order a table
TABLE_SORT_KEYS: dict[str, str] = {
    "standard_fueling": "y",
    "cg_to_mac": "mac",
    "mac_to_ths": "y",
}
