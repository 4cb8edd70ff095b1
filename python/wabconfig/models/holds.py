"""
Cargo hold limits.

Combined limits refer to holds by id; every referenced id must exist among
the holds of the same configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from wabconfig.base import NON_NEGATIVE
from wabconfig.schema import document_field

__all__ = ["CombinedLimit", "Hold", "HoldConfiguration"]


@dataclass(kw_only=True)
class Hold:
    id: int = document_field(int)
    used: bool | None = document_field(bool, optional=True)
    label: str | None = document_field(str, optional=True)
    max: float | None = document_field(
        float, optional=True, range=NON_NEGATIVE, unit="weight"
    )
    index_shift_per_weight_unit: float | None = document_field(
        float, optional=True, unit="index"
    )


@dataclass(kw_only=True)
class CombinedLimit:
    """Maximum load shared by several holds."""

    max: float | None = document_field(
        float, optional=True, range=NON_NEGATIVE, unit="weight"
    )
    holds: list[int] = document_field(
        int, many=True, default_factory=list, description="Ids of the limited holds"
    )


@dataclass(kw_only=True)
class HoldConfiguration:
    use_mail: bool | None = document_field(bool, optional=True)
    use_cargo: bool | None = document_field(bool, optional=True)
    use_bags: bool | None = document_field(bool, optional=True)
    daa_weight: float | None = document_field(
        float,
        optional=True,
        range=NON_NEGATIVE,
        unit="weight",
        description="Weight of a delivery-at-aircraft item",
    )
    crew_bag_weight: float | None = document_field(
        float, optional=True, range=NON_NEGATIVE, unit="weight"
    )
    holds: list[Hold] = document_field(Hold, many=True, default_factory=list)
    combined_limits: list[CombinedLimit] = document_field(
        CombinedLimit, many=True, default_factory=list
    )

