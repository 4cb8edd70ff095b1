"""
Operational envelope boundaries of a variation.

This module provides the General section: units, allowed ranges for
performance weights, fuel figures and DOW/DOI corrections, and presentation
overrides that take precedence over the document-level settings.
"""

from __future__ import annotations

from dataclasses import dataclass

from wabconfig.base import (
    DigitalSignature,
    HighlightedResult,
    ManualInputRange,
    Range,
    WeightUnit,
)
from wabconfig.schema import document_field

__all__ = ["RANGE_FIELDS", "General"]


@dataclass(kw_only=True)
class General:
    """Operational envelope boundaries.

    Attributes
    ----------
    weight_unit : WeightUnit
        Unit for all weights of the variation
    fuel_unit : WeightUnit
        Unit for all fuel quantities
    performance_mtow, performance_lw : ManualInputRange
        Allowed performance-limited takeoff and landing weights
    block_fuel, taxi_fuel, trip_fuel, landing_fuel, take_off_fuel : Range
        Allowed fuel figures (block fuel is optional)
    dow_correction, doi_correction : Range
        Allowed corrections to the dry operating weight and index
    dow_limit, doi_limit, payload_limit : Range | None
        Optional hard limits
    draw_fuel_vector : bool
        Whether the fuel vector is drawn on the envelope chart
    disclaimer, digital_signature, highlighted_results
        Overrides for the document-level values when present
    """

    weight_unit: WeightUnit = document_field(
        WeightUnit, description="Unit for all weights of this variation"
    )
    fuel_unit: WeightUnit = document_field(
        WeightUnit, description="Unit for all fuel quantities of this variation"
    )
    performance_mtow: ManualInputRange = document_field(
        ManualInputRange,
        unit="weight",
        description="Allowed performance-limited takeoff weight",
    )
    performance_lw: ManualInputRange = document_field(
        ManualInputRange,
        unit="weight",
        description="Allowed performance-limited landing weight",
    )
    block_fuel: Range | None = document_field(Range, optional=True, unit="fuel")
    taxi_fuel: Range = document_field(Range, unit="fuel")
    trip_fuel: Range = document_field(Range, unit="fuel")
    landing_fuel: Range = document_field(Range, unit="fuel")
    take_off_fuel: Range = document_field(Range, unit="fuel")
    dow_correction: Range = document_field(
        Range, unit="weight", description="Allowed correction of the DOW"
    )
    doi_correction: Range = document_field(
        Range, unit="index", description="Allowed correction of the DOI"
    )
    dow_limit: Range | None = document_field(Range, optional=True, unit="weight")
    doi_limit: Range | None = document_field(Range, optional=True, unit="index")
    payload_limit: Range | None = document_field(Range, optional=True, unit="weight")
    draw_fuel_vector: bool = document_field(
        bool, description="Draw the fuel vector on the envelope chart"
    )
    disclaimer: str | None = document_field(
        str, optional=True, description="Overrides the document disclaimer"
    )
    digital_signature: DigitalSignature | None = document_field(
        DigitalSignature,
        optional=True,
        description="Overrides the document signature method",
    )
    highlighted_results: list[HighlightedResult] | None = document_field(
        HighlightedResult,
        many=True,
        optional=True,
        description="Overrides the document highlighted results",
    )


# Attribute names of every range pair, in wire order
RANGE_FIELDS: tuple[str, ...] = (
    "performance_mtow",
    "performance_lw",
    "block_fuel",
    "taxi_fuel",
    "trip_fuel",
    "landing_fuel",
    "take_off_fuel",
    "dow_correction",
    "doi_correction",
    "dow_limit",
    "doi_limit",
    "payload_limit",
)
