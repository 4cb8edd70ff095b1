"""
Primitive value types shared by the configuration document.

This module defines the leaf building blocks used by every entity:
- Enumerations whose values are the wire strings (units, signatures, results)
- Range: a ``{min, max}`` pair
- ManualInputRange: a range that can demand manual input from the operator
- Point: a 2D point of an envelope boundary
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .schema import document_field

__all__ = [
    "NON_NEGATIVE",
    "CabinType",
    "DigitalSignature",
    "HighlightedResult",
    "ManualInputRange",
    "Point",
    "Range",
    "WeightUnit",
]

# Inclusive range for quantities that may be zero but never negative
NON_NEGATIVE: tuple[float, float] = (0.0, math.inf)


class WeightUnit(Enum):
    """Unit for weights and fuel quantities."""

    KG = "KG"
    LB = "LB"


class DigitalSignature(Enum):
    """How the load sheet is signed."""

    PASSWORD = "PASSWORD"
    HANDWRITTEN = "HANDWRITTEN"
    DEVICE_SIGNATURE = "DEVICE_SIGNATURE"
    NONE = "NONE"


class HighlightedResult(Enum):
    """Calculation results that can be emphasised on the load sheet."""

    DOW = "DOW"
    PAYLOAD = "PAYLOAD"
    ZFW = "ZFW"
    TO = "TO"
    TOW = "TOW"
    TRIP = "TRIP"
    LW = "LW"
    UNDERLOAD = "UNDERLOAD"
    DOI = "DOI"
    ZFCG = "ZFCG"
    TOCG = "TOCG"
    LCG = "LCG"
    MACZFW = "MACZFW"
    MACTOW = "MACTOW"
    MACLW = "MACLW"
    THS = "THS"


class CabinType(Enum):
    """Cabin layout family. Only commercial cabins exist today."""

    COMMERCIAL = "COMMERCIAL"


@dataclass(kw_only=True)
class Range:
    """
    Closed interval of allowed values.

    Parameters
    ----------
    min
        Lower bound (inclusive)
    max
        Upper bound (inclusive), must not be below ``min``
    """

    min: float = document_field(float)
    max: float = document_field(float)

    def contains(self, value: float) -> bool:
        """Return True if ``value`` lies within the range."""
        return self.min <= value <= self.max


@dataclass(kw_only=True)
class ManualInputRange(Range):
    """Range whose value may have to be typed in by the operator."""

    require_manual_input: bool | None = document_field(bool, optional=True)


@dataclass(kw_only=True)
class Point:
    """Point on an envelope boundary: index (x) against weight (y)."""

    x: float = document_field(float, unit="index")
    y: float = document_field(float, unit="weight")
