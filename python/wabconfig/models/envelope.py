"""Centre-of-gravity envelopes."""

from __future__ import annotations

from dataclasses import dataclass

from wabconfig.base import Point
from wabconfig.schema import document_field

__all__ = ["Envelope", "EnvelopeType"]


@dataclass(kw_only=True)
class Envelope:
    """Boundary polygon bounding permissible CG-vs-weight combinations.

    The order of ``envelope`` points is significant: it is the boundary as
    traversed by the downstream point-in-region test.
    """

    weight: float | None = document_field(float, optional=True, unit="weight")
    min_val: float | None = document_field(float, optional=True)
    max_val: float | None = document_field(float, optional=True)
    envelope: list[Point] = document_field(Point, many=True, default_factory=list)


@dataclass(kw_only=True)
class EnvelopeType:
    """Named envelope set, one envelope per weight regime."""

    id: int = document_field(int)
    label: str = document_field(str)
    default: bool | None = document_field(bool, optional=True)
    zfw: Envelope = document_field(
        Envelope, default_factory=Envelope, description="Zero fuel weight envelope"
    )
    tow: Envelope = document_field(
        Envelope, default_factory=Envelope, description="Takeoff weight envelope"
    )
    lw: Envelope = document_field(
        Envelope, default_factory=Envelope, description="Landing weight envelope"
    )
