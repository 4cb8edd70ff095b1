"""Structural limits and loading configurations of the aircraft."""

from __future__ import annotations

from dataclasses import dataclass

from wabconfig.base import NON_NEGATIVE
from wabconfig.schema import document_field

__all__ = ["Aircraft", "Configuration", "ConfigurationGroup", "StructuralMtow"]


@dataclass(kw_only=True)
class Configuration:
    """One selectable configuration shifting the dry operating weight and index."""

    id: int = document_field(int)
    label: str | None = document_field(str, optional=True)
    index_shift: float | None = document_field(float, optional=True, unit="index")
    weight_shift: float | None = document_field(float, optional=True, unit="weight")
    default: bool | None = document_field(bool, optional=True)


@dataclass(kw_only=True)
class ConfigurationGroup:
    """Labelled group of mutually exclusive configurations."""

    label: str = document_field(str)
    configurations: list[Configuration] = document_field(
        Configuration, many=True, default_factory=list
    )


@dataclass(kw_only=True)
class StructuralMtow:
    """One certified structural maximum takeoff weight."""

    mtow: float = document_field(float, range=NON_NEGATIVE, unit="weight")


@dataclass(kw_only=True)
class Aircraft:
    """Structural limits.

    Physically ``structural_mzfw <= structural_mlw <= structural_mrmpw`` is
    expected; the validator only warns when this does not hold.
    """

    structural_mzfw: float = document_field(
        float,
        range=NON_NEGATIVE,
        unit="weight",
        description="Structural maximum zero fuel weight",
    )
    structural_mrmpw: float = document_field(
        float,
        range=NON_NEGATIVE,
        unit="weight",
        description="Structural maximum ramp weight",
    )
    structural_mlw: float = document_field(
        float,
        range=NON_NEGATIVE,
        unit="weight",
        description="Structural maximum landing weight",
    )
    configuration_groups: list[ConfigurationGroup] = document_field(
        ConfigurationGroup, many=True, default_factory=list
    )
    structural_mtows: list[StructuralMtow] = document_field(
        StructuralMtow,
        many=True,
        default_factory=list,
        description="Certified structural maximum takeoff weights",
    )
