"""
Named configuration profiles.

A variation bundles every section of the configuration for one operating
profile of the aircraft. New variations are created with
:func:`make_default_variation`, which returns the empty but structurally valid
baseline accepted by the validator.

Example
-------
    >>> from wabconfig.models.variation import make_default_variation
    >>> variation = make_default_variation(2)
    >>> variation.envelope_types[0].label
    'STANDARD'
"""

from __future__ import annotations

from dataclasses import dataclass

from wabconfig.base import CabinType, ManualInputRange, Range, WeightUnit
from wabconfig.models.aircraft import Aircraft, StructuralMtow
from wabconfig.models.cabin import Cabin
from wabconfig.models.envelope import Envelope, EnvelopeType
from wabconfig.models.general import General
from wabconfig.models.holds import HoldConfiguration
from wabconfig.models.table import Line, Record, Table
from wabconfig.models.weight_policy import BagPolicy, PassengerPolicy, WeightPolicy
from wabconfig.schema import document_field

__all__ = ["DEFAULT_ENVELOPE_LABEL", "Fuel", "Variation", "make_default_variation"]

DEFAULT_ENVELOPE_LABEL = "STANDARD"


@dataclass(kw_only=True)
class Fuel:
    trimming: bool | None = document_field(bool, optional=True)


@dataclass(kw_only=True)
class Variation:
    """One named configuration profile.

    Attributes
    ----------
    id : int
        Identifier, unique within the document and conventionally equal to the
        1-based position of the variation
    name : str
        Name of the variation
    short_description, info : str | None
        Free text shown to the operator
    default : bool | None
        Whether this variation is preselected
    general, aircraft, weight_policy, cabin, hold_configuration, fuel, table
        Configuration sections
    envelope_types : list[EnvelopeType]
        Centre-of-gravity envelope sets, at least one per complete variation
    """

    id: int = document_field(int)
    short_description: str | None = document_field(str, optional=True)
    default: bool | None = document_field(bool, optional=True)
    name: str = document_field(str, description="Name of the variation")
    info: str | None = document_field(str, optional=True)
    general: General = document_field(General)
    aircraft: Aircraft = document_field(Aircraft)
    weight_policy: WeightPolicy = document_field(WeightPolicy)
    cabin: Cabin = document_field(Cabin)
    hold_configuration: HoldConfiguration = document_field(HoldConfiguration)
    fuel: Fuel = document_field(Fuel, default_factory=Fuel)
    envelope_types: list[EnvelopeType] = document_field(
        EnvelopeType, many=True, default_factory=list
    )
    table: Table = document_field(Table)


def _zero_range() -> Range:
    return Range(min=0.0, max=0.0)


def make_default_variation(id: int) -> Variation:  # noqa: A002
    """
    Build a fully populated default variation.

    Parameters
    ----------
    id
        Identifier of the new variation

    Returns
    -------
    Variation
        Variation with zeroed limits, empty collections, one zero structural
        MTOW, one "STANDARD" envelope type and one zeroed row per table
    """
    return Variation(
        id=id,
        name="",
        general=General(
            weight_unit=WeightUnit.KG,
            fuel_unit=WeightUnit.KG,
            performance_mtow=ManualInputRange(min=0.0, max=0.0),
            performance_lw=ManualInputRange(min=0.0, max=0.0),
            taxi_fuel=_zero_range(),
            trip_fuel=_zero_range(),
            landing_fuel=_zero_range(),
            take_off_fuel=_zero_range(),
            dow_correction=_zero_range(),
            doi_correction=_zero_range(),
            draw_fuel_vector=False,
        ),
        aircraft=Aircraft(
            structural_mzfw=0.0,
            structural_mrmpw=0.0,
            structural_mlw=0.0,
            structural_mtows=[StructuralMtow(mtow=0.0)],
            configuration_groups=[],
        ),
        weight_policy=WeightPolicy(
            passenger=PassengerPolicy(pax_weight_policies=[]),
            bag=BagPolicy(bag_weight_policies=[]),
        ),
        cabin=Cabin(type=CabinType.COMMERCIAL, sections=[]),
        hold_configuration=HoldConfiguration(holds=[], combined_limits=[]),
        fuel=Fuel(trimming=False),
        envelope_types=[
            EnvelopeType(
                id=1,
                label=DEFAULT_ENVELOPE_LABEL,
                zfw=Envelope(),
                tow=Envelope(),
                lw=Envelope(),
            )
        ],
        table=Table(
            standard_fueling=[Record(y=0.0, value=0.0)],
            cg_to_mac=[
                Line(mac=0.0, index1=0.0, weight1=0.0, index2=0.0, weight2=0.0)
            ],
            mac_to_ths=[Record(y=0.0, value=0.0)],
        ),
    )
