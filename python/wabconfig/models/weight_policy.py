"""Passenger and bag standard weight assumptions."""

from __future__ import annotations

from dataclasses import dataclass

from wabconfig.schema import document_field

__all__ = [
    "BagPolicy",
    "BagWeightPolicy",
    "PassengerPolicy",
    "PaxWeightPolicy",
    "WeightPolicy",
]


@dataclass(kw_only=True)
class PaxWeightPolicy:
    """Standard passenger weights for one policy (e.g. summer, winter)."""

    id: int = document_field(int)
    male_weight: float = document_field(float, positive=True, unit="weight")
    female_weight: float = document_field(float, positive=True, unit="weight")
    child_weight: float = document_field(float, positive=True, unit="weight")
    adult_weight: float = document_field(float, positive=True, unit="weight")
    infant_weight: float = document_field(float, positive=True, unit="weight")
    label: str = document_field(str)
    default: bool | None = document_field(bool, optional=True)


@dataclass(kw_only=True)
class PassengerPolicy:
    allow_optimum: bool | None = document_field(bool, optional=True)
    default: bool | None = document_field(bool, optional=True)
    pax_weight_policies: list[PaxWeightPolicy] = document_field(
        PaxWeightPolicy, many=True, default_factory=list
    )


@dataclass(kw_only=True)
class BagWeightPolicy:
    """Standard weight of a single bag."""

    id: int = document_field(int)
    label: str = document_field(str)
    bag_weight: float = document_field(float, positive=True, unit="weight")
    default: bool | None = document_field(bool, optional=True)


@dataclass(kw_only=True)
class BagPolicy:
    default: bool | None = document_field(bool, optional=True)
    bag_weight_policies: list[BagWeightPolicy] = document_field(
        BagWeightPolicy, many=True, default_factory=list
    )


@dataclass(kw_only=True)
class WeightPolicy:
    passenger: PassengerPolicy = document_field(
        PassengerPolicy, default_factory=PassengerPolicy
    )
    bag: BagPolicy = document_field(BagPolicy, default_factory=BagPolicy)
