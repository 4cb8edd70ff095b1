"""
Entity schemas of the configuration document.

This package contains one module per document section:
- general: operational envelope boundaries
- aircraft: structural limits and configuration groups
- weight_policy: passenger and bag standard weights
- cabin: cabin sections
- holds: cargo holds and combined limits
- envelope: centre-of-gravity envelopes
- table: lookup tables
- variation: the variation profile composing all of the above
"""

from __future__ import annotations

from wabconfig.models.aircraft import (
    Aircraft,
    Configuration,
    ConfigurationGroup,
    StructuralMtow,
)
from wabconfig.models.cabin import Cabin, CabinSection
from wabconfig.models.envelope import Envelope, EnvelopeType
from wabconfig.models.general import General
from wabconfig.models.holds import CombinedLimit, Hold, HoldConfiguration
from wabconfig.models.table import Line, Record, Table
from wabconfig.models.variation import Fuel, Variation, make_default_variation
from wabconfig.models.weight_policy import (
    BagPolicy,
    BagWeightPolicy,
    PassengerPolicy,
    PaxWeightPolicy,
    WeightPolicy,
)

__all__ = [
    "Aircraft",
    "BagPolicy",
    "BagWeightPolicy",
    "Cabin",
    "CabinSection",
    "CombinedLimit",
    "Configuration",
    "ConfigurationGroup",
    "Envelope",
    "EnvelopeType",
    "Fuel",
    "General",
    "Hold",
    "HoldConfiguration",
    "Line",
    "PassengerPolicy",
    "PaxWeightPolicy",
    "Record",
    "StructuralMtow",
    "Table",
    "Variation",
    "WeightPolicy",
    "make_default_variation",
]
