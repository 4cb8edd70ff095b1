"""Shared fixtures for wabconfig tests."""

from __future__ import annotations

from typing import Any

import pytest

from wabconfig import ConfigDocument
from wabconfig.serialization import from_dict


def _complete_variation() -> dict[str, Any]:
    return {
        "id": 1,
        "name": "Summer",
        "shortDescription": "Summer schedule",
        "default": True,
        "info": "Standard passenger weights",
        "general": {
            "weightUnit": "KG",
            "fuelUnit": "KG",
            "performanceMtow": {"min": 50000, "max": 79000, "requireManualInput": True},
            "performanceLw": {"min": 45000, "max": 66000},
            "blockFuel": {"min": 1000, "max": 20000},
            "taxiFuel": {"min": 0, "max": 500},
            "tripFuel": {"min": 0, "max": 18000},
            "landingFuel": {"min": 1000, "max": 8000},
            "takeOffFuel": {"min": 1000, "max": 19000},
            "dowCorrection": {"min": -500, "max": 500},
            "doiCorrection": {"min": -5, "max": 5},
            "drawFuelVector": True,
            "highlightedResults": ["TOW", "MACTOW"],
        },
        "aircraft": {
            "structuralMzfw": 62500,
            "structuralMrmpw": 79400,
            "structuralMlw": 66000,
            "configurationGroups": [
                {
                    "label": "Galley",
                    "configurations": [
                        {
                            "id": 1,
                            "label": "Full",
                            "indexShift": 0.5,
                            "weightShift": 120,
                            "default": True,
                        },
                        {"id": 2, "label": "Empty"},
                    ],
                }
            ],
            "structuralMtows": [{"mtow": 79000}, {"mtow": 73500}],
        },
        "weightPolicy": {
            "passenger": {
                "allowOptimum": False,
                "paxWeightPolicies": [
                    {
                        "id": 1,
                        "maleWeight": 88,
                        "femaleWeight": 70,
                        "childWeight": 35,
                        "adultWeight": 84,
                        "infantWeight": 10,
                        "label": "Standard",
                        "default": True,
                    }
                ],
            },
            "bag": {
                "bagWeightPolicies": [{"id": 1, "label": "Standard", "bagWeight": 15}]
            },
        },
        "cabin": {
            "type": "COMMERCIAL",
            "sections": [
                {
                    "id": 1,
                    "indexShiftPerWeightUnit": -0.0085,
                    "label": "OA",
                    "max": 60,
                    "rowFrom": 1,
                    "rowTo": 10,
                },
                {
                    "id": 2,
                    "indexShiftPerWeightUnit": 0.0043,
                    "jumpSeat": False,
                    "label": "OB",
                    "max": 120,
                    "rowFrom": 11,
                    "rowTo": 30,
                },
            ],
        },
        "holdConfiguration": {
            "useCargo": True,
            "useBags": True,
            "daaWeight": 10,
            "crewBagWeight": 12,
            "holds": [
                {
                    "id": 1,
                    "used": True,
                    "label": "FWD",
                    "max": 3400,
                    "indexShiftPerWeightUnit": -0.011,
                },
                {
                    "id": 2,
                    "label": "AFT",
                    "max": 4100,
                    "indexShiftPerWeightUnit": 0.0087,
                },
            ],
            "combinedLimits": [{"max": 500, "holds": [1, 2]}],
        },
        "fuel": {"trimming": True},
        "envelopeTypes": [
            {
                "id": 1,
                "label": "STANDARD",
                "default": True,
                "zfw": {
                    "weight": 62500,
                    "envelope": [{"x": -20, "y": 40000}, {"x": 25, "y": 62500}],
                },
                "tow": {
                    "minVal": -25,
                    "maxVal": 30,
                    "envelope": [{"x": -22, "y": 45000}, {"x": 28, "y": 79000}],
                },
                "lw": {"envelope": [{"x": -21, "y": 42000}, {"x": 27, "y": 66000}]},
            }
        ],
        "table": {
            "standardFueling": [{"y": 0, "value": 0}, {"y": 5000, "value": -2.1}],
            "cgToMac": [
                {
                    "mac": 15,
                    "index1": -30,
                    "weight1": 40000,
                    "index2": -10,
                    "weight2": 79000,
                },
                {
                    "mac": 35,
                    "index1": 20,
                    "weight1": 40000,
                    "index2": 45,
                    "weight2": 79000,
                },
            ],
            "macToThs": [{"y": 10, "value": 2.5}, {"y": 30, "value": -1.0}],
        },
    }


@pytest.fixture
def document_data() -> dict[str, Any]:
    """Wire representation of a complete, valid document."""
    return {
        "registration": "DABCD",
        "operationalUse": True,
        "bew": 42000,
        "bi": 50.5,
        "digitalSignature": "PASSWORD",
        "highlightedResults": ["DOW", "ZFW"],
        "disclaimer": "Not for operational use without approval",
        "variations": [_complete_variation()],
    }


@pytest.fixture
def document(document_data) -> ConfigDocument:
    """Complete, valid document."""
    return from_dict(ConfigDocument, document_data)
