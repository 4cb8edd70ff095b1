"""
Root of the configuration document.

This module defines:
- ConfigDocument: the document for one aircraft registration
- make_default_document: a new document with a single default variation
- Helpers resolving the presentation settings that apply to a variation,
  where the variation's ``general`` section overrides the document level
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import NON_NEGATIVE, DigitalSignature, HighlightedResult
from .models.variation import Variation, make_default_variation
from .schema import document_field

__all__ = [
    "REGISTRATION_LENGTH",
    "ConfigDocument",
    "effective_digital_signature",
    "effective_disclaimer",
    "effective_highlighted_results",
    "make_default_document",
]

REGISTRATION_LENGTH = 5


@dataclass(kw_only=True)
class ConfigDocument:
    """
    Weight-and-balance configuration for one aircraft registration.

    Parameters
    ----------
    registration
        Aircraft registration the configuration is defined for
    operational_use
        Whether the configuration is released for operational use
    bew
        Basic empty weight
    bi
        Basic index
    digital_signature
        How load sheets are signed
    highlighted_results
        Results emphasised on the load sheet, unless a variation overrides them
    disclaimer
        Disclaimer printed on the load sheet
    variations
        Configuration profiles, at least one when present
    """

    bew: int | None = document_field(
        int,
        optional=True,
        range=NON_NEGATIVE,
        unit="weight",
        description=(
            "The basic empty weight of the aircraft. This is the weight of the "
            "aircraft without operator specific additions, typically supplied "
            "by the manufacturer."
        ),
    )
    bi: float | None = document_field(
        float,
        optional=True,
        range=NON_NEGATIVE,
        unit="index",
        description="The basic index of the aircraft",
    )
    digital_signature: DigitalSignature | None = document_field(
        DigitalSignature, optional=True
    )
    highlighted_results: list[HighlightedResult] | None = document_field(
        HighlightedResult,
        many=True,
        optional=True,
        description="Overridden by variation specific highlighted results",
    )
    operational_use: bool = document_field(bool)
    registration: str = document_field(
        str,
        length=REGISTRATION_LENGTH,
        description=(
            "Identifies for which aircraft registration the configuration is "
            "defined"
        ),
    )
    variations: list[Variation] | None = document_field(
        Variation, many=True, optional=True
    )
    disclaimer: str | None = document_field(str, optional=True)


def make_default_document(registration: str = "") -> ConfigDocument:
    """
    Build a new document holding a single default variation.

    Parameters
    ----------
    registration
        Aircraft registration

    Returns
    -------
    ConfigDocument
        Document not yet released for operational use
    """
    return ConfigDocument(
        registration=registration,
        operational_use=False,
        variations=[make_default_variation(1)],
    )


def effective_highlighted_results(
    document: ConfigDocument, variation: Variation
) -> list[HighlightedResult]:
    """
    Return the highlighted results that apply to a variation.

    Parameters
    ----------
    document
        Document owning the variation
    variation
        Variation being shown

    Returns
    -------
    list[HighlightedResult]
        The variation's own list when set, else the document list, else empty
    """
    general = variation.general
    if general is not None and general.highlighted_results is not None:
        return list(general.highlighted_results)
    return list(document.highlighted_results or [])


def effective_disclaimer(document: ConfigDocument, variation: Variation) -> str | None:
    """Return the disclaimer that applies to a variation."""
    general = variation.general
    if general is not None and general.disclaimer is not None:
        return general.disclaimer
    return document.disclaimer


def effective_digital_signature(
    document: ConfigDocument, variation: Variation
) -> DigitalSignature | None:
    """Return the signature method that applies to a variation."""
    general = variation.general
    if general is not None and general.digital_signature is not None:
        return general.digital_signature
    return document.digital_signature
