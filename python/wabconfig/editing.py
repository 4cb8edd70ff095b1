"""
Typed edit operations for an editing session.

Edits never mutate their input: each returns a new value, so a caller can
keep the previous document (e.g. for undo) or discard a failed edit.

Example:
    >>> from wabconfig import make_default_document
    >>> from wabconfig.editing import add_variation, remove_variation
    >>> document = add_variation(make_default_document("DABCD"))
    >>> [v.id for v in document.variations]
    [1, 2]
    >>> [v.id for v in remove_variation(document, 0).variations]
    [1]
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from dataclasses import replace
from typing import Any, TypeVar

from .document import ConfigDocument
from .models.variation import make_default_variation

logger = logging.getLogger(__name__)

__all__ = [
    "add_variation",
    "remove_variation",
    "renumber",
    "set_default_variation",
    "update",
]

T = TypeVar("T")


def renumber(items: Iterable[T]) -> list[T]:
    """
    Set every item's ``id`` to its 1-based position.

    Order and all other fields are preserved. Applying it twice gives the same
    result as applying it once.

    Parameters
    ----------
    items
        Entities carrying an ``id`` field

    Returns
    -------
    list
        New list of updated copies
    """
    return [
        replace(copy.deepcopy(item), id=position)
        for position, item in enumerate(items, start=1)
    ]


def update(entity: T, **changes: Any) -> T:
    """
    Return a copy of an entity with some fields replaced.

    Parameters
    ----------
    entity
        Any document entity
    **changes
        New values by Python attribute name

    Returns
    -------
    T
        Updated copy

    Raises
    ------
    TypeError
        If a name is not a field of the entity
    """
    return replace(copy.deepcopy(entity), **changes)


def _with_variations(document: ConfigDocument, variations: list) -> ConfigDocument:
    # variations are already copies; copy everything else
    result = copy.deepcopy(replace(document, variations=None))
    result.variations = variations
    return result


def add_variation(document: ConfigDocument) -> ConfigDocument:
    """
    Append a default variation and renumber all variations.

    Parameters
    ----------
    document
        Document being edited

    Returns
    -------
    ConfigDocument
        Updated copy
    """
    variations = list(document.variations or [])
    variations.append(make_default_variation(len(variations) + 1))
    logger.debug(f"Added variation {len(variations)}")
    return _with_variations(document, renumber(variations))


def remove_variation(document: ConfigDocument, index: int) -> ConfigDocument:
    """
    Remove the variation at a position and renumber the rest.

    Parameters
    ----------
    document
        Document being edited
    index
        0-based position of the variation to remove

    Returns
    -------
    ConfigDocument
        Updated copy

    Raises
    ------
    IndexError
        If there is no variation at ``index``
    """
    variations = list(document.variations or [])
    if not -len(variations) <= index < len(variations):
        msg = f"No variation at position {index} ({len(variations)} defined)"
        raise IndexError(msg)
    removed = variations.pop(index)
    logger.debug(f"Removed variation {removed.id!r}")
    return _with_variations(document, renumber(variations))


def set_default_variation(
    document: ConfigDocument, variation_id: int
) -> ConfigDocument:
    """
    Mark one variation as the default and clear the flag on all others.

    Parameters
    ----------
    document
        Document being edited
    variation_id
        Id of the variation to preselect

    Returns
    -------
    ConfigDocument
        Updated copy

    Raises
    ------
    KeyError
        If no variation has ``variation_id``
    """
    variations = list(document.variations or [])
    if not any(variation.id == variation_id for variation in variations):
        msg = f"No variation with id {variation_id}"
        raise KeyError(msg)
    variations = [
        replace(copy.deepcopy(variation), default=variation.id == variation_id)
        for variation in variations
    ]
    return _with_variations(document, variations)
