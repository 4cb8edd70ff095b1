"""
Unit tests for wabconfig.editing module.

Tests renumbering and the typed variation edits.
"""

from __future__ import annotations

import copy

import pytest

from wabconfig import (
    HighlightedResult,
    add_variation,
    make_default_document,
    remove_variation,
    renumber,
    set_default_variation,
    update,
    validate,
)
from wabconfig.models import CabinSection, Hold


def _sections(*ids):
    return [
        CabinSection(
            id=i, label=f"S{i}", max=10 * i, index_shift_per_weight_unit=0.01
        )
        for i in ids
    ]


class TestRenumber:
    """Tests for renumber function."""

    def test_assigns_positions(self):
        """Ids become the 1-based positions."""
        result = renumber(_sections(7, 3, 3, 12))
        assert [s.id for s in result] == [1, 2, 3, 4]

    def test_preserves_order_and_fields(self):
        """Only ids change."""
        sections = _sections(7, 3, 12)
        result = renumber(sections)
        assert [s.label for s in result] == ["S7", "S3", "S12"]
        assert [s.max for s in result] == [70, 30, 120]

    def test_idempotent(self):
        """Renumbering twice equals renumbering once."""
        once = renumber(_sections(5, 5, 9))
        assert renumber(once) == once

    def test_input_unchanged(self):
        """The input items are not modified."""
        sections = _sections(4, 8)
        renumber(sections)
        assert [s.id for s in sections] == [4, 8]

    def test_empty(self):
        """An empty sequence gives an empty list."""
        assert renumber([]) == []

    def test_accepts_iterables(self):
        """Any iterable of entities is accepted."""
        holds = (Hold(id=i) for i in (9, 8))
        assert [h.id for h in renumber(holds)] == [1, 2]

    def test_copies_nested_entities(self, document):
        """Renumbered items do not share nested entities with the input."""
        variations = document.variations
        renumbered = renumber(variations)

        renumbered[0].general.taxi_fuel.max = 9999.0

        assert renumbered[0].general is not variations[0].general
        assert variations[0].general.taxi_fuel.max == 500

    def test_clears_duplicate_ids(self, document):
        """Renumbered holds no longer violate id uniqueness."""
        holds = document.variations[0].hold_configuration.holds
        holds[1].id = holds[0].id
        assert not validate(document).is_valid

        document.variations[0].hold_configuration.holds = renumber(holds)
        assert validate(document).is_valid


class TestVariationEdits:
    """Tests for add_variation, remove_variation and set_default_variation."""

    def test_add_variation(self):
        """A default variation is appended with the next id."""
        document = add_variation(make_default_document("DABCD"))
        assert [v.id for v in document.variations] == [1, 2]
        assert document.variations[1].envelope_types[0].label == "STANDARD"
        assert validate(document).is_valid

    def test_add_to_document_without_variations(self):
        """Adding to a document with no variations starts at id 1."""
        document = make_default_document("DABCD")
        document.variations = None
        assert [v.id for v in add_variation(document).variations] == [1]

    def test_remove_variation_renumbers(self):
        """Removing a variation renumbers the remaining ones."""
        document = add_variation(add_variation(make_default_document("DABCD")))
        document.variations[2].name = "Third"

        result = remove_variation(document, 0)

        assert [v.id for v in result.variations] == [1, 2]
        assert result.variations[1].name == "Third"

    @pytest.mark.parametrize("index", [1, -2, 5])
    def test_remove_out_of_range(self, index):
        """Positions without a variation raise IndexError."""
        document = make_default_document("DABCD")
        with pytest.raises(IndexError, match="No variation at position"):
            remove_variation(document, index)

    def test_remove_last_variation(self):
        """Removing the only variation leaves an invalid, empty list."""
        result = remove_variation(make_default_document("DABCD"), 0)
        assert result.variations == []
        assert not validate(result).is_valid

    def test_set_default_variation(self, document):
        """Exactly one variation ends up marked default."""
        document = add_variation(document)
        result = set_default_variation(document, 2)
        assert [v.default for v in result.variations] == [False, True]

    def test_set_default_unknown_id(self, document):
        """An unknown id raises KeyError."""
        with pytest.raises(KeyError, match="No variation with id 9"):
            set_default_variation(document, 9)

    def test_edits_do_not_mutate(self, document):
        """Edits return new documents and leave the input untouched."""
        before = copy.deepcopy(document)

        add_variation(document)
        remove_variation(document, 0)
        set_default_variation(document, 1)

        assert document == before


    @pytest.mark.parametrize(
        "edit",
        [
            add_variation,
            lambda document: remove_variation(document, 1),
            lambda document: set_default_variation(document, 2),
            lambda document: update(document, bew=1),
        ],
        ids=["add", "remove", "set_default", "update"],
    )
    def test_result_is_independent(self, document, edit):
        """Changing nested values of a result leaves the input untouched."""
        document = add_variation(document)
        before = copy.deepcopy(document)

        result = edit(document)
        result.variations[0].general.taxi_fuel.max = 9999.0
        result.variations[0].hold_configuration.holds.append(Hold(id=9))
        result.highlighted_results.append(HighlightedResult.THS)

        assert document == before


class TestUpdate:
    """Tests for update function."""

    def test_update_fields(self, document):
        """Named fields are replaced in a copy."""
        result = update(document, registration="DEFGH", bew=40000)
        assert result.registration == "DEFGH"
        assert result.bew == 40000
        assert document.registration == "DABCD"

    def test_update_unknown_field(self, document):
        """Unknown names raise TypeError."""
        with pytest.raises(TypeError):
            update(document, colour="red")
