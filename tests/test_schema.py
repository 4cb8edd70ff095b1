"""
Unit tests for wabconfig.schema module.

Tests wire key naming and field metadata extraction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

import pytest

from wabconfig.base import NON_NEGATIVE, ManualInputRange, WeightUnit
from wabconfig.models import CabinSection, Line, Variation
from wabconfig.schema import camelize, document_field, get_field_metadata, is_entity


@dataclass(kw_only=True)
class Sample:
    """Entity used to exercise document_field."""

    required_count: int = document_field(int)
    unit: WeightUnit | None = document_field(WeightUnit, optional=True)
    tags: list[str] = document_field(str, many=True, default_factory=list)
    renamed: float | None = document_field(float, optional=True, key="legacyName")
    limit: float = document_field(float, default=1.0, range=(0, 10))


class TestCamelize:
    """Tests for camelize function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("bew", "bew"),
            ("operational_use", "operationalUse"),
            ("index_shift_per_weight_unit", "indexShiftPerWeightUnit"),
            ("cg_to_mac", "cgToMac"),
            ("weight1", "weight1"),
        ],
    )
    def test_camelize(self, name, expected):
        """snake_case names map to camelCase keys."""
        assert camelize(name) == expected


class TestDocumentField:
    """Tests for document_field function."""

    def test_required_field_has_no_default(self):
        """Required fields must be passed to the constructor."""
        with pytest.raises(TypeError):
            Sample()

    def test_defaults(self):
        """Optional fields default to None; explicit defaults are kept."""
        sample = Sample(required_count=1)
        assert sample.unit is None
        assert sample.tags == []
        assert sample.renamed is None
        assert sample.limit == 1.0

    def test_independent_list_defaults(self):
        """default_factory gives every instance its own list."""
        first, second = Sample(required_count=1), Sample(required_count=2)
        first.tags.append("x")
        assert second.tags == []

    def test_metadata_attached(self):
        """Metadata is stored on the dataclass field."""
        field_map = {f.name: f for f in fields(Sample)}
        meta = field_map["limit"].metadata["document"]
        assert meta.range == (0, 10)
        assert meta.kind is float


class TestGetFieldMetadata:
    """Tests for get_field_metadata function."""

    def test_names_and_keys(self):
        """Names are filled in and keys default to camelCase."""
        metadata = get_field_metadata(Sample)
        assert list(metadata) == ["required_count", "unit", "tags", "renamed", "limit"]
        assert metadata["required_count"].name == "required_count"
        assert metadata["required_count"].key == "requiredCount"
        assert metadata["renamed"].key == "legacyName"

    def test_flags(self):
        """Kind flags describe the value type."""
        metadata = get_field_metadata(Sample)
        assert metadata["unit"].is_enum
        assert not metadata["unit"].is_entity
        assert metadata["tags"].many
        assert metadata["unit"].optional
        assert not metadata["required_count"].optional

    def test_inherited_fields(self):
        """Fields of a base entity are included."""
        keys = [meta.key for meta in get_field_metadata(ManualInputRange).values()]
        assert keys == ["min", "max", "requireManualInput"]

    def test_entity_fields(self):
        """Nested sections are marked as entities."""
        metadata = get_field_metadata(Variation)
        assert metadata["hold_configuration"].is_entity
        assert metadata["hold_configuration"].key == "holdConfiguration"
        assert metadata["envelope_types"].many

    def test_model_keys(self):
        """Keys of the document model follow the interchange format."""
        keys = [meta.key for meta in get_field_metadata(CabinSection).values()]
        assert keys == [
            "id",
            "indexShiftPerWeightUnit",
            "jumpSeat",
            "label",
            "max",
            "rowFrom",
            "rowTo",
        ]
        assert [m.key for m in get_field_metadata(Line).values()] == [
            "mac",
            "index1",
            "weight1",
            "index2",
            "weight2",
        ]

    def test_non_negative_range(self):
        """NON_NEGATIVE is unbounded above."""
        meta = get_field_metadata(CabinSection)["max"]
        assert meta.range == NON_NEGATIVE
        assert math.isinf(meta.range[1])

    def test_is_entity(self):
        """Only dataclass types are entities."""
        assert is_entity(Sample)
        assert not is_entity(Sample(required_count=1))
        assert not is_entity(float)
        assert not is_entity(WeightUnit)
