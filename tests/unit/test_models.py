"""
Unit tests for metadata record models.

Tests field validation, normalization and derived properties.
"""

import pytest
from pydantic import ValidationError

from gf_metadata.core.exceptions import UnknownCategoryValueError
from gf_metadata.core.models import (
    AxisRecord,
    AxisSegment,
    FamilyCategory,
    FamilyRecord,
    FontRecord,
    MetadataRecords,
)


class TestFamilyCategory:
    """Test category parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("SANS_SERIF", FamilyCategory.SANS_SERIF),
            ("Sans Serif", FamilyCategory.SANS_SERIF),
            ("sans-serif", FamilyCategory.SANS_SERIF),
            ("handwriting", FamilyCategory.HANDWRITING),
            (FamilyCategory.MONOSPACE, FamilyCategory.MONOSPACE),
        ],
    )
    def test_parse(self, value, expected):
        assert FamilyCategory.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(UnknownCategoryValueError):
            FamilyCategory.parse("Blackletter")


class TestFamilyRecord:
    """Test FamilyRecord validation."""

    def test_category_normalized(self):
        """Test loose category spellings are accepted."""
        family = FamilyRecord(name="Lora", category="serif")

        assert family.category is FamilyCategory.SERIF

    def test_invalid_category(self):
        """Test unknown categories fail validation."""
        with pytest.raises(ValidationError):
            FamilyRecord(name="Lora", category="Blackletter")

    def test_empty_name(self):
        """Test the family name is required."""
        with pytest.raises(ValidationError):
            FamilyRecord(name="", category="SERIF")

    def test_collections_are_immutable(self, roboto):
        """Test set and sequence fields are frozen containers."""
        assert isinstance(roboto.scripts, frozenset)
        assert isinstance(roboto.tags, frozenset)
        assert isinstance(roboto.designers, tuple)
        assert isinstance(roboto.axes, tuple)

    def test_script_set(self, roboto, kosugi_maru):
        """Test the primary script is part of the script set."""
        assert roboto.script_set == frozenset({"Latn", "Cyrl", "Grek"})
        assert kosugi_maru.script_set == frozenset({"Jpan"})

    def test_str(self, roboto):
        assert str(roboto) == "Roboto (SANS_SERIF)"

    def test_json_round_trip_of_sample(self, roboto):
        """Test a record survives JSON serialization."""
        assert FamilyRecord.model_validate_json(roboto.model_dump_json()) == roboto


class TestFontRecord:
    """Test FontRecord."""

    def test_is_variable(self):
        assert FontRecord(name="Roboto", filename="Roboto[wdth,wght].ttf").is_variable
        assert not FontRecord(name="Lato", filename="Lato-Regular.ttf").is_variable

    def test_weight_range(self):
        with pytest.raises(ValidationError):
            FontRecord(name="Heavy", filename="Heavy.ttf", weight=1200)


class TestAxes:
    """Test axis validation."""

    def test_segment_range(self):
        """Test a segment maximum cannot be below its minimum."""
        with pytest.raises(ValidationError):
            AxisSegment(tag="wght", min_value=900, max_value=100)

    def test_segment_tag_length(self):
        with pytest.raises(ValidationError):
            AxisSegment(tag="weight", min_value=100, max_value=900)

    def test_registry_default_within_bounds(self):
        """Test the registered default lies within the bounds."""
        with pytest.raises(ValidationError):
            AxisRecord(tag="wght", min_value=1, default_value=2000, max_value=1000)

    def test_contains(self, axes):
        weight = axes[0]

        assert weight.contains(AxisSegment(tag="wght", min_value=100, max_value=900))
        assert not weight.contains(AxisSegment(tag="wght", min_value=0, max_value=900))


class TestMetadataRecords:
    """Test the record bundle."""

    def test_defaults_are_empty(self):
        records = MetadataRecords()

        assert records.families == ()
        assert records.taggings == ()

    def test_from_mapping(self):
        """Test nested raw data is validated into records."""
        records = MetadataRecords.model_validate(
            {
                "families": [{"name": "Roboto", "category": "SANS_SERIF"}],
                "languages": [{"id": "en_Latn", "script": "Latn"}],
            }
        )

        assert isinstance(records.families[0], FamilyRecord)
        assert records.languages[0].script == "Latn"
