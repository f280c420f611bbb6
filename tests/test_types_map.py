"""
Tests for main type classification of aquarium records.
"""

from types import SimpleNamespace

import pytest

from types_map import MainType, classify_main_type, parse_type_word, record_field


class TestClassifyMainType:
    """Precedence: mainType, then legacy type, then sub-type keywords."""

    def test_explicit_main_type_wins(self):
        assert classify_main_type({"mainType": "marine", "subType": "plantedHigh"}) is MainType.MARINE

    def test_explicit_freshwater(self):
        assert classify_main_type({"mainType": "freshwater", "subType": "sps"}) is MainType.FRESHWATER

    @pytest.mark.parametrize("sub_type", [
        "goldfish", "plantedHigh", "plantedLow", "community", "americanCichlids", "africanCichlids",
        "freshCustom", "aguaDulce",
    ])
    def test_sub_type_keywords(self, sub_type):
        assert classify_main_type({"subType": sub_type}) is MainType.FRESHWATER

    @pytest.mark.parametrize("sub_type", ["sps", "lps", "mixedReef", "fishOnly", "softCorals"])
    def test_marine_sub_types(self, sub_type, caplog):
        assert classify_main_type({"subType": sub_type}) is MainType.MARINE
        assert caplog.text == ""

    @pytest.mark.parametrize("legacy", ["fresh", "пресный", "Agua Dulce", "freshwater"])
    def test_legacy_type_field(self, legacy):
        assert classify_main_type({"type": legacy, "subType": "sps"}) is MainType.FRESHWATER

    def test_legacy_marine_type(self):
        assert classify_main_type({"type": "морской", "subType": "goldfish"}) is MainType.MARINE

    def test_main_type_beats_legacy_type(self):
        assert classify_main_type({"mainType": "marine", "type": "fresh"}) is MainType.MARINE

    def test_unrecognised_main_type_falls_through(self, caplog):
        result = classify_main_type({"mainType": "brackish", "subType": "goldfish"})

        assert result is MainType.FRESHWATER
        assert "Unrecognised mainType" in caplog.text

    def test_default_is_marine_and_logged(self, caplog):
        result = classify_main_type({"id": "x1", "subType": "mystery"})

        assert result is MainType.MARINE
        assert "defaulting to marine" in caplog.text

    @pytest.mark.parametrize("record", [{}, None, {"mainType": "", "type": None}])
    def test_empty_records_default_to_marine(self, record):
        assert classify_main_type(record) is MainType.MARINE

    def test_orm_like_object(self):
        row = SimpleNamespace(id=1, main_type=None, type=None, sub_type="plantedMid")

        assert classify_main_type(row) is MainType.FRESHWATER

    def test_enum_value_in_record(self):
        assert classify_main_type({"mainType": MainType.FRESHWATER}) is MainType.FRESHWATER


class TestHelpers:
    """record_field / parse_type_word."""

    def test_record_field_snake_case_fallback(self):
        assert record_field({"sub_type": "sps"}, "subType") == "sps"

    def test_record_field_blank_is_none(self):
        assert record_field({"subType": "  "}, "subType") is None

    def test_parse_type_word(self):
        assert parse_type_word("Marino") is MainType.MARINE
        assert parse_type_word("saltwater reef") is MainType.MARINE
        assert parse_type_word("") is None
        assert parse_type_word("pond") is None
