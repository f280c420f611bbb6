"""
Tests for the recommendation catalog and freshwater overrides.
"""

import pytest

from recommendations import FRESHWATER_OVERRIDES, RECOMMENDATIONS, RecommendationCatalog
from parameters import RANGES
from status import Direction
from types_map import MainType


class TestOverrides:
    """The freshwater override table."""

    @pytest.mark.parametrize("language", list(RECOMMENDATIONS))
    def test_every_override_target_exists(self, language):
        texts = RECOMMENDATIONS[language]
        for base, target in FRESHWATER_OVERRIDES.items():
            assert texts[target]["low"], (language, target)
            assert texts[target]["high"], (language, target)

    @pytest.mark.parametrize("language", list(RECOMMENDATIONS))
    def test_every_ranged_parameter_has_advice(self, language):
        catalog = RecommendationCatalog.for_language(language)
        for table in RANGES.values():
            for key in table:
                for direction in Direction:
                    for main_type in MainType:
                        assert catalog.get_advice(key, direction, main_type), (key, direction, main_type)

    def test_languages_share_keys(self):
        assert set(RECOMMENDATIONS["es"]) == set(RECOMMENDATIONS["en"])


class TestLookup:
    """get_advice / resolve_key."""

    def test_marine_uses_base_key(self, advice_en):
        assert advice_en.get_advice("kh", "low", "marine") == RECOMMENDATIONS["en"]["kh"]["low"]
        assert advice_en.resolve_key("ph", Direction.HIGH, MainType.MARINE) == "ph"

    @pytest.mark.parametrize("key,expected", [
        ("kh", "freshwater_kh"),
        ("ph", "freshwater_ph"),
        ("no3", "nitrate_fw"),
        ("po4", "phosphate_fw"),
        ("temp", "temp_fw"),
        ("ammonia", "ammonia_fw"),
    ])
    def test_freshwater_uses_override(self, advice_en, key, expected):
        assert advice_en.resolve_key(key, "high", MainType.FRESHWATER) == expected

    def test_freshwater_falls_back_to_base_key(self, advice_en):
        # gh has no freshwater variant
        assert advice_en.resolve_key("gh", "low", "freshwater") == "gh"

    def test_override_without_text_falls_back(self):
        catalog = RecommendationCatalog({"kh": {"low": "base"}}, language="en")

        assert catalog.get_advice("kh", "low", "freshwater") == "base"

    def test_unknown_key_is_none(self, advice_en):
        assert advice_en.get_advice("unobtainium", "high", "marine") is None
        assert advice_en.resolve_key("unobtainium", "high", "marine") is None

    def test_custom_override_table(self):
        catalog = RecommendationCatalog(
            {"mg": {"low": "marine mg"}, "mg_fw": {"low": "fresh mg"}},
            overrides={"mg": "mg_fw"},
        )

        assert catalog.get_advice("mg", "low", "freshwater") == "fresh mg"
        assert catalog.get_advice("mg", "low", "marine") == "marine mg"

    def test_unknown_language_falls_back_to_english(self, caplog):
        catalog = RecommendationCatalog.for_language("fr")

        assert catalog.language == "en"
        assert catalog.get_advice("kh", "low", "marine") == RECOMMENDATIONS["en"]["kh"]["low"]
        assert "No advice texts" in caplog.text

    def test_spanish(self):
        catalog = RecommendationCatalog.for_language("ES")

        assert catalog.get_advice("ph", "high", "freshwater") == RECOMMENDATIONS["es"]["freshwater_ph"]["high"]
