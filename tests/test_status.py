"""
Tests for the aquarium status evaluator.
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from parameters import RANGES, RangeCatalog
from recommendations import RECOMMENDATIONS, RecommendationCatalog
from status import (
    AlertEntry, Direction, Severity, StatusEvaluator, StatusResult, build_evaluator,
)
from types_map import MainType

EN = RECOMMENDATIONS["en"]


def sps():
    return {"id": "a1", "name": "Reef", "mainType": "marine", "subType": "sps"}


class TestTerminalCases:
    """Empty input and unknown sub-types."""

    @pytest.mark.parametrize("sub_type", list(RANGES) + ["unknownXYZ", None])
    def test_empty_parameters_is_neutral(self, evaluator, sub_type):
        result = evaluator.evaluate({"subType": sub_type}, {})

        assert result.severity is Severity.NEUTRAL
        assert result.summary_key == "status.noParams"
        assert result.alerts == ()
        assert result.recommendations == ()

    def test_none_parameters_is_neutral(self, evaluator):
        assert evaluator.evaluate(sps(), None).severity is Severity.NEUTRAL

    @pytest.mark.parametrize("params", [{"no3": 3}, {"kh": 100, "ca": 1}, {"whatever": 5}])
    def test_unknown_sub_type_has_undefined_ranges(self, evaluator, params):
        result = evaluator.evaluate({"mainType": "marine", "subType": "unknownXYZ"}, params)

        assert result.severity is Severity.UNDEFINED_RANGES
        assert result.summary_key == "status.undefinedRanges"
        assert result.recommendations == ()

    def test_missing_sub_type_has_undefined_ranges(self, evaluator):
        result = evaluator.evaluate({"mainType": "marine"}, {"kh": 8})

        assert result.severity is Severity.UNDEFINED_RANGES


class TestStable:
    """All evaluated parameters within range."""

    def test_sps_within_range(self, evaluator):
        params = {"no3": 3, "po4": 0.05, "kh": 8, "ca": 430, "mg": 1350, "temp": 26}

        result = evaluator.evaluate(sps(), params)

        assert result.severity is Severity.STABLE
        assert result.summary_key == "status.stable"
        assert result.recommendations == ()
        assert result.alerts == ()

    @pytest.mark.parametrize("sub_type", list(RANGES))
    def test_bounds_are_inclusive(self, evaluator, sub_type):
        table = RANGES[sub_type]
        at_min = {key: low for key, (low, high) in table.items()}
        at_max = {key: high for key, (low, high) in table.items()}

        assert evaluator.evaluate({"subType": sub_type}, at_min).severity is Severity.STABLE
        assert evaluator.evaluate({"subType": sub_type}, at_max).severity is Severity.STABLE

    @pytest.mark.parametrize("sub_type", list(RANGES))
    def test_midpoints_are_stable(self, evaluator, sub_type):
        params = {key: (low + high) / 2 for key, (low, high) in RANGES[sub_type].items()}

        result = evaluator.evaluate({"subType": sub_type}, params)

        assert result.severity is Severity.STABLE
        assert result.recommendations == ()

    def test_out_of_catalog_parameter_is_ignored(self, evaluator):
        # iron has no range for SPS tanks
        result = evaluator.evaluate(sps(), {"iron": 99, "kh": 8})

        assert result.severity is Severity.STABLE


class TestAlerts:
    """Out-of-range parameters, advice and ordering."""

    def test_sps_high_nitrate(self, evaluator):
        result = evaluator.evaluate(sps(), {"no3": 12})

        assert result.severity is Severity.ALERT
        assert result.summary_key == "status.alert"
        assert result.alerts == (
            AlertEntry("no3", Direction.HIGH, "NO₃", 12, 1, 5),
        )
        assert result.recommendations == (EN["no3"]["high"],)

    def test_community_high_ph_uses_freshwater_advice(self, evaluator):
        aquarium = {"mainType": "freshwater", "subType": "community"}

        result = evaluator.evaluate(aquarium, {"ph": 9.0})

        assert result.severity is Severity.ALERT
        assert result.alerts[0].parameter_key == "ph"
        assert result.alerts[0].direction is Direction.HIGH
        assert result.recommendations == (EN["freshwater_ph"]["high"],)
        assert EN["ph"]["high"] not in result.recommendations

    def test_mixed_reef_two_lows_in_input_order(self, evaluator):
        aquarium = {"mainType": "marine", "subType": "mixedReef"}

        result = evaluator.evaluate(aquarium, {"kh": 5, "ca": 300})

        assert [(a.parameter_key, a.direction) for a in result.alerts] == [
            ("kh", Direction.LOW),
            ("ca", Direction.LOW),
        ]
        assert result.recommendations == (EN["kh"]["low"], EN["ca"]["low"])

    def test_input_order_drives_output_order(self, evaluator):
        aquarium = {"mainType": "marine", "subType": "mixedReef"}

        result = evaluator.evaluate(aquarium, {"ca": 300, "kh": 5})

        assert result.recommendations == (EN["ca"]["low"], EN["kh"]["low"])

    def test_just_outside_bounds_alerts(self, evaluator):
        low = evaluator.evaluate(sps(), {"kh": 6.99})
        high = evaluator.evaluate(sps(), {"kh": 9.01})

        assert low.alerts[0].direction is Direction.LOW
        assert high.alerts[0].direction is Direction.HIGH

    def test_duplicate_advice_collapses(self):
        ranges = RangeCatalog({"tank": {"no3": (0, 10), "nitrate": (0, 10)}})
        evaluator = StatusEvaluator(ranges, RecommendationCatalog.for_language("en"))
        aquarium = {"mainType": "freshwater", "subType": "tank"}

        result = evaluator.evaluate(aquarium, {"no3": 50, "nitrate": 60})

        assert len(result.alerts) == 2
        assert result.recommendations == (EN["nitrate_fw"]["high"],)

    def test_missing_advice_still_alerts(self):
        evaluator = StatusEvaluator(
            RangeCatalog({"tank": {"kh": (7, 9)}}),
            RecommendationCatalog({}, language="en"),
        )

        result = evaluator.evaluate({"mainType": "marine", "subType": "tank"}, {"kh": 1})

        assert result.severity is Severity.ALERT
        assert len(result.alerts) == 1
        assert result.recommendations == ()

    def test_one_alert_among_stable_values(self, evaluator):
        result = evaluator.evaluate(sps(), {"kh": 8, "ca": 430, "mg": 1000})

        assert [a.parameter_key for a in result.alerts] == ["mg"]


class TestMalformedValues:
    """Non-finite or non-numeric values are skipped, the rest is evaluated."""

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, "8", None, True])
    def test_malformed_value_is_skipped(self, evaluator, bad, caplog):
        result = evaluator.evaluate(sps(), {"kh": bad, "no3": 12})

        assert [a.parameter_key for a in result.alerts] == ["no3"]
        assert "Skipping malformed value" in caplog.text

    def test_only_malformed_values_is_stable(self, evaluator):
        result = evaluator.evaluate(sps(), {"kh": math.nan})

        assert result.severity is Severity.STABLE

    @pytest.mark.parametrize("value", [Decimal("12"), Decimal("12.50"), Fraction(25, 2)])
    def test_decimal_and_fraction_values_are_evaluated(self, evaluator, value, caplog):
        result = evaluator.evaluate(sps(), {"no3": value})

        assert [(a.parameter_key, a.direction) for a in result.alerts] == [("no3", Direction.HIGH)]
        assert "Skipping malformed value" not in caplog.text

    def test_decimal_within_range_is_stable(self, evaluator):
        assert evaluator.evaluate(sps(), {"kh": Decimal("8.2")}).severity is Severity.STABLE

    @pytest.mark.parametrize("bad", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"), 3 + 0j])
    def test_non_finite_decimal_and_complex_are_skipped(self, evaluator, bad, caplog):
        result = evaluator.evaluate(sps(), {"kh": bad, "no3": 12})

        assert [a.parameter_key for a in result.alerts] == ["no3"]
        assert "Skipping malformed value" in caplog.text


class TestResultShape:
    """Idempotence and serialisation."""

    def test_idempotent(self, evaluator):
        params = {"kh": 5, "ca": 300, "no3": 12}

        first = evaluator.evaluate(sps(), params)
        second = evaluator.evaluate(sps(), params)

        assert first == second

    def test_input_not_mutated(self, evaluator):
        params = {"kh": 5, "ca": 300}
        evaluator.evaluate(sps(), params)

        assert params == {"kh": 5, "ca": 300}

    def test_main_type_is_reported(self, evaluator):
        result = evaluator.evaluate({"subType": "goldfish"}, {"ph": 7})

        assert result.main_type is MainType.FRESHWATER

    def test_to_dict(self, evaluator):
        result = evaluator.evaluate(sps(), {"no3": 12})

        assert result.to_dict() == {
            "severity": "alert",
            "summaryKey": "status.alert",
            "mainType": "marine",
            "alerts": [{
                "parameterKey": "no3",
                "direction": "high",
                "displayName": "NO₃",
                "value": 12,
                "min": 1,
                "max": 5,
            }],
            "recommendations": [EN["no3"]["high"]],
        }

    def test_result_is_frozen(self):
        result = StatusResult(Severity.STABLE)

        with pytest.raises(AttributeError):
            result.severity = Severity.ALERT

    def test_build_evaluator_language(self):
        result = build_evaluator("es").evaluate(sps(), {"no3": 12})

        assert result.recommendations == (RECOMMENDATIONS["es"]["no3"]["high"],)
