"""
Tests for rendering structured status results into text.
"""

from messages import MESSAGES, language_of, param_name, render_alert, render_status, t
from status import AlertEntry, Direction, Severity, StatusResult


def alert_result():
    return StatusResult(
        Severity.ALERT,
        alerts=(
            AlertEntry("kh", Direction.LOW, "KH", 5, 8, 12),
            AlertEntry("ca", Direction.LOW, "Ca", 300, 400, 450),
        ),
    )


class TestRenderStatus:
    """Summary text per severity and language."""

    def test_terminal_summaries(self):
        assert render_status(StatusResult(Severity.NEUTRAL), "en") == "Log a parameter to see the status"
        assert render_status(StatusResult(Severity.UNDEFINED_RANGES), "en") == \
            "Ranges not defined for this aquarium type"
        assert render_status(StatusResult(Severity.STABLE), "es") == "Parámetros estables"

    def test_alert_lists_every_parameter(self):
        assert render_status(alert_result(), "en") == "Alert: Alkalinity (KH) low, Calcium (Ca) low"
        assert render_status(alert_result(), "es") == "Alerta: Alcalinidad (KH) bajo, Calcio (Ca) bajo"

    def test_unknown_parameter_uses_display_name(self):
        alert = AlertEntry("k", Direction.HIGH, "K", 500, 380, 420)

        assert render_alert(alert, "en") == "K high"


class TestTranslate:
    """t() fallbacks."""

    def test_unknown_language_uses_english(self):
        assert language_of("de") == "en"
        assert t("status.stable", "de") == "Stable parameters"

    def test_unknown_key_returns_key(self):
        assert t("no.such.message", "en") == "no.such.message"

    def test_param_name_fallbacks(self):
        assert param_name("no3", "en") == "Nitrate (NO₃)"
        assert param_name("strontium", "en") == "strontium"
        assert param_name("strontium", "en", default="Sr") == "Sr"

    def test_languages_share_keys(self):
        assert set(MESSAGES["es"]) == set(MESSAGES["en"])
