# status.py
# Aquarium status: compares the latest value of every parameter with the
# range table of the aquarium's sub-type and collects advice.
import logging
import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Mapping, Optional, Tuple

from parameters import RangeCatalog, RangeEntry
from recommendations import RecommendationCatalog
from types_map import MainType, classify_main_type, record_field

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    LOW = "low"
    HIGH = "high"


class Severity(str, Enum):
    NEUTRAL = "neutral"
    UNDEFINED_RANGES = "undefinedRanges"
    STABLE = "stable"
    ALERT = "alert"


# message ids, rendered by messages.render_status
SUMMARY_KEYS = {
    Severity.NEUTRAL: "status.noParams",
    Severity.UNDEFINED_RANGES: "status.undefinedRanges",
    Severity.STABLE: "status.stable",
    Severity.ALERT: "status.alert",
}


@dataclass(frozen=True)
class AlertEntry:
    parameter_key: str
    direction: Direction
    display_name: str
    value: float
    min: float
    max: float

    def to_dict(self) -> dict:
        return {
            "parameterKey": self.parameter_key,
            "direction": self.direction.value,
            "displayName": self.display_name,
            "value": self.value,
            "min": self.min,
            "max": self.max,
        }


@dataclass(frozen=True)
class StatusResult:
    severity: Severity
    main_type: Optional[MainType] = None
    alerts: Tuple[AlertEntry, ...] = field(default_factory=tuple)
    recommendations: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def summary_key(self) -> str:
        return SUMMARY_KEYS[self.severity]

    def to_dict(self) -> dict:
        return {
            "severity": self.severity.value,
            "summaryKey": self.summary_key,
            "mainType": self.main_type.value if self.main_type else None,
            "alerts": [a.to_dict() for a in self.alerts],
            "recommendations": list(self.recommendations),
        }


def is_valid_value(value: Any) -> bool:
    """Finite ints, floats, fractions and decimals. Bools and complex numbers are not readings."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if not isinstance(value, Real):
        return False
    return math.isfinite(value)


def compare(value: float, entry: RangeEntry) -> Optional[Direction]:
    # bounds are inclusive
    if value < entry.min:
        return Direction.LOW
    if value > entry.max:
        return Direction.HIGH
    return None


class StatusEvaluator:
    """Stateless evaluator; catalogs are injected and never mutated."""

    def __init__(self, ranges: RangeCatalog, recommendations: RecommendationCatalog):
        self.ranges = ranges
        self.recommendations = recommendations

    def evaluate(self, aquarium: Any, latest: Optional[Mapping[str, Any]]) -> StatusResult:
        main_type = classify_main_type(aquarium)
        if not latest:
            return StatusResult(Severity.NEUTRAL, main_type)

        table = self.ranges.get_table(record_field(aquarium, "subType"))
        if table is None:
            return StatusResult(Severity.UNDEFINED_RANGES, main_type)

        alerts = []
        advice = {}  # dict keeps first-insertion order
        for key, value in latest.items():
            key = str(getattr(key, "value", key))
            entry = table.get(key)
            if entry is None:
                continue
            if not is_valid_value(value):
                logger.warning("Skipping malformed value %r for %s", value, key)
                continue

            direction = compare(value, entry)
            if direction is None:
                continue
            alerts.append(AlertEntry(key, direction, entry.display_name, value, entry.min, entry.max))
            text = self.recommendations.get_advice(key, direction, main_type)
            if text:
                advice.setdefault(text, None)

        if not alerts:
            return StatusResult(Severity.STABLE, main_type)
        return StatusResult(Severity.ALERT, main_type, tuple(alerts), tuple(advice))


def build_evaluator(language: Optional[str] = None) -> StatusEvaluator:
    return StatusEvaluator(RangeCatalog(), RecommendationCatalog.for_language(language))
