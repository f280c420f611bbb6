# types_map.py
# Main type detection for aquarium records of every shape the app has stored
# over time: explicit mainType, legacy free-text type, or only a subType.
import logging
from enum import Enum
from typing import Any, Optional

from parameters import SUB_TYPES

logger = logging.getLogger(__name__)


class MainType(str, Enum):
    MARINE = "marine"
    FRESHWATER = "freshwater"


# Free-text type words -> main type
TYPE_MAP = {
    "marine": MainType.MARINE,
    "marino": MainType.MARINE,
    "морской": MainType.MARINE,
    "saltwater": MainType.MARINE,
    "reef": MainType.MARINE,
    "freshwater": MainType.FRESHWATER,
    "fresh": MainType.FRESHWATER,
    "dulce": MainType.FRESHWATER,
    "agua dulce": MainType.FRESHWATER,
    "пресный": MainType.FRESHWATER,
}

FRESHWATER_WORDS = ("fresh", "dulce")
MARINE_WORDS = ("marin", "salt", "reef")

# Sub-type substrings that indicate a freshwater tank
FRESHWATER_SUBTYPE_WORDS = ("fresh", "dulce", "planted", "community", "goldfish", "cichlid")
MARINE_SUB_TYPES = {s.lower() for s in SUB_TYPES["marine"]}

# camelCase record field -> snake_case attribute on ORM rows
_ATTRS = {"mainType": "main_type", "subType": "sub_type", "type": "type"}


def record_field(record: Any, name: str) -> Optional[str]:
    """Read a field from a dict-shaped record or an ORM row."""
    if record is None:
        return None
    if isinstance(record, dict):
        value = record.get(name)
        if value is None:
            value = record.get(_ATTRS.get(name, name))
    else:
        value = getattr(record, _ATTRS.get(name, name), None)
        if value is None:
            value = getattr(record, name, None)
    if value is None:
        return None
    value = str(getattr(value, "value", value)).strip()
    return value or None


def parse_type_word(raw: Optional[str]) -> Optional[MainType]:
    if not raw:
        return None
    word = raw.strip().lower()
    if word in TYPE_MAP:
        return TYPE_MAP[word]
    if any(w in word for w in FRESHWATER_WORDS):
        return MainType.FRESHWATER
    if any(w in word for w in MARINE_WORDS):
        return MainType.MARINE
    return None


def classify_main_type(aquarium: Any) -> MainType:
    """Return the canonical main type of an aquarium record.

    An explicit mainType wins, then the legacy type field, then keyword
    matching on the sub-type. Anything left over is treated as marine.
    """
    for field in ("mainType", "type"):
        raw = record_field(aquarium, field)
        main_type = parse_type_word(raw)
        if main_type is not None:
            return main_type
        if raw:
            logger.warning("Unrecognised %s %r, falling back", field, raw)

    sub_type = (record_field(aquarium, "subType") or "").lower()
    if any(w in sub_type for w in FRESHWATER_SUBTYPE_WORDS):
        return MainType.FRESHWATER
    if sub_type in MARINE_SUB_TYPES:
        return MainType.MARINE

    logger.warning("Could not classify aquarium %r (subType=%r), defaulting to marine",
                   record_field(aquarium, "id"), sub_type or None)
    return MainType.MARINE
