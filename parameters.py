# parameters.py
# Reference ranges per aquarium sub-type. Keys of RANGES must match the
# sub-type keys offered when an aquarium is created (SUB_TYPES).
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class ParameterKey(str, Enum):
    KH = "kh"
    CA = "ca"
    MG = "mg"
    NO3 = "no3"
    PO4 = "po4"
    SALINITY = "salinity"
    TEMP = "temp"
    PH = "ph"
    GH = "gh"
    AMMONIA = "ammonia"
    NITRITE = "nitrite"
    NITRATE = "nitrate"
    IRON = "iron"
    CO2 = "co2"
    TDS = "tds"


KeyLike = Union[ParameterKey, str]

UNITS = {
    "kh": "dKH",
    "ca": "ppm",
    "mg": "ppm",
    "no3": "ppm",
    "po4": "ppm",
    "salinity": "ppt",
    "temp": "°C",
    "ph": "",
    "gh": "dGH",
    "ammonia": "ppm",
    "nitrite": "ppm",
    "nitrate": "ppm",
    "iron": "ppm",
    "co2": "ppm",
    "tds": "ppm",
}

# Fallback names, used when the localization layer has no name for a key
DISPLAY_NAMES = {
    "kh": "KH",
    "ca": "Ca",
    "mg": "Mg",
    "no3": "NO₃",
    "po4": "PO₄",
    "salinity": "Salinity",
    "temp": "Temp",
    "ph": "pH",
    "gh": "GH",
    "ammonia": "NH₄",
    "nitrite": "NO₂",
    "nitrate": "NO₃",
    "iron": "Fe",
    "co2": "CO₂",
    "tds": "TDS",
}

# Sub-types in the order the creation form offers them
SUB_TYPES = {
    "marine": ("fishOnly", "softCorals", "lps", "sps", "mixedReef"),
    "freshwater": (
        "community", "goldfish", "americanCichlids", "africanCichlids",
        "plantedLow", "plantedMid", "plantedHigh",
    ),
}


def key_of(key: KeyLike) -> str:
    # enum members (ParameterKey, MainType) and plain strings alike
    return str(getattr(key, "value", key))


@dataclass(frozen=True)
class RangeEntry:
    key: str
    min: float
    max: float
    display_name: str = ""
    unit: str = ""

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"{self.key}: min {self.min} is greater than max {self.max}")

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


# Recommended norms: sub-type -> parameter -> (min, max)
RANGES = {
    # --- marine ---
    "fishOnly": {
        "kh": (7, 12),
        "ca": (380, 450),
        "mg": (1250, 1400),
        "no3": (1, 20),
        "po4": (0.02, 0.2),
        "temp": (24, 27),
        "salinity": (34, 36),
        "ph": (8.0, 8.4),
    },
    "softCorals": {
        "kh": (7, 11),
        "ca": (400, 450),
        "mg": (1250, 1410),
        "no3": (2, 15),
        "po4": (0.06, 0.15),
        "temp": (24, 27),
        "salinity": (34, 36),
        "ph": (8.0, 8.4),
    },
    "lps": {
        "kh": (7, 12),
        "ca": (400, 450),
        "mg": (1280, 1410),
        "no3": (2, 10),
        "po4": (0.04, 0.12),
        "temp": (25, 27),
        "salinity": (34, 36),
        "ph": (8.0, 8.4),
    },
    "sps": {
        "kh": (7, 9),
        "ca": (420, 460),
        "mg": (1300, 1410),
        "no3": (1, 5),
        "po4": (0.01, 0.1),
        "temp": (25, 27),
        "salinity": (34, 36),
        "ph": (8.0, 8.4),
    },
    "mixedReef": {
        "kh": (8, 12),
        "ca": (400, 450),
        "mg": (1280, 1410),
        "no3": (2, 10),
        "po4": (0.02, 0.1),
        "temp": (25, 27),
        "salinity": (34, 36),
        "ph": (8.0, 8.4),
    },
    # --- freshwater ---
    "community": {
        "ph": (6.5, 7.8),
        "gh": (4, 12),
        "kh": (3, 8),
        "ammonia": (0, 0.02),
        "nitrite": (0, 0.1),
        "no3": (0, 40),
        "po4": (0, 2),
        "temp": (22, 26),
    },
    "plantedLow": {
        "ph": (6.4, 7.2),
        "gh": (3, 10),
        "kh": (2, 6),
        "ammonia": (0, 0.02),
        "nitrite": (0, 0.1),
        "no3": (5, 20),
        "po4": (0.3, 1),
        "iron": (0.05, 0.2),
        "temp": (22, 26),
    },
    "plantedMid": {
        "ph": (6.2, 7.0),
        "gh": (3, 9),
        "kh": (2, 5),
        "ammonia": (0, 0.02),
        "nitrite": (0, 0.1),
        "no3": (5, 25),
        "po4": (0.5, 1.5),
        "iron": (0.05, 0.3),
        "temp": (22, 26),
    },
    "plantedHigh": {
        "ph": (6.0, 6.8),
        "gh": (3, 8),
        "kh": (1, 4),
        "ammonia": (0, 0.02),
        "nitrite": (0, 0.1),
        "no3": (10, 25),
        "po4": (1, 2),
        "iron": (0.05, 0.5),
        "co2": (20, 30),
        "temp": (22, 25),
    },
    "goldfish": {
        "ph": (6.8, 7.6),
        "gh": (4, 12),
        "kh": (4, 8),
        "ammonia": (0, 0.02),
        "nitrite": (0, 0.1),
        "no3": (10, 40),
        "po4": (0, 2),
        "iron": (0, 0.1),  # iron is not recommended
        "temp": (18, 23),
    },
    "americanCichlids": {
        "ph": (6.4, 7.4),
        "gh": (3, 12),
        "kh": (3, 8),
        "ammonia": (0, 0.02),
        "nitrite": (0, 0.1),
        "no3": (5, 30),
        "po4": (0, 1),
        "iron": (0, 0.1),  # only with plants
        "temp": (24, 28),
    },
    "africanCichlids": {
        # Malawi, Tanganyika, Victoria
        "ph": (7.8, 8.6),
        "gh": (8, 20),
        "kh": (7, 12),
        "ammonia": (0, 0.02),
        "nitrite": (0, 0.1),
        "no3": (5, 40),
        "po4": (0, 2),
        "iron": (0, 0.05),
        "temp": (24, 27),
    },
}


def build_table(norms: Mapping[str, tuple]) -> Mapping[str, RangeEntry]:
    table = {
        key: RangeEntry(
            key=key,
            min=low,
            max=high,
            display_name=DISPLAY_NAMES.get(key, key),
            unit=UNITS.get(key, ""),
        )
        for key, (low, high) in norms.items()
    }
    return MappingProxyType(table)


class RangeCatalog:
    """Read-only lookup of (sub-type, parameter) -> RangeEntry.

    Built once and shared; lookups never raise, a missing sub-type or
    parameter comes back as None.
    """

    def __init__(self, ranges: Mapping[str, Mapping[str, tuple]] = RANGES,
                 sub_types: Mapping[str, tuple] = SUB_TYPES):
        self._tables = MappingProxyType(
            {sub_type: build_table(norms) for sub_type, norms in ranges.items()}
        )
        self._sub_types = MappingProxyType(dict(sub_types))

    def get_table(self, sub_type: Optional[str]) -> Optional[Mapping[str, RangeEntry]]:
        if not sub_type:
            return None
        return self._tables.get(sub_type)

    def get_range(self, sub_type: Optional[str], key: KeyLike) -> Optional[RangeEntry]:
        table = self.get_table(sub_type)
        if table is None:
            return None
        return table.get(key_of(key))

    def sub_types_for(self, main_type: str) -> tuple:
        return self._sub_types.get(key_of(main_type), ())

    def __contains__(self, sub_type) -> bool:
        return sub_type in self._tables
