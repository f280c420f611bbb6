# utils/helpers.py

import math
from datetime import datetime
from functools import lru_cache

import pytz

from config import LANGUAGE, TZ
from status import build_evaluator


def now():
    return datetime.now(pytz.timezone(TZ))


@lru_cache(maxsize=None)
def get_evaluator(language=LANGUAGE):
    # catalogs are read-only, one evaluator per language is enough
    return build_evaluator(language)


def parse_number(text):
    """User input -> finite float, or None. Accepts both "," and "." as decimal mark."""
    try:
        value = float(text.strip().replace(",", "."))
    except (AttributeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def fmt(value):
    return f"{value:g}"
