"""
Seed Classification

A fill session is seeded with either a single scalar that is applied to every
control ("simple" seed) or an object that is queried per control by key
("structured" seed). The mode is decided once per session.
"""

import numbers
from datetime import date, time
from enum import Enum
from typing import Any, Optional


class SeedMode(Enum):
    """How a seed value feeds the controls of a form"""
    SIMPLE = "simple"
    STRUCTURED = "structured"


def is_simple_seed(seed: Any) -> bool:
    """True for numbers, booleans, strings, dates/times and enum members"""
    if seed is None:
        return False
    return isinstance(seed, (numbers.Number, str, date, time, Enum))


def classify_seed(seed: Any) -> SeedMode:
    """
    Classify a seed value.

    None is structured: every key lookup against it misses, so
    every control falls back to generated data.
    """
    return SeedMode.SIMPLE if is_simple_seed(seed) else SeedMode.STRUCTURED


def format_short_date(value: date, date_format: Optional[str] = None) -> str:
    """Format a date the way a US short date reads (1/5/2024) unless a pattern is given"""
    if date_format:
        return value.strftime(date_format)
    return f"{value.month}/{value.day}/{value.year}"


def enum_to_string(member: Enum) -> str:
    """Render an enum member as its underlying value (booleans as 0/1)"""
    value = member.value
    if isinstance(value, bool):
        return str(int(value))
    return str(value)


def coerce_to_string(value: Any, seed: Any, date_format: Optional[str] = None) -> str:
    """
    Turn a resolved value into the text that is sent to a control.

    The date and enum rules look at the session seed, not at the value
    itself. With a structured seed they never apply and looked-up dates or
    enums fall through to str().

    The final branch converts the value, not the seed. Converting the seed
    would type the repr of a structured seed into every looked-up field.
    """
    if isinstance(value, str) and not isinstance(value, Enum):
        return value
    if isinstance(seed, date):
        return format_short_date(seed, date_format)
    if isinstance(seed, Enum):
        return enum_to_string(seed)
    return str(value)
