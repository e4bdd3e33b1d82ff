from __future__ import annotations

import math
import sys
from dataclasses import dataclass

# Largest integer a double can hold; integers beyond it become infinities.
MAX_INT = int(sys.float_info.max)


@dataclass(frozen=True, slots=True)
class Number:
    value: int | float

    def __post_init__(self):
        object.__setattr__(self, "value", clamp(self.value))

    def __str__(self) -> str:
        return format_number(self.value)


def clamp(value: int | float) -> int | float:
    """Keep integers within double range, as doubles overflow to +/-inf."""
    if isinstance(value, int) and abs(value) > MAX_INT:
        return math.inf if value > 0 else -math.inf
    return value


def normalize(value: int | float) -> int | float:
    """Collapse integral floats (e.g. the result of 6 / 2) back to int."""
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def format_number(value: int | float) -> str:
    return str(normalize(clamp(value)))
