# src/revrand/config.py
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import ConfigurationError


@dataclass(frozen=True)
class LCGParams:
    a: int
    c: int
    m: int
    # Known inverse of a mod m; computed by the engine when left as None.
    inv_a: Optional[int] = None

    @property
    def rand_max(self) -> int:
        return self.m - 1


# The classic a=9301, c=49297, m=233280 generator.
DEFAULT = LCGParams(9301, 49297, 233280)

PRESETS: Dict[str, LCGParams] = {
    "classic": DEFAULT,
    "park_miller": LCGParams(16807, 0, 0x7FFFFFFF, inv_a=1407677000),
    "msvcrt": LCGParams(214013, 2531011, 1 << 32),
    "numerical_recipes": LCGParams(1664525, 1013904223, 1 << 32),
}


def preset(name: str) -> LCGParams:
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigurationError(
            f"unknown preset {name!r} (choose from {', '.join(sorted(PRESETS))})"
        ) from None
