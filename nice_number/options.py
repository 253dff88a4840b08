"""Formatting options for nice-number display strings."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

Threshold = Union[int, float, Decimal, str]


@dataclass(slots=True, frozen=True)
class FormatOptions:
    """Read-only configuration for a single format call."""

    omit_leading_zero: bool = False
    token_decimals: int = 18
    significant_figures: int = 4
    omit_trailing_zeroes: bool = False
    use_symbols: bool = True
    add_commas: bool = False
    minimum: Optional[Threshold] = None
    min_decimal_places: int = 0
    max_decimal_places: Union[int, float] = math.inf
    zero_result: Optional[str] = None

    def replace(self, **changes) -> "FormatOptions":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_OPTIONS = FormatOptions()
