"""Digit selection: significant-figure and decimal-place budgets with half-up rounding.

The selector walks the positioned digits once, left to right. A digit is
kept while :func:`is_accepting` holds; the minimum-decimal-places floor wins
over both the significant-figure budget and the maximum-decimal-places
ceiling. When the budget is met the remaining input is inspected to decide
whether the last kept digit rounds up, and a round-up of a ``9`` carries
back through the digits already emitted.

All of this is string manipulation over ``'0'..'9'`` and ``'.'``; no value
is converted to a binary float.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .normalizer import DECIMAL_POINT
from .options import FormatOptions

__all__ = [
    "Selection",
    "effective_budget",
    "is_accepting",
    "should_round_up",
    "carry",
    "select_digits",
]

DIGITS = frozenset("0123456789")


@dataclass(slots=True)
class Selection:
    """Digits kept by :func:`select_digits` and the counters at scan end."""

    digits: List[str] = field(default_factory=list)
    budget: int = 0
    sig_figs: int = 0
    decimal_places: int = 0
    seen_decimal_point: bool = False

    def text(self) -> str:
        return "".join(self.digits)


def effective_budget(digits: Sequence[str], options: FormatOptions) -> int:
    """Significant-figure budget, widened to the integer part without symbols."""
    if options.use_symbols:
        return options.significant_figures
    return max(list(digits).index(DECIMAL_POINT), options.significant_figures)


def is_accepting(
    sig_figs: int,
    decimal_places: int,
    budget: int,
    min_decimal_places: int,
    max_decimal_places: Union[int, float],
) -> bool:
    return (
        sig_figs < budget and decimal_places < max_decimal_places
    ) or decimal_places < min_decimal_places


def should_round_up(digits: Sequence[str], start: int) -> bool:
    """Decide rounding from the first digit at or after ``start`` that is not a 5."""
    for char in digits[start:]:
        if char == DECIMAL_POINT or char == "5":
            continue
        return char in DIGITS and int(char) > 5
    return False


def carry(out: List[str]) -> None:
    """Propagate a +1 into the last digit of ``out``, in place.

    Trailing nines become zeros; if every digit was a nine a leading ``1``
    is inserted, so ``999`` becomes ``1000``.
    """
    index = len(out) - 1
    while index >= 0:
        char = out[index]
        if char not in DIGITS:
            index -= 1
            continue
        if char != "9":
            out[index] = str(int(char) + 1)
            return
        out[index] = "0"
        index -= 1
    out.insert(0, "1")


def select_digits(digits: Sequence[str], options: FormatOptions) -> Selection:
    budget = effective_budget(digits, options)
    point_index = list(digits).index(DECIMAL_POINT)
    selection = Selection(budget=budget)
    out = selection.digits

    for index, char in enumerate(digits):
        if not is_accepting(
            selection.sig_figs,
            selection.decimal_places,
            budget,
            options.min_decimal_places,
            options.max_decimal_places,
        ):
            # Keep the magnitude: dropped integer digits become zeros.
            out.extend("0" * max(0, point_index - index))
            break

        if char == DECIMAL_POINT:
            selection.seen_decimal_point = True
        else:
            if selection.seen_decimal_point:
                selection.decimal_places += 1
            if selection.sig_figs > 0 or char != "0":
                selection.sig_figs += 1

        round_up = (
            selection.sig_figs >= budget
            and selection.decimal_places >= options.min_decimal_places
            and char != DECIMAL_POINT
            and should_round_up(digits, index + 1)
        )
        out.append(char)
        if round_up:
            carry(out)

    return selection
