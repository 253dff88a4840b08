"""Cosmetic post-processing of selected digits into the final display string."""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from .logging import get_logger
from .normalizer import DECIMAL_POINT, to_text
from .options import FormatOptions, Threshold
from .selector import Selection

__all__ = [
    "SYMBOLS",
    "apply_leading_zero",
    "pad_min_decimals",
    "pad_trailing_zeroes",
    "minimum_text",
    "clamp_minimum",
    "to_symbol_notation",
    "add_commas",
    "present",
]

logger = get_logger(__name__)

# Digit-count thresholds, largest first.
SYMBOLS = ((9, "B"), (6, "M"), (3, "k"))

COMMA_MIN_DIGITS = 4


def apply_leading_zero(digits: List[str], omit_leading_zero: bool) -> None:
    if digits and digits[0] == DECIMAL_POINT and not omit_leading_zero:
        digits.insert(0, "0")


def pad_min_decimals(digits: List[str], selection: Selection, min_decimal_places: int) -> None:
    missing = min_decimal_places - selection.decimal_places
    if missing <= 0:
        return
    if not selection.seen_decimal_point and (not digits or digits[-1] != DECIMAL_POINT):
        digits.append(DECIMAL_POINT)
    digits.extend("0" * missing)


def pad_trailing_zeroes(result: str, selection: Selection, options: FormatOptions) -> str:
    """Fill the remaining significant-figure budget, capped by the decimal ceiling."""
    if options.omit_trailing_zeroes or DECIMAL_POINT not in result:
        return result
    needed = min(
        options.max_decimal_places - selection.decimal_places,
        selection.budget - selection.sig_figs,
    )
    if needed > 0:
        result += "0" * int(needed)
    return result


def minimum_text(minimum: Threshold, omit_leading_zero: bool) -> str:
    """Display form of the minimum threshold, e.g. ``0.01`` or ``.01``."""
    text = to_text(minimum)
    if omit_leading_zero and Decimal(text) < 1 and DECIMAL_POINT in text:
        text = DECIMAL_POINT + text.split(DECIMAL_POINT)[1]
    return text


def clamp_minimum(result: str, is_negative: bool, options: FormatOptions) -> Optional[str]:
    """Return the clamped display string, or None when the clamp does not apply.

    A result that rounded all the way to zero is cut to the significant-figure
    width instead of being shown as a bare zero. A nonzero result below the
    minimum becomes ``<minimum``.
    """
    if not options.minimum:
        return None
    try:
        value = Decimal(result)
        if value == 0:
            width = options.significant_figures + (1 if options.omit_leading_zero else 2)
            clipped = result[:width]
            return "-" + clipped if is_negative else clipped
        threshold = Decimal(to_text(options.minimum))
        if threshold > value:
            return "<" + minimum_text(options.minimum, options.omit_leading_zero)
    except (ArithmeticError, TypeError, ValueError) as exc:
        logger.debug(
            "minimum_comparison_skipped",
            minimum=repr(options.minimum),
            result=result,
            error=str(exc),
        )
    return None


def to_symbol_notation(text: str) -> str:
    """Abbreviate a plain integer with a k/M/B suffix, e.g. ``12400000`` -> ``12.4M``."""
    if DECIMAL_POINT in text or len(text) <= 3:
        return text
    for size, symbol in SYMBOLS:
        if len(text) <= size:
            continue
        whole, fraction = text[:-size], text[-size:].rstrip("0")
        if fraction:
            return f"{whole}{DECIMAL_POINT}{fraction}{symbol}"
        return f"{whole}{symbol}"
    return text


def add_commas(text: str) -> str:
    """Group the integer part in threes, e.g. ``16234.01`` -> ``16,234.01``."""
    whole, point, fraction = text.partition(DECIMAL_POINT)
    if len(whole) < COMMA_MIN_DIGITS:
        return text
    groups = []
    while len(whole) > 3:
        groups.insert(0, whole[-3:])
        whole = whole[:-3]
    groups.insert(0, whole)
    return ",".join(groups) + point + fraction


def present(selection: Selection, is_negative: bool, options: FormatOptions) -> str:
    digits = list(selection.digits)
    apply_leading_zero(digits, options.omit_leading_zero)
    pad_min_decimals(digits, selection, options.min_decimal_places)

    result = "".join(digits)
    if options.omit_leading_zero and result.startswith("0" + DECIMAL_POINT):
        result = result[1:]
    result = pad_trailing_zeroes(result, selection, options)
    if result.endswith(DECIMAL_POINT) and len(result) > 1:
        result = result[:-1]

    clamped = clamp_minimum(result, is_negative, options)
    if clamped is not None:
        return clamped

    if options.use_symbols:
        result = to_symbol_notation(result)
    elif options.add_commas:
        result = add_commas(result)
    return "-" + result if is_negative else result
