"""Turn raw quantities into a signed, decimal-point-positioned digit list."""

from __future__ import annotations

import operator
from decimal import Decimal
from typing import Any, List, Tuple

from .logging import get_logger
from .options import FormatOptions

__all__ = ["to_text", "is_zero", "zero_text", "position_digits"]

logger = get_logger(__name__)

DECIMAL_POINT = "."


def to_text(value: Any) -> str:
    """Render ``value`` as plain fixed-point text, never in exponent form."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # repr() is the shortest round-tripping form; Decimal spells it out.
        return format(Decimal(repr(value)), "f")
    if hasattr(value, "__index__"):
        return str(operator.index(value))
    if isinstance(value, Decimal):
        return format(value, "f")
    try:
        return format(value, ".0f")
    except (TypeError, ValueError) as exc:
        logger.debug(
            "fixed_point_conversion_failed",
            value_type=type(value).__name__,
            error=str(exc),
        )
        return str(value)


def is_zero(text: str) -> bool:
    """Return True when ``text`` parses to an exact zero."""
    try:
        return Decimal(text.strip()) == 0
    except (ArithmeticError, ValueError) as exc:
        logger.debug("zero_check_failed", text=text, error=str(exc))
        return False


def zero_text(options: FormatOptions) -> str:
    """Display string used when the input is exactly zero."""
    if options.zero_result:
        return options.zero_result
    if not options.min_decimal_places:
        return "0"
    prefix = DECIMAL_POINT if options.omit_leading_zero else "0" + DECIMAL_POINT
    return prefix + "0" * options.min_decimal_places


def position_digits(text: str, token_decimals: int) -> Tuple[bool, List[str]]:
    """Split off the sign and insert the decimal point ``token_decimals`` from the end.

    The digits are left-padded with zeros so the point always lands inside or
    in front of them. With ``token_decimals == 0`` a point is appended unless
    the text already carries one.
    """
    is_negative = text.startswith("-")
    if is_negative:
        text = text[1:]

    digits = list(text.rjust(token_decimals, "0"))
    if token_decimals != 0:
        digits.insert(len(digits) - token_decimals, DECIMAL_POINT)
    elif DECIMAL_POINT not in digits:
        digits.append(DECIMAL_POINT)
    return is_negative, digits
