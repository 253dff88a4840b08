"""Entry point: render a fixed-point quantity as a short display string."""

from __future__ import annotations

from typing import Any, Optional

from .normalizer import is_zero, position_digits, to_text, zero_text
from .options import DEFAULT_OPTIONS, FormatOptions
from .presenter import present
from .selector import select_digits

__all__ = ["format_number"]


def format_number(value: Any, options: Optional[FormatOptions] = None, **overrides: Any) -> str:
    """Format ``value`` for display.

    ``value`` is a string, number, or ``Decimal`` holding an amount scaled by
    ``options.token_decimals`` implicit decimal places, so with the default
    scale of 18 ``"1234560000000000000"`` renders as ``"1.235"``. Keyword
    ``overrides`` name :class:`FormatOptions` fields and are applied on top
    of ``options``.

    ``None`` formats as an empty string. No exception is raised for any
    input value.
    """
    opts = options or DEFAULT_OPTIONS
    if overrides:
        opts = opts.replace(**overrides)

    if value is None:
        return ""

    text = to_text(value)
    if is_zero(text):
        return zero_text(opts)

    is_negative, digits = position_digits(text, opts.token_decimals)
    selection = select_digits(digits, opts)
    return present(selection, is_negative, opts)
