"""Human-friendly display strings for fixed-point token amounts."""

from .formatter import format_number
from .options import FormatOptions

format = format_number

__all__ = ["format", "format_number", "FormatOptions"]
