"""Configuration loader for nice-number defaults."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from .options import FormatOptions

ENV_PREFIX = "NICE_NUMBER_"


def _get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is not None:
        value = value.strip()
        if value == "":
            return default
        return value
    return default


def _get_int(key: str, default: int, minimum: int = 0) -> int:
    value = _get_env(key)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer") from exc
    if parsed < minimum:
        raise ValueError(f"Environment variable {key} must be at least {minimum}")
    return parsed


def _get_decimal(key: str) -> Optional[Decimal]:
    value = _get_env(key)
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"Environment variable {key} must be a number") from exc


def _get_bool(key: str, default: bool) -> bool:
    value = _get_env(key)
    if value is None:
        return default
    value_lower = value.lower()
    if value_lower in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if value_lower in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Environment variable {key} must be a boolean")


@dataclass(slots=True)
class AppConfig:
    options: FormatOptions
    log_level: str


def load_config() -> AppConfig:
    defaults = FormatOptions()

    max_decimal_places = _get_env(ENV_PREFIX + "MAX_DECIMAL_PLACES")
    options = FormatOptions(
        omit_leading_zero=_get_bool(ENV_PREFIX + "OMIT_LEADING_ZERO", defaults.omit_leading_zero),
        token_decimals=_get_int(ENV_PREFIX + "TOKEN_DECIMALS", defaults.token_decimals),
        significant_figures=_get_int(
            ENV_PREFIX + "SIGNIFICANT_FIGURES", defaults.significant_figures, minimum=1
        ),
        omit_trailing_zeroes=_get_bool(
            ENV_PREFIX + "OMIT_TRAILING_ZEROES", defaults.omit_trailing_zeroes
        ),
        use_symbols=_get_bool(ENV_PREFIX + "USE_SYMBOLS", defaults.use_symbols),
        add_commas=_get_bool(ENV_PREFIX + "ADD_COMMAS", defaults.add_commas),
        minimum=_get_decimal(ENV_PREFIX + "MINIMUM"),
        min_decimal_places=_get_int(ENV_PREFIX + "MIN_DECIMAL_PLACES", defaults.min_decimal_places),
        max_decimal_places=(
            _get_int(ENV_PREFIX + "MAX_DECIMAL_PLACES", 0)
            if max_decimal_places is not None
            else math.inf
        ),
        zero_result=_get_env(ENV_PREFIX + "ZERO_RESULT"),
    )
    log_level = _get_env("LOG_LEVEL", "WARNING").upper()

    return AppConfig(options=options, log_level=log_level)
