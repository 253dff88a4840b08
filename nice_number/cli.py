"""Command-line interface for nice-number."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from typing import List, Optional

import typer

from .config import load_config
from .formatter import format_number
from .logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Human-friendly token amount formatting")


@app.callback()
def callback() -> None:
    """Format fixed-point token amounts for display."""


@app.command("format")
def format_command(
    values: List[str] = typer.Argument(..., help="Raw amounts, e.g. 1234560000000000000"),
    token_decimals: Optional[int] = typer.Option(
        None, "--token-decimals", "-d", min=0, help="Implicit decimal places of the raw amount"
    ),
    significant_figures: Optional[int] = typer.Option(
        None, "--significant-figures", "-s", min=1, help="Significant figures to show"
    ),
    omit_leading_zero: Optional[bool] = typer.Option(
        None, "--omit-leading-zero/--keep-leading-zero", help="Render 0.5 as .5"
    ),
    omit_trailing_zeroes: Optional[bool] = typer.Option(
        None,
        "--omit-trailing-zeroes/--keep-trailing-zeroes",
        help="Do not pad up to the significant figure count",
    ),
    use_symbols: Optional[bool] = typer.Option(
        None, "--symbols/--no-symbols", help="Abbreviate large numbers with k/M/B"
    ),
    add_commas: Optional[bool] = typer.Option(
        None, "--commas/--no-commas", help="Group thousands (ignored with --symbols)"
    ),
    minimum: Optional[str] = typer.Option(
        None, "--minimum", help="Show <MINIMUM for nonzero amounts below this value"
    ),
    min_decimal_places: Optional[int] = typer.Option(
        None, "--min-decimal-places", min=0, help="Minimum decimal places to show"
    ),
    max_decimal_places: Optional[int] = typer.Option(
        None, "--max-decimal-places", min=0, help="Maximum decimal places to show"
    ),
    zero_result: Optional[str] = typer.Option(
        None, "--zero-result", help="Text to print for an exact zero"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON array instead of lines"),
) -> None:
    config = load_config()
    configure_logging(config.log_level)

    overrides = {
        "token_decimals": token_decimals,
        "significant_figures": significant_figures,
        "omit_leading_zero": omit_leading_zero,
        "omit_trailing_zeroes": omit_trailing_zeroes,
        "use_symbols": use_symbols,
        "add_commas": add_commas,
        "minimum": _parse_minimum(minimum),
        "min_decimal_places": min_decimal_places,
        "max_decimal_places": max_decimal_places,
        "zero_result": zero_result,
    }
    options = config.options.replace(
        **{key: value for key, value in overrides.items() if value is not None}
    )
    logger.debug("format_command", count=len(values), token_decimals=options.token_decimals)

    results = [(value, format_number(value, options)) for value in values]
    if as_json:
        typer.echo(
            json.dumps(
                [{"input": value, "output": output} for value, output in results],
                ensure_ascii=False,
            )
        )
        return
    for _, output in results:
        typer.echo(output)


def _parse_minimum(value: Optional[str]) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise typer.BadParameter("--minimum must be a decimal number") from exc


def main():
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
