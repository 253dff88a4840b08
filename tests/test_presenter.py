from decimal import Decimal

import pytest

from nice_number.options import FormatOptions
from nice_number.presenter import (
    add_commas,
    clamp_minimum,
    minimum_text,
    pad_trailing_zeroes,
    present,
    to_symbol_notation,
)
from nice_number.selector import Selection


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("999", "999"),
        ("1000", "1k"),
        ("10000", "10k"),
        ("12300", "12.3k"),
        ("12400000", "12.4M"),
        ("1234567890", "1.23456789B"),
        ("12.5", "12.5"),
        ("1234.5", "1234.5"),
    ],
)
def test_to_symbol_notation(text, expected):
    assert to_symbol_notation(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("123", "123"),
        ("1234", "1,234"),
        ("123457", "123,457"),
        ("1234567.891", "1,234,567.891"),
        ("123.4567", "123.4567"),
        ("16234.01", "16,234.01"),
    ],
)
def test_add_commas(text, expected):
    assert add_commas(text) == expected


def test_minimum_text():
    assert minimum_text(0.01, False) == "0.01"
    assert minimum_text(0.01, True) == ".01"
    assert minimum_text(1e-05, False) == "0.00001"
    assert minimum_text(Decimal("1.5"), True) == "1.5"
    assert minimum_text(1, True) == "1"


def test_clamp_minimum_only_applies_below_threshold():
    options = FormatOptions(significant_figures=3, minimum=0.01)
    assert clamp_minimum("0.000123", False, options) == "<0.01"
    assert clamp_minimum("0.013", False, options) is None
    assert clamp_minimum("0.000123", False, FormatOptions()) is None


def test_clamp_minimum_truncates_rounded_zero():
    options = FormatOptions(significant_figures=2, minimum=0.01)
    assert clamp_minimum("0.0000", False, options) == "0.00"
    assert clamp_minimum("0.0000", True, options) == "-0.00"
    omitted = options.replace(omit_leading_zero=True)
    assert clamp_minimum(".0000", False, omitted) == ".00"


def test_clamp_minimum_skips_malformed_threshold():
    options = FormatOptions(minimum="abc")
    assert clamp_minimum("0.000123", False, options) is None


def test_pad_trailing_zeroes_respects_both_limits():
    selection = Selection(digits=list("1.7"), budget=5, sig_figs=2, decimal_places=1)
    assert pad_trailing_zeroes("1.7", selection, FormatOptions()) == "1.7000"
    assert pad_trailing_zeroes("1.7", selection, FormatOptions(max_decimal_places=2)) == "1.70"
    assert pad_trailing_zeroes("1.7", selection, FormatOptions(omit_trailing_zeroes=True)) == "1.7"
    assert pad_trailing_zeroes("17", selection, FormatOptions()) == "17"


def test_present_adds_leading_zero_and_sign():
    selection = Selection(
        digits=list(".13"), budget=2, sig_figs=2, decimal_places=2, seen_decimal_point=True
    )
    assert present(selection, True, FormatOptions(significant_figures=2)) == "-0.13"


def test_present_pads_minimum_decimals():
    selection = Selection(
        digits=list("17."), budget=5, sig_figs=2, decimal_places=0, seen_decimal_point=True
    )
    options = FormatOptions(
        significant_figures=5, omit_trailing_zeroes=True, min_decimal_places=2, use_symbols=False
    )
    assert present(selection, False, options) == "17.00"


def test_present_prefers_symbols_over_commas():
    options = FormatOptions(significant_figures=5, add_commas=True)
    selection = Selection(digits=list("12345"), budget=5, sig_figs=5)
    assert present(selection, False, options) == "12.345k"

    selection = Selection(digits=list("12345"), budget=5, sig_figs=5)
    assert present(selection, False, options.replace(use_symbols=False)) == "12,345"


def test_present_leaves_selection_untouched():
    selection = Selection(
        digits=list(".13"), budget=2, sig_figs=2, decimal_places=2, seen_decimal_point=True
    )
    options = FormatOptions(significant_figures=2, min_decimal_places=4)
    assert present(selection, False, options) == "0.1300"
    assert selection.digits == list(".13")
