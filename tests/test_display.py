import time

import pytest

from fxconvert.services.flags import country_for, flag_for
from fxconvert.services.formatting import conversion_message, format_amount
from fxconvert.services.options import currency_options, parse_amount, pick_default


def test_mapped_flag():
    flag = flag_for("eur")
    assert flag.country == "EU"
    assert flag.src == "https://flagsapi.com/EU/flat/64.png"
    assert flag.alt == "EU flag"


def test_unmapped_code_uses_first_two_letters():
    assert country_for("xof") == "XO"
    assert country_for("BTC") == "BT"


@pytest.mark.parametrize("code", ["", None, "   "])
def test_no_flag_for_empty_code(code):
    assert flag_for(code) is None


@pytest.mark.parametrize(
    "value,expected",
    [
        (830.0, "830"),
        (100 / 0.92, "108.695652"),
        (1234567.5, "1,234,567.5"),
        (0, "0"),
        (-12.25, "-12.25"),
    ],
)
def test_format_amount_caps_fraction_digits(value, expected):
    assert format_amount(value) == expected


def test_format_amount_other_locale():
    assert format_amount(1234.5, "de_DE") == "1.234,5"


def test_format_amount_falls_back_to_fixed_decimals():
    assert format_amount(1.5, "xx_XX") == "1.5000"


def test_format_amount_too_large_to_quantize_uses_fixed_decimals():
    assert format_amount(1e22) == "10000000000000000000000.0000"
    assert format_amount(-1e25) == f"{-1e25:.4f}"


def test_conversion_message():
    assert conversion_message(10, "usd", 830.0, "inr") == "10 USD = 830 INR"


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("12.5", 12.5),
        (" 7 ", 7.0),
        ("3abc", 3.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("inf", 0.0),
        ("-4", -4.0),
        ("1_000", 1.0),
        ("1,000", 1.0),
        (".5", 0.5),
        ("1e3x", 1000.0),
        ("1e", 1.0),
        ("1e400", 0.0),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


def test_parse_amount_long_input_is_linear():
    started = time.perf_counter()
    assert parse_amount("1" + "x" * 200_000) == 1.0
    assert parse_amount("x" * 200_000) == 0.0
    assert time.perf_counter() - started < 0.5


def test_pick_default():
    codes = ["EUR", "INR", "USD"]
    assert pick_default(codes, "usd") == "USD"
    assert pick_default(codes, "GBP") == "EUR"
    assert pick_default([], "USD") is None


def test_currency_options(rates):
    opts = currency_options(rates)
    assert [o.code for o in opts] == ["EUR", "INR", "USD"]
    assert opts[1].country == "IN"
