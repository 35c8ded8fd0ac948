import math

import pytest

from fxconvert.core.errors import RatesNotLoaded, UnknownCurrency
from fxconvert.services.rates.base import RateTable
from fxconvert.services.rates.conversion import compute_conversion, convert


def test_usd_to_inr_scenario(rates):
    assert convert(10, "USD", "INR", rates) == pytest.approx(830)


def test_eur_to_usd_scenario(rates):
    assert convert(100, "EUR", "USD", rates) == pytest.approx(108.6957, abs=1e-4)


def test_formula_is_exact(rates):
    for amount in (0.5, 10, 1234.56):
        for src in ("usd", "inr", "eur"):
            for dst in ("usd", "inr", "eur"):
                assert convert(amount, src, dst, rates) == amount / rates[src] * rates[dst]


def test_same_currency_is_identity(rates):
    for code in ("USD", "inr", "Eur"):
        assert convert(42.5, code, code, rates) == pytest.approx(42.5)


def test_zero_amount(rates):
    assert convert(0, "EUR", "INR", rates) == 0


def test_negative_amount_passes_through(rates):
    assert convert(-10, "USD", "INR", rates) == pytest.approx(-830)


def test_round_trip(rates):
    amount = 777.77
    there = convert(amount, "EUR", "INR", rates)
    assert convert(there, "INR", "EUR", rates) == pytest.approx(amount)


def test_codes_are_case_insensitive(rates):
    assert convert(1, "usd", "INR", rates) == convert(1, "USD", "inr", rates)


def test_plain_dict_table():
    assert convert(2, "A", "B", {"a": 2.0, "b": 4.0}) == 4.0


@pytest.mark.parametrize("src,dst", [("GBP", "USD"), ("USD", "gbp"), ("XXX", "YYY")])
def test_unknown_currency(rates, src, dst):
    with pytest.raises(UnknownCurrency) as exc:
        convert(0, src, dst, rates)
    assert f"Missing rate for {src} or {dst}" == str(exc.value)
    assert "USD" not in [c.upper() for c in exc.value.codes]


@pytest.mark.parametrize("table", [None, {}, RateTable("eur", {})])
def test_not_loaded(table):
    with pytest.raises(RatesNotLoaded):
        convert(1, "USD", "INR", table)


def test_compute_conversion_records_cross_rate(rates):
    result = compute_conversion(10, "usd", "inr", rates)
    assert result.from_code == "USD"
    assert result.to_code == "INR"
    assert result.rate == pytest.approx(83.0)
    assert result.converted == pytest.approx(830)
    assert math.isclose(result.converted, result.amount * result.rate)
