from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from fxconvert.core.errors import RatesNotLoaded, UnknownCurrency

"""Cross-rate conversion through the base currency.

The table only stores each currency against the base, so a FROM -> TO rate is
derived: amount / rates[FROM] gives base units, times rates[TO] gives TO units.
No rounding here; formatting is the display layer's job.
"""


@dataclass(frozen=True)
class ConversionResult:
    amount: float
    from_code: str
    to_code: str
    rate: float
    converted: float


def _lookup(rates: Optional[Mapping[str, float]], from_code: str, to_code: str):
    if not rates:
        raise RatesNotLoaded()
    src = from_code.lower()
    dst = to_code.lower()
    missing = [c for c, k in ((from_code, src), (to_code, dst)) if k not in rates]
    if missing:
        raise UnknownCurrency(
            missing, message=f"Missing rate for {from_code} or {to_code}"
        )
    return rates[src], rates[dst]


def convert(
    amount: float,
    from_code: str,
    to_code: str,
    rates: Optional[Mapping[str, float]],
) -> float:
    rate_from, rate_to = _lookup(rates, from_code, to_code)
    amount_in_base = amount / rate_from
    return amount_in_base * rate_to


def compute_conversion(
    amount: float,
    from_code: str,
    to_code: str,
    rates: Optional[Mapping[str, float]],
) -> ConversionResult:
    rate_from, rate_to = _lookup(rates, from_code, to_code)
    return ConversionResult(
        amount=amount,
        from_code=from_code.upper(),
        to_code=to_code.upper(),
        rate=rate_to / rate_from,
        converted=convert(amount, from_code, to_code, rates),
    )
