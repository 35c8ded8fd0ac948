"""Form state helpers: currency option lists, defaults and amount parsing."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from fxconvert.services.flags import country_for
from fxconvert.services.rates.base import RateTable

_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class CurrencyOption:
    code: str
    country: str


def currency_options(table: RateTable) -> List[CurrencyOption]:
    return [CurrencyOption(code=c, country=country_for(c)) for c in table.codes()]


def pick_default(codes: Sequence[str], preferred: str) -> Optional[str]:
    """Preferred code if offered, else the first option (None if no options)."""
    preferred = (preferred or "").upper()
    if preferred in codes:
        return preferred
    return codes[0] if codes else None


def parse_amount(raw: Optional[str]) -> float:
    """Leading-number parse like a browser's parseFloat; no match (or a
    non-finite result) becomes 0."""
    if raw is None:
        return 0.0
    match = _LEADING_NUMBER.match(str(raw))
    if match is None:
        return 0.0
    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0
