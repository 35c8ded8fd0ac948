"""Currency code -> flag image lookup.

Best effort: codes in CURRENCY_TO_COUNTRY use the mapped country; any other
code uses its first two letters, which matches the ISO 4217 convention for most
national currencies (e.g. THB -> TH). Unmapped codes are never an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fxconvert.models.constants import CURRENCY_TO_COUNTRY, FLAG_URL_TEMPLATE


@dataclass(frozen=True)
class FlagImage:
    country: str
    src: str
    alt: str


def country_for(currency_code: Optional[str]) -> str:
    up = (currency_code or "").strip().upper()
    return CURRENCY_TO_COUNTRY.get(up) or up[:2]


def flag_for(currency_code: Optional[str]) -> Optional[FlagImage]:
    """Return the flag image for a code, or None when there is nothing to show."""
    country = country_for(currency_code)
    if not country:
        return None
    return FlagImage(
        country=country,
        src=FLAG_URL_TEMPLATE.format(country=country),
        alt=f"{country} flag",
    )
