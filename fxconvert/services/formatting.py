"""Display formatting for amounts.

Locale-aware grouping with at most 6 fractional digits; if the locale cannot be
used, or the value is too large to quantize (about 1e22 and up), a plain fixed
4-decimal rendering is returned instead.
"""

from __future__ import annotations

import logging
import math
from decimal import InvalidOperation
from typing import Optional

from babel.core import UnknownLocaleError
from babel.numbers import format_decimal

logger = logging.getLogger("fxconvert.formatting")

MAX_FRACTION_DIGITS = 6
_PATTERN = "#,##0." + "#" * MAX_FRACTION_DIGITS


def format_amount(value: float, locale: Optional[str] = "en_US") -> str:
    if not math.isfinite(value):
        return str(value)
    try:
        return format_decimal(value, format=_PATTERN, locale=locale)
    except (UnknownLocaleError, InvalidOperation, ValueError, TypeError) as e:
        logger.debug("locale formatting failed for %r: %s", locale, e)
        return f"{value:.4f}"


def conversion_message(
    amount: float,
    from_code: str,
    converted: float,
    to_code: str,
    locale: Optional[str] = "en_US",
) -> str:
    return (
        f"{format_amount(amount, locale)} {from_code.upper()} = "
        f"{format_amount(converted, locale)} {to_code.upper()}"
    )
