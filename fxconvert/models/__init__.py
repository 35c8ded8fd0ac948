"""Pydantic models and constants for the currency converter."""

from .constants import CURRENCY_TO_COUNTRY, FLAG_URL_TEMPLATE  # re-export
from .rates import ConversionOut, ConversionRequest, RateTableOut

__all__ = [
    "CURRENCY_TO_COUNTRY",
    "FLAG_URL_TEMPLATE",
    "ConversionOut",
    "ConversionRequest",
    "RateTableOut",
]
