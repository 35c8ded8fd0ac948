from .base import RateSource, RateTable
from .conversion import ConversionResult, compute_conversion, convert
from .loader import load_rates, load_rates_from_settings
from .store import RateStore

__all__ = [
    "RateSource",
    "RateTable",
    "ConversionResult",
    "compute_conversion",
    "convert",
    "load_rates",
    "load_rates_from_settings",
    "RateStore",
]
