"""Static lookup tables for the converter UI.

Flag images are looked up by country; most currencies map to one country, the
rest fall back to the first two letters of the code (see services.flags).
"""

from typing import Dict

CURRENCY_TO_COUNTRY: Dict[str, str] = {
    "USD": "US",
    "EUR": "EU",
    "GBP": "GB",
    "INR": "IN",
    "AUD": "AU",
    "CAD": "CA",
    "JPY": "JP",
    "CNY": "CN",
    "CHF": "CH",
    "SEK": "SE",
    "NOK": "NO",
    "DKK": "DK",
    "RUB": "RU",
    "BRL": "BR",
    "ZAR": "ZA",
    "NZD": "NZ",
    "SGD": "SG",
    "HKD": "HK",
    "MXN": "MX",
    "KRW": "KR",
    "TRY": "TR",
    "ILS": "IL",
    "SAR": "SA",
    "AED": "AE",
    "KWD": "KW",
    "THB": "TH",
    "VND": "VN",
    "PKR": "PK",
    "NGN": "NG",
    "EGP": "EG",
    "IDR": "ID",
    "MYR": "MY",
    "PHP": "PH",
    "PLN": "PL",
    "HUF": "HU",
    "CZK": "CZ",
    "RON": "RO",
    "CLP": "CL",
    "ARS": "AR",
}

FLAG_URL_TEMPLATE = "https://flagsapi.com/{country}/flat/64.png"
LOAD_FAILED_MESSAGE = "Failed to load exchange rates."
