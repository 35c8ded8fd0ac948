from __future__ import annotations

"""Two-tier rate loader.

Fetches ``currencies/<base>.json`` from the primary source and, if that fails
for any reason, once from the fallback. The document looks like
``{"date": "2024-03-06", "eur": {"usd": 1.08, ...}}``; only the nested
base-currency object is kept.
"""
import logging
from typing import Any, Dict, Optional, Sequence

import httpx

from fxconvert.core.config import Settings
from fxconvert.core.errors import RatesUnavailable
from fxconvert.services.http_client import HttpError, get_json, make_client
from .base import RateSource, RateTable

logger = logging.getLogger("fxconvert.rates.loader")


class MalformedRates(HttpError):
    """Response decoded but the base-currency field is missing or not an object."""


def sources_from_settings(settings: Settings) -> list[RateSource]:
    return [
        RateSource("primary", settings.rates_primary_base_url),
        RateSource("fallback", settings.rates_fallback_base_url),
    ]


def extract_rates(document: Dict[str, Any], base_currency: str, url: str) -> Dict[str, Any]:
    nested = document.get(base_currency.lower())
    if not isinstance(nested, dict) or not nested:
        raise MalformedRates(f"Unexpected JSON from {url}: no '{base_currency}' rates")
    return nested


async def fetch_rate_table(
    client: httpx.AsyncClient, source: RateSource, base_currency: str
) -> RateTable:
    url = source.url_for(base_currency)
    document = await get_json(client, url)
    nested = extract_rates(document, base_currency, url)
    table = RateTable.from_payload(
        base_currency, nested, source=url, published=document.get("date")
    )
    dropped = len(nested) - len(table)
    if dropped:
        logger.warning("dropped %d non-numeric or non-positive rates from %s", dropped, url)
    if not table:
        raise MalformedRates(f"Unexpected JSON from {url}: no usable rates")
    return table


async def load_rates(
    client: httpx.AsyncClient,
    sources: Sequence[RateSource],
    base_currency: str,
) -> RateTable:
    """Return the rate table from the first source that answers correctly.

    Only the first two sources are used: primary, then a single fallback.
    Raises ``RatesUnavailable`` chained to the last underlying error.
    """
    if not sources:
        raise ValueError("at least one rate source is required")
    primary, fallback = sources[0], (sources[1] if len(sources) > 1 else None)
    try:
        table = await fetch_rate_table(client, primary, base_currency)
    except HttpError as primary_err:
        if fallback is None:
            logger.error("%s rates failed and no fallback configured: %s", primary.name, primary_err)
            raise RatesUnavailable(
                f"Failed to load exchange rates: {primary_err}", cause=primary_err
            ) from primary_err
        logger.warning("%s failed, trying %s: %s", primary.name, fallback.name, primary_err)
        try:
            table = await fetch_rate_table(client, fallback, base_currency)
        except HttpError as fallback_err:
            logger.error("%s failed as well: %s", fallback.name, fallback_err)
            raise RatesUnavailable(
                f"Failed to load exchange rates: {primary.name}: {primary_err}; "
                f"{fallback.name}: {fallback_err}",
                cause=fallback_err,
            ) from fallback_err
    logger.info(
        "loaded %d rates (base=%s) from %s",
        len(table),
        table.base_currency,
        table.source,
        extra={"fields": {"source": table.source, "count": len(table)}},
    )
    return table


async def load_rates_from_settings(
    settings: Settings, client: Optional[httpx.AsyncClient] = None
) -> RateTable:
    """Open a client (unless given one), load once, close it."""
    sources = sources_from_settings(settings)
    if client is not None:
        return await load_rates(client, sources, settings.base_currency)
    async with make_client(settings.http_timeout_seconds) as own_client:
        return await load_rates(own_client, sources, settings.base_currency)
