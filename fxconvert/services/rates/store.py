from __future__ import annotations

"""Init-once holder for the application's rate table.

Lives on ``app.state`` rather than as a module global. States:
    - pending: nothing loaded yet (``table`` raises RatesNotLoaded)
    - loaded: table set, never replaced
    - failed: load attempted and raised RatesUnavailable
"""
import logging
from typing import Any, Awaitable, Callable, Optional

from fxconvert.core.errors import RatesNotLoaded, RatesUnavailable
from .base import RateTable

logger = logging.getLogger("fxconvert.rates.store")

RateLoader = Callable[[Any], Awaitable[RateTable]]


class RateStore:
    def __init__(self) -> None:
        self._table: Optional[RateTable] = None
        self._error: Optional[RatesUnavailable] = None

    @property
    def status(self) -> str:
        if self._table is not None:
            return "loaded"
        if self._error is not None:
            return "failed"
        return "pending"

    @property
    def loaded(self) -> bool:
        return self._table is not None

    @property
    def error(self) -> Optional[RatesUnavailable]:
        return self._error

    @property
    def table(self) -> RateTable:
        if self._table is None:
            if self._error is not None:
                raise RatesNotLoaded(str(self._error))
            raise RatesNotLoaded()
        return self._table

    def peek(self) -> Optional[RateTable]:
        return self._table

    def set(self, table: RateTable) -> None:
        if self._table is not None:
            raise RuntimeError("rate table already loaded")
        self._table = table
        self._error = None

    async def load(self, loader: RateLoader, settings: Any) -> Optional[RateTable]:
        """Run ``loader`` once; failures are recorded, not raised."""
        if self._table is not None:
            return self._table
        try:
            table = await loader(settings)
        except RatesUnavailable as e:
            logger.error("exchange rates unavailable: %s", e)
            self._error = e
            return None
        self.set(table)
        return table
