from __future__ import annotations

"""Rate source and rate table types.

A rate table is a read-only mapping of lowercase currency code to
"units of that currency per one unit of the base currency".
"""
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional


@dataclass(frozen=True)
class RateSource:
    name: str
    base_url: str

    def url_for(self, base_currency: str) -> str:
        return f"{self.base_url}currencies/{base_currency.lower()}.json"


@dataclass(frozen=True)
class RateTable(Mapping[str, float]):
    base_currency: str
    rates: Mapping[str, float]
    source: Optional[str] = None
    published: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_currency", self.base_currency.lower())
        object.__setattr__(
            self,
            "rates",
            MappingProxyType({k.lower(): v for k, v in dict(self.rates).items()}),
        )

    @classmethod
    def from_payload(
        cls,
        base_currency: str,
        payload: Mapping[str, object],
        source: Optional[str] = None,
        published: Optional[str] = None,
    ) -> "RateTable":
        """Keep only finite, positive numeric entries (bools excluded)."""
        kept = {}
        for code, value in payload.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                continue
            if not math.isfinite(value) or value <= 0:
                continue
            kept[str(code)] = float(value)
        return cls(base_currency, kept, source=source, published=published)

    def __getitem__(self, code: str) -> float:
        return self.rates[code.lower()]

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.lower() in self.rates

    def __iter__(self) -> Iterator[str]:
        return iter(self.rates)

    def __len__(self) -> int:
        return len(self.rates)

    def codes(self) -> List[str]:
        """Sorted uppercase codes, as shown to users."""
        return sorted(code.upper() for code in self.rates)
