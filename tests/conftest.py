import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fxconvert.core.config import Settings  # noqa: E402
from fxconvert.core.errors import RatesUnavailable  # noqa: E402
from fxconvert.main import create_app  # noqa: E402
from fxconvert.services.rates.base import RateTable  # noqa: E402

SCENARIO_RATES = {"usd": 1.0, "inr": 83.0, "eur": 0.92}


@pytest.fixture
def rates() -> RateTable:
    return RateTable("usd", SCENARIO_RATES, source="test://rates")


@pytest.fixture
def settings() -> Settings:
    s = Settings(
        _env_file=None,
        base_currency="usd",
        rates_primary_base_url="https://primary.test/v1/",
        rates_fallback_base_url="https://fallback.test/v1/",
    )
    s.init_post_load()
    return s


@pytest.fixture
def client(settings, rates):
    async def loader(_settings):
        return rates

    app = create_app(settings_override=settings, rate_loader=loader)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failed_client(settings):
    async def loader(_settings):
        raise RatesUnavailable("Failed to load exchange rates: both sources down")

    app = create_app(settings_override=settings, rate_loader=loader)
    with TestClient(app) as c:
        yield c
