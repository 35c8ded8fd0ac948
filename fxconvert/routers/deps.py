from fastapi import Request

from fxconvert.core.config import Settings
from fxconvert.services.rates.store import RateStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_rate_store(request: Request) -> RateStore:
    return request.app.state.rate_store
