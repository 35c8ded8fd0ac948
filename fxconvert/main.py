import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core import errors
from .core.config import Settings, get_settings
from .core.logging import init_logging, request_context_middleware
from .routers import health, rates, ui
from .services.rates.loader import load_rates_from_settings
from .services.rates.store import RateLoader, RateStore

logger = logging.getLogger("fxconvert")


def create_app(
    settings_override: Settings | None = None,
    rate_loader: Optional[RateLoader] = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    rate_loader: async callable taking Settings and returning a RateTable;
    defaults to the HTTP primary/fallback loader.
    """
    settings = settings_override or get_settings()
    init_logging(debug=settings.debug, level=settings.log_level, json_logs=settings.log_json)
    loader = rate_loader or load_rates_from_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Single load per process; failures leave the store in 'failed' state
        if settings.load_rates_on_startup:
            await app.state.rate_store.load(loader, settings)
        yield

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.rate_store = RateStore()

    app.middleware("http")(request_context_middleware)

    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.ConverterError, errors.converter_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    app.include_router(health.router)
    app.include_router(rates.router)
    app.include_router(ui.router)

    return app


app = create_app()


def run(settings: Settings | None = None) -> None:
    """Serve the app with uvicorn using the configured host/port."""
    if settings is None:
        settings, served = get_settings(), app
    else:
        served = create_app(settings_override=settings)
    # log_config=None keeps the JSON handler installed by init_logging
    uvicorn.run(served, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
