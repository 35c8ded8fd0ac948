from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    BASE_CURRENCY, RATES_PRIMARY_BASE_URL, HTTP_TIMEOUT_SECONDS).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Currency Converter"
    debug: bool = False
    version: str = "0.1.0"
    log_level: str = "INFO"
    log_json: bool = True

    # Server (python -m fxconvert / fxconvert script)
    host: str = "127.0.0.1"
    port: int = 8000

    # Rate sources. Both serve currencies/<base>.json
    base_currency: str = "eur"
    rates_primary_base_url: str = (
        "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1/"
    )
    rates_fallback_base_url: str = "https://latest.currency-api.pages.dev/v1/"
    # None -> transport default
    http_timeout_seconds: Optional[float] = None
    load_rates_on_startup: bool = True

    # UI defaults
    default_from_currency: str = "USD"
    default_to_currency: str = "INR"
    default_amount: float = 1.0
    display_locale: str = "en_US"

    def init_post_load(self) -> None:
        """Normalize codes and validate source URLs."""
        self.base_currency = self.base_currency.strip().lower()
        self.default_from_currency = self.default_from_currency.strip().upper()
        self.default_to_currency = self.default_to_currency.strip().upper()
        if not self.base_currency:
            raise ValueError("base_currency must not be empty")
        for name in ("rates_primary_base_url", "rates_fallback_base_url"):
            url = getattr(self, name)
            if not url.startswith(("http://", "https://")):
                raise ValueError(f"{name} must be an http(s) URL, got '{url}'")
            if not url.endswith("/"):
                setattr(self, name, url + "/")
        if self.http_timeout_seconds is not None and self.http_timeout_seconds <= 0:
            raise ValueError("http_timeout_seconds must be positive when set")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
