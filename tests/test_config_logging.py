import json
import logging

import pytest

from fxconvert.core.config import Settings
from fxconvert.core.logging import JsonFormatter, PlainFormatter, init_logging
from fxconvert import main as main_module


def _settings(**kw):
    s = Settings(_env_file=None, **kw)
    s.init_post_load()
    return s


def test_defaults_point_at_currency_api():
    s = _settings()
    assert s.base_currency == "eur"
    assert s.rates_primary_base_url.startswith("https://cdn.jsdelivr.net/")
    assert s.rates_fallback_base_url == "https://latest.currency-api.pages.dev/v1/"
    assert s.http_timeout_seconds is None


def test_codes_and_urls_are_normalized():
    s = _settings(
        base_currency=" USD ",
        default_from_currency="eur",
        rates_primary_base_url="https://example.test/v1",
    )
    assert s.base_currency == "usd"
    assert s.default_from_currency == "EUR"
    assert s.rates_primary_base_url == "https://example.test/v1/"


@pytest.mark.parametrize(
    "kw",
    [
        {"rates_fallback_base_url": "ftp://example.test/"},
        {"http_timeout_seconds": 0},
        {"base_currency": "  "},
    ],
)
def test_invalid_settings(kw):
    with pytest.raises(ValueError):
        _settings(**kw)


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BASE_CURRENCY", "gbp")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
    s = _settings()
    assert s.base_currency == "gbp"
    assert s.http_timeout_seconds == 2.5


def test_json_formatter_merges_fields():
    record = logging.LogRecord("fxconvert.test", logging.INFO, __file__, 1, "loaded %d", (3,), None)
    record.fields = {"source": "https://primary.test/", "count": 3}
    out = json.loads(JsonFormatter().format(record))
    assert out["message"] == "loaded 3"
    assert out["source"] == "https://primary.test/"
    assert out["count"] == 3
    assert out["request_id"] == "-"


def test_request_id_header_echoed(client):
    resp = client.get("/health", headers={"x-request-id": "abc123"})
    assert resp.headers["x-request-id"] == "abc123"


def test_init_logging_plain_output_and_level():
    init_logging(level="warning", json_logs=False)
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, PlainFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_init_logging_debug_overrides_level():
    init_logging(debug=True, level="ERROR")
    assert logging.getLogger().level == logging.DEBUG
    assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)


def test_init_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        init_logging(level="chatty")


def test_run_serves_app_with_configured_host_and_port(monkeypatch, settings):
    seen = {}

    def fake_run(app, **kwargs):
        seen["app"] = app
        seen.update(kwargs)

    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)
    settings.port = 9123
    main_module.run(settings)
    assert seen["host"] == "127.0.0.1"
    assert seen["port"] == 9123
    assert seen["log_config"] is None
    assert seen["app"].state.settings is settings
