import json
import os
import sys

from fastapi.testclient import TestClient

"""Manual smoke check against the real rate endpoints.

Starts the app with default settings (primary CDN + fallback), then prints the
health status and a USD -> INR conversion. Pass --fallback-only to point the
primary at an unreachable host and exercise the fallback path.
"""


def run(fallback_only: bool = False) -> None:
    from fxconvert.core.config import Settings
    from fxconvert.main import create_app

    settings = Settings()
    if fallback_only:
        settings.rates_primary_base_url = "https://invalid.invalid/v1/"
    settings.init_post_load()
    with TestClient(create_app(settings_override=settings)) as client:
        health = client.get("/health").json()
        conv = client.get("/api/convert", params={"amount": 10, "from": "USD", "to": "INR"})
        print(json.dumps({"health": health, "convert": conv.json()}, indent=2))


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run(fallback_only="--fallback-only" in sys.argv)
