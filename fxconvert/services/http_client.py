from __future__ import annotations

"""Async JSON fetch helper for the rate sources.

Single attempt per call: the rate loader owns the primary -> fallback policy,
so there is no retry loop here.
"""
from typing import Any, Dict, Optional

import httpx


class HttpError(Exception):
    pass


def make_client(timeout: Optional[float] = None, **kwargs: Any) -> httpx.AsyncClient:
    """Build the client used for rate loading.

    ``timeout=None`` keeps httpx's default timeout instead of disabling it.
    """
    if timeout is not None:
        kwargs["timeout"] = timeout
    kwargs.setdefault("follow_redirects", True)
    return httpx.AsyncClient(**kwargs)


async def get_json(client: httpx.AsyncClient, url: str) -> Dict[str, Any]:
    try:
        resp = await client.get(url)
    except httpx.HTTPError as e:
        raise HttpError(f"Request to {url} failed: {e!r}") from e
    if resp.is_error:
        raise HttpError(f"HTTP {resp.status_code} for {url}")
    try:
        data = resp.json()
    except ValueError as e:  # JSON decode
        raise HttpError(f"Invalid JSON from {url}: {e}") from e
    if not isinstance(data, dict):
        raise HttpError(f"Expected a JSON object from {url}, got {type(data).__name__}")
    return data
