"""Server-rendered converter page.

GET renders the form with defaults and an initial conversion; POST is the form
submit. Converter errors never escape this module: they are shown in the
message line.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from fxconvert.core.config import Settings
from fxconvert.core.errors import ConverterError
from fxconvert.models.constants import LOAD_FAILED_MESSAGE
from fxconvert.services.flags import flag_for
from fxconvert.services.formatting import conversion_message
from fxconvert.services.options import currency_options, parse_amount, pick_default
from fxconvert.services.rates.conversion import compute_conversion
from fxconvert.services.rates.store import RateStore
from .deps import get_app_settings, get_rate_store

logger = logging.getLogger("fxconvert.ui")

router = APIRouter(tags=["ui"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _converter_context(
    store: RateStore,
    settings: Settings,
    amount_raw: Optional[str],
    from_code: Optional[str],
    to_code: Optional[str],
) -> Dict[str, Any]:
    context: Dict[str, Any] = {
        "app_name": settings.app_name,
        "version": settings.version,
        "amount": amount_raw if amount_raw is not None else str(settings.default_amount),
        "options": [],
        "from_code": "",
        "to_code": "",
        "from_flag": None,
        "to_flag": None,
        "message": "",
        "error": False,
    }
    table = store.peek()
    if table is None:
        context["error"] = True
        context["message"] = LOAD_FAILED_MESSAGE if store.error else "Rates not loaded"
        return context

    options = currency_options(table)
    codes = [o.code for o in options]
    src = (from_code or "").strip().upper() or pick_default(codes, settings.default_from_currency)
    dst = (to_code or "").strip().upper() or pick_default(codes, settings.default_to_currency)
    amount = parse_amount(context["amount"])
    context.update(
        options=options,
        from_code=src or "",
        to_code=dst or "",
        from_flag=flag_for(src),
        to_flag=flag_for(dst),
    )
    try:
        result = compute_conversion(amount, src or "", dst or "", table)
    except ConverterError as e:
        logger.info("conversion failed: %s", e)
        context["error"] = True
        context["message"] = str(e)
        return context
    context["message"] = conversion_message(
        result.amount, result.from_code, result.converted, result.to_code, settings.display_locale
    )
    context["result"] = result
    return context


@router.get("/", response_class=HTMLResponse)
async def converter_page(
    request: Request,
    store: RateStore = Depends(get_rate_store),
    settings: Settings = Depends(get_app_settings),
):
    context = _converter_context(store, settings, None, None, None)
    return templates.TemplateResponse(request, "converter.html", context)


@router.post("/", response_class=HTMLResponse)
async def converter_submit(
    request: Request,
    amount: str = Form(""),
    from_code: str = Form("", alias="from"),
    to_code: str = Form("", alias="to"),
    store: RateStore = Depends(get_rate_store),
    settings: Settings = Depends(get_app_settings),
):
    context = _converter_context(store, settings, amount, from_code, to_code)
    return templates.TemplateResponse(request, "converter.html", context)
