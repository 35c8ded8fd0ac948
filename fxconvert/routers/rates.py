from __future__ import annotations

import math

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from fxconvert.core.config import Settings
from fxconvert.core.errors import AmountOutOfRange
from fxconvert.models.rates import ConversionOut, ConversionRequest, RateTableOut
from fxconvert.services.formatting import conversion_message
from fxconvert.services.rates.conversion import compute_conversion
from fxconvert.services.rates.store import RateStore
from .deps import get_app_settings, get_rate_store

"""JSON API over the loaded rate table.

Endpoints:
    - GET /api/rates    -> the whole table (503 until loaded)
    - GET /api/convert  -> ?amount=&from=&to= conversion
Converter errors are rendered by the handlers registered in create_app.
"""

router = APIRouter(prefix="/api", tags=["rates"])


def get_conversion_request(
    amount: float = Query(0.0, description="Amount in the source currency"),
    from_code: str = Query(..., alias="from", description="Source currency"),
    to_code: str = Query(..., alias="to", description="Target currency"),
) -> ConversionRequest:
    try:
        return ConversionRequest.model_validate(
            {"amount": amount, "from": from_code, "to": to_code}
        )
    except ValidationError as e:
        raise RequestValidationError(
            e.errors(include_url=False, include_context=False)
        ) from e


@router.get("/rates", response_model=RateTableOut, summary="Loaded exchange rates")
async def get_rates(store: RateStore = Depends(get_rate_store)):
    table = store.table
    return RateTableOut(
        base=table.base_currency,
        source=table.source,
        published=table.published,
        rates=dict(table.rates),
    )


@router.get("/convert", response_model=ConversionOut, summary="Convert an amount")
async def convert_amount(
    req: ConversionRequest = Depends(get_conversion_request),
    store: RateStore = Depends(get_rate_store),
    settings: Settings = Depends(get_app_settings),
):
    result = compute_conversion(req.amount, req.from_code, req.to_code, store.table)
    if not math.isfinite(result.converted):
        raise AmountOutOfRange(
            f"{result.amount:g} {result.from_code} is too large to convert to {result.to_code}"
        )
    return ConversionOut(
        amount=result.amount,
        from_code=result.from_code,
        to_code=result.to_code,
        rate=result.rate,
        converted=result.converted,
        display=conversion_message(
            result.amount,
            result.from_code,
            result.converted,
            result.to_code,
            settings.display_locale,
        ),
    )
