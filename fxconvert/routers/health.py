from fastapi import APIRouter, Depends

from fxconvert.services.rates.store import RateStore
from .deps import get_rate_store

router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness and rate table status")
async def health(store: RateStore = Depends(get_rate_store)):
    table = store.peek()
    return {
        "status": "ok",
        "rates": store.status,
        "currencies": len(table) if table is not None else 0,
    }
