from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: float = Field(
        0.0, allow_inf_nan=False, description="Amount in the source currency"
    )
    from_code: str = Field(..., alias="from", description="Source currency (e.g. USD)")
    to_code: str = Field(..., alias="to", description="Target currency (e.g. INR)")

    @field_validator("from_code", "to_code")
    @classmethod
    def normalize_code(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("currency code must not be empty")
        return v.upper()


class ConversionOut(BaseModel):
    amount: float
    from_code: str = Field(..., serialization_alias="from")
    to_code: str = Field(..., serialization_alias="to")
    rate: float
    converted: float
    display: str


class RateTableOut(BaseModel):
    base: str
    source: Optional[str] = None
    published: Optional[str] = None
    rates: Dict[str, float]
