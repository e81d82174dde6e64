from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ConvertPayload(BaseModel):
    """Body of POST /convert.

    Fields stay optional so absent values surface as a missing-fields error
    rather than a schema error; amount is left untyped because both numbers
    and numeric strings are accepted.
    """

    model_config = ConfigDict(populate_by_name=True)

    from_currency: Optional[str] = Field(
        None, alias="from", description="Source currency code", examples=["USD"]
    )
    to_currency: Optional[str] = Field(
        None, alias="to", description="Target currency code", examples=["EUR"]
    )
    amount: Optional[Any] = Field(
        None, description="Positive amount, number or numeric string", examples=[100]
    )

    @property
    def has_amount(self) -> bool:
        return "amount" in self.model_fields_set


class ConversionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_currency: str = Field(..., alias="from")
    to_currency: str = Field(..., alias="to")
    original_amount: float
    converted_amount: float
    exchange_rate: float
    timestamp: str


class ErrorOut(BaseModel):
    error: str
    code: str
    timestamp: str
    supported_currencies: Optional[List[str]] = None
    available_conversions: Optional[List[str]] = None
    details: Optional[List[Dict[str, Any]]] = None
