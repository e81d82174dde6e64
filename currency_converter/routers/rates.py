from fastapi import APIRouter, Depends

from currency_converter.models.rates import RatesOut
from currency_converter.services.converter_service import (
    ConversionService,
    get_conversion_service,
)

"""Rates router exposing the static rate table.

    - GET /rates -> full table, listing time and the ordered base currencies
"""

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("", response_model=RatesOut, summary="List all exchange rates")
async def list_rates(svc: ConversionService = Depends(get_conversion_service)):
    return svc.list_rates()
