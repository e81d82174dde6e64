from typing import Optional

from fastapi import APIRouter, Depends, Path

from currency_converter.models.conversion import ConversionOut, ConvertPayload, ErrorOut
from currency_converter.services.converter_service import (
    ConversionService,
    get_conversion_service,
)

"""Conversion router.

Endpoints:
    - GET /convert/{source}/{target}/{amount} -> convert from path segments
    - POST /convert                           -> convert from JSON {from, to, amount}

Both delegate to ConversionService; failures are raised as ConversionError and
rendered as 400 responses by the handler registered in create_app().
"""

router = APIRouter(prefix="/convert", tags=["convert"])

_ERROR_RESPONSES = {400: {"model": ErrorOut, "description": "Conversion rejected"}}


@router.get(
    "/{source}/{target}/{amount}",
    response_model=ConversionOut,
    responses=_ERROR_RESPONSES,
    summary="Convert an amount given in the URL path",
)
async def convert_path(
    source: str = Path(..., description="Source currency code", examples=["USD"]),
    target: str = Path(..., description="Target currency code", examples=["EUR"]),
    amount: str = Path(..., description="Positive amount", examples=["100"]),
    svc: ConversionService = Depends(get_conversion_service),
):
    return svc.convert(source, target, amount).as_dict()


@router.post(
    "",
    response_model=ConversionOut,
    responses=_ERROR_RESPONSES,
    summary="Convert an amount given in a JSON body",
)
async def convert_body(
    payload: Optional[ConvertPayload] = None,
    svc: ConversionService = Depends(get_conversion_service),
):
    payload = payload or ConvertPayload()
    return svc.convert_fields(
        payload.from_currency,
        payload.to_currency,
        payload.amount,
        has_amount=payload.has_amount,
    ).as_dict()
