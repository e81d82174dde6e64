from fastapi import APIRouter, Depends

from currency_converter.models.rates import HealthOut
from currency_converter.services.converter_service import (
    ConversionService,
    get_conversion_service,
)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut, summary="Service liveness")
async def health(svc: ConversionService = Depends(get_conversion_service)):
    return svc.health()
