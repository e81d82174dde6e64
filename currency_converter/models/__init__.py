"""Pydantic request/response models for the currency converter API."""

from .constants import CURRENCIES, SERVICE_NAME  # re-export
from .conversion import ConversionOut, ConvertPayload, ErrorOut
from .rates import HealthOut, RatesOut

__all__ = [
    "CURRENCIES",
    "SERVICE_NAME",
    "ConversionOut",
    "ConvertPayload",
    "ErrorOut",
    "HealthOut",
    "RatesOut",
]
