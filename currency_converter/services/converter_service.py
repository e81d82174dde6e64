from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict

from currency_converter.models.constants import SERVICE_NAME
from currency_converter.services.clock import utc_timestamp
from currency_converter.services.rates.conversion import (
    ConversionError,
    ConversionResult,
    MissingFields,
    convert,
)
from currency_converter.services.rates.table import RateTable, get_rate_table

"""Conversion service backing the HTTP routers.

Holds a reference to the shared, immutable RateTable; every operation is a
pure function of that table plus the request input, so one instance is
shared process-wide via get_conversion_service().
"""

logger = logging.getLogger("currency_converter.conversion")


class ConversionService:
    def __init__(self, table: RateTable | None = None):
        self._table = table if table is not None else get_rate_table()

    @property
    def table(self) -> RateTable:
        return self._table

    def health(self) -> Dict[str, str]:
        return {
            "status": "healthy",
            "timestamp": utc_timestamp(),
            "service": SERVICE_NAME,
        }

    def list_rates(self) -> Dict[str, Any]:
        return {
            "rates": self._table.as_dict(),
            "timestamp": utc_timestamp(),
            "base_currencies": self._table.base_currencies,
        }

    def convert(self, source: str, target: str, amount: Any) -> ConversionResult:
        try:
            result = convert(source, target, amount, self._table)
        except ConversionError as e:
            logger.info("conversion rejected: %s (%s)", e.code, e.message)
            raise
        logger.debug(
            "converted %s %s -> %s %s at %s",
            result.original_amount,
            result.source,
            result.converted_amount,
            result.target,
            result.exchange_rate,
        )
        return result

    def convert_fields(
        self, source: Any, target: Any, amount: Any, *, has_amount: bool
    ) -> ConversionResult:
        """Body variant: reject absent fields before any amount parsing.

        ``has_amount`` distinguishes an omitted amount from an explicit null,
        which is present and later fails as an invalid amount.
        """
        if not source or not target or not has_amount:
            logger.info("conversion rejected: %s", MissingFields.code)
            raise MissingFields()
        return self.convert(source, target, amount)


# Singleton dependency helper used by FastAPI DI
@lru_cache
def get_conversion_service() -> ConversionService:
    return ConversionService()
