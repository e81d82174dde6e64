from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from currency_converter.services.clock import utc_timestamp
from currency_converter.services.money import round4
from .table import RateTable

"""Direct currency conversion over a RateTable.

Centralizes the validation shared by every conversion entry point:
    1. amount must parse to a positive finite number
    2. the source currency must be a base of the table
    3. the target currency must be quoted by that base
First failure wins. Rounding (round4) is applied once, here.
"""

# Leading numeric prefix, the way lenient float parsers read "12.5kg" as 12.5.
_NUMERIC_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ConversionError(Exception):
    """Base class for conversion failures reported back to the caller."""

    code = "conversion_error"

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra: Dict[str, Any] = extra


class InvalidAmount(ConversionError):
    code = "invalid_amount"

    def __init__(self) -> None:
        super().__init__("Invalid amount. Please provide a positive number.")


class MissingFields(ConversionError):
    code = "missing_fields"

    def __init__(self) -> None:
        super().__init__("Missing required fields: from, to, amount")


class UnsupportedCurrency(ConversionError):
    code = "unsupported_currency"

    def __init__(self, currency: str, supported: list[str]):
        super().__init__(
            f"Unsupported currency: {currency}", supported_currencies=supported
        )


class UnavailableConversion(ConversionError):
    code = "unavailable_conversion"

    def __init__(self, source: str, target: str, available: list[str]):
        super().__init__(
            f"Conversion from {source} to {target} not available",
            available_conversions=available,
        )


@dataclass(frozen=True)
class ConversionResult:
    source: str
    target: str
    original_amount: float
    converted_amount: float
    exchange_rate: float
    timestamp: str = field(default_factory=utc_timestamp)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "original_amount": self.original_amount,
            "converted_amount": self.converted_amount,
            "exchange_rate": self.exchange_rate,
            "timestamp": self.timestamp,
        }


def parse_amount(raw: Any) -> Optional[float]:
    """Return ``raw`` as a float, or None when it is not a number.

    Strings are read up to the end of their leading numeric prefix; anything
    after it is ignored. Booleans and other types are never numbers.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    elif isinstance(raw, str):
        match = _NUMERIC_PREFIX.match(raw)
        if not match:
            return None
        value = float(match.group(1))
    else:
        return None
    if math.isnan(value):
        return None
    return value


def convert(source: str, target: str, amount: Any, table: RateTable) -> ConversionResult:
    value = parse_amount(amount)
    if value is None or value <= 0 or not math.isfinite(value):
        raise InvalidAmount()

    source = source.upper()
    target = target.upper()

    if source not in table:
        raise UnsupportedCurrency(source, table.base_currencies)

    rate = table.get_rate(source, target)
    if rate is None:
        raise UnavailableConversion(source, target, list(table.targets(source)))

    converted = value * rate
    if not math.isfinite(converted):
        raise InvalidAmount()

    return ConversionResult(
        source=source,
        target=target,
        original_amount=value,
        converted_amount=round4(converted),
        exchange_rate=rate,
    )
