"""Domain constants for the converter.

Currency order here is the order bases are listed in API responses.
"""

from typing import Tuple

SERVICE_NAME = "currency-converter"

CURRENCIES: Tuple[str, ...] = ("USD", "EUR", "GBP", "JPY", "INR", "CAD")
