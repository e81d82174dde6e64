from __future__ import annotations

"""Static exchange rate table.

Rates are target units per 1 unit of base. The figures are fixed placeholders
and deliberately not reciprocal-consistent (USD->EUR 0.85 vs EUR->USD 1.18);
lookups are direct only.
"""
import math
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, List, Mapping

from currency_converter.models.constants import CURRENCIES

_STATIC_RATES: Dict[str, Dict[str, float]] = {
    "USD": {"EUR": 0.85, "GBP": 0.73, "JPY": 110.0, "INR": 74.5, "CAD": 1.25},
    "EUR": {"USD": 1.18, "GBP": 0.86, "JPY": 129.5, "INR": 87.8, "CAD": 1.47},
    "GBP": {"USD": 1.37, "EUR": 1.16, "JPY": 150.8, "INR": 102.1, "CAD": 1.71},
    "JPY": {"USD": 0.0091, "EUR": 0.0077, "GBP": 0.0066, "INR": 0.68, "CAD": 0.011},
    "INR": {"USD": 0.013, "EUR": 0.011, "GBP": 0.0098, "JPY": 1.47, "CAD": 0.017},
    "CAD": {"USD": 0.80, "EUR": 0.68, "GBP": 0.58, "JPY": 88.0, "INR": 59.6},
}


class RateTable:
    """Read-only ``base -> (target -> rate)`` mapping.

    Construction validates that every base quotes every other base with a
    positive finite rate and never itself. After that the table cannot be
    changed: the inner mappings are exposed through ``MappingProxyType``.
    """

    def __init__(self, rates: Mapping[str, Mapping[str, float]]):
        bases = [b.upper() for b in rates]
        frozen: Dict[str, Mapping[str, float]] = {}
        for base, quotes in rates.items():
            base = base.upper()
            targets = {q.upper(): float(r) for q, r in quotes.items()}
            if base in targets:
                raise ValueError(f"rate table quotes {base} against itself")
            expected = set(bases) - {base}
            if set(targets) != expected:
                missing = sorted(expected - set(targets))
                extra = sorted(set(targets) - expected)
                raise ValueError(
                    f"rate table entry {base} must quote every other base "
                    f"(missing={missing}, unknown={extra})"
                )
            for quote, rate in targets.items():
                if not math.isfinite(rate) or rate <= 0:
                    raise ValueError(f"rate {base}->{quote} must be positive, got {rate}")
            frozen[base] = MappingProxyType(targets)
        self._rates: Mapping[str, Mapping[str, float]] = MappingProxyType(frozen)

    def __contains__(self, base: object) -> bool:
        return base in self._rates

    def __len__(self) -> int:
        return len(self._rates)

    @property
    def base_currencies(self) -> List[str]:
        return list(self._rates)

    def targets(self, base: str) -> Mapping[str, float]:
        """Quotes for ``base``; raises KeyError for an unknown base."""
        return self._rates[base]

    def get_rate(self, base: str, quote: str) -> float | None:
        quotes = self._rates.get(base)
        if quotes is None:
            return None
        return quotes.get(quote)

    def as_dict(self) -> Dict[str, Dict[str, float]]:
        return {base: dict(quotes) for base, quotes in self._rates.items()}


@lru_cache
def get_rate_table() -> RateTable:
    return RateTable({code: _STATIC_RATES[code] for code in CURRENCIES})
