from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel


class RatesOut(BaseModel):
    rates: Dict[str, Dict[str, float]]
    timestamp: str
    base_currencies: List[str]


class HealthOut(BaseModel):
    status: str
    timestamp: str
    service: str
