"""
Conversor Data Models

RateTable maps a currency code to the number of units of that currency
equal to one unit of the implicit base currency. Every value is a positive,
finite float; an empty table means no rates are available.
"""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

RateTable = dict[str, float]


def is_rate(value: Any) -> bool:
    """True for a positive, finite number (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        rate = float(value)
    except OverflowError:
        return False
    return math.isfinite(rate) and rate > 0


def clean_rate_table(raw: dict[str, Any]) -> tuple[RateTable, list[str]]:
    """
    Keep the usable entries of a raw code -> rate mapping.

    Returns:
        (table in original order, codes that were dropped)
    """
    rates: RateTable = {}
    dropped: list[str] = []
    for code, value in raw.items():
        if is_rate(value):
            rates[code] = float(value)
        else:
            dropped.append(code)
    return rates, dropped


# === Enums ===

class DiagnosticKind(str, Enum):
    """Failure points reported through the diagnostic hook."""
    FETCH_FAILED = "fetch_failed"
    AMOUNT_REJECTED = "amount_rejected"


# === Converter Inputs ===

class ConverterInputs(BaseModel):
    """
    Everything the conversion result depends on.

    A frozen snapshot of the rate table, the two selected currencies and
    the sanitized amount. The result is a pure function of this model.
    """
    rates: RateTable = Field(
        default_factory=dict,
        description="Base-relative rates in source order (empty when unavailable)"
    )
    source_currency: str | None = Field(
        default=None,
        description="Currency being converted from (None when unselected)"
    )
    target_currency: str | None = Field(
        default=None,
        description="Currency being converted to (None when unselected)"
    )
    amount: int = Field(
        default=0,
        ge=0,
        description="Quantity of source currency to convert"
    )

    model_config = {"frozen": True}


# === Diagnostics ===

class DiagnosticEvent(BaseModel):
    """Structured record handed to the diagnostic hook."""
    kind: DiagnosticKind
    message: str
    details: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}
