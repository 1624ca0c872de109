"""
Conversion Engine - base-mediated cross-rate conversion

All rates are "units of currency X per 1 unit of base", so converting
between two currencies always goes through the base:

    base_amount = amount / rate_from
    result      = base_amount * rate_to

Zero is the "no result" value; the engine never raises and never rounds.
"""

import math

from conversor.models import ConverterInputs


def convert(amount: int, rate_from: float | None, rate_to: float | None) -> float:
    """
    Convert `amount` of the source currency into the target currency.

    Args:
        amount: Quantity of source currency
        rate_from: Source currency units per base unit (None if unknown)
        rate_to: Target currency units per base unit (None if unknown)

    Returns:
        Converted amount, or 0.0 when a rate is missing/zero, amount <= 0,
        or the result does not fit in a finite float
    """
    if not rate_from or not rate_to or amount <= 0:
        return 0.0

    try:
        base_amount = float(amount) / rate_from
    except OverflowError:
        return 0.0
    result = base_amount * rate_to
    return result if math.isfinite(result) else 0.0


def derive_result(inputs: ConverterInputs) -> float:
    """
    Compute the conversion result from a snapshot of converter inputs.

    Unselected currencies, an empty rate table, or a code missing from the
    table all yield 0.0.
    """
    if not inputs.source_currency or not inputs.target_currency or not inputs.rates:
        return 0.0

    return convert(
        inputs.amount,
        inputs.rates.get(inputs.source_currency),
        inputs.rates.get(inputs.target_currency),
    )
