"""
Display rules for the converter view.

Rounding happens here and only here; the engine keeps full precision.
"""

RATES_UNAVAILABLE_MESSAGE = "Currencies could not be loaded. Check the server log for details."


def format_amount(result: float) -> str:
    """Two-decimal rendering of a converted amount."""
    return f"{result:.2f}"


def amount_text(amount: int) -> str:
    """Amount input text; 0 shows as an empty field."""
    return "" if amount == 0 else str(amount)


def should_show_result(
    result: float,
    source_currency: str | None,
    target_currency: str | None
) -> bool:
    """The result is shown only when positive and both currencies are selected."""
    return result > 0 and bool(source_currency) and bool(target_currency)


def result_text(
    result: float,
    source_currency: str | None,
    target_currency: str | None
) -> str | None:
    """E.g. "1500.00 JPY", or None when the result is hidden."""
    if not should_show_result(result, source_currency, target_currency):
        return None
    return f"{format_amount(result)} {target_currency}"
