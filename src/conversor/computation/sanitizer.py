"""
Amount Sanitizer - normalize free-text amounts into non-negative integers

Invalid text is never an error: the caller keeps its previous amount.
"""

import re

# Optional whitespace and sign, then the leading run of digits.
_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")

# Longest amount that still converts to a finite float.
MAX_AMOUNT_DIGITS = 308


def _parse_leading_int(text: str) -> int | None:
    """
    Permissive base-10 parse of the numeric prefix.

    Anything after the leading digits is ignored ("12abc" -> 12,
    "1.9" -> 1). Returns None when there are no leading digits, or more
    significant digits than MAX_AMOUNT_DIGITS.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_AMOUNT_DIGITS:
        return None
    value = int(digits)
    return -value if sign == "-" else value


def parse_amount(raw: str) -> int | None:
    """
    Parse raw amount text.

    Returns:
        The accepted non-negative amount, or None when the text is rejected
        (not a number, or negative).
    """
    if raw == "":
        return 0

    cleaned = raw.lstrip("0") or "0"
    value = _parse_leading_int(cleaned)
    if value is None or value < 0:
        return None
    return value


def sanitize(raw: str, previous: int) -> int:
    """Return the amount for `raw`, or `previous` if `raw` is rejected."""
    value = parse_amount(raw)
    return previous if value is None else value
