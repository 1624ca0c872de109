"""
Conversor Computation Module

Pure functions only: amount sanitizing and rate conversion.
"""

from conversor.computation.engine import convert, derive_result
from conversor.computation.sanitizer import parse_amount, sanitize

__all__ = [
    "convert",
    "derive_result",
    "parse_amount",
    "sanitize",
]
