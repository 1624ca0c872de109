"""
Conversor Rate Sources Module
"""

from conversor.providers.base import (
    BaseRateSource,
    FetchError,
    FetchShapeError,
    FetchStatusError,
    FetchTransportError,
)
from conversor.providers.fxratesapi import FxRatesApiClient

__all__ = [
    "BaseRateSource",
    "FetchError",
    "FetchShapeError",
    "FetchStatusError",
    "FetchTransportError",
    "FxRatesApiClient",
]
