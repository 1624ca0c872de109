"""
Conversor API Module
"""

from conversor.api.routes import router
from conversor.api.schemas import (
    ConverterView,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    "router",
    "ConverterView",
    "HealthResponse",
    "ErrorResponse",
]
