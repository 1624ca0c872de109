"""
Conversor API Schemas
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from conversor import display
from conversor.state import ConverterState


class ConverterView(BaseModel):
    """Everything the UI needs to render the converter."""
    currencies: list[str] = Field(
        description="Selectable currency codes in source order (empty when rates are unavailable)"
    )
    source_currency: str | None = Field(
        default=None,
        description="Selected source currency (None when unselected)"
    )
    target_currency: str | None = Field(
        default=None,
        description="Selected target currency (None when unselected)"
    )
    amount: int = Field(ge=0, description="Current sanitized amount")
    amount_text: str = Field(
        description="Amount as shown in the input field (empty for 0)"
    )
    result: float = Field(
        ge=0,
        description="Unrounded conversion result (0 when inputs are incomplete)"
    )
    result_text: str | None = Field(
        default=None,
        description="Two-decimal result with target code, when shown"
    )
    show_result: bool = Field(
        description="True when the result is positive and both currencies are selected"
    )
    loading: bool = Field(description="True while the rate fetch is pending")
    show_error: bool = Field(description="True when the rate table is empty")
    error_message: str | None = Field(default=None)

    model_config = {
        "json_schema_extra": {
            "example": {
                "currencies": ["USD", "EUR", "JPY"],
                "source_currency": "USD",
                "target_currency": "JPY",
                "amount": 10,
                "amount_text": "10",
                "result": 1500.0,
                "result_text": "1500.00 JPY",
                "show_result": True,
                "loading": False,
                "show_error": False,
                "error_message": None
            }
        }
    }

    @classmethod
    def from_state(cls, state: ConverterState) -> "ConverterView":
        show_error = not state.has_rates
        return cls(
            currencies=state.currencies,
            source_currency=state.source_currency,
            target_currency=state.target_currency,
            amount=state.amount,
            amount_text=display.amount_text(state.amount),
            result=state.result,
            result_text=display.result_text(
                state.result, state.source_currency, state.target_currency
            ),
            show_result=display.should_show_result(
                state.result, state.source_currency, state.target_currency
            ),
            loading=state.is_loading,
            show_error=show_error,
            error_message=display.RATES_UNAVAILABLE_MESSAGE if show_error else None,
        )


class CurrencySelection(BaseModel):
    """Body of the source/target selection endpoints."""
    code: str | None = Field(
        default=None,
        description="Currency code; null or empty string unselects"
    )


class AmountInput(BaseModel):
    """Body of the amount endpoint."""
    raw: str = Field(description="Raw text typed into the amount field")


class HealthResponse(BaseModel):
    """Health check response for /api/v1/health"""
    status: str = Field(description="ok when rates are loaded, degraded otherwise")
    version: str = Field(description="API version")
    rates_loaded: bool = Field(description="Whether the rate table is populated")
    currency_count: int = Field(ge=0, description="Number of currencies available")

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "ok",
                "version": "1.0.0",
                "rates_loaded": True,
                "currency_count": 165
            }
        }
    }


class ErrorDetail(BaseModel):
    """Error detail information."""
    code: str = Field(description="Error code")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error details"
    )
    timestamp: datetime = Field(description="Error timestamp")


class ErrorResponse(BaseModel):
    """Error envelope returned with non-2xx responses."""
    error: ErrorDetail
