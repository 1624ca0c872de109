"""
Conversor API Routes

Each mutating endpoint applies one change to the shared converter state and
answers with the re-derived view.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request, status

from conversor import __version__
from conversor.api.schemas import (
    AmountInput,
    ConverterView,
    CurrencySelection,
    ErrorResponse,
    HealthResponse,
)
from conversor.state import ConverterState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Converter"])

_UNAVAILABLE = {503: {"model": ErrorResponse, "description": "Converter not started"}}


def get_converter(request: Request) -> ConverterState:
    """Resolve the converter created at application startup."""
    converter = getattr(request.app.state, "converter", None)
    if converter is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": {
                    "code": "CONVERTER_NOT_STARTED",
                    "message": "Converter state is not initialized",
                    "details": None,
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }
            }
        )
    return converter


@router.get(
    "/converter",
    response_model=ConverterView,
    summary="Get converter view",
    responses=_UNAVAILABLE,
)
async def get_converter_view(
    converter: ConverterState = Depends(get_converter),
) -> ConverterView:
    return ConverterView.from_state(converter)


@router.put(
    "/converter/source",
    response_model=ConverterView,
    summary="Select source currency",
    responses=_UNAVAILABLE,
)
async def put_source_currency(
    body: CurrencySelection,
    converter: ConverterState = Depends(get_converter),
) -> ConverterView:
    converter.set_source_currency(body.code)
    return ConverterView.from_state(converter)


@router.put(
    "/converter/target",
    response_model=ConverterView,
    summary="Select target currency",
    responses=_UNAVAILABLE,
)
async def put_target_currency(
    body: CurrencySelection,
    converter: ConverterState = Depends(get_converter),
) -> ConverterView:
    converter.set_target_currency(body.code)
    return ConverterView.from_state(converter)


@router.put(
    "/converter/amount",
    response_model=ConverterView,
    summary="Set amount from raw text",
    description="Invalid or negative text keeps the previous amount",
    responses=_UNAVAILABLE,
)
async def put_amount(
    body: AmountInput,
    converter: ConverterState = Depends(get_converter),
) -> ConverterView:
    converter.set_amount(body.raw)
    return ConverterView.from_state(converter)


@router.get(
    "/currencies",
    response_model=list[str],
    summary="List selectable currencies",
    responses=_UNAVAILABLE,
)
async def list_currencies(
    converter: ConverterState = Depends(get_converter),
) -> list[str]:
    return converter.currencies


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    responses=_UNAVAILABLE,
)
async def health_check(
    converter: ConverterState = Depends(get_converter),
) -> HealthResponse:
    """
    Always answers 200: a failed rate fetch degrades the converter but does
    not take it down.
    """
    return HealthResponse(
        status="ok" if converter.has_rates else "degraded",
        version=__version__,
        rates_loaded=converter.has_rates,
        currency_count=len(converter.currencies),
    )
