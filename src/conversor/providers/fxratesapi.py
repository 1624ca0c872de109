"""
FXRatesAPI Client

Fetches the latest rate table with a single GET.
Response format: {"base": "USD", "date": "...", "rates": {"EUR": 0.9, "JPY": 150.1, ...}}
"""

import logging
from typing import Any

import httpx

from conversor.config import Settings, get_settings
from conversor.models import RateTable, clean_rate_table
from conversor.providers.base import (
    BaseRateSource,
    FetchError,
    FetchShapeError,
    FetchStatusError,
    FetchTransportError,
)

logger = logging.getLogger(__name__)


class FxRatesApiClient(BaseRateSource):
    """
    Client for the FXRatesAPI `latest` endpoint.

    One attempt per fetch, no retry. The httpx transport can be swapped out
    (e.g. for `httpx.MockTransport`) without touching the request logic.
    """

    SOURCE_NAME = "fxratesapi"

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        self.settings = settings or get_settings()
        self.endpoint_url = self.settings.rates_endpoint_url
        self._transport = transport

    async def fetch(self) -> RateTable:
        """
        Fetch the latest rates.

        Returns:
            Currency code -> rate, in payload order. Entries that are not
            positive finite numbers are dropped.

        Raises:
            FetchTransportError: Network-level failure
            FetchStatusError: Non-success HTTP status
            FetchShapeError: Body is not JSON or lacks a `rates` object
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.http_timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self.endpoint_url)
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            raise FetchStatusError(
                message=f"HTTP error: {e.response.status_code}",
                source=self.SOURCE_NAME,
                status_code=e.response.status_code,
                details={"url": str(e.request.url)}
            ) from e

        except httpx.TransportError as e:
            raise FetchTransportError(
                message=f"Transport error: {e!r}",
                source=self.SOURCE_NAME,
                details={"url": self.endpoint_url}
            ) from e

        except ValueError as e:
            raise FetchShapeError(
                message="Invalid response: body is not JSON",
                source=self.SOURCE_NAME,
                details={"url": self.endpoint_url}
            ) from e

        except Exception as e:
            if isinstance(e, FetchError):
                raise
            raise FetchError(
                message=str(e),
                source=self.SOURCE_NAME,
                error_type="UNKNOWN",
                details={}
            ) from e

        rates = self._parse_rates(data)
        logger.info(f"✅ {self.SOURCE_NAME} fetched {len(rates)} rates")
        return rates

    def _parse_rates(self, data: Any) -> RateTable:
        """Validate the payload shape and keep the usable rate entries."""
        if not isinstance(data, dict) or "rates" not in data:
            raise FetchShapeError(
                message="Invalid response: missing 'rates' field",
                source=self.SOURCE_NAME,
                details={"response_type": type(data).__name__}
            )

        raw_rates = data["rates"]
        if not isinstance(raw_rates, dict):
            raise FetchShapeError(
                message="Invalid response: 'rates' is not an object",
                source=self.SOURCE_NAME,
                details={"rates_type": type(raw_rates).__name__}
            )

        rates, skipped = clean_rate_table(raw_rates)

        if skipped:
            logger.warning(
                f"{self.SOURCE_NAME} dropped {len(skipped)} unusable rates: {skipped}"
            )

        return rates
