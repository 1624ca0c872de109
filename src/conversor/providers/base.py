"""
Base Rate Source Interface

A rate source returns one snapshot of base-relative exchange rates.
"""

from abc import ABC, abstractmethod
from typing import Any

from conversor.models import RateTable


class FetchError(Exception):
    """Base exception for rate fetch failures."""

    def __init__(
        self,
        message: str,
        source: str,
        error_type: str = "UNKNOWN",
        details: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.source = source
        self.error_type = error_type
        self.details = details or {}


class FetchTransportError(FetchError):
    """The request never produced a response (DNS, connect, read, timeout)."""

    def __init__(self, message: str, source: str, details: dict[str, Any] | None = None):
        super().__init__(message, source, error_type="TRANSPORT", details=details)


class FetchStatusError(FetchError):
    """The endpoint answered with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        source: str,
        status_code: int,
        details: dict[str, Any] | None = None
    ):
        super().__init__(
            message, source, error_type=f"HTTP_{status_code}", details=details
        )
        self.status_code = status_code


class FetchShapeError(FetchError):
    """The payload is not an object carrying a `rates` object."""

    def __init__(self, message: str, source: str, details: dict[str, Any] | None = None):
        super().__init__(message, source, error_type="PARSE_ERROR", details=details)


class BaseRateSource(ABC):
    """
    Abstract base class for rate sources.

    Implementations make a single attempt per call and never retry.
    """

    SOURCE_NAME: str = "base"

    @abstractmethod
    async def fetch(self) -> RateTable:
        """
        Fetch the latest base-relative rate table.

        Returns:
            Mapping of currency code to rate, in the order the source lists them.

        Raises:
            FetchError: If the fetch fails for any reason
        """
        pass
