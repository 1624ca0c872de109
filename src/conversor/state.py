"""
Converter State

Owns the rate table, the currency selection and the amount, and re-derives
the conversion result after every mutation. All mutations happen on one
asyncio event loop; the rate fetch is the only suspension point and never
blocks the mutators.
"""

import asyncio
import logging
from contextlib import suppress

from conversor.computation import derive_result, parse_amount
from conversor.diagnostics import DiagnosticHook, log_diagnostic
from conversor.models import (
    ConverterInputs,
    DiagnosticEvent,
    DiagnosticKind,
    RateTable,
    clean_rate_table,
)
from conversor.providers.base import BaseRateSource, FetchError

logger = logging.getLogger(__name__)


class ConverterState:
    """
    Reactive converter state.

    Construction schedules the single rate fetch on the running event loop,
    so the state must be created from inside a coroutine. Selections and
    amounts set while the fetch is pending are kept and take effect once the
    rates arrive.
    """

    def __init__(
        self,
        source: BaseRateSource,
        on_diagnostic: DiagnosticHook = log_diagnostic
    ):
        self._source = source
        self._on_diagnostic = on_diagnostic

        self._rates: RateTable = {}
        self._source_currency: str | None = None
        self._target_currency: str | None = None
        self._amount = 0
        self._result = 0.0
        self._error: FetchError | None = None

        self._fetch_task = asyncio.get_running_loop().create_task(self._load_rates())

    # Rate loading ------------------------------------------------

    async def _load_rates(self) -> None:
        try:
            rates, dropped = clean_rate_table(await self._source.fetch())
        except FetchError as e:
            self._report_fetch_failure(e)
            return
        except Exception as e:
            error = FetchError(
                message=str(e) or type(e).__name__,
                source=self._source.SOURCE_NAME,
                error_type="UNKNOWN",
                details={"exception": type(e).__name__}
            )
            error.__cause__ = e
            self._report_fetch_failure(error)
            return

        if dropped:
            logger.warning(f"Ignoring {len(dropped)} unusable rates: {dropped}")

        self._commit(rates=rates)
        logger.info(f"Rate table populated with {len(self._rates)} currencies")

    def _report_fetch_failure(self, e: FetchError) -> None:
        self._error = e
        self._on_diagnostic(DiagnosticEvent(
            kind=DiagnosticKind.FETCH_FAILED,
            message=f"Failed to load currencies from {e.source}: {e}",
            details={"source": e.source, "error_type": e.error_type, **e.details},
        ))

    async def ready(self) -> None:
        """Wait until the rate fetch has either succeeded or failed."""
        await asyncio.shield(self._fetch_task)

    async def aclose(self) -> None:
        """Cancel a fetch that is still pending (application shutdown)."""
        if not self._fetch_task.done():
            self._fetch_task.cancel()
            with suppress(asyncio.CancelledError):
                await self._fetch_task

    # Derivation --------------------------------------------------

    def snapshot(self) -> ConverterInputs:
        """Current inputs of the conversion result."""
        return ConverterInputs(
            rates=self._rates,
            source_currency=self._source_currency,
            target_currency=self._target_currency,
            amount=self._amount,
        )

    def _commit(self, **changes) -> None:
        """Derive the result for the changed inputs, then store both."""
        inputs = self.snapshot().model_copy(update=changes)
        result = derive_result(inputs)

        self._rates = dict(inputs.rates)
        self._source_currency = inputs.source_currency
        self._target_currency = inputs.target_currency
        self._amount = inputs.amount
        self._result = result

    # Mutators ----------------------------------------------------

    def set_source_currency(self, code: str | None) -> None:
        """Select the currency to convert from ("" or None unselects)."""
        self._commit(source_currency=code or None)

    def set_target_currency(self, code: str | None) -> None:
        """Select the currency to convert to ("" or None unselects)."""
        self._commit(target_currency=code or None)

    def set_amount(self, raw: str) -> None:
        """
        Set the amount from raw input text.

        Rejected text (not a number, negative, too long) keeps the previous
        amount and is only reported to the diagnostic hook.
        """
        value = parse_amount(raw)
        if value is None:
            self._on_diagnostic(DiagnosticEvent(
                kind=DiagnosticKind.AMOUNT_REJECTED,
                message="Amount input rejected, keeping previous value",
                details={"raw": raw[:64], "previous": self._amount},
            ))
            return

        self._commit(amount=value)

    # Read-only views ---------------------------------------------

    @property
    def rates(self) -> RateTable:
        return dict(self._rates)

    @property
    def currencies(self) -> list[str]:
        """Available codes, in the order the source returned them."""
        return list(self._rates)

    @property
    def source_currency(self) -> str | None:
        return self._source_currency

    @property
    def target_currency(self) -> str | None:
        return self._target_currency

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def result(self) -> float:
        return self._result

    @property
    def has_rates(self) -> bool:
        return bool(self._rates)

    @property
    def is_loading(self) -> bool:
        return not self._fetch_task.done()

    @property
    def fetch_failed(self) -> bool:
        return self._error is not None

    @property
    def error(self) -> FetchError | None:
        return self._error
