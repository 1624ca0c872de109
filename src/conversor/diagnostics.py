"""
Diagnostic hook

The converter reports its two failure points (a failed rate fetch and a
rejected amount) through a single callable instead of logging from every
handler. The default hook writes them to the standard logger.
"""

import logging
from typing import Callable

from conversor.models import DiagnosticEvent, DiagnosticKind

logger = logging.getLogger(__name__)

DiagnosticHook = Callable[[DiagnosticEvent], None]


def log_diagnostic(event: DiagnosticEvent) -> None:
    """
    Default hook.

    Fetch failures are logged as errors. Rejected amounts are expected user
    input and only show up at DEBUG level.
    """
    if event.kind is DiagnosticKind.FETCH_FAILED:
        logger.error(f"❌ {event.message} {event.details}")
    else:
        logger.debug(f"{event.message} {event.details}")
