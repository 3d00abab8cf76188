"""
Fixed-delay retry for PaySimple API calls.

A call gets a budget of N attempts. With N <= 1 the call is made once and
any failure propagates unchanged. Otherwise the call is attempted up to N
times with a fixed sleep between attempts; every failure is kept, and if
the budget runs out the caller gets an AggregateFailure listing all of them
in attempt order.

Only transport-level failures are retried. ConfigurationError and anything
else propagate on the first occurrence.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable

from paysimple.errors import AggregateFailure, PaySimpleError, RemoteError, TransportError

logger = logging.getLogger("paysimple.retry")

RETRIABLE_ERRORS = (RemoteError, TransportError)
DEFAULT_DELAY = 1.0

Sleep = Callable[[float], Awaitable[Any]]


async def with_retry(
    func: Callable[..., Awaitable[Any]],
    *args: Any,
    attempts: int = 1,
    delay: float = DEFAULT_DELAY,
    sleep: Sleep = asyncio.sleep,
    **kwargs: Any,
) -> Any:
    """
    Execute an async function, retrying transport failures with a fixed delay.

    Args:
        func: Async callable to execute.
        attempts: Total attempt budget.
        delay: Seconds to wait between attempts (never before the first).
        sleep: Awaitable sleep, replaceable in tests.

    Returns:
        The result of the first successful call.

    Raises:
        RemoteError, TransportError: When attempts <= 1 and the call fails.
        AggregateFailure: When attempts > 1 and every attempt failed.
    """
    if attempts <= 1:
        return await func(*args, **kwargs)

    errors: list[PaySimpleError] = []

    for attempt in range(attempts):
        if attempt > 0:
            await sleep(delay)

        try:
            return await func(*args, **kwargs)
        except RETRIABLE_ERRORS as e:
            errors.append(e)
            logger.warning(
                "Attempt %d/%d failed: %s",
                attempt + 1,
                attempts,
                e,
            )

    logger.error("Exhausted %d attempts; last error: %s", attempts, errors[-1])
    raise AggregateFailure(errors)
