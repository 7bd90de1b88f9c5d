"""
Bounded retry policy used by the fetcher.

The policy knows nothing about HTTP: it calls an attempt function that
returns a Success or a Failure, and sleeps between failed attempts with
whatever sleep primitive it is given.
"""

import logging
import time
from typing import Callable

from .errors import TransientFetchError
from .models import FetchAttemptState, Failure, Result, Success

logger = logging.getLogger(__name__)


def retry(
    attempt_fn: Callable[[FetchAttemptState], Result],
    max_attempts: int,
    backoff: float,
    sleep: Callable[[float], None] = time.sleep,
) -> Result:
    """Run ``attempt_fn`` until it succeeds, fails fatally, or runs out of attempts.

    Args:
        attempt_fn: Called once per attempt with the current FetchAttemptState.
        max_attempts: Upper bound on calls to ``attempt_fn`` (at least 1).
        backoff: Seconds to sleep between two failed attempts.
        sleep: Sleep primitive, replaceable for tests.

    Returns:
        The first Success, the first non-retryable Failure, or a Failure
        wrapping TransientFetchError once every attempt failed.
    """
    last_failure = None

    for attempt in range(1, max_attempts + 1):
        state = FetchAttemptState(attempt, max_attempts, backoff)
        outcome = attempt_fn(state)

        if outcome.ok:
            logger.info(f"Succeeded on attempt {attempt}/{max_attempts}")
            return Success(outcome.value, attempts=attempt)

        if not outcome.retryable:
            return outcome

        last_failure = outcome
        logger.warning(f"Attempt {attempt}/{max_attempts} failed: {outcome.error}")

        if state.is_last:
            break

        logger.info(f"Waiting {backoff}s before the next attempt")
        try:
            sleep(backoff)
        except InterruptedError:
            logger.warning("Backoff interrupted, moving on to the next attempt")

    cause = last_failure.error if last_failure else "no attempt was made"
    logger.error(f"All {max_attempts} attempts failed, last cause: {cause}")
    return Failure(TransientFetchError(max_attempts, str(cause)))
