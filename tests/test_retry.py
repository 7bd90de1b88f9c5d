import pytest

from pilotage.errors import ConfigurationError, TransientFetchError
from pilotage.models import Failure, Success
from pilotage.retry import retry


def scripted(*outcomes):
    """Attempt function returning the given outcomes in order, recording states."""
    states = []
    queue = list(outcomes)

    def attempt(state):
        states.append(state)
        return queue.pop(0)

    attempt.states = states
    return attempt


def test_success_on_first_attempt_does_not_sleep(sleeps):
    attempt = scripted(Success("page"))

    result = retry(attempt, max_attempts=3, backoff=2.0, sleep=sleeps)

    assert result == Success("page", attempts=1)
    assert sleeps.calls == []


def test_success_after_transient_failures_records_attempt(sleeps):
    attempt = scripted(
        Failure(IOError("timeout"), retryable=True),
        Failure(IOError("timeout"), retryable=True),
        Success("page"),
    )

    result = retry(attempt, max_attempts=3, backoff=0.5, sleep=sleeps)

    assert result.ok
    assert result.attempts == 3
    assert sleeps.calls == [0.5, 0.5]


@pytest.mark.parametrize("max_attempts", [1, 2, 3, 5])
def test_exhaustion_makes_exactly_max_attempts_with_sleeps_between(sleeps, max_attempts):
    attempt = scripted(*[Failure(IOError("down"), retryable=True)] * max_attempts)

    result = retry(attempt, max_attempts=max_attempts, backoff=2.0, sleep=sleeps)

    assert not result.ok
    assert isinstance(result.error, TransientFetchError)
    assert result.error.attempts == max_attempts
    assert result.error.cause == "down"
    assert len(attempt.states) == max_attempts
    assert sleeps.calls == [2.0] * (max_attempts - 1)


def test_non_retryable_failure_stops_immediately(sleeps):
    fatal = Failure(ConfigurationError("bad url"))
    attempt = scripted(fatal, Success("never reached"))

    result = retry(attempt, max_attempts=3, backoff=2.0, sleep=sleeps)

    assert result is fatal
    assert len(attempt.states) == 1
    assert sleeps.calls == []


def test_interrupted_sleep_moves_to_next_attempt():
    calls = []

    def interrupted_sleep(seconds):
        calls.append(seconds)
        raise InterruptedError()

    attempt = scripted(
        Failure(IOError("reset"), retryable=True),
        Failure(IOError("reset"), retryable=True),
        Success("page"),
    )

    result = retry(attempt, max_attempts=3, backoff=1.0, sleep=interrupted_sleep)

    assert result.ok
    assert len(calls) == 2


def test_attempt_state_is_one_based_and_marks_last(sleeps):
    attempt = scripted(*[Failure(IOError("down"), retryable=True)] * 3)

    retry(attempt, max_attempts=3, backoff=0, sleep=sleeps)

    assert [s.attempt for s in attempt.states] == [1, 2, 3]
    assert [s.is_last for s in attempt.states] == [False, False, True]
    assert all(s.max_attempts == 3 for s in attempt.states)
