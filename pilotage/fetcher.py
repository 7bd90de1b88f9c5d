"""
Resilient HTML fetcher for the pilotage schedule page.

Each attempt is a single blocking GET. Network trouble (timeouts, refused
connections, DNS failures, non-2xx answers) is treated as transient and
retried with a fixed backoff; a URL that cannot even be requested is a
configuration problem and fails on the first attempt.
"""

import logging
import time

import requests
from bs4 import BeautifulSoup

from .config.settings import DEFAULT_USER_AGENT
from .errors import ConfigurationError
from .http_client import spoof_get
from .models import Failure, Result, Success
from .retry import retry

logger = logging.getLogger(__name__)

# Raised before any network I/O when the URL or the headers are unusable.
# urllib3 reports unparseable hosts with LocationParseError, a bare ValueError.
CONFIGURATION_EXCEPTIONS = (
    requests.exceptions.InvalidHeader,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.URLRequired,
    ValueError,
)


class HtmlFetcher:
    """Fetch and parse the schedule page with bounded retry.

    Args:
        url: Page to download.
        timeout: Per-attempt timeout in seconds.
        max_attempts: Total attempts allowed, at least 1.
        backoff: Seconds to wait between attempts, at least 0.
        user_agent: Declared client identification sent with every request.
        sleep: Sleep primitive used between attempts.

    Example:
        >>> fetcher = HtmlFetcher("https://example.com/schedule", timeout=10)
        >>> soup = fetcher.fetch()
    """

    def __init__(
        self,
        url,
        timeout=10.0,
        max_attempts=3,
        backoff=2.0,
        user_agent=DEFAULT_USER_AGENT,
        sleep=time.sleep,
    ):
        if max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be at least 1, got {max_attempts}")
        if backoff < 0:
            raise ConfigurationError(f"backoff must not be negative, got {backoff}")
        if timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout}")

        self._url = url
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._user_agent = user_agent
        self._sleep = sleep

    @property
    def url(self):
        return self._url

    @property
    def timeout(self):
        return self._timeout

    @property
    def max_attempts(self):
        return self._max_attempts

    @property
    def backoff(self):
        return self._backoff

    @property
    def user_agent(self):
        return self._user_agent

    def fetch(self) -> BeautifulSoup:
        """Return the parsed page or raise ConfigurationError / TransientFetchError."""
        return self.fetch_result().unwrap()

    def fetch_result(self) -> Result:
        """Fetch the page and report the outcome as a Success or a Failure."""
        return retry(self._attempt, self._max_attempts, self._backoff, sleep=self._sleep)

    def _attempt(self, state) -> Result:
        logger.info(
            f"Attempt {state.attempt}/{state.max_attempts} to fetch HTML from: {self._url}"
        )
        try:
            response = spoof_get(
                self._url,
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except CONFIGURATION_EXCEPTIONS as e:
            logger.error(f"Invalid request for URL '{self._url}', check the configuration: {e}")
            return Failure(
                ConfigurationError(f"Configured URL or headers are invalid: {self._url} ({e})")
            )
        except requests.RequestException as e:
            return Failure(e, retryable=True)

        logger.debug(f"Received {len(response.content)} bytes from {self._url}")
        return Success(BeautifulSoup(response.text, "html.parser"))
