"""
Shared HTTP client functionality for the fetcher.
"""

import requests
from fake_useragent import UserAgent
import logging

logger = logging.getLogger(__name__)

# Get an up-to-date fake useragent
ua = UserAgent()


def spoof_get(url, **kwargs):
    """
    Performs a GET request to the given URL, identifying the client.

    Args:
        url (str): The URL to make a GET request to
        **kwargs: Additional keyword arguments passed to requests.get

    Returns:
        requests.Response: The response object

    A caller-supplied User-Agent header is kept as is; when none is given
    (or it is empty) a random browser User-Agent is used instead.
    """
    headers = dict(kwargs.pop("headers", None) or {})
    if not headers.get("User-Agent"):
        headers["User-Agent"] = ua.random

    logger.debug(f"Making request to: {url}")
    logger.debug(f"Using User-Agent: {headers['User-Agent']}")

    return requests.get(url, headers=headers, **kwargs)
