"""
Runtime settings, read from a .env file and environment variables with sane defaults.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import dotenv_values

from .urls import PILOTAGE_SCHEDULE_URL

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_BACKOFF = 2.0
DEFAULT_USER_AGENT = "PilotageTrackerBot/1.0 (+https://github.com/pilotage-tracker)"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 7000
DEFAULT_ENV_FILE = ".env"


@dataclass(frozen=True)
class Settings:
    url: str = PILOTAGE_SCHEDULE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    backoff: float = DEFAULT_BACKOFF
    user_agent: str = DEFAULT_USER_AGENT
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def _get(environ, key, default):
    value = environ.get(key)
    if value is None or value.strip() == "":
        logger.debug(f"Setting {key} not set, using default: {default}")
        return default
    logger.debug(f"Setting {key} read from environment: {value}")
    return value.strip()


def _get_number(environ, key, default, cast):
    value = _get(environ, key, None)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError:
        logger.warning(f"Invalid value for {key}: '{value}'. Using default: {default}")
        return default


def read_env_file(env_file) -> dict:
    """Key/value pairs from a dotenv file, or nothing when it does not exist."""
    if not env_file or not os.path.isfile(env_file):
        return {}
    values = {key: value for key, value in dotenv_values(env_file).items() if value is not None}
    logger.info(f"Settings file {env_file} loaded ({len(values)} values)")
    return values


def load_settings(environ=None, env_file=DEFAULT_ENV_FILE) -> Settings:
    """Build Settings from ``env_file`` overlaid with the environment.

    Environment variables (``os.environ`` unless ``environ`` is given) win
    over values from the dotenv file, which win over the defaults.
    """
    environ = os.environ if environ is None else environ
    environ = {**read_env_file(env_file), **environ}
    settings = Settings(
        url=_get(environ, "PILOTAGE_URL", PILOTAGE_SCHEDULE_URL),
        timeout=_get_number(environ, "PILOTAGE_TIMEOUT", DEFAULT_TIMEOUT, float),
        max_attempts=_get_number(environ, "PILOTAGE_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS, int),
        backoff=_get_number(environ, "PILOTAGE_BACKOFF", DEFAULT_BACKOFF, float),
        user_agent=_get(environ, "PILOTAGE_USER_AGENT", DEFAULT_USER_AGENT),
        host=_get(environ, "SERVER_HOST", DEFAULT_HOST),
        port=_get_number(environ, "SERVER_PORT", DEFAULT_PORT, int),
        log_level=_get(environ, "LOG_LEVEL", "INFO").upper(),
    )
    logger.info(
        f"Settings loaded: url={settings.url}, timeout={settings.timeout}s, "
        f"max_attempts={settings.max_attempts}, backoff={settings.backoff}s"
    )
    return settings
