"""
Configuration for the Google Fit step counter.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

CLIENT_SECRET_ENV_VAR = "GOOGLE_CLIENT_SECRET"
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
TOKEN_CACHE_FILE = "tmp_client_token.json"

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure logging - RFC5424 compatible, minimalist, on stderr."""
    level = (level or os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Invalid log level in `{LOG_LEVEL_ENV_VAR}`: {level}")
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@dataclass(frozen=True)
class Settings:
    client_secret_path: str
    token_path: str = TOKEN_CACHE_FILE


def validate_client_secret(client_secret_path: Optional[str]) -> str:
    """Check that the client secret path is set and exists on disk."""
    if not client_secret_path:
        raise ConfigError(f"Missing env variable: `{CLIENT_SECRET_ENV_VAR}`")
    if not os.path.exists(client_secret_path):
        raise ConfigError(f"Invalid Google client secret path: {client_secret_path}")
    return client_secret_path


def load_settings(client_secret_path: Optional[str] = None) -> Settings:
    """Load settings from the environment.

    A ``.env`` file in the working directory is read first; variables already set in
    the environment take precedence over it. An explicit ``client_secret_path`` takes
    precedence over ``GOOGLE_CLIENT_SECRET``.
    """
    load_dotenv(find_dotenv(usecwd=True))

    path = client_secret_path or os.environ.get(CLIENT_SECRET_ENV_VAR)
    settings = Settings(client_secret_path=validate_client_secret(path))
    logger.debug(f"Using Google client secret at {settings.client_secret_path}")
    return settings
