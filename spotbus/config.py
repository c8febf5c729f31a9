import os
import logging
from dataclasses import dataclass, field

from dotenv import load_dotenv

from spotbus.errors import ConfigError

logger = logging.getLogger(__name__)

CLIENT_ID_VAR = "CLIENT_ID"
CLIENT_SECRET_VAR = "CLIENT_SECRET"


@dataclass(frozen=True)
class Config:
    """Spotify application credentials."""

    client_id: str
    client_secret: str = field(repr=False)


def _require(environ, name) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigError(f"{name} environment variable is required")
    return value


def load_config(environ=None) -> Config:
    """
    Reads CLIENT_ID and CLIENT_SECRET. When no mapping is given the local .env
    file is loaded first; variables already set in the process take precedence.
    :raises ConfigError: if either variable is missing or empty.
    """
    if environ is None:
        if load_dotenv():
            logger.debug("Loaded variables from .env")
        environ = os.environ

    return Config(
        client_id=_require(environ, CLIENT_ID_VAR),
        client_secret=_require(environ, CLIENT_SECRET_VAR),
    )
