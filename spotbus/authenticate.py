import logging

import requests

from spotbus.access_token import AuthToken
from spotbus.config import load_config
from spotbus.errors import NetworkError
from spotbus.payload import read_json

logger = logging.getLogger(__name__)

TOKEN_URL = "https://accounts.spotify.com/api/token"


def fetch_token(config=None) -> AuthToken:
    """
    Requests an access token from the Spotify accounts service using the
    client credentials grant. Nothing is cached, every call hits the network.
    """
    if config is None:
        config = load_config()

    logger.debug("Requesting client credentials token for %s", config.client_id)
    try:
        response = requests.post(
            TOKEN_URL,
            data={
                "grant_type": "client_credentials",
                "client_id": config.client_id,
                "client_secret": config.client_secret,
            },
        )
    except requests.RequestException as e:
        raise NetworkError(f"token request failed: {e}") from e

    return AuthToken.from_json(read_json(response, "token"))
