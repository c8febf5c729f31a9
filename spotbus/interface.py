import logging

import requests

from spotbus.authenticate import fetch_token
from spotbus.config import load_config
from spotbus.dbus import (
    DAEMON_NAME,
    SubprocessRunner,
    find_daemon_pid,
    instance_uri,
    player_method_uri,
    send_dbus_message,
    target_uri,
)
from spotbus.device import Devices
from spotbus.errors import NetworkError
from spotbus.payload import read_json

logger = logging.getLogger(__name__)

DEVICES_URL = "https://api.spotify.com/v1/me/player/devices"


def fetch_devices(access_token: str) -> Devices:
    """
    Lists the playback devices visible to the given bearer token.
    """
    logger.debug("Requesting %s", DEVICES_URL)
    try:
        response = requests.get(
            DEVICES_URL, headers={"Authorization": f"Bearer {access_token}"}
        )
    except requests.RequestException as e:
        raise NetworkError(f"devices request failed: {e}") from e

    devices = Devices.from_json(read_json(response, "devices"))
    logger.debug("Found %d device(s)", len(devices.devices))
    return devices


class Spotbus:
    """
    Ties together the Web API calls and the local spotifyd helpers for the
    command line.
    """

    def __init__(self, config=None, runner=None):
        self.config = config
        self.runner = runner or SubprocessRunner()

    def get_devices(self) -> Devices:
        """
        Fetches a fresh token and lists devices with it.
        :raises ConfigError: if credentials are missing.
        :raises ApiError: if either request fails.
        """
        if self.config is None:
            self.config = load_config()
        token = fetch_token(self.config)
        return fetch_devices(token.access_token)

    def daemon_pid(self) -> str:
        return find_daemon_pid(runner=self.runner)

    def send(self, method, uri):
        """
        Sends Player.<method> with spotify:<uri> to the running spotifyd.
        :return: the dbus-send reply, or None if spotifyd is not running.
        """
        pid = self.daemon_pid()
        if not pid:
            logger.warning("%s is not running", DAEMON_NAME)
            return None
        return send_dbus_message(
            instance_uri(pid),
            player_method_uri(method),
            target_uri(uri),
            runner=self.runner,
        )
