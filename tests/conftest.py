import json

import pytest
import requests

from spotbus.config import Config
from spotbus.dbus import ProcessRunner

TOKEN_JSON = {"access_token": "T", "token_type": "Bearer", "expires_in": 3600}

KITCHEN_JSON = {
    "id": "d1",
    "is_active": True,
    "is_private_session": False,
    "is_restricted": False,
    "name": "Kitchen",
    "type": "Speaker",
    "volume_percent": 50,
}


def build_response(status_code=200, payload=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload)
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeRunner(ProcessRunner):
    """Stands in for SubprocessRunner, answering by executable name."""

    def __init__(self, outputs=None, error=None):
        self.outputs = outputs or {}
        self.error = error
        self.calls = []

    def run(self, args):
        self.calls.append(list(args))
        if self.error is not None:
            raise self.error
        return self.outputs.get(args[0], b"")


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def config():
    return Config(client_id="my-id", client_secret="my-secret")
