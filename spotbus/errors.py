class SpotbusError(Exception):
    """Base class for every error raised by spotbus."""


class ConfigError(SpotbusError):
    """A required credential is missing from the environment."""


class ApiError(SpotbusError):
    """A request to the Spotify Web API failed."""


class NetworkError(ApiError):
    """The request never got a response (DNS, connection, TLS...)."""


class HttpStatusError(ApiError):
    """
    Spotify answered with a non-2xx status. The raw body is kept since the
    accounts and web API endpoints use different error shapes.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class PayloadError(ApiError):
    """The response body was not JSON or did not have the expected shape."""


class ProcessSpawnError(SpotbusError):
    """An external executable (pgrep, dbus-send) could not be started."""


class DecodeError(SpotbusError):
    """Output of an external executable was not valid UTF-8."""
