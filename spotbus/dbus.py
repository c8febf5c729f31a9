"""
Helpers to reach a local spotifyd daemon through its MPRIS D-Bus interface.

External executables are run through a ProcessRunner so they can be swapped
for a fake.
"""

import logging
import subprocess
from abc import ABC, abstractmethod

from spotbus.errors import DecodeError, ProcessSpawnError

logger = logging.getLogger(__name__)

DAEMON_NAME = "spotifyd"
MPRIS_OBJECT_PATH = "/org/mpris/MediaPlayer2"


class ProcessRunner(ABC):
    @abstractmethod
    def run(self, args) -> bytes:
        """
        Runs args and returns its captured stdout.
        :raises ProcessSpawnError: if the executable cannot be started.
        """


class SubprocessRunner(ProcessRunner):
    def run(self, args) -> bytes:
        logger.debug("Running %s", " ".join(args))
        try:
            completed = subprocess.run(args, stdout=subprocess.PIPE)
        except OSError as e:
            raise ProcessSpawnError(f"failed to execute {args[0]}: {e}") from e
        return completed.stdout


def _decode(output: bytes, what) -> str:
    try:
        return output.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"{what}: invalid UTF-8 in output") from e


def find_daemon_pid(runner=None) -> str:
    """
    Returns the pid of the running spotifyd, or an empty string when it is
    not running. When pgrep lists several instances the first one wins.
    """
    runner = runner or SubprocessRunner()
    pids = _decode(runner.run(["pgrep", DAEMON_NAME]), "pgrep").split()
    if not pids:
        return ""
    if len(pids) > 1:
        logger.warning(
            "Several %s instances running (%s), using %s", DAEMON_NAME, ", ".join(pids), pids[0]
        )
    return pids[0]


def instance_uri(pid) -> str:
    return f"org.mpris.MediaPlayer2.{DAEMON_NAME}.instance{pid}"


def player_method_uri(method) -> str:
    return f"org.mpris.MediaPlayer2.Player.{method}"


def target_uri(uri) -> str:
    return f"string:spotify:{uri}"


def send_dbus_message(instance, method_uri, target, runner=None) -> str:
    """
    Sends method_uri with a single target argument to the given bus name
    and returns the reply printed by dbus-send.
    """
    runner = runner or SubprocessRunner()
    output = runner.run(
        [
            "dbus-send",
            "--print-reply",
            f"--dest={instance}",
            MPRIS_OBJECT_PATH,
            method_uri,
            target,
        ]
    )
    return _decode(output, f"dbus-send {target}")
