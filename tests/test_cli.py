from unittest.mock import patch

from click.testing import CliRunner

from spotbus.cli import spotbus
from spotbus.errors import ProcessSpawnError
from spotbus.interface import Spotbus

from conftest import FakeRunner, KITCHEN_JSON, TOKEN_JSON


class TestListDevices:
    def test_prints_devices(self, make_response):
        env = {"CLIENT_ID": "my-id", "CLIENT_SECRET": "my-secret"}
        with patch("spotbus.config.load_dotenv"), \
                patch("requests.post", return_value=make_response(payload=TOKEN_JSON)), \
                patch("requests.get", return_value=make_response(payload={"devices": [KITCHEN_JSON]})):
            result = CliRunner().invoke(spotbus, [], env=env)

        assert result.exit_code == 0
        assert "Device(" in result.output
        assert "id='d1'" in result.output
        assert "name='Kitchen'" in result.output
        assert "kind='Speaker'" in result.output
        assert "volume_percent=50" in result.output
        assert "my-secret" not in result.output

    def test_token_error_is_printed_with_zero_exit(self, config, make_response):
        response = make_response(400, {"error": "invalid_client"})
        with patch("requests.post", return_value=response), patch("requests.get") as get:
            result = CliRunner().invoke(spotbus, [], obj=Spotbus(config=config))

        assert result.exit_code == 0
        assert "HttpStatusError" in result.output
        get.assert_not_called()

    def test_missing_credentials_exit_non_zero(self):
        env = {"CLIENT_ID": "", "CLIENT_SECRET": ""}
        with patch("spotbus.config.load_dotenv"), patch("requests.post") as post:
            result = CliRunner().invoke(spotbus, [], env=env)

        assert result.exit_code == 1
        assert "CLIENT_ID environment variable is required" in result.output
        post.assert_not_called()


class TestPid:
    def test_prints_pid(self):
        obj = Spotbus(runner=FakeRunner({"pgrep": b"1234\n"}))
        result = CliRunner().invoke(spotbus, ["pid"], obj=obj)
        assert result.exit_code == 0
        assert result.output == "1234\n"

    def test_not_running(self):
        result = CliRunner().invoke(spotbus, ["pid"], obj=Spotbus(runner=FakeRunner()))
        assert result.exit_code == 0
        assert "spotifyd is not running" in result.output

    def test_pgrep_missing(self):
        runner = FakeRunner(error=ProcessSpawnError("failed to execute pgrep"))
        result = CliRunner().invoke(spotbus, ["pid"], obj=Spotbus(runner=runner))
        assert result.exit_code == 1
        assert "failed to execute pgrep" in result.output


class TestSend:
    def test_sends_method(self):
        runner = FakeRunner({"pgrep": b"77\n", "dbus-send": b"method return\n"})
        result = CliRunner().invoke(
            spotbus, ["send", "OpenUri", "track:abc"], obj=Spotbus(runner=runner)
        )
        assert result.exit_code == 0
        assert result.output == "method return\n"
        assert runner.calls[1][2] == "--dest=org.mpris.MediaPlayer2.spotifyd.instance77"
        assert runner.calls[1][4:] == [
            "org.mpris.MediaPlayer2.Player.OpenUri",
            "string:spotify:track:abc",
        ]

    def test_daemon_not_running(self):
        runner = FakeRunner()
        result = CliRunner().invoke(
            spotbus, ["send", "OpenUri", "track:abc"], obj=Spotbus(runner=runner)
        )
        assert result.exit_code == 0
        assert "spotifyd is not running" in result.output
        assert len(runner.calls) == 1
