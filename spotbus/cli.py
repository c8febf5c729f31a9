import logging
from pprint import pformat

import click

from spotbus.dbus import DAEMON_NAME
from spotbus.errors import ApiError, ConfigError, DecodeError, ProcessSpawnError
from spotbus.interface import Spotbus


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def spotbus(ctx, verbose):
    """List Spotify playback devices, or talk to a local spotifyd."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.obj is None:
        ctx.obj = Spotbus()

    if ctx.invoked_subcommand is None:
        list_devices(ctx.obj)


def list_devices(spotbus_interface):
    try:
        device_list = spotbus_interface.get_devices()
    except ConfigError as e:
        raise click.ClickException(str(e))
    except ApiError as e:
        # reported but not fatal, the exit code stays 0
        click.echo(repr(e))
        return
    click.echo(pformat(device_list))


@spotbus.command()
@click.pass_obj
def pid(spotbus_interface):
    """Print the pid of the running spotifyd."""
    try:
        daemon_pid = spotbus_interface.daemon_pid()
    except (ProcessSpawnError, DecodeError) as e:
        raise click.ClickException(str(e))
    if daemon_pid:
        click.echo(daemon_pid)
    else:
        click.echo(f"{DAEMON_NAME} is not running")


@spotbus.command()
@click.argument("method")
@click.argument("uri")
@click.pass_obj
def send(spotbus_interface, method, uri):
    """
    Call org.mpris.MediaPlayer2.Player.METHOD on spotifyd with spotify:URI.
    """
    try:
        reply = spotbus_interface.send(method, uri)
    except (ProcessSpawnError, DecodeError) as e:
        raise click.ClickException(str(e))
    if reply is None:
        click.echo(f"{DAEMON_NAME} is not running")
    else:
        click.echo(reply, nl=False)


if __name__ == "__main__":
    spotbus()
