"""
Control commands for switching devices and reflecting command results.

Includes toggle (power and colour) and check (run a command, show its result).
"""

import subprocess

import click

from core.context import AppContext
from core.errors import CommandError
from models.color import parse_color


@click.command(name='toggle')
@click.option('--on', is_flag=True, help='Turn devices on (the default)')
@click.option('--off', is_flag=True, help='Turn devices off')
@click.option('--color', '-c', help='Set this colour (hex, e.g. "#ff8800") for toggled devices')
@click.pass_context
def toggle_command(ctx: click.Context, on: bool, off: bool, color: str | None):
    """Toggle the power state of a set of devices.

    Turning on sets the first colour found from --color, the device's
    configured colour, or the config default. Devices with no colour are
    just switched on. --off ignores colours.

    \b
    Examples:
      spirit toggle
      spirit toggle --off
      spirit -d "Desk lamp" toggle -c "#ff8800"
    """
    if on and off:
        raise click.UsageError("--on cannot be used together with --off", ctx)

    app: AppContext = ctx.obj
    devices = app.devices()
    client = app.client

    if off:
        for device in devices:
            client.turn(device, False)
            click.secho(f"✓ {device.name} turned OFF", fg='green')
        return

    # Resolve every colour before touching any device
    settings = app.settings
    plan = [(device, settings.toggle_color(device.name, color)) for device in devices]

    for device, device_color in plan:
        if device_color is not None:
            client.color(device, device_color)
            click.secho(f"✓ {device.name} set to {device_color}", fg='green')
        else:
            client.turn(device, True)
            click.secho(f"✓ {device.name} turned ON", fg='green')


def exit_code_for(returncode: int) -> int:
    """Map a subprocess return code to a process exit code.

    A child killed by signal N reports -N; shells report that as 128+N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


@click.command(
    name='check',
    context_settings={'ignore_unknown_options': True, 'allow_interspersed_args': False},
)
@click.option('--success', '-s', envvar='SPIRIT_SUCCESS_COLOR',
              help='Set this colour on success')
@click.option('--fail', '-f', envvar='SPIRIT_FAIL_COLOR',
              help='Set this colour on failure')
@click.argument('cmd', nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def check_command(ctx: click.Context, success: str | None, fail: str | None, cmd: tuple[str, ...]):
    """Run a command, colouring a set of devices based on its exit code.

    Exit code 0 shows the success colour, anything else the fail colour.
    Spirit then exits with the command's own exit code.

    \b
    Examples:
      spirit check -- make test
      spirit -d "Desk lamp" check -s "#0000ff" -- pytest -x
    """
    app: AppContext = ctx.obj
    devices = app.devices()
    client = app.client

    # Flag colours are used for every device whatever the outcome
    for flag in (success, fail):
        if flag is not None:
            parse_color(flag)

    try:
        result = subprocess.run(list(cmd))
    except OSError as e:
        raise CommandError(f"Could not run '{cmd[0]}': {e.strerror or e}") from e

    passed = result.returncode == 0

    # Resolve the chosen colour for every device before touching any of them
    settings = app.settings
    pick = settings.success_color if passed else settings.fail_color
    explicit = success if passed else fail
    plan = [(device, pick(device.name, explicit)) for device in devices]

    for device, color in plan:
        client.color(device, color)

    outcome = click.style('passed', fg='green') if passed else click.style('failed', fg='red')
    click.echo(f"Command {outcome} (exit {result.returncode}); updated {len(devices)} device(s)", err=True)

    ctx.exit(exit_code_for(result.returncode))
