"""
Inspection command for showing the current state of devices.
"""

import click

from core.context import AppContext
from models.device import DeviceState


def format_state(state: DeviceState) -> list[str]:
    """Render a device state as display lines."""
    def show(value, yes='yes', no='no'):
        if value is None:
            return 'unknown'
        if isinstance(value, bool):
            return yes if value else no
        return str(value)

    lines = [
        f"  Online:       {show(state.online)}",
        f"  Power:        {show(state.power_state)}",
        f"  Brightness:   {show(state.brightness)}",
        f"  Colour:       {show(state.color)}",
    ]
    if state.color_temperature:
        lines.append(f"  Temperature:  {state.color_temperature}K")
    return lines


@click.command(name='info')
@click.pass_obj
def info_command(app: AppContext):
    """Display info about a set of devices.

    \b
    Examples:
      spirit info
      spirit -d "Desk lamp" info
      spirit --all info
    """
    devices = app.devices()
    client = app.client
    for device in devices:
        state = client.state(device)
        click.secho(f"{device.name} ({device.model})", fg='cyan', bold=True)
        click.echo(f"  Device:       {device.id}")
        for line in format_state(state):
            click.echo(line)
        click.echo()
