#!/usr/bin/env python3
"""
Spirit CLI
Control sets of Govee lights: show state, toggle power/colour, and reflect a
command's exit status as a light colour.
"""

import click

from core.client import DEFAULT_API_URL
from core.context import AppContext
from commands.group import ColouredGroup
from commands.info import info_command
from commands.control import toggle_command, check_command

__version__ = '0.1.0'


@click.group(
    cls=ColouredGroup,
    context_settings={'help_option_names': ['-h', '--help']},
)
@click.option('--key', '-k', envvar='GOVEE_KEY', show_envvar=True,
              help='The Govee API key')
@click.option('--all', '-a', 'select_all', is_flag=True,
              help='Operate on all devices regardless of config')
@click.option('--device', '-d', 'device_names', multiple=True, metavar='NAME',
              help='Device name; may be repeated. Defaults to the devices in spirit.toml')
@click.option('--config', 'config_path', envvar='SPIRIT_CONFIG',
              type=click.Path(exists=True, dir_okay=False),
              help='Read this config file instead of ~/spirit.toml and ./spirit.toml')
@click.option('--api-url', envvar='GOVEE_API_URL', default=DEFAULT_API_URL, hidden=True)
@click.option('--verbose', '-v', is_flag=True, help='Echo API requests to stderr')
@click.version_option(version=__version__, prog_name='spirit')
@click.pass_context
def cli(ctx, key, select_all, device_names, config_path, api_url, verbose):
    """A command-line interface for controlling sets of Govee lights.

Devices are chosen with --device, --all, or the `devices` list in
spirit.toml (read from your home directory, then the current directory)."""
    if select_all and device_names:
        raise click.UsageError("--all cannot be used together with --device", ctx)

    ctx.obj = AppContext(
        api_key=key,
        select_all=select_all,
        device_names=device_names,
        config_path=config_path,
        api_url=api_url,
        verbose=verbose,
    )


cli.add_command(info_command)
cli.add_command(toggle_command)
cli.add_command(check_command)


if __name__ == '__main__':
    cli()
