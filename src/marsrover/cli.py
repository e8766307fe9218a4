"""Root CLI group for marsrover with global flags and command registration."""

from __future__ import annotations

import click

from marsrover import __version__
from marsrover.commands import register_commands
from marsrover.commands._context import AppContext
from marsrover.config.settings import RoverSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="marsrover")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-color", is_flag=True, help="Disable colored report lines.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    log_json: bool,
    no_color: bool,
    config_path: str | None,
) -> None:
    """marsrover — drive a rover across a toroidal planet."""
    settings = RoverSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        log_json=log_json,
        no_color=no_color,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
