"""Command: load a mission and execute one command sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from marsrover.commands._base import RoverCommand

if TYPE_CHECKING:
    from marsrover.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  marsrover run planet.txt rover.txt
  marsrover run planet.txt rover.txt --commands RBBLBRF
  marsrover -c missions/marsrover.toml run
  marsrover --no-color run --commands FFRFF""",
)
@click.argument("planet", required=False)
@click.argument("rover", required=False)
@click.option(
    "--commands",
    "commands",
    default=None,
    help="Command string (f/b/r/l); skips the interactive prompt.",
)
@click.pass_obj
def run(app: AppContext, planet: str | None, rover: str | None, commands: str | None) -> None:
    """Run a rover mission from PLANET and ROVER description files.

    Missing arguments fall back to the [mission] section of marsrover.toml.
    """
    from marsrover.config.logging import bind_mission_context
    from marsrover.services import mission, runtime

    planet_ref = planet or app.settings.mission.planet
    rover_ref = rover or app.settings.mission.rover
    bind_mission_context(planet_ref, rover_ref)

    final_state = runtime.run(
        mission.init(planet_ref, rover_ref),
        mission.update,
        app.interpreter(preset_commands=commands),
    )
    app.finish(final_state)
