"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Wires the effect interpreter's collaborators from
settings and maps a run's final state to the process exit code.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from marsrover.config.logging import configure_logging
from marsrover.infrastructure.loader import load_tupled
from marsrover.output.console import ConsolePrompt, ConsoleReporter
from marsrover.services.interpreter import MissionInterpreter
from marsrover.services.messages import Failed

if TYPE_CHECKING:
    from marsrover.config.settings import RoverSettings
    from marsrover.services.messages import AppState


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RoverSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def interpreter(self, *, preset_commands: str | None = None) -> MissionInterpreter:
        """Build an interpreter bound to the configured loader and console."""
        settings = self.settings
        load = partial(
            load_tupled,
            base_dir=settings.data_dir,
            encoding=settings.loader.encoding,
        )
        return MissionInterpreter(
            load,
            ConsolePrompt(preset=preset_commands).ask,
            ConsoleReporter(color=settings.color),
            prompt=settings.console.prompt,
        )

    def finish(self, state: AppState) -> None:
        """Exit with code 1 when the run ended in ``Failed``.

        The report line has already been written by the interpreter.
        """
        if isinstance(state, Failed):
            raise SystemExit(1)
