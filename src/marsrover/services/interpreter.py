"""Effect interpreter — the effectful shell around the decision core.

Executes one effect and returns the follow-up event, or None when the
effect is terminal (the three report effects). Collaborators are injected
so the interpreter can be driven by fakes in tests.

INVARIANT: Load and parse failures never escape as exceptions. They are
converted to ``LoadMissionFailed`` carrying a typed error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from marsrover.domain.errors import LoadError, MissionParseError
from marsrover.domain.parsing import parse_commands, parse_mission
from marsrover.infrastructure.loader import SourceLoadError
from marsrover.output.console import DEFAULT_PROMPT
from marsrover.output.formatters import render, render_error, render_hit
from marsrover.services.messages import (
    AskCommands,
    CommandsReceived,
    Effect,
    Event,
    Ko,
    LoadMission,
    LoadMissionFailed,
    LoadMissionSuccessful,
    ReportCommandSequenceCompleted,
    ReportObstacleHit,
)

if TYPE_CHECKING:
    from marsrover.output.console import ConsoleReporter

logger = logging.getLogger(__name__)

SourceLoader = Callable[[str], tuple[str, str]]
LineReader = Callable[[str], str]


class MissionInterpreter:
    """Callable effect handler: ``interpreter(effect) -> Event | None``.

    Parameters:
        load: Returns the two raw lines of a source reference, or raises
            :class:`SourceLoadError`.
        ask: Writes a prompt and returns one line of input.
        reporter: Line sink with ``info`` and ``error`` methods.
        prompt: Question shown before reading commands.
    """

    def __init__(
        self,
        load: SourceLoader,
        ask: LineReader,
        reporter: ConsoleReporter,
        *,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        self._load = load
        self._ask = ask
        self._reporter = reporter
        self._prompt = prompt

    def __call__(self, effect: Effect) -> Event | None:
        match effect:
            case LoadMission(planet_ref=planet_ref, rover_ref=rover_ref):
                return self._load_mission(planet_ref, rover_ref)

            case AskCommands():
                raw = self._ask(self._prompt)
                return CommandsReceived(parse_commands(raw))

            case ReportObstacleHit(rover=rover):
                self._reporter.info(render_hit(rover))
                return None

            case ReportCommandSequenceCompleted(rover=rover):
                self._reporter.info(render(rover))
                return None

            case Ko(error=error):
                self._reporter.error(render_error(error))
                return None

            case _:
                msg = f"Unsupported effect: {effect!r}"
                raise TypeError(msg)

    def _load_mission(self, planet_ref: str, rover_ref: str) -> Event:
        try:
            planet_raw = self._load(planet_ref)
            rover_raw = self._load(rover_ref)
            mission = parse_mission(planet_raw, rover_raw)
        except SourceLoadError as exc:
            logger.debug("Source load failed for %s: %s", exc.reference, exc.message)
            return LoadMissionFailed(LoadError(exc.reference, exc.message))
        except MissionParseError as exc:
            logger.debug("Mission parse failed: %s", exc.error)
            return LoadMissionFailed(exc.error)
        return LoadMissionSuccessful(mission)
