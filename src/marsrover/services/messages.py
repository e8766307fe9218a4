"""Closed variant sets exchanged between the decision core and the interpreter.

Events flow into :func:`marsrover.services.mission.update`; effects flow
out of it to the interpreter. AppState is the top-level lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass

from marsrover.domain.errors import MissionError
from marsrover.domain.models import Command, Mission, Rover

# --- Events ---


@dataclass(frozen=True)
class LoadMissionSuccessful:
    mission: Mission


@dataclass(frozen=True)
class LoadMissionFailed:
    error: MissionError


@dataclass(frozen=True)
class CommandsReceived:
    commands: tuple[Command, ...]


Event = LoadMissionSuccessful | LoadMissionFailed | CommandsReceived


# --- Effects ---


@dataclass(frozen=True)
class LoadMission:
    """Read and parse the planet and rover sources."""

    planet_ref: str
    rover_ref: str


@dataclass(frozen=True)
class AskCommands:
    """Prompt for one line of commands."""


@dataclass(frozen=True)
class ReportObstacleHit:
    rover: Rover


@dataclass(frozen=True)
class ReportCommandSequenceCompleted:
    rover: Rover


@dataclass(frozen=True)
class Ko:
    error: MissionError


Effect = LoadMission | AskCommands | ReportObstacleHit | ReportCommandSequenceCompleted | Ko


# --- Application state ---


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Ready:
    mission: Mission


@dataclass(frozen=True)
class Failed:
    pass


AppState = Loading | Ready | Failed
