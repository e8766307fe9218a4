"""Typed mission errors.

Errors are values: they travel as event/effect payloads and are rendered
once, in the run's single ``[ERROR]`` report line. ``MissionParseError``
is the only exception here; parsers raise it at the text boundary and the
effect interpreter turns it back into its ``error`` value.

An obstacle collision is not an error (see :mod:`marsrover.domain.simulation`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class GenericError:
    """Catch-all failure, e.g. an unhandled (state, event) pair.

    ``state`` and ``event`` keep the offending values inspectable
    without parsing ``message``.
    """

    message: str
    state: Any = field(default=None, compare=False)
    event: Any = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"Generic({self.message})"


@dataclass(frozen=True)
class InvalidPlanet:
    value: str
    reason: str

    def __str__(self) -> str:
        return f"InvalidPlanet({self.value},{self.reason})"


@dataclass(frozen=True)
class InvalidRover:
    value: str
    reason: str

    def __str__(self) -> str:
        return f"InvalidRover({self.value},{self.reason})"


@dataclass(frozen=True)
class InvalidObstacle:
    value: str
    reason: str

    def __str__(self) -> str:
        return f"InvalidObstacle({self.value},{self.reason})"


@dataclass(frozen=True)
class LoadError:
    """A source could not be read or did not hold exactly two lines."""

    reference: str
    message: str

    def __str__(self) -> str:
        return self.message


MissionError = GenericError | InvalidPlanet | InvalidRover | InvalidObstacle | LoadError


class MissionParseError(ValueError):
    """Raised by the text parsers; carries the typed error."""

    def __init__(self, error: MissionError) -> None:
        super().__init__(str(error))
        self.error = error
