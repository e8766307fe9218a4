"""Immutable mission records and command variants.

INVARIANT: Records are never mutated. A step produces a new Rover (and a
new Mission) via ``dataclasses.replace``; the previous Mission stays a
valid, untouched value that can be returned on collision.
"""

from __future__ import annotations

from dataclasses import dataclass

from marsrover.domain.types import Direction, MoveType, TurnType


@dataclass(frozen=True)
class Delta:
    """Unit displacement applied by a single move."""

    x: int
    y: int


@dataclass(frozen=True)
class Position:
    """Grid coordinate, always within ``[0, size)`` on both axes."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Width (x) and height (y) of the toroidal grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Obstacle:
    position: Position


@dataclass(frozen=True)
class Planet:
    """Grid size plus the obstacles scattered on it."""

    size: Size
    obstacles: tuple[Obstacle, ...] = ()

    def is_blocked(self, position: Position) -> bool:
        """Return True if an obstacle sits on *position*."""
        return any(obstacle.position == position for obstacle in self.obstacles)


@dataclass(frozen=True)
class Rover:
    position: Position
    direction: Direction


@dataclass(frozen=True)
class Mission:
    """A planet paired with the rover exploring it."""

    planet: Planet
    rover: Rover


# --- Commands ---


@dataclass(frozen=True)
class Move:
    kind: MoveType


@dataclass(frozen=True)
class Turn:
    kind: TurnType


@dataclass(frozen=True)
class Unknown:
    """Unrecognized command character; applying it is a no-op."""


Command = Move | Turn | Unknown
