"""Mission simulation — turning, moving, wrap-around and collisions.

Pure functions, no infrastructure dependencies. The grid is a torus:
leaving one edge re-enters on the opposite edge of the same axis.

Collision semantics: ``apply_commands`` stops at the first command that
would put the rover on an obstacle and reports the mission as it was
*before* that command. The colliding command is discarded, never
partially applied.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from marsrover.domain.models import (
    Command,
    Delta,
    Mission,
    Move,
    Planet,
    Position,
    Rover,
    Turn,
    Unknown,
)
from marsrover.domain.types import Direction, MoveType, TurnType

_RIGHT_OF: dict[Direction, Direction] = {
    Direction.N: Direction.E,
    Direction.E: Direction.S,
    Direction.S: Direction.W,
    Direction.W: Direction.N,
}

_LEFT_OF: dict[Direction, Direction] = {after: before for before, after in _RIGHT_OF.items()}

_OPPOSITE: dict[Direction, Direction] = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}

_DELTAS: dict[Direction, Delta] = {
    Direction.N: Delta(0, 1),
    Direction.S: Delta(0, -1),
    Direction.E: Delta(1, 0),
    Direction.W: Delta(-1, 0),
}


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of a command sequence.

    Attributes:
        ok: False when the sequence stopped on an obstacle.
        mission: Final mission on success; last safe mission on collision.
    """

    ok: bool
    mission: Mission

    @property
    def obstacle_hit(self) -> bool:
        return not self.ok


# ---------------------------------------------------------------------------
# Directions
# ---------------------------------------------------------------------------


def turn_right(direction: Direction) -> Direction:
    return _RIGHT_OF[direction]


def turn_left(direction: Direction) -> Direction:
    return _LEFT_OF[direction]


def opposite(direction: Direction) -> Direction:
    return _OPPOSITE[direction]


def delta(direction: Direction) -> Delta:
    """Unit step for *direction*: north is +y, east is +x."""
    return _DELTAS[direction]


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------


def wrap(axis: int, size: int, delta: int) -> int:
    """Shift *axis* by *delta* on a ring of *size* cells.

    The double modulo keeps the result in ``[0, size)`` whatever sign
    convention the remainder operator follows.
    """
    return ((axis + delta) % size + size) % size


def next_position(position: Position, planet: Planet, step: Delta) -> Position | None:
    """Return the wrapped neighbour of *position*, or None if it is blocked."""
    candidate = Position(
        wrap(position.x, planet.size.x, step.x),
        wrap(position.y, planet.size.y, step.y),
    )
    if planet.is_blocked(candidate):
        return None
    return candidate


# ---------------------------------------------------------------------------
# Rover steps
# ---------------------------------------------------------------------------


def turn(rover: Rover, kind: TurnType) -> Rover:
    """Rotate the rover 90 degrees in place."""
    if kind is TurnType.ON_RIGHT:
        return replace(rover, direction=turn_right(rover.direction))
    return replace(rover, direction=turn_left(rover.direction))


def forward(rover: Rover, planet: Planet) -> Position | None:
    return next_position(rover.position, planet, delta(rover.direction))


def backward(rover: Rover, planet: Planet) -> Position | None:
    """Step behind the rover; its heading is unchanged."""
    return next_position(rover.position, planet, delta(opposite(rover.direction)))


def move(rover: Rover, planet: Planet, kind: MoveType) -> Rover | None:
    """Move the rover one cell, or return None if an obstacle is in the way."""
    target = forward(rover, planet) if kind is MoveType.FORWARD else backward(rover, planet)
    if target is None:
        return None
    return replace(rover, position=target)


# ---------------------------------------------------------------------------
# Missions
# ---------------------------------------------------------------------------


def apply_command(mission: Mission, command: Command) -> Mission | None:
    """Apply one command to *mission*.

    Returns the new mission, or None when a move would land on an
    obstacle. Turns and unknown commands always succeed.
    """
    match command:
        case Turn(kind=kind):
            rover: Rover | None = turn(mission.rover, kind)
        case Move(kind=kind):
            rover = move(mission.rover, mission.planet, kind)
        case Unknown():
            rover = mission.rover
        case _:
            msg = f"Unsupported command: {command!r}"
            raise TypeError(msg)

    if rover is None:
        return None
    return replace(mission, rover=rover)


def apply_commands(mission: Mission, commands: Iterable[Command]) -> SimulationResult:
    """Fold *commands* over *mission*, stopping at the first collision."""
    current = mission
    for command in commands:
        stepped = apply_command(current, command)
        if stepped is None:
            return SimulationResult(ok=False, mission=current)
        current = stepped
    return SimulationResult(ok=True, mission=current)
