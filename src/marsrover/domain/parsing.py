"""Text decoders for planet, rover, obstacle and command descriptions.

Input grammar::

    planet line 1   "5x4"            width x height
    planet line 2   "2,0 0,3 3,2"    space-separated obstacle positions
    rover line 1    "0,0"            x,y
    rover line 2    "N"              one of n/e/w/s (case-insensitive)
    commands        "RBBLBRF"        one command per character

Pure functions. Failures raise :class:`MissionParseError` carrying the
typed error; the first failure wins (planet before rover, size before
obstacles, position before direction).
"""

from __future__ import annotations

from marsrover.domain.errors import (
    InvalidObstacle,
    InvalidPlanet,
    InvalidRover,
    MissionParseError,
)
from marsrover.domain.models import (
    Command,
    Mission,
    Move,
    Obstacle,
    Planet,
    Position,
    Rover,
    Size,
    Turn,
    Unknown,
)
from marsrover.domain.types import Direction, MoveType, TurnType

_DIRECTIONS: dict[str, Direction] = {
    "n": Direction.N,
    "e": Direction.E,
    "w": Direction.W,
    "s": Direction.S,
}

_COMMANDS: dict[str, Command] = {
    "f": Move(MoveType.FORWARD),
    "b": Move(MoveType.BACKWARD),
    "r": Turn(TurnType.ON_RIGHT),
    "l": Turn(TurnType.ON_LEFT),
}


def parse_tuple(separator: str, raw: str) -> tuple[int, int]:
    """Split *raw* on *separator* and read the first two parts as ints.

    Raises ValueError or IndexError on malformed input; callers map
    those to a typed error.
    """
    parts = raw.split(separator)
    return int(parts[0].strip()), int(parts[1].strip())


def parse_size(raw: str) -> Size:
    try:
        x, y = parse_tuple("x", raw)
    except (ValueError, IndexError) as exc:
        raise MissionParseError(InvalidPlanet(raw, "InvalidSize")) from exc
    if x < 1 or y < 1:
        raise MissionParseError(InvalidPlanet(raw, "InvalidSize"))
    return Size(x, y)


def parse_position(raw: str) -> Position:
    try:
        x, y = parse_tuple(",", raw)
    except (ValueError, IndexError) as exc:
        raise MissionParseError(InvalidRover(raw, "InvalidPosition")) from exc
    return Position(x, y)


def parse_direction(raw: str) -> Direction:
    direction = _DIRECTIONS.get(raw.strip().lower())
    if direction is None:
        raise MissionParseError(InvalidRover(raw, "InvalidDirection"))
    return direction


def parse_obstacle(raw: str) -> Obstacle:
    """Parse one obstacle; the reason names the underlying position error."""
    try:
        position = parse_position(raw)
    except MissionParseError as exc:
        raise MissionParseError(InvalidObstacle(raw, type(exc.error).__name__)) from exc
    return Obstacle(position)


def parse_obstacles(raw: str) -> tuple[Obstacle, ...]:
    """Parse space-separated obstacles. A blank line means no obstacles."""
    return tuple(parse_obstacle(token) for token in raw.split())


def parse_planet(raw: tuple[str, str]) -> Planet:
    size_line, obstacles_line = raw
    size = parse_size(size_line)
    obstacles = parse_obstacles(obstacles_line)
    return Planet(size=size, obstacles=obstacles)


def parse_rover(raw: tuple[str, str]) -> Rover:
    position_line, direction_line = raw
    position = parse_position(position_line)
    direction = parse_direction(direction_line)
    return Rover(position=position, direction=direction)


def parse_mission(planet: tuple[str, str], rover: tuple[str, str]) -> Mission:
    """Build a Mission from raw planet and rover line pairs.

    The rover must start inside the grid and off every obstacle.
    """
    parsed_planet = parse_planet(planet)
    parsed_rover = parse_rover(rover)
    position = parsed_rover.position
    if not (0 <= position.x < parsed_planet.size.x and 0 <= position.y < parsed_planet.size.y):
        raise MissionParseError(InvalidRover(rover[0], "OutOfBounds"))
    if parsed_planet.is_blocked(position):
        raise MissionParseError(InvalidRover(rover[0], "OnObstacle"))
    return Mission(planet=parsed_planet, rover=parsed_rover)


def parse_command(raw: str) -> Command:
    return _COMMANDS.get(raw.lower(), Unknown())


def parse_commands(raw: str) -> tuple[Command, ...]:
    """Decode one command per character; unrecognized characters become Unknown."""
    return tuple(parse_command(char) for char in raw)
