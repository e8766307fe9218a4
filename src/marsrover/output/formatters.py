"""Plain-text pose and error renderings used in report lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marsrover.domain.errors import MissionError
    from marsrover.domain.models import Rover

OBSTACLE_PREFIX = "O"


def render(rover: Rover) -> str:
    """Render a final pose as ``x:y:D``."""
    return f"{rover.position.x}:{rover.position.y}:{rover.direction}"


def render_hit(rover: Rover) -> str:
    """Render an obstacle-hit pose as ``O:x:y:D``."""
    return f"{OBSTACLE_PREFIX}:{render(rover)}"


def render_error(error: MissionError) -> str:
    return str(error)
