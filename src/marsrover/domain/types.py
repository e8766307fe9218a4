"""Direction and command-kind enums.

Direction order matters: turning right walks the cycle N -> E -> S -> W.
"""

from __future__ import annotations

from enum import StrEnum


class Direction(StrEnum):
    """Cardinal heading of a rover."""

    N = "N"
    E = "E"
    W = "W"
    S = "S"


class MoveType(StrEnum):
    """Move command kinds."""

    FORWARD = "forward"
    BACKWARD = "backward"


class TurnType(StrEnum):
    """Turn command kinds."""

    ON_RIGHT = "right"
    ON_LEFT = "left"
