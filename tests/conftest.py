"""Shared pytest fixtures and test helpers for marsrover tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from marsrover.config.logging import configure_logging
from marsrover.domain.models import Mission, Obstacle, Planet, Position, Rover, Size
from marsrover.domain.types import Direction


@pytest.fixture(autouse=True)
def _quiet_logging() -> Generator[None]:
    """Route structlog through stdlib at WARNING and restore root logger state."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rover = logging.getLogger("marsrover")
    rover_level = rover.level
    configure_logging()
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    rover.setLevel(rover_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mission_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temp working directory holding the reference planet/rover sources.

    planet.txt: 5x4 with obstacles at (2,0), (0,3), (3,2).
    rover.txt: (0,0) facing N.
    """
    monkeypatch.delenv("MARSROVER_CONFIG", raising=False)
    write_source(tmp_path / "planet.txt", "5x4", "2,0 0,3 3,2")
    write_source(tmp_path / "rover.txt", "0,0", "N")
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_source(path: Path, *lines: str) -> Path:
    """Write *lines* to *path*, one per line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def make_mission(
    width: int = 5,
    height: int = 4,
    *,
    x: int = 0,
    y: int = 0,
    direction: Direction = Direction.N,
    obstacles: tuple[tuple[int, int], ...] = (),
) -> Mission:
    """Build a Mission from plain values."""
    planet = Planet(
        size=Size(width, height),
        obstacles=tuple(Obstacle(Position(ox, oy)) for ox, oy in obstacles),
    )
    return Mission(planet=planet, rover=Rover(Position(x, y), direction))
