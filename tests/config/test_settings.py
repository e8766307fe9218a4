"""Tests for RoverSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from marsrover.config.settings import RoverSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MARSROVER_CONFIG",
        "MARSROVER_CONSOLE__COLOR",
        "MARSROVER_CONSOLE__PROMPT",
        "MARSROVER_MISSION__PLANET",
        "MARSROVER_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = RoverSettings.from_cli(start_dir=tmp_path)
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.mission.planet == "planet.txt"
        assert settings.mission.rover == "rover.txt"
        assert settings.console.prompt == "Waiting commands..."
        assert settings.loader.encoding == "utf-8"
        assert settings.data_dir == tmp_path

    def test_frozen(self, tmp_path: Path) -> None:
        settings = RoverSettings.from_cli(start_dir=tmp_path)
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "marsrover.toml").write_text(
            '[mission]\nplanet = "mars.txt"\n[console]\nprompt = "cmds?"\n'
        )
        settings = RoverSettings.from_cli(start_dir=tmp_path)
        assert settings.mission.planet == "mars.txt"
        assert settings.mission.rover == "rover.txt"  # default preserved
        assert settings.console.prompt == "cmds?"

    def test_base_dir_is_config_parent(self, tmp_path: Path) -> None:
        (tmp_path / "marsrover.toml").write_text('[mission]\ndata_dir = "missions"\n')
        nested = tmp_path / "deep"
        nested.mkdir()
        settings = RoverSettings.from_cli(start_dir=nested)
        assert settings.base_dir == tmp_path
        assert settings.data_dir == tmp_path / "missions"

    def test_absolute_data_dir(self, tmp_path: Path) -> None:
        target = tmp_path / "abs"
        (tmp_path / "marsrover.toml").write_text(f'[mission]\ndata_dir = "{target.as_posix()}"\n')
        settings = RoverSettings.from_cli(start_dir=tmp_path)
        assert settings.data_dir == target

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[mission]\nrover = "r.txt"\n')
        settings = RoverSettings.from_cli(config_path=str(custom), start_dir=tmp_path)
        assert settings.mission.rover == "r.txt"
        assert settings.config_path == custom
        assert settings.base_dir == custom.parent

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            RoverSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "marsrover.toml").write_text("[mission\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            RoverSettings.from_cli(start_dir=tmp_path)

    def test_unknown_encoding_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "marsrover.toml").write_text('[loader]\nencoding = "klingon-8"\n')
        with pytest.raises(ValidationError, match="Unknown encoding"):
            RoverSettings.from_cli(start_dir=tmp_path)


class TestPrecedence:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "marsrover.toml").write_text('[mission]\nplanet = "toml.txt"\n')
        monkeypatch.setenv("MARSROVER_MISSION__PLANET", "env.txt")
        settings = RoverSettings.from_cli(start_dir=tmp_path)
        assert settings.mission.planet == "env.txt"

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "marsrover.toml").write_text("verbose = true\n")
        settings = RoverSettings.from_cli(start_dir=tmp_path, verbose=False)
        assert settings.verbose is False

    def test_color_switches(self, tmp_path: Path) -> None:
        assert RoverSettings.from_cli(start_dir=tmp_path).color is True
        assert RoverSettings.from_cli(start_dir=tmp_path, no_color=True).color is False
        (tmp_path / "marsrover.toml").write_text("[console]\ncolor = false\n")
        assert RoverSettings.from_cli(start_dir=tmp_path).color is False
