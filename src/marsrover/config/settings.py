"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``MARSROVER_*`` prefix (``__`` for nested sections)
  3. TOML file    — ``marsrover.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`marsrover.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from marsrover.config.discovery import find_config
from marsrover.config.models import ConsoleConfig, LoaderConfig, MissionConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``marsrover.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class RoverSettings(BaseSettings):
    """Unified settings for the marsrover CLI.

    Stored on the :class:`~marsrover.commands._context.AppContext` at the
    CLI root level.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        base_dir: Directory relative source references resolve against.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MARSROVER_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None
    base_dir: Path = Field(default_factory=Path.cwd)

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False
    no_color: bool = False

    # --- TOML sections ---
    mission: MissionConfig = Field(default_factory=MissionConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @property
    def data_dir(self) -> Path:
        """Directory that relative planet/rover references resolve against.

        ``[mission] data_dir`` wins; a relative value is taken from the
        config file's directory.
        """
        data_dir = self.mission.data_dir
        if data_dir is None:
            return self.base_dir
        if data_dir.is_absolute():
            return data_dir
        return self.base_dir / data_dir

    @property
    def color(self) -> bool:
        return self.console.color and not self.no_color

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> RoverSettings:
        """Construct settings from a CLI invocation.

        Discovers ``marsrover.toml`` via walk-up from *start_dir* (or uses
        the explicit *config_path*), resolves ``base_dir`` to the config
        file's parent directory, and merges CLI flags as highest-priority
        overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(start_dir)

        base_dir = toml_path.parent if toml_path else (start_dir or Path.cwd())

        _tls.toml_path = toml_path
        try:
            return cls(
                config_path=toml_path,
                base_dir=base_dir,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
