"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, marsrover.toml only contains
overrides. A run needs no config file at all.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, field_validator

from marsrover.output.console import DEFAULT_PROMPT


class MissionConfig(BaseModel):
    """[mission] section — default sources for ``marsrover run``."""

    model_config = {"frozen": True}

    planet: str = "planet.txt"
    rover: str = "rover.txt"
    data_dir: Path | None = None


class ConsoleConfig(BaseModel):
    """[console] section."""

    model_config = {"frozen": True}

    prompt: str = DEFAULT_PROMPT
    color: bool = True


class LoaderConfig(BaseModel):
    """[loader] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            msg = f"Unknown encoding: {value!r}"
            raise ValueError(msg) from exc
        return value

