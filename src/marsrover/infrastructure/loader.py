"""Two-line source loading for planet and rover descriptions.

INVARIANT: The file handle is closed on every exit path, including
content errors raised while the file is still open.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

INVALID_CONTENT = "Invalid file content"


class SourceLoadError(Exception):
    """A source could not be read or did not hold exactly two lines."""

    def __init__(self, reference: str, message: str) -> None:
        super().__init__(message)
        self.reference = reference
        self.message = message


def resolve_source(reference: str, base_dir: Path | None = None) -> Path:
    """Resolve *reference* against *base_dir* unless it is absolute."""
    path = Path(reference).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return path


def load_tupled(
    reference: str,
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> tuple[str, str]:
    """Read *reference* and return its two lines.

    Raises:
        SourceLoadError: The file is missing/unreadable, or does not
            contain exactly two lines.
    """
    path = resolve_source(reference, base_dir)
    logger.debug("Loading source %s", path)
    try:
        with path.open(encoding=encoding) as handle:
            lines = handle.read().splitlines()
            if len(lines) != 2:
                raise SourceLoadError(reference, INVALID_CONTENT)
            first, second = lines
    except OSError as exc:
        raise SourceLoadError(reference, f"Cannot read {reference}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise SourceLoadError(reference, f"Cannot decode {reference}: {exc.reason}") from exc
    return first, second
