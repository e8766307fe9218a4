"""Rich Console factory, theme, and the console line reader/reporter.

Report lines are rendered through a Console backed by a StringIO buffer
and then echoed with Click, so CliRunner captures them. In non-TTY
environments (tests, pipes) no ANSI codes are emitted.
"""

from __future__ import annotations

import logging
import sys
from io import StringIO
from typing import TextIO

import click
from rich.console import Console
from rich.text import Text
from rich.theme import Theme

ROVER_THEME = Theme(
    {
        "rover.ok": "green",
        "rover.error": "red",
    }
)

DEFAULT_PROMPT = "Waiting commands..."

logger = logging.getLogger(__name__)


def create_console(
    *,
    no_color: bool = False,
    force_terminal: bool | None = None,
    width: int | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        force_terminal: Emit ANSI codes even though the buffer is not a TTY.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROVER_THEME,
        no_color=no_color,
        force_terminal=force_terminal,
        color_system="standard" if force_terminal else "auto",
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def styled_line(label: str, message: str, style: str, *, color: bool = True) -> str:
    """Render ``[label] message`` in *style* as a single line."""
    console = create_console(no_color=not color, force_terminal=color or None)
    console.print(Text(f"[{label}] {message}", style=style), soft_wrap=True)
    return get_output(console).rstrip("\n")


class ConsoleReporter:
    """Single-line ``[OK]`` / ``[ERROR]`` sink.

    Info lines go to stdout, error lines to stderr. Color is applied only
    when enabled and the target stream is a terminal.
    """

    def __init__(self, *, color: bool = True) -> None:
        self._color = color

    def _colored(self, stream: TextIO) -> bool:
        return self._color and stream.isatty()

    def info(self, message: str) -> None:
        logger.info("report ok: %s", message)
        line = styled_line("OK", message, "rover.ok", color=self._colored(sys.stdout))
        click.echo(line)

    def error(self, message: str) -> None:
        logger.error("report error: %s", message)
        line = styled_line("ERROR", message, "rover.error", color=self._colored(sys.stderr))
        click.echo(line, err=True)


class ConsolePrompt:
    """Blocking line reader.

    When *preset* is given (``--commands``), it is returned instead of
    prompting, so runs can be scripted.
    """

    def __init__(self, *, preset: str | None = None) -> None:
        self._preset = preset

    def ask(self, question: str = DEFAULT_PROMPT) -> str:
        if self._preset is not None:
            logger.debug("Using preset answer for prompt %r", question)
            return self._preset
        return click.prompt(question, default="", show_default=False, prompt_suffix="\n")
