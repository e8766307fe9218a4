"""Reactive runtime — the generic event/effect drive loop.

Knows nothing about missions: it is parameterized over any
(State, Event, Effect) triple, a pure transition function, and an effect
interpreter. One effect is interpreted at a time; the loop ends when the
interpreter returns no event.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import structlog

_S = TypeVar("_S")
_Ev = TypeVar("_Ev")
_Ef = TypeVar("_Ef")

log = structlog.get_logger("marsrover.runtime")


def run(  # noqa: UP047
    init: tuple[_S, _Ef],
    update: Callable[[_S, _Ev], tuple[_S, _Ef]],
    interpret: Callable[[_Ef], _Ev | None],
) -> _S:
    """Drive *update* and *interpret* from *init* until no event is produced.

    Returns the last state. Exceptions raised by *interpret* or *update*
    propagate to the caller unchanged.
    """
    state, effect = init
    steps = 0
    while True:
        log.debug("runtime.effect", step=steps, effect=type(effect).__name__)
        event = interpret(effect)
        if event is None:
            log.debug("runtime.stop", steps=steps, state=type(state).__name__)
            return state
        state, effect = update(state, event)
        steps += 1
        log.debug(
            "runtime.transition",
            step=steps,
            event_type=type(event).__name__,
            state=type(state).__name__,
        )
