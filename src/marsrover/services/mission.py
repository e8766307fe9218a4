"""Mission decision core — the pure ``(state, event) -> (state, effect)`` machine.

Transition table::

    Loading        + LoadMissionSuccessful(m) -> Ready(m),  AskCommands
    Loading        + LoadMissionFailed(e)     -> Failed,    Ko(e)
    Ready(m)       + CommandsReceived(cs)     -> Ready(m'), ReportObstacleHit(m'.rover)
                                                            or ReportCommandSequenceCompleted(m'.rover)
    anything else                             -> Failed,    Ko(GenericError(...))

INVARIANT: ``update`` is total. No (state, event) pair is ignored; the
fallback row turns it into a fatal ``GenericError``.
"""

from __future__ import annotations

from marsrover.domain.errors import GenericError
from marsrover.domain.simulation import apply_commands
from marsrover.services.messages import (
    AppState,
    AskCommands,
    CommandsReceived,
    Effect,
    Event,
    Failed,
    Ko,
    LoadMission,
    LoadMissionFailed,
    LoadMissionSuccessful,
    Loading,
    Ready,
    ReportCommandSequenceCompleted,
    ReportObstacleHit,
)


def init(planet_ref: str, rover_ref: str) -> tuple[AppState, Effect]:
    """Initial state and the effect that starts the run."""
    return Loading(), LoadMission(planet_ref, rover_ref)


def update(state: AppState, event: Event) -> tuple[AppState, Effect]:
    """Compute the next state and the effect to perform."""
    match state, event:
        case Loading(), LoadMissionSuccessful(mission=mission):
            return Ready(mission), AskCommands()

        case Loading(), LoadMissionFailed(error=error):
            return Failed(), Ko(error)

        case Ready(mission=mission), CommandsReceived(commands=commands):
            result = apply_commands(mission, commands)
            final = result.mission
            if result.obstacle_hit:
                return Ready(final), ReportObstacleHit(final.rover)
            return Ready(final), ReportCommandSequenceCompleted(final.rover)

        case _:
            message = f"Cannot handle {event} event in {state} state."
            return Failed(), Ko(GenericError(message, state=state, event=event))
