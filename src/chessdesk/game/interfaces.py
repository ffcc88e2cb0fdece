"""Session phases and outcomes."""

from __future__ import annotations

from enum import IntEnum, auto


class SessionPhase(IntEnum):
    """Finite-state-machine states for an interactive session."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    OVER = auto()


class GameOutcome(IntEnum):
    """Why the game ended, if it has."""

    NONE = 0
    CHECKMATE = auto()
    DRAW = auto()
