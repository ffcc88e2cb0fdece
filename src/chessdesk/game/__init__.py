"""Game session layer — click-driven state machine and its snapshots.

Quick start::

    from chessdesk.core.types import parse_square
    from chessdesk.game import GameSession

    session = GameSession()
    session.events.on_snapshot.append(print)
    session.start_new_game()
    session.handle_square_click(parse_square("e2"))
    session.handle_square_click(parse_square("e4"))
"""

from chessdesk.game.interfaces import GameOutcome, SessionPhase
from chessdesk.game.session import GameSession, SessionEvents
from chessdesk.game.state import (
    CapturedTally,
    MoveRecord,
    SessionSnapshot,
    derive_captures,
)

__all__ = [
    "CapturedTally",
    "GameOutcome",
    "GameSession",
    "MoveRecord",
    "SessionEvents",
    "SessionPhase",
    "SessionSnapshot",
    "derive_captures",
]
