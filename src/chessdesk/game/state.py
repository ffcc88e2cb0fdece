"""Immutable session data handed to the view layer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from chessdesk.core.enums import Color, PieceKind
from chessdesk.core.types import Square
from chessdesk.game.interfaces import GameOutcome, SessionPhase


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single committed move."""

    origin: Square
    destination: Square
    color: Color
    captured: PieceKind | None = None
    promotion: PieceKind | None = None
    san: str = ""
    fen_after: str = ""


@dataclass(frozen=True, slots=True)
class CapturedTally:
    """Captured piece kinds per color, in capture order.

    ``white`` lists white pieces taken by black, ``black`` the reverse.
    """

    white: tuple[PieceKind, ...] = ()
    black: tuple[PieceKind, ...] = ()

    def of(self, color: Color) -> tuple[PieceKind, ...]:
        return self.white if color == Color.WHITE else self.black


def derive_captures(history: Iterable[MoveRecord]) -> CapturedTally:
    """Rebuild the capture tally from scratch by replaying *history*."""
    white: list[PieceKind] = []
    black: list[PieceKind] = []
    for record in history:
        if record.captured is None:
            continue
        if record.color == Color.WHITE:
            black.append(record.captured)
        else:
            white.append(record.captured)
    return CapturedTally(white=tuple(white), black=tuple(black))


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Everything the views need to render one instant of the session."""

    fen: str
    side_to_move: Color = Color.WHITE
    phase: SessionPhase = SessionPhase.NOT_STARTED
    outcome: GameOutcome = GameOutcome.NONE
    in_check: bool = False
    selected: Square | None = None
    valid_moves: frozenset[Square] = frozenset()
    capture_targets: frozenset[Square] = frozenset()
    pending_promotion: tuple[Square, Square] | None = None
    last_move: tuple[Square, Square] | None = None
    history: tuple[MoveRecord, ...] = ()
    captured: CapturedTally = field(default_factory=CapturedTally)

    @property
    def can_undo(self) -> bool:
        return bool(self.history) and self.phase != SessionPhase.NOT_STARTED
