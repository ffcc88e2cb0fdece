"""Pure derivations for the info panel: status, move list, capture tray."""

from __future__ import annotations

from collections.abc import Sequence

from chessdesk.core.enums import Color
from chessdesk.core.piece import piece_glyph
from chessdesk.game.interfaces import GameOutcome, SessionPhase
from chessdesk.game.state import MoveRecord, SessionSnapshot

STATUS_NOT_STARTED = 'Click "New Game" to start playing'
STATUS_DRAW = "Game ended in a draw"


def status_text(snapshot: SessionSnapshot) -> str:
    """One-line description of the game state."""
    side = snapshot.side_to_move.display_name
    if snapshot.phase == SessionPhase.NOT_STARTED:
        return STATUS_NOT_STARTED
    if snapshot.outcome == GameOutcome.CHECKMATE:
        winner = snapshot.side_to_move.opposite.display_name
        return f"Checkmate! {winner} wins!"
    if snapshot.outcome == GameOutcome.DRAW:
        return STATUS_DRAW
    if snapshot.in_check:
        return f"{side} is in check"
    return f"{side} to move"


def move_rows(history: Sequence[MoveRecord]) -> list[tuple[int, str, str | None]]:
    """Pair plies into numbered rows: ``(1, "e4", "e5")``."""
    rows: list[tuple[int, str, str | None]] = []
    for idx in range(0, len(history), 2):
        black = history[idx + 1].san if idx + 1 < len(history) else None
        rows.append((idx // 2 + 1, history[idx].san, black))
    return rows


def captured_glyphs(snapshot: SessionSnapshot, color: Color) -> str:
    """Figurines of *color*'s pieces that have been captured."""
    return "".join(piece_glyph(color, kind) for kind in snapshot.captured.of(color))
