"""GameSession — the click-driven state machine behind the board.

Turns raw square clicks, promotion choices, new-game and undo requests into
validated transitions.  Legality and game-end detection are delegated to a
:class:`~chessdesk.core.rules.RulesEngine`; the session only tracks what the
views need (selection, highlights, history, captures) and republishes an
immutable :class:`SessionSnapshot` after every change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chessdesk.core.enums import PieceKind
from chessdesk.core.piece import Piece
from chessdesk.core.rules import EngineRejection, Position, RulesEngine
from chessdesk.core.types import Square, square_name
from chessdesk.game.interfaces import GameOutcome, SessionPhase
from chessdesk.game.state import MoveRecord, SessionSnapshot, derive_captures

_LOGGER = logging.getLogger(__name__)

SnapshotCallback = Callable[[SessionSnapshot], None]

_NO_SQUARES: frozenset[Square] = frozenset()


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_snapshot: list[SnapshotCallback] = field(default_factory=list)


class GameSession:
    """Owns the authoritative session and the transitions that advance it.

    Thread-safety: single-threaded; every method runs to completion on the
    caller's (UI) thread.
    """

    __slots__ = ("_engine", "_position", "_snapshot", "events")

    def __init__(self, engine: RulesEngine | None = None) -> None:
        if engine is None:
            from chessdesk.core.chess_engine import PythonChessEngine

            engine = PythonChessEngine()
        self._engine = engine
        self._position: Position = engine.starting_position()
        self._snapshot = SessionSnapshot(
            fen=engine.position_to_fen(self._position),
            side_to_move=engine.side_to_move(self._position),
        )
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    def piece_map(self) -> dict[Square, Piece]:
        """Occupants of the current position."""
        return self._engine.piece_map(self._position)

    # ── Transitions ──────────────────────────────────────────────────────

    def start_new_game(self, fen: str | None = None) -> None:
        """Discard everything and start from the initial position (or *fen*)."""
        if fen is None:
            position = self._engine.starting_position()
        else:
            position = self._engine.position_from_fen(fen)
        self._position = position
        _LOGGER.debug("New game: %s", self._engine.position_to_fen(position))
        self._publish(self._derive(history=()))

    def handle_square_click(self, square: Square) -> None:
        """Advance move composition by one click on *square*."""
        snap = self._snapshot
        if snap.phase != SessionPhase.IN_PROGRESS or snap.pending_promotion:
            return

        if snap.selected is None:
            self._select(square)
            return

        origin = snap.selected
        cleared = replace(
            snap,
            selected=None,
            valid_moves=_NO_SQUARES,
            capture_targets=_NO_SQUARES,
        )
        target = self._engine.legal_target(self._position, origin, square)
        if target is None:
            _LOGGER.debug("Deselect %s", square_name(origin))
            self._publish(cleared)
            return

        if target.requires_promotion:
            _LOGGER.debug(
                "Promotion pending %s%s", square_name(origin), square_name(square)
            )
            self._publish(replace(cleared, pending_promotion=(origin, square)))
            return

        self._snapshot = cleared
        committed = self._commit_move(origin, square)
        self._publish(committed or cleared)

    def resolve_promotion(self, kind: PieceKind) -> bool:
        """Commit the pending promotion move with *kind*.

        Returns True if the move was played.
        """
        pending = self._snapshot.pending_promotion
        if pending is None:
            return False
        base = replace(self._snapshot, pending_promotion=None)
        self._snapshot = base
        committed = self._commit_move(*pending, promotion=kind)
        self._publish(committed or base)
        return committed is not None

    def cancel_promotion(self) -> None:
        """Abandon the pending promotion move, if any."""
        if self._snapshot.pending_promotion is None:
            return
        self._publish(replace(self._snapshot, pending_promotion=None))

    def undo(self) -> bool:
        """Take back the last ply. Returns True on success."""
        snap = self._snapshot
        if not snap.history or snap.phase == SessionPhase.NOT_STARTED:
            return False
        try:
            position = self._engine.undo_ply(self._position)
        except EngineRejection as exc:
            _LOGGER.warning("Undo rejected by rules engine: %s", exc)
            return False

        self._position = position
        undone = snap.history[-1]
        _LOGGER.debug(
            "Undo %s%s", square_name(undone.origin), square_name(undone.destination)
        )
        # A finished game is only ever reached by the ply just undone.
        self._publish(self._derive(history=snap.history[:-1], allow_over=False))
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _select(self, square: Square) -> None:
        snap = self._snapshot
        piece = self._engine.piece_at(self._position, square)
        if piece is None or piece.color != snap.side_to_move:
            return
        targets = self._engine.legal_moves(self._position, square)
        _LOGGER.debug("Select %s (%d targets)", square_name(square), len(targets))
        self._publish(
            replace(
                snap,
                selected=square,
                valid_moves=frozenset(t.destination for t in targets),
                capture_targets=frozenset(
                    t.destination for t in targets if t.is_capture
                ),
            )
        )

    def _commit_move(
        self,
        origin: Square,
        destination: Square,
        promotion: PieceKind | None = None,
    ) -> SessionSnapshot | None:
        """Apply a move through the engine.

        Returns the resulting snapshot (not yet published), or ``None`` when
        the engine rejects the move, in which case nothing changes.
        """
        mover = self._snapshot.side_to_move
        try:
            applied = self._engine.apply_move(
                self._position, origin, destination, promotion
            )
        except EngineRejection as exc:
            _LOGGER.warning("Move rejected by rules engine: %s", exc)
            return None

        self._position = applied.position
        record = MoveRecord(
            origin=origin,
            destination=destination,
            color=mover,
            captured=applied.captured,
            promotion=promotion,
            san=applied.san,
            fen_after=self._engine.position_to_fen(applied.position),
        )
        _LOGGER.debug("Commit %s (%s)", record.san, mover)
        return self._derive(history=(*self._snapshot.history, record))

    def _derive(
        self,
        history: tuple[MoveRecord, ...],
        *,
        allow_over: bool = True,
    ) -> SessionSnapshot:
        """Build a fresh snapshot for the current position and *history*.

        Selection and pending promotion are always cleared.
        """
        engine = self._engine
        position = self._position

        outcome = GameOutcome.NONE
        if allow_over:
            if engine.is_checkmate(position):
                outcome = GameOutcome.CHECKMATE
            elif engine.is_draw(position):
                outcome = GameOutcome.DRAW
        phase = (
            SessionPhase.IN_PROGRESS
            if outcome == GameOutcome.NONE
            else SessionPhase.OVER
        )

        last = history[-1] if history else None
        return SessionSnapshot(
            fen=engine.position_to_fen(position),
            side_to_move=engine.side_to_move(position),
            phase=phase,
            outcome=outcome,
            in_check=engine.is_check(position),
            last_move=(last.origin, last.destination) if last else None,
            history=history,
            captured=derive_captures(history),
        )

    def _publish(self, snapshot: SessionSnapshot) -> None:
        self._snapshot = snapshot
        for cb in self.events.on_snapshot:
            cb(snapshot)
