"""Tests for MoveRecord, CapturedTally and SessionSnapshot."""

import dataclasses

import pytest

from chessdesk.core.enums import Color, PieceKind
from chessdesk.core.types import D5, E2, E4, E5, E7
from chessdesk.game.interfaces import SessionPhase
from chessdesk.game.state import (
    CapturedTally,
    MoveRecord,
    SessionSnapshot,
    derive_captures,
)


def _rec(color: Color, captured: PieceKind | None = None) -> MoveRecord:
    return MoveRecord(origin=E2, destination=E4, color=color, captured=captured)


class TestDeriveCaptures:
    def test_empty_history(self) -> None:
        tally = derive_captures([])
        assert tally == CapturedTally()
        assert not tally.white and not tally.black

    def test_sides_are_attributed_to_victim(self) -> None:
        history = [
            _rec(Color.WHITE, PieceKind.PAWN),
            _rec(Color.BLACK, PieceKind.KNIGHT),
            _rec(Color.WHITE),
            _rec(Color.BLACK, PieceKind.QUEEN),
            _rec(Color.WHITE, PieceKind.ROOK),
        ]
        tally = derive_captures(history)
        assert tally.black == (PieceKind.PAWN, PieceKind.ROOK)
        assert tally.white == (PieceKind.KNIGHT, PieceKind.QUEEN)
        assert tally.of(Color.WHITE) == tally.white
        assert tally.of(Color.BLACK) == tally.black

    def test_duplicates_are_kept(self) -> None:
        history = [_rec(Color.WHITE, PieceKind.PAWN), _rec(Color.WHITE, PieceKind.PAWN)]
        assert derive_captures(history).black == (PieceKind.PAWN, PieceKind.PAWN)

    def test_prefix_rederivation(self) -> None:
        history = [
            _rec(Color.WHITE, PieceKind.PAWN),
            _rec(Color.BLACK, PieceKind.BISHOP),
        ]
        assert derive_captures(history[:1]) == CapturedTally(black=(PieceKind.PAWN,))


class TestSnapshot:
    def test_defaults(self) -> None:
        snap = SessionSnapshot(fen="")
        assert snap.phase == SessionPhase.NOT_STARTED
        assert snap.selected is None
        assert snap.valid_moves == frozenset()
        assert snap.pending_promotion is None
        assert not snap.can_undo

    def test_can_undo_requires_history_and_started(self) -> None:
        history = (_rec(Color.WHITE),)
        assert SessionSnapshot(
            fen="", phase=SessionPhase.IN_PROGRESS, history=history
        ).can_undo
        assert SessionSnapshot(fen="", phase=SessionPhase.OVER, history=history).can_undo
        assert not SessionSnapshot(fen="", history=history).can_undo
        assert not SessionSnapshot(fen="", phase=SessionPhase.IN_PROGRESS).can_undo

    def test_frozen(self) -> None:
        snap = SessionSnapshot(fen="")
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.selected = E7  # type: ignore[misc]

    def test_record_is_value(self) -> None:
        a = MoveRecord(origin=E4, destination=D5, color=Color.WHITE, san="exd5")
        b = MoveRecord(origin=E4, destination=D5, color=Color.WHITE, san="exd5")
        c = MoveRecord(origin=E4, destination=E5, color=Color.WHITE, san="e5")
        assert a == b
        assert a != c
