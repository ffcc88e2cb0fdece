"""Tests for GameSession — the click-driven state machine."""

from __future__ import annotations

import logging
import random

import pytest

from chessdesk.core.chess_engine import STARTING_FEN, PythonChessEngine
from chessdesk.core.enums import PROMOTION_KINDS, Color, PieceKind
from chessdesk.core.rules import EngineRejection
from chessdesk.core.types import (
    A7,
    A8,
    B1,
    B8,
    C3,
    C6,
    D2,
    D5,
    D7,
    D8,
    E2,
    E3,
    E4,
    E5,
    E7,
    F2,
    F3,
    G1,
    G2,
    G4,
    G8,
    H1,
    H2,
    H4,
    H8,
    Square,
)
from chessdesk.game.interfaces import GameOutcome, SessionPhase
from chessdesk.game.session import GameSession
from chessdesk.game.state import CapturedTally, SessionSnapshot, derive_captures

PROMO_FEN = "7k/P7/8/8/8/8/8/K7 w - - 0 1"
CHECK_FEN = "4k3/8/8/8/8/8/4R3/4K3 b - - 0 1"
FIFTY_MOVE_FEN = "7k/8/8/8/8/8/8/K6R w - - 99 80"


def _started() -> GameSession:
    session = GameSession()
    session.start_new_game()
    return session


def _move(session: GameSession, origin: Square, destination: Square) -> None:
    session.handle_square_click(origin)
    session.handle_square_click(destination)


def _fools_mate(session: GameSession) -> None:
    _move(session, F2, F3)
    _move(session, E7, E5)
    _move(session, G2, G4)
    _move(session, D8, H4)


class _RejectingEngine(PythonChessEngine):
    def apply_move(self, position, origin, destination, promotion=None):
        raise EngineRejection("refused")


class _NoUndoEngine(PythonChessEngine):
    def undo_ply(self, position):
        raise EngineRejection("refused")


class TestNotStarted:
    def test_initial_phase(self) -> None:
        session = GameSession()
        snap = session.snapshot
        assert snap.phase == SessionPhase.NOT_STARTED
        assert snap.fen == STARTING_FEN
        assert snap.side_to_move == Color.WHITE

    def test_clicks_ignored(self) -> None:
        session = GameSession()
        before = session.snapshot
        session.handle_square_click(E2)
        assert session.snapshot is before

    def test_undo_ignored(self) -> None:
        session = GameSession()
        before = session.snapshot
        assert not session.undo()
        assert session.snapshot is before


class TestNewGame:
    def test_start(self) -> None:
        session = _started()
        snap = session.snapshot
        assert snap.phase == SessionPhase.IN_PROGRESS
        assert snap.outcome == GameOutcome.NONE
        assert snap.history == ()
        assert snap.last_move is None
        assert snap.captured == CapturedTally()

    def test_custom_fen(self) -> None:
        session = GameSession()
        session.start_new_game(CHECK_FEN)
        assert session.snapshot.side_to_move == Color.BLACK
        assert session.snapshot.in_check

    @pytest.mark.parametrize("setup", ["selected", "pending", "over", "moved"])
    def test_resets_from_any_state(self, setup: str) -> None:
        session = GameSession()
        if setup == "pending":
            session.start_new_game(PROMO_FEN)
            _move(session, A7, A8)
            assert session.snapshot.pending_promotion is not None
        else:
            session.start_new_game()
            if setup == "selected":
                session.handle_square_click(E2)
            elif setup == "over":
                _fools_mate(session)
            elif setup == "moved":
                _move(session, E2, E4)

        session.start_new_game()
        snap = session.snapshot
        assert snap.phase == SessionPhase.IN_PROGRESS
        assert snap.selected is None
        assert snap.valid_moves == frozenset()
        assert snap.pending_promotion is None
        assert snap.history == ()
        assert snap.captured == CapturedTally()
        assert snap.last_move is None
        assert snap.fen == STARTING_FEN


class TestSelection:
    def test_select_own_piece(self) -> None:
        session = _started()
        session.handle_square_click(E2)
        snap = session.snapshot
        assert snap.selected == E2
        assert snap.valid_moves == frozenset({E3, E4})
        assert snap.capture_targets == frozenset()

    def test_opponent_piece_not_selectable(self) -> None:
        session = _started()
        before = session.snapshot
        session.handle_square_click(E7)
        assert session.snapshot is before

    def test_empty_square_not_selectable(self) -> None:
        session = _started()
        before = session.snapshot
        session.handle_square_click(E4)
        assert session.snapshot is before

    def test_illegal_destination_deselects(self) -> None:
        session = _started()
        _move(session, E2, E5)
        snap = session.snapshot
        assert snap.selected is None
        assert snap.valid_moves == frozenset()
        assert snap.history == ()

    def test_other_own_piece_only_deselects(self) -> None:
        session = _started()
        _move(session, E2, D2)
        assert session.snapshot.selected is None
        assert session.snapshot.valid_moves == frozenset()

    def test_capture_targets(self) -> None:
        session = _started()
        _move(session, E2, E4)
        _move(session, D7, D5)
        session.handle_square_click(E4)
        snap = session.snapshot
        assert snap.capture_targets == frozenset({D5})
        assert snap.valid_moves == frozenset({D5, E5})


class TestCommit:
    def test_e2_e4(self) -> None:
        session = _started()
        _move(session, E2, E4)
        snap = session.snapshot
        assert snap.last_move == (E2, E4)
        assert snap.captured == CapturedTally()
        assert snap.phase == SessionPhase.IN_PROGRESS
        assert snap.side_to_move == Color.BLACK
        assert snap.selected is None
        assert len(snap.history) == 1
        record = snap.history[0]
        assert (record.origin, record.destination) == (E2, E4)
        assert record.color == Color.WHITE
        assert record.san == "e4"
        assert record.captured is None
        assert record.promotion is None
        assert record.fen_after == snap.fen

    def test_capture_is_tallied(self) -> None:
        session = _started()
        _move(session, E2, E4)
        _move(session, D7, D5)
        _move(session, E4, D5)
        snap = session.snapshot
        assert snap.history[-1].captured == PieceKind.PAWN
        assert snap.captured.black == (PieceKind.PAWN,)
        assert snap.captured.white == ()
        _move(session, D8, D5)
        assert session.snapshot.captured.white == (PieceKind.PAWN,)

    def test_old_snapshots_are_untouched(self) -> None:
        session = _started()
        first = session.snapshot
        _move(session, E2, E4)
        assert first.history == ()
        assert first.fen == STARTING_FEN
        assert first.last_move is None

    def test_fools_mate_ends_game(self) -> None:
        session = _started()
        _fools_mate(session)
        snap = session.snapshot
        assert snap.phase == SessionPhase.OVER
        assert snap.outcome == GameOutcome.CHECKMATE
        assert snap.side_to_move == Color.WHITE
        assert snap.in_check
        assert snap.history[-1].san == "Qh4#"

    def test_clicks_after_game_over_are_noops(self) -> None:
        session = _started()
        _fools_mate(session)
        before = session.snapshot
        for sq in (E2, E4, G4, H4):
            session.handle_square_click(sq)
        assert session.snapshot is before

    def test_engine_rejection_leaves_state(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        session = GameSession(_RejectingEngine())
        session.start_new_game()
        with caplog.at_level(logging.WARNING, logger="chessdesk.game.session"):
            _move(session, E2, E4)
        snap = session.snapshot
        assert snap.history == ()
        assert snap.fen == STARTING_FEN
        assert snap.selected is None
        assert "rejected" in caplog.text


class TestPromotion:
    def test_pending_instead_of_commit(self) -> None:
        session = GameSession()
        session.start_new_game(PROMO_FEN)
        _move(session, A7, A8)
        snap = session.snapshot
        assert snap.pending_promotion == (A7, A8)
        assert snap.selected is None
        assert snap.valid_moves == frozenset()
        assert snap.history == ()

    def test_clicks_ignored_while_pending(self) -> None:
        session = GameSession()
        session.start_new_game(PROMO_FEN)
        _move(session, A7, A8)
        before = session.snapshot
        session.handle_square_click(A7)
        assert session.snapshot is before

    def test_resolve_queen(self) -> None:
        session = GameSession()
        session.start_new_game(PROMO_FEN)
        _move(session, A7, A8)
        assert session.resolve_promotion(PieceKind.QUEEN)
        snap = session.snapshot
        assert snap.pending_promotion is None
        assert snap.history[-1].promotion == PieceKind.QUEEN
        assert snap.history[-1].san == "a8=Q+"
        assert snap.last_move == (A7, A8)

    @pytest.mark.parametrize("kind", PROMOTION_KINDS)
    def test_every_promotion_kind(self, kind: PieceKind) -> None:
        session = GameSession()
        session.start_new_game(PROMO_FEN)
        _move(session, A7, A8)
        assert session.resolve_promotion(kind)
        assert session.snapshot.history[-1].promotion == kind

    def test_resolve_without_pending(self) -> None:
        session = _started()
        before = session.snapshot
        assert not session.resolve_promotion(PieceKind.QUEEN)
        assert session.snapshot is before

    def test_invalid_kind_is_rejected(self) -> None:
        session = GameSession()
        session.start_new_game(PROMO_FEN)
        _move(session, A7, A8)
        assert not session.resolve_promotion(PieceKind.KING)
        snap = session.snapshot
        assert snap.pending_promotion is None
        assert snap.history == ()

    def test_cancel(self) -> None:
        session = GameSession()
        session.start_new_game(PROMO_FEN)
        _move(session, A7, A8)
        session.cancel_promotion()
        snap = session.snapshot
        assert snap.pending_promotion is None
        assert snap.history == ()
        assert snap.fen == PROMO_FEN

    def test_cancel_without_pending_is_noop(self) -> None:
        session = _started()
        before = session.snapshot
        session.cancel_promotion()
        assert session.snapshot is before


class TestUndo:
    def test_empty_history_is_noop(self) -> None:
        session = _started()
        before = session.snapshot
        assert not session.undo()
        assert session.snapshot is before

    def test_undo_then_redo_reproduces_fen(self) -> None:
        session = _started()
        _move(session, E2, E4)
        _move(session, E7, E5)
        fen_after = session.snapshot.fen
        assert session.undo()
        _move(session, E7, E5)
        assert session.snapshot.fen == fen_after

    def test_undo_recomputes_derived_state(self) -> None:
        session = _started()
        _move(session, E2, E4)
        _move(session, D7, D5)
        _move(session, E4, D5)
        assert session.undo()
        snap = session.snapshot
        assert len(snap.history) == 2
        assert snap.last_move == (D7, D5)
        assert snap.captured == CapturedTally()
        assert snap.side_to_move == Color.WHITE

    def test_undo_to_start(self) -> None:
        session = _started()
        _move(session, E2, E4)
        assert session.undo()
        snap = session.snapshot
        assert snap.fen == STARTING_FEN
        assert snap.last_move is None
        assert snap.phase == SessionPhase.IN_PROGRESS

    def test_undo_after_mate_resumes_play(self) -> None:
        session = _started()
        _fools_mate(session)
        assert session.undo()
        snap = session.snapshot
        assert snap.phase == SessionPhase.IN_PROGRESS
        assert snap.outcome == GameOutcome.NONE
        assert snap.side_to_move == Color.BLACK
        session.handle_square_click(D8)
        assert session.snapshot.selected == D8

    def test_undo_clears_selection(self) -> None:
        session = _started()
        _move(session, E2, E4)
        session.handle_square_click(E7)
        assert session.undo()
        assert session.snapshot.selected is None
        assert session.snapshot.valid_moves == frozenset()

    def test_undo_clears_pending_promotion(self) -> None:
        session = GameSession()
        session.start_new_game("7k/P7/8/8/8/8/7P/K7 w - - 0 1")
        _move(session, H2, H4)
        _move(session, H8, G8)
        _move(session, A7, A8)
        assert session.snapshot.pending_promotion is not None
        assert session.undo()
        assert session.snapshot.pending_promotion is None
        assert len(session.snapshot.history) == 1

    def test_engine_rejection(self, caplog: pytest.LogCaptureFixture) -> None:
        session = GameSession(_NoUndoEngine())
        session.start_new_game()
        _move(session, E2, E4)
        before = session.snapshot
        with caplog.at_level(logging.WARNING, logger="chessdesk.game.session"):
            assert not session.undo()
        assert session.snapshot is before
        assert "Undo rejected" in caplog.text


class TestDraws:
    def _shuffle_knights_twice(self, session: GameSession) -> None:
        for _ in range(2):
            _move(session, B1, C3)
            _move(session, B8, C6)
            _move(session, C3, B1)
            _move(session, C6, B8)

    def test_threefold_repetition_ends_game(self) -> None:
        session = _started()
        self._shuffle_knights_twice(session)
        snap = session.snapshot
        assert snap.phase == SessionPhase.OVER
        assert snap.outcome == GameOutcome.DRAW
        assert len(snap.history) == 8
        assert snap.fen == STARTING_FEN

    def test_fifty_move_rule_ends_game(self) -> None:
        session = GameSession()
        session.start_new_game(FIFTY_MOVE_FEN)
        _move(session, H1, G1)
        snap = session.snapshot
        assert snap.phase == SessionPhase.OVER
        assert snap.outcome == GameOutcome.DRAW
        assert not snap.in_check

    def test_clicks_ignored_after_draw(self) -> None:
        session = GameSession()
        session.start_new_game(FIFTY_MOVE_FEN)
        _move(session, H1, G1)
        before = session.snapshot
        session.handle_square_click(H8)
        assert session.snapshot is before

    def test_undo_from_draw_resumes_play(self) -> None:
        session = GameSession()
        session.start_new_game(FIFTY_MOVE_FEN)
        _move(session, H1, G1)
        assert session.undo()
        snap = session.snapshot
        assert snap.phase == SessionPhase.IN_PROGRESS
        assert snap.outcome == GameOutcome.NONE
        assert snap.fen == FIFTY_MOVE_FEN
        assert snap.history == ()

    def test_undo_from_repetition_resumes_play(self) -> None:
        session = _started()
        self._shuffle_knights_twice(session)
        assert session.undo()
        snap = session.snapshot
        assert snap.phase == SessionPhase.IN_PROGRESS
        assert snap.outcome == GameOutcome.NONE
        assert len(snap.history) == 7
        _move(session, C6, B8)
        assert session.snapshot.outcome == GameOutcome.DRAW


class TestEvents:
    def test_snapshot_published_per_transition(self) -> None:
        session = GameSession()
        seen: list[SessionSnapshot] = []
        session.events.on_snapshot.append(seen.append)

        session.start_new_game()
        session.handle_square_click(E2)
        session.handle_square_click(E4)
        session.undo()

        assert len(seen) == 4
        assert seen[-1] is session.snapshot
        assert seen[1].selected == E2
        assert seen[2].last_move == (E2, E4)

    def test_noops_publish_nothing(self) -> None:
        session = _started()
        seen: list[SessionSnapshot] = []
        session.events.on_snapshot.append(seen.append)

        session.handle_square_click(E4)  # empty square
        session.undo()
        session.resolve_promotion(PieceKind.QUEEN)
        session.cancel_promotion()

        assert seen == []


class TestInvariants:
    @pytest.mark.parametrize("seed", range(5))
    def test_random_clicks_keep_invariants(self, seed: int) -> None:
        rng = random.Random(seed)
        session = GameSession()
        checked: list[SessionSnapshot] = []
        session.events.on_snapshot.append(checked.append)
        session.start_new_game()

        for _ in range(400):
            snap = session.snapshot
            if snap.phase == SessionPhase.OVER:
                if rng.random() < 0.5:
                    session.undo()
                else:
                    session.start_new_game()
            elif snap.pending_promotion is not None:
                if rng.random() < 0.2:
                    session.cancel_promotion()
                else:
                    session.resolve_promotion(rng.choice(PROMOTION_KINDS))
            elif snap.selected is not None and snap.valid_moves and rng.random() < 0.8:
                session.handle_square_click(rng.choice(sorted(snap.valid_moves)))
            elif rng.random() < 0.05:
                session.undo()
            else:
                session.handle_square_click(rng.randrange(64))

        assert checked
        for snap in checked:
            assert snap.selected is None or snap.pending_promotion is None
            if snap.selected is None:
                assert snap.valid_moves == frozenset()
            assert snap.capture_targets <= snap.valid_moves
            assert snap.captured == derive_captures(snap.history)
            if not snap.history:
                assert snap.last_move is None
                assert snap.captured == CapturedTally()
            else:
                last = snap.history[-1]
                assert snap.last_move == (last.origin, last.destination)
