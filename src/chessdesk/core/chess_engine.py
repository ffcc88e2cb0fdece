"""RulesEngine implementation backed by python-chess.

Positions are :class:`chess.Board` instances.  Boards are copied together with
their move stacks before any mutation, so callers can keep old positions
around (and undo across them) without aliasing.
"""

from __future__ import annotations

import chess

from chessdesk.core.enums import Color, PieceKind
from chessdesk.core.piece import Piece
from chessdesk.core.rules import (
    AppliedMove,
    EngineRejection,
    InvalidFen,
    LegalTarget,
    Position,
    RulesEngine,
)
from chessdesk.core.types import Square, square_name

STARTING_FEN = chess.STARTING_FEN


def _color(turn: chess.Color) -> Color:
    return Color.WHITE if turn == chess.WHITE else Color.BLACK


class PythonChessEngine(RulesEngine):
    """Standard chess rules via :mod:`chess`."""

    # ── Position construction / notation ─────────────────────────────────

    def starting_position(self) -> chess.Board:
        return chess.Board()

    def position_from_fen(self, fen: str) -> chess.Board:
        try:
            return chess.Board(fen)
        except ValueError as exc:
            raise InvalidFen(f"Invalid FEN {fen!r}: {exc}") from exc

    def position_to_fen(self, position: Position) -> str:
        return position.fen()

    # ── Moves ────────────────────────────────────────────────────────────

    def legal_moves(self, position: Position, square: Square) -> frozenset[LegalTarget]:
        targets: dict[Square, LegalTarget] = {}
        for move in position.legal_moves:
            if move.from_square != square:
                continue
            # The four promotion choices collapse into one destination.
            targets[move.to_square] = LegalTarget(
                destination=move.to_square,
                requires_promotion=move.promotion is not None,
                is_capture=position.is_capture(move),
            )
        return frozenset(targets.values())

    def apply_move(
        self,
        position: Position,
        origin: Square,
        destination: Square,
        promotion: PieceKind | None = None,
    ) -> AppliedMove:
        move = chess.Move(
            origin,
            destination,
            promotion=int(promotion) if promotion is not None else None,
        )
        if move not in position.legal_moves:
            raise EngineRejection(
                f"Illegal move {square_name(origin)}{square_name(destination)}"
                f" in {position.fen()!r}"
            )

        captured: PieceKind | None = None
        if position.is_en_passant(move):
            captured = PieceKind.PAWN
        else:
            taken = position.piece_type_at(destination)
            if taken is not None:
                captured = PieceKind(taken)

        san = position.san(move)
        board = position.copy()
        board.push(move)
        return AppliedMove(position=board, captured=captured, san=san)

    def undo_ply(self, position: Position) -> chess.Board:
        if not position.move_stack:
            raise EngineRejection("No ply to undo")
        board = position.copy()
        board.pop()
        return board

    # ── Queries ──────────────────────────────────────────────────────────

    def is_check(self, position: Position) -> bool:
        return position.is_check()

    def is_checkmate(self, position: Position) -> bool:
        return position.is_checkmate()

    def is_draw(self, position: Position) -> bool:
        return (
            position.is_stalemate()
            or position.is_insufficient_material()
            or position.halfmove_clock >= 100
            or position.is_repetition(3)
        )

    def side_to_move(self, position: Position) -> Color:
        return _color(position.turn)

    def piece_at(self, position: Position, square: Square) -> Piece | None:
        piece = position.piece_at(square)
        if piece is None:
            return None
        return Piece(_color(piece.color), PieceKind(piece.piece_type))

    def piece_map(self, position: Position) -> dict[Square, Piece]:
        return {
            sq: Piece(_color(p.color), PieceKind(p.piece_type))
            for sq, p in position.piece_map().items()
        }
