"""Rules-engine boundary consulted by the game session.

The session never inspects a position directly: it holds an opaque
``Position`` handle and asks a :class:`RulesEngine` everything it needs to
know.  Implementations must treat positions as values: every operation that
produces a new position returns a fresh object and leaves its input intact.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, TypeAlias

from chessdesk.core.enums import Color, PieceKind
from chessdesk.core.piece import Piece
from chessdesk.core.types import Square

Position: TypeAlias = Any  # engine-owned, opaque to callers


# ── Errors ───────────────────────────────────────────────────────────────────


class ChessdeskError(Exception):
    """Base class for all chessdesk errors."""


class EngineRejection(ChessdeskError):
    """The rules engine refused a move or an undo."""


class InvalidFen(ChessdeskError, ValueError):
    """A FEN string could not be parsed into a position."""


# ── Result types ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class LegalTarget:
    """One legal destination for a piece on a given square."""

    destination: Square
    requires_promotion: bool = False
    is_capture: bool = False


@dataclass(frozen=True, slots=True)
class AppliedMove:
    """Outcome of a successful :meth:`RulesEngine.apply_move`."""

    position: Position
    captured: PieceKind | None
    san: str


# ── Interface ────────────────────────────────────────────────────────────────


class RulesEngine(ABC):
    """Everything the session needs from a chess rules implementation."""

    # Position construction / notation

    @abstractmethod
    def starting_position(self) -> Position:
        """Standard initial arrangement, white to move."""

    @abstractmethod
    def position_from_fen(self, fen: str) -> Position:
        """Parse *fen*. Raises :class:`InvalidFen`."""

    @abstractmethod
    def position_to_fen(self, position: Position) -> str:
        """Serialize *position* to FEN."""

    # Moves

    @abstractmethod
    def legal_moves(self, position: Position, square: Square) -> frozenset[LegalTarget]:
        """Legal destinations for the piece on *square* (empty if none)."""

    @abstractmethod
    def apply_move(
        self,
        position: Position,
        origin: Square,
        destination: Square,
        promotion: PieceKind | None = None,
    ) -> AppliedMove:
        """Play a move and return the resulting position.

        Raises :class:`EngineRejection` if the move is not legal.
        """

    @abstractmethod
    def undo_ply(self, position: Position) -> Position:
        """Position before the last ply. Raises :class:`EngineRejection`."""

    # Queries

    @abstractmethod
    def is_check(self, position: Position) -> bool: ...

    @abstractmethod
    def is_checkmate(self, position: Position) -> bool: ...

    @abstractmethod
    def is_draw(self, position: Position) -> bool: ...

    @abstractmethod
    def side_to_move(self, position: Position) -> Color: ...

    @abstractmethod
    def piece_at(self, position: Position, square: Square) -> Piece | None: ...

    def piece_map(self, position: Position) -> dict[Square, Piece]:
        """All occupied squares of *position*."""
        pieces: dict[Square, Piece] = {}
        for sq in range(64):
            piece = self.piece_at(position, sq)
            if piece is not None:
                pieces[sq] = piece
        return pieces

    def legal_target(
        self, position: Position, origin: Square, destination: Square
    ) -> LegalTarget | None:
        """The legal move *origin* → *destination*, or ``None``."""
        for target in self.legal_moves(position, origin):
            if target.destination == destination:
                return target
        return None
