"""Chess domain primitives and the rules-engine boundary."""

from chessdesk.core.enums import PROMOTION_KINDS, Color, PieceKind
from chessdesk.core.piece import Piece, piece_glyph
from chessdesk.core.rules import (
    AppliedMove,
    ChessdeskError,
    EngineRejection,
    InvalidFen,
    LegalTarget,
    RulesEngine,
)
from chessdesk.core.types import Square, parse_square, square_name

__all__ = [
    "PROMOTION_KINDS",
    "AppliedMove",
    "ChessdeskError",
    "Color",
    "EngineRejection",
    "InvalidFen",
    "LegalTarget",
    "Piece",
    "PieceKind",
    "RulesEngine",
    "Square",
    "parse_square",
    "piece_glyph",
    "square_name",
]
