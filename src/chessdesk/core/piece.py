"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessdesk.core.enums import Color, PieceKind

_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "p",
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
    PieceKind.KING: "k",
}

# Unicode figurines: white = outline, black = filled
_GLYPHS: dict[Color, dict[PieceKind, str]] = {
    Color.WHITE: {
        PieceKind.PAWN: "♙",
        PieceKind.KNIGHT: "♘",
        PieceKind.BISHOP: "♗",
        PieceKind.ROOK: "♖",
        PieceKind.QUEEN: "♕",
        PieceKind.KING: "♔",
    },
    Color.BLACK: {
        PieceKind.PAWN: "♟",
        PieceKind.KNIGHT: "♞",
        PieceKind.BISHOP: "♝",
        PieceKind.ROOK: "♜",
        PieceKind.QUEEN: "♛",
        PieceKind.KING: "♚",
    },
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, kind) pair."""

    color: Color
    kind: PieceKind

    @property
    def letter(self) -> str:
        """FEN letter: upper case for white, lower case for black."""
        letter = _LETTERS[self.kind]
        return letter.upper() if self.color == Color.WHITE else letter

    @property
    def glyph(self) -> str:
        return _GLYPHS[self.color][self.kind]


def piece_glyph(color: Color, kind: PieceKind) -> str:
    """Unicode figurine for a piece of *kind* and *color*."""
    return _GLYPHS[color][kind]
