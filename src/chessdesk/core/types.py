"""Board squares as plain integers.

Squares are numbered rank by rank from white's side, so ``a1`` is 0, ``h1``
is 7 and ``h8`` is 63.  python-chess uses the same numbering, which lets
squares cross the engine boundary unchanged.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

FILE_NAMES = "abcdefgh"
RANK_NAMES = "12345678"


def file_of(sq: Square) -> int:
    return sq % 8


def rank_of(sq: Square) -> int:
    return sq // 8


def on_board(file: int, rank: int) -> bool:
    """True if *file* and *rank* both lie in 0..7."""
    return 0 <= file < 8 and 0 <= rank < 8


def make_square(file: int, rank: int) -> Square:
    """Square index for zero-based *file* and *rank*."""
    return file + 8 * rank


def square_name(sq: Square) -> str:
    """Algebraic name of *sq*, e.g. ``28`` → ``'e4'``."""
    rank, file = divmod(sq, 8)
    return f"{FILE_NAMES[file]}{RANK_NAMES[rank]}"


def parse_square(name: str) -> Square:
    """Inverse of :func:`square_name`. Raises ``ValueError`` on bad input."""
    if len(name) == 2:
        file, rank = FILE_NAMES.find(name[0]), RANK_NAMES.find(name[1])
        if file >= 0 and rank >= 0:
            return make_square(file, rank)
    raise ValueError(f"Invalid square name: {name!r}")


def is_light_square(sq: Square) -> bool:
    """a1 is dark; colours alternate along files and ranks."""
    return (file_of(sq) + rank_of(sq)) % 2 == 1


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
