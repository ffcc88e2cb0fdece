"""Pure derivation of what each board square should look like."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from chessdesk.core.piece import Piece
from chessdesk.core.types import (
    FILE_NAMES,
    RANK_NAMES,
    Square,
    file_of,
    is_light_square,
    make_square,
    on_board,
    rank_of,
)
from chessdesk.game.state import SessionSnapshot


@dataclass(frozen=True, slots=True)
class SquareView:
    """Render descriptor for one square."""

    square: Square
    row: int  # visual row, 0 = top
    col: int  # visual column, 0 = left
    is_light: bool
    piece: Piece | None = None
    selected: bool = False
    move_target: bool = False  # reachable, nothing to capture
    capture_target: bool = False
    last_move_from: bool = False
    last_move_to: bool = False
    rank_label: str | None = None
    file_label: str | None = None


def square_at(row: int, col: int, flipped: bool = False) -> Square | None:
    """Screen (row, col) → board square, or ``None`` outside the board."""
    file, rank = (7 - col, row) if flipped else (col, 7 - row)
    if not on_board(file, rank):
        return None
    return make_square(file, rank)


def describe_board(
    snapshot: SessionSnapshot,
    pieces: Mapping[Square, Piece],
    *,
    flipped: bool = False,
) -> list[SquareView]:
    """All 64 squares in display order (top-left to bottom-right)."""
    last_from, last_to = snapshot.last_move or (None, None)
    views: list[SquareView] = []
    for row in range(8):
        for col in range(8):
            sq = square_at(row, col, flipped)
            assert sq is not None
            reachable = sq in snapshot.valid_moves
            capture = reachable and (sq in snapshot.capture_targets or sq in pieces)
            views.append(
                SquareView(
                    square=sq,
                    row=row,
                    col=col,
                    is_light=is_light_square(sq),
                    piece=pieces.get(sq),
                    selected=sq == snapshot.selected,
                    move_target=reachable and not capture,
                    capture_target=capture,
                    last_move_from=sq == last_from,
                    last_move_to=sq == last_to,
                    rank_label=RANK_NAMES[rank_of(sq)] if col == 0 else None,
                    file_label=FILE_NAMES[file_of(sq)] if row == 7 else None,
                )
            )
    return views
