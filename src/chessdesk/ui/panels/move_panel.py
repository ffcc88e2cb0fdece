"""MovePanel — scrollable list of moves in SAN notation."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from chessdesk.core.enums import Color
from chessdesk.game.state import MoveRecord
from chessdesk.ui.info_model import move_rows

# Unicode figurine symbols: white = outline, black = filled
_FIGURINE: dict[Color, dict[str, str]] = {
    Color.WHITE: {"K": "♔", "Q": "♕", "R": "♖", "B": "♗", "N": "♘"},
    Color.BLACK: {"K": "♚", "Q": "♛", "R": "♜", "B": "♝", "N": "♞"},
}


def _figurine_san(san: str, color: Color) -> str:
    """Replace piece letters in *san* with Unicode figurine symbols for *color*."""
    table = _FIGURINE[color]

    # Leading piece letter (Nf3, Qxd5, Ke2…)
    if san and san[0] in table:
        san = table[san[0]] + san[1:]

    # Promotion target (e8=Q → e8=♕)
    if "=" in san:
        prefix, _, promo = san.partition("=")
        san = prefix + "=" + table.get(promo[0], promo[0]) + promo[1:]

    return san


class MovePanel(QWidget):
    """Displays the game's move history in standard notation."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._records: list[MoveRecord] = []
        self._row_labels: list[tuple[QLabel, QLabel | None]] = []
        self._use_figurine_notation = True
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel("Moves")
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setAlternatingRowColors(True)
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self._list.setFont(QFont("AdwaitaMono Nerd Font", 12))
        layout.addWidget(self._list)

    def clear(self) -> None:
        self._records.clear()
        self._row_labels.clear()
        self._list.clear()

    def set_use_figurine_notation(self, enabled: bool) -> None:
        """Toggle move text style between figurines and standard SAN letters."""
        if self._use_figurine_notation == enabled:
            return
        self._use_figurine_notation = enabled
        self._rebuild_list()

    def set_history(self, records: Sequence[MoveRecord]) -> None:
        """Rebuild the entire move list."""
        if list(records) == self._records:
            return
        self._records = list(records)
        self._rebuild_list()

    def row_texts(self) -> list[tuple[str, str | None]]:
        """Displayed (white, black) text per row."""
        return [
            (white.text(), black.text() if black is not None else None)
            for white, black in self._row_labels
        ]

    def _format_san(self, san: str, color: Color) -> str:
        if self._use_figurine_notation:
            return _figurine_san(san, color)
        return san

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._row_labels.clear()
        for move_num, white_san, black_san in move_rows(self._records):
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{move_num}.")
            num_label.setFixedWidth(28)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            white_label = QLabel(self._format_san(white_san, Color.WHITE))
            row_layout.addWidget(white_label, 1)

            black_label: QLabel | None = None
            if black_san is not None:
                black_label = QLabel(self._format_san(black_san, Color.BLACK))
                row_layout.addWidget(black_label, 1)
            else:
                row_layout.addStretch(1)
            self._row_labels.append((white_label, black_label))

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

        self._list.scrollToBottom()
