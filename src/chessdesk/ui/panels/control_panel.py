"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget


class ControlPanel(QWidget):
    """Buttons for game actions: new game, undo, flip."""

    new_game_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        self._btn_new = QPushButton("New Game")
        self._btn_undo = QPushButton("Undo")
        self._btn_flip = QPushButton("Flip")
        for btn, signal in (
            (self._btn_new, self.new_game_clicked),
            (self._btn_undo, self.undo_clicked),
            (self._btn_flip, self.flip_clicked),
        ):
            btn.setFont(btn_font)
            btn.setMinimumHeight(36)
            btn.clicked.connect(signal)
            layout.addWidget(btn)

        self._btn_undo.setEnabled(False)

    def set_undo_enabled(self, enabled: bool) -> None:
        self._btn_undo.setEnabled(enabled)
