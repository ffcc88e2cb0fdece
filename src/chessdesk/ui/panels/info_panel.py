"""InfoPanel — status line, capture trays, move log and game actions."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from chessdesk.core.enums import Color
from chessdesk.game.state import SessionSnapshot
from chessdesk.ui.info_model import captured_glyphs, status_text
from chessdesk.ui.panels.control_panel import ControlPanel
from chessdesk.ui.panels.move_panel import MovePanel


class InfoPanel(QWidget):
    """Right-hand column of the main window.

    Signals:
        new_game_clicked(), undo_clicked(), flip_clicked(): bubbled up from
        the control panel.
    """

    new_game_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

        self._control_panel.new_game_clicked.connect(self.new_game_clicked.emit)
        self._control_panel.undo_clicked.connect(self.undo_clicked.emit)
        self._control_panel.flip_clicked.connect(self.flip_clicked.emit)

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self._status_label = QLabel()
        self._status_label.setFont(QFont("Adwaita Sans", 13, QFont.Weight.Bold))
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setWordWrap(True)
        layout.addWidget(self._status_label)

        # Pieces each side has lost
        tray_font = QFont("DejaVu Sans", 16)
        self._captured_labels: dict[Color, QLabel] = {}
        for color in (Color.BLACK, Color.WHITE):
            label = QLabel()
            label.setFont(tray_font)
            label.setMinimumHeight(28)
            layout.addWidget(label)
            self._captured_labels[color] = label

        self._move_panel = MovePanel()
        layout.addWidget(self._move_panel, stretch=1)

        self._control_panel = ControlPanel()
        layout.addWidget(self._control_panel)

    @property
    def move_panel(self) -> MovePanel:
        return self._move_panel

    @property
    def control_panel(self) -> ControlPanel:
        return self._control_panel

    def status(self) -> str:
        return self._status_label.text()

    def captured_text(self, color: Color) -> str:
        return self._captured_labels[color].text()

    def render_snapshot(self, snapshot: SessionSnapshot) -> None:
        self._status_label.setText(status_text(snapshot))
        for color, label in self._captured_labels.items():
            label.setText(captured_glyphs(snapshot, color))
        self._move_panel.set_history(snapshot.history)
        self._control_panel.set_undo_enabled(snapshot.can_undo)
