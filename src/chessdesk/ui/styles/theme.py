"""Visual theme constants and QSS styles for Chessdesk."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_selected: QColor  # selected piece origin
    highlight_move: QColor  # reachable empty squares
    highlight_capture: QColor  # reachable enemy pieces
    last_move_from: QColor
    last_move_to: QColor
    coord_light: QColor  # coordinate text on light squares
    coord_dark: QColor  # coordinate text on dark squares
    piece_ink: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_selected=QColor(255, 255, 0, 100),
            highlight_move=QColor(0, 0, 0, 40),
            highlight_capture=QColor(220, 40, 40, 90),
            last_move_from=QColor(155, 199, 0, 80),
            last_move_to=QColor(155, 199, 0, 120),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
            piece_ink=QColor(20, 20, 20),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        base = cls.default()
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_selected=base.highlight_selected,
            highlight_move=base.highlight_move,
            highlight_capture=base.highlight_capture,
            last_move_from=base.last_move_from,
            last_move_to=base.last_move_to,
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
            piece_ink=base.piece_ink,
        )

    @classmethod
    def green(cls) -> BoardTheme:
        base = cls.default()
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_selected=base.highlight_selected,
            highlight_move=base.highlight_move,
            highlight_capture=base.highlight_capture,
            last_move_from=base.last_move_from,
            last_move_to=base.last_move_to,
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
            piece_ink=base.piece_ink,
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        base = cls.default()
        return cls(
            light_square=QColor(228, 210, 184),
            dark_square=QColor(118, 74, 47),
            highlight_selected=base.highlight_selected,
            highlight_move=base.highlight_move,
            highlight_capture=base.highlight_capture,
            last_move_from=base.last_move_from,
            last_move_to=base.last_move_to,
            coord_light=QColor(118, 74, 47),
            coord_dark=QColor(228, 210, 184),
            piece_ink=QColor(10, 10, 10),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        base = cls.default()
        return cls(
            light_square=QColor(224, 226, 231),
            dark_square=QColor(101, 110, 122),
            highlight_selected=base.highlight_selected,
            highlight_move=base.highlight_move,
            highlight_capture=base.highlight_capture,
            last_move_from=base.last_move_from,
            last_move_to=base.last_move_to,
            coord_light=QColor(101, 110, 122),
            coord_dark=QColor(224, 226, 231),
            piece_ink=base.piece_ink,
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Adwaita Sans", "Consolas", monospace;
    font-size: 13px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}
"""
