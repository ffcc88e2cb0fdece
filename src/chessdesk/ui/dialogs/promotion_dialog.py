"""Promotion dialog — lets user pick the promotion piece."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chessdesk.core.enums import PROMOTION_KINDS, Color, PieceKind
from chessdesk.core.piece import piece_glyph


class PromotionDialog(QDialog):
    """Modal dialog to select promotion piece kind."""

    def __init__(self, color: Color, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setFixedSize(340, 130)
        self.setWindowTitle("Promotion")
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._selected: PieceKind = PieceKind.QUEEN
        self._buttons: dict[PieceKind, QPushButton] = {}

        layout = QVBoxLayout(self)
        label = QLabel("Promote pawn to:")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label.setFont(QFont("Adwaita Sans", 11))
        layout.addWidget(label)

        btn_row = QHBoxLayout()
        for kind in PROMOTION_KINDS:
            btn = QPushButton(piece_glyph(color, kind))
            btn.setFont(QFont("DejaVu Sans", 30))
            btn.setFixedSize(68, 68)
            btn.setToolTip(kind.name.capitalize())
            btn.clicked.connect(lambda _checked=False, k=kind: self._choose(k))
            btn_row.addWidget(btn)
            self._buttons[kind] = btn

        layout.addLayout(btn_row)

    def _choose(self, kind: PieceKind) -> None:
        self._selected = kind
        self.accept()

    @property
    def selected(self) -> PieceKind:
        return self._selected

    @staticmethod
    def ask(color: Color, parent: QWidget | None = None) -> PieceKind | None:
        """Show the dialog and return the chosen kind, or ``None`` on cancel."""
        dlg = PromotionDialog(color, parent)
        if dlg.exec() == QDialog.DialogCode.Accepted:
            return dlg.selected
        return None
