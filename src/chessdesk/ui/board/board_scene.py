"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Mapping

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessdesk.core.piece import Piece
from chessdesk.core.types import Square
from chessdesk.game.state import SessionSnapshot
from chessdesk.ui.board_model import SquareView, describe_board, square_at
from chessdesk.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders square descriptors: shading, highlights, pieces, coordinates.

    Holds no game state of its own; every redraw starts from a session
    snapshot.

    Signals:
        square_clicked(int): Emitted when the user presses on a square.
    """

    square_clicked = pyqtSignal(int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._flipped = False
        self._interactive = True
        self._show_coordinates = True
        self._show_legal_moves = True

        self._snapshot: SessionSnapshot | None = None
        self._pieces: Mapping[Square, Piece] = {}
        self._views: list[SquareView] = []

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_highlights: list[QGraphicsRectItem] = []
        self._legal_dot_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self.setSceneRect(0, 0, 8 * self.TILE, 8 * self.TILE)
        self._redraw()

    # ── Public API ───────────────────────────────────────────────────────

    def render_snapshot(
        self, snapshot: SessionSnapshot, pieces: Mapping[Square, Piece]
    ) -> None:
        """Redraw everything from *snapshot* and the position's *pieces*."""
        self._snapshot = snapshot
        self._pieces = dict(pieces)
        self._redraw()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click events."""
        self._interactive = interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide reachable-square highlights."""
        self._show_legal_moves = visible
        if not visible:
            self._clear_items(self._legal_dot_items)
        else:
            self._redraw()

    @property
    def square_views(self) -> list[SquareView]:
        """Descriptors used for the latest redraw."""
        return list(self._views)

    # ── Drawing ──────────────────────────────────────────────────────────

    def _redraw(self) -> None:
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for piece_item in self._piece_items.values():
            self.removeItem(piece_item)
        self._piece_items.clear()
        self._clear_items(self._coord_items)
        self._clear_items(self._highlight_items)
        self._clear_items(self._last_move_highlights)
        self._clear_items(self._legal_dot_items)

        if self._snapshot is None:
            snapshot = SessionSnapshot(fen="")
        else:
            snapshot = self._snapshot
        self._views = describe_board(snapshot, self._pieces, flipped=self._flipped)

        for view in self._views:
            self._draw_square(view)

    def _draw_square(self, view: SquareView) -> None:
        t = self.TILE
        theme = self._theme
        x, y = view.col * t, view.row * t

        rect = QGraphicsRectItem(x, y, t, t)
        rect.setBrush(
            QBrush(theme.light_square if view.is_light else theme.dark_square)
        )
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0)
        self.addItem(rect)
        self._square_items[view.square] = rect

        if view.last_move_from:
            self._last_move_highlights.append(
                self._make_highlight(view, theme.last_move_from, 0.4)
            )
        if view.last_move_to:
            self._last_move_highlights.append(
                self._make_highlight(view, theme.last_move_to, 0.4)
            )
        if view.selected:
            self._highlight_items.append(
                self._make_highlight(view, theme.highlight_selected, 0.5)
            )
        if self._show_legal_moves:
            if view.move_target:
                self._legal_dot_items.append(
                    self._make_highlight(view, theme.highlight_move, 0.6)
                )
            elif view.capture_target:
                self._legal_dot_items.append(
                    self._make_highlight(view, theme.highlight_capture, 0.6)
                )

        coord_color = theme.coord_light if view.is_light else theme.coord_dark
        font = QFont("Adwaita Sans", max(9, t // 8))
        if view.rank_label is not None:
            self._add_coord(view.rank_label, font, coord_color, x + 2, y + 1)
        if view.file_label is not None:
            self._add_coord(view.file_label, font, coord_color, x + t - 12, y + t - 16)

        if view.piece is not None:
            self._piece_items[view.square] = self._add_piece(view.piece, x, y)

    def _add_piece(self, piece: Piece, x: float, y: float) -> QGraphicsSimpleTextItem:
        t = self.TILE
        item = QGraphicsSimpleTextItem(piece.glyph)
        item.setFont(QFont("DejaVu Sans", int(t * 0.6)))
        item.setBrush(QBrush(self._theme.piece_ink))
        bounds = item.boundingRect()
        item.setPos(x + (t - bounds.width()) / 2, y + (t - bounds.height()) / 2)
        item.setZValue(1)
        item.setData(0, piece.letter)
        self.addItem(item)
        return item

    def _add_coord(
        self, label: str, font: QFont, color: QColor, x: float, y: float
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    def _make_highlight(
        self, view: SquareView, color: QColor, z: float
    ) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        rect = QGraphicsRectItem(view.col * t, view.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(z)
        self.addItem(rect)
        return rect

    def _clear_items(
        self, items: list[QGraphicsRectItem] | list[QGraphicsSimpleTextItem]
    ) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq)
        super().mousePressEvent(event)

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        return square_at(int(pos.y() // t), int(pos.x() // t), self._flipped)
