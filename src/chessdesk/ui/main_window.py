"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QWidget

from chessdesk.game.interfaces import SessionPhase
from chessdesk.game.session import GameSession
from chessdesk.game.state import SessionSnapshot
from chessdesk.ui.board.board_view import BoardView
from chessdesk.ui.dialogs.promotion_dialog import PromotionDialog
from chessdesk.ui.panels.info_panel import InfoPanel
from chessdesk.ui.settings import AppSettings, board_theme_for

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window: board on the left, info panel on the right."""

    def __init__(
        self,
        session: GameSession | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Chessdesk")
        self.setMinimumSize(820, 600)
        self.resize(1000, 700)

        self._session = session if session is not None else GameSession()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._apply_settings()

        self._session.events.on_snapshot.append(self._on_snapshot)
        self._render(self._session.snapshot)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=3)

        self._info_panel = InfoPanel()
        self._info_panel.setFixedWidth(280)
        root.addWidget(self._info_panel)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("New Game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self._on_new_game)
        menu_game.addAction(self._act_new_game)

        self._act_undo = QAction("Undo Move", self)
        self._act_undo.setShortcut("Ctrl+Z")
        self._act_undo.triggered.connect(self._on_undo)
        menu_game.addAction(self._act_undo)

        menu_game.addSeparator()

        self._act_flip = QAction("Flip Board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        menu_game.addAction(self._act_flip)

        menu_game.addSeparator()

        act_quit = QAction("Quit", self)
        act_quit.setShortcut("Ctrl+Q")
        act_quit.triggered.connect(self.close)
        menu_game.addAction(act_quit)

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._info_panel.new_game_clicked.connect(self._on_new_game)
        self._info_panel.undo_clicked.connect(self._on_undo)
        self._info_panel.flip_clicked.connect(self._on_flip)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(board_theme_for(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)
        scene.set_show_legal_moves(s.show_legal_moves)
        scene.set_flipped(s.flip_board)
        self._info_panel.move_panel.set_use_figurine_notation(
            s.use_figurine_notation
        )

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def info_panel(self) -> InfoPanel:
        return self._info_panel

    # ── User intents ─────────────────────────────────────────────────────

    def _on_square_clicked(self, square: int) -> None:
        self._session.handle_square_click(square)
        self._ask_promotion_if_pending()

    def _ask_promotion_if_pending(self) -> None:
        snapshot = self._session.snapshot
        if snapshot.pending_promotion is None:
            return
        kind = PromotionDialog.ask(snapshot.side_to_move, self)
        if kind is None:
            self._session.cancel_promotion()
        else:
            self._session.resolve_promotion(kind)

    def _on_new_game(self) -> None:
        self._session.start_new_game()

    def _on_undo(self) -> None:
        self._session.undo()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    # ── Rendering ────────────────────────────────────────────────────────

    def _on_snapshot(self, snapshot: SessionSnapshot) -> None:
        self._render(snapshot)

    def _render(self, snapshot: SessionSnapshot) -> None:
        _LOGGER.debug("Render %s (%s)", snapshot.fen, snapshot.phase.name)
        scene = self._board_view.board_scene
        scene.set_interactive(snapshot.phase == SessionPhase.IN_PROGRESS)
        scene.render_snapshot(snapshot, self._session.piece_map())
        self._info_panel.render_snapshot(snapshot)
        self._act_undo.setEnabled(snapshot.can_undo)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        callbacks = self._session.events.on_snapshot
        if self._on_snapshot in callbacks:
            callbacks.remove(self._on_snapshot)
        super().closeEvent(event)
