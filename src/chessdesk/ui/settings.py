"""User-configurable settings (in memory, defaults only)."""

from __future__ import annotations

from dataclasses import dataclass

from chessdesk.ui.styles.theme import BoardTheme

BOARD_THEMES = ("Classic", "Blue", "Green", "Walnut", "Slate")


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True
    flip_board: bool = False

    # Move list
    use_figurine_notation: bool = True

    # Diagnostics
    log_level: str = "WARNING"


def board_theme_for(name: str) -> BoardTheme:
    """Theme preset by display name; unknown names fall back to Classic."""
    theme_map = {
        "Classic": BoardTheme.default,
        "Blue": BoardTheme.blue,
        "Green": BoardTheme.green,
        "Walnut": BoardTheme.walnut,
        "Slate": BoardTheme.slate,
    }
    return theme_map.get(name, BoardTheme.default)()
