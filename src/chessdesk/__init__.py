"""Chessdesk — hot-seat chess board with click-to-move interaction."""

__version__ = "0.1.0"
