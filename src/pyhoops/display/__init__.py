"""Presentation helpers for position boards."""

from .board import NO_DATA, BoardLine, format_board, format_failure, render_board

__all__ = [
    "NO_DATA",
    "BoardLine",
    "format_board",
    "format_failure",
    "render_board",
]
