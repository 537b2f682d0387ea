"""Text rendering of the player menu."""

from .menu import render_menu

__all__ = ["render_menu"]
