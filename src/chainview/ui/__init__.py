"""
Curses toolkit for the chain viewer: theme, drawing helpers, the option table
layout and the frame renderer.
"""

from . import theme, ui_utils
from .renderer import ChainRenderer

__all__ = ["ChainRenderer", "theme", "ui_utils"]
