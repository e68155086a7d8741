"""Conway's Game of Life on a fixed toroidal grid."""

__version__ = "0.1.0"

from .core.grid import Cell, Grid
from .core.game import GameOfLife
from .core.patterns import Pattern
from .core.universe import Universe

__all__ = ["Cell", "Grid", "GameOfLife", "Pattern", "Universe"]
