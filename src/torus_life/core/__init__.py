"""Core cellular automata logic."""

from .grid import Cell, Grid
from .game import GameOfLife, next_state
from .patterns import Pattern, GLIDER_GUN, MODE_GLIDER_GUN, MODE_RANDOM, initial_cells
from .universe import Universe, WIDTH, HEIGHT

__all__ = [
    "Cell",
    "Grid",
    "GameOfLife",
    "next_state",
    "Pattern",
    "GLIDER_GUN",
    "MODE_GLIDER_GUN",
    "MODE_RANDOM",
    "initial_cells",
    "Universe",
    "WIDTH",
    "HEIGHT",
]
