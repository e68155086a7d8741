"""Fixed-size universe exposed to rendering hosts."""

from typing import Optional
import numpy as np

from .grid import Grid
from .game import GameOfLife
from .patterns import MODE_GLIDER_GUN, RandomSource, initial_cells

WIDTH = 64
HEIGHT = 64


class Universe:
    """A 64x64 toroidal Game of Life, stepped by the caller.

    Hosts alternate between reading (:meth:`render`, :meth:`cells`) and
    :meth:`tick`; the universe never steps on its own.
    """

    def __init__(self, mode: int = MODE_GLIDER_GUN, random_source: Optional[RandomSource] = None) -> None:
        """Create a universe.

        Args:
            mode: 0 for the glider gun, 1 for a random soup, anything else
                for the parity pattern
            random_source: Draw provider used by the random mode
        """
        self._grid = Grid(WIDTH, HEIGHT, initial_cells(mode, WIDTH, HEIGHT, random_source))
        self._game = GameOfLife(self._grid)

    @classmethod
    def new(cls, mode: int, random_source: Optional[RandomSource] = None) -> "Universe":
        return cls(mode, random_source)

    @classmethod
    def default(cls) -> "Universe":
        return cls(MODE_GLIDER_GUN)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def generation(self) -> int:
        """Number of ticks so far."""
        return self._game.generation

    @property
    def population(self) -> int:
        return self._grid.population

    def tick(self) -> None:
        """Advance one generation."""
        self._game.step()

    def render(self) -> str:
        return self._grid.render()

    def width(self) -> int:
        return self._grid.width

    def height(self) -> int:
        return self._grid.height

    def cells(self) -> np.ndarray:
        """Read-only view of the current cells, invalidated by the next tick."""
        return self._grid.raw_view()

    @staticmethod
    def memory_base() -> int:
        """Base offset for hosts that address the buffer by offset."""
        return 0

    def __str__(self) -> str:
        return self.render()
