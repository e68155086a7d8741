"""Starting configurations for a universe."""

from typing import Callable, List, Optional, Tuple
import numpy as np

from .grid import Cell, Grid

MODE_GLIDER_GUN = 0
MODE_RANDOM = 1

RandomSource = Callable[[], float]


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, column) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def apply_to_grid(self, grid: Grid, offset_row: int = 0, offset_col: int = 0) -> None:
        """Set this pattern's cells alive on a grid.

        Coordinates wrap around the grid edges. Cells already alive are left
        alone.

        Args:
            grid: Target grid
            offset_row: Vertical offset
            offset_col: Horizontal offset
        """
        for row, col in self.cells:
            grid.set_cell((row + offset_row) % grid.height, (col + offset_col) % grid.width, True)

    def __len__(self) -> int:
        return len(self.cells)


# Gosper's glider gun. Kept verbatim, golden renders depend on it.
GLIDER_GUN = Pattern(
    "Glider Gun",
    [
        (6, 1),
        (6, 2),
        (7, 1),
        (7, 2),
        (6, 11),
        (7, 11),
        (8, 11),
        (5, 12),
        (9, 12),
        (4, 13),
        (10, 13),
        (4, 14),
        (10, 14),
        (7, 15),
        (5, 16),
        (9, 16),
        (6, 17),
        (7, 17),
        (8, 17),
        (7, 18),
        (4, 21),
        (5, 21),
        (6, 21),
        (4, 22),
        (5, 22),
        (6, 22),
        (3, 23),
        (7, 23),
        (2, 25),
        (3, 25),
        (7, 25),
        (8, 25),
        (4, 35),
        (4, 36),
        (5, 35),
        (5, 36),
    ],
    "Gosper's glider gun, emits a glider every 30 generations",
)


def glider_gun_cells(width: int, height: int) -> np.ndarray:
    """All-dead grid with the glider gun seeded on it."""
    grid = Grid(width, height)
    GLIDER_GUN.apply_to_grid(grid)
    return grid.raw_view().copy()


def random_cells(width: int, height: int, random_source: Optional[RandomSource] = None) -> np.ndarray:
    """Each cell alive with probability 0.5.

    Args:
        width: Number of columns
        height: Number of rows
        random_source: Zero-argument callable returning a float in [0, 1).
            Called once per cell in row-major order. Defaults to
            ``numpy.random.random``.
    """
    draw = random_source if random_source is not None else np.random.random
    return np.fromiter(
        (Cell.ALIVE if draw() < 0.5 else Cell.DEAD for _ in range(width * height)),
        dtype=np.uint8,
        count=width * height,
    )


def parity_cells(width: int, height: int) -> np.ndarray:
    """Cell ``i`` alive when ``i`` is divisible by 2 or by 7."""
    positions = np.arange(width * height)
    return ((positions % 2 == 0) | (positions % 7 == 0)).astype(np.uint8)


def initial_cells(
    mode: int, width: int, height: int, random_source: Optional[RandomSource] = None
) -> np.ndarray:
    """Build the starting buffer for a mode code.

    Args:
        mode: ``MODE_GLIDER_GUN``, ``MODE_RANDOM``, or anything else for the
            parity pattern
        width: Number of columns
        height: Number of rows
        random_source: Draw provider for ``MODE_RANDOM``

    Returns:
        Flat row-major array of ``width * height`` cells
    """
    if mode == MODE_GLIDER_GUN:
        return glider_gun_cells(width, height)
    if mode == MODE_RANDOM:
        return random_cells(width, height, random_source)
    return parity_cells(width, height)
