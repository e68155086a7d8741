"""Conway's Game of Life generation engine."""

import numpy as np

from .grid import Cell, Grid


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply the rule table to a single cell.

    Rules are checked in order and the first match wins:
    - Live cell with fewer than 2 neighbors dies (underpopulation)
    - Live cell with 2 or 3 neighbors lives on
    - Live cell with more than 3 neighbors dies (overpopulation)
    - Dead cell with exactly 3 neighbors becomes alive (reproduction)
    - Anything else keeps its state

    Args:
        cell: Current state
        live_neighbors: Number of living neighbors (0-8)

    Returns:
        State in the next generation
    """
    if cell == Cell.ALIVE and live_neighbors < 2:
        return Cell.DEAD
    if cell == Cell.ALIVE and live_neighbors in (2, 3):
        return Cell.ALIVE
    if cell == Cell.ALIVE and live_neighbors > 3:
        return Cell.DEAD
    if cell == Cell.DEAD and live_neighbors == 3:
        return Cell.ALIVE
    return Cell(cell)


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Every step reads a snapshot of the current generation and commits the
    next one to the grid in a single buffer swap.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.replace_cells(self._apply_rules())
        self._generation += 1

    def _apply_rules(self) -> np.ndarray:
        """Compute the next generation into a fresh buffer."""
        neighbor_counts = self.grid.count_all_neighbors()
        cells = self.grid.raw_view()
        alive = cells == Cell.ALIVE

        # Start from "unchanged", then apply the rules in reverse priority
        # so the earlier rules win where they overlap
        next_cells = cells.copy()
        next_cells[~alive & (neighbor_counts == 3)] = Cell.ALIVE
        next_cells[alive & (neighbor_counts > 3)] = Cell.DEAD
        next_cells[alive & ((neighbor_counts == 2) | (neighbor_counts == 3))] = Cell.ALIVE
        next_cells[alive & (neighbor_counts < 2)] = Cell.DEAD

        return next_cells
