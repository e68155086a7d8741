"""Flat toroidal grid for the Game of Life."""

from enum import IntEnum
from typing import Optional, Tuple
import numpy as np
import torch
import torch.nn.functional as F


class Cell(IntEnum):
    """State of a single cell. Values are summed when counting neighbors."""

    DEAD = 0
    ALIVE = 1


DEAD_GLYPH = "◻"
ALIVE_GLYPH = "◼"


class Grid:
    """Represents a toroidal grid of cells stored as one flat row-major array.

    Cell ``(row, column)`` lives at ``row * width + column``. The buffer is
    only ever swapped out as a whole (see :meth:`replace_cells`), so a view
    handed out by :meth:`raw_view` always shows one complete generation.
    """

    def __init__(self, width: int, height: int, cells: Optional[np.ndarray] = None) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            cells: Optional initial cell values, ``width * height`` long.
                Defaults to an all-dead grid.

        Raises:
            ValueError: If a dimension is not positive or ``cells`` has the
                wrong length
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self._width = width
        self._height = height
        self._cells = np.zeros(width * height, dtype=np.uint8)
        if cells is not None:
            self.replace_cells(cells)

        # Single-threaded, the grid is stepped synchronously
        torch.set_num_threads(1)

        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current cell buffer."""
        return self.raw_view()

    def index(self, row: int, column: int) -> int:
        """Get the linear position of a cell.

        Raises:
            IndexError: If row or column is outside the grid
        """
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(f"Cell ({row}, {column}) out of bounds for {self._width}x{self._height} grid")
        return row * self._width + column

    def get_cell(self, row: int, column: int) -> Cell:
        """Get the state of a cell."""
        return Cell(int(self._cells[self.index(row, column)]))

    def set_cell(self, row: int, column: int, alive: bool) -> None:
        """Set the state of a cell while seeding a grid.

        Args:
            row: Row coordinate
            column: Column coordinate
            alive: Whether the cell should be alive
        """
        self._cells[self.index(row, column)] = Cell.ALIVE if alive else Cell.DEAD

    def replace_cells(self, new_cells) -> None:
        """Swap in a whole new generation.

        Args:
            new_cells: Array-like of ``width * height`` cell values

        Raises:
            ValueError: If the number of cells doesn't match the grid
        """
        arr = np.ascontiguousarray(new_cells, dtype=np.uint8).ravel()
        if arr.size != self._width * self._height:
            raise ValueError(
                f"Cell count {arr.size} doesn't match grid {self._width}x{self._height} "
                f"({self._width * self._height} cells)"
            )
        self._cells = arr

    def raw_view(self) -> np.ndarray:
        """Expose the current buffer without copying.

        The view is only meaningful until the next generation is committed;
        afterwards it keeps showing the old generation.
        """
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count living neighbors of a cell, wrapping around every edge.

        Args:
            row: Row coordinate
            column: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue

                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (column + delta_col) % self._width
                count += int(self._cells[self.index(neighbor_row, neighbor_col)])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using PyTorch-accelerated convolution.

        Returns:
            Flat array of neighbor counts aligned with the cell buffer
        """
        if self._width < 3 or self._height < 3:
            return self._count_all_neighbors_rolled()

        plane = self._cells.reshape(self._height, self._width).astype(np.float32)
        torch_input = torch.from_numpy(plane).unsqueeze(0).unsqueeze(0)

        # Circular padding makes the convolution toroidal
        padded = F.pad(torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)

        return neighbors[0, 0].numpy().astype(np.uint8).ravel()

    def _count_all_neighbors_rolled(self) -> np.ndarray:
        """Neighbor counts from the same offsets as :meth:`live_neighbor_count`.

        Used on grids narrower than 3, where wrapping makes several offsets
        land on the same cell and a padded convolution overcounts.
        """
        plane = self._cells.reshape(self._height, self._width)
        counts = np.zeros_like(plane)
        for delta_row in (self._height - 1, 0, 1):
            for delta_col in (self._width - 1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                counts += np.roll(plane, (-delta_row, -delta_col), axis=(0, 1))

        return counts.ravel()

    def render(self) -> str:
        """Render the grid as text, one glyph per cell and one line per row."""
        lines = []
        for row in self._cells.reshape(self._height, self._width):
            lines.append("".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row))
            lines.append("\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    # Mutable, so unhashable
    __hash__ = None

    def __str__(self) -> str:
        return self.render()
