"""
Character-grid rendering of a shot for terminals.

Each sample becomes an ``O``. Samples inside the basket are drawn as ``*``
with a ``==*==`` rim around them. Row 0 is the floor; the grid is printed
top row first.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from hooplab.core.simulation import ShotResult

BALL = "O"
BALL_IN_BASKET = "*"
RIM = "="


class TextDisplay:
    """
    Fixed-size character canvas mapped onto a rectangle of court.

    Parameters
    ----------
    num_rows, num_cols : int
        Canvas size in characters
    rows_meters, cols_meters : float
        Height and width of court covered by the canvas [m]
    """

    def __init__(
        self,
        num_rows: int = 50,
        num_cols: int = 80,
        rows_meters: float = 10.0,
        cols_meters: float = 10.0,
    ) -> None:
        if num_rows < 2 or num_cols < 2:
            raise ValueError("Canvas needs at least 2 rows and 2 columns")
        if rows_meters <= 0 or cols_meters <= 0:
            raise ValueError("Canvas extent must be positive")
        self.num_rows = num_rows
        self.num_cols = num_cols
        self.rows_meters = float(rows_meters)
        self.cols_meters = float(cols_meters)
        self.clear()

    def clear(self) -> None:
        self._grid = np.full((self.num_rows, self.num_cols), " ", dtype="<U1")

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def set_pixel(self, ch: str, row: int, col: int) -> None:
        if not self._in_bounds(row, col):
            raise IndexError(f"Pixel ({row}, {col}) outside {self.num_rows}x{self.num_cols} canvas")
        self._grid[row, col] = ch

    def get_pixel(self, row: int, col: int) -> str:
        if not self._in_bounds(row, col):
            raise IndexError(f"Pixel ({row}, {col}) outside {self.num_rows}x{self.num_cols} canvas")
        return str(self._grid[row, col])

    def to_cell(self, x: float, y: float) -> tuple[int, int] | None:
        """Nearest (row, col) for a point in meters, or None if off canvas."""
        if not (0.0 <= x <= self.cols_meters and 0.0 <= y <= self.rows_meters):
            return None
        row = int(round(y * (self.num_rows - 1) / self.rows_meters))
        col = int(round(x * (self.num_cols - 1) / self.cols_meters))
        return row, col

    def plot_point(self, x: float, y: float, in_basket: bool = False) -> bool:
        """
        Mark a ball position. Returns False if it fell off the canvas.
        """
        cell = self.to_cell(x, y)
        if cell is None:
            return False
        row, col = cell
        if in_basket:
            for dc in (-2, -1, 1, 2):
                if self._in_bounds(row, col + dc):
                    self._grid[row, col + dc] = RIM
            self._grid[row, col] = BALL_IN_BASKET
        else:
            self._grid[row, col] = BALL
        return True

    def draw(self, result: ShotResult) -> int:
        """Plot every sample of a shot. Returns how many landed on the canvas."""
        entries = set(result.hit.entry_indices)
        drawn = 0
        for i, sample in enumerate(result.trajectory):
            drawn += self.plot_point(sample.x, sample.y, i in entries)
        return drawn

    def to_string(self) -> str:
        return "\n".join("".join(row) for row in self._grid[::-1])

    def render(self, result: ShotResult) -> str:
        """Fresh canvas with the shot drawn on it, as text."""
        self.clear()
        self.draw(result)
        return self.to_string()
