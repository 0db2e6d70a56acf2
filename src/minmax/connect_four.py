"""
Connect-four on a 6x7 grid with gravity.

Row 0 is the bottom row, so pieces dropped into a column land on the lowest
empty row. Rendering shows the top row first.

Win detection reads the grid as a numpy array and scans every line long enough
to hold four in a row: columns bottom to top, rows left to right, and both
diagonal directions. A sliding window sum over the player's cells finds runs.
"""
from __future__ import annotations

from typing import Iterator, List, Optional

import numpy as np

from .game import DRAW, EMPTY, LOSS, O, WIN, X, GridGame

CONNECT = 4
COLUMN_ORDER = (3, 2, 4, 1, 5, 0, 6)


def has_run(line: np.ndarray, mark: int, length: int = CONNECT) -> bool:
    if line.size < length:
        return False
    window = np.convolve((line == mark).astype(np.int8), np.ones(length, dtype=np.int8), mode='valid')
    return bool((window >= length).any())


class ConnectFourGame(GridGame):
    ROWS = 6
    COLS = 7
    TOP_ROW_FIRST = False

    def grid(self) -> np.ndarray:
        return np.array(self.cells, dtype=np.int8).reshape(self.ROWS, self.COLS)

    def lines(self) -> Iterator[np.ndarray]:
        grid = self.grid()
        for c in range(self.COLS):
            yield grid[:, c]
        for r in range(self.ROWS):
            yield grid[r, :]
        # offsets whose diagonals are at least CONNECT cells long
        offsets = range(CONNECT - self.ROWS, self.COLS - CONNECT + 1)
        flipped = np.fliplr(grid)
        for k in offsets:
            yield np.diagonal(grid, offset=k)
        for k in offsets:
            yield np.diagonal(flipped, offset=k)

    def finished(self) -> Optional[int]:
        lines = list(self.lines())
        for value, mark in ((WIN, O), (LOSS, X)):
            if any(has_run(line, mark) for line in lines):
                return value
        if self.is_full():
            return DRAW
        return None

    def drop_row(self, col: int) -> Optional[int]:
        """Lowest empty row in `col`, or None if the column is full."""
        for r in range(self.ROWS):
            if self.cell(r, col) == EMPTY:
                return r
        return None

    def moves(self, player: bool) -> List[ConnectFourGame]:
        out: List[ConnectFourGame] = []
        for col in COLUMN_ORDER:
            r = self.drop_row(col)
            if r is not None:
                out.append(self.place(r, col, player))
        return out
