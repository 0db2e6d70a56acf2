"""
Tic-tac-toe on a 3x3 grid.
- Row 0 is the top row; cells are indexed row-major (0..8).
- O (maximizing) is checked before X, so a line for O scores +1.
"""
from typing import List, Optional

from .game import DRAW, EMPTY, LOSS, O, WIN, X, GridGame

WIN_PATTERNS = [
    [0, 4, 8], [2, 4, 6],
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
]


class TicTacToeGame(GridGame):
    ROWS = 3
    COLS = 3

    def finished(self) -> Optional[int]:
        board = self.cells
        for value, mark in ((WIN, O), (LOSS, X)):
            for a, b, c in WIN_PATTERNS:
                if board[a] == mark and board[b] == mark and board[c] == mark:
                    return value
        if self.is_full():
            return DRAW
        return None

    def moves(self, player: bool) -> List['TicTacToeGame']:
        return [
            self.place(i // self.COLS, i % self.COLS, player)
            for i, v in enumerate(self.cells)
            if v == EMPTY
        ]
