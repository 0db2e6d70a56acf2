"""
Game abstraction, shared board constants and the textual board codec.
Notes:
- A player is a bool: True maximizes ("O"), False minimizes ("X").
- Cells hold 0=empty, 1=O, 2=X. Boards are stored flat, row-major.
- Scores are +1 (O won), -1 (X won), 0 (draw); None while play continues.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import ClassVar, List, Optional, Tuple, TypeVar

EMPTY, O, X = 0, 1, 2
MAXIMIZING, MINIMIZING = True, False
WIN, DRAW, LOSS = 1, 0, -1

CELL_CHARS = {EMPTY: ' ', O: 'O', X: 'X'}
CHAR_CELLS = {c: v for v, c in CELL_CHARS.items()}
ROW_SEPARATOR = '┃'

G = TypeVar('G', bound='GridGame')


class FixtureFormatError(ValueError):
    """Raised when a textual board does not hold exactly one grid of cells."""


def mark_for(player: bool) -> int:
    return O if player else X


def player_name(player: bool) -> str:
    return CELL_CHARS[mark_for(player)]


def parse_player(name: str) -> bool:
    key = name.strip().upper()
    if key == 'O':
        return MAXIMIZING
    if key == 'X':
        return MINIMIZING
    raise ValueError(f"Unknown player: {name!r} (expected O or X)")


class Game(ABC):
    """Capability every searchable game state provides."""

    @abstractmethod
    def finished(self) -> Optional[int]:
        """Terminal score, or None if the game is still running."""

    @abstractmethod
    def moves(self, player: bool) -> List['Game']:
        """Every successor reachable by `player` in one move, in a fixed order.

        Only meaningful on non-terminal states; check finished() first.
        """


@dataclass(frozen=True, repr=False)
class GridGame(Game):
    """Fixed-size grid of cells with rendering and parsing.

    Subclasses set ROWS and COLS. TOP_ROW_FIRST tells whether storage row 0
    is the top row (rendered first) or the bottom one.
    """
    cells: Tuple[int, ...] = ()

    ROWS: ClassVar[int] = 0
    COLS: ClassVar[int] = 0
    TOP_ROW_FIRST: ClassVar[bool] = True

    def __post_init__(self) -> None:
        size = self.ROWS * self.COLS
        if not self.cells:
            object.__setattr__(self, 'cells', (EMPTY,) * size)
            return
        cells = tuple(self.cells)
        if len(cells) != size:
            raise ValueError(f"{type(self).__name__} needs {size} cells, got {len(cells)}")
        if any(v not in CELL_CHARS for v in cells):
            raise ValueError(f"Cell values must be one of {sorted(CELL_CHARS)}")
        object.__setattr__(self, 'cells', cells)

    def cell(self, row: int, col: int) -> int:
        return self.cells[row * self.COLS + col]

    def row(self, row: int) -> Tuple[int, ...]:
        start = row * self.COLS
        return self.cells[start:start + self.COLS]

    def is_full(self) -> bool:
        return EMPTY not in self.cells

    def place(self: G, row: int, col: int, player: bool) -> G:
        if not (0 <= row < self.ROWS and 0 <= col < self.COLS):
            raise ValueError(f"Cell ({row}, {col}) is off the board")
        idx = row * self.COLS + col
        if self.cells[idx] != EMPTY:
            raise ValueError(f"Cell ({row}, {col}) is already occupied")
        lst = list(self.cells)
        lst[idx] = mark_for(player)
        return replace(self, cells=tuple(lst))

    def _display_order(self) -> range:
        if self.TOP_ROW_FIRST:
            return range(self.ROWS)
        return range(self.ROWS - 1, -1, -1)

    def render(self) -> str:
        rows = (''.join(CELL_CHARS[v] for v in self.row(r)) for r in self._display_order())
        return '<' + ROW_SEPARATOR.join(rows) + '>'

    @classmethod
    def parse(cls: type[G], text: str) -> G:
        """Inverse of render(): every character other than ' ', 'O', 'X' is ignored."""
        values = [CHAR_CELLS[c] for c in text if c in CHAR_CELLS]
        size = cls.ROWS * cls.COLS
        if len(values) != size:
            raise FixtureFormatError(
                f"Failed to extract {size} squares for {cls.__name__}: found {len(values)}"
            )
        display_rows = [values[i * cls.COLS:(i + 1) * cls.COLS] for i in range(cls.ROWS)]
        if not cls.TOP_ROW_FIRST:
            display_rows.reverse()
        return cls(cells=tuple(v for r in display_rows for v in r))

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.render()!r})"
