"""minmax package.

Exact alpha-beta search over two-player zero-sum games, with tic-tac-toe and
connect-four boards and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .connect_four import ConnectFourGame
from .game import (
    DRAW,
    LOSS,
    MAXIMIZING,
    MINIMIZING,
    WIN,
    FixtureFormatError,
    Game,
    GridGame,
)
from .play import play_out
from .search import Outcome, best_move, minimax, reachable_states, search, solve_all_reachable
from .tictactoe import TicTacToeGame

__all__ = [
    "Game",
    "GridGame",
    "FixtureFormatError",
    "TicTacToeGame",
    "ConnectFourGame",
    "Outcome",
    "search",
    "best_move",
    "minimax",
    "reachable_states",
    "solve_all_reachable",
    "play_out",
    "MAXIMIZING",
    "MINIMIZING",
    "WIN",
    "DRAW",
    "LOSS",
]
