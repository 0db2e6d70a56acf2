"""Game registry and environment-first defaults.

Order for each setting: explicit argument -> environment variable -> built-in
default. MINMAX_GAME picks the game, MINMAX_PLAYER the side to move.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Type

from .connect_four import ConnectFourGame
from .game import GridGame, parse_player
from .tictactoe import TicTacToeGame

GAMES: Dict[str, Type[GridGame]] = {
    "tictactoe": TicTacToeGame,
    "connect-four": ConnectFourGame,
}

DEFAULT_GAME = "tictactoe"
DEFAULT_PLAYER = "O"


def default_game() -> str:
    return os.getenv("MINMAX_GAME") or DEFAULT_GAME


def default_player() -> str:
    return os.getenv("MINMAX_PLAYER") or DEFAULT_PLAYER


def game_class(name: str) -> Type[GridGame]:
    try:
        return GAMES[name]
    except KeyError:
        raise ValueError(f"Unknown game: {name!r} (choose from {', '.join(sorted(GAMES))})") from None


@dataclass
class PlayConfig:
    state: GridGame
    player: bool

    @classmethod
    def resolve(cls, game: str | None = None, board: str | None = None,
                player: str | None = None) -> "PlayConfig":
        """Build a position from optional CLI values; board defaults to empty.

        Raises ValueError (FixtureFormatError for bad boards).
        """
        kind = game_class(game or default_game())
        state = kind.parse(board) if board else kind()
        return cls(state=state, player=parse_player(player or default_player()))
