"""Drive a game to its end with both sides playing optimally."""
from __future__ import annotations

import logging
from typing import List, TypeVar

from .game import Game, player_name
from .search import best_move

G = TypeVar('G', bound=Game)


def play_out(state: G, player: bool) -> List[G]:
    """Alternate best moves from `state` until finished(); returns every position seen."""
    history = [state]
    while state.finished() is None:
        outcome = best_move(state, player)
        if outcome.move is None:
            break
        logging.debug("%s plays (expects %+d): %s", player_name(player), outcome.score, outcome.move)
        state = outcome.move
        history.append(state)
        player = not player
    return history
