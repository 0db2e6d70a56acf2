"""
Exact adversarial search (minimax with alpha-beta pruning) over any Game.

Tie-break policy:
- The first successor, in the order produced by moves(), that reaches the
  optimal score is the one returned. Later successors with an equal score
  never replace it.
- Pruning changes which successors are visited, never the reported score.
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Dict, Generic, Iterator, Optional, Tuple, TypeVar

from .game import DRAW, Game, player_name

G = TypeVar('G', bound=Game)


@dataclass(frozen=True)
class Outcome(Generic[G]):
    score: int
    move: Optional[G] = None


def _better(player: bool, best: Optional[int], value: int) -> int:
    if best is None:
        return value
    return max(best, value) if player else min(best, value)


def search(
    state: G,
    player: bool,
    alpha: Optional[int] = None,
    beta: Optional[int] = None,
) -> Tuple[int, Optional[G]]:
    """Score `state` with `player` to move and pick one optimal successor.

    alpha/beta are the bounds already guaranteed to the maximizing and
    minimizing player by ancestors; None means unset.
    """
    score = state.finished()
    if score is not None:
        return score, None

    best_val: Optional[int] = None
    best_move: Optional[G] = None
    for child in state.moves(player):
        value, _ = search(child, not player, alpha, beta)
        combined = _better(player, best_val, value)
        if combined != best_val:
            best_val = combined
            best_move = child
        if player:
            alpha = _better(player, alpha, best_val)
        else:
            beta = _better(player, beta, best_val)
        if alpha is not None and beta is not None and alpha >= beta:
            break

    if best_val is None:
        logging.warning(
            "Non-terminal %s has no moves for %s; scoring it as a draw",
            type(state).__name__,
            player_name(player),
        )
        return DRAW, None
    return best_val, best_move


def best_move(state: G, player: bool) -> Outcome[G]:
    score, move = search(state, player)
    return Outcome(score=score, move=move)


def minimax(state: Game, player: bool) -> int:
    """Unpruned minimax value; the reference alpha-beta must agree with."""
    score = state.finished()
    if score is not None:
        return score
    values = [minimax(child, not player) for child in state.moves(player)]
    if not values:
        return DRAW
    return max(values) if player else min(values)


def reachable_states(state: G, player: bool) -> Iterator[Tuple[G, bool]]:
    """Breadth-first walk of every position reachable from `state`.

    Terminal positions are yielded but not expanded. Each (state, player)
    pair is yielded once.
    """
    start = (state, player)
    q = deque([start])
    seen = {start}
    while q:
        s, p = q.popleft()
        yield s, p
        if s.finished() is not None:
            continue
        for child in s.moves(p):
            key = (child, not p)
            if key not in seen:
                seen.add(key)
                q.append(key)


def solve_all_reachable(state: Game, player: bool) -> Dict[str, int]:
    """Enumerate and solve all positions reachable from `state`.

    Keys are "<side to move>:<rendered board>".
    """
    solved = {}
    for s, p in reachable_states(state, player):
        solved[f"{player_name(p)}:{s}"] = search(s, p)[0]
    logging.debug("Solved %d reachable positions", len(solved))
    return solved
