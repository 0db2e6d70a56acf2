#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from minmax.connect_four import ConnectFourGame
from minmax.game import MAXIMIZING
from minmax.search import best_move, solve_all_reachable
from minmax.tictactoe import TicTacToeGame

# A drawn connect-four board with the middle three columns' top two rows open.
C4_ENDGAME = "<XO   OX┃OX   XO┃XOXOXOX┃XOXOXOX┃OXOXOXO┃OXOXOXO>"


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 10


def _timed(fn) -> float:
    t0 = time.perf_counter()
    fn()
    return time.perf_counter() - t0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Time exact searches")
    p.add_argument("--repeats", type=int, default=Config.repeats)
    ns = p.parse_args(argv)
    cfg = Config(repeats=ns.repeats)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    empty = TicTacToeGame()
    endgame = ConnectFourGame.parse(C4_ENDGAME)
    cases = {
        "tictactoe_best_move_empty": lambda: best_move(empty, MAXIMIZING),
        "tictactoe_solve_all_reachable": lambda: solve_all_reachable(empty, MAXIMIZING),
        "connect_four_best_move_endgame": lambda: best_move(endgame, MAXIMIZING),
    }
    for name, fn in cases.items():
        times = [_timed(fn) for _ in range(cfg.repeats)]
        m, h = ci95(times)
        logging.info("%s: mean=%.4fs ± %.4fs (95%% CI, N=%d)", name, m, h, cfg.repeats)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
