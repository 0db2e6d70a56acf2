from __future__ import annotations

import argparse
import logging
from collections import Counter

from .config import GAMES, PlayConfig, default_game, default_player, game_class
from .game import FixtureFormatError, parse_player, player_name
from .play import play_out
from .search import best_move, solve_all_reachable

BOARD_HELP = (
    'Board text, e.g. "<O O|   |X X>" (top row first; only " ", "O", "X" count). '
    "Defaults to the empty board."
)


def _add_position_args(sp: argparse.ArgumentParser) -> None:
    sp.add_argument(
        "--game",
        choices=sorted(GAMES),
        default=None,
        help="Game to search (default: $MINMAX_GAME or tictactoe)",
    )
    sp.add_argument("--board", default=None, help=BOARD_HELP)
    sp.add_argument(
        "--player",
        default=None,
        help="Side to move: O maximizes, X minimizes (default: $MINMAX_PLAYER or O)",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="minmax", description="Solve small board games with alpha-beta search")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    p_sol = sub.add_parser("solve", help="Score a position and pick the best move for the side to move")
    _add_position_args(p_sol)
    p_sol.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_play = sub.add_parser("play", help="Play the game out with both sides moving optimally")
    _add_position_args(p_play)

    p_reach = sub.add_parser(
        "reachable",
        help="Solve every position reachable from a board and summarize the scores",
    )
    _add_position_args(p_reach)

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    if importlib.util.find_spec("numpy") is None:
        print("numpy=<not installed>")
    else:
        import numpy as np

        print(f"numpy={np.__version__}")
    for name, kind in sorted(GAMES.items()):
        print(f"game={name} grid={kind.ROWS}x{kind.COLS}")
    print(f"default_game={default_game()} default_player={default_player()}")


def _solve_stream(ns: argparse.Namespace) -> int:
    import csv as _csv
    import sys as _sys

    try:
        kind = game_class(ns.game or default_game())
        player = parse_player(ns.player or default_player())
    except ValueError as e:
        logging.error("%s", e)
        return 2

    w = _csv.writer(_sys.stdout)
    w.writerow(["board", "player", "value", "move"])
    for line in _sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            state = kind.parse(raw)
        except FixtureFormatError as e:
            logging.debug("Skipping %r: %s", raw, e)
            continue
        outcome = best_move(state, player)
        w.writerow([
            state.render(),
            player_name(player),
            outcome.score,
            outcome.move.render() if outcome.move is not None else "",
        ])
    return 0


def _report_play(history: list, player: bool) -> int:
    for ply, state in enumerate(history):
        logging.info("ply=%d to_move=%s board=%s", ply, player_name(player), state)
        player = not player
    result = history[-1].finished()
    if result is None:
        logging.error("Play stopped early: %s has no moves", history[-1])
        return 1
    logging.info("result=%+d plies=%d", result, len(history) - 1)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("minmax-games"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd is None:
        parser.print_help()
        return 0

    if ns.cmd == "solve" and ns.stdin:
        return _solve_stream(ns)

    try:
        cfg = PlayConfig.resolve(ns.game, ns.board, ns.player)
    except ValueError as e:
        logging.error("%s", e)
        return 2
    logging.debug(
        "game=%s player=%s board=%s",
        ns.game or default_game(),
        ns.player or default_player(),
        cfg.state,
    )

    if ns.cmd == "solve":
        outcome = best_move(cfg.state, cfg.player)
        logging.info(
            "value=%+d move=%s",
            outcome.score,
            outcome.move if outcome.move is not None else "none",
        )
        return 0

    if ns.cmd == "play":
        return _report_play(play_out(cfg.state, cfg.player), cfg.player)

    if ns.cmd == "reachable":
        solved = solve_all_reachable(cfg.state, cfg.player)
        split = Counter(solved.values())
        logging.info(
            "positions=%d o_wins=%d draws=%d x_wins=%d",
            len(solved),
            split[1],
            split[0],
            split[-1],
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
