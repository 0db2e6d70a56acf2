from typing import Tuple

import pytest
try:
    from hypothesis import given, settings, strategies as st  # type: ignore
    HAS_HYP = True
except ModuleNotFoundError:  # pragma: no cover - test infra
    HAS_HYP = False
    import pytest as _pytest  # type: ignore
    _pytest.skip("Hypothesis not installed", allow_module_level=True)

from minmax.connect_four import ConnectFourGame
from minmax.game import EMPTY, MAXIMIZING, MINIMIZING, mark_for
from minmax.play import play_out
from minmax.search import best_move, minimax, search
from minmax.tictactoe import WIN_PATTERNS, TicTacToeGame


@st.composite
def positions(draw, kind=TicTacToeGame, min_plies=0, max_plies=9):
    """A position reached by random legal play, plus the side to move."""
    state = kind()
    player = MAXIMIZING
    for _ in range(draw(st.integers(min_value=min_plies, max_value=max_plies))):
        if state.finished() is not None:
            break
        children = state.moves(player)
        state = children[draw(st.integers(min_value=0, max_value=len(children) - 1))]
        player = not player
    return state, player


def line_owner(board: TicTacToeGame) -> set:
    owners = set()
    for pat in WIN_PATTERNS:
        vals = {board.cells[i] for i in pat}
        if len(vals) == 1 and EMPTY not in vals:
            owners |= vals
    return owners


@given(positions())
def test_finished_iff_line_or_full(pos: Tuple[TicTacToeGame, bool]):
    board, _ = pos
    owners = line_owner(board)
    score = board.finished()
    if owners:
        # random play stops at the first line, so only one player can own lines
        assert len(owners) == 1
        assert score == (1 if owners == {mark_for(True)} else -1)
    elif board.is_full():
        assert score == 0
    else:
        assert score is None


@given(positions())
def test_successors_fill_exactly_one_empty_cell(pos: Tuple[TicTacToeGame, bool]):
    board, player = pos
    if board.finished() is not None:
        return
    children = board.moves(player)
    assert len(children) == board.cells.count(EMPTY)
    for child in children:
        diff = [i for i, (a, b) in enumerate(zip(board.cells, child.cells)) if a != b]
        assert len(diff) == 1
        assert board.cells[diff[0]] == EMPTY
        assert child.cells[diff[0]] == mark_for(player)


@settings(max_examples=50, deadline=None)
@given(positions(min_plies=3))
def test_alpha_beta_matches_minimax(pos: Tuple[TicTacToeGame, bool]):
    board, player = pos
    score, move = search(board, player)
    assert score == minimax(board, player)
    if move is not None:
        assert move in board.moves(player)
        assert minimax(move, not player) == score


@settings(max_examples=25, deadline=None)
@given(positions(min_plies=2))
def test_optimal_play_reaches_the_predicted_score(pos: Tuple[TicTacToeGame, bool]):
    board, player = pos
    predicted = best_move(board, player).score
    history = play_out(board, player)
    assert history[0] == board
    assert history[-1].finished() == predicted


@settings(max_examples=30, deadline=None)
@given(positions(kind=ConnectFourGame, min_plies=0, max_plies=42))
def test_connect_four_gravity(pos: Tuple[ConnectFourGame, bool]):
    board, player = pos
    # no floating pieces: every occupied cell above row 0 sits on another piece
    for r in range(1, board.ROWS):
        for c in range(board.COLS):
            if board.cell(r, c) != EMPTY:
                assert board.cell(r - 1, c) != EMPTY
    if board.finished() is None:
        open_cols = sum(board.drop_row(c) is not None for c in range(board.COLS))
        assert len(board.moves(player)) == open_cols


@pytest.mark.parametrize("player", [MAXIMIZING, MINIMIZING])
def test_empty_board_optimal_play_is_a_draw(player: bool):
    history = play_out(TicTacToeGame(), player)
    assert history[-1].finished() == 0
    assert len(history) == 10
