"""Tests for the board engine: placement, win scan and tie detection."""

import random

import numpy as np
import pytest

from c4engine.game.board import Board
from c4engine.utils import ROWS, COLS, EMPTY, MIN_MOVES_FOR_WIN


def empty_cells(board):
    return int(np.count_nonzero(board.grid == EMPTY))


def test_new_board_is_empty(board):
    assert board.moves_remaining == ROWS * COLS
    assert board.board_rows == 6
    assert board.board_columns == 7
    assert all(board.token_at(r, c) == EMPTY
               for r in range(1, ROWS + 1) for c in range(1, COLS + 1))
    assert not board.is_won()
    assert not board.is_tied()


@pytest.mark.parametrize("column", [0, -1, COLS + 1, 100])
def test_place_rejects_out_of_range_column(board, x_player, column):
    before = board.get_state()
    assert board.place(column, x_player) is False
    assert board.moves_remaining == ROWS * COLS
    assert np.array_equal(board.grid, before)


@pytest.mark.parametrize("column", ["3", 2.0, None, True])
def test_place_rejects_non_integer_column(board, x_player, column):
    assert board.place(column, x_player) is False
    assert board.moves_remaining == ROWS * COLS


def test_tokens_fall_to_lowest_open_row(board, x_player, o_player):
    assert board.place(3, x_player)
    assert board.place(3, o_player)
    assert board.token_at(ROWS, 3) == "X"
    assert board.token_at(ROWS - 1, 3) == "O"
    assert board.token_at(ROWS - 2, 3) == EMPTY
    assert board.last_move == (ROWS - 2, 2)


def test_full_column_rejects_next_token(board, x_player, o_player):
    for i in range(ROWS):
        assert board.place(5, x_player if i % 2 == 0 else o_player)

    assert board.place(5, x_player) is False
    assert board.moves_remaining == ROWS * COLS - ROWS
    assert 5 not in board.get_valid_columns()
    assert board.get_valid_columns() == [1, 2, 3, 4, 6, 7]


def test_move_counter_matches_empty_cells(board, x_player, o_player):
    rng = random.Random(7)
    players = [x_player, o_player]
    for i in range(400):
        board.place(rng.randint(-1, COLS + 1), players[i % 2])
        assert board.moves_remaining == empty_cells(board)
    assert board.moves_remaining == 0


@pytest.mark.parametrize("row,column", [(0, 1), (ROWS + 1, 1), (1, 0), (1, COLS + 1)])
def test_token_at_out_of_range_raises(board, row, column):
    with pytest.raises(IndexError):
        board.token_at(row, column)


def test_vertical_win(board, drop):
    drop(board, {7: "OOO"})
    drop(board, {1: "XXX"})
    assert not board.is_won()
    drop(board, {1: "X"})
    assert board.is_won()


def test_horizontal_win(board, drop):
    drop(board, {1: "XO", 2: "XO", 3: "XO"})
    assert not board.is_won()
    drop(board, {4: "X"})
    assert board.is_won()


def test_horizontal_win_at_right_edge(board, drop):
    drop(board, {4: "XO", 5: "XO", 6: "XO", 7: "X"})
    assert board.is_won()


def test_vertical_win_reaching_top_row(board, drop):
    drop(board, {7: "OOXXXX", 1: "O"})
    assert board.token_at(1, 7) == "X"
    assert board.is_won()


def test_diagonal_win_rising_to_the_right(board, drop):
    drop(board, {1: "X", 2: "OX", 3: "OOX", 4: "OOO"})
    assert not board.is_won()
    drop(board, {4: "X"})
    assert board.is_won()


def test_diagonal_win_rising_to_the_left(board, drop):
    drop(board, {7: "X", 6: "OX", 5: "OOX", 4: "OOO"})
    assert not board.is_won()
    drop(board, {4: "X"})
    assert board.is_won()


def test_diagonal_near_miss_is_not_a_win(board, drop):
    # Three X on the diagonal, the fourth cell holds O
    drop(board, {1: "X", 2: "OX", 3: "OOX", 4: "OXOO"})
    assert board.token_at(3, 4) == "O"
    assert not board.is_won()


def test_broken_row_is_not_a_win(board, drop):
    drop(board, {1: "XO", 2: "XO", 3: "O", 4: "XO", 5: "X"})
    assert not board.is_won()


def test_win_not_checked_before_enough_moves(board, drop):
    drop(board, {1: "X", 2: "X", 3: "X", 4: "X"})
    assert board.moves_played < MIN_MOVES_FOR_WIN
    assert not board.is_won()

    drop(board, {7: "OOO"})
    assert board.is_won()


def test_full_board_without_run_is_tied(board, fill_without_win, x_player):
    fill_without_win(board)

    assert board.is_tied()
    assert not board.is_won()
    assert board.moves_remaining == 0
    assert board.get_valid_columns() == []
    assert board.place(1, x_player) is False


def test_is_won_does_not_mutate(board, drop):
    drop(board, {1: "XXXX", 7: "OOO"})
    before = board.get_state()
    assert board.is_won()
    assert board.is_won()
    assert np.array_equal(board.grid, before)
    assert board.moves_remaining == ROWS * COLS - 7


def test_render_shows_rows_and_column_numbers(board, x_player):
    board.place(2, x_player)
    lines = board.render().splitlines()
    assert len(lines) == ROWS + 1
    assert lines[ROWS - 1] == "| |X| | | | | |"
    assert lines[-1].split() == [str(c) for c in range(1, COLS + 1)]


def test_reset_clears_board(board, drop):
    drop(board, {1: "XO"})
    board.reset()
    assert board.moves_remaining == ROWS * COLS
    assert board.last_move is None
    assert empty_cells(board) == ROWS * COLS


def test_boards_do_not_share_state(x_player):
    first, second = Board(), Board()
    first.place(1, x_player)
    assert second.token_at(ROWS, 1) == EMPTY
