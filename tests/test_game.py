"""Unit tests for tic-tac-toe rules and the score tally."""

import pytest

from tictactoe.game import (
    InvalidMove,
    Outcome,
    ScoreTally,
    TicTacToeGame,
    evaluate,
    new_board,
    winning_line,
)


def board_from(rows: str) -> list:
    return [" " if c == "." else c for c in rows.replace("/", "")]


def test_empty_board_is_ongoing():
    assert evaluate(new_board()) is Outcome.ONGOING


def test_full_board_without_line_is_draw():
    board = board_from("XOX/XOO/OXX")
    assert evaluate(board) is Outcome.DRAW


def test_full_board_with_line_is_a_win_not_a_draw():
    board = board_from("XXX/OOX/XOO")
    assert evaluate(board) is Outcome.HUMAN_WINS


def test_column_and_diagonal_wins():
    assert evaluate(board_from("XO./XO./.O.")) is Outcome.COMPUTER_WINS
    assert evaluate(board_from("O.X/XO./..O")) is Outcome.COMPUTER_WINS
    assert evaluate(board_from("O.X/OX./X..")) is Outcome.HUMAN_WINS


def test_winning_line_reports_first_completed_line():
    assert winning_line(board_from("XXX/OO./...")) == (0, 1, 2)
    assert winning_line(board_from("..X/OX./X.O")) == (2, 4, 6)
    assert winning_line(board_from("XO./.../...")) is None


def test_completing_top_row_wins_immediately():
    game = TicTacToeGame(board=board_from("XX./OO./..."))
    game.play_move(2)
    assert game.outcome is Outcome.HUMAN_WINS
    assert game.is_over
    assert game.available_moves() == []


def test_play_move_alternates_players():
    game = TicTacToeGame()
    game.play_move(4)
    assert game.board[4] == "X"
    assert game.current_player == "O"
    game.play_move(0)
    assert game.board[0] == "O"
    assert game.current_player == "X"
    assert game.available_moves() == [1, 2, 3, 5, 6, 7, 8]


def test_occupied_cell_rejected():
    game = TicTacToeGame()
    game.play_move(0)
    with pytest.raises(InvalidMove):
        game.play_move(0)


@pytest.mark.parametrize("index", [-1, 9])
def test_out_of_range_cell_rejected(index):
    game = TicTacToeGame()
    with pytest.raises(InvalidMove):
        game.play_move(index)
    assert game.board == new_board()


def test_no_moves_after_game_finished():
    game = TicTacToeGame(board=board_from("XX./OO./..."))
    game.play_move(2)
    with pytest.raises(InvalidMove, match="finished"):
        game.play_move(5)


def test_restart_clears_board():
    game = TicTacToeGame(board=board_from("XX./OO./..."))
    game.play_move(2)
    game.restart()
    assert game.board == new_board()
    assert game.current_player == "X"
    assert game.outcome is Outcome.ONGOING


def test_score_tally_counts_and_resets():
    tally = ScoreTally()
    tally.record(Outcome.HUMAN_WINS)
    tally.record(Outcome.COMPUTER_WINS)
    tally.record(Outcome.COMPUTER_WINS)
    tally.record(Outcome.DRAW)
    tally.record(Outcome.ONGOING)
    assert (tally.human, tally.computer, tally.draws) == (1, 2, 1)

    tally.reset()
    assert (tally.human, tally.computer, tally.draws) == (0, 0, 0)
