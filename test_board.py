"""
Tests for the board, win checker, and move validator.
"""

import pytest

from tictactoe.board import Board, Marker, parse_cell
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import WINNING_LINES, GameStatus, TerminalResult, WinChecker

X, O, _ = Marker.X, Marker.O, None


def test_new_board_is_empty_and_in_progress():
    board = Board()
    assert board.cells() == (None,) * 9
    assert board.evaluate() == TerminalResult.in_progress()
    assert board.get_empty_cells() == list(range(9))


def test_place_sets_empty_cell():
    board = Board()
    assert board.place(4, X) is True
    assert board.cells()[4] is X
    assert 4 not in board.get_empty_cells()


@pytest.mark.parametrize("index", [-1, 9, 42, 1.5, "3", True, None])
def test_place_rejects_out_of_range(index):
    board = Board()
    assert board.place(index, X) is False
    assert board.cells() == (None,) * 9


def test_place_never_overwrites():
    board = Board()
    board.place(0, X)
    assert board.place(0, O) is False
    assert board.place(0, X) is False
    assert board.cells()[0] is X


def test_cells_is_a_snapshot():
    board = Board()
    before = board.cells()
    board.place(2, O)
    assert before[2] is None
    assert board.cells()[2] is O


def test_reset_clears_board():
    board = Board.from_cells([X, O, X, _, O, _, _, _, _])
    assert board.reset() is None
    assert board.cells() == (None,) * 9
    assert board.evaluate().status is GameStatus.IN_PROGRESS


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("marker", [X, O])
def test_every_winning_line_is_a_win(line, marker):
    cells = [None] * 9
    for index in line:
        cells[index] = marker
    assert Board.from_cells(cells).evaluate() == TerminalResult.win_by(marker)


def test_there_are_eight_winning_lines():
    assert len(WINNING_LINES) == 8
    assert len(set(WINNING_LINES)) == 8


def test_full_board_without_line_is_tie():
    board = Board.from_cells([X, O, X, X, O, O, O, X, X])
    assert board.evaluate() == TerminalResult.tie()
    assert board.evaluate().is_over


def test_full_board_with_line_is_win_not_tie():
    board = Board.from_cells([X, X, X, O, O, X, O, X, O])
    assert board.evaluate() == TerminalResult.win_by(X)
    assert WinChecker().check_draw(board.cells()) is False


def test_mixed_line_is_not_a_win():
    board = Board.from_cells([X, O, X, _, _, _, _, _, _])
    assert board.evaluate().status is GameStatus.IN_PROGRESS
    assert board.evaluate().winner is None


def test_evaluate_is_idempotent():
    board = Board.from_cells([X, O, _, _, X, _, _, _, O])
    assert board.evaluate() == board.evaluate() == board.evaluate()


def test_get_winning_line():
    checker = WinChecker()
    cells = Board.from_cells([O, X, _, X, O, _, _, X, O]).cells()
    assert checker.get_winning_line(cells) == (0, 4, 8)
    assert checker.check_winner(cells) is O


def test_terminal_result_str():
    assert str(TerminalResult.win_by(O)) == "WinBy(O)"
    assert str(TerminalResult.tie()) == "Tie"
    assert str(TerminalResult.in_progress()) == "InProgress"


def test_from_cells_accepts_strings():
    board = Board.from_cells(["X", "o", "", " ", ".", "_", None, X, "O"])
    assert board.cells() == (X, O, None, None, None, None, None, X, O)


def test_from_cells_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_cells([X] * 8)
    with pytest.raises(ValueError):
        parse_cell("Z")


def test_copy_is_independent():
    board = Board.from_cells([X, _, _, _, _, _, _, _, _])
    copy = board.copy()
    copy.place(1, O)
    assert board.cells()[1] is None
    assert copy != board


def test_str_shows_free_cell_numbers():
    board = Board.from_cells([X, _, _, _, O, _, _, _, _])
    text = str(board)
    assert text.splitlines()[0] == " X | 2 | 3"
    assert " 4 | O | 6" in text


def test_marker_opposite():
    assert X.opposite() is O
    assert O.opposite() is X


def test_validator_messages():
    validator = MoveValidator()
    cells = Board.from_cells([X, _, _, _, _, _, _, _, _]).cells()

    assert validator.validate_placement(cells, 1).is_valid

    occupied = validator.validate_placement(cells, 0)
    assert not occupied.is_valid
    assert "occupied" in occupied.error_message

    out_of_range = validator.validate_placement(cells, 9)
    assert not out_of_range.is_valid
    assert "0-8" in out_of_range.error_message

    assert validator.get_valid_moves(cells) == [1, 2, 3, 4, 5, 6, 7, 8]


@pytest.mark.parametrize("marker", ["X", "O", None, 1])
def test_place_rejects_non_marker(marker):
    board = Board()
    assert board.place(0, marker) is False
    assert board.cells() == (None,) * 9


def test_is_full():
    assert not Board().is_full()
    assert not Board.from_cells([X, O, X, X, O, O, O, X, _]).is_full()
    assert Board.from_cells([X, O, X, X, O, O, O, X, X]).is_full()
