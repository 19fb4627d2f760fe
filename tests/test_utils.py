"""Tests for the constants, Side/Outcome types and outcome evaluation."""

import numpy as np
import pytest

from tictactoe.utils import (BOARD_SIZE, EMPTY, WIN_LINE_INDICES, WIN_LINES,
                             Outcome, OutcomeKind, Side, count_open_lines,
                             evaluate_outcome, find_winning_line,
                             render_board_ascii)

X = Side.FIRST.value
O = Side.SECOND.value
_ = EMPTY


def grid(rows):
    return np.array(rows, dtype=np.int8)


class TestSide:

    def test_other_alternates(self):
        assert Side.FIRST.other() == Side.SECOND
        assert Side.SECOND.other() == Side.FIRST

    def test_symbols(self):
        assert str(Side.FIRST) == "X"
        assert str(Side.SECOND) == "O"


class TestOutcome:

    def test_constructors(self):
        assert Outcome.in_progress(Side.FIRST).kind == OutcomeKind.IN_PROGRESS
        assert Outcome.won(Side.SECOND).side == Side.SECOND
        assert Outcome.draw().side is None

    def test_draw_with_side_is_rejected(self):
        with pytest.raises(ValueError):
            Outcome(OutcomeKind.DRAW, Side.FIRST)

    @pytest.mark.parametrize("kind", [OutcomeKind.IN_PROGRESS, OutcomeKind.WON])
    def test_sided_outcome_without_side_is_rejected(self, kind):
        with pytest.raises(ValueError):
            Outcome(kind)

    def test_game_over_and_winner(self):
        assert not Outcome.in_progress(Side.FIRST).is_game_over()
        assert Outcome.won(Side.FIRST).is_game_over()
        assert Outcome.draw().is_game_over()
        assert Outcome.won(Side.FIRST).winner == Side.FIRST
        assert Outcome.in_progress(Side.FIRST).winner is None
        assert Outcome.draw().winner is None

    def test_str(self):
        assert str(Outcome.won(Side.FIRST)) == "Won(X)"
        assert str(Outcome.draw()) == "Draw"
        assert str(Outcome.in_progress(Side.SECOND)) == "InProgress(O)"


def test_there_are_eight_distinct_win_lines():
    assert len(WIN_LINES) == 8
    assert len({frozenset(line) for line in WIN_LINES}) == 8
    assert WIN_LINE_INDICES.shape == (8, BOARD_SIZE)
    for line in WIN_LINES:
        assert len(line) == 3


class TestEvaluateOutcome:

    def test_empty_board_is_in_progress(self):
        outcome = evaluate_outcome(np.zeros((3, 3), dtype=np.int8), Side.FIRST)
        assert outcome == Outcome.in_progress(Side.FIRST)

    def test_row_win(self):
        board = grid([[X, X, X],
                      [O, O, _],
                      [_, _, _]])
        assert evaluate_outcome(board, Side.SECOND) == Outcome.won(Side.FIRST)

    def test_column_win(self):
        board = grid([[X, O, X],
                      [_, O, _],
                      [X, O, _]])
        assert evaluate_outcome(board, Side.FIRST) == Outcome.won(Side.SECOND)

    def test_anti_diagonal_win(self):
        board = grid([[O, O, X],
                      [_, X, _],
                      [X, _, _]])
        assert evaluate_outcome(board, Side.SECOND) == Outcome.won(Side.FIRST)
        assert WIN_LINES[find_winning_line(board)] == ((0, 2), (1, 1), (2, 0))

    def test_full_board_without_line_is_draw(self):
        board = grid([[X, O, X],
                      [X, O, O],
                      [O, X, X]])
        assert find_winning_line(board) is None
        assert count_open_lines(board) == 0
        assert evaluate_outcome(board, Side.SECOND) == Outcome.draw()

    def test_draw_detected_before_board_is_full(self):
        board = grid([[X, O, X],
                      [X, O, O],
                      [O, X, _]])
        assert evaluate_outcome(board, Side.FIRST) == Outcome.draw()

    def test_open_lines_keep_game_going(self):
        board = grid([[X, O, X],
                      [X, O, O],
                      [_, X, _]])
        assert count_open_lines(board) == 2
        assert evaluate_outcome(board, Side.SECOND) == Outcome.in_progress(Side.SECOND)


def test_render_board_ascii_labels_rows_and_columns():
    board = grid([[X, _, _],
                  [_, O, _],
                  [_, _, _]])
    lines = render_board_ascii(board).splitlines()

    assert lines[0].split() == ["l", "m", "r"]
    assert lines[1].split() == ["t", "X", "_", "_"]
    assert lines[2].split() == ["m", "_", "O", "_"]
    assert lines[3].split() == ["b", "_", "_", "_"]
