"""Tests for board coordinates and their named form."""

import pytest

from tictactoe.game.coordinate import Coordinate, Hor, Vert, as_coordinate


def test_named_and_pair_forms_cover_the_same_cells():
    named = {Coordinate.named(v, h) for v in Vert for h in Hor}
    pairs = {Coordinate(r, c) for r in range(3) for c in range(3)}
    assert named == pairs


def test_named_round_trip_through_properties():
    coord = Coordinate.named(Vert.BOTTOM, Hor.LEFT)
    assert (coord.row, coord.col) == (2, 0)
    assert coord.vert == Vert.BOTTOM
    assert coord.hor == Hor.LEFT
    assert str(coord) == "Bottom, Left"


def test_from_name_is_case_insensitive():
    assert Coordinate.from_name("Top", "right") == Coordinate(0, 2)
    with pytest.raises(ValueError):
        Coordinate.from_name("upper", "left")


def test_flat_index_mapping():
    assert Coordinate(1, 2).index == 5
    assert Coordinate.from_index(7) == Coordinate(2, 1)
    for index in range(9):
        assert Coordinate.from_index(index).index == index


@pytest.mark.parametrize("index", [-1, 9, 2.0, True, "3"])
def test_from_index_rejects_bad_input(index):
    with pytest.raises(ValueError):
        Coordinate.from_index(index)


@pytest.mark.parametrize("row, col, expected", [
    (0, 0, True),
    (2, 2, True),
    (5, 0, False),
    (0, -1, False),
    (3, 3, False),
])
def test_is_on_board(row, col, expected):
    assert Coordinate(row, col).is_on_board() is expected


def test_off_board_coordinate_has_plain_label():
    assert str(Coordinate(5, 0)) == "(5, 0)"


class TestAsCoordinate:

    def test_accepts_coordinate_pair_and_names(self):
        assert as_coordinate(Coordinate(1, 1)) == Coordinate(1, 1)
        assert as_coordinate((0, 2)) == Coordinate(0, 2)
        assert as_coordinate([2, 0]) == Coordinate(2, 0)
        assert as_coordinate((Vert.MID, Hor.RIGHT)) == Coordinate(1, 2)

    def test_keeps_out_of_range_values(self):
        assert as_coordinate((5, 1)) == Coordinate(5, 1)

    @pytest.mark.parametrize("value", [None, 4, "a1", (1,), (1, 2, 3), (1.5, 0), (True, 0), (Hor.LEFT, Vert.TOP)])
    def test_rejects_malformed_values(self, value):
        assert as_coordinate(value) is None
