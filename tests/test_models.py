"""Tests for models.py."""

import pytest

from models import (
    Coord,
    Direction,
    EndWord,
    EventKind,
    Found,
    Mismatch,
    Puzzle,
    StartAt,
    StartWord,
    TryDirection,
    Visit,
    WordSearchError,
    format_path,
)


class TestCoord:
    def test_fields(self):
        coord = Coord(2, 3)
        assert coord.row == 2
        assert coord.col == 3

    def test_equals_plain_tuple(self):
        assert Coord(1, 1) == (1, 1)

    def test_hashable_key(self):
        cells = {Coord(0, 1): "A", Coord(1, 0): "B"}
        assert cells[(0, 1)] == "A"
        assert cells[Coord(1, 0)] == "B"

    def test_negative_components_do_not_collide(self):
        assert Coord(-1, 11) != Coord(-11, 1)
        assert len({Coord(-1, 11), Coord(-11, 1), Coord(1, -11)}) == 3


class TestDirection:
    def test_search_order(self):
        assert [d.name for d in Direction] == ["N", "S", "E", "W", "NW", "NE", "SW", "SE"]

    def test_vectors(self):
        assert [d.value for d in Direction] == [
            (-1, 0), (1, 0), (0, 1), (0, -1), (-1, -1), (-1, 1), (1, -1), (1, 1),
        ]

    def test_dy_dx(self):
        assert Direction.NE.dy == -1
        assert Direction.NE.dx == 1

    def test_step(self):
        assert Direction.SE.step(Coord(1, 1), 2) == Coord(3, 3)
        assert Direction.W.step(Coord(0, 0), 1) == Coord(0, -1)
        assert Direction.N.step(Coord(4, 4), 0) == Coord(4, 4)


class TestTraceEvents:
    def test_kinds(self):
        assert StartWord("CAT").kind == EventKind.START_WORD
        assert StartAt("CAT", Coord(0, 0)).kind == EventKind.START_AT
        assert TryDirection("CAT", Coord(0, 0), Direction.E).kind == EventKind.TRY_DIRECTION
        assert Visit("CAT", Coord(0, 0), 0).kind == EventKind.VISIT
        assert Mismatch("CAT", Coord(0, 0), 0).kind == EventKind.MISMATCH
        assert Found("CAT", (Coord(0, 0),)).kind == EventKind.FOUND
        assert EndWord("CAT").kind == EventKind.END_WORD

    def test_payload_required(self):
        with pytest.raises(TypeError):
            StartAt("CAT")
        with pytest.raises(TypeError):
            Found("CAT")
        with pytest.raises(TypeError):
            Visit("CAT", Coord(0, 0))

    def test_kind_values(self):
        assert EventKind.START_WORD.value == "start-word"
        assert EventKind.TRY_DIRECTION.value == "try-direction"
        assert EventKind.END_WORD.value == "end-word"

    def test_frozen(self):
        event = Visit("CAT", Coord(0, 0), 0)
        with pytest.raises(AttributeError):
            event.index = 1

    def test_visit_and_mismatch_differ(self):
        assert Visit("CAT", Coord(0, 0), 0) != Mismatch("CAT", Coord(0, 0), 0)
        assert not isinstance(Mismatch("CAT", Coord(0, 0), 0), Visit)

    def test_start_word_and_end_word_differ(self):
        assert StartWord("CAT") != EndWord("CAT")

    def test_describe(self):
        assert StartWord("CAT").describe() == "start-word(CAT)"
        assert Visit("CAT", Coord(0, 1), 1).describe() == "visit(CAT, (0, 1), 1)"
        assert (
            TryDirection("CAT", Coord(0, 0), Direction.SW).describe()
            == "try-direction(CAT, (0, 0), SW)"
        )
        assert (
            Found("AB", (Coord(0, 0), Coord(0, 1))).describe()
            == "found(AB, (0,0) (0,1))"
        )

    def test_as_row(self):
        assert StartWord("CAT").as_row() == ("start-word", "CAT", None, None, None, None, None)
        assert Mismatch("CAT", Coord(-1, 0), 1).as_row() == (
            "mismatch", "CAT", -1, 0, 1, None, None,
        )
        assert TryDirection("CAT", Coord(2, 3), Direction.N).as_row() == (
            "try-direction", "CAT", 2, 3, None, "N", None,
        )


class TestFormatPath:
    def test_format(self):
        assert format_path([Coord(0, 0), Coord(1, 1)]) == "(0,0) (1,1)"

    def test_empty(self):
        assert format_path([]) == ""


class TestPuzzle:
    def test_dimensions(self):
        puzzle = Puzzle(grid=("CAT", "DOG"), words=("CAT",))
        assert puzzle.rows == 2
        assert puzzle.cols == 3

    def test_empty_grid(self):
        puzzle = Puzzle(grid=(), words=())
        assert puzzle.rows == 0
        assert puzzle.cols == 0


class TestWordSearchError:
    def test_is_exception(self):
        with pytest.raises(WordSearchError, match="test error"):
            raise WordSearchError("test error")
