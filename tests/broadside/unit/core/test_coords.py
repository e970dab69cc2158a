import pytest

from broadside.game.core.coords import decode, describe_parse_error, encode
from broadside.game.core.errors import CoordinateParseError, ParseErrorKind
from broadside.game.core.models import GRID_SIZE, Coord


def test_decode_corner_cells() -> None:
    assert decode("A1") == Coord(row=0, col=0)
    assert decode("J10") == Coord(row=9, col=9)


def test_decode_is_case_insensitive_and_trims_whitespace() -> None:
    assert decode("c7") == Coord(row=6, col=2)
    assert decode("  b2\n") == Coord(row=1, col=1)


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("K5", ParseErrorKind.COLUMN_OUT_OF_RANGE),
        ("A11", ParseErrorKind.ROW_OUT_OF_RANGE),
        ("A0", ParseErrorKind.ROW_OUT_OF_RANGE),
        ("AA", ParseErrorKind.ROW_NOT_NUMERIC),
        ("B1x", ParseErrorKind.ROW_NOT_NUMERIC),
        ("A", ParseErrorKind.FORMAT),
        ("A100", ParseErrorKind.FORMAT),
        ("", ParseErrorKind.FORMAT),
        ("15", ParseErrorKind.FORMAT),
        ("?3", ParseErrorKind.FORMAT),
    ],
)
def test_decode_rejects_invalid_input(text: str, kind: ParseErrorKind) -> None:
    with pytest.raises(CoordinateParseError) as excinfo:
        decode(text)
    assert excinfo.value.kind is kind
    assert isinstance(excinfo.value, ValueError)


def test_decode_rejects_non_ascii_digits() -> None:
    with pytest.raises(CoordinateParseError) as excinfo:
        decode("A²")
    assert excinfo.value.kind is ParseErrorKind.ROW_NOT_NUMERIC


def test_encode_decode_round_trip_all_cells() -> None:
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            assert decode(encode(row, col)) == Coord(row, col)


def test_encode_uses_letter_then_one_based_row() -> None:
    assert encode(0, 0) == "A1"
    assert encode(9, 4) == "E10"


def test_decode_respects_smaller_grid() -> None:
    assert decode("C3", size=3) == Coord(2, 2)
    with pytest.raises(CoordinateParseError):
        decode("D1", size=3)


def test_describe_parse_error_mentions_ranges() -> None:
    assert "A-J" in describe_parse_error(ParseErrorKind.COLUMN_OUT_OF_RANGE)
    assert "1-10" in describe_parse_error(ParseErrorKind.ROW_OUT_OF_RANGE)
