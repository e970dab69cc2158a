"""Conversion between player coordinate strings ("A5") and grid coordinates."""

from __future__ import annotations

import string

from broadside.game.core.errors import CoordinateParseError, ParseErrorKind
from broadside.game.core.models import GRID_SIZE, Coord

_PARSE_MESSAGES: dict[ParseErrorKind, str] = {
    ParseErrorKind.FORMAT: "Invalid coordinate format. Use LetterNumber (e.g., A5, J10).",
    ParseErrorKind.COLUMN_OUT_OF_RANGE: "Column out of range. Must be A-{last}.",
    ParseErrorKind.ROW_NOT_NUMERIC: "Row must be a number.",
    ParseErrorKind.ROW_OUT_OF_RANGE: "Row out of range. Must be 1-{size}.",
}


def column_letter(col: int) -> str:
    """Return the column letter for a zero-based column index."""
    return chr(ord("A") + col)


def encode(row: int, col: int) -> str:
    """Encode zero-based row/col as LetterNumber text."""
    return f"{column_letter(col)}{row + 1}"


def encode_coord(coord: Coord) -> str:
    return encode(coord.row, coord.col)


def decode(text: str, size: int = GRID_SIZE) -> Coord:
    """Decode LetterNumber text into a zero-based coordinate.

    Raises ``CoordinateParseError`` describing the first rule the input breaks.
    """
    cleaned = text.strip()
    if len(cleaned) < 2 or len(cleaned) > 3:
        raise CoordinateParseError(ParseErrorKind.FORMAT, text)

    letter = cleaned[0].upper()
    if letter not in string.ascii_uppercase:
        raise CoordinateParseError(ParseErrorKind.FORMAT, text)
    col = ord(letter) - ord("A")
    if col >= size:
        raise CoordinateParseError(ParseErrorKind.COLUMN_OUT_OF_RANGE, text)

    digits = cleaned[1:]
    if not all(char in string.digits for char in digits):
        raise CoordinateParseError(ParseErrorKind.ROW_NOT_NUMERIC, text)
    row_number = int(digits)
    if row_number < 1 or row_number > size:
        raise CoordinateParseError(ParseErrorKind.ROW_OUT_OF_RANGE, text)
    return Coord(row=row_number - 1, col=col)


def describe_parse_error(kind: ParseErrorKind, size: int = GRID_SIZE) -> str:
    """Return the player-facing message for a parse failure."""
    return _PARSE_MESSAGES[kind].format(last=column_letter(size - 1), size=size)
