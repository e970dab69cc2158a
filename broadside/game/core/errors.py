"""Exception types raised by the game core and its collaborators."""

from __future__ import annotations

from enum import StrEnum


class BroadsideError(Exception):
    """Base class for all game errors."""


class ParseErrorKind(StrEnum):
    """Reason a coordinate string was rejected."""

    FORMAT = "FORMAT"
    COLUMN_OUT_OF_RANGE = "COLUMN_OUT_OF_RANGE"
    ROW_NOT_NUMERIC = "ROW_NOT_NUMERIC"
    ROW_OUT_OF_RANGE = "ROW_OUT_OF_RANGE"


class CoordinateParseError(BroadsideError, ValueError):
    """Raised when player input is not a valid grid coordinate."""

    def __init__(self, kind: ParseErrorKind, text: str) -> None:
        super().__init__(f"{kind.value}: {text!r}")
        self.kind = kind
        self.text = text


class SessionStateError(BroadsideError, RuntimeError):
    """Raised when an operation is not valid in the current session state."""


class PlacementExhaustedError(BroadsideError, RuntimeError):
    """Raised when the fleet could not be fully placed within the attempt budget."""

    def __init__(self, unplaced: list[str]) -> None:
        super().__init__(f"Could not place ships: {', '.join(unplaced)}.")
        self.unplaced = unplaced


class PersistenceError(BroadsideError, OSError):
    """Raised when a saved session cannot be written or read back."""


class SaveNotFoundError(PersistenceError):
    """Raised when no saved session exists."""
