"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

GRID_SIZE = 10
DEFAULT_PLACEMENT_ATTEMPTS = 1000


class Orientation(StrEnum):
    """Ship orientation."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"


@dataclass(frozen=True, slots=True)
class ShipSpec:
    """Static description of one fleet member."""

    name: str
    letter: str
    length: int


FLEET_SPECS: tuple[ShipSpec, ...] = (
    ShipSpec("Seminole State Ship", "S", 3),
    ShipSpec("Air Force Academy", "A", 5),
    ShipSpec("Valencia Destroyer", "V", 4),
    ShipSpec("Eskimo University", "E", 3),
    ShipSpec("Deland High School", "D", 2),
)

TOTAL_SEGMENTS = sum(spec.length for spec in FLEET_SPECS)


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate."""

    row: int
    col: int


@dataclass(slots=True)
class Ship:
    """One placed (or not yet placed) fleet member."""

    spec: ShipSpec
    cells: list[Coord] = field(default_factory=list)
    hits_taken: int = 0
    sunk: bool = False

    @property
    def letter(self) -> str:
        return self.spec.letter

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def length(self) -> int:
        return self.spec.length

    @property
    def placed(self) -> bool:
        return len(self.cells) == self.spec.length


class CellKind(StrEnum):
    """Explicit state of a single grid cell."""

    EMPTY = "EMPTY"
    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    INTACT = "INTACT"


@dataclass(frozen=True, slots=True)
class Cell:
    """Grid cell variant with optional ship identifier."""

    kind: CellKind
    ship_id: str | None = None


class ShotOutcome(StrEnum):
    """Result kind of a single shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    ALREADY_PROCESSED = "ALREADY_PROCESSED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True, slots=True)
class ShotResult:
    """Tagged shot result; carries the struck ship for HIT/SUNK."""

    outcome: ShotOutcome
    coord: Coord
    ship: Ship | None = None
    detail: str = ""


class SessionState(StrEnum):
    """Game session lifecycle."""

    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    ABANDONED = "ABANDONED"


def cells_for_placement(start: Coord, orientation: Orientation, length: int) -> list[Coord]:
    """Compute cells covered by a ship of ``length`` starting at ``start``."""
    result: list[Coord] = []
    for i in range(length):
        if orientation is Orientation.HORIZONTAL:
            result.append(Coord(start.row, start.col + i))
        else:
            result.append(Coord(start.row + i, start.col))
    return result


def spec_by_letter(letter: str, specs: tuple[ShipSpec, ...] = FLEET_SPECS) -> ShipSpec | None:
    """Find the ship spec for an identifier."""
    for spec in specs:
        if spec.letter == letter:
            return spec
    return None
