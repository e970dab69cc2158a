"""Hidden and visible grid state with explicit cell variants."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from broadside.game.core.models import GRID_SIZE, Cell, CellKind, Coord

_EMPTY_ID = ""

# Visible-grid mark codes stored in the numpy array.
_MARK_EMPTY = 0
_MARK_MISS = 1
_MARK_HIT = 2
_MARK_SUNK = 3

_MARK_TO_KIND: dict[int, CellKind] = {
    _MARK_EMPTY: CellKind.EMPTY,
    _MARK_MISS: CellKind.MISS,
    _MARK_HIT: CellKind.HIT,
    _MARK_SUNK: CellKind.SUNK,
}


def _letters(size: int) -> np.ndarray:
    return np.full((size, size), _EMPTY_ID, dtype="<U1")


@dataclass(slots=True)
class OceanGrid:
    """Ground-truth grid: ship occupancy plus struck segments."""

    size: int = GRID_SIZE
    occupants: np.ndarray = field(default_factory=lambda: _letters(GRID_SIZE))
    struck: np.ndarray = field(default_factory=lambda: np.zeros((GRID_SIZE, GRID_SIZE), dtype=bool))

    def __post_init__(self) -> None:
        if self.occupants.shape != (self.size, self.size):
            self.occupants = _letters(self.size)
        if self.struck.shape != (self.size, self.size):
            self.struck = np.zeros((self.size, self.size), dtype=bool)

    def in_bounds(self, coord: Coord) -> bool:
        """Return whether the coordinate is in grid bounds."""
        return 0 <= coord.row < self.size and 0 <= coord.col < self.size

    def can_place(self, cells: list[Coord]) -> bool:
        """Return whether every cell is in bounds and unoccupied."""
        for cell in cells:
            if not self.in_bounds(cell):
                return False
            if self.occupants[cell.row, cell.col] != _EMPTY_ID:
                return False
        return True

    def place_ship(self, ship_id: str, cells: list[Coord]) -> None:
        """Tag each cell with the ship identifier."""
        if not self.can_place(cells):
            raise ValueError(f"Invalid placement for ship {ship_id}.")
        for cell in cells:
            self.occupants[cell.row, cell.col] = ship_id

    def cell_at(self, coord: Coord) -> Cell:
        """Return the hidden cell variant: EMPTY, INTACT(id) or HIT(id)."""
        ship_id = str(self.occupants[coord.row, coord.col])
        struck = bool(self.struck[coord.row, coord.col])
        if not ship_id:
            # Struck empty water has no legal meaning; surfaced as an anonymous hit.
            return Cell(CellKind.HIT) if struck else Cell(CellKind.EMPTY)
        if struck:
            return Cell(CellKind.HIT, ship_id)
        return Cell(CellKind.INTACT, ship_id)

    def mark_struck(self, coord: Coord) -> None:
        self.struck[coord.row, coord.col] = True

    def occupied_count(self, ship_id: str | None = None) -> int:
        """Count occupied cells, optionally for one ship."""
        if ship_id is None:
            return int(np.count_nonzero(self.occupants != _EMPTY_ID))
        return int(np.count_nonzero(self.occupants == ship_id))

    def clear(self) -> None:
        self.occupants.fill(_EMPTY_ID)
        self.struck.fill(False)


@dataclass(slots=True)
class TargetGrid:
    """Player-facing grid reflecting only discovered information."""

    size: int = GRID_SIZE
    marks: np.ndarray = field(
        default_factory=lambda: np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.int8)
    )
    revealed: np.ndarray = field(default_factory=lambda: _letters(GRID_SIZE))

    def __post_init__(self) -> None:
        if self.marks.shape != (self.size, self.size):
            self.marks = np.zeros((self.size, self.size), dtype=np.int8)
        if self.revealed.shape != (self.size, self.size):
            self.revealed = _letters(self.size)

    def cell_at(self, coord: Coord) -> Cell:
        """Return the visible cell variant: EMPTY, MISS, HIT or SUNK(id)."""
        kind = _MARK_TO_KIND[int(self.marks[coord.row, coord.col])]
        if kind is CellKind.SUNK:
            return Cell(kind, str(self.revealed[coord.row, coord.col]))
        return Cell(kind)

    def already_fired(self, coord: Coord) -> bool:
        """Return whether a shot here was already resolved."""
        return int(self.marks[coord.row, coord.col]) != _MARK_EMPTY

    def mark_miss(self, coord: Coord) -> None:
        self.marks[coord.row, coord.col] = _MARK_MISS

    def mark_hit(self, coord: Coord) -> None:
        self.marks[coord.row, coord.col] = _MARK_HIT

    def reveal(self, ship_id: str, cells: list[Coord]) -> None:
        """Show a sunk ship's identifier on all of its segments."""
        for cell in cells:
            self.marks[cell.row, cell.col] = _MARK_SUNK
            self.revealed[cell.row, cell.col] = ship_id

    def set_cell(self, coord: Coord, cell: Cell) -> None:
        """Write a cell variant back (used when restoring snapshots)."""
        if cell.kind is CellKind.SUNK:
            if not cell.ship_id:
                raise ValueError("Sunk cell requires a ship identifier.")
            self.reveal(cell.ship_id, [coord])
            return
        codes = {value: key for key, value in _MARK_TO_KIND.items()}
        if cell.kind not in codes:
            raise ValueError(f"Cell kind {cell.kind.value} is not valid on the target grid.")
        self.marks[coord.row, coord.col] = codes[cell.kind]
        self.revealed[coord.row, coord.col] = _EMPTY_ID

    def clear(self) -> None:
        self.marks.fill(_MARK_EMPTY)
        self.revealed.fill(_EMPTY_ID)
