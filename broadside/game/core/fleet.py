"""Fleet construction and random hidden placement."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from broadside.game.core.board import OceanGrid
from broadside.game.core.models import (
    DEFAULT_PLACEMENT_ATTEMPTS,
    FLEET_SPECS,
    Coord,
    Orientation,
    Ship,
    ShipSpec,
    cells_for_placement,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Fleet:
    """Ordered fleet members plus the count of ships still afloat."""

    ships: list[Ship] = field(default_factory=list)
    ships_remaining: int = 0

    def by_letter(self, letter: str) -> Ship | None:
        """Find a ship by identifier."""
        for ship in self.ships:
            if ship.letter == letter:
                return ship
        return None

    def all_sunk(self) -> bool:
        return self.ships_remaining == 0


@dataclass(frozen=True, slots=True)
class PlacementReport:
    """Outcome of placing a fleet on a hidden grid."""

    fleet: Fleet
    unplaced: list[str]

    @property
    def complete(self) -> bool:
        return not self.unplaced


def build_fleet(specs: tuple[ShipSpec, ...] = FLEET_SPECS) -> Fleet:
    """Create unplaced, undamaged ships in fleet order."""
    return Fleet(ships=[Ship(spec=spec) for spec in specs], ships_remaining=len(specs))


def place_fleet(
    ocean: OceanGrid,
    rng: random.Random,
    specs: tuple[ShipSpec, ...] = FLEET_SPECS,
    max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
) -> PlacementReport:
    """Randomly place every ship without overlap or out-of-bounds segments.

    Ships that cannot be placed within ``max_attempts`` samples are left
    unplaced and listed in the report.
    """
    fleet = build_fleet(specs)
    unplaced: list[str] = []
    for ship in fleet.ships:
        cells = _sample_placement(ocean, rng, ship.length, max_attempts)
        if cells is None:
            logger.warning(
                "ship_placement_exhausted ship=%s attempts=%d",
                ship.name,
                max_attempts,
                extra={"ship_id": ship.letter, "grid_size": ocean.size},
            )
            unplaced.append(ship.name)
            continue
        ocean.place_ship(ship.letter, cells)
        ship.cells = cells
    return PlacementReport(fleet=fleet, unplaced=unplaced)


def _sample_placement(
    ocean: OceanGrid, rng: random.Random, length: int, max_attempts: int
) -> list[Coord] | None:
    for _ in range(max_attempts):
        row = rng.randrange(ocean.size)
        col = rng.randrange(ocean.size)
        orientation = rng.choice([Orientation.HORIZONTAL, Orientation.VERTICAL])
        cells = cells_for_placement(Coord(row=row, col=col), orientation, length)
        if ocean.can_place(cells):
            return cells
    return None
