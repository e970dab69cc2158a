"""Shot outcome evaluation (miss/hit/sunk/already processed)."""

from __future__ import annotations

import logging

from broadside.game.core.board import OceanGrid, TargetGrid
from broadside.game.core.fleet import Fleet
from broadside.game.core.models import CellKind, Coord, ShotOutcome, ShotResult

logger = logging.getLogger(__name__)


def resolve_shot(ocean: OceanGrid, target: TargetGrid, fleet: Fleet, coord: Coord) -> ShotResult:
    """Resolve a shot against the hidden grid.

    Mutates at most one hidden cell and one ship. Marking the visible grid is
    left to the caller.
    """
    visible = target.cell_at(coord)
    if visible.kind in (CellKind.MISS, CellKind.SUNK):
        return ShotResult(ShotOutcome.ALREADY_PROCESSED, coord)

    hidden = ocean.cell_at(coord)
    if hidden.kind is CellKind.EMPTY:
        return ShotResult(ShotOutcome.MISS, coord)
    if hidden.kind is CellKind.HIT and hidden.ship_id:
        return ShotResult(ShotOutcome.ALREADY_PROCESSED, coord, fleet.by_letter(hidden.ship_id))
    if hidden.kind is CellKind.INTACT and hidden.ship_id:
        ship = fleet.by_letter(hidden.ship_id)
        if ship is None:
            return _internal_error(coord, f"Cell references unknown ship '{hidden.ship_id}'.")
        if ship.sunk:
            return ShotResult(ShotOutcome.ALREADY_PROCESSED, coord, ship)
        ship.hits_taken += 1
        ocean.mark_struck(coord)
        if ship.hits_taken < ship.length:
            return ShotResult(ShotOutcome.HIT, coord, ship)
        ship.sunk = True
        fleet.ships_remaining -= 1
        return ShotResult(ShotOutcome.SUNK, coord, ship)

    return _internal_error(coord, f"Unhandled hidden cell {hidden.kind.value} ({hidden.ship_id!r}).")


def _internal_error(coord: Coord, detail: str) -> ShotResult:
    logger.error(
        "shot_resolution_inconsistent row=%d col=%d detail=%s",
        coord.row,
        coord.col,
        detail,
    )
    return ShotResult(ShotOutcome.INTERNAL_ERROR, coord, detail=detail)
