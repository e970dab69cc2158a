"""Versioned snapshot contract for persisted game sessions."""

from __future__ import annotations

from broadside.game.core.board import OceanGrid, TargetGrid
from broadside.game.core.fleet import Fleet
from broadside.game.core.models import (
    FLEET_SPECS,
    Cell,
    CellKind,
    Coord,
    SessionState,
    Ship,
    ShipSpec,
    spec_by_letter,
)
from broadside.game.core.rules import GameSession

SNAPSHOT_VERSION = 1

_VISIBLE_CODES: dict[CellKind, str] = {
    CellKind.EMPTY: ".",
    CellKind.MISS: "M",
    CellKind.HIT: "H",
}


def session_to_payload(session: GameSession) -> dict[str, object]:
    """Convert a session to a JSON-serializable payload with stable field order."""
    return {
        "version": SNAPSHOT_VERSION,
        "grid_size": session.size,
        "shots_fired": session.shots_fired,
        "ships_remaining": session.ships_remaining,
        "state": session.state.value,
        "last_shot": None if session.last_shot is None else [session.last_shot.row, session.last_shot.col],
        "fleet": [
            {
                "id": ship.letter,
                "hits_taken": ship.hits_taken,
                "sunk": ship.sunk,
                "cells": [[cell.row, cell.col] for cell in ship.cells],
            }
            for ship in session.fleet.ships
        ],
        "struck": [
            [row, col]
            for row in range(session.size)
            for col in range(session.size)
            if bool(session.ocean.struck[row, col])
        ],
        "visible": [_encode_visible_row(session.target, row) for row in range(session.size)],
    }


def payload_to_session(
    payload: dict[str, object], specs: tuple[ShipSpec, ...] = FLEET_SPECS
) -> GameSession:
    """Rebuild and validate a session from a loaded payload."""
    if _as_int(payload.get("version"), "version") != SNAPSHOT_VERSION:
        raise ValueError("Unsupported snapshot version.")
    size = _as_int(payload.get("grid_size"), "grid_size")
    if size < 1 or size > 26:
        raise ValueError("Snapshot grid_size out of range.")

    ocean = OceanGrid(size=size)
    fleet = Fleet(ships=[], ships_remaining=0)
    raw_fleet = payload.get("fleet")
    if not isinstance(raw_fleet, list):
        raise ValueError("Snapshot fleet must be a list.")
    for item in raw_fleet:
        fleet.ships.append(_decode_ship(item, size, ocean, specs))
    if [ship.letter for ship in fleet.ships] != [spec.letter for spec in specs]:
        raise ValueError("Snapshot fleet does not match the fleet roster.")

    fleet.ships_remaining = _as_int(payload.get("ships_remaining"), "ships_remaining")
    afloat = sum(1 for ship in fleet.ships if not ship.sunk)
    if fleet.ships_remaining != afloat:
        raise ValueError("Snapshot ships_remaining disagrees with fleet state.")

    raw_struck = payload.get("struck")
    if not isinstance(raw_struck, list):
        raise ValueError("Snapshot struck cells must be a list.")
    for raw in raw_struck:
        coord = _decode_coord(raw, size)
        if not str(ocean.occupants[coord.row, coord.col]):
            raise ValueError("Snapshot marks empty water as struck.")
        ocean.mark_struck(coord)
    for ship in fleet.ships:
        struck = sum(1 for cell in ship.cells if bool(ocean.struck[cell.row, cell.col]))
        if struck != ship.hits_taken:
            raise ValueError(f"Snapshot hits for ship {ship.letter} disagree with struck cells.")

    target = TargetGrid(size=size)
    raw_visible = payload.get("visible")
    if not isinstance(raw_visible, list) or len(raw_visible) != size:
        raise ValueError("Snapshot visible grid has the wrong number of rows.")
    for row, raw_row in enumerate(raw_visible):
        _decode_visible_row(target, row, raw_row, size)
    _check_visible(target, ocean, fleet)

    shots_fired = _as_int(payload.get("shots_fired"), "shots_fired")
    if shots_fired < 0:
        raise ValueError("Snapshot shots_fired cannot be negative.")
    try:
        state = SessionState(str(payload.get("state")))
    except ValueError as exc:
        raise ValueError("Snapshot state is unknown.") from exc
    raw_last = payload.get("last_shot")
    last_shot = None if raw_last is None else _decode_coord(raw_last, size)

    return GameSession(
        size=size,
        fleet=fleet,
        ocean=ocean,
        target=target,
        shots_fired=shots_fired,
        state=state,
        last_shot=last_shot,
    )


def _decode_ship(
    item: object, size: int, ocean: OceanGrid, specs: tuple[ShipSpec, ...]
) -> Ship:
    if not isinstance(item, dict):
        raise ValueError("Each snapshot ship must be an object.")
    spec = spec_by_letter(str(item.get("id", "")), specs)
    if spec is None:
        raise ValueError("Snapshot references an unknown ship.")
    raw_cells = item.get("cells")
    if not isinstance(raw_cells, list) or len(raw_cells) != spec.length:
        raise ValueError(f"Snapshot ship {spec.letter} has the wrong number of cells.")
    cells = [_decode_coord(raw, size) for raw in raw_cells]
    if not ocean.can_place(cells):
        raise ValueError(f"Snapshot ship {spec.letter} overlaps another ship.")
    ocean.place_ship(spec.letter, cells)

    hits_taken = _as_int(item.get("hits_taken"), "hits_taken")
    sunk = item.get("sunk")
    if not isinstance(sunk, bool):
        raise ValueError("Snapshot ship sunk flag must be a boolean.")
    if hits_taken < 0 or hits_taken > spec.length:
        raise ValueError(f"Snapshot ship {spec.letter} hits out of range.")
    if sunk != (hits_taken == spec.length):
        raise ValueError(f"Snapshot ship {spec.letter} sunk flag disagrees with hits.")
    return Ship(spec=spec, cells=cells, hits_taken=hits_taken, sunk=sunk)


def _encode_visible_row(target: TargetGrid, row: int) -> str:
    chars: list[str] = []
    for col in range(target.size):
        cell = target.cell_at(Coord(row, col))
        if cell.kind is CellKind.SUNK and cell.ship_id:
            chars.append(cell.ship_id)
        else:
            chars.append(_VISIBLE_CODES[cell.kind])
    return "".join(chars)


def _decode_visible_row(target: TargetGrid, row: int, raw_row: object, size: int) -> None:
    if not isinstance(raw_row, str) or len(raw_row) != size:
        raise ValueError("Snapshot visible row has the wrong width.")
    kinds = {code: kind for kind, code in _VISIBLE_CODES.items()}
    for col, char in enumerate(raw_row):
        coord = Coord(row, col)
        if char in kinds:
            target.set_cell(coord, Cell(kinds[char]))
        elif char.isalpha():
            target.set_cell(coord, Cell(CellKind.SUNK, char))
        else:
            raise ValueError(f"Snapshot visible cell {char!r} is not recognized.")


def _check_visible(target: TargetGrid, ocean: OceanGrid, fleet: Fleet) -> None:
    """Require the visible grid to agree with hidden struck cells and the fleet."""
    for row in range(target.size):
        for col in range(target.size):
            coord = Coord(row, col)
            shown = target.cell_at(coord)
            hidden = ocean.cell_at(coord)
            if hidden.ship_id is None:
                if shown.kind not in (CellKind.EMPTY, CellKind.MISS):
                    raise ValueError(f"Snapshot visible cell {coord} shows a ship over empty water.")
                continue
            ship = fleet.by_letter(hidden.ship_id)
            if ship is not None and ship.sunk:
                expected = Cell(CellKind.SUNK, ship.letter)
            elif hidden.kind is CellKind.HIT:
                expected = Cell(CellKind.HIT)
            else:
                expected = Cell(CellKind.EMPTY)
            if shown != expected:
                raise ValueError(f"Snapshot visible cell {coord} disagrees with ship {hidden.ship_id}.")


def _decode_coord(raw: object, size: int) -> Coord:
    if not isinstance(raw, list) or len(raw) != 2:
        raise ValueError("Snapshot coordinate must be a 2-item list.")
    row, col = _as_int(raw[0], "row"), _as_int(raw[1], "col")
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError("Snapshot coordinate out of bounds.")
    return Coord(row=row, col=col)


def _as_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Snapshot {name} must be an integer.")
    return value
