"""Session state machine: start, fire, quit and resume."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from broadside.game.core.board import OceanGrid, TargetGrid
from broadside.game.core.coords import decode, encode_coord
from broadside.game.core.errors import PlacementExhaustedError, SessionStateError
from broadside.game.core.fleet import Fleet, build_fleet, place_fleet
from broadside.game.core.models import (
    DEFAULT_PLACEMENT_ATTEMPTS,
    FLEET_SPECS,
    GRID_SIZE,
    Coord,
    SessionState,
    Ship,
    ShipSpec,
    ShotOutcome,
    ShotResult,
)
from broadside.game.core.shot_resolution import resolve_shot

logger = logging.getLogger(__name__)

_COUNTED_OUTCOMES = frozenset({ShotOutcome.MISS, ShotOutcome.HIT, ShotOutcome.SUNK})


@dataclass(slots=True)
class GameSession:
    """Runtime game session state."""

    size: int = GRID_SIZE
    fleet: Fleet = field(default_factory=Fleet)
    ocean: OceanGrid = field(default_factory=OceanGrid)
    target: TargetGrid = field(default_factory=TargetGrid)
    shots_fired: int = 0
    state: SessionState = SessionState.NOT_STARTED
    last_shot: Coord | None = None
    score: int | None = None

    @property
    def ships_remaining(self) -> int:
        return self.fleet.ships_remaining

    @property
    def in_progress(self) -> bool:
        return self.state is SessionState.IN_PROGRESS


@dataclass(frozen=True, slots=True)
class FireReport:
    """Outcome of one player turn."""

    result: ShotResult
    shot_counted: bool
    shots_fired: int
    won: bool = False
    score: int | None = None
    perfect: bool = False

    @property
    def outcome(self) -> ShotOutcome:
        return self.result.outcome

    @property
    def ship(self) -> Ship | None:
        return self.result.ship


@dataclass(frozen=True, slots=True)
class ShipStatus:
    """Read-only fleet status row for presentation."""

    letter: str
    name: str
    length: int
    hits_taken: int
    sunk: bool


def new_session(size: int = GRID_SIZE) -> GameSession:
    """Create a session that has not started yet."""
    return GameSession(size=size, ocean=OceanGrid(size=size), target=TargetGrid(size=size))


def start_game(
    session: GameSession,
    rng: random.Random,
    *,
    specs: tuple[ShipSpec, ...] = FLEET_SPECS,
    max_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
) -> GameSession:
    """Reset the session and hide a freshly placed fleet.

    Raises ``PlacementExhaustedError`` if any ship could not be placed; the
    session is then left NOT_STARTED.
    """
    session.ocean.clear()
    session.target.clear()
    session.shots_fired = 0
    session.last_shot = None
    session.score = None
    session.state = SessionState.NOT_STARTED

    report = place_fleet(session.ocean, rng, specs=specs, max_attempts=max_attempts)
    if not report.complete:
        session.ocean.clear()
        session.fleet = build_fleet(specs)
        raise PlacementExhaustedError(report.unplaced)

    session.fleet = report.fleet
    session.state = SessionState.IN_PROGRESS
    logger.info("game_started ships=%d grid_size=%d", len(session.fleet.ships), session.size)
    return session


def fire(session: GameSession, coord: Coord) -> FireReport:
    """Fire one shot at an in-bounds coordinate."""
    _require_in_progress(session, "fire")
    if not session.ocean.in_bounds(coord):
        raise ValueError(f"Coordinate {coord} is outside the grid.")
    session.last_shot = coord

    # Cells already resolved on the visible grid never consume a shot.
    if session.target.already_fired(coord):
        visible = session.target.cell_at(coord)
        ship = session.fleet.by_letter(visible.ship_id) if visible.ship_id else None
        return FireReport(
            result=ShotResult(ShotOutcome.ALREADY_PROCESSED, coord, ship),
            shot_counted=False,
            shots_fired=session.shots_fired,
        )

    result = resolve_shot(session.ocean, session.target, session.fleet, coord)
    if result.outcome not in _COUNTED_OUTCOMES:
        if result.outcome is ShotOutcome.INTERNAL_ERROR:
            logger.error("turn_aborted target=%s detail=%s", encode_coord(coord), result.detail)
        return FireReport(result=result, shot_counted=False, shots_fired=session.shots_fired)

    session.shots_fired += 1
    if result.outcome is ShotOutcome.MISS:
        session.target.mark_miss(coord)
    elif result.outcome is ShotOutcome.HIT:
        session.target.mark_hit(coord)
    elif result.ship is not None:
        session.target.reveal(result.ship.letter, result.ship.cells)

    if not session.fleet.all_sunk():
        return FireReport(result=result, shot_counted=True, shots_fired=session.shots_fired)

    session.state = SessionState.WON
    session.score = session.shots_fired
    perfect = is_perfect_game(session.shots_fired, tuple(ship.spec for ship in session.fleet.ships))
    logger.info("game_won shots=%d perfect=%s", session.shots_fired, perfect)
    return FireReport(
        result=result,
        shot_counted=True,
        shots_fired=session.shots_fired,
        won=True,
        score=session.score,
        perfect=perfect,
    )


def fire_at(session: GameSession, text: str) -> FireReport:
    """Decode player text and fire; parse errors propagate unchanged."""
    _require_in_progress(session, "fire")
    return fire(session, decode(text, size=session.size))


def quit_game(session: GameSession) -> None:
    """Abandon an in-progress game without touching counters."""
    _require_in_progress(session, "quit")
    session.state = SessionState.ABANDONED
    logger.info("game_abandoned shots=%d remaining=%d", session.shots_fired, session.ships_remaining)


def resume_game(session: GameSession) -> GameSession:
    """Mark a session restored from persistence as playable again."""
    session.state = SessionState.IN_PROGRESS
    session.score = None
    return session


def fleet_status(session: GameSession) -> list[ShipStatus]:
    """Return per-ship status rows in fleet order."""
    return [
        ShipStatus(
            letter=ship.letter,
            name=ship.name,
            length=ship.length,
            hits_taken=ship.hits_taken,
            sunk=ship.sunk,
        )
        for ship in session.fleet.ships
    ]


def is_perfect_game(shots: int, specs: tuple[ShipSpec, ...] = FLEET_SPECS) -> bool:
    """Return whether a win used exactly one shot per ship segment."""
    return shots == sum(spec.length for spec in specs)


def _require_in_progress(session: GameSession, action: str) -> None:
    if session.state is not SessionState.IN_PROGRESS:
        raise SessionStateError(f"Cannot {action} while game is {session.state.value}.")
