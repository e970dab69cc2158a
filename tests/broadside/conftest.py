from __future__ import annotations

import random

import pytest

from broadside.game.core.fleet import build_fleet
from broadside.game.core.models import Coord, Orientation, cells_for_placement
from broadside.game.core.rules import GameSession, new_session, resume_game
from broadside.game.saves.repository import SaveRepository
from broadside.game.saves.service import SaveService
from broadside.game.scores.repository import ScoreRepository
from broadside.game.scores.service import ScoreService

FIXED_LAYOUT: dict[str, tuple[Coord, Orientation]] = {
    "S": (Coord(0, 0), Orientation.HORIZONTAL),
    "A": (Coord(2, 0), Orientation.HORIZONTAL),
    "V": (Coord(4, 0), Orientation.HORIZONTAL),
    "E": (Coord(6, 0), Orientation.HORIZONTAL),
    "D": (Coord(8, 0), Orientation.VERTICAL),
}


def make_fixed_session() -> GameSession:
    session = new_session()
    fleet = build_fleet()
    for ship in fleet.ships:
        start, orientation = FIXED_LAYOUT[ship.letter]
        cells = cells_for_placement(start, orientation, ship.length)
        session.ocean.place_ship(ship.letter, cells)
        ship.cells = cells
    session.fleet = fleet
    return resume_game(session)


@pytest.fixture
def fixed_session() -> GameSession:
    return make_fixed_session()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def save_service(tmp_path) -> SaveService:
    return SaveService(SaveRepository(tmp_path / "saves" / "session.json"))


@pytest.fixture
def score_service(tmp_path) -> ScoreService:
    return ScoreService(ScoreRepository(tmp_path / "scores" / "topTenScores.txt"))
