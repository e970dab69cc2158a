from broadside.game.core.models import (
    FLEET_SPECS,
    TOTAL_SEGMENTS,
    Coord,
    Orientation,
    Ship,
    cells_for_placement,
    spec_by_letter,
)


def test_fleet_roster_order_and_lengths() -> None:
    assert [spec.letter for spec in FLEET_SPECS] == ["S", "A", "V", "E", "D"]
    assert [spec.length for spec in FLEET_SPECS] == [3, 5, 4, 3, 2]
    assert TOTAL_SEGMENTS == 17


def test_cells_for_placement_horizontal_and_vertical() -> None:
    assert cells_for_placement(Coord(1, 2), Orientation.HORIZONTAL, 3) == [
        Coord(1, 2),
        Coord(1, 3),
        Coord(1, 4),
    ]
    assert cells_for_placement(Coord(1, 2), Orientation.VERTICAL, 3) == [
        Coord(1, 2),
        Coord(2, 2),
        Coord(3, 2),
    ]


def test_ship_derives_identity_from_spec() -> None:
    spec = spec_by_letter("V")
    assert spec is not None
    ship = Ship(spec=spec)
    assert ship.letter == "V"
    assert ship.length == 4
    assert not ship.placed
    ship.cells = cells_for_placement(Coord(0, 0), Orientation.VERTICAL, 4)
    assert ship.placed


def test_spec_by_letter_unknown() -> None:
    assert spec_by_letter("Z") is None
