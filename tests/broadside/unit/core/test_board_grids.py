import pytest

from broadside.game.core.board import OceanGrid, TargetGrid
from broadside.game.core.models import Cell, CellKind, Coord, Orientation, cells_for_placement


def test_ocean_can_place_rejects_overlap_and_out_of_bounds() -> None:
    ocean = OceanGrid()
    carrier = cells_for_placement(Coord(0, 0), Orientation.HORIZONTAL, 5)
    assert ocean.can_place(carrier)
    ocean.place_ship("A", carrier)
    assert not ocean.can_place(cells_for_placement(Coord(0, 4), Orientation.VERTICAL, 2))
    assert not ocean.can_place(cells_for_placement(Coord(0, 8), Orientation.HORIZONTAL, 3))
    assert not ocean.can_place(cells_for_placement(Coord(9, 0), Orientation.VERTICAL, 2))
    # Adjacent ships are allowed.
    assert ocean.can_place(cells_for_placement(Coord(1, 0), Orientation.HORIZONTAL, 5))


def test_ocean_place_ship_raises_on_invalid() -> None:
    ocean = OceanGrid()
    with pytest.raises(ValueError):
        ocean.place_ship("D", cells_for_placement(Coord(0, 9), Orientation.HORIZONTAL, 2))


def test_ocean_cell_variants() -> None:
    ocean = OceanGrid()
    ocean.place_ship("D", [Coord(3, 3), Coord(3, 4)])
    assert ocean.cell_at(Coord(0, 0)) == Cell(CellKind.EMPTY)
    assert ocean.cell_at(Coord(3, 3)) == Cell(CellKind.INTACT, "D")
    ocean.mark_struck(Coord(3, 3))
    assert ocean.cell_at(Coord(3, 3)) == Cell(CellKind.HIT, "D")
    assert ocean.occupied_count() == 2
    assert ocean.occupied_count("D") == 2
    ocean.clear()
    assert ocean.occupied_count() == 0
    assert ocean.cell_at(Coord(3, 3)) == Cell(CellKind.EMPTY)


def test_ocean_custom_size_shapes_arrays() -> None:
    ocean = OceanGrid(size=4)
    assert ocean.occupants.shape == (4, 4)
    assert ocean.struck.shape == (4, 4)
    assert not ocean.in_bounds(Coord(4, 0))


def test_target_marks_and_reveal() -> None:
    target = TargetGrid()
    assert not target.already_fired(Coord(0, 0))
    target.mark_miss(Coord(0, 0))
    target.mark_hit(Coord(1, 1))
    target.reveal("E", [Coord(2, 2), Coord(2, 3)])
    assert target.cell_at(Coord(0, 0)) == Cell(CellKind.MISS)
    assert target.cell_at(Coord(1, 1)) == Cell(CellKind.HIT)
    assert target.cell_at(Coord(2, 3)) == Cell(CellKind.SUNK, "E")
    assert target.already_fired(Coord(1, 1))
    target.clear()
    assert target.cell_at(Coord(2, 3)) == Cell(CellKind.EMPTY)


def test_target_set_cell_rejects_invalid_variants() -> None:
    target = TargetGrid()
    with pytest.raises(ValueError):
        target.set_cell(Coord(0, 0), Cell(CellKind.INTACT, "S"))
    with pytest.raises(ValueError):
        target.set_cell(Coord(0, 0), Cell(CellKind.SUNK))
    target.set_cell(Coord(0, 0), Cell(CellKind.SUNK, "S"))
    assert target.cell_at(Coord(0, 0)) == Cell(CellKind.SUNK, "S")
