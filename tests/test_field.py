import random

import pytest

from foxes_rabbits.exceptions import OccupiedCellError, OutOfBoundsError
from foxes_rabbits.field import Field
from foxes_rabbits.location import Location


class Dummy:
    def __init__(self, alive=True):
        self.alive = alive


def test_place_and_at(field3):
    a = Dummy()
    field3.place(a, Location(1, 2))
    assert field3.at(Location(1, 2)) is a
    assert field3.at(Location(0, 0)) is None
    assert len(field3) == 1


def test_place_into_occupied_cell_fails(field3):
    field3.place(Dummy(), Location(0, 0))
    with pytest.raises(OccupiedCellError):
        field3.place(Dummy(), Location(0, 0))


@pytest.mark.parametrize("loc", [Location(3, 0), Location(0, 3), Location(3, 3), Location(7, 1)])
def test_out_of_bounds_is_rejected(field3, loc):
    with pytest.raises(OutOfBoundsError):
        field3.place(Dummy(), loc)
    with pytest.raises(OutOfBoundsError):
        field3.at(loc)
    with pytest.raises(IndexError):
        field3.clear(loc)


def test_clear_cell_and_clear_all(field3):
    field3.place(Dummy(), Location(0, 0))
    field3.place(Dummy(), Location(2, 2))
    field3.clear(Location(0, 0))
    field3.clear(Location(0, 0))  # already empty
    assert field3.at(Location(0, 0)) is None
    assert len(field3) == 1
    field3.clear()
    assert len(field3) == 0
    assert list(field3.animals()) == []


def test_adjacent_locations_bounded(field3):
    center = field3.adjacent_locations(Location(1, 1))
    assert len(center) == 8
    assert Location(1, 1) not in center

    corner = field3.adjacent_locations(Location(0, 0))
    assert set(corner) == {Location(0, 1), Location(1, 0), Location(1, 1)}

    edge = field3.adjacent_locations(Location(0, 1))
    assert len(edge) == 5


def test_adjacent_locations_are_shuffled(field3):
    firsts = {field3.adjacent_locations(Location(1, 1))[0] for _ in range(50)}
    assert len(firsts) > 1


def test_single_cell_has_no_neighbours():
    field = Field(1, 1, random.Random(0))
    assert field.adjacent_locations(Location(0, 0)) == []
    assert field.free_adjacent_location(Location(0, 0)) is None


def test_torus_wraps_edges():
    field = Field(4, 5, random.Random(0), torus=True)
    corner = set(field.adjacent_locations(Location(0, 0)))
    assert len(corner) == 8
    assert Location(3, 4) in corner
    assert Location(0, 4) in corner


def test_torus_small_grid_deduplicates():
    field = Field(2, 2, random.Random(0), torus=True)
    neighbours = field.adjacent_locations(Location(0, 0))
    assert sorted(neighbours, key=lambda loc: (loc.row, loc.col)) == [
        Location(0, 1), Location(1, 0), Location(1, 1)
    ]
    assert Field(1, 1, random.Random(0), torus=True).adjacent_locations(Location(0, 0)) == []


def test_free_adjacent_location(field3):
    for loc in field3.adjacent_locations(Location(1, 1)):
        if loc != Location(2, 2):
            field3.place(Dummy(), loc)
    assert field3.free_adjacent_location(Location(1, 1)) == Location(2, 2)
    assert field3.free_adjacent_locations(Location(1, 1)) == [Location(2, 2)]
    field3.place(Dummy(), Location(2, 2))
    assert field3.free_adjacent_location(Location(1, 1)) is None


def test_adjacent_animals_with_predicate(field3):
    live, dead = Dummy(), Dummy(alive=False)
    field3.place(live, Location(0, 0))
    field3.place(dead, Location(2, 2))
    field3.place(Dummy(), Location(1, 1))  # the centre itself is not a neighbour
    assert set(map(id, field3.adjacent_animals(Location(1, 1)))) == {id(live), id(dead)}
    assert field3.adjacent_animals(Location(1, 1), lambda a: a.alive) == [live]


def test_animals_iterates_row_major(field3):
    a, b, c = Dummy(), Dummy(), Dummy()
    field3.place(c, Location(2, 0))
    field3.place(a, Location(0, 1))
    field3.place(b, Location(1, 2))
    assert list(field3.animals()) == [a, b, c]
