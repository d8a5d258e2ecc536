"""
field.py

Rectangular grid of cells, each holding at most one animal.

The grid is a numpy object array indexed [row, col]. All neighbourhood
queries (Moore neighbourhood, up to eight cells) come back shuffled with
the simulator's generator so movement and births carry no directional
bias. With ``torus=True`` the edges wrap around, the way the NetLogo
style models in this repo do.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable, Iterator, List, Optional

import numpy as np

from foxes_rabbits.exceptions import OccupiedCellError, OutOfBoundsError
from foxes_rabbits.location import Location

if TYPE_CHECKING:
    from foxes_rabbits.animals import Animal


class Field:
    def __init__(self, depth: int, width: int, rng: random.Random, torus: bool = False):
        self.depth = depth
        self.width = width
        self.rng = rng
        self.torus = torus
        self._cells = np.full((depth, width), None, dtype=object)

    # ---- cell access ----

    def contains(self, location: Location) -> bool:
        return 0 <= location.row < self.depth and 0 <= location.col < self.width

    def _check(self, location: Location) -> None:
        if not self.contains(location):
            raise OutOfBoundsError(
                f"location {location} outside {self.depth}x{self.width} field"
            )

    def clear(self, location: Optional[Location] = None) -> None:
        """Empty one cell, or the whole field when no location is given."""
        if location is None:
            self._cells[...] = None
            return
        self._check(location)
        self._cells[location.row, location.col] = None

    def place(self, animal: Animal, location: Location) -> None:
        self._check(location)
        occupant = self._cells[location.row, location.col]
        if occupant is not None:
            raise OccupiedCellError(f"cell {location} already holds {occupant!r}")
        self._cells[location.row, location.col] = animal

    def at(self, location: Location) -> Optional[Animal]:
        self._check(location)
        return self._cells[location.row, location.col]

    def animals(self) -> Iterator[Animal]:
        """Occupants in row-major order."""
        for animal in self._cells.flat:
            if animal is not None:
                yield animal

    def __len__(self) -> int:
        return sum(1 for _ in self.animals())

    # ---- neighbourhood queries ----

    def adjacent_locations(self, location: Location) -> List[Location]:
        """Moore neighbours of ``location`` inside the grid, shuffled."""
        self._check(location)
        out: List[Location] = []
        for dr in (-1, 0, 1):
            row = location.row + dr
            if self.torus:
                row %= self.depth
            elif not 0 <= row < self.depth:
                continue
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                col = location.col + dc
                if self.torus:
                    col %= self.width
                elif not 0 <= col < self.width:
                    continue
                neighbour = Location(row, col)
                # Small wrapped grids fold neighbours onto each other or onto the cell itself.
                if neighbour != location and neighbour not in out:
                    out.append(neighbour)
        self.rng.shuffle(out)
        return out

    def free_adjacent_locations(self, location: Location) -> List[Location]:
        return [loc for loc in self.adjacent_locations(location) if self.at(loc) is None]

    def free_adjacent_location(self, location: Location) -> Optional[Location]:
        for loc in self.adjacent_locations(location):
            if self.at(loc) is None:
                return loc
        return None

    def adjacent_animals(
        self,
        location: Location,
        predicate: Callable[[Animal], bool] = lambda animal: True,
    ) -> List[Animal]:
        out: List[Animal] = []
        for loc in self.adjacent_locations(location):
            animal = self.at(loc)
            if animal is not None and predicate(animal):
                out.append(animal)
        return out
