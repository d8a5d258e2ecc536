"""Builders for hand-made scenarios on an empty field."""

import dataclasses

from foxes_rabbits.location import Location
from foxes_rabbits.simulator import Simulator
from foxes_rabbits.species import SPECIES, create_animal
from foxes_rabbits.view import HeadlessView


def unseeded_registry(registry=SPECIES, **overrides):
    """Registry whose species never spawn at reset; ``overrides`` maps tag -> field changes."""
    return tuple(
        dataclasses.replace(sp, spawn_probability=0.0, **overrides.get(sp.tag, {}))
        for sp in registry
    )


def empty_simulator(depth, width, seed=42, view=None, **overrides):
    """A simulator on an empty field, ready for hand-placed animals."""
    registry = unseeded_registry(SPECIES, **overrides)
    view = view if view is not None else HeadlessView(registry, min_species=0)
    return Simulator(depth, width, view=view, registry=registry, seed=seed)


def place(sim, tag, row, col, age=0):
    animal = create_animal(tag, False, sim.field, Location(row, col), sim.rng, sim.registry)
    animal.age = age
    sim.animals.append(animal)
    return animal


def check_invariants(sim):
    field = sim.field
    living = [a for a in sim.animals if a.alive]
    # position consistency, both directions
    for animal in living:
        assert field.at(animal.location) is animal
    for animal in field.animals():
        assert field.at(animal.location) is animal
        assert animal.alive
    # at most one per cell
    locations = [a.location for a in living]
    assert len(locations) == len(set(locations))
    # roster and field agree
    assert {id(a) for a in field.animals()} == {id(a) for a in living}
    assert len(living) <= field.depth * field.width
