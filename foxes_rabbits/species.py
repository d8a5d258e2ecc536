"""
species.py

Species registry and animal factory.

The registry is an ordered tuple of ``Species`` records. Its order
defines the cumulative-probability partition used when seeding the
field: a cell draw ``u`` lands on the first species whose running sum of
spawn probabilities reaches ``u``, or leaves the cell empty past the
last one. Adding a species means writing its behaviour in ``animals.py``
and adding one record here; the simulator and field do not change.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from foxes_rabbits.animals import Animal, Fox, Rabbit, fox_act, rabbit_act
from foxes_rabbits.exceptions import ConfigurationError, UnknownSpeciesError
from foxes_rabbits.field import Field
from foxes_rabbits.location import Location


# ============================================================
# CONFIG
# ============================================================

# Rabbits
RABBIT_SPAWN_PROBABILITY = 0.08
RABBIT_BREEDING_AGE = 5
RABBIT_MAX_AGE = 40
RABBIT_BREEDING_PROBABILITY = 0.12
RABBIT_MAX_LITTER_SIZE = 4
RABBIT_COLOR = (255, 200, 0)  # orange

# Foxes
FOX_SPAWN_PROBABILITY = 0.02
FOX_BREEDING_AGE = 15
FOX_MAX_AGE = 150
FOX_BREEDING_PROBABILITY = 0.08
FOX_MAX_LITTER_SIZE = 2
# Steps a fox can go on one rabbit before it has to eat again.
RABBIT_FOOD_VALUE = 9
FOX_COLOR = (0, 0, 255)  # blue


# ============================================================
# DATA STRUCTURES
# ============================================================

Constructor = Callable[["Species", bool, Field, Location, Optional[random.Random]], Animal]
Behaviour = Callable[[Animal, List[Animal]], None]


@dataclass(frozen=True)
class Species:
    tag: str
    color: Tuple[int, int, int]
    spawn_probability: float
    breeding_age: int
    max_age: int
    breeding_probability: float
    max_litter_size: int
    constructor: Constructor
    behaviour: Behaviour
    food_value: int = 0
    prey: Tuple[str, ...] = ()

    def create(
        self,
        random_age: bool,
        field: Field,
        location: Location,
        rng: Optional[random.Random] = None,
    ) -> Animal:
        """Build an animal of this species and place it at ``location``."""
        return self.constructor(self, random_age, field, location, rng)

    def act(self, animal: Animal, newborns: List[Animal]) -> None:
        self.behaviour(animal, newborns)


RABBIT = Species(
    tag="rabbit",
    color=RABBIT_COLOR,
    spawn_probability=RABBIT_SPAWN_PROBABILITY,
    breeding_age=RABBIT_BREEDING_AGE,
    max_age=RABBIT_MAX_AGE,
    breeding_probability=RABBIT_BREEDING_PROBABILITY,
    max_litter_size=RABBIT_MAX_LITTER_SIZE,
    constructor=Rabbit,
    behaviour=rabbit_act,
)

FOX = Species(
    tag="fox",
    color=FOX_COLOR,
    spawn_probability=FOX_SPAWN_PROBABILITY,
    breeding_age=FOX_BREEDING_AGE,
    max_age=FOX_MAX_AGE,
    breeding_probability=FOX_BREEDING_PROBABILITY,
    max_litter_size=FOX_MAX_LITTER_SIZE,
    constructor=Fox,
    behaviour=fox_act,
    food_value=RABBIT_FOOD_VALUE,
    prey=("rabbit",),
)

SPECIES: Tuple[Species, ...] = (RABBIT, FOX)


# ============================================================
# REGISTRY / FACTORY
# ============================================================

def validate_registry(registry: Sequence[Species]) -> None:
    tags = [sp.tag for sp in registry]
    if len(set(tags)) != len(tags):
        raise ConfigurationError(f"duplicate species tags in registry: {tags}")

    total = 0.0
    for sp in registry:
        if sp.spawn_probability < 0.0:
            raise ConfigurationError(f"{sp.tag}: negative spawn probability {sp.spawn_probability}")
        if sp.max_age <= 0 or sp.max_litter_size <= 0 or sp.breeding_age < 0:
            raise ConfigurationError(f"{sp.tag}: ages and litter size must be positive")
        if sp.prey and sp.food_value <= 0:
            raise ConfigurationError(f"{sp.tag}: predators need a positive food value")
        total += sp.spawn_probability
    if total > 1.0:
        raise ConfigurationError(f"spawn probabilities sum to {total:.4f} > 1")


def lookup(tag: str, registry: Sequence[Species] = SPECIES) -> Species:
    for sp in registry:
        if sp.tag == tag:
            return sp
    raise UnknownSpeciesError(tag)


def create_animal(
    tag: str,
    random_age: bool,
    field: Field,
    location: Location,
    rng: Optional[random.Random] = None,
    registry: Sequence[Species] = SPECIES,
) -> Animal:
    """Factory: an animal of species ``tag`` placed at ``location``.

    Raises UnknownSpeciesError for unregistered tags and
    OccupiedCellError when the cell is taken.
    """
    return lookup(tag, registry).create(random_age, field, location, rng)


def pick_species(u: float, registry: Sequence[Species]) -> Optional[Species]:
    """Species whose seeding interval holds ``u``, or None for an empty cell."""
    cumulative = 0.0
    for sp in registry:
        cumulative += sp.spawn_probability
        if sp.spawn_probability > 0.0 and u <= cumulative:
            return sp
    return None
