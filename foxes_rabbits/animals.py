"""
animals.py

Agents living on the field.

Every animal carries the same common state (species record, location,
age, alive flag, a handle on the field and the shared generator). Foxes
add a food level. Behaviour is looked up on the species record, so
``animal.act(newborns)`` dispatches to ``rabbit_act`` or ``fox_act``;
the aging / breeding / birth sub-protocols below are shared by all
species.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, List, Optional

from foxes_rabbits.field import Field
from foxes_rabbits.location import Location

if TYPE_CHECKING:
    from foxes_rabbits.species import Species


class Animal:
    def __init__(
        self,
        species: Species,
        random_age: bool,
        field: Field,
        location: Location,
        rng: Optional[random.Random] = None,
    ):
        self.species = species
        self.field = field
        self.rng = rng if rng is not None else field.rng
        self.age = self.rng.randrange(species.max_age) if random_age else 0
        self.alive = True
        self.location = location
        field.place(self, location)

    def __repr__(self) -> str:
        state = "alive" if self.alive else "dead"
        return f"{type(self).__name__}(age={self.age}, location={self.location}, {state})"

    def is_alive(self) -> bool:
        return self.alive

    def set_dead(self) -> None:
        """Mark dead and release the cell. Calling it again does nothing."""
        if not self.alive:
            return
        self.alive = False
        if self.field.at(self.location) is self:
            self.field.clear(self.location)

    def set_location(self, new_location: Location) -> None:
        if new_location == self.location:
            return
        # Place first: an occupied target must leave the animal where it was.
        self.field.place(self, new_location)
        if self.field.at(self.location) is self:
            self.field.clear(self.location)
        self.location = new_location

    def act(self, newborns: List[Animal]) -> None:
        self.species.act(self, newborns)


class Rabbit(Animal):
    pass


class Fox(Animal):
    def __init__(
        self,
        species: Species,
        random_age: bool,
        field: Field,
        location: Location,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(species, random_age, field, location, rng)
        self.food_level = self.rng.randrange(species.food_value)

    def __repr__(self) -> str:
        state = "alive" if self.alive else "dead"
        return f"Fox(age={self.age}, food={self.food_level}, location={self.location}, {state})"


# ============================================================
# SHARED SUB-PROTOCOLS
# ============================================================

def increment_age(animal: Animal) -> None:
    animal.age += 1
    if animal.age > animal.species.max_age:
        animal.set_dead()


def breed(animal: Animal) -> int:
    """Litter size for this step; zero when too young or unlucky."""
    sp = animal.species
    if animal.age < sp.breeding_age:
        return 0
    if animal.rng.random() < sp.breeding_probability:
        return animal.rng.randint(1, sp.max_litter_size)
    return 0


def give_birth(animal: Animal, newborns: List[Animal]) -> None:
    births = breed(animal)
    for _ in range(births):
        # Each birth takes a slot, so look again every time.
        location = animal.field.free_adjacent_location(animal.location)
        if location is None:
            break
        newborns.append(animal.species.create(False, animal.field, location, animal.rng))


def move_or_die(animal: Animal, target: Optional[Location]) -> None:
    if target is not None:
        animal.set_location(target)
    else:
        # Overcrowding.
        animal.set_dead()


# ============================================================
# SPECIES BEHAVIOUR
# ============================================================

def rabbit_act(rabbit: Animal, newborns: List[Animal]) -> None:
    """Run around, sometimes breed, die of old age or overcrowding."""
    increment_age(rabbit)
    if not rabbit.alive:
        return
    give_birth(rabbit, newborns)
    move_or_die(rabbit, rabbit.field.free_adjacent_location(rabbit.location))


def increment_hunger(fox: Fox) -> None:
    fox.food_level -= 1


def find_food(fox: Fox) -> Optional[Location]:
    """Eat the first living prey next to the fox and return its cell."""
    prey_tags = fox.species.prey
    candidates = fox.field.adjacent_animals(
        fox.location, lambda other: other.alive and other.species.tag in prey_tags
    )
    if not candidates:
        return None
    victim = candidates[0]
    target = victim.location
    victim.set_dead()
    fox.food_level = fox.species.food_value
    return target


def fox_act(fox: Fox, newborns: List[Animal]) -> None:
    """Hunt rabbits, breed when fed, starve or die of old age.

    A fox whose food level reaches zero gets one last hunt this step; it
    starves only if that hunt fails, and it never breeds while starving.
    """
    increment_age(fox)
    increment_hunger(fox)
    if not fox.alive:
        return
    if fox.food_level > 0:
        give_birth(fox, newborns)
    target = find_food(fox)
    if fox.food_level <= 0:
        fox.set_dead()
        return
    if target is None:
        target = fox.field.free_adjacent_location(fox.location)
    move_or_die(fox, target)
