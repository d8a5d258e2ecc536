"""Foxes and rabbits: a grid predator-prey simulation."""

from foxes_rabbits.animals import Animal, Fox, Rabbit
from foxes_rabbits.exceptions import (
    ConfigurationError,
    OccupiedCellError,
    OutOfBoundsError,
    SimulationError,
    UnknownSpeciesError,
)
from foxes_rabbits.field import Field
from foxes_rabbits.location import Location
from foxes_rabbits.simulator import Simulator
from foxes_rabbits.species import FOX, RABBIT, SPECIES, Species, create_animal
from foxes_rabbits.view import HeadlessView, TextView, Viewer

__version__ = "0.1.0"

__all__ = [
    "Animal",
    "ConfigurationError",
    "FOX",
    "Field",
    "Fox",
    "HeadlessView",
    "Location",
    "OccupiedCellError",
    "OutOfBoundsError",
    "RABBIT",
    "Rabbit",
    "SPECIES",
    "SimulationError",
    "Simulator",
    "Species",
    "TextView",
    "UnknownSpeciesError",
    "Viewer",
    "create_animal",
]
