"""Foxes-and-rabbits exception hierarchy.

Everything raised here is an invariant violation: the field mapping has
drifted away from agent state and continuing would corrupt the run.
Starvation, old age and overcrowding are not errors, they just kill the
animal.
"""


class SimulationError(Exception):
    """Root of all simulation exceptions."""


class OutOfBoundsError(SimulationError, IndexError):
    """A location outside the grid was handed to the field."""


class OccupiedCellError(SimulationError):
    """Tried to place an animal into a cell that is not empty."""


class UnknownSpeciesError(SimulationError, KeyError):
    """The factory was asked for a species tag that is not registered."""


class ConfigurationError(SimulationError, ValueError):
    """Invalid species registry or parameters."""
