"""
simulator.py

Owns the field, the roster of animals and the shared random generator,
and advances the world one step at a time.

Within a step animals act in roster order. An animal killed earlier in
the same step (eaten by a fox) is skipped, dead animals are swept from
the roster after the pass, and newborns join at the end so they first
act in the following step.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Dict, List, Optional, Sequence

from foxes_rabbits.animals import Animal
from foxes_rabbits.config import DEFAULT_DEPTH, DEFAULT_WIDTH, LONG_RUN_STEPS
from foxes_rabbits.field import Field
from foxes_rabbits.location import Location
from foxes_rabbits.species import SPECIES, Species, pick_species, validate_registry
from foxes_rabbits.stats import census
from foxes_rabbits.view import HeadlessView, Viewer

logger = logging.getLogger(__name__)


class Simulator:
    def __init__(
        self,
        depth: int = DEFAULT_DEPTH,
        width: int = DEFAULT_WIDTH,
        view: Optional[Viewer] = None,
        registry: Sequence[Species] = SPECIES,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        torus: bool = False,
        delay_ms: int = 0,
    ):
        if depth <= 0 or width <= 0:
            logger.warning(
                "The dimensions must be > zero (got %dx%d). Using default values %dx%d.",
                depth, width, DEFAULT_DEPTH, DEFAULT_WIDTH,
            )
            depth, width = DEFAULT_DEPTH, DEFAULT_WIDTH

        validate_registry(registry)
        self.registry = tuple(registry)
        self.seed = seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.delay_ms = delay_ms

        self.animals: List[Animal] = []
        self.field = Field(depth, width, self.rng, torus=torus)
        self.step = 0

        self.view = view if view is not None else HeadlessView(self.registry)
        set_color = getattr(self.view, "set_color", None)
        if set_color is not None:
            for sp in self.registry:
                set_color(sp.tag, sp.color)

        self.reset()

    def run_long_simulation(self) -> int:
        return self.simulate(LONG_RUN_STEPS)

    def simulate(self, num_steps: int) -> int:
        """Run up to ``num_steps`` steps, stopping once the view says the
        population is no longer viable. Returns the number of steps run."""
        done = 0
        while done < num_steps and self.view.is_viable(self.field):
            self.simulate_one_step()
            done += 1
            if self.delay_ms > 0:
                self.delay(self.delay_ms)
        return done

    def simulate_one_step(self) -> None:
        self.step += 1

        newborns: List[Animal] = []
        for animal in self.animals:
            if animal.alive:
                animal.act(newborns)
        # Sweep both the animals that died acting and those eaten by others.
        self.animals = [animal for animal in self.animals if animal.alive]
        self.animals.extend(newborns)

        logger.debug("step %d: %d animals, %d born", self.step, len(self.animals), len(newborns))
        self.view.show_status(self.step, self.field)

    def reset(self) -> None:
        self.step = 0
        if self.seed is not None:
            self.rng.seed(self.seed)
        self.animals.clear()
        self.field.clear()
        self.populate()
        self.view.show_status(self.step, self.field)

    def populate(self) -> None:
        """Seed every cell in row-major order from the registry partition."""
        for row in range(self.field.depth):
            for col in range(self.field.width):
                sp = pick_species(self.rng.random(), self.registry)
                if sp is not None:
                    self.animals.append(sp.create(True, self.field, Location(row, col), self.rng))

    def population(self) -> Dict[str, int]:
        return census(self.field, self.registry)

    @staticmethod
    def delay(millisec: int) -> None:
        time.sleep(millisec / 1000.0)
