"""
view.py

Viewers consume ``(step, field)`` snapshots from the simulator and decide
whether the run is still worth continuing. They must never mutate the
field.
"""

from __future__ import annotations

from typing import Dict, List, Protocol, Sequence, Tuple

import pandas as pd

from foxes_rabbits.config import REPORT_EVERY
from foxes_rabbits.field import Field
from foxes_rabbits.species import SPECIES, Species
from foxes_rabbits.stats import census, is_viable


class Viewer(Protocol):
    def show_status(self, step: int, field: Field) -> None: ...

    def is_viable(self, field: Field) -> bool: ...


class HeadlessView:
    """Records a census per snapshot; no output."""

    def __init__(self, registry: Sequence[Species] = SPECIES, min_species: int = 2):
        self.registry = tuple(registry)
        self.min_species = min_species
        self.colors: Dict[str, Tuple[int, int, int]] = {}
        self.history: List[Tuple[int, Dict[str, int]]] = []

    def set_color(self, tag: str, color: Tuple[int, int, int]) -> None:
        self.colors[tag] = color

    def show_status(self, step: int, field: Field) -> None:
        # A reset starts a new run.
        if step == 0:
            self.history.clear()
        self.history.append((step, census(field, self.registry)))

    def is_viable(self, field: Field) -> bool:
        return is_viable(census(field, self.registry), self.min_species)

    def latest(self) -> Dict[str, int]:
        return self.history[-1][1] if self.history else {}

    def to_frame(self) -> pd.DataFrame:
        """History as a DataFrame: ``step`` plus one count column per species."""
        columns = ["step"] + [sp.tag for sp in self.registry]
        rows = [{"step": step, **counts} for step, counts in self.history]
        return pd.DataFrame(rows, columns=columns)


class TextView(HeadlessView):
    """Prints a population line every ``report_every`` steps."""

    def __init__(
        self,
        registry: Sequence[Species] = SPECIES,
        min_species: int = 2,
        report_every: int = REPORT_EVERY,
    ):
        super().__init__(registry, min_species)
        self.report_every = max(1, report_every)

    def show_status(self, step: int, field: Field) -> None:
        super().show_status(step, field)
        if step % self.report_every == 0:
            print(format_report(step, self.latest()))


def format_report(step: int, counts: Dict[str, int]) -> str:
    pops = " ".join(f"{tag}={n:5d}" for tag, n in counts.items())
    return f"t={step:5d} {pops}"
