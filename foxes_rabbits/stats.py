"""
stats.py

Counting and rendering helpers over a field: per-species census, a
species-code grid, and an RGB frame for the image viewers.
"""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np

from foxes_rabbits.field import Field
from foxes_rabbits.species import Species


def census(field: Field, registry: Sequence[Species]) -> Dict[str, int]:
    """Living animals per species tag; extinct species report zero."""
    counts = {sp.tag: 0 for sp in registry}
    for animal in field.animals():
        tag = animal.species.tag
        counts[tag] = counts.get(tag, 0) + 1
    return counts


def species_grid(field: Field, registry: Sequence[Species]) -> np.ndarray:
    """(depth, width) int8 codes: 0 empty, i + 1 for registry entry i."""
    codes = {sp.tag: i + 1 for i, sp in enumerate(registry)}
    grid = np.zeros((field.depth, field.width), dtype=np.int8)
    for animal in field.animals():
        grid[animal.location.row, animal.location.col] = codes.get(animal.species.tag, 0)
    return grid


def as_rgb(field: Field, registry: Sequence[Species], background=(255, 255, 255)) -> np.ndarray:
    """Return a (depth, width, 3) float array in [0, 1] colored by species."""
    palette = np.array([background] + [sp.color for sp in registry], dtype=np.float32) / 255.0
    return palette[species_grid(field, registry)]


def is_viable(counts: Dict[str, int], min_species: int = 2) -> bool:
    """True while at least ``min_species`` species still have members."""
    return sum(1 for n in counts.values() if n > 0) >= min_species
