from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A (row, col) cell coordinate. Equal and hashable by value.

    Components are non-negative; the upper bound depends on the field and
    is checked there.
    """

    row: int
    col: int

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"location components must be non-negative, got ({self.row}, {self.col})")

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
