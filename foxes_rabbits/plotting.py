"""
plotting.py

matplotlib output: a live grid viewer and the population history plot.
"""

from __future__ import annotations

from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from foxes_rabbits.config import LIVE_GRID_EVERY, LIVE_GRID_PAUSE, LIVE_GRID_SHOW_CELL_LINES
from foxes_rabbits.field import Field
from foxes_rabbits.species import SPECIES, Species
from foxes_rabbits.stats import as_rgb
from foxes_rabbits.view import HeadlessView


class LiveGridView(HeadlessView):
    """Redraws the field every ``every`` steps. Closing the window ends the run."""

    def __init__(
        self,
        registry: Sequence[Species] = SPECIES,
        min_species: int = 2,
        every: int = LIVE_GRID_EVERY,
        pause: float = LIVE_GRID_PAUSE,
    ):
        super().__init__(registry, min_species)
        self.every = max(1, every)
        self.pause = pause
        self.fig = None
        self.img = None
        self.txt = None
        self.closed = False

    def _init_figure(self, field: Field) -> None:
        plt.ion()
        self.fig, ax = plt.subplots(figsize=(9.0, 6.4))
        self.img = ax.imshow(
            as_rgb(field, self.registry),
            interpolation="nearest",
            vmin=0.0,
            vmax=1.0,
        )
        if LIVE_GRID_SHOW_CELL_LINES:
            ax.set_xticks(np.arange(-0.5, field.width, 1), minor=True)
            ax.set_yticks(np.arange(-0.5, field.depth, 1), minor=True)
            ax.grid(which="minor", color="gray", alpha=0.10, linewidth=0.25)
        ax.set_xticks([])
        ax.set_yticks([])
        legend = ", ".join(f"{sp.tag}={_color_name(sp.color)}" for sp in self.registry)
        ax.set_title(f"Foxes and rabbits: {legend}")
        self.txt = ax.text(
            0.01,
            0.99,
            "",
            transform=ax.transAxes,
            ha="left",
            va="top",
            color="white",
            fontsize=9,
            bbox={"facecolor": "black", "alpha": 0.35, "edgecolor": "none"},
        )
        self.fig.tight_layout()
        plt.show(block=False)

    def show_status(self, step: int, field: Field) -> None:
        super().show_status(step, field)
        if self.closed or step % self.every != 0:
            return
        if self.fig is None:
            self._init_figure(field)
        elif not plt.fignum_exists(self.fig.number):
            self.closed = True
            return
        self.img.set_data(as_rgb(field, self.registry))
        pops = " | ".join(f"{tag}={n:5d}" for tag, n in self.latest().items())
        self.txt.set_text(f"Step: {step:5d} | {pops}")
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()
        plt.pause(self.pause)

    def is_viable(self, field: Field) -> bool:
        return not self.closed and super().is_viable(field)

    def close(self) -> None:
        if self.fig is not None:
            plt.ioff()
            plt.close(self.fig)
        self.closed = True


def _color_name(color) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


def plot_populations(history: pd.DataFrame, registry: Sequence[Species] = SPECIES) -> None:
    plt.figure()
    for sp in registry:
        if sp.tag in history:
            plt.plot(history["step"], history[sp.tag], label=sp.tag.capitalize(),
                     color=np.array(sp.color) / 255.0)
    plt.xlabel("Time step")
    plt.ylabel("Count")
    plt.title("Predator-prey dynamics (foxes and rabbits)")
    plt.legend()
    plt.grid(alpha=0.25)
    plt.show()
