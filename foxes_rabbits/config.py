"""Run-level defaults and the parameter record the CLI fills in."""

from __future__ import annotations

from dataclasses import dataclass


# ============================================================
# CONFIG
# ============================================================

# Grid
DEFAULT_DEPTH = 80
DEFAULT_WIDTH = 120

# Runs
LONG_RUN_STEPS = 4000
REPORT_EVERY = 200

# Plotting
LIVE_GRID_EVERY = 1
LIVE_GRID_PAUSE = 0.001
LIVE_GRID_SHOW_CELL_LINES = False

VIEWS = ("headless", "text", "matplotlib", "pygame")


@dataclass
class Params:
    depth: int = DEFAULT_DEPTH
    width: int = DEFAULT_WIDTH
    steps: int | None = None  # None runs LONG_RUN_STEPS
    seed: int | None = None
    torus: bool = False
    delay_ms: int = 0
    view: str = "text"
    report_every: int = REPORT_EVERY
    history_csv: str | None = None
    plot: bool = False
