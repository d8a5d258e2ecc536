"""
Foxes and rabbits on a grid.

Usage
-----
$ python -m foxes_rabbits                         # 80x120 field, 4000 steps, text report
$ python -m foxes_rabbits --depth 50 --width 50 --steps 500 --seed 42
$ python -m foxes_rabbits --view matplotlib       # live grid
$ python -m foxes_rabbits --view pygame --plot    # interactive window
$ python -m foxes_rabbits --view headless --history-csv history.csv --plot
"""

from __future__ import annotations

import argparse
import logging

from foxes_rabbits.config import (
    DEFAULT_DEPTH,
    DEFAULT_WIDTH,
    LONG_RUN_STEPS,
    REPORT_EVERY,
    VIEWS,
    Params,
)
from foxes_rabbits.simulator import Simulator
from foxes_rabbits.species import SPECIES
from foxes_rabbits.view import HeadlessView, TextView


def parse_args(argv=None) -> tuple[Params, bool]:
    ap = argparse.ArgumentParser(description="Predator-prey simulation of foxes and rabbits.")
    ap.add_argument("--depth", type=int, default=DEFAULT_DEPTH)
    ap.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    ap.add_argument("--steps", type=int, default=None,
                    help=f"steps to run (default: a long run of {LONG_RUN_STEPS})")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--torus", action="store_true", default=False, help="wrap the field edges")
    ap.add_argument("--delay", dest="delay_ms", type=int, default=0, help="pause between steps (ms)")
    ap.add_argument("--view", choices=VIEWS, default="text")
    ap.add_argument("--report-every", type=int, default=REPORT_EVERY)
    ap.add_argument("--history-csv", default=None, help="write population counts per step")
    ap.add_argument("--plot", action="store_true", default=False, help="plot population history")
    ap.add_argument("--verbose", "-v", action="store_true")
    args = ap.parse_args(argv)

    params = Params(
        depth=args.depth,
        width=args.width,
        steps=args.steps,
        seed=args.seed,
        torus=args.torus,
        delay_ms=args.delay_ms,
        view=args.view,
        report_every=args.report_every,
        history_csv=args.history_csv,
        plot=args.plot,
    )
    return params, args.verbose


def make_view(params: Params) -> HeadlessView:
    if params.view == "text":
        return TextView(SPECIES, report_every=params.report_every)
    if params.view == "matplotlib":
        from foxes_rabbits.plotting import LiveGridView

        return LiveGridView(SPECIES)
    return HeadlessView(SPECIES)


def run(params: Params) -> Simulator:
    view = make_view(params)
    sim = Simulator(
        params.depth,
        params.width,
        view=view,
        registry=SPECIES,
        seed=params.seed,
        torus=params.torus,
        delay_ms=params.delay_ms,
    )
    if params.steps is None:
        steps = sim.run_long_simulation()
    else:
        steps = sim.simulate(params.steps)

    pops = " ".join(f"{tag}={n}" for tag, n in sim.population().items())
    print(f"Simulation finished after {steps} steps (step counter {sim.step}).")
    print(f"Final populations: {pops}")

    history = view.to_frame()
    if params.history_csv:
        history.to_csv(params.history_csv, index=False)
        print(f"Population history saved to: {params.history_csv}")
    if params.plot:
        from foxes_rabbits.plotting import plot_populations

        plot_populations(history, SPECIES)
    return sim


def main(argv=None) -> None:
    params, verbose = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )
    if params.view == "pygame":
        from foxes_rabbits.pygame_ui import run_app

        run_app(params, SPECIES)
        return
    run(params)


if __name__ == "__main__":
    main()
