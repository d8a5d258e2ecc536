"""
sweep.py

Grid search over the initial rabbit and fox densities: for every
combination run a few headless replicates and record how often both
species are still alive at the end.

$ python -m foxes_rabbits.sweep --steps 500 --reps 5 --out sweep_results.csv
"""

from __future__ import annotations

import argparse
import dataclasses
import itertools
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Dict, List

import numpy as np
import pandas as pd

from foxes_rabbits.simulator import Simulator
from foxes_rabbits.species import FOX, RABBIT
from foxes_rabbits.view import HeadlessView


def run_and_report(
    rabbit_p: float,
    fox_p: float,
    seed: int,
    steps: int = 500,
    depth: int = 50,
    width: int = 50,
) -> Dict[str, int]:
    registry = (
        dataclasses.replace(RABBIT, spawn_probability=rabbit_p),
        dataclasses.replace(FOX, spawn_probability=fox_p),
    )
    view = HeadlessView(registry)
    sim = Simulator(depth, width, view=view, registry=registry, seed=seed)
    survived = sim.simulate(steps)
    counts = sim.population()
    return {"steps": survived, "rabbit": counts["rabbit"], "fox": counts["fox"]}


def simulate_param_set(rabbit_p: float, fox_p: float, n_reps: int, steps: int,
                       depth: int = 50, width: int = 50, base_seed: int = 0) -> Dict[str, float]:
    runs = [
        run_and_report(rabbit_p, fox_p, base_seed + rep, steps, depth, width)
        for rep in range(n_reps)
    ]
    coexist = sum(1 for r in runs if r["rabbit"] > 0 and r["fox"] > 0)
    return {
        "rabbit_spawn_probability": float(rabbit_p),
        "fox_spawn_probability": float(fox_p),
        "coexist_prob": coexist / n_reps,
        "steps_avg": float(np.mean([r["steps"] for r in runs])),
        "rabbit_avg": float(np.mean([r["rabbit"] for r in runs])),
        "fox_avg": float(np.mean([r["fox"] for r in runs])),
    }


def sweep(rabbit_ps, fox_ps, n_reps: int, steps: int, depth: int = 50, width: int = 50,
          base_seed: int = 0, workers: int | None = None) -> pd.DataFrame:
    combos = [(r, f) for r, f in itertools.product(rabbit_ps, fox_ps) if r + f <= 1.0]
    rows: List[Dict[str, float]] = []
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(simulate_param_set, r, f, n_reps, steps, depth, width, base_seed)
            for r, f in combos
        ]
        for done, future in enumerate(as_completed(futures), start=1):
            row = future.result()
            rows.append(row)
            print(f"Progress: {done} / {len(combos)} parameter sets completed ({done / len(combos):.1%})")
    df = pd.DataFrame(rows)
    if not df.empty:
        df = df.sort_values(["rabbit_spawn_probability", "fox_spawn_probability"]).reset_index(drop=True)
    return df


def main() -> None:
    ap = argparse.ArgumentParser(description="Sweep initial rabbit and fox densities.")
    ap.add_argument("--rabbit", type=float, nargs="+", default=[0.04, 0.08, 0.12, 0.16])
    ap.add_argument("--fox", type=float, nargs="+", default=[0.01, 0.02, 0.04])
    ap.add_argument("--reps", type=int, default=5)
    ap.add_argument("--steps", type=int, default=500)
    ap.add_argument("--depth", type=int, default=50)
    ap.add_argument("--width", type=int, default=50)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--out", default="sweep_results.csv")
    args = ap.parse_args()

    df = sweep(args.rabbit, args.fox, args.reps, args.steps, args.depth, args.width,
               args.seed, args.workers)
    df.to_csv(args.out, index=False)
    found = int((df["coexist_prob"] > 0).sum()) if not df.empty else 0
    print(f"\nFound {found} parameter sets with coexistence probability > 0.")
    print(f"Results written to {args.out}")


if __name__ == "__main__":
    main()
