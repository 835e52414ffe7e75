"""
Benchmark suite for the Barcenas finder.

Runs the finder on worlds of increasing size with a fixed walk pattern and
measures:
- Formula size (variables, clauses)
- Inference cost (SAT queries, wall time)
- How many cells are left as candidates at the end

The rule base grows as O(D⁴) clauses, so this mainly shows how formula
construction and the per-cell queries scale with the dimension.
"""

import time
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from barcenas_world import BarcenasFinder, FinderConfig
from barcenas_world.worlds import BarcenasWorldEnv, WorldConfig


@dataclass
class BenchmarkProblem:
    """A world to search: dimension, hidden position and the walk."""
    name: str
    dim: int
    barcenas: Tuple[int, int]
    steps: List[Tuple[int, int]]


def diagonal_walk(dim: int) -> List[Tuple[int, int]]:
    return [(i, i) for i in range(2, dim + 1)]


BENCHMARKS = [
    BenchmarkProblem(f"{d}x{d}", d, (d, d - 1), diagonal_walk(d))
    for d in (4, 6, 8, 10, 12)
]


def run_benchmark(problem: BenchmarkProblem) -> dict:
    world = WorldConfig(problem.dim, *problem.barcenas)
    t0 = time.perf_counter()
    with BarcenasFinder(FinderConfig(dim=problem.dim)) as finder:
        build_time = time.perf_counter() - t0
        finder.set_environment(BarcenasWorldEnv(world))
        finder.load_steps(problem.steps)
        step_times = []
        while finder.steps_remaining:
            ts = time.perf_counter()
            finder.run_next_step()
            step_times.append(time.perf_counter() - ts)
        return {
            "name": problem.name,
            "vars": finder.oracle.num_vars,
            "clauses": finder.oracle.num_clauses,
            "queries": finder.driver.queries,
            "build_ms": build_time * 1000,
            "step_ms": float(np.mean(step_times)) * 1000,
            "left": len(finder.state.possible_cells()),
        }


def main():
    print(f"{'world':8s} {'vars':>6s} {'clauses':>9s} {'queries':>8s} "
          f"{'build ms':>9s} {'step ms':>8s} {'left':>5s}")
    for problem in BENCHMARKS:
        r = run_benchmark(problem)
        print(f"{r['name']:8s} {r['vars']:6d} {r['clauses']:9d} {r['queries']:8d} "
              f"{r['build_ms']:9.1f} {r['step_ms']:8.1f} {r['left']:5d}")


if __name__ == "__main__":
    main()
