"""Command-line entry point: run a step sequence in a Barcenas World."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from barcenas_world.errors import BarcenasError
from barcenas_world.finder import BarcenasFinder, FinderConfig
from barcenas_world.loaders import load_steps
from barcenas_world.worlds.barcenas_env import BarcenasWorldEnv, WorldConfig

logger = logging.getLogger("barcenas_world")


def setup_logging(verbose: bool) -> None:
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
    logger.addHandler(handler)


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="barcenas-world",
        description="Locate Barcenas with a SAT-based finder agent",
    )
    p.add_argument("dim", type=int, help="world dimension")
    p.add_argument("barcenas_x", type=int, help="x coordinate of Barcenas")
    p.add_argument("barcenas_y", type=int, help="y coordinate of Barcenas")
    p.add_argument("num_steps", type=int, help="number of steps to perform")
    p.add_argument("steps_file", type=str, help="file with the sequence of steps")
    p.add_argument("--timeout", type=float, default=3600.0,
                   help="seconds allowed per satisfiability check (0 = no limit)")
    p.add_argument("--solver", type=str, default="g3", help="PySAT solver name")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def run_steps_sequence(world: WorldConfig, finder_config: FinderConfig,
                       num_steps: int, steps_file: str) -> str:
    """Run the first `num_steps` steps of `steps_file`; returns the summary."""
    steps = load_steps(steps_file, num_steps)
    with BarcenasFinder(finder_config) as finder:
        finder.set_environment(BarcenasWorldEnv(world))
        finder.load_steps(steps)
        finder.run(num_steps)
        return finder.summary()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        world = WorldConfig(args.dim, args.barcenas_x, args.barcenas_y)
        config = FinderConfig(dim=args.dim, timeout=args.timeout or None,
                              solver=args.solver)
        summary = run_steps_sequence(world, config, args.num_steps, args.steps_file)
    except FileNotFoundError as exc:
        logger.error("steps file not found: %s", exc.filename)
        return 2
    except BarcenasError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1

    print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
