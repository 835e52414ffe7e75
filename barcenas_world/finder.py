"""
Barcenas finder: the agent control loop.

The finder walks a fixed list of cells and, after every move, asks the
environment's sound sensor in which direction Barcenas is. Each step:

    move -> commit last step's conclusions -> sense -> encode -> infer

Conclusions of an inference pass are expressed over the future bank and
would be lost when the next step tests fresh hypotheses. They are therefore
staged as ¬past(cell) clauses and committed first thing in the next step;
the past_to_future rule then carries them over to the new hypotheses.

The knowledge grid is a projection of what the formula entails; it is
refreshed only by the inference driver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from barcenas_world.errors import ConfigurationError
from barcenas_world.evidence import EvidenceEncoder, Reading
from barcenas_world.formula import START_CELL, FormulaBuilder
from barcenas_world.indexing import Coord
from barcenas_world.inference import InferenceDriver
from barcenas_world.loaders import load_steps
from barcenas_world.oracle import SatOracle
from barcenas_world.state import KnowledgeGrid
from barcenas_world.worlds.barcenas_env import BarcenasWorldEnv
from barcenas_world.worlds.messages import MOVEDTO, Message, move_to, sounds_at

logger = logging.getLogger(__name__)


@dataclass
class FinderConfig:
    """Configuration for the finder agent."""
    dim: int = 4
    timeout: Optional[float] = 3600.0   # Seconds per satisfiability check
    solver: str = "g3"                  # PySAT solver name
    verbose: bool = False               # Print the grid after every step

    def __post_init__(self):
        if self.dim < 2:
            raise ConfigurationError(
                f"world dimension must be at least 2 (the start cell is excluded), got {self.dim}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")


class Phase(Enum):
    IDLE = "idle"
    MOVING = "moving"
    SENSING = "sensing"
    INFERRING = "inferring"
    DONE = "done"


@dataclass
class StepLog:
    """Record of a single step."""
    step: int
    requested: Coord
    moved: bool
    position: Coord
    reading: Reading
    newly_excluded: List[Coord]
    state: KnowledgeGrid = field(repr=False)


class BarcenasFinder:
    """
    Locates Barcenas by SAT inference over directional sensor readings.

    Parameters
    ----------
    config : FinderConfig
        World dimension, solver choice and timeout.
    oracle : SatOracle, optional
        Engine holding the formula. Created from the config if omitted;
        an injected oracle must be fresh. Either way the finder owns it
        for the run and releases it in close().
    """

    def __init__(self, config: Optional[FinderConfig] = None,
                 oracle: Optional[SatOracle] = None):
        self.config = config or FinderConfig()
        self.oracle = oracle or SatOracle(self.config.solver, self.config.timeout)

        self.builder = FormulaBuilder(self.config.dim, self.oracle)
        self.encoder = EvidenceEncoder(self.builder)
        self.driver = InferenceDriver(self.builder)

        self.env: Optional[BarcenasWorldEnv] = None
        self.steps: List[Coord] = []
        self.next_step = 0
        self.position: Coord = START_CELL
        self.history: List[StepLog] = []
        self.phase = Phase.IDLE

        self.grid = KnowledgeGrid(self.config.dim)
        try:
            self.builder.build()
            # Initial pass: the start cell is excluded before any move.
            self.staged: List[List[int]] = self.driver.run(self.grid)
        except BaseException:
            self.oracle.close()
            raise
        logger.info("finder ready on %dx%d world (%d vars, %d clauses)",
                    self.config.dim, self.config.dim,
                    self.oracle.num_vars, self.oracle.num_clauses)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    @property
    def state(self) -> KnowledgeGrid:
        return self.grid

    @property
    def steps_remaining(self) -> int:
        return len(self.steps) - self.next_step

    def set_environment(self, env: BarcenasWorldEnv) -> None:
        if env.dim != self.config.dim:
            raise ConfigurationError(
                f"environment is {env.dim}x{env.dim}, finder expects "
                f"{self.config.dim}x{self.config.dim}"
            )
        self.env = env

    def load_steps(self, steps: Sequence[Tuple[int, int]]) -> None:
        self.steps = [(int(x), int(y)) for x, y in steps]
        self.next_step = 0
        self.phase = Phase.IDLE if self.steps else Phase.DONE

    def load_steps_file(self, path: str, num_steps: Optional[int] = None) -> None:
        self.load_steps(load_steps(path, num_steps))

    # ------------------------------------------------------------------
    # Control loop
    # ------------------------------------------------------------------

    def run_next_step(self) -> bool:
        """
        Execute the next step. Returns False, without touching the
        formula or the grid, once the step list is exhausted.
        """
        if self.env is None:
            raise ConfigurationError("no environment set; call set_environment() first")
        if self.steps_remaining <= 0:
            self.phase = Phase.DONE
            logger.info("no more steps to perform")
            return False

        self.phase = Phase.MOVING
        target = self.steps[self.next_step]
        self.next_step += 1
        moved = self._process_move_answer(self._request(move_to(*target)))

        self.oracle.add_clauses(self.staged, context="committing past conclusions")
        self.staged = []

        self.phase = Phase.SENSING
        answer = self._request(sounds_at(*self.position))
        reading = Reading.parse(answer.kind)
        logger.info("sound sensor at (%d,%d): %s", answer.x, answer.y, reading.value)
        self.encoder.add(answer.x, answer.y, reading)

        self.phase = Phase.INFERRING
        before = set(self.grid.excluded_cells())
        self.staged = self.driver.run(self.grid)
        newly = [c for c in self.grid.excluded_cells() if c not in before]

        self.history.append(StepLog(
            step=len(self.history) + 1,
            requested=target,
            moved=moved,
            position=self.position,
            reading=reading,
            newly_excluded=newly,
            state=self.grid.copy(),
        ))
        logger.info("step %d knowledge:\n%s", len(self.history), self.grid.render())
        if self.config.verbose:
            print(f"  [step {len(self.history):2d}] at {self.position} "
                  f"heard {reading.value:22s} excluded={self.grid.num_excluded}")
            print(self.grid.render())

        self.phase = Phase.MOVING if self.steps_remaining else Phase.DONE
        return True

    def run(self, num_steps: Optional[int] = None) -> List[KnowledgeGrid]:
        """Run `num_steps` steps (default: all remaining). Returns snapshots."""
        count = self.steps_remaining if num_steps is None else num_steps
        snapshots = []
        for _ in range(count):
            if not self.run_next_step():
                break
            snapshots.append(self.history[-1].state)
        return snapshots

    def _request(self, msg: Message) -> Message:
        answer = self.env.accept_message(msg)
        logger.debug("finder: %s -> %s", msg, answer)
        return answer

    def _process_move_answer(self, answer: Message) -> bool:
        if answer.kind == MOVEDTO:
            self.position = (answer.x, answer.y)
            logger.info("moved to (%d,%d)", answer.x, answer.y)
            return True
        logger.info("move to (%s,%s) rejected, staying at %s",
                    answer.x, answer.y, self.position)
        return False

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self.oracle.close()

    def __enter__(self) -> BarcenasFinder:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def summary(self) -> str:
        lines = [
            "═" * 45,
            "  Barcenas Finder — Run Summary",
            "═" * 45,
            f"  World:             {self.config.dim}x{self.config.dim}",
            f"  Steps taken:       {len(self.history)}/{len(self.steps)}",
            f"  Position:          {self.position}",
            f"  Cells excluded:    {self.grid.num_excluded}",
            f"  Candidates left:   {self.grid.possible_cells()}",
            f"  SAT queries:       {self.driver.queries}",
            "",
        ]
        for log in self.history:
            move = "moved" if log.moved else "stayed"
            lines.append(f"    [{log.step:2d}] {move:6s} {log.position} "
                         f"{log.reading.value:22s} +{len(log.newly_excluded)}")
        lines.append("═" * 45)
        return "\n".join(lines)
