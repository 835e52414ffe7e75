"""
Inference driver: converts "could be true" into "is known false".

For every cell the driver hypothesises that Barcenas is there, in the
future bank, and asks the oracle whether the formula survives. If it does
not, the cell is excluded on the knowledge grid and the conclusion is
staged as ¬past(cell). The finder commits the staged clauses at the start
of the next step, so exclusions persist even though each step tests a
fresh future hypothesis.
"""

from __future__ import annotations

import logging
from typing import List

from barcenas_world.formula import FUTURE, PAST, FormulaBuilder
from barcenas_world.state import CellState, KnowledgeGrid

logger = logging.getLogger(__name__)


class InferenceDriver:
    """Runs one satisfiability query per cell."""

    def __init__(self, builder: FormulaBuilder):
        self.builder = builder
        self.queries = 0

    def run(self, grid: KnowledgeGrid) -> List[List[int]]:
        """
        Query every cell in row-major order, mark the excluded ones on
        `grid` and return the staged past-bank clauses.
        """
        oracle = self.builder.oracle
        future = self.builder.bank(FUTURE)
        past = self.builder.bank(PAST)
        staged: List[List[int]] = []

        for x, y in self.builder.index.cells():
            self.queries += 1
            if not oracle.is_satisfiable([future.literal(x, y)]):
                grid.set(x, y, CellState.EXCLUDED)
                staged.append([-past.literal(x, y)])

        logger.debug("inference: %d/%d cells excluded",
                     len(staged), self.builder.index.bank_size)
        return staged
