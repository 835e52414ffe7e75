"""
Static rule base of the Barcenas World.

The formula uses 6·D² variables split into six banks, allocated in this
order:

    past    Barcenas is at (x,y), as concluded in earlier steps
    future  Barcenas is at (x,y), the hypothesis tested in this step
    above   standing at (x,y) the sensor heard him above
    below   ... below
    left    ... on the left
    right   ... on the right

and the following clause families:

    past_barcenas            he is somewhere (past bank)          1 clause
    future_barcenas          he is somewhere (future bank)        1 clause
    past_to_future           future(c) -> past(c)                 D² clauses
    sound_implications       sensor_d(x,y) -> ¬future(k,l)        ~2·D⁴ clauses
    not_in_first_position    ¬past(1,1), ¬future(1,1)             2 clauses

past_to_future is what makes an exclusion committed in the past bank hold
for the fresh future hypothesis of later steps.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

from barcenas_world.errors import FormulaError
from barcenas_world.indexing import VariableBank, VariableIndex
from barcenas_world.oracle import SatOracle

logger = logging.getLogger(__name__)

PAST = "past"
FUTURE = "future"
ABOVE = "above"
BELOW = "below"
LEFT = "left"
RIGHT = "right"

BANK_ORDER = (PAST, FUTURE, ABOVE, BELOW, LEFT, RIGHT)
SENSOR_BANKS = (ABOVE, BELOW, LEFT, RIGHT)

START_CELL = (1, 1)


class FormulaBuilder:
    """
    Builds the static rule base into an oracle, once per run.

    Parameters
    ----------
    dim : int
        World dimension D.
    oracle : SatOracle
        The oracle receiving the clauses. Must be fresh (no variables yet).
    """

    def __init__(self, dim: int, oracle: SatOracle):
        self.index = VariableIndex(dim)
        self.dim = dim
        self.oracle = oracle
        self.banks: Dict[str, VariableBank] = {}
        self._built = False

    @property
    def total_vars(self) -> int:
        return len(BANK_ORDER) * self.index.bank_size

    def bank(self, name: str) -> VariableBank:
        try:
            return self.banks[name]
        except KeyError:
            raise FormulaError(f"bank {name!r} has not been allocated") from None

    def build(self) -> Dict[str, VariableBank]:
        """Allocate all banks and add the static clauses. Returns the banks."""
        if self._built:
            raise FormulaError("formula has already been built")
        if self.oracle.num_vars:
            raise FormulaError(
                f"oracle already holds {self.oracle.num_vars} variables"
            )

        for name in BANK_ORDER:
            self._allocate(name)
        if self.oracle.num_vars != self.total_vars:
            raise FormulaError(
                f"allocated {self.oracle.num_vars} variables, expected {self.total_vars}"
            )

        self._add("past_barcenas", [self.at_least_one(PAST)])
        self._add("future_barcenas", [self.at_least_one(FUTURE)])
        self._add("past_to_future", self.past_to_future())
        self._add("sound_implications", self.sound_implications())
        self._add("not_in_first_position", self.not_in_first_position())

        self._built = True
        logger.debug("formula for D=%d: %d vars, %d clauses",
                     self.dim, self.oracle.num_vars, self.oracle.num_clauses)
        return dict(self.banks)

    def _allocate(self, name: str) -> VariableBank:
        if name in self.banks:
            raise FormulaError(f"bank {name!r} allocated twice")
        offset = self.oracle.new_vars(self.index.bank_size)
        bank = VariableBank(name, offset, self.index)
        self.banks[name] = bank
        return bank

    def _add(self, family: str, clauses) -> None:
        before = self.oracle.num_clauses
        self.oracle.add_clauses(clauses, context=family)
        logger.debug("%s: %d clauses", family, self.oracle.num_clauses - before)

    # ------------------------------------------------------------------
    # Clause families
    # ------------------------------------------------------------------

    def at_least_one(self, bank_name: str) -> List[int]:
        return list(self.bank(bank_name))

    def past_to_future(self) -> Iterator[List[int]]:
        past, future = self.bank(PAST), self.bank(FUTURE)
        for x, y in self.index.cells():
            yield [past.literal(x, y), -future.literal(x, y)]

    def not_in_first_position(self) -> List[List[int]]:
        x, y = START_CELL
        return [[-self.bank(PAST).literal(x, y)],
                [-self.bank(FUTURE).literal(x, y)]]

    def ruled_out_by(self, direction: str, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Cells where Barcenas cannot be if, standing at (x,y), the sound
        came from `direction`: the half-plane on the opposite side,
        including the sensing row/column itself.
        """
        d = self.dim
        if direction == ABOVE:
            cols, rows = range(1, d + 1), range(1, y + 1)
        elif direction == BELOW:
            cols, rows = range(1, d + 1), range(y, d + 1)
        elif direction == LEFT:
            cols, rows = range(x, d + 1), range(1, d + 1)
        elif direction == RIGHT:
            cols, rows = range(1, x + 1), range(1, d + 1)
        else:
            raise FormulaError(f"unknown sensor direction {direction!r}")
        for k in cols:
            for l in rows:
                yield k, l

    def sound_implications(self) -> Iterator[List[int]]:
        future = self.bank(FUTURE)
        for direction in SENSOR_BANKS:
            sensor = self.bank(direction)
            for x, y in self.index.cells():
                heard = sensor.literal(x, y)
                for k, l in self.ruled_out_by(direction, x, y):
                    yield [-heard, -future.literal(k, l)]
