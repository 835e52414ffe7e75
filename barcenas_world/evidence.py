"""
Evidence encoder: turns one sensor reading into clauses.

The sound sensor answers, from the agent's cell, in which direction(s)
Barcenas is. There are nine possible readings:

    ABOVE  BELOW  LEFT  RIGHT                       single direction
    ABOVE,RIGHT  ABOVE,LEFT  BELOW,RIGHT  BELOW,LEFT  diagonal quadrant
    ABOVE,BELOW,LEFT,RIGHT                          found: he is right here

Encoding per reading at (x, y):

* single direction d: assert sensor_d(x,y). The static implications rule
  out the half-plane behind the sensor; a single direction also means
  Barcenas is on the sensor's own line, so every other cell in front of
  the sensor is excluded directly with ¬future units.
* diagonal: assert both sensor literals; the two static families carve
  out the quadrant between them.
* found: ¬future for every cell except (x, y).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import FrozenSet, Iterator, List, Tuple

from barcenas_world.formula import ABOVE, BELOW, FUTURE, LEFT, RIGHT, FormulaBuilder

logger = logging.getLogger(__name__)


class Reading(Enum):
    """The nine answers of the sound sensor."""
    ABOVE = "ABOVE"
    BELOW = "BELOW"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    ABOVE_RIGHT = "ABOVE,RIGHT"
    ABOVE_LEFT = "ABOVE,LEFT"
    BELOW_RIGHT = "BELOW,RIGHT"
    BELOW_LEFT = "BELOW,LEFT"
    FOUND = "ABOVE,BELOW,LEFT,RIGHT"

    @property
    def directions(self) -> FrozenSet[str]:
        return frozenset(part.lower() for part in self.value.split(","))

    @property
    def is_found(self) -> bool:
        return self is Reading.FOUND

    @staticmethod
    def parse(text: str) -> "Reading":
        """Parse a reading; direction order and case do not matter."""
        parts = frozenset(p.strip().lower() for p in text.split(",") if p.strip())
        for reading in Reading:
            if reading.directions == parts:
                return reading
        raise ValueError(f"unknown sensor reading {text!r}")


class EvidenceEncoder:
    """Adds the clauses for sensor readings to the builder's oracle."""

    def __init__(self, builder: FormulaBuilder):
        self.builder = builder
        self.dim = builder.dim

    def clauses_for(self, x: int, y: int, reading: Reading) -> List[List[int]]:
        """The clauses encoding `reading` sensed at (x, y)."""
        future = self.builder.bank(FUTURE)

        if reading.is_found:
            return [[-future.literal(i, j)]
                    for i, j in self.builder.index.cells() if (i, j) != (x, y)]

        clauses = [[self.builder.bank(d).literal(x, y)]
                   for d in (ABOVE, BELOW, LEFT, RIGHT) if d in reading.directions]
        if len(reading.directions) == 1:
            (direction,) = reading.directions
            clauses.extend([-future.literal(i, j)]
                           for i, j in self.off_line(direction, x, y))
        return clauses

    def off_line(self, direction: str, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Cells in front of the sensor but off its line. A single-direction
        reading places Barcenas exactly on that line, so these are excluded.
        """
        d = self.dim
        if direction == ABOVE:
            cells = ((i, j) for i in range(1, d + 1) for j in range(y + 1, d + 1) if i != x)
        elif direction == BELOW:
            cells = ((i, j) for i in range(1, d + 1) for j in range(1, y) if i != x)
        elif direction == LEFT:
            cells = ((i, j) for i in range(1, x) for j in range(1, d + 1) if j != y)
        else:
            cells = ((i, j) for i in range(x + 1, d + 1) for j in range(1, d + 1) if j != y)
        return cells

    def add(self, x: int, y: int, reading: Reading) -> int:
        """
        Insert the evidence into the formula. Returns the number of clauses
        added. Raises ContradictionError if the reading conflicts with
        what is already fixed.
        """
        clauses = self.clauses_for(x, y, reading)
        if reading.is_found:
            logger.info("Barcenas found at (%d,%d)", x, y)
        context = f"reading {reading.value} at ({x},{y})"
        oracle = self.builder.oracle
        oracle.add_clauses(clauses, context=context)
        oracle.check_consistent(context)
        logger.debug("evidence %s at (%d,%d): %d clauses", reading.value, x, y, len(clauses))
        return len(clauses)
