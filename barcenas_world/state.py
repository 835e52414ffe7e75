"""
Knowledge grid: the observable projection of what the formula entails.

Each cell is either POSSIBLE ('?', Barcenas could still be there) or
EXCLUDED ('X', the formula proves he is not). The grid does no inference
of its own; only the inference driver writes to it, and a cell that
became EXCLUDED never goes back.

Text layout (used for rendering and for expected-state fixtures): one line
per x from D down to 1, each with D space-separated symbols for y = 1..D.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Sequence, Tuple

import numpy as np


class CellState(IntEnum):
    """What the finder knows about one cell."""
    POSSIBLE = 0
    EXCLUDED = 1

    @property
    def symbol(self) -> str:
        return "?" if self == CellState.POSSIBLE else "X"

    @staticmethod
    def from_symbol(symbol: str) -> "CellState":
        if symbol == "?":
            return CellState.POSSIBLE
        if symbol == "X":
            return CellState.EXCLUDED
        raise ValueError(f"unknown cell symbol {symbol!r}")


class KnowledgeGrid:
    """A D x D board of CellState values, 1-indexed by (x, y)."""

    def __init__(self, dim: int):
        if dim < 1:
            raise ValueError(f"world dimension must be positive, got {dim}")
        self.dim = dim
        self.cells = np.full((dim, dim), CellState.POSSIBLE, dtype=int)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> KnowledgeGrid:
        """Parse the text layout produced by render()."""
        dim = len(rows)
        grid = cls(dim)
        for i, row in enumerate(rows):
            symbols = row.split()
            if len(symbols) != dim:
                raise ValueError(
                    f"row {i + 1} has {len(symbols)} cells, expected {dim}: {row!r}"
                )
            x = dim - i
            for y, sym in enumerate(symbols, start=1):
                grid.cells[x - 1, y - 1] = CellState.from_symbol(sym)
        return grid

    def get(self, x: int, y: int) -> CellState:
        return CellState(self.cells[x - 1, y - 1])

    def set(self, x: int, y: int, state: CellState) -> None:
        if not (1 <= x <= self.dim and 1 <= y <= self.dim):
            raise ValueError(f"cell ({x},{y}) outside {self.dim}x{self.dim} grid")
        if state == CellState.POSSIBLE and self.get(x, y) == CellState.EXCLUDED:
            raise ValueError(f"cell ({x},{y}) is already excluded")
        self.cells[x - 1, y - 1] = state

    def excluded_cells(self) -> List[Tuple[int, int]]:
        xs, ys = np.nonzero(self.cells == CellState.EXCLUDED)
        return sorted((int(x) + 1, int(y) + 1) for x, y in zip(xs, ys))

    def possible_cells(self) -> List[Tuple[int, int]]:
        xs, ys = np.nonzero(self.cells == CellState.POSSIBLE)
        return sorted((int(x) + 1, int(y) + 1) for x, y in zip(xs, ys))

    @property
    def num_excluded(self) -> int:
        return int(np.count_nonzero(self.cells == CellState.EXCLUDED))

    def equals(self, other: KnowledgeGrid) -> bool:
        """Cell-wise comparison."""
        return self.dim == other.dim and bool(np.array_equal(self.cells, other.cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KnowledgeGrid):
            return NotImplemented
        return self.equals(other)

    def copy(self) -> KnowledgeGrid:
        clone = KnowledgeGrid(self.dim)
        clone.cells = self.cells.copy()
        return clone

    def rows(self) -> List[str]:
        return [
            " ".join(CellState(v).symbol for v in self.cells[x - 1])
            for x in range(self.dim, 0, -1)
        ]

    def render(self) -> str:
        """ASCII rendering, x = D on top."""
        return "\n".join(self.rows())

    def __repr__(self) -> str:
        return f"KnowledgeGrid({self.dim}x{self.dim}, excluded={self.num_excluded})"
