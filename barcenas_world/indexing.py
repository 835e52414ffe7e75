"""
Mapping between grid coordinates and boolean variable identifiers.

Every predicate the finder reasons about ("Barcenas is at (x,y)", "the
sensor heard a sound above while standing at (x,y)", ...) is one boolean
variable per cell. A *bank* groups the D² variables of one predicate into
a contiguous id range starting at its *offset*:

    linear(x, y, offset) = (x - 1) * D + (y - 1) + offset

Coordinates are 1-indexed. For a fixed offset the mapping is a bijection
between [1, D] x [1, D] and [offset, offset + D² - 1].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

Coord = Tuple[int, int]


class VariableIndex:
    """Coordinate <-> linear id conversion for a D x D world."""

    def __init__(self, dim: int):
        if dim < 1:
            raise ValueError(f"world dimension must be positive, got {dim}")
        self.dim = dim

    @property
    def bank_size(self) -> int:
        return self.dim * self.dim

    def in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.dim and 1 <= y <= self.dim

    def to_linear(self, x: int, y: int, offset: int) -> int:
        if not self.in_bounds(x, y):
            raise ValueError(f"cell ({x},{y}) outside {self.dim}x{self.dim} world")
        if offset < 1:
            raise ValueError(f"bank offset must be >= 1, got {offset}")
        return (x - 1) * self.dim + (y - 1) + offset

    def from_linear(self, lit: int, offset: int) -> Coord:
        rel = lit - offset
        if not 0 <= rel < self.bank_size:
            raise ValueError(f"id {lit} not in bank starting at {offset}")
        return rel // self.dim + 1, rel % self.dim + 1

    def cells(self) -> Iterator[Coord]:
        """All cells in row-major order (x outer, y inner)."""
        for x in range(1, self.dim + 1):
            for y in range(1, self.dim + 1):
                yield x, y


@dataclass(frozen=True)
class VariableBank:
    """A named contiguous range of D² variable ids."""
    name: str
    offset: int
    index: VariableIndex

    @property
    def size(self) -> int:
        return self.index.bank_size

    @property
    def last(self) -> int:
        return self.offset + self.size - 1

    def literal(self, x: int, y: int) -> int:
        return self.index.to_linear(x, y, self.offset)

    def coord(self, lit: int) -> Coord:
        return self.index.from_linear(abs(lit), self.offset)

    def __contains__(self, lit: int) -> bool:
        return self.offset <= abs(lit) <= self.last

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.offset, self.last + 1))

    def __repr__(self) -> str:
        return f"VariableBank({self.name}, {self.offset}..{self.last})"
