"""
Readers for the step list and expected-state files.

Steps file: a single line of space-separated "x,y" pairs

    1,2 2,2 2,3 5,3 3,3

States file: one block of D lines per state, each line holding D
space-separated '?'/'X' symbols (first line is x = D), blocks separated
by a blank line.

Both readers validate everything before returning, so a run never starts
with a partially loaded list.
"""

from __future__ import annotations

from typing import List, Optional

from barcenas_world.errors import ConfigurationError
from barcenas_world.indexing import Coord
from barcenas_world.state import KnowledgeGrid


def parse_steps(line: str, num_steps: Optional[int] = None) -> List[Coord]:
    """Parse "x1,y1 x2,y2 ..." and keep the first `num_steps` pairs."""
    steps: List[Coord] = []
    for token in line.split():
        parts = token.split(",")
        if len(parts) != 2:
            raise ConfigurationError(f"malformed step {token!r}, expected x,y")
        try:
            steps.append((int(parts[0]), int(parts[1])))
        except ValueError:
            raise ConfigurationError(f"non-integer step {token!r}") from None

    if num_steps is None:
        return steps
    if num_steps < 0:
        raise ConfigurationError(f"number of steps must be >= 0, got {num_steps}")
    if len(steps) < num_steps:
        raise ConfigurationError(
            f"{num_steps} steps requested but only {len(steps)} available"
        )
    return steps[:num_steps]


def load_steps(path: str, num_steps: Optional[int] = None) -> List[Coord]:
    with open(path, "r") as f:
        line = f.readline()
    return parse_steps(line, num_steps)


def parse_states(text: str, dim: int, num_states: Optional[int] = None) -> List[KnowledgeGrid]:
    """Parse consecutive D-line grids separated by blank lines."""
    blocks: List[List[str]] = [[]]
    for line in text.splitlines():
        if line.strip():
            blocks[-1].append(line.strip())
        elif blocks[-1]:
            blocks.append([])
    blocks = [b for b in blocks if b]

    states: List[KnowledgeGrid] = []
    for n, block in enumerate(blocks, start=1):
        if len(block) != dim:
            raise ConfigurationError(f"state {n} has {len(block)} rows, expected {dim}")
        try:
            states.append(KnowledgeGrid.from_rows(block))
        except ValueError as exc:
            raise ConfigurationError(f"state {n}: {exc}") from exc

    if num_states is None:
        return states
    if len(states) < num_states:
        raise ConfigurationError(
            f"{num_states} states requested but only {len(states)} available"
        )
    return states[:num_states]


def load_states(path: str, dim: int, num_states: Optional[int] = None) -> List[KnowledgeGrid]:
    with open(path, "r") as f:
        text = f.read()
    return parse_states(text, dim, num_states)
