"""
Simulated Barcenas World.

The environment knows where Barcenas hides and answers the finder's
requests. It is the only place holding the ground truth; the finder learns
about it exclusively through accept_message().

Directions are relative to the sensing cell (x, y) with Barcenas at
(bx, by): "ABOVE" means by > y, "RIGHT" means bx > x. When both axes
differ the answer is a diagonal pair; when only one differs it is a single
direction; at the cell itself every direction sounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from barcenas_world.errors import ConfigurationError
from barcenas_world.evidence import Reading
from barcenas_world.worlds.messages import (
    MOVEDTO, MOVETO, NOTMOVEDTO, SOUNDSAT, VOIDMSG, Message,
)

logger = logging.getLogger(__name__)


@dataclass
class WorldConfig:
    """Dimension of the world and Barcenas' hidden position."""
    dim: int = 4
    barcenas_x: int = 3
    barcenas_y: int = 3

    def __post_init__(self):
        if self.dim < 1:
            raise ConfigurationError(f"world dimension must be positive, got {self.dim}")
        if not (1 <= self.barcenas_x <= self.dim and 1 <= self.barcenas_y <= self.dim):
            raise ConfigurationError(
                f"Barcenas at ({self.barcenas_x},{self.barcenas_y}) is outside "
                f"the {self.dim}x{self.dim} world"
            )


class BarcenasWorldEnv:
    """Answers move and sound requests for a fixed hidden position."""

    def __init__(self, config: WorldConfig):
        self.config = config

    @property
    def dim(self) -> int:
        return self.config.dim

    def within_limits(self, x: int, y: int) -> bool:
        return 1 <= x <= self.dim and 1 <= y <= self.dim

    def direction_at(self, x: int, y: int) -> Reading:
        """Which way Barcenas is, as heard from (x, y)."""
        bx, by = self.config.barcenas_x, self.config.barcenas_y
        if y < by and x < bx:
            return Reading.ABOVE_RIGHT
        if y < by and x > bx:
            return Reading.ABOVE_LEFT
        if y > by and x < bx:
            return Reading.BELOW_RIGHT
        if y > by and x > bx:
            return Reading.BELOW_LEFT
        if y < by:
            return Reading.ABOVE
        if y > by:
            return Reading.BELOW
        if x > bx:
            return Reading.LEFT
        if x < bx:
            return Reading.RIGHT
        return Reading.FOUND

    def accept_message(self, msg: Message) -> Message:
        logger.debug("world <= %s", msg)
        if msg.kind == MOVETO:
            kind = MOVEDTO if self.within_limits(msg.x, msg.y) else NOTMOVEDTO
            return Message(kind, msg.x, msg.y)
        if msg.kind == SOUNDSAT:
            return Message(self.direction_at(msg.x, msg.y).value, msg.x, msg.y)
        return Message(VOIDMSG)
