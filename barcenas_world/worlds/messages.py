"""
Typed messages exchanged between the finder and its environment.

Every message has a kind and a cell:

    finder -> world     moveto(x, y)      soundsat(x, y)
    world -> finder     movedto(x, y)     notmovedto(x, y)
                        <READING>(x, y)   e.g. "ABOVE,LEFT"(2, 3)
                        voidmsg           unknown request
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MOVETO = "moveto"
MOVEDTO = "movedto"
NOTMOVEDTO = "notmovedto"
SOUNDSAT = "soundsat"
VOIDMSG = "voidmsg"


@dataclass(frozen=True)
class Message:
    """One request or answer."""
    kind: str
    x: Optional[int] = None
    y: Optional[int] = None

    @property
    def cell(self):
        return self.x, self.y

    def __str__(self) -> str:
        if self.x is None:
            return self.kind
        return f"{self.kind}({self.x},{self.y})"


def move_to(x: int, y: int) -> Message:
    return Message(MOVETO, x, y)


def sounds_at(x: int, y: int) -> Message:
    return Message(SOUNDSAT, x, y)
