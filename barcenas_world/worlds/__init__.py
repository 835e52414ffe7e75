"""
Simulated environment for the finder.

The world hides Barcenas and answers two kinds of requests: moves (accepted
inside the grid, rejected outside) and sound checks (the direction of
Barcenas as heard from a cell).
"""

from barcenas_world.worlds.messages import Message, move_to, sounds_at
from barcenas_world.worlds.barcenas_env import BarcenasWorldEnv, WorldConfig

__all__ = [
    "Message",
    "move_to",
    "sounds_at",
    "BarcenasWorldEnv",
    "WorldConfig",
]
