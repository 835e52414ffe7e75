"""
Quick start example for the Barcenas finder.

Demonstrates the core workflow:
1. Hide Barcenas somewhere in a small world
2. Give the finder a walk to perform
3. Watch the knowledge grid shrink after every sound reading
"""

from barcenas_world import BarcenasFinder, FinderConfig
from barcenas_world.worlds import BarcenasWorldEnv, WorldConfig


def main():
    # --- Hide Barcenas ---
    # The finder does not know this; it only hears directions.
    world = WorldConfig(dim=5, barcenas_x=3, barcenas_y=3)

    print("Barcenas World — Quick Start")
    print("=" * 50)
    print(f"World: {world.dim}x{world.dim}, Barcenas hidden at "
          f"({world.barcenas_x},{world.barcenas_y})")
    print()

    # --- Walk and reason ---
    # (0,3) is outside the world: the move is rejected and the finder
    # senses again from where it stands.
    steps = [(1, 2), (1, 3), (2, 3), (0, 3), (5, 4), (4, 3), (3, 3)]

    with BarcenasFinder(FinderConfig(dim=world.dim, verbose=True)) as finder:
        finder.set_environment(BarcenasWorldEnv(world))
        finder.load_steps(steps)

        print("Initial knowledge:")
        print(finder.state.render())
        print()

        finder.run()

        print()
        print(finder.summary())


if __name__ == "__main__":
    main()
