#!/usr/bin/env python3
"""
Example usage of the torus_life package.
"""

import numpy as np

from torus_life import Universe


def main():
    """Step a universe the way a rendering host would."""
    universe = Universe.new(1, np.random.default_rng(2024).random)

    print("Initial state:")
    print(universe.render())
    print(f"Population: {universe.population}")
    print()

    for _ in range(5):
        universe.tick()

        # A fresh view is needed after every tick
        cells = universe.cells().reshape(universe.height(), universe.width())
        print(f"Generation {universe.generation}: {int(cells.sum())} alive")

    print()
    print(universe.render())


if __name__ == "__main__":
    main()
