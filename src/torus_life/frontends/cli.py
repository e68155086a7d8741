"""Command-line driver that steps a universe and prints its frames."""

import argparse
import sys
import time
import numpy as np
from typing import Any, Dict, Optional

from ..core.universe import Universe
from ..core.patterns import MODE_GLIDER_GUN, MODE_RANDOM


MODE_NAMES = {
    MODE_GLIDER_GUN: "glider gun",
    MODE_RANDOM: "random",
}


def describe_mode(mode: int) -> str:
    """Human-readable name of an initialization mode."""
    return MODE_NAMES.get(mode, "parity pattern")


class CLIUniverse:
    """Command-line interface for stepping a universe."""

    def run_simulation(
        self,
        mode: int,
        generations: int,
        seed: Optional[int] = None,
        delay: float = 0.0,
        quiet: bool = False,
        verbose: bool = False,
    ) -> Dict[str, Any]:
        """Build a universe and tick it, printing a frame per generation.

        Args:
            mode: Initialization mode code
            generations: Number of ticks to run
            seed: Seed for the random mode's draws
            delay: Seconds to sleep between frames
            quiet: Only print the final frame
            verbose: Print generation and population with each frame

        Returns:
            Dictionary of run statistics
        """
        random_source = np.random.default_rng(seed).random if seed is not None else None
        universe = Universe.new(mode, random_source)
        initial_population = universe.population

        if verbose:
            print(f"Initializing {universe.width()}x{universe.height()} universe ({describe_mode(mode)})")

        if not quiet:
            self._print_frame(universe, verbose)

        start_time = time.time()
        for _ in range(generations):
            if delay > 0:
                time.sleep(delay)
            universe.tick()
            if not quiet:
                self._print_frame(universe, verbose)
        duration = time.time() - start_time

        if quiet:
            self._print_frame(universe, verbose)

        return {
            "mode": mode,
            "generation": universe.generation,
            "initial_population": initial_population,
            "population": universe.population,
            "duration_seconds": duration,
            "generations_per_second": generations / duration if duration > 0 else 0,
        }

    def _print_frame(self, universe: Universe, verbose: bool) -> None:
        if verbose:
            print(f"Generation {universe.generation} (population {universe.population})")
        print(universe.render(), end="")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Step a 64x64 toroidal Game of Life and print each generation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Glider gun, 30 generations
  torus-life --mode 0 --generations 30

  # Reproducible random soup, only the final frame
  torus-life --mode 1 --seed 42 --generations 100 --quiet

  # Parity pattern animated at 10 frames per second
  torus-life --mode 2 --generations 50 --delay 0.1
        """,
    )

    parser.add_argument(
        "-m",
        "--mode",
        type=int,
        default=MODE_GLIDER_GUN,
        help="Initialization mode: 0 glider gun, 1 random, other parity pattern (default: 0)",
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to run (default: 10)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible random mode",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait between generations (default: 0)",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print the final generation",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print generation and population with each frame",
    )

    return parser


def print_results(stats: dict, verbose: bool) -> None:
    """Print a summary of a run.

    Args:
        stats: Statistics dictionary from ``run_simulation``
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {stats['generation']} generations")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Mode: {describe_mode(stats['mode'])}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
        print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")
    else:
        print(f"Population: {stats['initial_population']} -> {stats['population']}")


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.quiet and args.verbose:
        errors.append("--quiet and --verbose cannot be combined")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    if not validate_args(args):
        return 1

    cli = CLIUniverse()

    try:
        stats = cli.run_simulation(
            mode=args.mode,
            generations=args.generations,
            seed=args.seed,
            delay=args.delay,
            quiet=args.quiet,
            verbose=args.verbose,
        )
        print_results(stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
