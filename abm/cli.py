"""
Command-line interface for the ABM price path simulator.
"""

import argparse
import logging
import sys
from typing import List, Optional
from abm.model import ABM


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list of str, optional
        Arguments to parse; defaults to ``sys.argv[1:]``

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments
    """
    parser = argparse.ArgumentParser(
        description="Price path simulation using Arithmetic Brownian Motion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --drift 0.05 --volatility 0.4 --paths 50 --steps 200
  %(prog)s --volatility 0 --steps 4 --initial-value 100 --quantiles 0.05 0.95
        """,
    )

    parser.add_argument(
        "--drift",
        type=float,
        default=0.05,
        help="Drift (mu), expected change per unit time (default: 0.05)",
    )

    parser.add_argument(
        "--volatility",
        type=float,
        default=0.4,
        help="Volatility (sigma), non-negative (default: 0.4)",
    )

    parser.add_argument(
        "--paths",
        type=int,
        default=50,
        help="Number of Monte Carlo paths to generate (default: 50)",
    )

    parser.add_argument(
        "--steps",
        type=int,
        default=200,
        help="Number of time steps per path (default: 200)",
    )

    parser.add_argument(
        "--horizon",
        type=float,
        default=1.0,
        help="Total simulated time span (default: 1.0)",
    )

    parser.add_argument(
        "--initial-value",
        type=float,
        default=200.0,
        help="Price at time 0 (default: 200.0)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs (default: unseeded)",
    )

    parser.add_argument(
        "--quantiles",
        type=float,
        nargs="+",
        default=None,
        help="Terminal value quantiles to report, e.g. 0.05 0.5 0.95",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments

    Raises
    ------
    ValueError
        If arguments are invalid
    """
    if args.paths <= 0:
        raise ValueError("paths must be positive")

    if args.steps <= 0:
        raise ValueError("steps must be positive")

    if args.horizon <= 0:
        raise ValueError("horizon must be positive")

    if args.volatility < 0:
        raise ValueError("volatility must be non-negative")

    if args.quantiles and any(not 0 <= q <= 1 for q in args.quantiles):
        raise ValueError("quantiles must lie between 0 and 1")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns
    -------
    int
        Exit code (0 for success, 1 for error)
    """
    try:
        args = parse_args(argv)
        validate_args(args)

        if args.verbose:
            logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)

        abm = ABM(
            drift=args.drift,
            volatility=args.volatility,
            path_count=args.paths,
            step_count=args.steps,
            horizon=args.horizon,
            initial_value=args.initial_value,
            seed=args.seed,
        )

        summary = abm.run()
        stats = summary.to_dict()
        dt = abm.simulator.dt

        print(f"\nSimulation completed: {stats['num_paths']} paths x {args.steps} steps")
        print(f"Drift (mu): {args.drift:.4f} | Volatility (sigma): {args.volatility:.4f}")
        print(f"Horizon: {args.horizon:g} | dt: {dt:g}")
        print(f"Initial value: {args.initial_value:.2f}")
        print(
            f"Terminal value: mean {stats['terminal_mean']:.4f} | "
            f"std {stats['terminal_std']:.4f} | "
            f"min {stats['terminal_min']:.4f} | max {stats['terminal_max']:.4f}"
        )
        print(
            f"Increment mean: {stats['increment_mean']:.6f} "
            f"(theoretical {args.drift * dt:.6f})"
        )
        print(
            f"Increment variance: {stats['increment_variance']:.6f} "
            f"(theoretical {args.volatility ** 2 * dt:.6f})"
        )

        if args.quantiles:
            terminal = summary.quantiles(args.quantiles).iloc[-1]
            for level, value in terminal.items():
                print(f"Terminal quantile {level:g}: {value:.4f}")

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
