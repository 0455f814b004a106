"""
oddkit CLI: Command-line interface for oddkit utilities.

Provides commands for:
- draw: Print raw 64-bit or 32-bit draws
- sample: Print unbiased bounded samples
- roll: Count "1 in N" hits over many trials
- check: Chi-squared uniformity check of the bounded sampler
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn
from rich.table import Table

from oddkit.config import OddkitConfig
from oddkit.generator import Xoshiro256StarStar
from oddkit.sampling import SAMPLING_METHODS, uniform_bounded
from oddkit.stats import chi_squared_uniform, hit_rate, sample_uniform

logger = logging.getLogger(__name__)


def _seed_arg(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid seed: {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="oddkit",
        description="oddkit: seedable xoshiro256** odds and unbiased sampling",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    def add_seed(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--seed", "-s",
            type=_seed_arg,
            default=None,
            help="64-bit seed, decimal or 0x-hex (default: config, else entropy)",
        )

    # draw
    draw_parser = subparsers.add_parser("draw", help="Print raw generator draws")
    add_seed(draw_parser)
    draw_parser.add_argument(
        "-n", "--count",
        type=int,
        default=5,
        help="Number of draws (default: 5)",
    )
    draw_parser.add_argument(
        "--bits",
        type=int,
        choices=(64, 32),
        default=64,
        help="Draw width (default: 64)",
    )

    # sample
    sample_parser = subparsers.add_parser("sample", help="Print bounded samples")
    sample_parser.add_argument("bound", type=int, help="Exclusive upper bound")
    add_seed(sample_parser)
    sample_parser.add_argument(
        "-n", "--count",
        type=int,
        default=10,
        help="Number of samples (default: 10)",
    )
    sample_parser.add_argument(
        "--method",
        choices=SAMPLING_METHODS,
        default=None,
        help="Sampling method (default: config, else lemire)",
    )

    # roll
    roll_parser = subparsers.add_parser("roll", help='Count "1 in N" hits')
    roll_parser.add_argument("denominator", type=int, help="N in '1 in N'")
    add_seed(roll_parser)
    roll_parser.add_argument(
        "--trials", "-t",
        type=int,
        default=None,
        help="Number of rolls (default: config, else 1000000)",
    )
    roll_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )

    # check
    check_parser = subparsers.add_parser("check", help="Chi-squared uniformity check")
    check_parser.add_argument("bound", type=int, help="Exclusive upper bound (>= 2)")
    add_seed(check_parser)
    check_parser.add_argument(
        "--count", "-c",
        type=int,
        default=100_000,
        help="Number of samples (default: 100000)",
    )
    check_parser.add_argument(
        "--method",
        choices=SAMPLING_METHODS,
        default=None,
        help="Sampling method (default: config, else lemire)",
    )
    check_parser.add_argument(
        "--alpha",
        type=float,
        default=None,
        help=(
            "Significance level (default: config, else 0.001). Critical values "
            "are exact for bound 2 and 3, Wilson-Hilferty approximations above"
        ),
    )

    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    console = console or Console()
    try:
        config = OddkitConfig.load()
        seed = args.seed if args.seed is not None else config.seed
        rng = Xoshiro256StarStar(seed)
        logger.debug("Using seed %s", "entropy" if seed is None else seed)

        if args.command == "draw":
            return handle_draw(args, rng, console)
        elif args.command == "sample":
            return handle_sample(args, rng, config, console)
        elif args.command == "roll":
            return handle_roll(args, rng, config, console)
        else:
            return handle_check(args, rng, config, console)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def handle_draw(args: argparse.Namespace, rng: Xoshiro256StarStar, console: Console) -> int:
    """Print raw draws, one per line."""
    if args.count < 1:
        raise ValueError(f"count must be >= 1, got {args.count}")
    for _ in range(args.count):
        if args.bits == 32:
            console.print(f"0x{rng.next_u32():08X}")
        else:
            console.print(f"0x{rng.next_u64():016X}")
    return 0


def handle_sample(
    args: argparse.Namespace,
    rng: Xoshiro256StarStar,
    config: OddkitConfig,
    console: Console,
) -> int:
    """Print bounded samples, one per line."""
    method = args.method or config.method
    if args.count < 1:
        raise ValueError(f"count must be >= 1, got {args.count}")
    for _ in range(args.count):
        console.print(str(uniform_bounded(rng, args.bound, method)))
    return 0


def handle_roll(
    args: argparse.Namespace,
    rng: Xoshiro256StarStar,
    config: OddkitConfig,
    console: Console,
) -> int:
    """Roll "1 in N" many times and summarise the hit count."""
    trials = args.trials if args.trials is not None else config.trials
    if trials < 1:
        raise ValueError(f"trials must be >= 1, got {trials}")

    if args.no_progress:
        result = hit_rate(rng, args.denominator, trials)
    else:
        with Progress(
            TextColumn("[bold blue]1 in {task.fields[denominator]}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("roll", total=trials, denominator=args.denominator)
            result = hit_rate(
                rng,
                args.denominator,
                trials,
                on_progress=lambda n: progress.advance(task, n),
            )

    table = Table(title=f"1 in {args.denominator}", show_header=True, header_style="bold")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Trials", f"{result.trials:,}")
    table.add_row("Hits", f"{result.hits:,}")
    table.add_row("Expected", f"{result.expected:,.1f}")
    table.add_row("Rate", f"{result.rate:.6f}")
    console.print(table)
    return 0


def handle_check(
    args: argparse.Namespace,
    rng: Xoshiro256StarStar,
    config: OddkitConfig,
    console: Console,
) -> int:
    """Run a chi-squared uniformity check; exit 1 if it fails."""
    method = args.method or config.method
    alpha = args.alpha if args.alpha is not None else config.alpha
    if args.count < 1:
        raise ValueError(f"count must be >= 1, got {args.count}")
    samples = sample_uniform(rng, args.bound, args.count, method)
    report = chi_squared_uniform(samples, args.bound, alpha=alpha)

    table = Table(
        title=f"Uniformity over [0, {args.bound}) ({method})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Samples", f"{report.samples:,}")
    table.add_row("Chi-squared", f"{report.statistic:.3f}")
    table.add_row("Degrees of freedom", str(report.dof))
    table.add_row(f"Critical (alpha={report.alpha:g})", f"{report.critical:.3f}")
    table.add_row("Min / max count", f"{report.min_count:,} / {report.max_count:,}")
    table.add_row(
        "Result",
        "[green]uniform[/green]" if report.passed else "[red]non-uniform[/red]",
    )
    console.print(table)
    return 0 if report.passed else 1


if __name__ == "__main__":
    sys.exit(main())
