"""Command line entry point.

    tellersim once                 # one business day with per-customer trace
    tellersim grid --output out.csv --plot out.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from tellersim.core.config import MINUTES_PER_HOUR, SimulationConfig
from tellersim.core.simulation import Simulation
from tellersim.experiments.replication import ZeroRunPolicy
from tellersim.experiments.sweep import DEFAULT_BUDGET_HOURS, DEFAULT_HOURS, DEFAULT_SERVERS, sweep, write_csv
from tellersim.logging_config import configure_from_env, enable_console_logging, enable_file_logging
from tellersim.utils.clock import format_customer

logger = logging.getLogger(__name__)


def _add_rate_arguments(parser: argparse.ArgumentParser, sampling: str) -> None:
    parser.add_argument("--seed", type=int, default=2021, help="Random seed")
    parser.add_argument("--customer-rate", type=float, default=5.8, help="Arrivals per hour")
    parser.add_argument("--service-rate", type=float, default=6.0, help="Services per hour per server")
    parser.add_argument(
        "--sampling", choices=["bisect", "inverse"], default=sampling,
        help=f"Service time sampling method (default: {sampling}); bisect takes about 350 steps per customer",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tellersim",
        description="Finite-horizon simulation of a multi-teller bank queue",
    )
    parser.add_argument(
        "--log-level", default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Enable console logging at this level",
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Also log to this rotating file (level from --log-level, default INFO)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    once = commands.add_parser("once", help="Simulate one window and print every customer")
    _add_rate_arguments(once, sampling="bisect")
    once.add_argument("--servers", type=int, default=2, help="Number of tellers")
    once.add_argument("--start", type=int, default=8 * MINUTES_PER_HOUR, help="Start minute")
    once.add_argument("--end", type=int, default=16 * MINUTES_PER_HOUR, help="End minute (exclusive)")
    once.add_argument("--quiet", action="store_true", help="Only print the summary")

    grid = commands.add_parser("grid", help="Sweep run length and server count, print CSV")
    _add_rate_arguments(grid, sampling="inverse")
    grid.add_argument("--hours", type=int, nargs="+", default=list(DEFAULT_HOURS), help="Run lengths in hours")
    grid.add_argument("--servers", type=int, nargs="+", default=list(DEFAULT_SERVERS), help="Server counts")
    grid.add_argument(
        "--budget-hours", type=int, default=DEFAULT_BUDGET_HOURS,
        help="Simulated hours per grid point; short runs are repeated to fill it",
    )
    grid.add_argument(
        "--zero-runs", choices=[p.value for p in ZeroRunPolicy], default=ZeroRunPolicy.EXCLUDE.value,
        help="How runs without customers enter the averages",
    )
    grid.add_argument("--processes", type=int, default=1, help="Worker processes")
    grid.add_argument("--output", default=None, help="CSV file (default: stdout)")
    grid.add_argument("--plot", default=None, help="Write a convergence plot to this image file")

    return parser


def _run_once(args: argparse.Namespace) -> None:
    config = SimulationConfig(
        start_time=args.start,
        end_time=args.end,
        servers=args.servers,
        customer_rate=args.customer_rate,
        service_rate=args.service_rate,
        seed=args.seed,
        service_sampling=args.sampling,
    )
    on_customer = None if args.quiet else lambda customer: print(format_customer(customer))
    summary = Simulation(config).run(on_customer=on_customer)
    print()
    print(summary)


def _run_grid(args: argparse.Namespace) -> None:
    frame = sweep(
        hours=args.hours,
        servers=args.servers,
        customer_rate=args.customer_rate,
        service_rate=args.service_rate,
        seed=args.seed,
        policy=ZeroRunPolicy(args.zero_runs),
        processes=args.processes,
        budget_hours=args.budget_hours,
        service_sampling=args.sampling,
    )
    if args.output is None:
        sys.stdout.write(write_csv(frame))
    else:
        write_csv(frame, args.output)
    if args.plot is not None:
        from tellersim.visual.convergence import plot_convergence

        plot_convergence(frame, args.plot)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.log_level is not None:
        enable_console_logging(level=args.log_level)
    if args.log_file is not None:
        enable_file_logging(args.log_file, level=args.log_level or "INFO")
    if args.log_level is None and args.log_file is None:
        configure_from_env()

    try:
        if args.command == "once":
            _run_once(args)
        else:
            _run_grid(args)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        print(f"tellersim: error: {exc}", file=sys.stderr)
        return 2
    return 0
