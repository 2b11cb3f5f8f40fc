#!/usr/bin/env python3
"""
synthaccess CLI -- Compare direct, synthetic and reflective property access.

Usage:
  synthaccess run [--config PATH] [--number N] [--repeat N] [--binder NAME]
                  [--strategy NAME ...] [--seed N] [--verbose | --quiet]
  synthaccess inspect MODULE:CLASS [PROPERTY] [--private]
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from domain.errors import AccessorError
from domain.models import Strategy
from kernel.console import configure, console

if TYPE_CHECKING:
    from domain.models import AccessorMethodReference, Measurement

logger = logging.getLogger("synthaccess")

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_measurements(measurements: tuple[Measurement, ...]) -> list[list[str]]:
    """Table rows for *measurements*, each compared to the direct baseline."""
    baseline = {
        m.operation: m.per_call_ns for m in measurements if m.strategy is Strategy.DIRECT
    }
    rows: list[list[str]] = []
    for m in measurements:
        base = baseline.get(m.operation)
        relative = f"{m.per_call_ns / base:.2f}x" if base else "--"
        rows.append(
            [m.name, m.strategy.value, f"{m.calls:,}", f"{m.per_call_ns:.1f}", relative]
        )
    return rows


def load_target(target: str) -> type:
    """Import the class named by ``"package.module:Class"``.

    Raises:
        ValueError: Malformed target, import failure, or not a class.
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        msg = f"Expected MODULE:CLASS, got {target!r}"
        raise ValueError(msg)
    try:
        obj: object = importlib.import_module(module_name)
        for part in qualname.split("."):
            obj = getattr(obj, part)
    except (ImportError, AttributeError) as exc:
        msg = f"Cannot load {target}: {exc}"
        raise ValueError(msg) from exc
    if not isinstance(obj, type):
        msg = f"{target} is not a class"
        raise ValueError(msg)
    return obj


def _accessor_label(reference: AccessorMethodReference | None) -> str:
    return reference.qualified_name if reference is not None else "--"


# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------


def cmd_run(args: argparse.Namespace) -> None:
    """Run the benchmark suite and print a results table."""
    from benchmarks.harness import run_benchmarks
    from kernel.config import config_file, load_config

    path = Path(args.config) if args.config else config_file(Path.cwd())
    config = load_config(
        path,
        number=args.number,
        repeat=args.repeat,
        binder=args.binder,
        strategies=args.strategy,
        seed=args.seed,
    )

    console.kv(
        {
            "Property": config.property_name,
            "Binder": config.binder,
            "Strategies": ", ".join(s.value for s in config.strategies),
            "Calls per run": f"{config.number:,}",
            "Runs": str(config.repeat),
        },
        title="Configuration",
    )

    console.info(f"Timing {config.repeat} run(s) of {config.number:,} calls per benchmark")
    measurements = run_benchmarks(config)
    console.table(
        ["Benchmark", "Strategy", "Calls", "ns/call", "vs direct"],
        format_measurements(measurements),
        title="Results (best run)",
    )
    console.success(f"{len(measurements)} benchmark(s) finished")


def cmd_inspect(args: argparse.Namespace) -> None:
    """Show the properties the resolver finds on a class."""
    from domain.models import ResolutionContext
    from modules.resolver.core import describe_property, list_properties

    owner = load_target(args.target)
    context = ResolutionContext(allow_private=args.private)
    if args.property:
        info = describe_property(owner, args.property, context)
        console.panel(
            "\n".join(
                [
                    f"source: {info.source.value}",
                    f"read:   {_accessor_label(info.read)}",
                    f"write:  {_accessor_label(info.write)}",
                ]
            ),
            title=f"{owner.__qualname__}.{info.name}",
        )
        return

    infos = list_properties(owner, context)

    if not infos:
        console.warning(f"No properties found on {owner.__qualname__}")
        return

    rows = [
        [info.name, info.source.value, _accessor_label(info.read), _accessor_label(info.write)]
        for info in infos
    ]
    console.table(["Property", "Source", "Read", "Write"], rows, title=owner.__qualname__)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def _setup_logging(project_dir: Path, level: int) -> None:
    """Configure file logging to .synthaccess/synthaccess.log."""
    from kernel.config import log_file

    path = log_file(project_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(path),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=level,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="synthaccess",
        description="synthaccess -- direct vs synthetic vs reflective property access",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    sub = parser.add_subparsers(dest="command")

    # synthaccess run
    run_p = sub.add_parser("run", help="Run the benchmark suite")
    run_p.add_argument("--config", default=None, help="YAML config (default: ./synthaccess.yaml)")
    run_p.add_argument("--number", type=int, default=None, help="Calls per timed run")
    run_p.add_argument("--repeat", type=int, default=None, help="Number of timed runs")
    run_p.add_argument("--binder", default=None, help="Synthesis binder (direct, generated)")
    run_p.add_argument(
        "--strategy",
        action="append",
        default=None,
        choices=[s.value for s in Strategy],
        help="Strategy to run; repeat for several (default: all)",
    )
    run_p.add_argument("--seed", type=int, default=None, help="Seed for the written value")

    # synthaccess inspect
    inspect_p = sub.add_parser("inspect", help="List the properties of a class")
    inspect_p.add_argument("target", help="Class to inspect, as MODULE:CLASS")
    inspect_p.add_argument("property", nargs="?", default=None, help="Single property to show")
    inspect_p.add_argument("--private", action="store_true", help="Include _private properties")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # -- Console configuration (terminal output) ----------------------------
    configure(backend="auto")

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    # -- Logging configuration (file-based log) -----------------------------
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    _setup_logging(Path.cwd(), level)

    try:
        if args.command == "run":
            cmd_run(args)
        elif args.command == "inspect":
            cmd_inspect(args)
    except (AccessorError, ValueError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        console.error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
