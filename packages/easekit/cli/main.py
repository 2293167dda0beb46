"""Command-line interface for easekit.

Prints easing curves as tables for quick inspection and previews.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from easekit.core.config.loader import apply_app_config, load_app_config
from easekit.core.config.models import AppConfig
from easekit.core.easing.models import EasingSpec
from easekit.core.easing.modes import EasingPhase, InterpolationMode
from easekit.core.easing.registry import get_default_mode
from easekit.core.easing.sampling import sample_curve
from easekit.core.utils.json import dumps_json

console = Console()
logger = logging.getLogger(__name__)

LINEAR_MODE = "linear"

SHAPE_FORMULAS: dict[InterpolationMode, tuple[str, str, str]] = {
    InterpolationMode.SINUSOIDAL: (
        "1 - cos(t*pi/2)",
        "sin(t*pi/2)",
        "(cos(pi*(t+1)) + 1) / 2",
    ),
    InterpolationMode.QUADRATIC: (
        "t^n",
        "1 - (1-t)^n",
        "2t^2 | 2u(1-u) + 0.5",
    ),
    InterpolationMode.EXPONENTIAL: (
        "2^(10p(t-1))",
        "1 - 2^(-10pt)",
        "halves of in/out split at 0.5",
    ),
    InterpolationMode.CIRCULAR: (
        "1 - sqrt(1-t^2)",
        "sqrt(1-(t-1)^2)",
        "quarter-circle arcs joined at 0.5",
    ),
}


def _load_config(config_path: str | None) -> AppConfig:
    path = Path(config_path).resolve() if config_path else None
    config = load_app_config(path)
    apply_app_config(config)
    return config


def build_spec(args: argparse.Namespace) -> EasingSpec:
    """Build the curve spec selected by the sample command's arguments."""
    if args.mode == LINEAR_MODE:
        mode: InterpolationMode | None = None
    elif args.mode is None:
        mode = get_default_mode()
    else:
        mode = InterpolationMode(args.mode)

    return EasingSpec(
        mode=mode,
        phase=EasingPhase(args.phase),
        start=args.start,
        end=args.end,
        power=args.power,
    )


def run_modes(args: argparse.Namespace) -> int:
    """Print the available curve families."""
    default_mode = get_default_mode()

    table = Table(title="Interpolation modes")
    table.add_column("Mode", style="bold")
    table.add_column("Ease in")
    table.add_column("Ease out")
    table.add_column("Ease in-out")

    for mode, (shape_in, shape_out, shape_in_out) in SHAPE_FORMULAS.items():
        label = f"{mode.value} (default)" if mode == default_mode else mode.value
        table.add_row(label, shape_in, shape_out, shape_in_out)
    table.add_row(LINEAR_MODE, "t", "-", "-")

    console.print(table)
    return 0


def run_sample(args: argparse.Namespace) -> int:
    """Sample a curve over a uniform grid and print the values."""
    spec = build_spec(args)
    samples = sample_curve(
        spec.curve, spec.start, spec.end, args.samples, **spec.curve_params()
    )
    logger.debug("Sampled %s with %d points", spec.name, len(samples))

    if args.json:
        payload = {
            "curve": spec.name,
            "params": spec.model_dump(mode="json"),
            "samples": [sample.model_dump() for sample in samples],
        }
        console.print_json(dumps_json(payload))
        return 0

    table = Table(title=f"{spec.name}: {spec.start:g} -> {spec.end:g}")
    table.add_column("t", justify="right")
    table.add_column("value", justify="right")
    for sample in samples:
        table.add_row(f"{sample.t:.4f}", f"{sample.value:.6f}")

    console.print(table)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="easekit",
        description="easekit - scalar easing curves for animation and tweening",
    )
    p.add_argument(
        "--config",
        default=None,
        help="Path to app config (.json/.yaml); defaults to ./easekit.yaml if present",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("modes", help="List interpolation modes and their shapes")

    sample = sub.add_parser("sample", help="Sample a curve over [0, 1]")
    sample.add_argument(
        "--mode",
        choices=[m.value for m in InterpolationMode] + [LINEAR_MODE],
        default=None,
        help="Curve family (default: configured default mode)",
    )
    sample.add_argument(
        "--phase",
        choices=[p.value for p in EasingPhase],
        default=EasingPhase.IN_OUT.value,
        help="Ease phase (default: in_out)",
    )
    sample.add_argument("--start", type=float, default=0.0, help="Value at t=0 (default: 0)")
    sample.add_argument("--end", type=float, default=1.0, help="Value at t=1 (default: 1)")
    sample.add_argument(
        "--samples", type=int, default=11, help="Number of grid points (default: 11)"
    )
    sample.add_argument(
        "--power", type=int, default=1, help="Steepness for quadratic/exponential curves"
    )
    sample.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        _load_config(args.config)
        if args.cmd == "modes":
            return run_modes(args)
        return run_sample(args)
    except FileNotFoundError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
    except ValidationError as e:
        console.print(f"[red]ERROR: Invalid configuration: {escape(str(e))}[/red]")
    except ValueError as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
    return 1


if __name__ == "__main__":
    sys.exit(main())
