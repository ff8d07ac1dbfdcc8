"""
Command-line entry point: run the base case and the one-way sweep.

Usage:
    python -m icer --output results/icer_results.xlsx --lower 0.8 --upper 1.2
"""

from pathlib import Path
from typing import List, Optional
import argparse
import logging
import sys

from .exceptions import ICERError
from .export import DEFAULT_OUTPUT
from .runner import AnalysisConfig, run_analysis
from .sensitivity import SweepConfig


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='icer',
        description="Base-case ICER and one-way sensitivity analysis (tirzepatide vs semaglutide)."
    )
    ap.add_argument("--output", type=Path, default=DEFAULT_OUTPUT,
                    help=f"workbook path (default: {DEFAULT_OUTPUT})")
    ap.add_argument("--lower", type=float, default=0.8,
                    help="low-bound multiplier (default: 0.8)")
    ap.add_argument("--upper", type=float, default=1.2,
                    help="high-bound multiplier (default: 1.2)")
    ap.add_argument("--blank-undefined", action="store_true",
                    help="leave undefined sensitivity bounds blank instead of failing")
    ap.add_argument("--no-export", action="store_true",
                    help="print results without writing the workbook")
    ap.add_argument("--quiet", action="store_true",
                    help="suppress printed tables")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    verbose = not args.quiet

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        config = AnalysisConfig(
            sweep=SweepConfig(
                lower_multiplier=args.lower,
                upper_multiplier=args.upper,
                on_undefined='blank' if args.blank_undefined else 'raise'
            ),
            output_path=args.output
        )
        result = run_analysis(config=config, export=not args.no_export)
    except (ICERError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if verbose:
        bundle = result.bundle
        print("Cost and QALY summary")
        print(bundle.summary_table().to_string(index=False))
        print(f"\nBase-case ICER: {bundle.base_icer:.2f}")
        print(f"\nOne-way sensitivity (x{args.lower} / x{args.upper})")
        print(bundle.sensitivity_table().to_string(index=False))
        if result.output_path is not None:
            print(f"\nSaved: {result.output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
