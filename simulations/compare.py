# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .chart import render_chart
from .common import format_report_lines
from .run import run_experiment


logger = logging.getLogger(__name__)

# Keep the tool intentionally opinionated:
# - reliabilities are fixed (so the CLI stays minimal)
# - only trial count and seed are taken from the command line
DEFAULT_TRIALS = 1000
DEFAULT_SEED = 7
DEFAULT_RELIABILITIES = (0.9, 0.5, 0.2)
DEFAULT_OUTPUT = "TMR_Comparison.png"


def _non_negative_int(raw: Optional[str], default: int) -> int:
    """
    Lenient parse: anything that is not a non-negative integer falls back
    to `default` without complaint.
    """
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if value < 0:
        return default
    return value


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare classic vs MAP voting for TMR via Monte Carlo."
    )
    parser.add_argument("trials", nargs="?", help=f"number of trials (default {DEFAULT_TRIALS})")
    parser.add_argument("seed", nargs="?", help=f"RNG seed (default {DEFAULT_SEED})")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="chart image path")

    # unknown extras are ignored, like malformed numbers
    args, _ = parser.parse_known_args(argv)

    n = _non_negative_int(args.trials, DEFAULT_TRIALS)
    seed = _non_negative_int(args.seed, DEFAULT_SEED)

    result = run_experiment(trials=n, seed=seed, reliabilities=DEFAULT_RELIABILITIES)

    for line in format_report_lines(result):
        print(line)

    # Chart comes strictly after the numbers are out
    try:
        render_chart(
            args.output,
            n,
            seed,
            result.spec.reliabilities,
            result.classic_ok,
            result.map_ok,
        )
    except (OSError, ValueError) as exc:
        logger.error("failed to write chart %s: %s", args.output, exc)
        return 1

    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    raise SystemExit(main(sys.argv[1:]))
