# simulations/compare.py

from __future__ import annotations

import argparse
import logging
import sys

import matplotlib.pyplot as plt

from .common import common_x_range, format_result_line
from .run import run_pair

from hh_sampling.errors import InvalidArgument


# Defaults reproduce the original scenario: a standard normal population of
# 100k values, samples of 10k, 1000 repetitions.
DEFAULT_SEED = 42
DEFAULT_POPULATION_SIZE = 100_000
DEFAULT_SAMPLE_SIZE = 10_000
DEFAULT_REPETITIONS = 1_000
DEFAULT_LOC = 0.0
DEFAULT_SCALE = 1.0


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two sampling engines via Monte Carlo (relative bias + runtime)."
    )
    parser.add_argument("--method-a", required=True, help="e.g. python | numpy | numpy_threads")
    parser.add_argument("--method-b", required=True, help="e.g. python | numpy | numpy_threads")
    parser.add_argument("--population-size", type=int, default=DEFAULT_POPULATION_SIZE, help="N")
    parser.add_argument("--sample-size", type=int, default=DEFAULT_SAMPLE_SIZE, help="n")
    parser.add_argument("--repetitions", type=int, default=DEFAULT_REPETITIONS, help="R")
    parser.add_argument("--workers", type=int, default=1, help="threads for numpy_threads")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help=f"random seed (default: {DEFAULT_SEED})")
    parser.add_argument("--loc", type=float, default=DEFAULT_LOC, help="population mean of the normal draws")
    parser.add_argument("--scale", type=float, default=DEFAULT_SCALE, help="population stddev of the normal draws")
    parser.add_argument("--no-plot", action="store_true", help="print stats only")
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        ra, rb = run_pair(
            method_a=args.method_a,
            method_b=args.method_b,
            population_size=args.population_size,
            sample_size=args.sample_size,
            repetitions=args.repetitions,
            workers=args.workers,
            seed=args.seed,
            loc=args.loc,
            scale=args.scale,
        )
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # Print stats
    print(format_result_line(ra))
    print(format_result_line(rb))
    if ra.runtime_s and rb.runtime_s:
        print(f"speedup ({rb.method} vs {ra.method}): {ra.runtime_s / rb.runtime_s:.1f}x")

    if args.no_plot:
        return 0

    # Plot with same x-axis
    xmin, xmax = common_x_range([ra, rb])

    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    plt.hist(ra.estimates, bins=60, range=(xmin, xmax))
    plt.axvline(ra.population_mean, color="k", linestyle="--")
    plt.title(ra.method)
    plt.xlabel("Sample mean")
    plt.ylabel("Number of repetitions")
    plt.xlim(xmin, xmax)

    plt.subplot(1, 2, 2)
    plt.hist(rb.estimates, bins=60, range=(xmin, xmax))
    plt.axvline(rb.population_mean, color="k", linestyle="--")
    plt.title(rb.method)
    plt.xlabel("Sample mean")
    plt.xlim(xmin, xmax)

    plt.suptitle(
        f"Compare: {ra.method} vs {rb.method}  "
        f"(N={args.population_size}, n={args.sample_size}, R={args.repetitions})"
    )
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
