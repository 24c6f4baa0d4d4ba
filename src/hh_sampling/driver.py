"""
Simulation drivers: repeat "draw a sample, take its Hansen-Hurwitz mean" R
times and report the relative bias of the average estimate.

All arguments are validated before the first draw, so a failing call never
consumes randomness or returns a partial result.
"""

import logging
from typing import Sequence

from .errors import SeedLike, check_count, check_seed
from .estimator import bias_reference_mean, relative_bias
from .fast_sampler import FastSampler
from .sampler import ReferenceSampler

logger = logging.getLogger(__name__)


def _check_run(
    population: Sequence[float], n: int, repetitions: int, seed: SeedLike,
) -> float:
    """
    Validate a run up front and return the true population mean.
    """
    check_count(n, "n")
    check_count(repetitions, "repetitions")
    check_seed(seed)
    return bias_reference_mean(population)


def simulate_relative_bias(
    population: Sequence[float],
    n: int,
    repetitions: int,
    seed: SeedLike = None,
) -> float:
    """
    Relative bias (percent) of the Hansen-Hurwitz estimator, reference engine.

    The R estimates are folded into a single sum; no state outlives the call.
    """
    true_mean = _check_run(population, n, repetitions, seed)
    sampler = ReferenceSampler(population, seed=seed)

    total = sum(sampler.estimate(n) for _ in range(repetitions))
    average_estimate = total / repetitions

    bias = relative_bias(average_estimate, true_mean)
    logger.debug(
        "reference: N=%d n=%d R=%d mean=%.6g avg=%.6g bias=%.4f%%",
        sampler.population_size(), n, repetitions, true_mean, average_estimate, bias,
    )
    return bias


def simulate_relative_bias_fast(
    population: Sequence[float],
    n: int,
    repetitions: int,
    seed: SeedLike = None,
) -> float:
    """
    Same contract as simulate_relative_bias, NumPy engine.
    """
    true_mean = _check_run(population, n, repetitions, seed)
    sampler = FastSampler(population, seed=seed)

    average_estimate = float(sampler.estimate_many(n, repetitions).mean())

    bias = relative_bias(average_estimate, true_mean)
    logger.debug(
        "fast: N=%d n=%d R=%d mean=%.6g avg=%.6g bias=%.4f%%",
        sampler.population_size(), n, repetitions, true_mean, average_estimate, bias,
    )
    return bias
