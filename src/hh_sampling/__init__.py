"""
Sampling with replacement and Hansen-Hurwitz mean estimation.

Two engines sample the same distribution:

    hh_sampling.sampler       pure Python reference (random.Random)
    hh_sampling.fast_sampler  NumPy, vectorized over draws and repetitions
"""

from .errors import InvalidArgument
from .driver import simulate_relative_bias, simulate_relative_bias_fast
from .estimator import (
    hansen_hurwitz_mean,
    population_mean,
    relative_bias,
)
from .fast_sampler import FastSampler
from .sampler import ReferenceSampler, sample_with_replacement

__all__ = [
    "InvalidArgument",
    "ReferenceSampler",
    "FastSampler",
    "sample_with_replacement",
    "hansen_hurwitz_mean",
    "population_mean",
    "relative_bias",
    "simulate_relative_bias",
    "simulate_relative_bias_fast",
]
