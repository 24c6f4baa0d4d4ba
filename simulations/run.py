# simulations/run.py

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .common import ExperimentSpec, BiasResult
from .methods import get_method

from hh_sampling.errors import SeedLike, check_count, check_seed

logger = logging.getLogger(__name__)


def split_seed(seed: SeedLike) -> Tuple[np.random.SeedSequence, np.random.SeedSequence]:
    """
    Derive two independent streams from one seed: (population, sampler).

    The population generator and the sampler never share a bit stream, so
    the indices drawn are independent of the values they index.
    """
    seed = check_seed(seed)
    if not isinstance(seed, np.random.SeedSequence):
        seed = np.random.SeedSequence(seed)
    population_seed, sampler_seed = seed.spawn(2)
    return population_seed, sampler_seed


def make_population(
    size: int,
    seed: SeedLike = 42,
    loc: float = 0.0,
    scale: float = 1.0,
) -> List[float]:
    """
    Draw a population of `size` values from Normal(loc, scale).

    Seeded on its own so the same population can be reused across methods;
    run_experiment passes the population half of split_seed(seed).
    """
    size = check_count(size, "size")
    rng = np.random.default_rng(check_seed(seed))
    return rng.normal(loc, scale, size=size).tolist()


def run_experiment(
    method: str,
    population_size: int,
    sample_size: int,
    repetitions: int,
    workers: int = 1,
    seed: SeedLike = 42,
    loc: float = 0.0,
    scale: float = 1.0,
    population: Optional[List[float]] = None,
    method_kwargs: Optional[Dict[str, Any]] = None,
) -> BiasResult:
    """
    Run a single simulation and return a BiasResult.

    Parameters
    ----------
    method:
        Name of the method (e.g., 'python', 'numpy', 'numpy_threads').
    population_size:
        Number of population values (N).
    sample_size:
        Draws per sample (n).
    repetitions:
        Number of samples / estimates (R).
    workers:
        Number of threads (methods may ignore this).
    seed:
        Base RNG seed; split into independent population and sampler
        streams by split_seed.
    loc, scale:
        Normal parameters for the generated population.
    population:
        Optional pre-built population; skips generation when given.
    method_kwargs:
        Optional dict of method-specific kwargs (e.g., {'max_block': 10**6}).

    Returns
    -------
    BiasResult
    """
    spec = ExperimentSpec(
        population_size=population_size,
        sample_size=sample_size,
        repetitions=repetitions,
        workers=workers,
    )
    fn = get_method(method)
    population_seed, sampler_seed = split_seed(seed)

    if population is None:
        population = make_population(population_size, seed=population_seed, loc=loc, scale=scale)

    kwargs = method_kwargs or {}
    result = fn(spec, population, sampler_seed, **kwargs)
    logger.info(
        "%s: N=%d n=%d R=%d bias=%+.4f%% in %.3fs",
        result.method, population_size, sample_size, repetitions,
        result.relative_bias, result.runtime_s,
    )
    return result


def run_pair(
    method_a: str,
    method_b: str,
    population_size: int,
    sample_size: int,
    repetitions: int,
    workers: int = 1,
    seed: SeedLike = 42,
    loc: float = 0.0,
    scale: float = 1.0,
    method_kwargs_a: Optional[Dict[str, Any]] = None,
    method_kwargs_b: Optional[Dict[str, Any]] = None,
):
    """
    Convenience helper: run two methods on the same population and seed.

    Returns (result_a, result_b).
    """
    population_seed, _ = split_seed(seed)
    population = make_population(population_size, seed=population_seed, loc=loc, scale=scale)

    ra = run_experiment(
        method=method_a,
        population_size=population_size,
        sample_size=sample_size,
        repetitions=repetitions,
        workers=workers,
        seed=seed,
        population=population,
        method_kwargs=method_kwargs_a,
    )
    rb = run_experiment(
        method=method_b,
        population_size=population_size,
        sample_size=sample_size,
        repetitions=repetitions,
        workers=workers,
        seed=seed,
        population=population,
        method_kwargs=method_kwargs_b,
    )
    return ra, rb
