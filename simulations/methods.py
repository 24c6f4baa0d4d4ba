# simulations/methods.py

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging
from typing import Callable, Dict, List, Sequence

import numpy as np

from .common import ExperimentSpec, BiasResult, Timer

from hh_sampling.errors import InvalidArgument, SeedLike, check_seed
from hh_sampling.estimator import bias_reference_mean
from hh_sampling.fast_sampler import FastSampler
from hh_sampling.sampler import ReferenceSampler

logger = logging.getLogger(__name__)


def _check_population(spec: ExperimentSpec, population: Sequence[float]) -> float:
    if len(population) != spec.population_size:
        raise InvalidArgument(
            f"population size mismatch: spec says {spec.population_size}, "
            f"got {len(population)}"
        )
    return bias_reference_mean(population)


def simulate_python(spec: ExperimentSpec, population: Sequence[float], seed: SeedLike) -> BiasResult:
    """
    Pure Python reference: one random.randrange call per draw, one sample
    per repetition.
    """
    true_mean = _check_population(spec, population)
    sampler = ReferenceSampler(population, seed=seed)

    with Timer() as t:
        estimates = [sampler.estimate(spec.sample_size) for _ in range(spec.repetitions)]

    return BiasResult(
        method="python",
        spec=spec,
        estimates=estimates,
        population_mean=true_mean,
        runtime_s=t.elapsed_s,
        meta={"engine": "random.Random"},
    )


def simulate_numpy(
    spec: ExperimentSpec,
    population: Sequence[float],
    seed: SeedLike,
    max_block: int = 1_000_000,
) -> BiasResult:
    """
    Vectorized NumPy engine: whole blocks of samples are drawn with a single
    Generator.integers call and reduced with a row mean.
    """
    true_mean = _check_population(spec, population)
    sampler = FastSampler(population, seed=seed, max_block=max_block)

    with Timer() as t:
        estimates = sampler.estimate_many(spec.sample_size, spec.repetitions)

    return BiasResult(
        method="numpy",
        spec=spec,
        estimates=estimates.tolist(),
        population_mean=true_mean,
        runtime_s=t.elapsed_s,
        meta={"engine": "numpy.random.Generator", "max_block": max_block},
    )


def _split_repetitions(repetitions: int, workers: int) -> List[int]:
    """
    Split repetitions into at most `workers` non-empty chunks; the last chunk
    takes the remainder.
    """
    workers = min(workers, repetitions)
    per_worker = repetitions // workers
    chunks = [per_worker] * workers
    chunks[-1] += repetitions % workers
    return chunks


def simulate_numpy_threads(
    spec: ExperimentSpec,
    population: Sequence[float],
    seed: SeedLike,
    max_block: int = 1_000_000,
) -> BiasResult:
    """
    NumPy engine with repetitions spread over spec.workers threads.

    We model the repetition loop as a parallel reduce:
      - The seed (an int or an existing SeedSequence) is spawned into one child
        per task, so every task owns an independent Generator.
      - Each task computes its chunk of estimates with its own FastSampler.
      - Chunks are concatenated in task order, so the result depends only on
        (seed, workers), never on thread scheduling.
    """
    true_mean = _check_population(spec, population)
    values = np.asarray(population, dtype=np.float64)

    chunks = _split_repetitions(spec.repetitions, spec.workers)
    seed = check_seed(seed)
    if not isinstance(seed, np.random.SeedSequence):
        seed = np.random.SeedSequence(seed)
    children = seed.spawn(len(chunks))

    def run_chunk(reps: int, child: np.random.SeedSequence) -> np.ndarray:
        sampler = FastSampler(values, seed=child, max_block=max_block)
        return sampler.estimate_many(spec.sample_size, reps)

    with Timer() as t:
        with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
            parts = list(pool.map(run_chunk, chunks, children))
        estimates = np.concatenate(parts)

    logger.debug("numpy_threads: %d chunks of sizes %s", len(chunks), chunks)

    return BiasResult(
        method="numpy_threads",
        spec=spec,
        estimates=estimates.tolist(),
        population_mean=true_mean,
        runtime_s=t.elapsed_s,
        meta={"engine": "numpy.random.Generator", "workers": len(chunks), "chunks": chunks},
    )


# --- Registry / dispatch -----------------------------------------------------

def get_method(name: str) -> Callable[..., BiasResult]:
    name = name.strip().lower()
    if name not in METHODS:
        raise InvalidArgument(f"unknown method '{name}'. Available: {sorted(METHODS.keys())}")
    return METHODS[name]


# METHODS maps method name -> function.
# Note: the numpy methods take an extra max_block parameter; callers can pass it.
METHODS: Dict[str, Callable[..., BiasResult]] = {
    "python": simulate_python,
    "numpy": simulate_numpy,
    "numpy_threads": simulate_numpy_threads,
}
