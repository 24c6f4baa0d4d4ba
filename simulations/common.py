# simulations/common.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple
import math
import time

from hh_sampling.errors import InvalidArgument, check_count
from hh_sampling.estimator import relative_bias


@dataclass(frozen=True)
class ExperimentSpec:
    """
    Common experiment parameters shared across all simulations.
    """
    population_size: int
    sample_size: int
    repetitions: int
    workers: int = 1  # threads used by parallel methods

    def __post_init__(self) -> None:
        check_count(self.population_size, "population_size")
        check_count(self.sample_size, "sample_size")
        check_count(self.repetitions, "repetitions")
        check_count(self.workers, "workers")


@dataclass(frozen=True)
class SummaryStats:
    """
    Basic summary stats for the per-repetition estimates.
    """
    min: float
    max: float
    mean: float
    std: float  # population stddev


def summarize_estimates(estimates: Sequence[float]) -> SummaryStats:
    """
    Compute min/max/mean/std over the estimates (population stddev).
    Stddev computed via a two-pass method for clarity.
    """
    if not estimates:
        raise InvalidArgument("estimates must be non-empty")

    n = len(estimates)
    mean = sum(estimates) / n

    var_acc = 0.0
    for e in estimates:
        d = e - mean
        var_acc += d * d
    std = math.sqrt(var_acc / n)

    return SummaryStats(min=min(estimates), max=max(estimates), mean=mean, std=std)


@dataclass
class BiasResult:
    """
    Common return type for all simulations.
    """
    method: str
    spec: ExperimentSpec
    estimates: List[float]
    population_mean: float

    stats: SummaryStats = field(init=False)
    average_estimate: float = field(init=False)
    relative_bias: float = field(init=False)
    runtime_s: Optional[float] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Sanity: one estimate per repetition
        if len(self.estimates) != self.spec.repetitions:
            raise InvalidArgument(
                f"estimate count mismatch: expected {self.spec.repetitions}, "
                f"got {len(self.estimates)}"
            )

        self.stats = summarize_estimates(self.estimates)
        self.average_estimate = self.stats.mean
        self.relative_bias = relative_bias(self.average_estimate, self.population_mean)


class Timer:
    """
    Tiny timing helper for simulations.
    Usage:
        with Timer() as t:
            ...
        elapsed = t.elapsed_s
    """
    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.elapsed_s: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._start is not None:
            self.elapsed_s = time.perf_counter() - self._start


def common_x_range(results: List[BiasResult]) -> Tuple[float, float]:
    """
    Compute a shared (xmin, xmax) across multiple results for 'same x-axis'
    histogram comparisons.
    """
    if not results:
        raise InvalidArgument("results must be non-empty")

    xmin = min(r.stats.min for r in results)
    xmax = max(r.stats.max for r in results)
    if xmin == xmax:
        # Degenerate populations give a single value; widen so hist() has a range.
        xmin, xmax = xmin - 0.5, xmax + 0.5
    return xmin, xmax


def format_result_line(r: BiasResult) -> str:
    """
    Human-friendly one-liner for printing in compare tools.
    """
    s = r.stats
    return (
        f"{r.method}: avg={r.average_estimate:.6f}, true={r.population_mean:.6f}, "
        f"bias={r.relative_bias:+.4f}%, sd={s.std:.6f}"
        + (f", runtime={r.runtime_s:.3f}s" if r.runtime_s is not None else "")
    )
