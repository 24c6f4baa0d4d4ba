from typing import Sequence

from .errors import InvalidArgument, check_population


def hansen_hurwitz_mean(sample: Sequence[float]) -> float:
    """
    Hansen-Hurwitz estimate of the population mean.

    Under equal-probability sampling with replacement every draw has
    selection probability 1/N, so the estimator reduces to the plain
    arithmetic mean of the sampled values.
    """
    n = len(sample)
    if n == 0:
        raise InvalidArgument("sample must be non-empty")
    return sum(sample) / n


def population_mean(population: Sequence[float]) -> float:
    size = check_population(population)
    return sum(population) / size


def _require_nonzero_mean(true_mean: float) -> float:
    if true_mean == 0:
        raise InvalidArgument("relative bias is undefined for a zero population mean")
    return true_mean


def bias_reference_mean(population: Sequence[float]) -> float:
    """
    Population mean to measure relative bias against; rejects a zero mean
    before any sampling happens.
    """
    return _require_nonzero_mean(population_mean(population))


def relative_bias(average_estimate: float, true_mean: float) -> float:
    """
    Relative bias in percent: (average_estimate - true_mean) / true_mean * 100.
    """
    _require_nonzero_mean(true_mean)
    return (average_estimate - true_mean) / true_mean * 100.0
