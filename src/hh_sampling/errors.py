import numbers
from typing import Sized, Union

import numpy as np

SeedLike = Union[int, np.random.SeedSequence, None]


class InvalidArgument(ValueError):
    """
    Raised when a sampling or simulation call receives arguments it cannot
    work with: an empty population, a non-positive sample size or repetition
    count, or a population whose mean is zero.

    Subclasses ValueError so callers that already catch ValueError keep
    working.
    """


def check_count(value: int, name: str) -> int:
    """
    Validate a sample size / repetition count: an integer >= 1.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgument(f"{name} must be >= 1, got {value}")
    return int(value)


def check_population(population: Sized) -> int:
    """
    Validate a population and return its size.
    """
    size = len(population)
    if size == 0:
        raise InvalidArgument("population must be non-empty")
    return size


def check_seed(seed: SeedLike) -> SeedLike:
    """
    Validate a random seed: None, a non-negative integer (NumPy integers
    included, returned as int), or a numpy SeedSequence.
    """
    if seed is None or isinstance(seed, np.random.SeedSequence):
        return seed
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        raise InvalidArgument(f"seed must be None, an integer or a SeedSequence, got {seed!r}")
    if seed < 0:
        raise InvalidArgument(f"seed must be >= 0, got {seed}")
    return int(seed)
