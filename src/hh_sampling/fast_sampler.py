import logging
from typing import Sequence

import numpy as np

from .errors import SeedLike, check_count, check_population, check_seed

logger = logging.getLogger(__name__)

# Upper bound on indices materialized at once by estimate_many (8 MB of int64).
DEFAULT_MAX_BLOCK = 1_000_000


class FastSampler:
    """
    FastSampler (Engineering Sketch)

    This class samples the SAME distribution as ReferenceSampler:

        each of the n draws picks index i in [0, N) with probability 1/N

    but draws all indices of a sample (or of a block of samples) in one call
    to numpy.random.Generator.integers and gathers them with fancy indexing.

    Key ideas:
      - The population is held as a contiguous float64 array
      - estimate_many() draws a 2-D (repetitions x n) index block and takes
        row means, so R repetitions cost R / rows_per_block generator calls
      - Blocks are capped at max_block indices to keep memory flat for
        large R * n

    IMPORTANT:
      - Single-threaded
      - Not thread-safe (one Generator per instance); give each thread its
        own FastSampler with an independent seed
    """

    def __init__(
        self,
        population: Sequence[float],
        seed: SeedLike = None,
        max_block: int = DEFAULT_MAX_BLOCK,
    ):
        check_population(population)
        self.max_block = check_count(max_block, "max_block")

        values = np.array(population, dtype=np.float64)
        values.setflags(write=False)
        self._values = values
        self._rng = np.random.default_rng(check_seed(seed))

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def draw(self, n: int) -> np.ndarray:
        """
        Draw a sample of size n with replacement.
        """
        n = check_count(n, "n")
        idx = self._rng.integers(0, self._values.shape[0], size=n)
        return self._values[idx]

    def estimate(self, n: int) -> float:
        """
        Draw a fresh sample of size n and return its Hansen-Hurwitz mean.
        """
        return float(self.draw(n).mean())

    def estimate_many(self, n: int, repetitions: int) -> np.ndarray:
        """
        Return a float64 vector of `repetitions` independent estimates, each
        the mean of a fresh sample of size n.
        """
        n = check_count(n, "n")
        repetitions = check_count(repetitions, "repetitions")

        size = self._values.shape[0]
        rows = max(1, self.max_block // n)
        means = np.empty(repetitions, dtype=np.float64)

        for start in range(0, repetitions, rows):
            stop = min(start + rows, repetitions)
            idx = self._rng.integers(0, size, size=(stop - start, n))
            means[start:stop] = self._values[idx].mean(axis=1)

        logger.debug(
            "estimate_many: n=%d repetitions=%d rows_per_block=%d",
            n, repetitions, rows,
        )
        return means

    # ------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------

    def population_size(self) -> int:
        return int(self._values.shape[0])

    def population_mean(self) -> float:
        return float(self._values.mean())
