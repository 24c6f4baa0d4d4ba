import random
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .errors import SeedLike, check_count, check_population, check_seed
from .estimator import hansen_hurwitz_mean


def sample_with_replacement(
    population: Sequence[float],
    n: int,
    rng: Optional[random.Random] = None,
) -> List[float]:
    """
    Draw n elements uniformly at random, with replacement, from population.

    Each draw picks an index in [0, N) independently; indices may repeat and
    the order of draws is the order of the output. The random source is an
    explicit handle so results are reproducible without touching the
    process-wide `random` state. When rng is None a fresh unseeded
    random.Random is used.
    """
    size = check_population(population)
    n = check_count(n, "n")

    if rng is None:
        rng = random.Random()

    randrange = rng.randrange
    return [population[randrange(size)] for _ in range(n)]


class ReferenceSampler:
    """
    ReferenceSampler (Reference Implementation)

    Samples with replacement from a fixed population and turns each sample
    into a Hansen-Hurwitz estimate of the population mean.

    IMPORTANT NOTES:

    - Every draw is a separate call into random.Random, so a sample of size n
      costs n interpreter round trips.
    - This is done for clarity, not performance. FastSampler samples the same
      distribution with NumPy.

    The population is copied into a tuple on construction so that a caller
    mutating its own list cannot change a run halfway through.

    This code is:
      - single-threaded
      - not thread-safe (one random.Random per instance)
    """

    def __init__(
        self,
        population: Sequence[float],
        seed: SeedLike = None,
    ):
        check_population(population)
        seed = check_seed(seed)
        if isinstance(seed, np.random.SeedSequence):
            # random.Random only takes plain ints; fold the sequence into 64 bits.
            seed = int(seed.generate_state(1, np.uint64)[0])

        self._population: Tuple[float, ...] = tuple(population)
        self._rng = random.Random(seed)

    # ------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------

    def draw(self, n: int) -> List[float]:
        """
        Draw a sample of size n with replacement.
        """
        return sample_with_replacement(self._population, n, rng=self._rng)

    def estimate(self, n: int) -> float:
        """
        Draw a fresh sample of size n and return its Hansen-Hurwitz mean.
        """
        return hansen_hurwitz_mean(self.draw(n))

    # ------------------------------------------------------------
    # Introspection (read-only)
    # ------------------------------------------------------------

    def population_size(self) -> int:
        return len(self._population)

    def population_mean(self) -> float:
        return sum(self._population) / len(self._population)
