import random

import numpy as np
import pytest

from hh_sampling.errors import InvalidArgument
from hh_sampling.sampler import ReferenceSampler, sample_with_replacement


def test_sample_has_requested_length_and_population_values():
    population = [0.5, 1.5, 2.5, 3.5, 4.5]
    sample = sample_with_replacement(population, 50, rng=random.Random(1))

    assert len(sample) == 50
    assert set(sample) <= set(population)


def test_sample_can_be_larger_than_population():
    population = [1.0, 2.0]
    sample = sample_with_replacement(population, 100, rng=random.Random(3))

    assert len(sample) == 100
    # With replacement: both values show up and repeat.
    assert set(sample) == {1.0, 2.0}


def test_same_seed_gives_same_sample():
    population = [float(i) for i in range(1000)]
    a = sample_with_replacement(population, 200, rng=random.Random(42))
    b = sample_with_replacement(population, 200, rng=random.Random(42))
    c = sample_with_replacement(population, 200, rng=random.Random(43))

    assert a == b
    assert a != c


def test_does_not_touch_global_random_state():
    random.seed(7)
    expected = random.random()

    random.seed(7)
    sample_with_replacement([1.0, 2.0, 3.0], 10, rng=random.Random(0))
    sample_with_replacement([1.0, 2.0, 3.0], 10)
    assert random.random() == expected


def test_degenerate_population():
    assert sample_with_replacement([1, 1, 1], 3, rng=random.Random(0)) == [1, 1, 1]


def test_full_size_sample_from_standard_normal():
    population = np.random.default_rng(2024).standard_normal(100_000).tolist()
    sample = sample_with_replacement(population, 100_000, rng=random.Random(2024))

    assert len(sample) == len(population)
    assert set(sample) <= set(population)


def test_duplicates_and_non_finite_values_pass_through():
    population = [float("nan"), float("inf"), 2.0, 2.0]
    sample = sample_with_replacement(population, 400, rng=random.Random(5))

    assert len(sample) == 400
    assert any(x != x for x in sample)  # NaN drawn unchanged
    assert float("inf") in sample
    assert 2.0 in sample


@pytest.mark.parametrize("population, n", [([], 1), ([1.0], 0), ([1.0], -3)])
def test_invalid_arguments(population, n):
    with pytest.raises(InvalidArgument):
        sample_with_replacement(population, n, rng=random.Random(0))


def test_non_integer_sample_size_rejected():
    with pytest.raises(InvalidArgument):
        sample_with_replacement([1.0, 2.0], 2.5)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        sample_with_replacement([], 1)


class TestReferenceSampler:
    def test_draw_and_estimate(self):
        s = ReferenceSampler([1, 1, 1], seed=0)

        assert s.draw(3) == [1, 1, 1]
        assert s.estimate(3) == 1
        assert s.population_size() == 3
        assert s.population_mean() == 1

    def test_seeded_instances_agree(self):
        population = [float(i) for i in range(50)]
        a = ReferenceSampler(population, seed=11)
        b = ReferenceSampler(population, seed=11)

        assert [a.estimate(10) for _ in range(5)] == [b.estimate(10) for _ in range(5)]

    def test_population_is_copied(self):
        population = [1.0, 1.0]
        s = ReferenceSampler(population, seed=0)
        population[0] = 100.0

        assert s.draw(10) == [1.0] * 10

    def test_empty_population_rejected(self):
        with pytest.raises(InvalidArgument):
            ReferenceSampler([])

    def test_accepts_numpy_integer_and_seed_sequence(self):
        population = [float(i) for i in range(100)]

        assert ReferenceSampler(population, seed=np.int64(4)).draw(20) == ReferenceSampler(population, seed=4).draw(20)

        a = ReferenceSampler(population, seed=np.random.SeedSequence(4))
        b = ReferenceSampler(population, seed=np.random.SeedSequence(4))
        assert a.draw(20) == b.draw(20)

    @pytest.mark.parametrize("seed", [-5, 2.0, "abc"])
    def test_invalid_seed_rejected(self, seed):
        with pytest.raises(InvalidArgument):
            ReferenceSampler([1.0], seed=seed)
