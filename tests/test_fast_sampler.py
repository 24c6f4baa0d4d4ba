import numpy as np
import pytest

from hh_sampling.errors import InvalidArgument
from hh_sampling.fast_sampler import FastSampler


def test_draw_length_and_membership():
    population = np.random.default_rng(0).normal(size=1000)
    s = FastSampler(population, seed=1)
    sample = s.draw(5000)

    assert sample.shape == (5000,)
    assert np.isin(sample, population).all()


def test_same_seed_same_draws():
    population = list(range(100))
    a = FastSampler(population, seed=9)
    b = FastSampler(population, seed=9)

    np.testing.assert_array_equal(a.draw(64), b.draw(64))
    np.testing.assert_array_equal(a.estimate_many(8, 20), b.estimate_many(8, 20))


def test_estimate_many_shape_across_blocks():
    # max_block=25 with n=10 forces blocks of 2 rows and a ragged last block.
    s = FastSampler([1.0, 2.0, 3.0], seed=0, max_block=25)
    means = s.estimate_many(10, 7)

    assert means.shape == (7,)
    assert ((means >= 1.0) & (means <= 3.0)).all()


def test_sample_larger_than_block():
    s = FastSampler([4.0, 4.0], seed=0, max_block=10)
    means = s.estimate_many(50, 3)

    np.testing.assert_array_equal(means, [4.0, 4.0, 4.0])


def test_degenerate_population():
    s = FastSampler([1, 1, 1], seed=3)

    np.testing.assert_array_equal(s.draw(3), [1.0, 1.0, 1.0])
    assert s.estimate(3) == 1.0
    assert s.population_mean() == 1.0
    assert s.population_size() == 3


def test_population_is_read_only_copy():
    population = np.array([1.0, 2.0])
    s = FastSampler(population, seed=0)
    population[:] = 0.0

    assert s.population_mean() == 1.5


def test_accepts_seed_sequence():
    child_a, child_b = np.random.SeedSequence(5).spawn(2)
    a = FastSampler(range(100), seed=child_a)
    b = FastSampler(range(100), seed=child_b)

    assert not np.array_equal(a.draw(50), b.draw(50))


@pytest.mark.parametrize("n, reps", [(0, 1), (1, 0), (-1, 5)])
def test_invalid_counts(n, reps):
    s = FastSampler([1.0, 2.0], seed=0)
    with pytest.raises(InvalidArgument):
        s.estimate_many(n, reps)


def test_invalid_population_and_block():
    with pytest.raises(InvalidArgument):
        FastSampler([])
    with pytest.raises(InvalidArgument):
        FastSampler([1.0], max_block=0)


def test_numpy_integer_seed_matches_int_seed():
    a = FastSampler(range(100), seed=np.int64(12))
    b = FastSampler(range(100), seed=12)

    np.testing.assert_array_equal(a.draw(30), b.draw(30))


@pytest.mark.parametrize("seed", [-1, 0.5, "1"])
def test_invalid_seed_rejected(seed):
    with pytest.raises(InvalidArgument):
        FastSampler([1.0, 2.0], seed=seed)
