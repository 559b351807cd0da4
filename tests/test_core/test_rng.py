import time

import numpy as np
import pytest

from core.errors import InvalidRatioError, LabelLengthMismatchError, SplitError
from core.rng import make_rng, resolve_seed


def test_resolve_seed_explicit():
    assert resolve_seed(42) == 42


def test_resolve_seed_zero_uses_time():
    before = int(time.time())
    seed = resolve_seed(0)
    assert before <= seed <= int(time.time())


def test_resolve_seed_negative():
    with pytest.raises(ValueError):
        resolve_seed(-3)


def test_make_rng_is_reproducible():
    rng_a, seed_a = make_rng(123)
    rng_b, seed_b = make_rng(123)
    assert seed_a == seed_b == 123
    np.testing.assert_array_equal(rng_a.permutation(20), rng_b.permutation(20))


def test_make_rng_returns_independent_generators():
    rng_a, _ = make_rng(7)
    rng_b, _ = make_rng(7)
    rng_a.permutation(10)
    # Advancing one generator leaves the other untouched.
    np.testing.assert_array_equal(rng_b.permutation(10), make_rng(7)[0].permutation(10))


def test_error_hierarchy():
    assert issubclass(InvalidRatioError, SplitError)
    assert issubclass(InvalidRatioError, ValueError)
    assert issubclass(LabelLengthMismatchError, SplitError)
    err = LabelLengthMismatchError(3, 4)
    assert (err.n_labels, err.n_points) == (3, 4)
    assert 'between 0.0 and 1.0' in str(InvalidRatioError(2.0))
