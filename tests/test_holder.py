from __future__ import annotations

import numpy as np

from cachematrix import CacheMatrix, cache_solve, make_cache_matrix


def test_new_holder_has_no_cached_inverse():
    m = CacheMatrix(np.eye(3))
    assert m.get_cached_inverse() is None
    assert not m.has_cached_inverse()
    assert m.stats.calls == 0


def test_get_matrix_returns_stored_object():
    x = np.arange(4.0).reshape(2, 2)
    m = CacheMatrix(x)
    assert m.get_matrix() is x


def test_set_cached_inverse_overwrites():
    m = CacheMatrix(np.eye(2))
    first = np.eye(2)
    second = 2 * np.eye(2)
    m.set_cached_inverse(first)
    m.set_cached_inverse(second)
    assert m.get_cached_inverse() is second


def test_set_matrix_clears_cache():
    m = CacheMatrix(np.eye(2))
    m.set_cached_inverse(np.eye(2))
    new = np.array([[1.0, 2.0], [3.0, 4.0]])
    m.set_matrix(new)
    assert m.get_matrix() is new
    assert m.get_cached_inverse() is None


def test_set_matrix_does_not_validate_shape():
    m = CacheMatrix(np.eye(2))
    m.set_matrix(np.ones((2, 3)))
    assert m.get_matrix().shape == (2, 3)


def test_make_cache_matrix_default_is_empty():
    m = make_cache_matrix()
    assert m.get_matrix().shape == (0, 0)
    assert m.get_cached_inverse() is None


def test_holders_are_independent():
    a = make_cache_matrix(np.eye(2))
    b = make_cache_matrix(np.eye(2))
    a.set_cached_inverse(np.eye(2))
    assert b.get_cached_inverse() is None


def test_repr_mentions_cache_state():
    m = make_cache_matrix(np.eye(2))
    assert "cached=False" in repr(m)
    m.set_cached_inverse(np.eye(2))
    assert "cached=True" in repr(m)


def test_default_holder_solves_to_empty_inverse():
    m = make_cache_matrix()
    inv = cache_solve(m)
    assert inv.shape == (0, 0)
    assert m.get_cached_inverse() is inv
