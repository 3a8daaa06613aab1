"""Algebraic laws checked on seeded random integer matrices."""

from __future__ import annotations

import numpy as real_numpy
import pytest

from densematrix import Matrix, ShapeMismatchError

SEEDS = range(6)


def _random(rng: real_numpy.random.Generator, rows: int, cols: int) -> Matrix:
    return Matrix(rng.integers(-9, 10, size=(rows, cols)).tolist())


def _shape(rng: real_numpy.random.Generator):
    return int(rng.integers(1, 6)), int(rng.integers(1, 6))


@pytest.mark.parametrize("seed", SEEDS)
def test_transpose_is_an_involution(backend, seed):
    rng = real_numpy.random.default_rng(seed)
    m = _random(rng, *_shape(rng))
    assert m.transpose().transpose() == m


@pytest.mark.parametrize("seed", SEEDS)
def test_transpose_swaps_shape(backend, seed):
    rng = real_numpy.random.default_rng(seed)
    m = _random(rng, *_shape(rng))
    t = m.transpose()
    assert t.rows() == m.cols()
    assert t.cols() == m.rows()
    for i in range(m.rows()):
        for j in range(m.cols()):
            assert t.get(j, i) == m.get(i, j)


@pytest.mark.parametrize("seed", SEEDS)
def test_addition_commutes(backend, seed):
    rng = real_numpy.random.default_rng(seed)
    rows, cols = _shape(rng)
    a = _random(rng, rows, cols)
    b = _random(rng, rows, cols)
    assert a + b == b + a


@pytest.mark.parametrize("seed", SEEDS)
def test_self_subtraction_is_zero_fill(backend, seed):
    rng = real_numpy.random.default_rng(seed)
    rows, cols = _shape(rng)
    a = _random(rng, rows, cols)
    assert a - a == Matrix.fill(rows, cols, 0)


@pytest.mark.parametrize("seed", SEEDS)
def test_product_shape_law(backend, seed):
    rng = real_numpy.random.default_rng(seed)
    m, k = _shape(rng)
    n = int(rng.integers(1, 6))
    product = _random(rng, m, k) * _random(rng, k, n)
    assert product.shape == (m, n)


@pytest.mark.parametrize("seed", SEEDS)
def test_product_distributes_over_addition(backend, seed):
    rng = real_numpy.random.default_rng(seed)
    m, k = _shape(rng)
    n = int(rng.integers(1, 6))
    a = _random(rng, m, k)
    b = _random(rng, k, n)
    c = _random(rng, k, n)
    assert a * (b + c) == (a * b) + (a * c)


@pytest.mark.parametrize("seed", SEEDS)
def test_product_matches_numpy(seed):
    rng = real_numpy.random.default_rng(seed)
    m, k = _shape(rng)
    n = int(rng.integers(1, 6))
    a = _random(rng, m, k)
    b = _random(rng, k, n)
    expected = real_numpy.array(a.to_list()) @ real_numpy.array(b.to_list())
    assert (a * b).to_list() == expected.tolist()


@pytest.mark.parametrize("seed", SEEDS)
def test_incompatible_shapes_always_raise(backend, seed):
    rng = real_numpy.random.default_rng(seed)
    rows, cols = _shape(rng)
    a = _random(rng, rows, cols)
    b = _random(rng, rows + 1, cols + 2)
    with pytest.raises(ShapeMismatchError):
        a + b
    with pytest.raises(ShapeMismatchError):
        a - b
    with pytest.raises(ShapeMismatchError):
        a * _random(rng, cols + 1, rows)
