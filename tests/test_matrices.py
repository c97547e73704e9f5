import random

import pytest

from algokit.matrices import add, multiply, parallel_multiply, strassen, subtract


def _random_matrix(rng, rows, cols):
    return [[rng.randint(-9, 9) for _ in range(cols)] for _ in range(rows)]


def _identity(n):
    return [[1 if i == j else 0 for j in range(n)] for i in range(n)]


def test_multiply_worked_example():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_by_identity():
    rng = random.Random(1)
    m = _random_matrix(rng, 4, 4)
    assert multiply(m, _identity(4)) == m
    assert multiply(_identity(4), m) == m


def test_multiply_shape():
    rng = random.Random(2)
    product = multiply(_random_matrix(rng, 2, 3), _random_matrix(rng, 3, 5))
    assert len(product) == 2
    assert all(len(row) == 5 for row in product)


def test_multiply_incompatible_shapes():
    with pytest.raises(ValueError):
        multiply([[1, 2, 3]], [[1, 2, 3]])


def test_ragged_matrix_rejected():
    with pytest.raises(ValueError):
        multiply([[1, 2], [3]], [[1], [2]])


def test_add_subtract_round_trip():
    rng = random.Random(3)
    a = _random_matrix(rng, 3, 4)
    b = _random_matrix(rng, 3, 4)
    assert subtract(add(a, b), b) == a
    assert add(a, b) == add(b, a)


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add([[1, 2]], [[1], [2]])
    with pytest.raises(ValueError):
        subtract([[1, 2]], [[1, 2, 3]])


@pytest.mark.parametrize("n", [1, 2, 5, 16, 17, 20, 33])
def test_strassen_matches_plain_product(n):
    rng = random.Random(n)
    a = _random_matrix(rng, n, n)
    b = _random_matrix(rng, n, n)
    assert strassen(a, b) == multiply(a, b)


def test_strassen_rectangular():
    rng = random.Random(10)
    a = _random_matrix(rng, 18, 25)
    b = _random_matrix(rng, 25, 7)
    assert strassen(a, b) == multiply(a, b)


def test_strassen_incompatible_shapes():
    with pytest.raises(ValueError):
        strassen([[1, 2]], [[1, 2]])


@pytest.mark.parametrize("workers", [1, 3, 4, 7])
def test_parallel_matches_plain_product(workers):
    rng = random.Random(workers)
    a = _random_matrix(rng, 5, 6)
    b = _random_matrix(rng, 6, 4)
    assert parallel_multiply(a, b, workers) == multiply(a, b)


def test_parallel_needs_a_worker():
    with pytest.raises(ValueError):
        parallel_multiply([[1]], [[1]], 0)