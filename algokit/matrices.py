"""Integer matrix arithmetic: element-wise sums, naive, threaded and Strassen products."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

__all__ = ["add", "subtract", "multiply", "parallel_multiply", "strassen"]

Matrix = list[list[int]]

_LEAF_SIZE = 16


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return rows, cols


def _check_product(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> tuple[int, int, int]:
    p, q = _shape(a)
    r, s = _shape(b)
    if q != r:
        raise ValueError("matrix multiplication is not possible")
    return p, q, s


def add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of equal shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices differ in shape")
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def subtract(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise difference of two matrices of equal shape."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices differ in shape")
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def _product_rows(rows: Sequence[Sequence[int]], columns: list[tuple[int, ...]]) -> Matrix:
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in rows]


def _columns(b: Sequence[Sequence[int]], width: int) -> list[tuple[int, ...]]:
    return list(zip(*b)) if b else [() for _ in range(width)]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the product of a p-by-q and a q-by-s matrix."""
    _, _, s = _check_product(a, b)
    return _product_rows(a, _columns(b, s))


def parallel_multiply(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], workers: int = 4
) -> Matrix:
    """Multiply with each of ``workers`` threads computing one band of rows."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    p, _, s = _check_product(a, b)
    columns = _columns(b, s)

    def band(rank: int) -> Matrix:
        return _product_rows(a[rank * p // workers : (rank + 1) * p // workers], columns)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        bands = list(pool.map(band, range(workers)))
    return [row for part in bands for row in part]


def _pad(matrix: Sequence[Sequence[int]], size: int) -> Matrix:
    padded = [list(row) + [0] * (size - len(row)) for row in matrix]
    padded.extend([0] * size for _ in range(size - len(matrix)))
    return padded


def _quarters(m: Matrix, half: int) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    top, bottom = m[:half], m[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _strassen(a: Matrix, b: Matrix, n: int) -> Matrix:
    if n <= _LEAF_SIZE:
        return multiply(a, b)
    half = n // 2
    a11, a12, a21, a22 = _quarters(a, half)
    b11, b12, b21, b22 = _quarters(b, half)
    m1 = _strassen(add(a11, a22), add(b11, b22), half)
    m2 = _strassen(add(a21, a22), b11, half)
    m3 = _strassen(a11, subtract(b12, b22), half)
    m4 = _strassen(a22, subtract(b21, b11), half)
    m5 = _strassen(add(a11, a12), b22, half)
    m6 = _strassen(subtract(a21, a11), add(b11, b12), half)
    m7 = _strassen(subtract(a12, a22), add(b21, b22), half)
    c11 = add(add(m1, m4), subtract(m7, m5))
    c12 = add(m3, m5)
    c21 = add(m2, m4)
    c22 = add(subtract(m1, m2), add(m3, m6))
    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def strassen(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Multiply with Strassen's seven-product recursion.

    Blocks of size 16 or less use the plain product; larger operands are
    zero-padded to a power-of-two square and the result is trimmed back.
    """
    p, q, s = _check_product(a, b)
    if p == 0:
        return []
    n = max(p, q, s)
    size = n
    if n > _LEAF_SIZE:
        size = 1
        while size < n:
            size *= 2
    product = _strassen(_pad(a, size), _pad(b, size), size)
    return [row[:s] for row in product[:p]]