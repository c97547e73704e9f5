"""Dynamic-programming problems: coin change, grid paths, matrix chains, nesting."""

from collections.abc import Iterable, Sequence

__all__ = [
    "min_coins",
    "min_cost_path",
    "matrix_chain_order",
    "max_nesting_depth",
]


def min_coins(coins: Iterable[int], value: int) -> int:
    """Return the fewest coins (any number of each) that sum to ``value``.

    Raises ValueError when ``value`` is negative or cannot be made.
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    denominations = [coin for coin in coins if coin > 0]
    best: list[int | None] = [0] + [None] * value
    for amount in range(1, value + 1):
        options = [
            best[amount - coin] + 1
            for coin in denominations
            if coin <= amount and best[amount - coin] is not None
        ]
        best[amount] = min(options, default=None)
    if best[value] is None:
        raise ValueError(f"{value} cannot be made from the given coins")
    return best[value]


def min_cost_path(grid: Sequence[Sequence[int]], row: int, col: int) -> int:
    """Return the cheapest cost from the top-left cell to ``(row, col)``.

    Moves go right, down or diagonally down-right; every visited cell's
    cost is paid, the start and end included.
    """
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    if not (0 <= row < len(grid) and 0 <= col < len(grid[0])):
        raise IndexError(f"position ({row}, {col}) is outside the grid")
    previous: list[int] = []
    for r in range(row + 1):
        current: list[int] = []
        for c in range(col + 1):
            if r == 0 and c == 0:
                best = 0
            elif r == 0:
                best = current[c - 1]
            elif c == 0:
                best = previous[0]
            else:
                best = min(previous[c - 1], current[c - 1], previous[c])
            current.append(best + grid[r][c])
        previous = current
    return previous[col]


def matrix_chain_order(dimensions: Sequence[int]) -> tuple[int, str]:
    """Return the fewest scalar multiplications for a matrix chain and its bracketing.

    Matrix ``Ai`` has shape ``dimensions[i-1] x dimensions[i]``. The
    bracketing reads like ``((A1 A2) A3)``.
    """
    n = len(dimensions) - 1
    if n < 1:
        raise ValueError("need at least two dimensions")
    cost = [[0] * (n + 1) for _ in range(n + 1)]
    split = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n, 0, -1):
        for j in range(i + 1, n + 1):
            best = None
            for k in range(i, j):
                q = cost[i][k] + cost[k + 1][j] + dimensions[i - 1] * dimensions[k] * dimensions[j]
                if best is None or q < best:
                    best = q
                    split[i][j] = k
            cost[i][j] = best

    def bracket(i: int, j: int) -> str:
        if i == j:
            return f"A{i}"
        k = split[i][j]
        return f"({bracket(i, k)} {bracket(k + 1, j)})"

    return cost[1][n], bracket(1, n)


def max_nesting_depth(text: str) -> int:
    """Return the deepest running count of open brackets in ``text``.

    Each '(' opens a level; every other character closes one.
    """
    depth = deepest = 0
    for ch in text:
        depth += 1 if ch == "(" else -1
        deepest = max(deepest, depth)
    return deepest