"""Classic algorithms and data structures: primes, digits, arithmetic, sorting,
searching, dynamic programming, linked lists, trees, stacks, queues,
expressions, matrices, strings, formulas and text patterns."""

__version__ = "0.1.0"