# algokit

A collection of classic algorithms and data structures, written as plain,
readable Python with no third-party dependencies. It is meant for study and
experimentation: each module covers one topic and can be read on its own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.primes` | `is_prime`, `sieve`, `count_primes`, `primes_in_range`, `primes_between`, `primes_below` |
| `algokit.digits` | `digit_sum`, `reverse_number`, `is_armstrong`, `is_magic_number`, `to_binary`, `convert_base` |
| `algokit.arithmetic` | `gcd`, `factorial`, `factorial_digits`, `fibonacci`, `sum_first_n`, `sum_first_n_even`, `power`, `factors`, `russian_peasant_multiply`, `binomial_mod`, `stirling_second_kind`, `power_sum_mod`, `count_notes`, `is_leap_year`, `new_year_weekday` |
| `algokit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `hoare_quick_sort`, `heap_sort`, `counting_sort`, `radix_sort` |
| `algokit.searching` | `binary_search`, `linear_search` |
| `algokit.dynamic` | `min_coins`, `min_cost_path`, `matrix_chain_order`, `max_nesting_depth` |
| `algokit.circular_lists` | `CircularList`, `CircularDoublyList` |
| `algokit.linked_list` | `LinkedList`, `OrderedList` (kept in descending order), `LinkedStack` |
| `algokit.polynomial` | `Term`, `Polynomial` in x, y and z |
| `algokit.bst` | `BinarySearchTree` |
| `algokit.family_tree` | `TreeNode`, `FamilyTree`, `build_sample_tree` and a command-line report |
| `algokit.stacks` | `Stack`, `TwoStacks`, `StackOverflow`, `StackUnderflow` |
| `algokit.queues` | `Queue`, `CircularQueue`, `QueueFull`, `QueueEmpty` |
| `algokit.expressions` | `evaluate_postfix`, `infix_to_postfix` |
| `algokit.matrices` | `add`, `subtract`, `multiply`, `parallel_multiply`, `strassen` |
| `algokit.bounded_array` | `BoundedArray` |
| `algokit.strings` | `is_anagram`, `first_unique_char`, `is_palindrome`, `replace_pattern`, `vigenere_encrypt` |
| `algokit.formulas` | `calculate`, `solve_quadratic`, `bhaskara`, `fahrenheit_to_celsius`, `celsius_to_fahrenheit`, `simple_interest`, `estimate_pi`, `hanoi_moves`, `fizzbuzz` |
| `algokit.patterns` | `half_pyramid`, `number_triangle`, `pascal_triangle`, `alphabet_diamond`, `hollow_square` |

The sorting functions accept any iterable and return a new ascending list;
their input is left untouched. The pattern functions return the pattern as
text, each line ending in a newline.

## Examples

```python
from algokit.primes import is_prime
from algokit.arithmetic import gcd, fibonacci
from algokit.digits import convert_base
from algokit.sorting import merge_sort
from algokit.dynamic import min_coins, matrix_chain_order
from algokit.expressions import infix_to_postfix
from algokit.strings import vigenere_encrypt

is_prime(7)                           # True
gcd(12, 18)                           # 6
fibonacci(5)                          # [0, 1, 1, 2, 3]
convert_base("1010", 2, 10)           # "10"
merge_sort([12, 11, 13, 5, 6, 7])     # [5, 6, 7, 11, 12, 13]
min_coins([1, 2, 5], 11)              # 3
matrix_chain_order([10, 20, 30])      # (6000, "(A1 A2)")
infix_to_postfix("(a+b)")             # "ab+"
vigenere_encrypt("Hello", "b")        # "Ifmmp"
```

The data structures behave like ordinary Python containers: they can be
iterated and measured with `len()`.

```python
from algokit.linked_list import LinkedList
from algokit.stacks import Stack

items = LinkedList([1, 2, 3])
items.append(4)
items.reverse()
list(items)                           # [4, 3, 2, 1]

stack = Stack(4)
stack.push(1)
stack.push(2)
stack.pop()                           # 2
```

Bounded containers raise an exception when an operation cannot be carried
out: `Stack` and `TwoStacks` raise `StackOverflow` (an `OverflowError`) or
`StackUnderflow` (an `IndexError`); `Queue` and `CircularQueue` raise
`QueueFull` (an `OverflowError`) or `QueueEmpty` (an `IndexError`). A
`Queue` does not reuse slots freed by `dequeue`, so at most `capacity`
values can ever be enqueued into it; `CircularQueue` wraps round its buffer.

## Command line

The family tree report reads a file that starts with the number of queries,
followed by one node letter per query, and writes to a second file the
in-order traversal and the leaves of a built-in fourteen-member sample tree,
then for each queried node its generation, the members of that generation,
its children, grandchildren and sibling:

```
algokit-family-tree queries.txt report.txt
```

The same command can be run as `python -m algokit.family_tree`. If the input
file cannot be read, a message is printed to standard error and the exit
status is 1.

## What it does not do

This is a library of functions and classes. Apart from the family tree
report there are no commands: no interactive menus, no prompts and no
reading of input from the terminal. Nothing is stored between runs.