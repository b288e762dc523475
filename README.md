# algokit

A small collection of classic data structures and algorithms, together with
solutions to a set of well-known programming-contest problems, written as
ordinary Python functions and classes. It has no dependencies beyond the
standard library.

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
| `algokit.binary_tree` | `TreeNode`, `BinarySearchTree` (insert, find, in-order successor, mirroring, root deletion, iteration in order), `same_tree` |
| `algokit.heap` | `MinHeap` with `push`, `minimum`, `pop_min`, bottom-up construction with `from_iterable` and a level-by-level `render` |
| `algokit.dynamic` | `catalan`, `max_subarray_sum`, `combination` and `combination_dp`, `fibonacci` and `fibonacci_dp`, `rod_cut` |
| `algokit.search` | `binary_search` over a sorted sequence and `search_rotated` over a rotated sorted sequence that may hold duplicates |
| `algokit.polynomial` | `Term` and `Polynomial`, terms kept in ascending exponent order, with `+` merging two polynomials |
| `algokit.sparse_matrix` | `SparseMatrix` of (row, column, value) triples with `transpose`, `to_dense` and `render` |
| `algokit.hanoi` | `Move`, `hanoi_moves` (a generator) and `describe_moves` |
| `algokit.concurrency` | Thread demonstrations: `parallel_sums`, a bounded `producer_consumer`, and `opposite_lock_order`, which reports whether two threads taking two locks in opposite orders would deadlock |
| `algokit.cpe_numbers` | Number puzzles: 3n+1 cycle lengths, polynomial derivatives, 2011 weekdays, gcd sums, Jolly Jumpers, odd sums, carry counting, sorting by remainder, digit roots, median distance, divisibility by 11, hartals, the infinite hotel and turn-based win probability |
| `algokit.cpe_text` | Text puzzles: `common_permutation`, `decode_mad_man`, `rotate_sentences`, `tex_quotes`, `letter_frequencies` |
| `algokit.cli` | The `algokit` command |

## Examples

```python
from algokit.dynamic import catalan, max_subarray_sum, rod_cut, fibonacci_dp
from algokit.search import binary_search
from algokit.heap import MinHeap
from algokit.cpe_numbers import cycle_length
from algokit.cpe_text import tex_quotes

catalan(5)                                         # 42
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])  # 6
rod_cut(4, [1, 5, 8, 9])                           # 10
fibonacci_dp(20)                                   # 6765

binary_search([1, 2, 3, 4, 5, 7, 8, 10, 23, 29, 32], 29)  # 9
binary_search([1, 2, 3, 4, 5, 7, 8, 10, 23, 29, 32], 40)  # None

heap = MinHeap.from_iterable([10, 20, 15, 30, 40, 50, 100, 25, 35])
heap.minimum()                                     # 10
heap.pop_min()                                     # 10
print(heap.render())

cycle_length(22)                                   # 16
tex_quotes('"to be"')                              # "``to be''"
```

A binary search tree:

```python
from algokit.binary_tree import BinarySearchTree

tree = BinarySearchTree([5, 10, 2, 3, 8, 7])

list(tree)                 # [2, 3, 5, 7, 8, 10]
node = tree.find(3)
tree.successor(node).value # 5
tree.delete_root()         # 5; the root is refilled from its left subtree
```

Polynomials and sparse matrices:

```python
from algokit.polynomial import Polynomial
from algokit.sparse_matrix import SparseMatrix

p = Polynomial.from_terms([6, -1, 2], [0, 1, 2])
str(p + p)                 # "+12*x^0-2*x^1+4*x^2"

m = SparseMatrix(2, 3, [(0, 1, 8.0), (1, 2, 5.0)])
m.transpose().to_dense()   # [[0.0, 0.0], [8.0, 0.0], [0.0, 5.0]]
```

## Command line

The package installs an `algokit` command that reads a puzzle's input from
standard input and prints one answer per case:

```
algokit cycle    # pairs of integers: largest 3n+1 cycle length between them
algokit common   # pairs of lines: their common permutation
algokit carry    # pairs of integers: carry operations, stopping at "0 0"
```

For example:

```
echo "1 10 100 200" | algokit cycle
```

prints `20` and `125`. Invalid input is reported on standard error with exit
status 1. See `algokit --help` for the list of subcommands.

## What it does not do

The package has no sorting routines of its own; use Python's built-in
`sorted` and `list.sort`. The command line covers only the three puzzles
listed above; every other routine is available from Python only.