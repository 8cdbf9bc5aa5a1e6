# algonotes

A small collection of classic algorithms and data structures written as plain,
importable Python. No third-party dependencies.

## Contents

- `algonotes.sorting`: `bubble_sort`, `counting_sort`, `insertion_sort`,
  `merge_sort`, `quick_sort`, `radix_sort`, `selection_sort`, `sort_strings`.
  Each takes an iterable and returns a new sorted list. `counting_sort`
  accepts integers in `0..limit` (default limit 100) and `radix_sort`
  non-negative integers; other values raise `ValueError`.
- `algonotes.expressions`: `infix_to_postfix` (single-character operands,
  operators `+ - * / % ^`, raises `ExpressionError` on unbalanced
  parentheses), `evaluate_postfix` (letter operands, values given as a mapping
  by name or as an iterable in order of appearance; integer division
  truncates toward zero), `precedence`, `apply_operator`, `ExpressionError`.
- `algonotes.numbers`: `is_armstrong`, `binary_search` (index or `None`),
  `bitwise_add` (32-bit signed), `is_odd`, `is_power_of_two`, `to_binary`,
  `fibonacci`, `gcd`, `gcd_subtract`, `reverse_digits`,
  `is_palindrome_number`, `is_prime`, `primes_between`, `factorial`,
  `alternating_series`, `swap_xor`.
- `algonotes.matrix`: `multiply` for matrices given as lists of rows;
  `DimensionError` for ragged or mismatched shapes.
- `algonotes.files`: `append_line`, `merge_files` (missing sources are
  skipped), `join_words`.
- `algonotes.structures`: fixed-capacity `Stack`, `Queue` and `CircularQueue`
  (default capacity 10). Adding to a full one raises `CapacityError`; reading
  from an empty one raises `EmptyError`. A `Queue` does not reuse freed slots
  until it empties; a `CircularQueue` does.
- `algonotes.graph`: `bfs` and `dfs` over adjacency matrices, returning the
  visiting order of nodes reachable from the start node.
- `algonotes.polynomial`: `Polynomial`, with `add_term`, `from_coefficients`
  and a readable `str()` such as `3x^2 + 2x + 1`.
- `algonotes.linked`: `SinglyLinkedList` (zero-based positions, with `sort`),
  `DoublyLinkedList` and `CircularLinkedList` (one-based positions),
  `LinkedQueue`, `LinkedStack`. Bad positions raise `IndexError`; removing
  from an empty container raises `EmptyError`.
- `algonotes.bst`: `BinarySearchTree` with `insert`, `delete`, `inorder`,
  `preorder`, `postorder`, `level_order`, `minimum`, `maximum`, `height`,
  membership tests and `len()`. Equal values go to the left subtree.

## Installation

```
pip install .
```

## Examples

```python
from algonotes.sorting import merge_sort
from algonotes.expressions import infix_to_postfix, evaluate_postfix
from algonotes.numbers import gcd, is_prime
from algonotes.bst import BinarySearchTree

merge_sort([5, 2, 7, 1, 9])                  # [1, 2, 5, 7, 9]
infix_to_postfix("a+b*c")                    # "abc*+"
evaluate_postfix("abc*+", {"a": 1, "b": 2, "c": 3})  # 7
gcd(12, 18)                                  # 6
is_prime(13)                                 # True

tree = BinarySearchTree([8, 3, 10, 1, 6])
tree.inorder()                               # [1, 3, 6, 8, 10]
tree.height()                                # 2
```

## The `gite` command

`gite` stages every change, commits it with the given message and pushes, by
running `git add . && git commit -m "<message>" && git push` through the
shell:

```
gite "commit message"
```

Run it inside a git working tree; it needs `git` on your `PATH`. Without a
message it prints a usage line and exits with status 1.

## What it does not do

The package is a library: apart from `gite` there are no interactive
programs or menus. The containers are used through their methods from
Python code, and nothing is read from standard input.

## Running the tests

```
pip install .[test]
pytest
```