# coursekit

coursekit provides three groups of tools:

- Ordered search trees: a plain binary search tree, a randomized binary search tree and a 2-3-4 tree.
- Fixed-capacity numbered record tables. A table sorts on one field and saves to and loads from a plain text file. The package includes an interactive menu shell for working with a table.
- A few string, sorting and file-filtering helpers.

It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Search trees

### `coursekit.bst.BinarySearchTree`

An unbalanced binary search tree that holds unique, comparable values.

```python
from coursekit.bst import BinarySearchTree, TraversalOrder

tree = BinarySearchTree([3, 1, 2, 4])
list(tree)                           # [1, 2, 3, 4]
list(reversed(tree))                 # [4, 3, 2, 1]
tree.output(TraversalOrder.LRT)      # post-order: [2, 1, 4, 3]
tree.index_of(3)                     # 2 (zero-based rank)
tree.count_more_than(2)              # 2
tree.balance_factor()                # right height minus left height of the root
tree.front(), tree.back()            # (1, 4)
tree.erase(3)
3 in tree                            # False
```

Behaviour of the main methods:

- **`insert`** ignores duplicates and returns the stored value.
- **`find`, `index_of` and `count_more_than`** raise `KeyError` when the value is absent.
- **`erase`** does nothing when the value is absent.
- **`front` and `back`** raise `IndexError` on an empty tree.

Other methods:

- **`output(order)`** lists the values in pre-order (`TraversalOrder.TLR`), in-order (`LTR`, the default) or post-order (`LRT`).
- **`greater_to_root(value)`** rotates the next larger value up to the root and returns it. It returns `None` if `value` is absent or is the largest value.
- **`merge(other)`** inserts every value of any iterable.
- **`copy()`** returns a new tree.
- **`clear()`** removes every value.

### `coursekit.randtree.RandomizedTree`

A subclass of `BinarySearchTree`.

- **Insertion:** on the way down, a new value becomes the root of the current subtree with a chance of about `1 / (subtree size + 1)`.
- **Erasing:** removing a node merges its two subtrees. The lighter subtree is hung under the heavier one.

Pass a `random.Random` instance to make runs reproducible:

```python
import random
from coursekit.randtree import RandomizedTree

tree = RandomizedTree(range(1, 11), rng=random.Random(0))
list(tree)                           # [1, 2, ..., 10]
tree.erase(7)
len(tree)                            # 9
```

### `coursekit.t234.Tree234`

A balanced 2-3-4 tree. Each node holds one to three keys.

- **Insertion:** `insert` splits full nodes on the way down.
- **Lookup:** `find` returns the stored key.
- **Erasing:** `erase` raises `KeyError` if the key is absent.
- **Other operations:** it supports `in`, `len`, iteration in both directions (`iter`, `reversed`), `copy()` and `clear()`.

```python
from coursekit.t234 import Tree234

tree = Tree234([3, 1, 5, 4, 2, 9, 10, 8, 7, 6])
list(tree)                           # [1, 2, ..., 10]
tree.erase(5)
5 in tree                            # False
```

## Record tables

The module `coursekit.records` provides three classes:

- **`Record`** is a single-word `name` and two integers, `first` and `second`.
- **`Schema`** describes a kind of table:
  - its title and field labels;
  - its capacity;
  - which field it sorts on (0 = name, 1 = first, 2 = second) and whether the sort is descending;
  - the header line of its file, where `{}` stands for the record count;
  - its default file path;
  - the maximum name length;
  - optionally, a numeric field that must be positive for a slot to count as filled.
- **`RecordTable`** holds `capacity` slots, numbered from 1.

`RecordTable` methods:

| Method | What it does |
|---|---|
| `put(number, record)` | Stores a record and marks the table unsorted. |
| `get(number)` | Returns the record in a slot. Raises `IndexError` for a number outside the table and `KeyError` for an empty slot. |
| `sort()` | Sorts the records and moves empty slots to the end. Returns `False` if the table was already sorted. |
| `entries()` | Sorts if needed, then returns `(number, record)` pairs. |
| `dumps()` / `loads(text)` | Convert the table to and from its text form: a header line, then one `name first second` line per record. `loads` raises `ValueError` on malformed text. |
| `save(path=None)` / `load(path=None)` | Write and read the file. Both default to the schema's path. |

`compare_names(left, right)` is a character-by-character name comparison. It returns `-1` when `left` is greater and `1` otherwise.

### Ready-made variants

`coursekit.variants.variant_names()` lists the built-in schemas. `get_schema(name)` returns one of them, or raises `KeyError` if the name is unknown.

| Variant | Records | Capacity | Sorted by | Header | File |
|---|---|---|---|---|---|
| 3-1 | Books | 300 | price, ascending | `~N~` | `books.txt` |
| 3-3 | Firms | 200 | capital, ascending | `<N>` | `file.db` |
| 3-9 | Firms | 200 | capital, ascending | `#N` | `database.txt` |
| 3-10 | Employees | 300 | year of birth, descending | `[N]` | `local.db` |
| 3-19 | Routes | 100 | destination, ascending | `> N` | `routes_file.txt` |
| 4-1 | Parts | 100 | name, ascending | `N` | `detailsDb.txt` |
| 4-8 | Students | 100 | year, ascending | `N` | `students.db` |
| 4-11 | Firms | 200 | capital, descending | `#N` | `FirmsDb.txt` |
| 4-20 | Students | 300 | last name, descending | `(N)` | `database.txt` |

## Interactive shell

```
coursekit [VARIANT] [--path FILE]
```

This starts a menu-driven session over an empty table of the chosen variant. The default variant is `4-20`. `--path` replaces the file that commands 5 and 6 use.

Input is read as whitespace-separated words, so several answers can be given on one line. The session ends on command `0` or at end of input.

| Command | Action |
|---|---|
| 1 | Enter a record under any number |
| 2 | Show the record with a given number |
| 3 | Sort the table |
| 4 | List all records in sorted order |
| 5 | Save the table to its file |
| 6 | Load the table from its file |
| 0 | Quit |

You can also drive the shell from code. `Shell(table, stdin, stdout).run()` takes any text streams.

All output goes to the shell's output stream; no variant prints to a separate printer file.

## String and file helpers

The module `coursekit.labs` provides these helpers:

- **`join_without_spaces(first, second)`** concatenates two strings and drops every space.
- **`blank_every_third(text)`** replaces characters 3, 6, 9, … with spaces.
- **`count_digits(text)`** counts the ASCII digits in a string.
- **`sort_by_digit_count(strings)`** orders strings by digit count, most digits first. It returns `(string, digit_count, swaps_so_far)` for each position.
- **`Route`** and **`sort_routes_by_cost(routes)`** order routes from the most to the least expensive.
- **`filter_lines_ending_with_digit(lines, max_length)`** reads lines in pieces of at most `max_length` characters. It yields each piece whose last character before the newline is a digit.
- **`filter_file(path, max_length)`** applies that filter to a file and writes the result to `path + ".out"`.