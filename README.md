# algokit

Classic algorithms and small puzzle solvers as plain Python functions. They
take ordinary lists, tuples, strings and integers, and they return their
results instead of printing them. A small command-line tool runs the
shortest-path and job-ordering solvers on integer input.

## What is inside

| Module | Functions |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `selection_sort` |
| `algokit.heap` | `build_max_heap`, `build_min_heap`, `format_heaps` |
| `algokit.segment_tree` | `build_sum_tree` |
| `algokit.graph` | `dijkstra`, `shortest_path` |
| `algokit.factorials` | `factorial_decomposition`, `format_decomposition` |
| `algokit.pattern` | `build_dfa`, `count_occurrences` |
| `algokit.bitmask` | `min_total_cost` |
| `algokit.contest` | `triangle_wave`, `split_binary_string`, `max_repeated_point`, `modulo_power_of_two`, `first_player_wins`, `max_digit_sum` |
| `algokit.cli` | `main` |

- **Sorting**: `bubble_sort` and `selection_sort` each return a new list in
  ascending order. The input is left unchanged.
- **Heaps**: `build_max_heap` and `build_min_heap` arrange a sequence as a
  heap in array order. The root is at index 0. `format_heaps` returns a text
  listing that starts with `max heap: `, then gives the max-heap one value per
  line, then `min heap: ` and the min-heap.
- **Segment tree**: `build_sum_tree` returns an array of range sums with the
  root at index 1. The children of node `i` are at `2*i` and `2*i+1`, and
  unused slots hold 0. An empty input raises `ValueError`.
- **Graphs**: the graphs are undirected and weighted, with nodes numbered
  `1..n` and edges given as `(u, v, weight)` triples.
  - `dijkstra(n, edges, source)` returns a dict that maps each node to its
    distance from `source`. An unreachable node gets `algokit.graph.INFINITY`
    (`2**30`).
  - `shortest_path(n, edges)` returns the list of nodes on a shortest path
    from 1 to `n`, or `None` when `n` cannot be reached.
  - A node outside `1..n` raises `ValueError`.
- **Factorials**: `factorial_decomposition(value)` takes factorials from 20!
  down to 0! greedily, each at most once. It returns the values `k` used,
  smallest first, or `None` when the sum cannot be made exact.
  `format_decomposition(case, value)` renders a line such as
  `Case 1: 0!+3!` or `Case 2: impossible`.
- **Pattern matching**: `build_dfa(pattern)` builds a string-matching
  automaton. Each state is a dict from a character to the next state, and a
  missing character leads back to state 0. `count_occurrences(text, pattern)`
  counts matches, overlaps included. An empty pattern raises `ValueError`.
- **Bitmask DP**: `min_total_cost(costs)` returns the least total cost of
  doing every job once. Doing job `i` costs `costs[i][i]` plus `costs[i][j]`
  for every job `j` already done. A matrix that is not square raises
  `ValueError`.
- **Contest helpers**:
  - `triangle_wave` renders repeated number triangles.
  - `split_binary_string` splits a 0/1 string into the fewest parts whose
    counts of 0 and 1 differ.
  - `max_repeated_point` gives the highest number of times any one point
    occurs, and is at least 1.
  - `modulo_power_of_two(n, m)` computes `m mod 2**n`.
  - `first_player_wins` compares the highest cards of the two players.
  - `max_digit_sum` gives the largest total of the digit sums of `a` and
    `value - a`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from algokit.sorting import bubble_sort
from algokit.pattern import count_occurrences
from algokit.graph import shortest_path

bubble_sort([5, 3, 1, 4])                            # [1, 3, 4, 5]
count_occurrences("axbaxbax", "ax")                  # 3
shortest_path(3, [(1, 2, 1), (2, 3, 1), (1, 3, 5)])  # [1, 2, 3]
```

## Command line

The `algokit` command reads whitespace-separated integers from standard
input. To read them from a file instead, pass `-i FILE` (or `--input FILE`)
before the subcommand.

```
algokit --help
algokit dijkstra < graph.txt
algokit -i graph.txt path
algokit jobs < cases.txt
```

- `dijkstra`: the input is `n m`, then `m` lines of `u v w`, then the source.
  The output has one line per node, of the form `source --> node = distance`.
- `path`: the input is `n m`, then `m` lines of `u v w`. The output is the
  nodes of a shortest path from 1 to `n` separated by spaces, or `-1` when
  `n` cannot be reached.
- `jobs`: the input is the number of cases, then for each case a size `n`
  followed by an `n`×`n` cost matrix. The output has one `Case k: cost` line
  per case.

Input that ends early or holds anything other than integers is reported on
standard error, and the exit status is 1.

## What it does not do

- The segment tree is only built. There are no range queries or point
  updates.
- The heaps are built in one pass. There are no push or pop operations.
- Only the graph and job-ordering solvers have subcommands. Use the other
  functions from Python.