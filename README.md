# cpkit

A collection of classic competitive-programming algorithms as plain Python
functions. Each function takes ordinary Python values (lists, tuples, strings,
ints) and returns the answer. Where a graph problem has no answer it raises
`cpkit.graphs.NoSolution` (a subclass of `ValueError`); other functions return
`None` or an empty list as described in their docstrings. Invalid arguments
raise `ValueError` or `IndexError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `cpkit.dsu` | `DSU` (union-find with path compression and union by size), `connect_components` |
| `cpkit.grids` | `count_rooms`, `grid_distances`, `labyrinth_path` on grids of strings |
| `cpkit.graphs` | `building_roads`, `build_teams`, `course_schedule`, `message_route`, `round_trip`, `round_trip_directed`, `min_jumps`, `orient_tree`, `NoSolution` |
| `cpkit.paths` | `shortest_routes` (Dijkstra), `flight_discount` (one flight at half price) |
| `cpkit.dp` | `frog1`, `frog2`, `knapsack`, `vacation`, `tribonacci`, `pascal_triangle`, `divisor_game` |
| `cpkit.binsearch` | `first_true`, `aggressive_cows`, `chat_ban`, `kth_sum`, `count_pair_sums_at_most`, `perfect_number`, `kth_not_divisible` |
| `cpkit.numtheory` | `BinomialTable`, `smallest_prime_factors`, `count_rhyme_pairs`, `min_gcd_operations`, `smallest_coprime_prime`, `gcd_order` |
| `cpkit.greedy` | `sort_if_mixed_parity`, `neighbour_gaps`, `make_peaks`, `even_sum_wins`, `single_operation`, `slay_monsters`, `split_sorted_palindrome`, `xor_operations` |

## Examples

Union-find:

```python
from cpkit.dsu import DSU

dsu = DSU(5)
dsu.unite(1, 2)       # True: the sets were merged
dsu.unite(3, 4)
dsu.connected(1, 2)   # True
dsu.connected(2, 3)   # False
dsu.num_components    # 3
```

Shortest distances from city 1 in a directed weighted graph:

```python
from cpkit.paths import shortest_routes

shortest_routes(3, [(1, 2, 6), (1, 3, 2), (3, 2, 3)])   # [0, 5, 2]
```

Unreachable cities get `None`.

Binary search on the answer:

```python
from cpkit.binsearch import first_true

first_true(1, 100, lambda x: x * x >= 50)   # 8
```

Dynamic programming:

```python
from cpkit.dp import tribonacci, pascal_triangle

tribonacci(4)        # 4
pascal_triangle(4)   # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]
```

Binomial coefficients modulo a prime:

```python
from cpkit.numtheory import BinomialTable

table = BinomialTable(1000, 1_000_000_007)
table.choose(5, 2)   # 10
```

Grid searches treat `'#'` as wall; `labyrinth_path` walks from `'A'` to `'B'`:

```python
from cpkit.grids import labyrinth_path

labyrinth_path(["A.#", "#.B"])   # "RDR"
```

Graph problems that may have no answer raise `NoSolution`:

```python
from cpkit.graphs import course_schedule, NoSolution

try:
    order = course_schedule(3, [(1, 2), (2, 3), (3, 1)])
except NoSolution:
    order = None
```

Vertices are numbered from 1 in every graph function.

## What it does not do

cpkit is a library only. It has no command-line program and does not read
problem input from standard input or print answers; callers pass Python
values in and get Python values back.