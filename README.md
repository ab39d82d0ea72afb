# judgebox

A collection of solvers for classic online-judge problems, written as plain
Python functions with no third-party dependencies. Most problems have two
entry points:

* a function that takes ordinary Python values and returns the answer, and
* a `run_*` function that takes the problem's full input text and returns the
  output text in the form a judge expects.

Invalid input (missing tokens, out-of-range vertices, impossible boards and
the like) raises `ValueError`.

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
| `judgebox.graphs` | `UnionFind`; `construction_time`, `subtree_sizes`, `partition_cost`, `workbook_order`, `critical_path`, `line_up`, `tunnel_cost` |
| `judgebox.numbers` | `euler_phi`, `prime_sum_count`, `walking_time`, `change_coins`, `ranking_dissatisfaction`, `stair_numbers` |
| `judgebox.searching` | `cut_log`, `count_subsequence_sums`, `race_assignment`, `shortest_subarray`, `count_pair_sums` |
| `judgebox.dp` | `raider_minimum`, `max_cheating_students`, `min_palindrome_partition`, `tsp_cost`, `max_bishops`, `solve_sudoku` |
| `judgebox.strings` | `decorate`, `erase_digits`, `can_fold`, `recover_note`, `average_keystrokes` |
| `judgebox.greedy` | `refuel_stops`, `balloon_distance` |
| `judgebox.geometry` | `Segment`, `segments_intersect`, `group_segments`, `polygon_area` |
| `judgebox.dynamic_connectivity` | `DynamicGraph` and `process_queries` for encoded online queries |
| `judgebox.connectivity_data` | `generate_case` and `write_case`: random cases for the dynamic connectivity problem |
| `judgebox.toy_tank` | `plan_moves` and a `TankBoard` to replay the moves |
| `judgebox.aris` | `simulate_moves` (step by step) and `count_moves` (jumps over clean runs) for a cleaning robot |
| `judgebox.code_folding` | `FoldingEditor` and `process` for folding indented blocks |

## Using the functions

```python
from judgebox.numbers import euler_phi, prime_sum_count, change_coins

euler_phi(10)          # 4
prime_sum_count(41)    # 3: 41, 11+13+17, 2+3+5+7+11+13
change_coins(380)      # 4: change of 620 is 500 + 100 + 10 + 10
```

Each `run_*` function reads the problem's input format from a string:

```python
from judgebox.numbers import run_euler_phi

print(run_euler_phi("10\n"))   # 4
```

Dynamic connectivity can be driven directly:

```python
from judgebox.dynamic_connectivity import DynamicGraph

graph = DynamicGraph(4)
graph.insert(0, 1)
graph.insert(1, 2)
graph.connected(0, 2)  # True
graph.remove(1, 2)
graph.connected(0, 2)  # False
graph.components       # 3
```

`DynamicGraph.toggle(a, b)` inserts the edge if it is absent and removes it
otherwise. A vertex that has never had an edge is not reported as connected
to itself.

Code folding keeps a running count of visible lines:

```python
from judgebox.code_folding import FoldingEditor

editor = FoldingEditor([(0, "h"), (1, "s"), (1, "s"), (0, "s")])
editor.visible     # 4
editor.toggle(1)   # 2: lines 2 and 3 are hidden
editor.toggle(1)   # 4
```

## Command line

The `judgebox` command solves one problem, reading its input from standard
input or from a file given with `-i/--input`, and writes the answer to
standard output:

```
judgebox euler-phi < input.txt
judgebox sudoku --input board.txt
judgebox --help
```

Problem names: `aris`, `balloon`, `bishops`, `change`, `cheating`,
`code-folding`, `construction`, `critical-path`, `cut-log`, `decorate`,
`dynamic-connectivity`, `erase`, `euler-phi`, `fuel`, `keyboard`, `line-up`,
`note`, `origami`, `pair-sums`, `palindrome`, `partition`, `polygon-area`,
`prime-sum`, `race`, `raider`, `ranking`, `segments`, `shortest-subarray`,
`stair-numbers`, `subsequence-sums`, `subtree`, `sudoku`, `toy-tank`, `tsp`,
`tunnel`, `walking`, `workbook`. On invalid input it prints the error to
standard error and exits with status 1.

The `judgebox-gendata` command generates a random case for the dynamic
connectivity problem. It takes the number of vertices and the number of
queries, plus `--seed` (default 1) and `--directory` (default the current
one). It writes `input.txt`, `output.txt`, `log.txt` and `fs.txt` into that
directory and prints the expected answers:

```
judgebox-gendata 10 100 --seed 7 --directory cases
judgebox-gendata --help
```