# algomap

A collection of classic algorithms, plus building blocks for working with
MACD (Moving Average Convergence/Divergence) data.

## Contents

- `algomap.heap`: `BinaryHeap`, an integer max-heap (`push`, `top`, `pop`,
  `len()`, truth value, iteration, and `str()` as a comma-separated list).
  `top` and `pop` raise `IndexError` on an empty heap.
- `algomap.graph`: `Dijkstra`, shortest paths on an undirected weighted graph
  with nodes numbered from 1. `find_shortest_path` returns an empty list when
  the end is unreachable.
- `algomap.string_match`: `build_lps`, `kmp_search`, `rabin_karp_search` and
  `repeated_string_match`. Searches return the first index, or -1.
- `algomap.dp_fibonacci`: `climb_stairs`, `fib`, `tribonacci`, `rob`,
  `delete_and_earn`.
- `algomap.dp_sequence`: longest increasing, arithmetic, fixed-difference,
  common and palindromic subsequences, minimum palindrome insertions, obstacle
  courses, pair chains, decode ways, ticket costs and uncrossed lines.
- `algomap.dp_knapsack`: `num_trees`, `most_points`, `count_good_strings`
  (modulo 10^9 + 7), `integer_break`.
- `algomap.macd.result`: `MACDResult` (aligned `dates`, `prices`, `ema12`,
  `ema26`, `dif`, `dea`, `histogram` and `histogram_colors` lists, with
  `clear()` and `is_empty()`), the `ColorIntensity` enum and
  `color_intensity_label`.
- `algomap.macd.dates`: `detect_delimiter`, `parse_chinese_date` and
  `manually_parse_chinese_date`.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite with pytest.

## Usage

```python
from algomap.heap import BinaryHeap
from algomap.graph import Dijkstra
from algomap.string_match import kmp_search, rabin_karp_search
from algomap.dp_fibonacci import climb_stairs

heap = BinaryHeap([3, 2, 1, 5, 3])
heap.push(8)
largest = heap.pop()   # 8

graph = Dijkstra(5)
for a, b, w in [(1, 2, 1), (1, 3, 2), (2, 4, 3), (3, 4, 4), (3, 5, 5), (4, 5, 1)]:
    graph.add_edge(a, b, w)
path = graph.find_shortest_path(1, 5)

position = kmp_search("bacbabababababaca", "ababaca")
position = rabin_karp_search("abcdefg", "bcd")

ways = climb_stairs(3)
```

### MACD helpers

```python
from algomap.macd.dates import detect_delimiter, parse_chinese_date
from algomap.macd.result import ColorIntensity, color_intensity_label

parse_chinese_date("2025年9月1日")   # "2025-09-01"
parse_chinese_date("2025-09-01")    # returned unchanged
detect_delimiter("2025-09-01,5.59") # ","
color_intensity_label(ColorIntensity.DARK_RED)
```

`parse_chinese_date` returns text it cannot parse unchanged and logs a warning.
`detect_delimiter` picks the most frequent of tab, comma, semicolon and pipe;
ties go to the tab first.

## Command-line demos

```
algomap-heap
algomap-dijkstra
algomap-strmatch
```

Each prints the results of a few sample inputs.

## What it does not do

- There is no MACD calculator: the package does not compute EMA, DIF, DEA or
  histogram series, classify histogram colours, read price CSV files or print
  reports. `MACDResult` is only a container for such series.
- There is no MACD command-line program.
- Grid path problems (unique paths, maximal square, falling path sums) are
  not included.