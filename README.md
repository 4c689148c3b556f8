# gapathfinder

Finds a path for a robot across a square grid arena with obstacles, using a
genetic algorithm.

The robot starts in the top-left corner and has to reach the bottom-right
corner. A candidate path is a `Chromosome`: one waypoint per line of the
grid (rows or columns, chosen by its `orientation` bit), with a fixed start
of 0 and a fixed end at the last index. The path runs straight between
consecutive waypoints. Each candidate is scored from three measures taken
relative to the rest of its generation:

- the number of turns,
- the path length,
- the number of steps that land on an obstacle.

The search stops as soon as a candidate reaches the maximum score (300), or
when it runs out of generations.

## Installation

```
pip install .
```

## Command line

```
gapathfinder [--seed N] [--population N] [--iterations N]
```

The command runs the search on the built-in 16 × 16 arena. The population
defaults to 90 and the number of generations to 100000; without `--seed`
every run differs.

After each generation that has not solved the problem it prints a line
`turns,length,infeasible,fitness`: the turns, length and infeasible steps of
the first candidate of that generation, and the highest fitness score in it.
When a path is found it prints the generation number, the waypoints, the
cells visited, the figures for the winning candidate and a drawing of the
arena: obstacles as `■`, visited cells as `.`, start and end as `₧`. If no
path is found it prints `No solution found.`

## Library use

```python
from gapathfinder.arena import default_arena
from gapathfinder.navigator import solve, format_solution

arena = default_arena()
result = solve(arena, population_size=90, iterations=100000, seed=1, on_generation=None)
if result.solved:
    print(format_solution(result, arena))
```

`solve` returns a `SearchResult`; its `chromosome`, `path` and `fitness`
are set only when `solved` is true. `format_solution` raises `ValueError`
for an unsolved result. Pass a callable as `on_generation` to receive a
`GenerationStats` after each unsolved generation.

Modules:

- `gapathfinder.arena`: `default_arena`, `Chromosome`, `PathResult`,
  `count_turns`, `trace_path` and `render`. Any square arena of 0 (free) and
  1 (obstacle) cells, at least 3 wide, can be used.
- `gapathfinder.genetics`: `random_population`, `fitness_scores`,
  `find_solution`, `sort_by_fitness`, `crossover` and `mutate`, each taking
  and returning plain lists; randomness comes from a `random.Random` passed in.
- `gapathfinder.navigator`: `evaluate`, `solve`, `format_solution` and the
  command's `main`.

## What it does not do

The command always uses the built-in arena; there is no option to load an
arena from a file. The search gives no guarantee of finding a path, and
paths only ever move along straight lines between the waypoints of
adjacent grid lines.

## Running the tests

```
pip install .[test]
pytest
```