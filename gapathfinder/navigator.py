"""Search loop, solution report and command-line entry point."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from typing import Callable, Sequence

from gapathfinder.arena import (
    Arena,
    Chromosome,
    PathResult,
    default_arena,
    render,
    trace_path,
)
from gapathfinder.genetics import (
    crossover,
    find_solution,
    fitness_scores,
    mutate,
    random_population,
    sort_by_fitness,
)

POPULATION_SIZE = 90
ITERATIONS = 100000


@dataclass(frozen=True)
class GenerationStats:
    """Progress figures reported after each unsolved generation."""

    generation: int
    turns: int
    length: int
    infeasible: int
    best_fitness: float


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search; the solution fields are set only when solved."""

    solved: bool
    generation: int
    chromosome: Chromosome | None = None
    path: PathResult | None = None
    fitness: float | None = None


def evaluate(population: Sequence[Chromosome], arena: Arena) -> list[PathResult]:
    """Trace every chromosome over the arena."""
    return [trace_path(chromosome, arena) for chromosome in population]


def solve(
    arena: Arena | None = None,
    population_size: int = POPULATION_SIZE,
    iterations: int = ITERATIONS,
    seed: int | None = None,
    on_generation: Callable[[GenerationStats], None] | None = None,
) -> SearchResult:
    """Evolve paths until one scores perfectly or the iterations run out."""
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    arena = default_arena() if arena is None else arena
    rng = random.Random(seed)
    population = random_population(rng, population_size, len(arena))

    for generation in range(iterations):
        results = evaluate(population, arena)
        scores = fitness_scores(
            [r.turns for r in results],
            [r.length for r in results],
            [r.infeasible for r in results],
        )
        index = find_solution(scores)
        if index is not None:
            return SearchResult(
                solved=True,
                generation=generation,
                chromosome=population[index],
                path=results[index],
                fitness=scores[index],
            )
        population, ranked = sort_by_fitness(population, scores)
        population = crossover(population, rng)
        population = mutate(population, rng)
        if on_generation is not None:
            first = results[0]
            on_generation(
                GenerationStats(
                    generation=generation,
                    turns=first.turns,
                    length=first.length,
                    infeasible=first.infeasible,
                    best_fitness=ranked[0],
                )
            )
    return SearchResult(solved=False, generation=iterations)


def format_solution(result: SearchResult, arena: Arena) -> str:
    """Describe a solved search: waypoints, visited cells, figures and a map."""
    if not result.solved or result.chromosome is None or result.path is None:
        raise ValueError("the search found no solution")
    chromosome, path = result.chromosome, result.path
    last = len(arena) - 1

    steps = [f"({row} , {col})" for row, col in path.cells]
    if chromosome.column_offset:
        steps.insert(0, "(0 , 0)")
    else:
        steps.append(f"({last} , {last})")

    figures = (
        f"Direction = {chromosome.direction}: "
        f"Orientation = {chromosome.orientation}: "
        f"No of turns = {path.turns}: "
        f"Path_Length = {path.length}: "
        f"Infeasible_Steps = {path.infeasible}: "
        f"Fitness = {result.fitness:.2f}"
    )
    return "\n".join(
        [
            f"gene = {result.generation}.",
            "",
            " ".join(str(w) for w in chromosome.waypoints),
            "",
            " ".join(steps),
            "",
            "",
            figures,
            "",
            "",
            render(arena, path.cells),
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the search on the built-in arena and print progress and result."""
    parser = argparse.ArgumentParser(description="Plan a robot path with a genetic algorithm.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--population", type=int, default=POPULATION_SIZE)
    parser.add_argument("--iterations", type=int, default=ITERATIONS)
    args = parser.parse_args(argv)

    def report(stats: GenerationStats) -> None:
        print(f"{stats.turns},{stats.length},{stats.infeasible},{stats.best_fitness:.2f}")

    arena = default_arena()
    result = solve(arena, args.population, args.iterations, args.seed, report)
    if result.solved:
        print()
        print(format_solution(result, arena))
    else:
        print("No solution found.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())