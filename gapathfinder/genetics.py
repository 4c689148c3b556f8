"""Genetic operators: population creation, fitness, selection, crossover, mutation."""

from __future__ import annotations

import math
import random
from dataclasses import replace
from typing import Sequence

from gapathfinder.arena import Chromosome

WEIGHT_LENGTH = 2
WEIGHT_TURNS = 2
WEIGHT_FEASIBILITY = 3
PERFECT_SCORE = 100 * WEIGHT_FEASIBILITY


def random_population(
    rng: random.Random, population_size: int, path_size: int
) -> list[Chromosome]:
    """Create chromosomes with random waypoints and layout bits."""
    if population_size < 1:
        raise ValueError("population size must be positive")
    if path_size < 3:
        raise ValueError("path size must be at least 3")
    return [
        Chromosome(
            genes=tuple(rng.randrange(path_size) for _ in range(path_size - 2)),
            direction=rng.randrange(2),
            orientation=rng.randrange(2),
        )
        for _ in range(population_size)
    ]


def _closeness(value: float, low: float, high: float) -> float:
    """1 at the low end of the range, 0 at the high end; NaN for an empty range."""
    span = high - low
    offset = value - low
    if span == 0:
        return math.nan if offset == 0 else 1 - math.copysign(math.inf, offset)
    return 1 - offset / span


def fitness_scores(
    turns: Sequence[int], lengths: Sequence[int], infeasible: Sequence[int]
) -> list[float]:
    """Score each individual relative to the population; higher is better."""
    turns, lengths, infeasible = list(turns), list(lengths), list(infeasible)
    if not turns or not len(turns) == len(lengths) == len(infeasible):
        raise ValueError("measures must be non-empty and of equal length")

    turns_low, turns_high = min(turns), max(turns)
    length_low, length_high = min(lengths), max(lengths)
    infeasible_high = max(infeasible)

    scores = []
    for turn, length, blocked in zip(turns, lengths, infeasible):
        fit_turns = _closeness(turn, turns_low, turns_high)
        fit_length = _closeness(length, length_low, length_high)
        fit_feasible = _closeness(blocked, 0, infeasible_high)
        scores.append(
            100
            * WEIGHT_FEASIBILITY
            * fit_feasible
            * (WEIGHT_LENGTH * fit_length + WEIGHT_TURNS * fit_turns)
            / (WEIGHT_LENGTH + WEIGHT_TURNS)
        )
    return scores


def find_solution(scores: Sequence[float]) -> int | None:
    """Index of the first perfect score, or None."""
    return next(
        (index for index, score in enumerate(scores) if score == PERFECT_SCORE), None
    )


def _with_genes(
    population: Sequence[Chromosome], genes: Sequence[Sequence[int]]
) -> list[Chromosome]:
    # Layout bits belong to the slot; only the waypoints move between slots.
    return [replace(slot, genes=tuple(g)) for slot, g in zip(population, genes)]


def sort_by_fitness(
    population: Sequence[Chromosome], scores: Sequence[float]
) -> tuple[list[Chromosome], list[float]]:
    """Order waypoints by descending score; return the new population and scores.

    A score displaced by a swap is truncated toward zero, which can affect
    later comparisons.
    """
    if len(population) != len(scores):
        raise ValueError("population and scores differ in length")
    genes = [chromosome.genes for chromosome in population]
    ranked = list(scores)
    count = len(ranked)
    for i in range(count):
        for j in range(i + 1, count):
            if ranked[j] > ranked[i]:
                genes[i], genes[j] = genes[j], genes[i]
                ranked[i], ranked[j] = ranked[j], float(math.trunc(ranked[i]))
    return _with_genes(population, genes), ranked


def crossover(population: Sequence[Chromosome], rng: random.Random) -> list[Chromosome]:
    """Replace the lower half with copies of the upper half, then swap tails in pairs."""
    if not population:
        return []
    genes = [list(chromosome.genes) for chromosome in population]
    width = len(genes[0])
    if width < 2:
        raise ValueError("crossover needs at least two genes")
    point = rng.randrange(1, width)

    count = len(genes)
    half = count // 2
    for i in range(count - half):
        genes[half + i] = list(genes[i])
    for i in range(half, count - 1, 2):
        genes[i][point:], genes[i + 1][point:] = genes[i + 1][point:], genes[i][point:]
    return _with_genes(population, genes)


def mutate(population: Sequence[Chromosome], rng: random.Random) -> list[Chromosome]:
    """Overwrite one random gene of each chromosome with a random value."""
    mutated = []
    for chromosome in population:
        genes = list(chromosome.genes)
        width = len(genes)
        index = rng.randrange(width)
        genes[index] = rng.randrange(width)
        mutated.append(replace(chromosome, genes=tuple(genes)))
    return mutated