import math
import random

import pytest

from gapathfinder.arena import Chromosome
from gapathfinder.genetics import (
    PERFECT_SCORE,
    crossover,
    find_solution,
    fitness_scores,
    mutate,
    random_population,
    sort_by_fitness,
)


def test_random_population_shape():
    population = random_population(random.Random(1), 90, 16)
    assert len(population) == 90
    for chromosome in population:
        assert len(chromosome.genes) == 14
        assert all(0 <= g < 16 for g in chromosome.genes)
        assert chromosome.direction in (0, 1)
        assert chromosome.orientation in (0, 1)


def test_random_population_is_reproducible():
    first = random_population(random.Random(7), 10, 16)
    second = random_population(random.Random(7), 10, 16)
    assert first == second


@pytest.mark.parametrize("size,path", [(0, 16), (5, 2)])
def test_random_population_rejects_bad_sizes(size, path):
    with pytest.raises(ValueError):
        random_population(random.Random(0), size, path)


def test_fitness_best_and_worst():
    scores = fitness_scores([1, 2, 3], [10, 20, 30], [0, 1, 2])
    assert scores[0] == PERFECT_SCORE
    assert scores[2] == 0.0
    assert scores[0] > scores[1] > scores[2]
    assert find_solution(scores) == 0


def test_fitness_uniform_population_is_nan():
    scores = fitness_scores([2, 2], [5, 5], [1, 1])
    assert all(math.isnan(s) for s in scores)
    assert find_solution(scores) is None


def test_fitness_all_feasible_never_perfect():
    scores = fitness_scores([1, 2], [3, 4], [0, 0])
    assert find_solution(scores) is None


def test_fitness_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        fitness_scores([1, 2], [1], [1, 2])


def test_fitness_rejects_empty():
    with pytest.raises(ValueError):
        fitness_scores([], [], [])


def test_find_solution_picks_first():
    assert find_solution([1.0, PERFECT_SCORE, PERFECT_SCORE]) == 1


def test_sort_moves_genes_but_not_layout_bits():
    population = [
        Chromosome((1, 1), 0, 0),
        Chromosome((2, 2), 1, 0),
        Chromosome((3, 3), 0, 1),
    ]
    sorted_population, ranked = sort_by_fitness(population, [1.5, 2.5, 0.5])
    assert ranked == [2.5, 1.0, 0.5]
    assert [c.genes for c in sorted_population] == [(2, 2), (1, 1), (3, 3)]
    assert [(c.direction, c.orientation) for c in sorted_population] == [
        (c.direction, c.orientation) for c in population
    ]


def test_sort_puts_maximum_first():
    rng = random.Random(4)
    population = random_population(rng, 20, 16)
    scores = [rng.uniform(0, 300) for _ in population]
    _, ranked = sort_by_fitness(population, scores)
    assert ranked[0] == max(scores)


def test_sort_rejects_length_mismatch():
    with pytest.raises(ValueError):
        sort_by_fitness([Chromosome((1, 1), 0, 0)], [1.0, 2.0])


@pytest.mark.parametrize("seed", range(4))
def test_crossover_invariants(seed):
    population = random_population(random.Random(seed), 90, 16)
    children = crossover(population, random.Random(seed + 100))
    assert len(children) == 90
    assert children[:45] == population[:45]
    for i in range(45, 89, 2):
        parents = population[i - 45].genes, population[i - 44].genes
        pair = children[i].genes, children[i + 1].genes
        for position in range(14):
            assert sorted(g[position] for g in pair) == sorted(
                g[position] for g in parents
            )
        assert pair[0][0] == parents[0][0]
    assert children[89].genes == population[44].genes
    assert [(c.direction, c.orientation) for c in children] == [
        (c.direction, c.orientation) for c in population
    ]


def test_crossover_rejects_single_gene():
    with pytest.raises(ValueError):
        crossover([Chromosome((1,), 0, 0)], random.Random(0))


@pytest.mark.parametrize("seed", range(4))
def test_mutate_changes_at_most_one_gene(seed):
    population = random_population(random.Random(seed), 30, 16)
    mutated = mutate(population, random.Random(seed))
    for before, after in zip(population, mutated):
        changed = [i for i, (a, b) in enumerate(zip(before.genes, after.genes)) if a != b]
        assert len(changed) <= 1
        for i in changed:
            assert 0 <= after.genes[i] < 14
        assert (before.direction, before.orientation) == (
            after.direction,
            after.orientation,
        )