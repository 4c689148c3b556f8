"""Grid arena, chromosome encoding and path tracing."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Sequence

PATH_SIZE = 16
FREE_CELL = 0
BLOCKED_CELL = 1

BLANK = " "
OBSTACLE = "■"
ENDPOINT = "₧"
STEP = "."

Arena = Sequence[Sequence[int]]
Cell = tuple[int, int]

_DEFAULT_ARENA: tuple[tuple[int, ...], ...] = (
    (0, 0, 0, 0, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1, 0),
    (0, 0, 0, 0, 1, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1, 0),
    (0, 0, 0, 0, 1, 1, 1, 0, 1, 0, 0, 0, 0, 0, 1, 0),
    (0, 0, 1, 0, 1, 1, 1, 0, 1, 0, 0, 1, 0, 0, 1, 0),
    (0, 0, 1, 0, 0, 1, 1, 0, 1, 0, 0, 1, 0, 0, 0, 0),
    (0, 0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0),
    (1, 0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0),
    (1, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 0),
    (1, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 0, 0, 0, 0, 1),
    (0, 0, 0, 1, 0, 0, 1, 1, 0, 1, 0, 0, 1, 0, 0, 1),
    (0, 0, 0, 1, 0, 0, 1, 1, 0, 0, 0, 0, 1, 0, 0, 1),
    (0, 1, 0, 1, 0, 0, 1, 1, 0, 0, 1, 0, 1, 0, 0, 0),
    (0, 1, 0, 1, 0, 0, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0),
    (0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 1, 0, 1, 0, 0, 0),
    (0, 1, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0),
)


def default_arena() -> tuple[tuple[int, ...], ...]:
    """Return the built-in 16x16 obstacle map (1 marks an obstacle)."""
    return _DEFAULT_ARENA


@dataclass(frozen=True)
class Chromosome:
    """Intermediate waypoints of a path plus its two layout bits."""

    genes: tuple[int, ...]
    direction: int
    orientation: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "genes", tuple(self.genes))
        if self.direction not in (0, 1) or self.orientation not in (0, 1):
            raise ValueError("direction and orientation must be 0 or 1")

    @property
    def column_offset(self) -> int:
        """1 when the path is shifted by one line, 0 otherwise."""
        return self.direction ^ self.orientation

    @property
    def waypoints(self) -> tuple[int, ...]:
        """Genes framed by the fixed start (0) and end (last index)."""
        return (0, *self.genes, len(self.genes) + 1)


@dataclass(frozen=True)
class PathResult:
    """Cells a chromosome visits and the measures derived from them."""

    cells: tuple[Cell, ...]
    length: int
    infeasible: int
    turns: int


def _arena_size(arena: Arena) -> int:
    size = len(arena)
    if size < 3 or any(len(row) != size for row in arena):
        raise ValueError("arena must be a square grid at least 3 cells wide")
    return size


def count_turns(genes: Iterable[int], path_size: int) -> int:
    """Count direction changes along the waypoint sequence."""
    genes = list(genes)
    if not genes:
        raise ValueError("a chromosome needs at least one gene")
    turns = int(genes[0] != 0)
    turns += sum(a != b for a, b in pairwise(genes))
    turns += int(genes[-1] != path_size - 1)
    return turns


def trace_path(chromosome: Chromosome, arena: Arena) -> PathResult:
    """Walk the chromosome's path over the arena, one line per waypoint pair."""
    size = _arena_size(arena)
    if len(chromosome.genes) != size - 2:
        raise ValueError(f"expected {size - 2} genes, got {len(chromosome.genes)}")
    if any(not 0 <= gene < size for gene in chromosome.genes):
        raise ValueError(f"genes must lie in 0..{size - 1}")

    transpose = chromosome.orientation == 1
    cells: list[Cell] = []
    for line, (start, end) in enumerate(
        pairwise(chromosome.waypoints), start=chromosome.column_offset
    ):
        if end > start:
            positions = range(start, end + 1)
        else:
            positions = range(start, end - 1, -1)
        cells.extend((line, k) if transpose else (k, line) for k in positions)

    infeasible = sum(1 for row, col in cells if arena[row][col] == BLOCKED_CELL)
    return PathResult(
        cells=tuple(cells),
        length=len(cells),
        infeasible=infeasible,
        turns=count_turns(chromosome.genes, size),
    )


def render(arena: Arena, cells: Iterable[Cell]) -> str:
    """Draw the arena with obstacles, visited cells and both endpoints."""
    size = _arena_size(arena)
    grid = [
        [OBSTACLE if value == BLOCKED_CELL else BLANK for value in row] for row in arena
    ]
    for row, col in cells:
        grid[row][col] = STEP
    grid[0][0] = ENDPOINT
    grid[size - 1][size - 1] = ENDPOINT
    return "\n".join("|" + "|".join(row) + "|" for row in grid)