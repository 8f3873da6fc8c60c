"""Travelling salesman tours found by ant colony optimisation."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from .graph import Graph


@dataclass(frozen=True)
class AcoParams:
    """Tuning of the ant colony.

    ``alpha`` weights the pheromone trail, ``beta`` the inverse edge length,
    ``q`` scales the pheromone an ant deposits, ``evaporation`` is the share
    of pheromone lost per iteration and ``min_pheromone`` the floor it never
    falls below.
    """

    alpha: float = 1.0
    beta: float = 2.0
    initial_pheromone: float = 1.0
    q: float = 100.0
    evaporation: float = 0.5
    min_pheromone: float = 0.01
    max_iterations: int = 1000


@dataclass
class TsmResult:
    """A closed tour (0-based, first vertex repeated at the end) and its length.

    When no tour exists the vertex list is empty and the distance is infinite.
    """

    vertices: list[int] = field(default_factory=list)
    distance: float = math.inf


@dataclass
class _Ant:
    path: list[int]
    visited: set[int]
    distance: float = 0.0
    can_continue: bool = True

    @classmethod
    def starting_at(cls, vertex: int) -> _Ant:
        return cls(path=[vertex], visited={vertex})

    @property
    def current(self) -> int:
        return self.path[-1]

    @property
    def start(self) -> int:
        return self.path[0]


class _Colony:
    def __init__(
        self, weights: list[list[int]], params: AcoParams, rng: random.Random
    ) -> None:
        self.weights = weights
        self.size = len(weights)
        self.params = params
        self.rng = rng
        self.pheromone = [
            [0.0 if i == j else params.initial_pheromone for j in range(self.size)]
            for i in range(self.size)
        ]
        self.best_path: list[int] = []
        self.best_distance = math.inf

    def _move(self, ant: _Ant, vertex: int) -> None:
        ant.distance += self.weights[ant.current][vertex]
        ant.path.append(vertex)
        ant.visited.add(vertex)

    def _try_return(self, ant: _Ant) -> None:
        ant.can_continue = False
        if self.weights[ant.current][ant.start] > 0:
            self._move(ant, ant.start)

    def _choose(self, ant: _Ant, neighbours: list[int]) -> int:
        row = self.weights[ant.current]
        trail = self.pheromone[ant.current]
        scores = [
            trail[to] ** self.params.alpha * (1.0 / row[to]) ** self.params.beta
            for to in neighbours
        ]
        total = sum(scores)
        if total <= 0 or not math.isfinite(total):
            return neighbours[-1]
        choice = self.rng.random()
        cumulative = 0.0
        for vertex, score in zip(neighbours, scores):
            cumulative += score / total
            if choice <= cumulative:
                return vertex
        return neighbours[-1]

    def _step(self, ant: _Ant) -> None:
        if len(ant.path) == self.size:
            self._try_return(ant)
            return
        row = self.weights[ant.current]
        neighbours = [
            to
            for to, weight in enumerate(row)
            if weight > 0 and to not in ant.visited
        ]
        if not neighbours:
            self._try_return(ant)
            return
        self._move(ant, self._choose(ant, neighbours))

    def _is_complete(self, path: list[int]) -> bool:
        return len(path) == self.size + 1 and path[0] == path[-1]

    def _iterate(self) -> None:
        deposits = [0.0] * self.size
        for start in range(self.size):
            ant = _Ant.starting_at(start)
            while ant.can_continue:
                self._step(ant)
            if not self._is_complete(ant.path):
                continue
            if ant.distance < self.best_distance:
                self.best_path = list(ant.path)
                self.best_distance = ant.distance
            share = self.params.q / ant.distance
            for vertex in ant.path[:-1]:
                deposits[vertex] += share

        keep = 1.0 - self.params.evaporation
        floor = self.params.min_pheromone
        for source, row in enumerate(self.pheromone):
            for target in range(self.size):
                if source != target:
                    row[target] = max(keep * row[target] + deposits[source], floor)

    def run(self) -> TsmResult:
        for _ in range(self.params.max_iterations):
            self._iterate()
        if self._is_complete(self.best_path):
            return TsmResult(list(self.best_path), self.best_distance)
        return TsmResult()


def solve_traveling_salesman_problem(
    graph: Graph,
    params: AcoParams | None = None,
    rng: random.Random | None = None,
) -> TsmResult:
    """Search for a shortest closed tour visiting every vertex exactly once.

    Only positive weights count as edges. The search is randomised; pass a
    seeded ``rng`` for repeatable results.
    """
    size = graph.order
    if size == 0:
        return TsmResult()
    if size == 1:
        return TsmResult([0, 0], 0.0)
    colony = _Colony(graph.rows(), params or AcoParams(), rng or random.Random())
    return colony.run()