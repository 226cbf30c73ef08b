"""Graph and grid path finding: breadth-first search, Dijkstra and A*."""

from __future__ import annotations

import argparse
import heapq
import itertools
import math
from collections import deque
from dataclasses import dataclass
from typing import Mapping, Sequence

Graph = Mapping[str, Sequence[str]]
WeightedGraph = Mapping[str, Sequence[tuple[str, int]]]
Cell = tuple[int, int]

_DIRECTIONS: tuple[Cell, ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


def bfs(graph: Graph, start: str) -> dict[str, list[str]]:
    """Return the breadth-first path from ``start`` to every reachable node.

    Raises KeyError if a node taken from the queue has no entry in ``graph``.
    """
    paths: dict[str, list[str]] = {start: [start]}
    visited: set[str] = set()
    queue: deque[str] = deque([start])

    while queue:
        node = queue.popleft()
        visited.add(node)
        for neighbor in graph[node]:
            if neighbor not in visited and neighbor not in paths:
                queue.append(neighbor)
                paths[neighbor] = [*paths[node], neighbor]
    return paths


def dijkstra(
    graph: WeightedGraph, start: str
) -> tuple[dict[str, float], dict[str, str]]:
    """Compute shortest distances from ``start`` over non-negative weights.

    Returns ``(distance, previous)``: the cost of the cheapest route to each
    node (``math.inf`` when unreachable) and, for each reached node, the node
    it was reached from. Raises KeyError if ``start`` is not in ``graph``.
    """
    if start not in graph:
        raise KeyError(start)

    distance: dict[str, float] = {node: math.inf for node in graph}
    distance[start] = 0
    previous: dict[str, str] = {}
    queue: list[tuple[float, str]] = [(0, start)]

    while queue:
        dist, current = heapq.heappop(queue)
        if dist > distance.get(current, math.inf):
            continue
        for neighbor, weight in graph.get(current, ()):
            new_dist = dist + weight
            if new_dist < distance.get(neighbor, math.inf):
                distance[neighbor] = new_dist
                previous[neighbor] = current
                heapq.heappush(queue, (new_dist, neighbor))
    return distance, previous


def reconstruct_path(
    previous: Mapping[str, str], start: str, node: str
) -> list[str] | None:
    """Follow ``previous`` links back from ``node``; None if ``start`` is never met."""
    path: list[str] = []
    current = node
    while current != start and current in previous:
        path.append(current)
        current = previous[current]
    if current != start:
        return None
    path.append(start)
    path.reverse()
    return path


def heuristic(x1: int, y1: int, x2: int, y2: int) -> int:
    """Manhattan distance between two grid cells."""
    return abs(x1 - x2) + abs(y1 - y2)


@dataclass(frozen=True)
class _Step:
    cell: Cell
    parent: _Step | None

    def path(self) -> list[Cell]:
        cells: list[Cell] = []
        step: _Step | None = self
        while step is not None:
            cells.append(step.cell)
            step = step.parent
        cells.reverse()
        return cells


def astar(grid: Sequence[Sequence[int]], start: Cell, goal: Cell) -> list[Cell] | None:
    """Find a shortest 4-connected route through cells equal to 0.

    Returns the list of ``(row, column)`` cells from ``start`` to ``goal``,
    or None when no route exists.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    rows, cols = len(grid), len(grid[0])
    for name, (x, y) in (("start", start), ("goal", goal)):
        if not (0 <= x < rows and 0 <= y < cols):
            raise ValueError(f"{name} {(x, y)} lies outside the grid")

    closed = [[False] * cols for _ in range(rows)]
    order = itertools.count()
    gx, gy = goal
    sx, sy = start
    open_heap: list[tuple[int, int, int, _Step]] = [
        (heuristic(sx, sy, gx, gy), next(order), 0, _Step(start, None))
    ]
    closed[sx][sy] = True

    while open_heap:
        _, _, g, step = heapq.heappop(open_heap)
        x, y = step.cell
        if step.cell == goal:
            return step.path()
        closed[x][y] = True

        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < rows and 0 <= ny < cols and grid[nx][ny] == 0 and not closed[nx][ny]:
                cost = g + 1
                heapq.heappush(
                    open_heap,
                    (cost + heuristic(nx, ny, gx, gy), next(order), cost, _Step((nx, ny), step)),
                )
    return None


_BFS_GRAPH: dict[str, list[str]] = {
    "A": ["B", "C"],
    "B": ["A", "D", "E"],
    "C": ["A", "F"],
    "D": ["B"],
    "E": ["B", "F"],
    "F": ["C", "E"],
}

_DIJKSTRA_GRAPH: dict[str, list[tuple[str, int]]] = {
    "A": [("B", 4), ("C", 2)],
    "B": [("A", 4), ("C", 5), ("D", 10)],
    "C": [("A", 2), ("B", 5), ("D", 3)],
    "D": [("B", 10), ("C", 3)],
}

_GRID: list[list[int]] = [
    [0, 0, 0, 0],
    [1, 1, 0, 1],
    [0, 0, 0, 0],
    [0, 1, 1, 0],
    [0, 0, 0, 0],
]


def _bfs_demo() -> None:
    path = bfs(_BFS_GRAPH, "A").get("F", [])
    print("Path from (A) to (F): " + "".join(f"{node} " for node in path))


def _dijkstra_demo() -> None:
    start = "A"
    distance, previous = dijkstra(_DIJKSTRA_GRAPH, start)
    print(f"Kortaste avstånd från {start} till D: {distance.get('D', math.inf)}")
    for node, dist in distance.items():
        print(f"Avstånd från {start} till {node}: {dist}")
        path = reconstruct_path(previous, start, node)
        if path is None:
            print("(Ingen väg hittades)")
        else:
            print("Väg: " + "".join(f"{n} " for n in path))


def _astar_demo() -> None:
    path = astar(_GRID, (0, 0), (4, 3))
    if path is None:
        print("Ingen väg kunde hittas.")
    else:
        print("".join(f"({x}, {y}) " for x, y in path))


_DEMOS = {"bfs": _bfs_demo, "dijkstra": _dijkstra_demo, "astar": _astar_demo}


def main(argv: list[str] | None = None) -> int:
    """Run one of the path-finding demonstrations (Dijkstra by default)."""
    parser = argparse.ArgumentParser(description="Path-finding demonstrations.")
    parser.add_argument("demo", nargs="?", choices=sorted(_DEMOS), default="dijkstra")
    args = parser.parse_args(argv)
    _DEMOS[args.demo]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())