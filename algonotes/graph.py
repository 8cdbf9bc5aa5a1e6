"""Breadth-first and depth-first traversal of adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _check_start(matrix: Matrix, start: int) -> int:
    size = len(matrix)
    if not 0 <= start < size:
        raise ValueError(f"start node {start} outside 0..{size - 1}")
    return size


def _neighbours(matrix: Matrix, node: int, size: int) -> list[int]:
    row = matrix[node]
    return [i for i in range(size) if row[i] == 1]


def bfs(matrix: Matrix, start: int) -> list[int]:
    """Return nodes reachable from start in breadth-first order."""
    size = _check_start(matrix, start)
    visited = {start}
    order: list[int] = []
    pending = deque([start])
    while pending:
        node = pending.popleft()
        order.append(node)
        for neighbour in _neighbours(matrix, node, size):
            if neighbour not in visited:
                visited.add(neighbour)
                pending.append(neighbour)
    return order


def dfs(matrix: Matrix, start: int) -> list[int]:
    """Return nodes reachable from start in depth-first order."""
    size = _check_start(matrix, start)
    visited = {start}
    order = [start]
    stack = [iter(_neighbours(matrix, start, size))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(_neighbours(matrix, neighbour, size)))
                break
        else:
            stack.pop()
    return order