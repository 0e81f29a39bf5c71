"""Algorithms over two-dimensional integer grids."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterator, Sequence

Grid = Sequence[Sequence[int]]

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _dimensions(grid: Grid) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    return len(grid), len(grid[0])


def _neighbours(x: int, y: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _STEPS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            yield nx, ny


def trap_rain_water_2d(height_map: Grid) -> int:
    """Return the volume of water an elevation map traps after rain."""
    rows, cols = _dimensions(height_map)
    if rows < 3 or cols < 3:
        return 0

    heap: list[tuple[int, int, int]] = []
    visited: set[tuple[int, int]] = set()
    for i, row in enumerate(height_map):
        for j, height in enumerate(row):
            if i in (0, rows - 1) or j in (0, cols - 1):
                heap.append((height, i, j))
                visited.add((i, j))
    heapq.heapify(heap)

    water = 0
    while heap:
        height, x, y = heapq.heappop(heap)
        for nx, ny in _neighbours(x, y, rows, cols):
            if (nx, ny) in visited:
                continue
            cell = height_map[nx][ny]
            water += max(0, height - cell)
            heapq.heappush(heap, (max(height, cell), nx, ny))
            visited.add((nx, ny))
    return water


def largest_island(grid: Grid) -> int:
    """Return the largest island size reachable by turning at most one 0 into 1."""
    if not grid:
        return 0
    n = len(grid)
    labels: dict[tuple[int, int], int] = {}
    sizes: dict[int, int] = {}
    best = 0

    for i in range(n):
        for j in range(n):
            if grid[i][j] != 1 or (i, j) in labels:
                continue
            label = len(sizes) + 1
            labels[(i, j)] = label
            stack = [(i, j)]
            size = 0
            while stack:
                x, y = stack.pop()
                size += 1
                for nx, ny in _neighbours(x, y, n, n):
                    if grid[nx][ny] == 1 and (nx, ny) not in labels:
                        labels[(nx, ny)] = label
                        stack.append((nx, ny))
            sizes[label] = size
            best = max(best, size)

    for i in range(n):
        for j in range(n):
            if grid[i][j] == 0:
                touching = {
                    labels[(nx, ny)]
                    for nx, ny in _neighbours(i, j, n, n)
                    if grid[nx][ny] == 1
                }
                best = max(best, 1 + sum(sizes[label] for label in touching))
    return best


def count_servers(grid: Grid) -> int:
    """Count servers sharing a row or column with at least one other server."""
    _dimensions(grid)
    row_counts = [sum(1 for cell in row if cell == 1) for row in grid]
    col_counts = [sum(1 for cell in column if cell == 1) for column in zip(*grid)]
    return sum(
        1
        for i, row in enumerate(grid)
        for j, cell in enumerate(row)
        if cell == 1 and (row_counts[i] > 1 or col_counts[j] > 1)
    )


# Sign values 1..4 point right, left, down, up.
_SIGNS = {1: (0, 1), 2: (0, -1), 3: (1, 0), 4: (-1, 0)}


def min_cost_path(grid: Grid) -> int:
    """Return the fewest sign changes needed to walk from the top-left to the bottom-right cell.

    Returns -1 if the target cannot be reached.
    """
    rows, cols = _dimensions(grid)
    best = {(0, 0): 0}
    queue: deque[tuple[int, int, int]] = deque([(0, 0, 0)])
    while queue:
        cost, x, y = queue.popleft()
        if (x, y) == (rows - 1, cols - 1):
            return cost
        for sign, (dx, dy) in _SIGNS.items():
            nx, ny = x + dx, y + dy
            follows = grid[x][y] == sign
            new_cost = cost + (0 if follows else 1)
            if 0 <= nx < rows and 0 <= ny < cols and new_cost < best.get((nx, ny), float("inf")):
                best[(nx, ny)] = new_cost
                if follows:
                    queue.appendleft((new_cost, nx, ny))
                else:
                    queue.append((new_cost, nx, ny))
    return -1


def highest_peak(is_water: Grid) -> list[list[int]]:
    """Assign heights so water is 0, neighbours differ by at most 1, and the peak is maximal."""
    rows, cols = _dimensions(is_water)
    heights = [[-1] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for i, row in enumerate(is_water):
        for j, cell in enumerate(row):
            if cell == 1:
                heights[i][j] = 0
                queue.append((i, j))

    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, rows, cols):
            if heights[nx][ny] == -1:
                heights[nx][ny] = heights[x][y] + 1
                queue.append((nx, ny))
    return heights


def grid_game(grid: Grid) -> int:
    """Return the points the second robot collects when the first plays to minimise them."""
    if len(grid) < 2 or not grid[0]:
        raise ValueError("grid must have two non-empty rows")
    top = sum(grid[0])
    bottom = 0
    result: int | None = None
    for upper, lower in zip(grid[0], grid[1]):
        top -= upper
        candidate = max(top, bottom)
        result = candidate if result is None else min(result, candidate)
        bottom += lower
    assert result is not None
    return result