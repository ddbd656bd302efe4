"""Gradient descent over arrival-time grids to extract paths."""

from __future__ import annotations

import math
from typing import Protocol, Sequence

from .cells import FMCell

Point = tuple[float, ...]


class DescentGrid(Protocol):
    """What gradient descent needs from a grid map."""

    dim_sizes: Sequence[int]

    def idx2coord(self, idx: int) -> Sequence[int]: ...

    def coord2idx(self, coord: Sequence[int]) -> int: ...

    def __getitem__(self, idx: int) -> FMCell: ...


def sgn(val: float) -> int:
    """Sign of ``val``: 1, -1 or 0."""
    return (0 < val) - (val < 0)


def _strides(dim_sizes: Sequence[int]) -> list[int]:
    strides: list[int] = []
    acc = 1
    for size in dim_sizes[:-1]:
        acc *= size
        strides.append(acc)
    return strides


def _central_gradient(grid: DescentGrid, idx: int, stride: int) -> float:
    grad = -grid[idx - stride].value / 2 + grid[idx + stride].value / 2
    if math.isinf(grad):
        grad = float(sgn(grad))
    return grad


def gradient_descent(
    grid: DescentGrid, idx: int, step: float = 1.0
) -> tuple[list[Point], list[float]]:
    """Follow the gradient of the arrival times from cell ``idx`` down to a
    cell with arrival time 0.

    Returns the path as real-valued points and the velocity recorded at
    every point. No checks are done: neither the start nor the minimum may
    lie on the border of the map.
    """
    strides = [1, *_strides(grid.dim_sizes)]

    current_coord = list(grid.idx2coord(idx))
    current_point = [float(c) for c in current_coord]
    path: list[Point] = [tuple(current_point)]
    path_velocity: list[float] = [grid[idx].velocity]

    while grid[idx].arrival_time != 0:
        grads = [_central_gradient(grid, idx, stride) for stride in strides]
        max_grad = abs(grads[0])
        for grad in grads[1:]:
            if abs(max_grad) < abs(grad):
                max_grad = grad
        scale = abs(max_grad)

        for dim, grad in enumerate(grads):
            current_point[dim] -= step * grad / scale
            current_coord[dim] = int(current_point[dim] + 0.5)

        path.append(tuple(current_point))
        path_velocity.append(grid[idx].velocity)
        idx = grid.coord2idx(current_coord)

    final_point = tuple(float(c) for c in grid.idx2coord(idx))
    path.append(final_point)
    path_velocity.append(grid[idx].velocity)
    return path, path_velocity