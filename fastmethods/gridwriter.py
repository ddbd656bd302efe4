"""Save grid values, velocities and paths as ASCII text files."""

from __future__ import annotations

import os
from typing import Iterable, Iterator, Protocol, Sequence, Union

from .cells import FMCell

PathLike = Union[str, "os.PathLike[str]"]


class WritableGrid(Protocol):
    """What the writers need from a grid map."""

    leaf_size: float
    dim_sizes: Sequence[int]

    def __getitem__(self, idx: int) -> FMCell: ...

    def __iter__(self) -> Iterator[FMCell]: ...


def _fmt(x: float) -> str:
    return format(x, "g")


def _header(grid: WritableGrid, dim_suffix: str) -> str:
    text = f"{_fmt(grid.leaf_size)}\n{len(grid.dim_sizes)}"
    return text + "".join(f"\n{size}{dim_suffix}" for size in grid.dim_sizes)


def _write(filename: PathLike, text: str) -> None:
    with open(filename, "w", encoding="utf-8") as stream:
        stream.write(text)


def _save_cells(filename: PathLike, grid: WritableGrid, values: Iterable[float]) -> None:
    text = f"{grid[0].type_name()}\n" + _header(grid, "\t")
    text += "".join(f"\n{_fmt(v)}" for v in values)
    _write(filename, text)


def save_grid_values(filename: PathLike, grid: WritableGrid) -> None:
    """Write the cell type, leaf size, dimensions and every cell value."""
    _save_cells(filename, grid, (cell.value for cell in grid))


def save_velocities(filename: PathLike, grid: WritableGrid) -> None:
    """Write the cell type, leaf size, dimensions and every cell velocity."""
    _save_cells(filename, grid, (cell.velocity for cell in grid))


def save_path(
    filename: PathLike, grid: WritableGrid, path: Iterable[Sequence[float]]
) -> None:
    """Write the leaf size, dimensions and one tab-separated line per point."""
    text = _header(grid, "\t")
    text += "".join(
        "\n" + "".join(f"{_fmt(c)}\t" for c in point) for point in path
    )
    _write(filename, text)


def save_path_velocity(
    filename: PathLike,
    grid: WritableGrid,
    path: Iterable[Sequence[float]],
    path_velocity: Iterable[float],
) -> None:
    """Write the leaf size, dimensions and one line per point ending with
    its velocity."""
    text = _header(grid, "")
    text += "".join(
        "\n" + "".join(f"{_fmt(c)}\t" for c in point) + _fmt(vel)
        for point, vel in zip(path, path_velocity)
    )
    _write(filename, text)