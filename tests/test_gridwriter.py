import math
from pathlib import Path

from fastmethods.cells import FMCell
from fastmethods.gridwriter import (
    save_grid_values,
    save_path,
    save_path_velocity,
    save_velocities,
)


class _Grid:
    def __init__(self, dims, leaf_size=1.0):
        self.dim_sizes = list(dims)
        self.leaf_size = leaf_size
        self.cells = [FMCell(index=i) for i in range(math.prod(dims))]

    def __getitem__(self, idx):
        return self.cells[idx]

    def __iter__(self):
        return iter(self.cells)


def _grid():
    grid = _Grid((3, 2), leaf_size=0.5)
    for cell, value in zip(grid.cells, [0.0, 1.5, 2.25, 3.0, 4.5, math.inf]):
        cell.arrival_time = value
    for cell, vel in zip(grid.cells, [1.0, 0.5, 0.0, 0.25, 0.75, 1.0]):
        cell.velocity = vel
    return grid


def test_save_grid_values(tmp_path):
    grid = _grid()
    target = tmp_path / "values.grid"
    save_grid_values(str(target), grid)
    text = target.read_text()
    assert not text.endswith("\n")
    lines = text.split("\n")
    assert lines[0] == "FMCell - Fast Marching cell"
    assert float(lines[1]) == grid.leaf_size
    assert int(lines[2]) == 2
    assert lines[3:5] == ["3\t", "2\t"]
    assert [float(v) for v in lines[5:]] == [c.value for c in grid.cells]
    assert lines[-1] == "inf"


def test_save_velocities(tmp_path):
    grid = _grid()
    target = tmp_path / "vels.grid"
    save_velocities(target, grid)
    lines = target.read_text().split("\n")
    assert lines[0] == grid[0].type_name()
    assert lines[3:5] == ["3\t", "2\t"]
    assert [float(v) for v in lines[5:]] == [c.velocity for c in grid.cells]


def test_save_path(tmp_path):
    grid = _grid()
    path = [(1.0, 1.0), (1.5, 0.25), (2.0, 0.0)]
    target = tmp_path / "path.txt"
    save_path(target, grid, path)
    lines = target.read_text().split("\n")
    assert float(lines[0]) == grid.leaf_size
    assert int(lines[1]) == 2
    assert lines[2:4] == ["3\t", "2\t"]
    points = [line.split("\t") for line in lines[4:]]
    assert all(fields[-1] == "" for fields in points)
    assert [tuple(float(x) for x in fields[:-1]) for fields in points] == path


def test_save_path_velocity(tmp_path):
    grid = _grid()
    path = [(1.0, 1.0), (1.5, 0.25)]
    vels = [0.5, 0.75]
    target = tmp_path / "pathvel.txt"
    save_path_velocity(target, grid, path, vels)
    lines = target.read_text().split("\n")
    assert lines[2:4] == ["3", "2"]
    rows = [[float(x) for x in line.split("\t")] for line in lines[4:]]
    assert [tuple(r[:2]) for r in rows] == path
    assert [r[2] for r in rows] == vels


def test_overwrites_existing_file(tmp_path):
    grid = _grid()
    target = Path(tmp_path) / "again.grid"
    target.write_text("stale content that is much longer than needed " * 50)
    save_grid_values(target, grid)
    first = target.read_text()
    save_grid_values(target, grid)
    assert target.read_text() == first
    assert "stale" not in first