"""Run several solvers on the same grid and log their timings."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO, Union

from . import console
from .gridwriter import save_grid_values
from .solver import Solver

_PROGRESS_SCALE = (
    "0%   10   20   30   40   50   60   70   80   90   100%\n"
    "|----|----|----|----|----|----|----|----|----|----|\n"
)
_PROGRESS_TICKS = 51


class _ProgressDisplay:
    """Textual progress bar of stars."""

    def __init__(self, total: int, stream: TextIO) -> None:
        self._total = total
        self._count = 0
        self._shown = 0
        self._stream = stream
        stream.write(_PROGRESS_SCALE)
        if total == 0:
            stream.write("*" * _PROGRESS_TICKS + "\n")
        stream.flush()

    def tick(self) -> None:
        if self._total == 0:
            return
        self._count += 1
        needed = _PROGRESS_TICKS * self._count // self._total
        if needed > self._shown:
            self._stream.write("*" * (needed - self._shown))
            self._shown = needed
        if self._count == self._total:
            self._stream.write("\n")
        self._stream.flush()


def _fmt(x: float) -> str:
    return format(x, "g")


class Benchmark:
    """Configures, runs and logs a set of solvers on one grid.

    ``save_grid_mode`` 1 saves the grid of the last run of each solver,
    2 saves the grid of every run, 0 saves none. With ``log_to_file`` the log
    goes to ``<path>/<name>.log``, otherwise it is printed.
    """

    def __init__(
        self,
        save_grid_mode: int = 0,
        log_to_file: bool = True,
        *,
        grid=None,
        nruns: int = 10,
        path: Union[str, Path] = "results",
        name: str = "benchmark",
    ) -> None:
        self.save_grid_mode = save_grid_mode
        self.log_to_file = log_to_file
        self.grid = grid
        self.nruns = nruns
        self.path = Path(path)
        self.name = name
        self.solvers: list[Solver] = []
        self.init_points: list[int] = []
        self.goal_idx: Optional[int] = None
        self.run_id = 0
        self._fmt_id = ""
        self._log: list[str] = []

    def add_solver(self, solver: Solver) -> None:
        """Add a solver to be benchmarked."""
        self.solvers.append(solver)

    def set_initial_and_goal_points(
        self, init_points: Sequence[int], goal_idx: Optional[int]
    ) -> None:
        """Set the start cells and the goal cell handed to every solver."""
        self.init_points = list(init_points)
        self.goal_idx = goal_idx

    def set_initial_points(self, init_points: Sequence[int]) -> None:
        """Set the start cells, with no goal."""
        self.set_initial_and_goal_points(init_points, None)

    def run(self) -> None:
        """Run every solver ``nruns`` times, logging and saving as configured."""
        if self.grid is None:
            raise ValueError("no grid set for the benchmark")

        if self.save_grid_mode:
            (self.path / self.name).mkdir(parents=True, exist_ok=True)
        elif self.log_to_file:
            self.path.mkdir(parents=True, exist_ok=True)

        progress = _ProgressDisplay(len(self.solvers) * self.nruns, sys.stdout)

        self._config_solvers()
        self._log_config()

        for solver in self.solvers:
            for _ in range(self.nruns):
                self.run_id += 1
                solver.reset()
                solver.compute()
                self.log_run(solver)
                if self.save_grid_mode == 2:
                    self.save_grid(solver)
                progress.tick()
            if self.save_grid_mode == 1:
                self.save_grid(solver)
            solver.reset()

        if self.log_to_file:
            self.save_log()
        else:
            console.info("Benchmark log format:")
            sys.stdout.write(
                "Name\t#Runs\t#Dims\tDim1...DimN\t#Starts\tStartIdx\tGoalIdx\n"
                "RunID\tName\tTime (ms)\n"
                f"{self.log_text()}\n"
            )
            sys.stdout.flush()

    def log_run(self, solver: Solver) -> None:
        """Log the last run of ``solver``."""
        self._fmt_id = f"{self.run_id:04d}"
        self._log.append(f"\n{self._fmt_id}\t{solver.name}\t{_fmt(solver.time)}")

    def save_grid(self, solver: Solver) -> None:
        """Save the grid values left by the last run of ``solver``."""
        if self.save_grid_mode == 1:
            filename = self.path / self.name / solver.name
        elif self.save_grid_mode == 2:
            filename = self.path / self.name / self._fmt_id
        else:
            raise ValueError("grid saving is disabled for this benchmark")
        save_grid_values(filename.with_suffix(".grid"), solver.grid)

    def save_log(self) -> None:
        """Write the log to ``<path>/<name>.log``."""
        target = self.path / f"{self.name}.log"
        target.write_text(self.log_text(), encoding="utf-8")

    def log_text(self) -> str:
        """The log gathered so far."""
        return "".join(self._log)

    def clear(self) -> None:
        """Release the solvers."""
        for solver in self.solvers:
            solver.clear()
        self.solvers.clear()

    def _log_config(self) -> None:
        dims = "".join(f"{size}\t" for size in self.grid.dim_sizes)
        starts = "".join(f"{idx}\t" for idx in self.init_points)
        goal = "nan" if self.goal_idx is None else str(self.goal_idx)
        self._log.append(
            f"{self.name}\t{self.nruns}\t{len(self.grid.dim_sizes)}\t{dims}"
            f"{len(self.init_points)}\t{starts}{goal}"
        )

    def _config_solvers(self) -> None:
        for solver in self.solvers:
            solver.set_environment(self.grid)
            solver.set_initial_and_goal_points(self.init_points, self.goal_idx)