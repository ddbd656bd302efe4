"""Common interface and bookkeeping for the Eikonal solvers."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Protocol, Sequence

from . import console
from .cells import FMCell


class Grid(Protocol):
    """What a solver needs from a grid map."""

    def clean(self) -> None: ...

    def is_clean(self) -> bool: ...

    def set_clean(self, flag: bool) -> None: ...

    def coord2idx(self, coord: Sequence[int]) -> int: ...

    def __getitem__(self, idx: int) -> FMCell: ...


class SanityCheck(Enum):
    """Outcome of the checks run before a solver starts."""

    OK = (0, "")
    NO_GRID = (1, "No grid map set.")
    GRID_NOT_CLEAN = (2, "Grid map set is not clean.")
    NO_INITIAL_POINTS = (3, "Initial points were not set.")
    INIT_POINT_OCCUPIED = (4, "A init point is in a obstacle.")
    GOAL_POINT_OCCUPIED = (5, "A goal point is in a obstacle.")
    START_EQUALS_GOAL = (6, "A start is equal to a goal point.")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


class SolverSetupError(RuntimeError):
    """Raised when a solver is not ready to run."""

    def __init__(self, check: SanityCheck) -> None:
        super().__init__(f"Global sanity checks not successful: {check.message}")
        self.check = check


class Solver(ABC):
    """Base class of the solvers: holds the grid, start and goal points and
    the time taken by the last computation."""

    def __init__(self, name: str = "GenericSolver") -> None:
        self.name = name
        self.grid: Optional[Grid] = None
        self.init_points: list[int] = []
        self.goal_idx: Optional[int] = None
        self.setup_done = False
        self.time: float = 0.0

    def set_environment(self, grid: Grid) -> None:
        """Set the grid to work on and clean it."""
        self.grid = grid
        grid.clean()

    def set_initial_and_goal_points(
        self, init_points: Sequence[int], goal_idx: Optional[int]
    ) -> None:
        """Set the start cells and the goal cell by grid index."""
        self.init_points = list(init_points)
        self.goal_idx = goal_idx

    def set_initial_points(self, init_points: Sequence[int]) -> None:
        """Set the start cells by grid index, with no goal."""
        self.set_initial_and_goal_points(init_points, None)

    def set_initial_and_goal_coords(
        self, init_coord: Sequence[int], goal_coord: Sequence[int]
    ) -> None:
        """Set one start cell and the goal cell by grid coordinates."""
        grid = self._require_grid()
        self.set_initial_and_goal_points(
            [grid.coord2idx(init_coord)], grid.coord2idx(goal_coord)
        )

    def set_initial_coord(self, init_coord: Sequence[int]) -> None:
        """Set one start cell by grid coordinates, with no goal."""
        grid = self._require_grid()
        self.set_initial_and_goal_points([grid.coord2idx(init_coord)], None)

    def sanity_check(self) -> SanityCheck:
        """Check that the solver is ready to run."""
        grid = self.grid
        if grid is None:
            return SanityCheck.NO_GRID
        if not grid.is_clean():
            return SanityCheck.GRID_NOT_CLEAN
        if not self.init_points:
            return SanityCheck.NO_INITIAL_POINTS
        # With several start points this may be a velocities map computation.
        if len(self.init_points) == 1 and grid[self.init_points[0]].is_occupied():
            return SanityCheck.INIT_POINT_OCCUPIED
        if self.goal_idx is not None:
            if grid[self.goal_idx].is_occupied():
                return SanityCheck.GOAL_POINT_OCCUPIED
            if self.goal_idx in self.init_points:
                return SanityCheck.START_EQUALS_GOAL
        return SanityCheck.OK

    def setup(self) -> None:
        """Run the sanity checks and mark the grid as in use."""
        check = self.sanity_check()
        if check is not SanityCheck.OK:
            raise SolverSetupError(check)
        self._require_grid().set_clean(False)
        self.setup_done = True

    def compute(self) -> None:
        """Run the solver and record the elapsed time in milliseconds."""
        start = time.perf_counter_ns()
        self.compute_internal()
        self.time = (time.perf_counter_ns() - start) // 1_000_000

    @abstractmethod
    def compute_internal(self) -> None:
        """The actual computation of each solver."""

    def clear(self) -> None:
        """Forget the start and goal points."""
        self.init_points = []
        self.goal_idx = None
        self.setup_done = False

    def reset(self) -> None:
        """Clean the grid so the solver can run again."""
        self.setup_done = False
        self._require_grid().clean()

    def print_run_info(self) -> None:
        """Print information about the last run."""
        console.warning("No run info available.")

    def _require_grid(self) -> Grid:
        if self.grid is None:
            raise SolverSetupError(SanityCheck.NO_GRID)
        return self.grid