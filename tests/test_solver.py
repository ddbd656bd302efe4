import math

import pytest

from fastmethods.cells import FMCell, FMState
from fastmethods.solver import SanityCheck, Solver, SolverSetupError


class FakeGrid:
    def __init__(self, width, height):
        self.width = width
        self.cells = [FMCell(index=i) for i in range(width * height)]
        self._clean = False
        self.clean_calls = 0

    def clean(self):
        for c in self.cells:
            c.set_default()
        self._clean = True
        self.clean_calls += 1

    def is_clean(self):
        return self._clean

    def set_clean(self, flag):
        self._clean = flag

    def coord2idx(self, coord):
        return coord[0] + coord[1] * self.width

    def __getitem__(self, idx):
        return self.cells[idx]


class ZeroSolver(Solver):
    def compute_internal(self):
        if not self.setup_done:
            self.setup()
        for i in self.init_points:
            self.grid[i].arrival_time = 0.0
            self.grid[i].state = FMState.FROZEN


def ready_solver():
    grid = FakeGrid(4, 3)
    solver = ZeroSolver("zero")
    Solver.set_environment(solver, grid)
    return solver, grid


def test_solver_is_abstract():
    with pytest.raises(TypeError):
        Solver()


def test_default_name():
    class Plain(Solver):
        def compute_internal(self):
            pass

    solver = Plain()
    assert solver.name == "GenericSolver"
    assert Solver.sanity_check(solver) is SanityCheck.NO_GRID


def test_set_environment_cleans_grid():
    grid = FakeGrid(2, 2)
    grid.cells[0].arrival_time = 3.0
    solver = ZeroSolver()
    Solver.set_environment(solver, grid)
    assert grid.is_clean()
    assert solver.grid is grid
    assert math.isinf(grid.cells[0].arrival_time)


def test_no_grid():
    solver = ZeroSolver()
    assert Solver.sanity_check(solver) is SanityCheck.NO_GRID
    with pytest.raises(SolverSetupError) as exc:
        Solver.setup(solver)
    assert exc.value.check is SanityCheck.NO_GRID


def test_grid_not_clean():
    solver, grid = ready_solver()
    Solver.set_initial_points(solver, [1])
    grid.set_clean(False)
    assert Solver.sanity_check(solver) is SanityCheck.GRID_NOT_CLEAN


def test_no_initial_points():
    solver, _ = ready_solver()
    assert Solver.sanity_check(solver) is SanityCheck.NO_INITIAL_POINTS


def test_init_point_occupied_only_for_single_start():
    solver, grid = ready_solver()
    grid.cells[1].velocity = 0.0
    Solver.set_initial_points(solver, [1])
    assert Solver.sanity_check(solver) is SanityCheck.INIT_POINT_OCCUPIED
    Solver.set_initial_points(solver, [1, 2])
    assert Solver.sanity_check(solver) is SanityCheck.OK


def test_goal_occupied_and_equal_start():
    solver, grid = ready_solver()
    grid.cells[5].velocity = 0.0
    Solver.set_initial_and_goal_points(solver, [1], 5)
    assert Solver.sanity_check(solver) is SanityCheck.GOAL_POINT_OCCUPIED
    Solver.set_initial_and_goal_points(solver, [1, 3], 3)
    assert Solver.sanity_check(solver) is SanityCheck.START_EQUALS_GOAL
    with pytest.raises(SolverSetupError) as exc:
        Solver.setup(solver)
    assert exc.value.check.code == 6
    assert "A start is equal to a goal point." in str(exc.value)


def test_setup_marks_grid_in_use():
    solver, grid = ready_solver()
    Solver.set_initial_and_goal_points(solver, [0], 11)
    Solver.setup(solver)
    assert solver.setup_done is True
    assert grid.is_clean() is False


def test_coordinates_are_converted():
    solver, grid = ready_solver()
    Solver.set_initial_and_goal_coords(solver, (1, 2), (3, 1))
    assert solver.init_points == [grid.coord2idx((1, 2))]
    assert solver.goal_idx == grid.coord2idx((3, 1))
    Solver.set_initial_coord(solver, (2, 0))
    assert solver.init_points == [grid.coord2idx((2, 0))]
    assert solver.goal_idx is None


def test_coordinates_need_a_grid():
    solver = ZeroSolver()
    with pytest.raises(SolverSetupError):
        Solver.set_initial_coord(solver, (0, 0))
    assert Solver.sanity_check(solver) is SanityCheck.NO_GRID


def test_compute_runs_and_times():
    solver, grid = ready_solver()
    Solver.set_initial_points(solver, [4])
    Solver.compute(solver)
    assert grid.cells[4].arrival_time == 0.0
    assert grid.cells[4].state is FMState.FROZEN
    assert solver.time >= 0
    assert solver.setup_done


def test_reset_cleans_grid_again():
    solver, grid = ready_solver()
    Solver.set_initial_points(solver, [4])
    Solver.compute(solver)
    calls = grid.clean_calls
    Solver.reset(solver)
    assert grid.clean_calls == calls + 1
    assert solver.setup_done is False
    assert math.isinf(grid.cells[4].arrival_time)
    assert grid.cells[4].state is FMState.OPEN


def test_clear_forgets_points():
    solver, _ = ready_solver()
    Solver.set_initial_and_goal_points(solver, [0, 1], 7)
    Solver.setup(solver)
    Solver.clear(solver)
    assert solver.init_points == []
    assert solver.goal_idx is None
    assert solver.setup_done is False


def test_print_run_info(capsys):
    Solver.print_run_info(ZeroSolver())
    assert "[WARNING] No run info available." in capsys.readouterr().out