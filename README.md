# fastmethods

Building blocks for Fast Marching style Eikonal solvers on n-dimensional grids.
The package has no dependencies beyond the Python standard library (3.10+).

## Modules

- `fastmethods.utils`: `COMP_MARGIN`, `is_time_better_than(t1, t2)` (true when
  `t1 + COMP_MARGIN < t2`) and `abs_ui(a)`.
- `fastmethods.console`: coloured messages. `info`, `warning` and `error` print to
  standard output, and `str_info`, `str_warning` and `str_error` return the text.
  It also has simple command-line lookups:
  - `find_arguments(argv, name)` returns the position of an option, or -1.
  - `parse_argument(argv, name, convert, default)` returns the converted value that
    follows an option, or `default`.
  - `parse_argument_list(argv, name, convert)` returns the values up to the next
    argument that starts with `-`.
  - The converters are `to_int`, `to_float`, `to_bool` and `to_char`. They read the
    leading number of the text and give 0 when there is none.
- `fastmethods.cells`: `Cell` and `FMCell`, and the `FMState` enum (`OPEN`,
  `NARROW`, `FROZEN`).
  - `Cell` has `value`, `occupancy` and `index`. `is_occupied()` is true when
    occupancy is below `COMP_MARGIN`.
  - `FMCell` adds `state`, `bucket` and `h_value`. It has the properties
    `arrival_time` (the same as `value`), `velocity` (the same as `occupancy`) and
    `total_value`.
  - `set_default()` resets a cell and keeps its occupancy or velocity.
- `fastmethods.heaps`: priority queues of cells ordered by `total_value`.
  - `fm_compare(c1, c2)` is the ordering the heaps use.
  - `FMDaryHeap` is a binary min-heap keyed by cell index. Call `update` after a
    cell's value changes either way, or `increase` after it has been lowered.
  - `FMPriorityQueue` pushes the cell again on `increase`, which gives the
    simplified FMM behaviour.
  - Both have `push`, `pop_min_idx`, `clear`, `set_max_size` and `len()`.
- `fastmethods.solver`: the abstract `Solver` base class.
  - It holds the grid, the initial points and the goal point. Points can be set by
    index or by coordinates.
  - `sanity_check()` returns a `SanityCheck` member. `setup()` raises
    `SolverSetupError` when a check fails.
  - `compute()` calls `compute_internal()` and stores the elapsed whole
    milliseconds in `time`.
- `fastmethods.gradient`: `gradient_descent(grid, idx, step=1.0)`. It follows the
  arrival-time gradient from `idx` down to a cell with arrival time 0 and returns
  the path points and the velocity at each point. No border checks are made. The
  module also has `sgn(val)`.
- `fastmethods.gridwriter`: `save_grid_values`, `save_velocities`, `save_path` and
  `save_path_velocity`. Each writes a plain-text header (cell type where relevant,
  leaf size, number of dimensions, dimension sizes) followed by the data.
- `fastmethods.benchmark`: `Benchmark`. It runs every added solver `nruns` times on
  one grid and shows a progress bar on standard output.
  - Each run is logged as `RunID\tName\tTime`, and the text is available from
    `log_text()`.
  - The log goes to `<path>/<name>.log`, or to the terminal when `log_to_file` is
    false.
  - `save_grid_mode` 1 saves each solver's final grid, 2 saves the grid of every
    run, and 0 saves none.

## Example

```python
from fastmethods.cells import FMCell
from fastmethods.heaps import FMDaryHeap

cells = [FMCell() for _ in range(3)]
for i, (cell, t) in enumerate(zip(cells, (3.0, 1.0, 2.0))):
    cell.index = i
    cell.value = t

heap = FMDaryHeap(len(cells))
for cell in cells:
    heap.push(cell)

print(heap.pop_min_idx())  # 1
```

## What the package does not provide

- **No grid map class.** The solver base, `gradient_descent`, the writers and
  `Benchmark` work with any object that offers the members they use. These
  include indexing to cells, iteration over them, `clean`, `is_clean`,
  `set_clean`, `coord2idx`, `idx2coord`, `dim_sizes` and `leaf_size`.
- **No concrete solvers.** To get one, subclass `Solver` and implement
  `compute_internal()`.
- **No map loading or plotting, and no command-line program.** Benchmarks are
  configured and run from Python code.

## Running the tests

```
pip install -e .[test]
pytest
```