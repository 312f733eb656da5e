# lidcavity

lidcavity is a small two-dimensional solver for lid-driven cavity flow. It
solves the incompressible Navier–Stokes equations on a 2 × 2 domain with a
finite-difference scheme on a uniform grid. Each time step does four things:

1. It builds the right-hand side of the pressure Poisson equation.
2. It relaxes the pressure with a fixed number of Jacobi sweeps.
3. It updates the velocities.
4. It applies the boundary conditions: no-slip walls, and a lid that moves with unit velocity.

Results are written as VTK XML rectilinear-grid files (`.vtr`).

## Installation

```
pip install .
```

The package needs Python 3.10 or newer and depends on numpy.

## Command line

```
lid-cavity [options]
```

You can also start it with `python -m lidcavity.cli [options]`.

| Option | Meaning | Default |
|---|---|---|
| `-x N`, `--cells=N` | Grid points in both dimensions | 500 |
| `-n N`, `--iters=N` | Number of time steps | 5000 |
| `-f N`, `--freq=N` | Steps between progress lines and checkpoints | 100 |
| `-d`, `--noio` | Write no files | off |
| `-o FILE`, `--output=FILE` | Base name for output files | `out/lid-cavity` |
| `-c`, `--checkpoint` | Write a checkpoint every `freq` steps | off |
| `-v`, `--verbose` | Print the options in use before running | off |
| `-h`, `--help` | Print the help text and exit | |

Numeric option values are read leniently. The leading integer is used, and a
value with no leading digits counts as 0.

`-h` prints the help text and exits with status 1. An unrecognised option or a
missing value does the same, after it prints an error message to standard error.

### Output files

- The final state goes to `BASENAME.vtr`.
- Checkpoints go to `BASENAME-ITERATION.vtr`.

The directory that holds the base name must already exist. If a file cannot be
opened, the program prints `Error: <reason>` to standard error and keeps running.

Each file holds three data arrays:

- the grid coordinates;
- the velocity `(u, v, 0)` at each point;
- the pressure for each cell.

### Time step

The time step follows from the grid spacing:
`dt = 0.9 / (2 · (1/dx² + 1/dy²))`, with `dx = 2 / (nx − 1)` and `dy = 2 / (ny − 1)`.

### Example

This runs a 64 × 64 grid for 500 steps and writes a checkpoint every 100 steps:

```
mkdir -p out
lid-cavity -x 64 -n 500 -f 100 -c -o out/cavity
```

The program prints a progress line every `freq` steps and a final line at the
end. It then prints the total run time and the time spent in each solver phase:
`build_rhs`, `solve_poissons`, `update_velocities` and `apply_boundary`.

## Library use

```python
from lidcavity.config import Config, parse_args
from lidcavity.solver import Cavity
from lidcavity.vtk import render_vtk, write_vtk

config = parse_args(["-x", "32", "-n", "10"])
cavity = Cavity(config)
for _ in range(config.n_iters):
    cavity.step()
write_vtk("cavity.vtr", cavity, 0, 0.0)
```

### `lidcavity.config`

- `Config` is a dataclass that holds every run setting:
  - domain size: `X`, `Y`;
  - grid: `nx`, `ny`;
  - steps: `n_iters`, and `nit` Poisson sweeps per step;
  - physics: `rho`, `nu`;
  - output: `output_freq`, `no_output`, `enable_checkpoints`, `verbose`, `basename`.

  The properties `dx`, `dy` and `dt` are derived from these settings.
- `parse_args(argv)` builds a `Config` from the arguments, without the program
  name. It raises `HelpRequested` for `-h`/`--help` and `UsageError` for a bad
  command line.
- `format_help(progname)` returns the help text.
- `format_options(config)` returns the banner that `-v` prints.

### `lidcavity.solver`

- `Cavity(config)` holds the fields as numpy arrays of shape `(nx, ny)`:
  - `u`, `v`: velocities;
  - `p`: pressure;
  - `b`: Poisson right-hand side;
  - `x`, `y`: coordinates.

  The row `i = nx - 1` is the moving lid.
- The phases of a time step are `build_rhs()`, `solve_poissons()`,
  `update_velocities()` and `apply_boundary()`. `step()` runs all four in that
  order.
- `cavity.timers` is a `Timers` instance. It adds up the wall-clock seconds spent
  in each phase.

### `lidcavity.vtk`

- `render_vtk(cavity, iters, t)` returns the document as a string.
- `write_vtk(path, cavity, iters, t)` writes the document to `path`. It raises
  `OSError` if the file cannot be opened.
- `write_checkpoint(cavity, iteration)` and `write_result(cavity)` write under
  the config's base name.
- `checkpoint_filename(basename, iteration)` and `result_filename(basename)`
  return the file names those functions use.

### `lidcavity.cli`

- `run(config, out)` runs a whole simulation the way the command does. It writes
  progress to the text stream `out` and returns the final `Cavity`.
- `main(argv=None)` is the command's entry point. It returns the exit status.

## What it does not do

- The solver runs in a single process, using numpy array operations. It has no
  multi-process, multi-threaded or GPU execution.
- The command line cannot set the domain size, the number of Poisson sweeps,
  `rho` or `nu`. To change them, build a `Config` directly.
- The grid coordinates always span 0 to 2, whatever `X` and `Y` are set to.
- Output files can only be written. A run cannot be resumed from a checkpoint.