# mggss

A multigrid Gauss-Seidel solver for the Poisson equation on the unit square.
The boundary values are held at zero.

Each multigrid cycle works like this on every level:

1. Run one Gauss-Seidel sweep.
2. Write the residual into the right-hand side.
3. Restrict the residual to a grid with half as many points per side.
4. Run one sweep on that coarser grid.
5. Recurse, up to `gamma` levels deep.
6. Prolongate the coarse correction back, add it to the saved solution, and
   run one more sweep.

Cycles repeat until the residual norm is no longer above the tolerance.

## Installation

```
pip install .
```

The only runtime dependency is numpy.

## Command line

```
mggss
```

With no options, the command solves a grid of 199 interior points per side.
The right-hand side is a disc of constant density at the centre. The command
uses up to 6 coarser levels and a tolerance of `1e-10`.

Options:

- `--n N`: interior points per side. The default is 199. It should be odd.
  Negative values are rejected.
- `--tolerance T`: error limit. The default is `1e-10`.
- `--gamma G`: number of coarser levels. The default is 6.
- `--source {circle,gaussian}`: shape of the right-hand side. The default is
  `circle`.

After every cycle, the command prints one line:

```
Error: <eps> 	 Error_Fractional: <ratio>
```

Here `<ratio>` is the error divided by the error of the previous cycle.

When the cycles finish, the command prints the solution as lines of
`x, y, u, v`. There is a blank line after each grid row and another at the
end.

## Library use

```python
from mggss.cli import Source, initialize, solve
from mggss.routines import format_output

grid = initialize(199, Source.CIRCLE)
errors = solve(grid, 1e-10, 6, print)
text = format_output(grid)
```

### `mggss.grid`

`Grid(u, v)` holds the solution `u` and the right-hand side `v`. Both are
arrays of shape `(n + 2, n + 2)` that include the boundary. The constructor
turns them into float arrays. It raises `ValueError` in three cases: `u` is
not square, `u` is smaller than 2 x 2, or the two shapes differ.

- `Grid.zeros(n)` creates an all-zero grid with `n` interior points per side.
  It raises `ValueError` for a negative `n`.
- `n` is the number of interior points per side.
- `h` is the step width, `1 / (n + 1)`.
- `copy()` returns an independent copy.

### `mggss.routines`

All routines except `max_norm` and `format_output` change their grids in
place.

- `gauss_seidel(grid)` runs one Gauss-Seidel sweep over the interior.
- `add_eval(alpha, grid)` adds `alpha` times the discrete Laplace operator of
  `u` to `v`.
- `restriction(fine, coarse)` does three things:
  - writes the fine-grid residual into `fine.v`;
  - restricts that residual to `coarse.v`;
  - sets `coarse.u` to zero.
- `prolongation(coarse, fine)` interpolates `coarse.u` onto the interior of
  `fine.u`.
- `max_norm(u, n)` returns the largest absolute value among the interior
  points. It returns 0.0 for an empty interior.
- `multigrid(grid, level=0, gamma=6)` runs one cycle. It returns the maximum
  norm of the residual found on the deepest level visited.
- `format_output(grid)` renders the grid in the command's output format.

`restriction` and `prolongation` raise `ValueError` unless the coarse grid
has `n // 2` interior points, where `n` is the fine grid's count.

### `mggss.cli`

- `Source` selects the right-hand side:
  - `CIRCLE` has a value of 100 inside a radius of 0.1 and 0 outside.
  - `GAUSSIAN` is `exp(-1000 r²)`.
- `initialize(n, source=Source.CIRCLE)` returns a zero-solution grid with the
  chosen right-hand side.
- `solve(grid, tolerance=1e-10, gamma=6, report=None)` runs cycles until the
  error is no longer above `tolerance`.
  - After each cycle, it calls `report(error, ratio)` when `report` is given.
    `ratio` is the error divided by the previous error.
  - It returns the list of errors, one per cycle.
- `main(argv=None)` is the command-line entry point. It returns 0.

## Limitations

The solution is only printed to standard output. The package does not write
files or plots. It offers no way to set a right-hand side other than the two
built-in sources, except by filling `Grid.v` yourself.