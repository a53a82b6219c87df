# numlab

A small numerical-methods toolkit: root finding for nonlinear equations and
Lagrange interpolation, with per-iteration tables.

## Installation

```
pip install .
```

## Root finding

`numlab.rootfind` provides four methods. Each returns a `RootResult`
(fields `method`, `root`, `iterations`), where `iterations` is a tuple of
`Iteration` records (`index`, `x0`, `x1`, `estimate`, `error`).

```python
from numlab.rootfind import bisection, false_position, newton_raphson, secant, format_table

f = lambda x: x * x - x - 1
df = lambda x: 2 * x - 1

result = bisection(f, 1.0, 2.0, 0.001)
print(result.root)
print(format_table(result))

false_position(f, 1.0, 2.0)      # tol defaults to 0.001
newton_raphson(f, df, 1.0)
secant(f, 1.0, 2.0)
```

- `bisection` and `false_position` stop once `|f(estimate)|` is within the
  tolerance; each iteration's `error` is that value. They raise
  `BracketError` (a `ValueError`) when `f(x0)` and `f(x1)` have the same sign.
- `newton_raphson` and `secant` stop once two successive estimates are within
  the tolerance; `error` is the distance between them. `newton_raphson`
  raises `ZeroDerivativeError` (a `ZeroDivisionError`) when the derivative is
  zero at an estimate. `secant` raises `ValueError` when `f(x0) == f(x1)` at
  the start, and `ArithmeticError` if that happens in a later step.
- Any method raises `ArithmeticError` if it has not converged after 10,000
  iterations.

`format_table(result)` renders the iterations as a tab-separated table.

### Command line

```
numlab-roots METHOD GUESS [GUESS] [--function NAME] [--tol TOL]
```

`METHOD` is one of `bisection`, `false-position`, `newton-raphson` or
`secant`. Newton-Raphson takes one initial guess, the others take two.
`--tol` defaults to `0.001`. `--function` selects one of the built-in
equations (default `quadratic`):

| name        | f(x)                        |
|-------------|-----------------------------|
| `quadratic` | x² − x − 1                  |
| `exp-decay` | x − e^(−x)                  |
| `xexp-cos`  | x·eˣ − cos x                |
| `xlog`      | x·log10(x) − 1.2            |
| `mixed`     | cos x + (eˣ)ˣ + x² − 3      |

Example:

```
numlab-roots bisection 1 2
numlab-roots newton-raphson 1 --function exp-decay --tol 1e-6
```

The command prints the iteration table and `Root is: ...`. If the guesses are
rejected (no bracket, zero derivative, no convergence) it prints the reason
to standard error and exits with status 1. Only the built-in equations are
available from the command line; for any other function, call the library.

## Lagrange interpolation

```python
from numlab.interpolation import lagrange_weights, lagrange_interpolate

xs = [1.0, 2.0, 4.0]
ys = [1.0, 4.0, 16.0]
print(lagrange_weights(xs, 3.0))          # about [-0.3333, 1.0, 0.3333]
print(lagrange_interpolate(xs, ys, 3.0))  # about 9.0
```

Both raise `ValueError` when the nodes are not distinct;
`lagrange_interpolate` also raises it when `xs` and `ys` differ in length.

### Command line

```
numlab-lagrange XP X0 Y0 X1 Y1 ...
```

Example:

```
numlab-lagrange 3 1 1 2 4 4 16
```

It prints each basis value as `l(i) = ...` followed by `y[XP] = ...`. Data
points must come in x y pairs; repeated x values are reported on standard
error with exit status 1.

## Running the tests

```
pip install .[test]
pytest
```