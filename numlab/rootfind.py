"""Root finding for nonlinear equations: bisection, false position,
Newton-Raphson and secant methods, with per-iteration tables."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Callable, Sequence

Function = Callable[[float], float]

DEFAULT_TOLERANCE = 0.001
_MAX_ITERATIONS = 10_000

BISECTION = "bisection"
FALSE_POSITION = "false-position"
NEWTON_RAPHSON = "newton-raphson"
SECANT = "secant"

_BRACKETING = (BISECTION, FALSE_POSITION)


class BracketError(ValueError):
    """The initial guesses do not bracket a root."""

    def __init__(self, x0: float, x1: float) -> None:
        super().__init__(
            f"Invalid input: f({x0:g}) and f({x1:g}) have the same sign"
        )
        self.x0 = x0
        self.x1 = x1


class ZeroDerivativeError(ZeroDivisionError):
    """The derivative vanishes at the current estimate."""

    def __init__(self, x: float) -> None:
        super().__init__(f"derivative is zero at x = {x:g}")
        self.x = x


@dataclass(frozen=True)
class Iteration:
    """One step of an iterative method.

    For bracketing methods ``error`` is ``|f(estimate)|``; for the open
    methods it is the distance between successive estimates.
    """

    index: int
    x0: float
    x1: float
    estimate: float
    error: float


@dataclass(frozen=True)
class RootResult:
    """The root found and the iterations that led to it."""

    method: str
    root: float
    iterations: tuple[Iteration, ...]


def _bracketing(
    method: str,
    f: Function,
    x0: float,
    x1: float,
    tol: float,
    step: Callable[[float, float, float, float], float],
) -> RootResult:
    f0, f1 = f(x0), f(x1)
    if f0 * f1 > 0:
        raise BracketError(x0, x1)
    steps: list[Iteration] = []
    for index in range(_MAX_ITERATIONS):
        x2 = step(x0, x1, f0, f1)
        f2 = f(x2)
        steps.append(Iteration(index, x0, x1, x2, abs(f2)))
        if f2 == 0 or not abs(f2) > tol:
            return RootResult(method, x2, tuple(steps))
        if f0 * f2 < 0:
            x1, f1 = x2, f2
        else:
            x0, f0 = x2, f2
    raise ArithmeticError(f"{method} did not converge")


def bisection(
    f: Function, x0: float, x1: float, tol: float = DEFAULT_TOLERANCE
) -> RootResult:
    """Halve the bracket [x0, x1] until |f| at the midpoint is within tol."""
    return _bracketing(
        BISECTION, f, x0, x1, tol, lambda a, b, fa, fb: (a + b) / 2
    )


def false_position(
    f: Function, x0: float, x1: float, tol: float = DEFAULT_TOLERANCE
) -> RootResult:
    """Regula falsi on the bracket [x0, x1] until |f| is within tol."""
    return _bracketing(
        FALSE_POSITION,
        f,
        x0,
        x1,
        tol,
        lambda a, b, fa, fb: (a * fb - b * fa) / (fb - fa),
    )


def newton_raphson(
    f: Function, df: Function, x0: float, tol: float = DEFAULT_TOLERANCE
) -> RootResult:
    """Newton-Raphson iteration from x0 until successive estimates agree within tol."""
    if df(x0) == 0:
        raise ZeroDerivativeError(x0)
    steps: list[Iteration] = []
    for index in range(_MAX_ITERATIONS):
        slope = df(x0)
        if slope == 0:
            raise ZeroDerivativeError(x0)
        x1 = x0 - f(x0) / slope
        error = abs(x1 - x0)
        steps.append(Iteration(index, x0, x1, x1, error))
        if f(x1) == 0 or not error > tol:
            return RootResult(NEWTON_RAPHSON, x1, tuple(steps))
        x0 = x1
    raise ArithmeticError(f"{NEWTON_RAPHSON} did not converge")


def secant(
    f: Function, x0: float, x1: float, tol: float = DEFAULT_TOLERANCE
) -> RootResult:
    """Secant iteration from x0, x1 until successive estimates agree within tol."""
    if f(x0) == f(x1):
        raise ValueError("f(x0) equals f(x1); choose another guess")
    steps: list[Iteration] = []
    for index in range(_MAX_ITERATIONS):
        f0, f1 = f(x0), f(x1)
        if f0 == f1:
            raise ArithmeticError(
                f"secant step undefined: f({x0:g}) equals f({x1:g})"
            )
        x2 = (x0 * f1 - x1 * f0) / (f1 - f0)
        error = abs(x2 - x1)
        steps.append(Iteration(index, x0, x1, x2, error))
        if not error > tol:
            return RootResult(SECANT, x2, tuple(steps))
        x0, x1 = x1, x2
    raise ArithmeticError(f"{SECANT} did not converge")


def format_table(result: RootResult) -> str:
    """Render the iterations of a result as a tab-separated table."""
    if result.method in _BRACKETING:
        lines = ["iteration\tX0\tX1\tX2\tF(X2)", "-" * 62]
        lines.extend(
            f"{it.index}\t{it.x0:f}\t{it.x1:f}\t{it.estimate:f}\t{it.error:f}"
            for it in result.iterations
        )
    else:
        lines = [" iteration \t x0\t x1\t ea"]
        lines.extend(
            f"{it.index} \t{it.x0:f} \t {it.x1:f} \t{it.error:f}"
            for it in result.iterations
        )
    return "\n".join(lines)


FUNCTIONS: dict[str, tuple[Function, Function]] = {
    "quadratic": (
        lambda x: x * x - x - 1,
        lambda x: 2 * x - 1,
    ),
    "exp-decay": (
        lambda x: x - math.exp(-x),
        lambda x: 1 + math.exp(-x),
    ),
    "xexp-cos": (
        lambda x: x * math.exp(x) - math.cos(x),
        lambda x: math.exp(x) + x * math.exp(x) + math.sin(x),
    ),
    "xlog": (
        lambda x: x * math.log10(x) - 1.2,
        lambda x: math.log10(x) + 1 / math.log(10),
    ),
    "mixed": (
        lambda x: math.cos(x) + math.exp(x) ** x + x * x - 3,
        lambda x: -math.sin(x) + 2 * x * math.exp(x * x) + 2 * x,
    ),
}

_FUNCTION_HELP = {
    "quadratic": "x^2 - x - 1",
    "exp-decay": "x - e^(-x)",
    "xexp-cos": "x e^x - cos x",
    "xlog": "x log10(x) - 1.2",
    "mixed": "cos x + (e^x)^x + x^2 - 3",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rootfind", description="Find a root of a nonlinear equation."
    )
    parser.add_argument(
        "method", choices=[BISECTION, FALSE_POSITION, NEWTON_RAPHSON, SECANT]
    )
    parser.add_argument(
        "guesses",
        nargs="+",
        type=float,
        help="initial guesses: two for bracketing and secant, one for newton-raphson",
    )
    parser.add_argument(
        "--function",
        choices=sorted(FUNCTIONS),
        default="quadratic",
        help="; ".join(f"{k}: {v}" for k, v in _FUNCTION_HELP.items()),
    )
    parser.add_argument("--tol", type=float, default=DEFAULT_TOLERANCE)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    f, df = FUNCTIONS[args.function]
    wanted = 1 if args.method == NEWTON_RAPHSON else 2
    if len(args.guesses) != wanted:
        parser.error(f"{args.method} takes {wanted} initial guess(es)")
    try:
        if args.method == BISECTION:
            result = bisection(f, *args.guesses, args.tol)
        elif args.method == FALSE_POSITION:
            result = false_position(f, *args.guesses, args.tol)
        elif args.method == NEWTON_RAPHSON:
            result = newton_raphson(f, df, args.guesses[0], args.tol)
        else:
            result = secant(f, *args.guesses, args.tol)
    except (ValueError, ArithmeticError) as exc:
        print(exc, file=sys.stderr)
        return 1
    if args.method in _BRACKETING:
        print("\n initial guess bracket the root\n")
    print(format_table(result))
    print(f"\nRoot is: {result.root:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())