"""Lagrange interpolation through a set of data points."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Iterable, Sequence


def lagrange_weights(xs: Iterable[float], xp: float) -> list[float]:
    """Return the Lagrange basis values l_i(xp) for the nodes xs."""
    nodes = list(xs)
    if len(set(nodes)) != len(nodes):
        raise ValueError("interpolation nodes must be distinct")
    return [
        math.prod(
            ((xp - xj) / (xi - xj) for j, xj in enumerate(nodes) if j != i),
            start=1.0,
        )
        for i, xi in enumerate(nodes)
    ]


def lagrange_interpolate(
    xs: Iterable[float], ys: Iterable[float], xp: float
) -> float:
    """Evaluate the interpolating polynomial through (xs, ys) at xp."""
    nodes, values = list(xs), list(ys)
    if len(nodes) != len(values):
        raise ValueError("xs and ys must have the same length")
    weights = lagrange_weights(nodes, xp)
    return sum((w * y for w, y in zip(weights, values)), 0.0)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: interpolate at XP through x y pairs."""
    parser = argparse.ArgumentParser(
        prog="lagrange", description="Lagrange interpolation at a point."
    )
    parser.add_argument("xp", type=float, help="point to interpolate at")
    parser.add_argument(
        "points", nargs="*", type=float, help="data points as x y pairs"
    )
    args = parser.parse_args(argv)
    if len(args.points) % 2:
        parser.error("data points must be given as x y pairs")
    xs, ys = args.points[0::2], args.points[1::2]
    try:
        weights = lagrange_weights(xs, args.xp)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    for i, weight in enumerate(weights):
        print(f"l({i}) = {weight:f}")
    yp = sum((w * y for w, y in zip(weights, ys)), 0.0)
    print(f"y[{args.xp:f}] = {yp:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())