"""Trapezoidal integration of |x^3| over an evenly spaced grid."""

from __future__ import annotations

import argparse

import numpy as np
from numpy.typing import ArrayLike, NDArray


def linspace(start: float, end: float, number_of_points: int) -> NDArray[np.float64]:
    """Return ``number_of_points`` evenly spaced values from ``start`` to ``end``."""
    if number_of_points < 2:
        raise ValueError("number_of_points must be at least 2")
    dx = (end - start) / (number_of_points - 1)
    return start + np.arange(number_of_points) * dx


def integrate(data: ArrayLike, dx: float) -> float:
    """Return the trapezoidal integral of samples ``data`` with spacing ``dx``."""
    arr = np.asarray(data, dtype=float)
    if arr.ndim != 1:
        raise ValueError("data must be one-dimensional")
    if arr.size < 2:
        return 0.0
    return float(np.sum((arr[1:] + arr[:-1]) * dx / 2))


def absolute_cube_function(points: ArrayLike) -> NDArray[np.float64]:
    """Return ``|x|^3`` for every value in ``points``."""
    return np.abs(np.asarray(points, dtype=float)) ** 3


def main(argv: list[str] | None = None) -> int:
    """Integrate |x^3| from -4 to 4 and print the result."""
    argparse.ArgumentParser(description="Integrate |x^3| from -4 to 4.").parse_args(argv)
    print("Code is supposed to compute the integral of |x\u00b3| from -4 to 4.")
    number_of_points = 10000
    start, end = -4.0, 4.0
    points = linspace(start, end, number_of_points)
    dx = (end - start) / (number_of_points - 1)
    result = integrate(absolute_cube_function(points), dx)
    print(f"Integration of |x\u00b3| from -4 to 4 {result:f}")
    print("The result should be close to 128 ")
    return 0