"""A Fermi-Pasta-Ulam-Tsingou chain with fixed ends and its normal modes."""

from __future__ import annotations

import argparse
import math
import os
import sys
from functools import lru_cache
from typing import TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

FloatArray = NDArray[np.float64]
State = tuple[FloatArray, FloatArray]

ALPHA = 0.1
N_PARTICLES = 32
E_0 = 32.0
DT = 0.1
T_MAX = 1_000_000.0
EVERY = 1000

_HARMONIC_T_MAX = 25000.0
_HARMONIC_MODES = 5


def _chain(values: ArrayLike, name: str) -> FloatArray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError(f"{name} must be a non-empty one-dimensional vector")
    return arr


@lru_cache(maxsize=16)
def _mode_matrix(n: int) -> FloatArray:
    index = np.arange(1, n + 1)
    matrix = math.sqrt(2.0 / (n + 1)) * np.sin(np.outer(index, index) * math.pi / (n + 1))
    matrix.setflags(write=False)
    return matrix


def transform_to_normal_modes(values: ArrayLike) -> FloatArray:
    """Return the sine transform of ``values``.

    The transform is orthogonal and symmetric, so applying it twice gives the
    original values back: it maps coordinates to normal modes and back again.
    """
    x = _chain(values, "values")
    return _mode_matrix(x.size) @ x


def calculate_normal_mode_energies(positions: ArrayLike, velocities: ArrayLike) -> FloatArray:
    """Return the harmonic energy held by each normal mode."""
    x = _chain(positions, "positions")
    v = _chain(velocities, "velocities")
    if x.shape != v.shape:
        raise ValueError("positions and velocities must have the same length")
    q = transform_to_normal_modes(x)
    p = transform_to_normal_modes(v)
    n = x.size
    omega = 2.0 * np.sin(np.arange(1, n + 1) * math.pi / (2.0 * (n + 1)))
    return 0.5 * (p * p + omega * omega * q * q)


def calculate_acceleration(positions: ArrayLike, alpha: float) -> FloatArray:
    """Return accelerations of a chain whose ends are held at zero."""
    x = _chain(positions, "positions")
    padded = np.concatenate(([0.0], x, [0.0]))
    bonds = np.diff(padded)
    right, left = bonds[1:], bonds[:-1]
    return (right - left) + alpha * (right * right - left * left)


def velocity_verlet_one_step(
    accelerations: ArrayLike,
    positions: ArrayLike,
    velocities: ArrayLike,
    alpha: float,
    timestep: float,
) -> tuple[FloatArray, FloatArray, FloatArray]:
    """Advance one velocity Verlet step.

    Returns the new ``(accelerations, positions, velocities)``.
    """
    a = _chain(accelerations, "accelerations")
    x = _chain(positions, "positions")
    v = _chain(velocities, "velocities")
    if not (a.shape == x.shape == v.shape):
        raise ValueError("accelerations, positions and velocities must have the same length")
    v = v + 0.5 * a * timestep
    x = x + v * timestep
    a = calculate_acceleration(x, alpha)
    v = v + 0.5 * a * timestep
    return a, x, v


def initialize_conditions(
    n: int = N_PARTICLES, e0: float = E_0, alpha: float = ALPHA
) -> tuple[FloatArray, FloatArray, FloatArray]:
    """Put all energy ``e0`` into the lowest mode as momentum.

    Returns ``(positions, velocities, accelerations)``.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    if e0 < 0:
        raise ValueError("e0 must not be negative")
    q = np.zeros(n)
    p = np.zeros(n)
    p[0] = math.sqrt(2.0 * e0)
    positions = transform_to_normal_modes(q)
    velocities = transform_to_normal_modes(p)
    accelerations = calculate_acceleration(positions, alpha)
    return positions, velocities, accelerations


def simulate(
    output: TextIO,
    n: int = N_PARTICLES,
    e0: float = E_0,
    alpha: float = ALPHA,
    dt: float = DT,
    t_max: float = T_MAX,
    every: int = EVERY,
    modes: int | None = None,
) -> State:
    """Integrate the chain and write mode energies to ``output``.

    Every ``every`` steps a line is written with the time followed by the
    energies of the first ``modes`` modes; when ``modes`` is None all mode
    energies are written followed by their sum. Returns the final
    ``(positions, velocities)``.
    """
    if dt <= 0:
        raise ValueError("dt must be positive")
    if t_max < 0:
        raise ValueError("t_max must not be negative")
    if every < 1:
        raise ValueError("every must be at least 1")
    if modes is not None and not 0 <= modes <= n:
        raise ValueError(f"modes must lie between 0 and {n}")

    accelerations: FloatArray
    positions, velocities, accelerations = initialize_conditions(n, e0, alpha)
    steps = int(t_max / dt)
    for step in range(steps):
        accelerations, positions, velocities = velocity_verlet_one_step(
            accelerations, positions, velocities, alpha, dt
        )
        if step % every:
            continue
        energies = calculate_normal_mode_energies(positions, velocities)
        if modes is None:
            values = [*energies, float(energies.sum())]
        else:
            values = list(energies[:modes])
        fields = "".join(f" {value:f}" for value in values)
        output.write(f"{step * dt:f}{fields}\n")
    return positions, velocities


def main(argv: list[str] | None = None) -> int:
    """Run the chain simulation and write mode energies to a file."""
    parser = argparse.ArgumentParser(
        description="Simulate energy sharing between the normal modes of an FPU chain."
    )
    parser.add_argument("output", nargs="?", default=None, help="file for the mode energies")
    parser.add_argument(
        "--harmonic",
        action="store_true",
        help="purely harmonic run: alpha 0, every step, first five modes",
    )
    parser.add_argument("--alpha", type=float, default=None, help="anharmonic coupling")
    parser.add_argument("--n", type=int, default=N_PARTICLES, help="number of particles")
    parser.add_argument("--e0", type=float, default=None, help="initial energy (default: n)")
    parser.add_argument("--dt", type=float, default=DT, help="time step")
    parser.add_argument("--t-max", type=float, default=None, help="simulated time")
    parser.add_argument("--every", type=int, default=None, help="steps between output lines")
    parser.add_argument("--modes", type=int, default=None, help="number of modes to write")
    args = parser.parse_args(argv)

    if args.harmonic:
        alpha, t_max, every, modes, path = 0.0, _HARMONIC_T_MAX, 1, _HARMONIC_MODES, "mode_energies.txt"
    else:
        alpha, t_max, every, modes, path = ALPHA, T_MAX, EVERY, None, "energies.txt"
    alpha = alpha if args.alpha is None else args.alpha
    t_max = t_max if args.t_max is None else args.t_max
    every = every if args.every is None else args.every
    modes = modes if args.modes is None else args.modes
    path = path if args.output is None else args.output
    e0 = float(args.n) if args.e0 is None else args.e0
    if modes is not None:
        modes = min(modes, args.n)

    try:
        with open(os.fspath(path), "w", encoding="utf-8") as output:
            simulate(output, args.n, e0, alpha, args.dt, t_max, every, modes)
    except OSError as exc:
        print(f"Failed to open file for writing: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(f"Simulation complete. Results saved to {path}")
    return 0