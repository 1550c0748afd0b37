"""A linear CO2 molecule as three masses joined by two springs."""

from __future__ import annotations

import argparse
import os
import sys

import numpy as np
from numpy.typing import ArrayLike, NDArray

from physkit.extxyz import write_xyz

FloatArray = NDArray[np.float64]
State = tuple[FloatArray, FloatArray]

# Carbon, oxygen, carbon masses in eV/(ps^2 * Å^2).
CO2_MASSES = (0.00165820292, 0.00124365219, 0.00165820292)
INITIAL_POSITIONS = (0.01, 0.005, -0.005)
TIMESTEPS = 10000
DT = 0.0001
KAPPA = 99.8641


def _triple(values: ArrayLike, name: str) -> FloatArray:
    arr = np.asarray(values, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"{name} must hold exactly three values, got shape {arr.shape}")
    return arr


def calculate_acceleration(positions: ArrayLike, masses: ArrayLike, kappa: float) -> FloatArray:
    """Return the spring accelerations of the three particles."""
    x = _triple(positions, "positions")
    m = _triple(masses, "masses")
    forces = np.array(
        [
            kappa * (x[1] - x[0]),
            kappa * (x[2] - 2 * x[1] + x[0]),
            kappa * (-x[2] + x[1]),
        ]
    )
    return forces / m


def calculate_potential_energy(positions: ArrayLike, kappa: float) -> float:
    """Return the energy stored in the two springs."""
    x = _triple(positions, "positions")
    return float(
        0.5 * kappa * (x[1] - x[0]) ** 2 + 0.5 * kappa * (x[2] - x[1]) ** 2
    )


def calculate_kinetic_energy(velocities: ArrayLike, masses: ArrayLike) -> float:
    """Return the total kinetic energy of the three particles."""
    v = _triple(velocities, "velocities")
    m = _triple(masses, "masses")
    return float(np.sum(0.5 * m * v * v))


def velocity_verlet_one_step(
    accelerations: ArrayLike,
    positions: ArrayLike,
    velocities: ArrayLike,
    masses: ArrayLike,
    kappa: float,
    timestep: float,
) -> tuple[FloatArray, FloatArray, FloatArray]:
    """Advance one velocity Verlet step.

    Returns the new ``(accelerations, positions, velocities)``.
    """
    a = _triple(accelerations, "accelerations")
    x = _triple(positions, "positions")
    v = _triple(velocities, "velocities")
    v = v + 0.5 * a * timestep
    x = x + v * timestep
    a = calculate_acceleration(x, masses, kappa)
    v = v + 0.5 * a * timestep
    return a, x, v


def run_simulation(
    positions_path: str | os.PathLike[str] = "positions.txt",
    energies_path: str | os.PathLike[str] = "energies.txt",
    timesteps: int = TIMESTEPS,
    dt: float = DT,
    kappa: float = KAPPA,
) -> State:
    """Integrate the molecule, writing positions and energies once per step.

    Each line holds the time followed by three positions, or by the potential,
    kinetic and total energy. Returns the final ``(positions, velocities)``.
    """
    masses = np.array(CO2_MASSES)
    positions = np.array(INITIAL_POSITIONS)
    velocities = np.zeros(3)
    accelerations = np.zeros(3)

    with open(positions_path, "w", encoding="utf-8") as pos_file, open(
        energies_path, "w", encoding="utf-8"
    ) as energy_file:
        for step in range(timesteps):
            time = step * dt
            potential = calculate_potential_energy(positions, kappa)
            kinetic = calculate_kinetic_energy(velocities, masses)
            pos_file.write(
                f"{time:f} {positions[0]:f} {positions[1]:f} {positions[2]:f}\n"
            )
            energy_file.write(
                f"{time:f} {potential:f} {kinetic:f} {potential + kinetic:f}\n"
            )
            accelerations, positions, velocities = velocity_verlet_one_step(
                accelerations, positions, velocities, masses, kappa, dt
            )
    return positions, velocities


def write_trajectory(
    path: str | os.PathLike[str] = "CO2_simulation.extxyz",
    masses: ArrayLike | None = None,
    timesteps: int = 1000,
    timestep: float = 0.01,
    kappa: float = 1.6e3,
    alat: float = 10.0,
) -> State:
    """Write one extended XYZ frame per step, with motion along x only.

    Returns the final ``(positions, velocities)``.
    """
    m = np.array(CO2_MASSES) if masses is None else _triple(masses, "masses")
    positions = np.array(INITIAL_POSITIONS)
    velocities = np.zeros(3)
    accelerations = np.zeros(3)

    with open(path, "w", encoding="utf-8") as fp:
        for _ in range(timesteps):
            pos_3d = np.zeros((3, 3))
            vel_3d = np.zeros((3, 3))
            pos_3d[:, 0] = positions
            vel_3d[:, 0] = velocities
            write_xyz(fp, "C", pos_3d, vel_3d, alat)
            accelerations, positions, velocities = velocity_verlet_one_step(
                accelerations, positions, velocities, m, kappa, timestep
            )
    return positions, velocities


def main(argv: list[str] | None = None) -> int:
    """Run the CO2 simulation and write its output files."""
    parser = argparse.ArgumentParser(description="Simulate a vibrating CO2 molecule.")
    parser.add_argument("--positions", default="positions.txt", help="positions output file")
    parser.add_argument("--energies", default="energies.txt", help="energies output file")
    parser.add_argument("--steps", type=int, default=TIMESTEPS, help="number of time steps")
    parser.add_argument("--xyz", default=None, help="also write an extended XYZ trajectory")
    args = parser.parse_args(argv)

    try:
        run_simulation(args.positions, args.energies, timesteps=args.steps)
        if args.xyz is not None:
            write_trajectory(args.xyz)
    except OSError as exc:
        print(f"Failed to open output files: {exc}", file=sys.stderr)
        return 1

    print(
        f"Simulation complete. Results written to {args.positions} and {args.energies}"
    )
    return 0