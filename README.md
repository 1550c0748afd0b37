# physkit

A small toolbox for computational physics exercises: reading and writing
atoms in the extended XYZ format, trapezoidal integration on an even grid,
and two velocity Verlet simulations — a vibrating linear CO2 molecule and
the Fermi–Pasta–Ulam chain with its normal modes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

### Extended XYZ files — `physkit.extxyz`

`write_xyz(fp, symbol, positions, velocities, alat)` writes one frame to an
open text file: the atom count, a cubic `Lattice` of side `alat`, a
`Properties=species:S:1:pos:R:3:vel:R:3` line, and one row per atom with the
given symbol, three positions and three velocities. `positions` and
`velocities` must have shape `(natoms, 3)`; otherwise `ValueError` is raised.

`read_xyz(fp)` reads one such frame back and returns an `XyzFrame` with
`symbols`, `positions`, `velocities`, `alat` and the `natoms` property.
Malformed input raises `XyzFormatError` (a subclass of `ValueError`).

```python
import io
from physkit.extxyz import write_xyz, read_xyz

buf = io.StringIO()
write_xyz(buf, "Al", [[0, 0, 0], [0, 2.025, 2.025]], [[0, 0, 0], [0, 0, 0]], 4.05)
buf.seek(0)
frame = read_xyz(buf)
frame.natoms   # 2
frame.alat     # 4.05
```

### Integration — `physkit.integration`

- `linspace(start, end, number_of_points)` — evenly spaced values including
  both ends; at least two points are required.
- `integrate(data, dx)` — trapezoidal integral of samples with spacing `dx`
  (`0.0` for fewer than two samples).
- `absolute_cube_function(points)` — `|x|³` for each value.

### CO2 molecule — `physkit.co2`

Three masses (carbon, oxygen, carbon) joined by two springs, moving along one
axis.

- `calculate_acceleration(positions, masses, kappa)`
- `calculate_potential_energy(positions, kappa)`
- `calculate_kinetic_energy(velocities, masses)`
- `velocity_verlet_one_step(accelerations, positions, velocities, masses, kappa, timestep)`
  returns the new `(accelerations, positions, velocities)`.
- `run_simulation(positions_path, energies_path, timesteps, dt, kappa)` writes
  one line per step: time and three positions, and time with potential,
  kinetic and total energy. It returns the final `(positions, velocities)`.
- `write_trajectory(path, masses, timesteps, timestep, kappa, alat)` writes one
  extended XYZ frame per step, with the motion on the x axis.

### Fermi–Pasta–Ulam chain — `physkit.fpu`

A chain of unit masses with both ends held at zero and a quadratic
anharmonic coupling `alpha`.

- `transform_to_normal_modes(values)` — the orthogonal sine transform; it is
  its own inverse.
- `calculate_normal_mode_energies(positions, velocities)`
- `calculate_acceleration(positions, alpha)`
- `velocity_verlet_one_step(accelerations, positions, velocities, alpha, timestep)`
- `initialize_conditions(n, e0, alpha)` — puts the energy `e0` into the lowest
  mode as momentum and returns `(positions, velocities, accelerations)`.
- `simulate(output, n, e0, alpha, dt, t_max, every, modes)` — writes, every
  `every` steps, the time and the mode energies to `output`: the first
  `modes` of them, or all of them followed by their sum when `modes` is
  `None`.

## Commands

| Command             | What it does                                                        |
|---------------------|---------------------------------------------------------------------|
| `physkit-integrate` | integrates \|x³\| from −4 to 4 with 10000 points (≈ 128)            |
| `physkit-co2`       | runs the CO2 simulation and writes positions and energies           |
| `physkit-fpu`       | runs the Fermi–Pasta–Ulam chain and writes normal-mode energies     |

`physkit-co2` takes `--positions` and `--energies` (default `positions.txt`
and `energies.txt`), `--steps` (default 10000) and `--xyz PATH` to also
write an extended XYZ trajectory.

`physkit-fpu` takes an optional output file. By default it uses 32
particles, `alpha` 0.1, time step 0.1 up to time 1000000, writes every 1000
steps all mode energies and their sum, to `energies.txt`. With `--harmonic`
it uses `alpha` 0, runs to time 25000, writes every step the first five
modes, to `mode_energies.txt`. `--alpha`, `--n`, `--e0` (default: the
number of particles), `--dt`, `--t-max`, `--every` and `--modes` override
these settings.

Each command writes its output files into the current directory unless told
otherwise.

## What it does not do

The package has no general vector or matrix algebra helpers and no Fourier
or power-spectrum analysis; use NumPy directly for those. Its only
simulations are the CO2 molecule and the Fermi–Pasta–Ulam chain, and it
offers no plotting of their output.