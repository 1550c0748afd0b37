import numpy as np
import pytest

from physkit.co2 import (
    CO2_MASSES,
    calculate_acceleration,
    calculate_kinetic_energy,
    calculate_potential_energy,
    main,
    run_simulation,
    velocity_verlet_one_step,
    write_trajectory,
)
from physkit.extxyz import read_xyz


def test_acceleration_values():
    acc = calculate_acceleration([0.0, 1.0, 3.0], [1.0, 2.0, 1.0], 2.0)
    np.testing.assert_allclose(acc, [2.0, 1.0, -4.0])


def test_acceleration_rejects_wrong_length():
    with pytest.raises(ValueError):
        calculate_acceleration([0.0, 1.0], [1.0, 1.0, 1.0], 1.0)


def test_potential_energy_value():
    assert calculate_potential_energy([0.0, 1.0, 3.0], 2.0) == pytest.approx(5.0)


def test_potential_energy_translation_invariant():
    e1 = calculate_potential_energy([0.1, 0.4, -0.2], 7.0)
    e2 = calculate_potential_energy([5.1, 5.4, 4.8], 7.0)
    assert e1 == pytest.approx(e2)


def test_kinetic_energy_value():
    assert calculate_kinetic_energy([1.0, 2.0, 3.0], [2.0, 1.0, 2.0]) == pytest.approx(12.0)


def test_verlet_conserves_momentum_and_energy():
    masses = np.array(CO2_MASSES)
    kappa = 99.8641
    dt = 0.0001
    pos = np.array([0.01, 0.005, -0.005])
    vel = np.zeros(3)
    acc = np.zeros(3)
    e0 = calculate_potential_energy(pos, kappa)
    for _ in range(2000):
        acc, pos, vel = velocity_verlet_one_step(acc, pos, vel, masses, kappa, dt)
    assert float(np.dot(masses, vel)) == pytest.approx(0.0, abs=1e-12)
    energy = calculate_potential_energy(pos, kappa) + calculate_kinetic_energy(vel, masses)
    assert energy == pytest.approx(e0, rel=1e-2)


def test_verlet_step_from_rest_with_equilibrium_positions():
    acc, pos, vel = velocity_verlet_one_step(
        [0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [0.0, 0.0, 0.0], [1.0, 1.0, 1.0], 3.0, 0.1
    )
    np.testing.assert_allclose(pos, [1.0, 1.0, 1.0])
    np.testing.assert_allclose(vel, [0.0, 0.0, 0.0])
    np.testing.assert_allclose(acc, [0.0, 0.0, 0.0])


def test_run_simulation_files(tmp_path):
    positions_path = tmp_path / "positions.txt"
    energies_path = tmp_path / "energies.txt"
    run_simulation(positions_path, energies_path, timesteps=5)

    pos_lines = positions_path.read_text().splitlines()
    energy_lines = energies_path.read_text().splitlines()
    assert len(pos_lines) == 5
    assert len(energy_lines) == 5
    assert pos_lines[0] == "0.000000 0.010000 0.005000 -0.005000"

    time, potential, kinetic, total = (float(x) for x in energy_lines[0].split())
    assert time == 0.0
    assert kinetic == 0.0
    assert total == pytest.approx(potential + kinetic, abs=1e-6)
    assert float(energy_lines[4].split()[0]) == pytest.approx(0.0004)


def test_run_simulation_returns_final_state(tmp_path):
    pos, vel = run_simulation(tmp_path / "p.txt", tmp_path / "e.txt", timesteps=100)
    masses = np.array(CO2_MASSES)
    assert float(np.dot(masses, vel)) == pytest.approx(0.0, abs=1e-12)
    assert pos.shape == (3,)
    assert not np.allclose(pos, [0.01, 0.005, -0.005])


def test_write_trajectory_frames(tmp_path):
    path = tmp_path / "co2.extxyz"
    write_trajectory(path, timesteps=3)
    lines = path.read_text().splitlines()
    assert len(lines) == 15
    with open(path, encoding="utf-8") as fp:
        first = read_xyz(fp)
        second = read_xyz(fp)
    assert first.symbols == ["C", "C", "C"]
    assert first.alat == pytest.approx(10.0)
    np.testing.assert_allclose(first.positions[:, 0], [0.01, 0.005, -0.005], atol=1e-6)
    np.testing.assert_allclose(first.positions[:, 1:], 0.0)
    np.testing.assert_allclose(first.velocities, 0.0)
    np.testing.assert_allclose(second.positions[:, 1:], 0.0)
    assert second.natoms == 3


def test_write_trajectory_rejects_bad_masses(tmp_path):
    with pytest.raises(ValueError):
        write_trajectory(tmp_path / "x.extxyz", masses=[1.0, 2.0], timesteps=1)


def test_main_writes_outputs(tmp_path, capsys):
    positions_path = tmp_path / "pos.txt"
    energies_path = tmp_path / "en.txt"
    code = main(
        ["--positions", str(positions_path), "--energies", str(energies_path), "--steps", "4"]
    )
    assert code == 0
    assert len(positions_path.read_text().splitlines()) == 4
    assert "Simulation complete" in capsys.readouterr().out


def test_main_reports_unwritable_output(tmp_path):
    missing = tmp_path / "missing" / "pos.txt"
    code = main(["--positions", str(missing), "--energies", str(tmp_path / "e.txt")])
    assert code == 1