import numpy as np
import pytest

from physkit.integration import absolute_cube_function, integrate, linspace, main


def test_linspace_endpoints_and_length():
    grid = linspace(-4.0, 4.0, 10000)
    assert len(grid) == 10000
    assert grid[0] == -4.0
    assert grid[-1] == pytest.approx(4.0)


def test_linspace_is_evenly_spaced():
    grid = linspace(1.0, 2.0, 11)
    steps = np.diff(grid)
    assert np.allclose(steps, steps[0])
    assert steps[0] == pytest.approx((2.0 - 1.0) / 10)


@pytest.mark.parametrize("count", [0, 1, -5])
def test_linspace_needs_two_points(count):
    with pytest.raises(ValueError):
        linspace(0.0, 1.0, count)


def test_integrate_constant_gives_length():
    n, dx = 50, 0.25
    assert integrate(np.ones(n), dx) == pytest.approx((n - 1) * dx)


def test_integrate_short_input_is_zero():
    assert integrate([3.0], 0.5) == 0.0


def test_integrate_linear_is_exact():
    grid = linspace(0.0, 2.0, 21)
    dx = grid[1] - grid[0]
    # trapezoidal rule is exact for a straight line: integral of x from 0 to 2
    assert integrate(grid, dx) == pytest.approx(2.0 * 2.0 / 2)


def test_absolute_cube_is_symmetric_and_non_negative():
    x = linspace(-3.0, 3.0, 61)
    y = absolute_cube_function(x)
    assert np.all(y >= 0)
    assert np.allclose(y, y[::-1])
    assert absolute_cube_function([-2.0])[0] == pytest.approx(2.0 ** 3)


def test_integral_of_absolute_cube_is_close_to_128():
    grid = linspace(-4.0, 4.0, 10000)
    dx = (4.0 - -4.0) / (10000 - 1)
    assert integrate(absolute_cube_function(grid), dx) == pytest.approx(128.0, abs=1e-3)


def test_main_prints_result(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    line = next(l for l in out.splitlines() if l.startswith("Integration of"))
    assert float(line.split()[-1]) == pytest.approx(128.0, abs=1e-3)
    assert "The result should be close to 128" in out