"""Extended XYZ I/O, trapezoidal integration and small velocity Verlet simulations."""

__version__ = "0.1.0"