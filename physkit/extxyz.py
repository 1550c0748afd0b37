"""Reading and writing single frames in the extended XYZ format."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

_PROPERTIES = 'Properties=species:S:1:pos:R:3:vel:R:3 pbc="T T T"'
_LATTICE = re.compile(
    r'^Lattice="(\S+) 0\.0 0\.0 0\.0 (\S+) 0\.0 0\.0 0\.0 (\S+)"'
)


class XyzFormatError(ValueError):
    """Raised when an extended XYZ frame cannot be parsed."""


@dataclass
class XyzFrame:
    """One frame: atomic symbols, positions, velocities and cubic cell length."""

    symbols: list[str]
    positions: NDArray[np.float64]
    velocities: NDArray[np.float64]
    alat: float

    @property
    def natoms(self) -> int:
        return len(self.symbols)


def _coordinates(values: ArrayLike, name: str) -> NDArray[np.float64]:
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"{name} must have shape (natoms, 3), got {arr.shape}")
    return arr


def write_xyz(
    fp: TextIO,
    symbol: str,
    positions: ArrayLike,
    velocities: ArrayLike,
    alat: float,
) -> None:
    """Write one frame of atoms, all of species ``symbol``, to ``fp``."""
    pos = _coordinates(positions, "positions")
    vel = _coordinates(velocities, "velocities")
    if pos.shape != vel.shape:
        raise ValueError("positions and velocities must have the same number of atoms")
    fp.write(
        f'{len(pos)}\nLattice="{alat:f} 0.0 0.0 0.0 {alat:f} 0.0 0.0 0.0 {alat:f}" '
        f"{_PROPERTIES}\n"
    )
    for p, v in zip(pos, vel):
        numbers = " ".join(f"{x:f}" for x in (*p, *v))
        fp.write(f"{symbol} {numbers}\n")


def read_xyz(fp: TextIO) -> XyzFrame:
    """Read one frame written by :func:`write_xyz` from ``fp``."""
    count_line = fp.readline()
    try:
        natoms = int(count_line.strip())
    except ValueError:
        raise XyzFormatError("error reading header line") from None
    if natoms < 0:
        raise XyzFormatError("error reading header line")

    match = _LATTICE.match(fp.readline())
    if match is None:
        raise XyzFormatError("error reading header line")
    try:
        alat = float(match.group(3))
    except ValueError:
        raise XyzFormatError("error reading header line") from None

    symbols: list[str] = []
    positions = np.zeros((natoms, 3), dtype=float)
    velocities = np.zeros((natoms, 3), dtype=float)
    for index in range(natoms):
        fields = fp.readline().split()
        if len(fields) < 4:
            raise XyzFormatError(f"error reading positions for atom {index}")
        if len(fields) < 7:
            raise XyzFormatError(f"error reading velocities for atom {index}")
        try:
            positions[index] = [float(x) for x in fields[1:4]]
        except ValueError:
            raise XyzFormatError(f"error reading positions for atom {index}") from None
        try:
            velocities[index] = [float(x) for x in fields[4:7]]
        except ValueError:
            raise XyzFormatError(f"error reading velocities for atom {index}") from None
        symbols.append(fields[0])

    return XyzFrame(symbols=symbols, positions=positions, velocities=velocities, alat=alat)