"""Drift parameters and helpers for projecting electrons onto the pad plane."""

from __future__ import annotations

from dataclasses import dataclass

Z_OFFSET = 272.7  # cm, first pad row in the laboratory frame
X_OFFSET = 5.8  # cm, first pad column in the laboratory frame
N_TIME_BINS = 512
MAX_TIME_BIN = N_TIME_BINS - 1


@dataclass
class DriftParameters:
    """Gas, geometry and electronics parameters used by the drift simulation.

    Units: GeV, cm, ns.
    """

    e_ionization: float = 0.0
    drift_velocity: float = 0.0
    trans_diff: float = 0.0
    long_diff: float = 0.0
    fano_factor: float = 0.0
    size_of_virtual_pad: float = 0.0
    half_size_x: float = 0.0
    half_size_y: float = 0.0
    half_size_z: float = 0.0
    detector_type: int = 0
    time_bin_size: float = 1000.0


def primary_electrons(energy_dep: float, e_ionization: float) -> int:
    """Number of primary electrons produced by an energy deposit (truncated)."""
    if e_ionization == 0:
        raise ZeroDivisionError("ionization energy must be non-zero")
    return int(energy_dep / e_ionization)


def clamp_to_pad_plane(
    proj_x: float, proj_z: float, half_x: float, half_z: float
) -> tuple[float, float]:
    """Clamp a projected (x, z) position to the pad plane; return (x, z)."""
    z = min(max(proj_z, Z_OFFSET), Z_OFFSET + 2 * half_z)
    x = min(max(proj_x, X_OFFSET), X_OFFSET + 2 * half_x)
    return x, z


def time_bin(proj_time: float, bin_size: float) -> int:
    """Time bucket of an arrival time in ns, clamped to the spectrum range."""
    value = proj_time / bin_size
    if value < 0:
        value = 0
    elif value > MAX_TIME_BIN:
        value = MAX_TIME_BIN
    return int(value)