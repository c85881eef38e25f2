"""Langevin drift of electrons in crossed electric and magnetic fields.

Positions are in cm, times in ns, fields in V/m and T, mobility in m^2/(V s).
"""

from __future__ import annotations

import math
from typing import NamedTuple

E_Y = 10000.0  # V/m, vertical drift field (100 V/cm)
DRIFT_TIME_STEP = 100.0  # ns
HALF_SIZE_X = 40.0  # cm
HALF_SIZE_Y = 20.0  # cm
HALF_SIZE_Z = 100.0  # cm
TARGET_OFFSET_Y = 0.0  # cm
TARGET_OFFSET_Z_FM = 263.4  # cm, displacement of the field map
TARGET_ANGLE = 14.0 * 3.14159 / 180

# Starting height above the pad plane for each grid-test event.
_HEIGHTS_ABOVE_PAD_PLANE = {0: 2.5, 1: 28.5, 2: 15.0, 3: 20.0, 4: 25.0}


class DriftVelocity(NamedTuple):
    """Drift velocity components [m/s] and the transverse damping factor."""

    vx: float
    vy: float
    vz: float
    damping: float


def drift_velocity(
    mu: float, e_y: float, b_field: tuple[float, float, float]
) -> DriftVelocity:
    """Langevin drift velocity for a purely vertical electric field ``e_y``."""
    bx, by, bz = b_field
    module_b = math.sqrt(bx * bx + by * by + bz * bz)
    damping = 1 / (1 + mu * mu * module_b * module_b)
    mult = mu * damping
    product_eb = e_y * by
    vx = mult * (mu * (e_y * bz) + mu * mu * product_eb * bx)
    vy = mult * (e_y + mu * mu * product_eb * by)
    vz = mult * (mu * (-e_y * bx) + mu * mu * product_eb * bz)
    return DriftVelocity(vx, vy, vz, damping)


def virtual_pad_id(
    proj_x: float, proj_z: float, half_size_x: float, pad_size: float
) -> int:
    """Identifier of the virtual pad under (proj_x, proj_z).

    ``pad_size`` is the number of pad divisions per cm; rows along Z hold
    ``2 * half_size_x * pad_size`` pads.
    """
    row = int(proj_z * pad_size)
    column = int((proj_x - half_size_x) * pad_size)
    return int(2 * half_size_x * pad_size * row + column)


def initial_height(event_id: int, half_size_y: float) -> float:
    """Starting height of the test electrons for a grid-test event."""
    try:
        above = _HEIGHTS_ABOVE_PAD_PLANE[event_id]
    except KeyError:
        raise ValueError(
            f"event id {event_id} larger than necessary for the grid test"
        ) from None
    if event_id < 2:
        return -half_size_y + above
    return TARGET_OFFSET_Y - half_size_y + above