"""Relativistic kinematics for event generation: four-vectors, decays, vertices.

Units are GeV for energies and momenta, cm for lengths and ns for times.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from dataclasses import dataclass

TARGET_RADIUS = 0.25  # cm
TARGET_LENGTH = 5.0  # cm
BEAM_FWHM = 0.4  # cm
FWHM_TO_SIGMA = 2.355


@dataclass
class LorentzVector:
    """A four-momentum (px, py, pz, e)."""

    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    e: float = 0.0

    @property
    def p(self) -> float:
        """Magnitude of the three-momentum."""
        return math.sqrt(self.px * self.px + self.py * self.py + self.pz * self.pz)

    @property
    def pt(self) -> float:
        """Transverse momentum."""
        return math.hypot(self.px, self.py)

    @property
    def theta(self) -> float:
        """Polar angle of the three-momentum."""
        if self.px == 0 and self.py == 0 and self.pz == 0:
            return 0.0
        return math.atan2(self.pt, self.pz)

    @property
    def phi(self) -> float:
        """Azimuthal angle of the three-momentum."""
        if self.px == 0 and self.py == 0:
            return 0.0
        return math.atan2(self.py, self.px)

    @property
    def mass2(self) -> float:
        """Invariant mass squared."""
        return self.e * self.e - self.p * self.p

    @property
    def mass(self) -> float:
        """Invariant mass; negative when the vector is space-like."""
        m2 = self.mass2
        return math.sqrt(m2) if m2 >= 0 else -math.sqrt(-m2)

    @property
    def boost_vector(self) -> tuple[float, float, float]:
        """Velocity (in units of c) of the frame in which the vector is at rest."""
        return (self.px / self.e, self.py / self.e, self.pz / self.e)

    def set_theta(self, theta: float) -> None:
        """Change the polar angle, keeping the momentum magnitude and azimuth."""
        magnitude = self.p
        phi = self.phi
        self.px = magnitude * math.sin(theta) * math.cos(phi)
        self.py = magnitude * math.sin(theta) * math.sin(phi)
        self.pz = magnitude * math.cos(theta)

    def set_phi(self, phi: float) -> None:
        """Change the azimuth, keeping the transverse and longitudinal momentum."""
        transverse = self.pt
        self.px = transverse * math.cos(phi)
        self.py = transverse * math.sin(phi)

    def boost(self, bx: float, by: float, bz: float) -> None:
        """Apply a Lorentz boost with velocity (bx, by, bz)."""
        b2 = bx * bx + by * by + bz * bz
        if b2 >= 1:
            raise ValueError("boost velocity must be smaller than the speed of light")
        gamma = 1.0 / math.sqrt(1.0 - b2)
        bp = bx * self.px + by * self.py + bz * self.pz
        gamma2 = (gamma - 1.0) / b2 if b2 > 0 else 0.0
        self.px += gamma2 * bp * bx + gamma * bx * self.e
        self.py += gamma2 * bp * by + gamma * by * self.e
        self.pz += gamma2 * bp * bz + gamma * bz * self.e
        self.e = gamma * (self.e + bp)

    def __add__(self, other: LorentzVector) -> LorentzVector:
        return LorentzVector(
            self.px + other.px, self.py + other.py, self.pz + other.pz, self.e + other.e
        )


def two_body_decay(
    parent: LorentzVector, masses: Sequence[float], rng: random.Random
) -> tuple[LorentzVector, LorentzVector]:
    """Decay ``parent`` isotropically (in its rest frame) into two particles.

    Raises ValueError when the parent is too light for the decay.
    """
    if len(masses) != 2:
        raise ValueError("a two-body decay needs exactly two masses")
    m1, m2 = masses
    big_m = parent.mass
    if big_m < m1 + m2:
        raise ValueError(
            f"parent mass {big_m:g} below the sum of the daughter masses {m1 + m2:g}"
        )
    m_sq = big_m * big_m
    momentum = (
        math.sqrt(max(0.0, (m_sq - (m1 + m2) ** 2) * (m_sq - (m1 - m2) ** 2)))
        / (2 * big_m)
    )
    cos_t = 2 * rng.random() - 1
    sin_t = math.sqrt(max(0.0, 1 - cos_t * cos_t))
    azimuth = 2 * math.pi * rng.random()
    dx = momentum * sin_t * math.cos(azimuth)
    dy = momentum * sin_t * math.sin(azimuth)
    dz = momentum * cos_t
    first = LorentzVector(dx, dy, dz, math.sqrt(momentum * momentum + m1 * m1))
    second = LorentzVector(-dx, -dy, -dz, math.sqrt(momentum * momentum + m2 * m2))
    velocity = parent.boost_vector
    first.boost(*velocity)
    second.boost(*velocity)
    return first, second


def sample_target_vertex(
    rng: random.Random, target_position: Sequence[float]
) -> tuple[float, float, float]:
    """Interaction point inside the cylindrical target, with a Gaussian beam spot."""
    sigma = BEAM_FWHM / FWHM_TO_SIGMA
    while True:
        x = rng.gauss(0.0, sigma)
        y = rng.gauss(0.0, sigma)
        if math.hypot(x, y) <= TARGET_RADIUS:
            break
    z = rng.uniform(-0.5 * TARGET_LENGTH, 0.5 * TARGET_LENGTH)
    tx, ty, tz = target_position
    return (x + tx, y + ty, z + tz)


def sample_decay_time(rng: random.Random, tau: float, upper: float) -> float:
    """Decay time from an exponential of mean ``tau`` truncated to [0, upper]."""
    if tau <= 0:
        raise ValueError("lifetime must be positive")
    if upper <= 0:
        raise ValueError("upper time limit must be positive")
    accepted = -math.expm1(-upper / tau)
    t = -tau * math.log1p(-rng.random() * accepted)
    return min(t, upper)