"""ASCII background events from intranuclear-cascade collision output.

Input momenta and kinetic energies are in MeV; output is in GeV and cm.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from .kinematics import sample_target_vertex

GEV_PER_MEV = 0.001
TARGET_POSITION = (227.0, -2.7, 0.0)  # cm
# Singly charged particles that are written with their PDG code rather than as ions.
_CHARGED_HADRONS = frozenset({2212, 211, 321, 3222})


@dataclass
class Particle:
    """A particle produced in the collision; momenta and kinetic energy in MeV."""

    a: int = 0
    z: int = 0
    pdg_code: int = 0
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    ekin: float = 0.0


def particle_mass(particle: Particle) -> float:
    """Rest mass in GeV from the momentum and kinetic energy."""
    if particle.ekin == 0:
        raise ValueError("kinetic energy must be non-zero to derive the mass")
    p2 = particle.px**2 + particle.py**2 + particle.pz**2
    return 0.5 * (p2 - particle.ekin**2) / particle.ekin * GEV_PER_MEV


def format_particle_line(
    particle: Particle, vertex: Sequence[float]
) -> str | None:
    """One generator line for the particle, or None if it is not written."""
    mass = particle_mass(particle)
    x, y, z = vertex
    tail = (
        f"{particle.px * GEV_PER_MEV:g}  {particle.py * GEV_PER_MEV:g}  "
        f"{particle.pz * GEV_PER_MEV:g}  {x:g}  {y:g}  {z:g}  {mass:g}\n"
    )
    as_elementary = particle.z in (-1, 0) or (
        particle.z == 1 and particle.pdg_code in _CHARGED_HADRONS
    )
    if as_elementary:
        return f"{particle.pdg_code}  0  {particle.pdg_code}  {tail}"
    if particle.z >= 1:
        return f"-1  {particle.z}\t{particle.a}  {tail}"
    return None


def write_background(
    events: Iterable[Sequence[Particle]], out: TextIO, rng: random.Random
) -> int:
    """Write each event with a sampled target vertex; return the number of events."""
    count = 0
    for index, particles in enumerate(events):
        vertex = sample_target_vertex(rng, TARGET_POSITION)
        out.write(f"{index}  {len(particles)}  0.  0.\n")
        for particle in particles:
            line = format_particle_line(particle, vertex)
            if line is not None:
                out.write(line)
        count += 1
    return count