"""Monte Carlo points left by transported tracks in the drift gas, and MC tracks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MCTrack:
    """Vertex information of a simulated track."""

    pdg_code: int = 0
    mother_id: int = -1
    start_x: float = 0.0
    start_y: float = 0.0
    start_z: float = 0.0
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0


@dataclass
class GTPCPoint:
    """A step of a track through the active gas volume.

    Units: positions and lengths in cm, momenta and energies in GeV, time in ns.
    """

    track_id: int = 0
    detector_id: int = 0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    px: float = 0.0
    py: float = 0.0
    pz: float = 0.0
    time: float = 0.0
    length: float = 0.0
    energy_loss: float = 0.0
    event_id: int = 0
    parent_track_id: int = 0
    primary_particle_id: int = 0
    track_status: int = 0
    pdg_code: int = 0
    module_id: int = 0
    det_copy_id: int = 0
    particle_name: str = ""
    vol_name: str = ""
    process_name: str = ""
    charge: float = 0.0
    mass: float = 0.0
    kinetic_energy: float = 0.0
    track_step: float = 0.0
    is_accepted: bool = False

    def describe(self) -> str:
        """Human-readable multi-line summary of the point."""
        return "\n".join(
            [
                f"-I- GTPCPoint: Point for track {self.track_id} in detector "
                f"{self.detector_id} ({self.vol_name}), copy {self.det_copy_id}",
                f"    Position ({self.x:g}, {self.y:g}, {self.z:g}) cm",
                f"    Momentum ({self.px:g}, {self.py:g}, {self.pz:g}) GeV",
                f"    Time {self.time:g} ns,  Length {self.length:g} cm,  "
                f"Energy loss {self.energy_loss * 1.0e06:g} keV",
                f"    Specific GTPC Point info forEventID for track {self.track_id} "
                f"with PDGCode {self.pdg_code} ({self.particle_name}), "
                f"suffering process {self.process_name}",
                f"    Mass {self.mass:g}, charge {self.charge:g}, PDGCode {self.pdg_code}, "
                f"kinetic energy {self.kinetic_energy * 1.0e06:g} keV",
                f"    ParentTrackID {self.parent_track_id}, primaryParticleID "
                f"{self.primary_particle_id}, TrackStatus {self.track_status}, "
                f"track step {self.track_step:g}, is accepted? {int(self.is_accepted)}",
            ]
        )