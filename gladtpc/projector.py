"""Projection of the ionisation electrons of simulated points onto the pad plane."""

from __future__ import annotations

import enum
import logging
import math
import random
from collections.abc import Sequence

from .caldata import CalData
from .drift import (
    N_TIME_BINS,
    X_OFFSET,
    Z_OFFSET,
    DriftParameters,
    clamp_to_pad_plane,
    primary_electrons,
    time_bin,
)
from .padmap import PadMap, PadPlane
from .point import GTPCPoint, MCTrack
from .projpoint import ProjPoint

logger = logging.getLogger(__name__)

# Track statuses of a point where a track enters the gas or is born inside it.
ENTERING_STATUSES = frozenset({11000, 10010010, 10010000, 10011000})
# Track statuses of a point where a track leaves the gas or disappears.
EXITING_STATUSES = frozenset({10100, 1000000})


class OutputMode(enum.IntEnum):
    """Level of the produced output."""

    CAL_DATA = 0
    PROJ_POINTS = 1


class PointLogicError(RuntimeError):
    """The sequence of points does not describe consistent track segments."""


class Projector:
    """Drifts the electrons of each point segment to the pad plane.

    Each pair of consecutive points of a track defines a segment; the energy
    lost along it is turned into electrons that are spread uniformly along the
    segment, diffused and collected on the pads of the pad plane.
    """

    def __init__(
        self,
        params: DriftParameters | None = None,
        output_mode: OutputMode = OutputMode.CAL_DATA,
        rng: random.Random | None = None,
        pad_map: PadMap | None = None,
    ) -> None:
        self.params = params if params is not None else DriftParameters()
        self.output_mode = OutputMode(output_mode)
        self.rng = rng if rng is not None else random.Random()
        self.pad_map = pad_map if pad_map is not None else PadMap()
        self.pad_map.generate_pad_plane()
        self.pad_plane: PadPlane = self.pad_map.pad_plane
        self.output: list[CalData] | list[ProjPoint] = []

    def set_drift_parameters(
        self,
        ion: float,
        driftv: float,
        t_diff: float,
        l_diff: float,
        fano_factor: float,
    ) -> None:
        """Set ionisation energy [GeV], drift velocity [cm/ns], diffusion and Fano factor."""
        self.params.e_ionization = ion
        self.params.drift_velocity = driftv
        self.params.trans_diff = t_diff
        self.params.long_diff = l_diff
        self.params.fano_factor = fano_factor

    def set_size_of_virtual_pad(self, size: float) -> None:
        """Set the number of virtual pad divisions per cm."""
        self.params.size_of_virtual_pad = size

    def execute(
        self, points: Sequence[GTPCPoint], tracks: Sequence[MCTrack]
    ) -> list[CalData] | list[ProjPoint]:
        """Project one event of points and return the pad output.

        ``tracks`` is indexed by the track identifier of the points.
        """
        self.output = []
        by_pad: dict[int, CalData | ProjPoint] = {}
        logger.info("Projector: processing %d points", len(points))
        if len(points) < 2:
            logger.info("Not enough hits for digitization! (<2)")
            return self.output

        present_track = -10
        ready = False
        pre = (0.0, 0.0, 0.0)
        vertex = MCTrack()
        for point in points:
            event_id = point.event_id
            if point.track_status in ENTERING_STATUSES:
                present_track = point.track_id
                pre = (point.x, point.y, point.z)
                vertex = tracks[present_track]
                ready = True
                continue
            if present_track != point.track_id:
                raise PointLogicError(
                    f"point of track {point.track_id} with status {point.track_status} "
                    f"does not follow track {present_track}"
                )
            if not ready:
                raise PointLogicError(
                    f"point of track {point.track_id} after the track left the gas"
                )
            if point.track_status in EXITING_STATUSES:
                ready = False
            post = (point.x, point.y, point.z)
            self._project_segment(
                pre, post, point.energy_loss, point.time, event_id, vertex, by_pad
            )
            pre = post

        logger.info("Projector: produced %d pad entries", len(self.output))
        return self.output

    def _project_segment(
        self,
        pre: tuple[float, float, float],
        post: tuple[float, float, float],
        energy_dep: float,
        time_before_drift: float,
        event_id: int,
        vertex: MCTrack,
        by_pad: dict[int, CalData | ProjPoint],
    ) -> None:
        p = self.params
        electrons = primary_electrons(energy_dep, p.e_ionization)
        fluctuation = int(math.sqrt(p.fano_factor * electrons))
        generated = int(self.rng.gauss(electrons, fluctuation))
        if generated <= 0:
            return

        step_x, step_y, step_z = ((b - a) / generated for a, b in zip(pre, post))
        drift_distance = (post[1] + pre[1]) / 2 + p.half_size_y
        sigma_long = math.sqrt(drift_distance * 2 * p.long_diff / p.drift_velocity)
        sigma_trans = math.sqrt(drift_distance * 2 * p.trans_diff / p.drift_velocity)

        for ele in range(1, generated + 1):
            drift_time = (pre[1] + step_y * ele + p.half_size_y) / p.drift_velocity
            proj_x = self.rng.gauss(pre[0] + step_x * ele, sigma_trans)
            proj_z = self.rng.gauss(pre[2] + step_z * ele, sigma_trans)
            proj_time = self.rng.gauss(
                drift_time + time_before_drift, sigma_long / p.drift_velocity
            )
            proj_x, proj_z = clamp_to_pad_plane(
                proj_x, proj_z, p.half_size_x, p.half_size_z
            )
            pad = self.pad_plane.fill(
                (proj_z - Z_OFFSET) * 10.0, (proj_x - X_OFFSET) * 10.0
            )
            if self.output_mode is OutputMode.CAL_DATA:
                self._record_cal(pad, proj_time, by_pad)
            else:
                self._record_proj(pad, proj_time, event_id, vertex, by_pad)

    def _record_cal(
        self, pad: int, proj_time: float, by_pad: dict[int, CalData | ProjPoint]
    ) -> None:
        bucket = time_bin(proj_time, self.params.time_bin_size)
        existing = by_pad.get(pad)
        if existing is not None:
            existing.add_time(bucket)
            return
        adc = [0] * N_TIME_BINS
        adc[bucket] += 1
        cal = CalData(pad_id=pad, adc=adc)
        by_pad[pad] = cal
        self.output.append(cal)

    def _record_proj(
        self,
        pad: int,
        proj_time: float,
        event_id: int,
        vertex: MCTrack,
        by_pad: dict[int, CalData | ProjPoint],
    ) -> None:
        micros = proj_time / 1000
        existing = by_pad.get(pad)
        if existing is not None:
            existing.add_charge()
            existing.add_time(micros, 1)
            return
        proj = ProjPoint.from_hit(
            pad,
            micros,
            1,
            event_id,
            vertex.pdg_code,
            vertex.mother_id,
            vertex.start_x,
            vertex.start_y,
            vertex.start_z,
            vertex.px,
            vertex.py,
            vertex.pz,
        )
        by_pad[pad] = proj
        self.output.append(proj)