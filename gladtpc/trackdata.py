"""Reconstructed tracks: a track identifier with its hits and hit clusters."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .hitdata import HitClusterData, HitData


@dataclass
class TrackData:
    """A track built from hits and hit clusters."""

    track_id: int = 0
    hit_array: list[HitData] = field(default_factory=list)
    hit_cluster_array: list[HitClusterData] = field(default_factory=list)

    def add_hit(self, hit: HitData) -> None:
        """Append a copy of ``hit`` to the track."""
        self.hit_array.append(copy.copy(hit))

    def add_cluster_hit(self, cluster: HitClusterData) -> None:
        """Append a copy of ``cluster`` to the track's clusters."""
        self.hit_cluster_array.append(copy.deepcopy(cluster))