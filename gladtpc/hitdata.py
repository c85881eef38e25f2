"""Reconstructed hits and hit clusters in the drift volume."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class HitData:
    """A reconstructed hit: position, longitudinal width, energy and time bucket."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    long_width: float = 0.0
    energy: float = 0.0
    time: int = 0


def _zero_matrix() -> list[list[float]]:
    return [[0.0] * 3 for _ in range(3)]


@dataclass
class HitClusterData(HitData):
    """A cluster of hits with its covariance matrix, length and identifier."""

    x: float = -10000.0
    y: float = -10000.0
    z: float = -10000.0
    long_width: float = 0.0
    energy: float = 0.0
    cov_matrix: list[list[float]] = field(default_factory=_zero_matrix)
    length: float = -999.0
    cluster_id: int = -1