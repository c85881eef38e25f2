"""Pad-plane geometry and a polygon-binned two-dimensional histogram."""

from __future__ import annotations

import itertools
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

N_PADS = 5632
PAD_COLUMNS = 128
PAD_ROWS = 44
PAD_SIZE = 2.0  # mm
PLANE_NAME = "R3BGTPC_Plane"
MISSING_CENTER = (-9999.0, -9999.0)
NO_BIN = -5


@dataclass
class _PolyBin:
    number: int
    points: tuple[tuple[float, float], ...]
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    content: float = 0.0

    def contains(self, x: float, y: float) -> bool:
        """Even-odd crossing test of a point against the polygon."""
        inside = False
        previous = self.points[-1:] + self.points[:-1]
        for (xi, yi), (xj, yj) in zip(self.points, previous):
            if (yi < y <= yj) or (yj < y <= yi):
                if xi + (y - yi) / (yj - yi) * (xj - xi) < x:
                    inside = not inside
        return inside


class PadPlane:
    """A 2-D histogram whose bins are arbitrary polygons.

    Bins are numbered from 1 in the order they are added. Points outside the
    bounding box of all bins go to overflow bins numbered -1 to -9; a point
    inside the box but in no polygon goes to bin -5.
    """

    def __init__(self, name: str = "", title: str = "", partition: tuple[int, int] = (25, 25)):
        self.name = name
        self.title = title
        self._bins: list[_PolyBin] = []
        self._overflow: dict[int, float] = {code: 0.0 for code in range(-9, 0)}
        self._bounds: tuple[float, float, float, float] | None = None
        self._partition = partition
        self._cells: dict[tuple[int, int], list[_PolyBin]] | None = None

    def __len__(self) -> int:
        return len(self._bins)

    @property
    def bounds(self) -> tuple[float, float, float, float] | None:
        """(x_min, x_max, y_min, y_max) over all bins, or None if empty."""
        return self._bounds

    def add_bin(self, xs: Sequence[float], ys: Sequence[float]) -> int:
        """Add a polygonal bin and return its number."""
        points = tuple((float(x), float(y)) for x, y in zip(xs, ys, strict=True))
        if len(points) < 3:
            raise ValueError("a bin needs at least three vertices")
        px = [p[0] for p in points]
        py = [p[1] for p in points]
        poly = _PolyBin(len(self._bins) + 1, points, min(px), max(px), min(py), max(py))
        self._bins.append(poly)
        if self._bounds is None:
            self._bounds = (poly.x_min, poly.x_max, poly.y_min, poly.y_max)
        else:
            x0, x1, y0, y1 = self._bounds
            self._bounds = (
                min(x0, poly.x_min),
                max(x1, poly.x_max),
                min(y0, poly.y_min),
                max(y1, poly.y_max),
            )
        self._cells = None
        return poly.number

    def change_partition(self, nx: int, ny: int) -> None:
        """Set the number of search cells along each axis."""
        if nx < 1 or ny < 1:
            raise ValueError("partition sizes must be positive")
        self._partition = (nx, ny)
        self._cells = None

    def _cell_index(self, value: float, low: float, high: float, count: int) -> int:
        if high <= low:
            return 0
        return min(count - 1, max(0, int((value - low) / (high - low) * count)))

    def _cell_of(self, x: float, y: float) -> tuple[int, int]:
        x0, x1, y0, y1 = self._bounds
        nx, ny = self._partition
        return self._cell_index(x, x0, x1, nx), self._cell_index(y, y0, y1, ny)

    def _build_cells(self) -> dict[tuple[int, int], list[_PolyBin]]:
        cells: dict[tuple[int, int], list[_PolyBin]] = defaultdict(list)
        for poly in self._bins:
            ix0, iy0 = self._cell_of(poly.x_min, poly.y_min)
            ix1, iy1 = self._cell_of(poly.x_max, poly.y_max)
            for cell in itertools.product(range(ix0, ix1 + 1), range(iy0, iy1 + 1)):
                cells[cell].append(poly)
        return dict(cells)

    def find_bin(self, x: float, y: float) -> int:
        """Return the number of the bin containing (x, y)."""
        if self._bounds is None:
            return NO_BIN
        x0, x1, y0, y1 = self._bounds
        if y > y1:
            code = -1
        elif y > y0:
            code = -4
        else:
            code = -7
        if x > x1:
            code -= 2
        elif x > x0:
            code -= 1
        if code != NO_BIN:
            return code
        if self._cells is None:
            self._cells = self._build_cells()
        for poly in self._cells.get(self._cell_of(x, y), ()):
            if poly.contains(x, y):
                return poly.number
        return NO_BIN

    def fill(self, x: float, y: float, weight: float = 1.0) -> int:
        """Add ``weight`` to the bin containing (x, y) and return its number."""
        number = self.find_bin(x, y)
        if number < 0:
            self._overflow[number] += weight
        else:
            self._bins[number - 1].content += weight
        return number

    def content(self, bin: int) -> float:
        """Content of a bin, overflow bins included."""
        if 1 <= bin <= len(self._bins):
            return self._bins[bin - 1].content
        if bin in self._overflow:
            return self._overflow[bin]
        raise IndexError(f"no bin {bin}")

    def reset(self) -> None:
        """Set every bin content back to zero, keeping the bins."""
        for poly in self._bins:
            poly.content = 0.0
        self._overflow = {code: 0.0 for code in self._overflow}

    def contents(self) -> Iterable[float]:
        """Contents of the regular bins in bin order."""
        return (poly.content for poly in self._bins)


class PadMap:
    """Geometry of the 128 x 44 pad plane with square 2 mm pads.

    Coordinates are (Z, X) in the laboratory convention, in mm.
    """

    def __init__(self) -> None:
        self.pad_coords: list[list[list[float]]] = [
            [[0.0, 0.0] for _ in range(4)] for _ in range(N_PADS)
        ]
        self._plane = PadPlane()

    def generate_pad_plane(self) -> None:
        """Compute the pad corners and add one bin per pad to the pad plane."""
        cells = itertools.product(range(PAD_COLUMNS), range(PAD_ROWS))
        for pad, (icol, irow) in enumerate(cells):
            z0 = PAD_SIZE * icol
            x0 = PAD_SIZE * irow
            self.pad_coords[pad] = [
                [z0, x0],
                [z0, x0 + PAD_SIZE],
                [z0 + PAD_SIZE, x0 + PAD_SIZE],
                [z0 + PAD_SIZE, x0],
            ]
        for corners in self.pad_coords:
            closed = corners + corners[:1]
            self._plane.add_bin([c[0] for c in closed], [c[1] for c in closed])

    @property
    def pad_plane(self) -> PadPlane:
        """The pad-plane histogram, named and partitioned for lookup."""
        self._plane.name = PLANE_NAME
        self._plane.title = PLANE_NAME
        if self._plane._partition != (500, 500):
            self._plane.change_partition(500, 500)
        return self._plane

    def pad_center(self, pad_ref: int) -> tuple[float, float]:
        """Centre of pad ``pad_ref``, or (-9999, -9999) if there is no such pad."""
        if not 0 <= pad_ref < len(self.pad_coords):
            return MISSING_CENTER
        corners = self.pad_coords[pad_ref]
        x = (corners[0][0] + corners[3][0]) / 2.0
        y = (corners[0][1] + corners[1][1]) / 2.0
        return (x, y)

    def bin_to_pad(self, binval: int) -> int:
        """Pad number for a bin; the mapping is not defined yet and gives 0."""
        return 0