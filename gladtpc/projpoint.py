"""Electrons projected onto a virtual pad, with their arrival-time distribution."""

from __future__ import annotations

from dataclasses import dataclass, field

_SHORT_MAX = 32767


@dataclass
class TimeHistogram:
    """Fixed-width histogram with 16-bit integer bin contents.

    Bin 0 is the underflow bin and bin ``nbins + 1`` the overflow bin.
    """

    name: str = ""
    nbins: int = 400
    low: float = 0.0
    high: float = 40.0
    _counts: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.nbins < 1 or self.high <= self.low:
            raise ValueError("histogram needs at least one bin and high > low")
        self._counts = [0] * (self.nbins + 2)

    def find_bin(self, value: float) -> int:
        """Number of the bin that ``value`` falls in."""
        if value < self.low:
            return 0
        if value >= self.high:
            return self.nbins + 1
        return 1 + int(self.nbins * (value - self.low) / (self.high - self.low))

    def fill(self, value: float, weight: float = 1.0) -> int:
        """Add the integer part of ``weight`` to the bin of ``value``; return the bin."""
        number = self.find_bin(value)
        total = self._counts[number] + int(weight)
        self._counts[number] = max(-_SHORT_MAX, min(_SHORT_MAX, total))
        return number

    def bin_content(self, bin: int) -> int:
        """Content of a bin; numbers out of range are clamped to the edge bins."""
        bin = max(0, min(bin, len(self._counts) - 1))
        return self._counts[bin]

    def total(self) -> int:
        """Sum of all bin contents, under- and overflow included."""
        return sum(self._counts)


@dataclass
class ProjPoint:
    """Charge and time distribution collected on one virtual pad."""

    virtual_pad_id: int = 0
    charge: float = 0.0
    time_distr: TimeHistogram | None = None
    pdg_code: int = 0
    mother_id: int = 0
    x0: float = 0.0
    y0: float = 0.0
    z0: float = 0.0
    px0: float = 0.0
    py0: float = 0.0
    pz0: float = 0.0

    @classmethod
    def from_hit(
        cls,
        pad: int,
        time: float,
        charge: float,
        event_id: int,
        pdg_code: int = 0,
        mother_id: int = 0,
        x0: float = 0.0,
        y0: float = 0.0,
        z0: float = 0.0,
        px0: float = 0.0,
        py0: float = 0.0,
        pz0: float = 0.0,
    ) -> ProjPoint:
        """Create a point whose time distribution (in microseconds) holds ``time``."""
        point = cls(
            virtual_pad_id=pad,
            charge=charge,
            time_distr=TimeHistogram(name=f"event {event_id}: pad {pad}"),
            pdg_code=pdg_code,
            mother_id=mother_id,
            x0=x0,
            y0=y0,
            z0=z0,
            px0=px0,
            py0=py0,
            pz0=pz0,
        )
        point.add_time(time, charge)
        return point

    def add_charge(self) -> None:
        """Count one more electron on the pad."""
        self.charge += 1

    def _histogram(self) -> TimeHistogram:
        if self.time_distr is None:
            raise RuntimeError("projected point has no time distribution")
        return self.time_distr

    def add_time(self, time: float, weight: float) -> None:
        """Add an arrival time with the given weight to the time distribution."""
        self._histogram().fill(time, weight)

    def time_bin(self, bin: int) -> int:
        """Content of one bin of the time distribution."""
        return self._histogram().bin_content(bin)

    def clear(self) -> None:
        """Drop the time distribution."""
        self.time_distr = None