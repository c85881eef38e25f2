"""Calibrated pad data: a pad identifier and its time-bucket ADC spectrum."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CalData:
    """Calibrated signal of one pad.

    ``adc`` holds one counter per time bucket.
    """

    pad_id: int = 0
    adc: list[int] = field(default_factory=list)

    def add_time(self, time: float) -> None:
        """Increment the counter of the time bucket that ``time`` falls in.

        Raises IndexError when the bucket lies outside the spectrum.
        """
        index = int(time)
        if time < 0 or index >= len(self.adc):
            raise IndexError(
                f"time bucket {time!r} outside spectrum of {len(self.adc)} buckets"
            )
        self.adc[index] += 1