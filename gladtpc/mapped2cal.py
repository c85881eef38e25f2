"""Conversion of mapped pad data into calibrated pad data."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .caldata import CalData
from .mappeddata import MappedData

logger = logging.getLogger(__name__)


class Mapped2Cal:
    """Calibrator turning mapped pad signals into calibrated ones.

    No calibration is applied yet: the ADC spectrum is copied as it is.
    Only the last mapped entry of an event yields calibrated output.
    """

    def __init__(self, cal_par: Any = None, online: bool = False) -> None:
        self.cal_par = cal_par
        self.online = online
        self.cal_data: list[CalData] = []

    @property
    def persistent(self) -> bool:
        """Whether the calibrated output is meant to be stored."""
        return not self.online

    def reset(self) -> None:
        """Drop the calibrated output of the previous event."""
        logger.debug("Clearing CalData structure")
        self.cal_data.clear()

    def execute(self, mapped_data: Sequence[MappedData]) -> list[CalData]:
        """Process one event of mapped data and return the calibrated output."""
        self.reset()
        if self.cal_par is None:
            logger.warning("Mapped2Cal: no calibration parameter container")
        if not mapped_data:
            return self.cal_data
        last = mapped_data[-1]
        self.cal_data.append(CalData(pad_id=last.pad_id, adc=list(last.adc)))
        return self.cal_data