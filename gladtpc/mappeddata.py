"""Raw mapped pad data as read from the electronics."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MappedData:
    """Signal of one pad: time-bucket ADC values plus validity flags."""

    pad_id: int = 0
    adc: list[int] = field(default_factory=list)
    is_valid: bool = False
    is_pedestal_subtracted: bool = False