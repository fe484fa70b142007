"""Delays measured in samples at the 44.1 kHz VGM rate."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta

SAMPLE_RATE = 44100
_MAX_SAMPLES = 0xFFFF


@dataclass(frozen=True, order=True)
class WaitSamples:
    """A wait of a number of 44.1 kHz samples, held in 16 bits."""

    samples: int

    def __post_init__(self) -> None:
        if not 0 <= self.samples <= _MAX_SAMPLES:
            raise ValueError(f"sample count {self.samples} does not fit in 16 bits")

    @classmethod
    def from_duration(cls, duration: timedelta | float) -> WaitSamples:
        """Convert a duration (timedelta or seconds) to samples, saturating at 16 bits."""
        if isinstance(duration, timedelta):
            seconds = duration.total_seconds()
        else:
            seconds = float(duration)
        samples = seconds * SAMPLE_RATE
        if math.isnan(samples):
            return cls(0)
        return cls(int(min(max(samples, 0.0), float(_MAX_SAMPLES))))

    def to_duration(self) -> timedelta:
        """Return the wait as a timedelta."""
        return timedelta(seconds=self.samples / SAMPLE_RATE)

    def __int__(self) -> int:
        return self.samples