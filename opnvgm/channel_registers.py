"""Per-channel registers of the OPN2: frequency, feedback/algorithm and stereo/LFO sensitivity."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

from .registers import ChannelRegister


def _check_byte(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"register value {value} does not fit in 8 bits")
    return value


def _bit(value: int, position: int) -> bool:
    return (value >> position) & 0b1 > 0


@dataclass(frozen=True, order=True)
class _ByteChannelRegister(ChannelRegister):
    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _check_byte(self.value))


@dataclass(frozen=True, order=True)
class FrequencyLsb(_ByteChannelRegister):
    """Low byte of a channel's frequency number."""

    BASE_ADDRESS: ClassVar[int] = 0xA0

    @classmethod
    def from_byte(cls, value: int) -> FrequencyLsb:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class FrequencyMsb(_ByteChannelRegister):
    """High byte of a channel's frequency (block and frequency number MSBs)."""

    BASE_ADDRESS: ClassVar[int] = 0xA4

    @classmethod
    def from_byte(cls, value: int) -> FrequencyMsb:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class Frequency:
    """A channel frequency as its pair of registers; plain integers are accepted for either half."""

    msb: FrequencyMsb = field(default_factory=FrequencyMsb)
    lsb: FrequencyLsb = field(default_factory=FrequencyLsb)

    def __post_init__(self) -> None:
        if not isinstance(self.msb, FrequencyMsb):
            object.__setattr__(self, "msb", FrequencyMsb(self.msb))
        if not isinstance(self.lsb, FrequencyLsb):
            object.__setattr__(self, "lsb", FrequencyLsb(self.lsb))

    @classmethod
    def from_int(cls, value: int) -> Frequency:
        """Split a 16-bit value into its high and low register bytes."""
        value = int(value)
        if not 0 <= value <= 0xFFFF:
            raise ValueError(f"frequency {value} does not fit in 16 bits")
        return cls(FrequencyMsb(value >> 8), FrequencyLsb(value & 0xFF))

    def __int__(self) -> int:
        return (self.msb.to_byte() << 8) | self.lsb.to_byte()


@dataclass(frozen=True, order=True)
class Channel3SupplementaryFrequencyLsb(_ByteChannelRegister):
    """Low byte of a supplementary channel 3 frequency."""

    BASE_ADDRESS: ClassVar[int] = 0xA8

    @classmethod
    def from_byte(cls, value: int) -> Channel3SupplementaryFrequencyLsb:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class Channel3SupplementaryFrequencyMsb(_ByteChannelRegister):
    """High byte of a supplementary channel 3 frequency."""

    BASE_ADDRESS: ClassVar[int] = 0xAC

    @classmethod
    def from_byte(cls, value: int) -> Channel3SupplementaryFrequencyMsb:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class Channel3SupplementaryFrequency:
    """A supplementary channel 3 frequency as its pair of registers."""

    msb: Channel3SupplementaryFrequencyMsb = field(
        default_factory=Channel3SupplementaryFrequencyMsb
    )
    lsb: Channel3SupplementaryFrequencyLsb = field(
        default_factory=Channel3SupplementaryFrequencyLsb
    )

    def __post_init__(self) -> None:
        if not isinstance(self.msb, Channel3SupplementaryFrequencyMsb):
            object.__setattr__(self, "msb", Channel3SupplementaryFrequencyMsb(self.msb))
        if not isinstance(self.lsb, Channel3SupplementaryFrequencyLsb):
            object.__setattr__(self, "lsb", Channel3SupplementaryFrequencyLsb(self.lsb))


class Feedback(IntEnum):
    """Self-feedback level of operator 1; the value is its 3-bit code."""

    FEEDBACK_1 = 0
    FEEDBACK_2 = 1
    FEEDBACK_3 = 2
    FEEDBACK_4 = 3
    FEEDBACK_5 = 4
    FEEDBACK_6 = 5
    FEEDBACK_7 = 6
    FEEDBACK_8 = 7


class Algorithm(IntEnum):
    """Operator connection algorithm; the value is its 3-bit code."""

    ALGORITHM_1 = 0
    """Distortion guitar, "high hat chopper", bass."""
    ALGORITHM_2 = 1
    """Harp, PSG sound."""
    ALGORITHM_3 = 2
    """Bass, electric guitar, brass, piano, woods."""
    ALGORITHM_4 = 3
    """Strings, folk guitar, chimes."""
    ALGORITHM_5 = 4
    """Flute, bells, chorus, bass drum, snare drum, tom-tom."""
    ALGORITHM_6 = 5
    """Brass, organ."""
    ALGORITHM_7 = 6
    """Xylophone, tom-tom, organ, vibraphone, snare drum, bass drum."""
    ALGORITHM_8 = 7
    """Pipe organ."""


@dataclass(frozen=True, order=True)
class FeedbackAndAlgorithm(ChannelRegister):
    """Operator 1 feedback and the channel's algorithm."""

    BASE_ADDRESS: ClassVar[int] = 0xB0

    feedback: Feedback = Feedback.FEEDBACK_1
    algorithm: Algorithm = Algorithm.ALGORITHM_1

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "feedback", Feedback(self.feedback))
        except ValueError:
            raise ValueError("Feedback should be a 3-bit number") from None
        try:
            object.__setattr__(self, "algorithm", Algorithm(self.algorithm))
        except ValueError:
            raise ValueError("Algorithm should be a 3-bit number") from None

    @classmethod
    def from_byte(cls, value: int) -> FeedbackAndAlgorithm:
        value = _check_byte(value)
        return cls(value >> 3, value & 0b111)

    def to_byte(self) -> int:
        return (int(self.feedback) << 3) | int(self.algorithm)


class AmplitudeModulationSensitivity(IntEnum):
    """Depth of LFO amplitude modulation."""

    DB_0 = 0
    DB_1_4 = 1
    DB_5_9 = 2
    DB_11_8 = 3


class FrequencyModulationSensitivity(IntEnum):
    """Depth of LFO frequency modulation."""

    HT_0 = 0
    HT_3_4 = 1
    HT_6_7 = 2
    HT_10 = 3
    HT_14 = 4
    HT_20 = 5
    HT_40 = 6
    HT_80 = 7


@dataclass(frozen=True, order=True)
class StereoOutput:
    """Which speakers a channel feeds."""

    left: bool = True
    right: bool = True


@dataclass(frozen=True, order=True)
class StereoAndLfoSensitivity(ChannelRegister):
    """Stereo output and LFO modulation sensitivities of a channel."""

    BASE_ADDRESS: ClassVar[int] = 0xB4

    stereo_output: StereoOutput = field(default_factory=StereoOutput)
    amplitude_modulation_sensitivity: AmplitudeModulationSensitivity = (
        AmplitudeModulationSensitivity.DB_0
    )
    frequency_modulation_sensitivity: FrequencyModulationSensitivity = (
        FrequencyModulationSensitivity.HT_0
    )

    def __post_init__(self) -> None:
        try:
            ams = AmplitudeModulationSensitivity(self.amplitude_modulation_sensitivity)
        except ValueError:
            raise ValueError(
                f"Invalid amplitude modulation sensitivity {self.amplitude_modulation_sensitivity}"
            ) from None
        try:
            fms = FrequencyModulationSensitivity(self.frequency_modulation_sensitivity)
        except ValueError:
            raise ValueError(
                f"Invalid frequency modulation sensitivity {self.frequency_modulation_sensitivity}"
            ) from None
        object.__setattr__(self, "amplitude_modulation_sensitivity", ams)
        object.__setattr__(self, "frequency_modulation_sensitivity", fms)

    @classmethod
    def from_byte(cls, value: int) -> StereoAndLfoSensitivity:
        value = _check_byte(value)
        fms = value & 0b11
        ams = (value >> 3) & 0b111
        stereo = StereoOutput(left=_bit(value, 7), right=_bit(value, 6))
        return cls(stereo, ams, fms)

    def to_byte(self) -> int:
        data = (int(bool(self.stereo_output.left)) << 1) | int(bool(self.stereo_output.right))
        data = (data << 3) | int(self.amplitude_modulation_sensitivity)
        data = (data << 3) | int(self.frequency_modulation_sensitivity)
        return data