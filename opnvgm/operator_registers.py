"""Per-operator registers of the OPN2: detune/multiple, levels, envelope rates and SSG-EG."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import ClassVar

from .registers import OperatorRegister


def _check_byte(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"register value {value} does not fit in 8 bits")
    return value


class Detune(IntEnum):
    """Operator detune; the value is its 3-bit code."""

    PLUS_0 = 0
    PLUS_1 = 1
    PLUS_2 = 2
    PLUS_3 = 3
    MINUS_0 = 4
    MINUS_1 = 5
    MINUS_2 = 6
    MINUS_3 = 7

    @property
    def label(self) -> str:
        """Signed label such as '+1' or '-3'."""
        sign = "+" if self.value < 4 else "-"
        return f"{sign}{self.value % 4}"

    def __repr__(self) -> str:
        return f"Detune({self.label})"


class Multiple(IntEnum):
    """Frequency multiple of an operator; the value is its 4-bit code."""

    MUL_0_5 = 0
    MUL_1 = 1
    MUL_2 = 2
    MUL_3 = 3
    MUL_4 = 4
    MUL_5 = 5
    MUL_6 = 6
    MUL_7 = 7
    MUL_8 = 8
    MUL_9 = 9
    MUL_10 = 10
    MUL_11 = 11
    MUL_12 = 12
    MUL_13 = 13
    MUL_14 = 14
    MUL_15 = 15

    @property
    def label(self) -> str:
        """The multiplier as written, '0.5' for code 0."""
        return "0.5" if self.value == 0 else str(self.value)

    def __repr__(self) -> str:
        return f"Multiple({self.label})"


@dataclass(frozen=True, order=True, repr=False)
class DetuneAndMultiple(OperatorRegister):
    """Detune and frequency multiple of an operator."""

    BASE_ADDRESS: ClassVar[int] = 0x30

    detune: Detune = Detune.PLUS_0
    multiple: Multiple = Multiple.MUL_1

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "detune", Detune(self.detune))
        except ValueError:
            raise ValueError(f"Invalid detune {self.detune!r}") from None
        try:
            object.__setattr__(self, "multiple", Multiple(self.multiple))
        except ValueError:
            raise ValueError(f"Invalid multiple {self.multiple!r}") from None

    @classmethod
    def from_byte(cls, value: int) -> DetuneAndMultiple:
        value = _check_byte(value)
        return cls(Detune((value >> 4) & 0b111), Multiple(value & 0b1111))

    def to_byte(self) -> int:
        return (int(self.detune) << 4) | int(self.multiple)

    def __repr__(self) -> str:
        return f"DetuneAndMultiple({self.detune!r}, {self.multiple!r})"


@dataclass(frozen=True, order=True)
class _ByteOperatorRegister(OperatorRegister):
    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _check_byte(self.value))


@dataclass(frozen=True, order=True)
class TotalLevel(_ByteOperatorRegister):
    """Attenuation of an operator; the default is fully attenuated."""

    BASE_ADDRESS: ClassVar[int] = 0x40

    value: int = 127

    @classmethod
    def from_byte(cls, value: int) -> TotalLevel:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


class RateScaling(IntEnum):
    """Key rate scaling of an operator's envelope; the value is its 2-bit code."""

    RATE_SCALING_1 = 0
    RATE_SCALING_2 = 1
    RATE_SCALING_3 = 2
    RATE_SCALING_4 = 3


@dataclass(frozen=True, order=True)
class RateScalingAndAttackRate(OperatorRegister):
    """Rate scaling and attack rate of an operator."""

    BASE_ADDRESS: ClassVar[int] = 0x50

    rate_scaling: RateScaling = RateScaling.RATE_SCALING_1
    attack_rate: int = 0

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "rate_scaling", RateScaling(self.rate_scaling))
        except ValueError:
            raise ValueError("Rate Scaling should be a 2-bit number") from None
        object.__setattr__(self, "attack_rate", _check_byte(self.attack_rate))

    @classmethod
    def from_byte(cls, value: int) -> RateScalingAndAttackRate:
        value = _check_byte(value)
        return cls(RateScaling(value >> 6), value & 0b11111)

    def to_byte(self) -> int:
        return ((int(self.rate_scaling) << 6) | self.attack_rate) & 0xFF


@dataclass(frozen=True, order=True)
class AmplitudeAndFirstDecayRate(OperatorRegister):
    """Amplitude modulation enable and first decay rate of an operator."""

    BASE_ADDRESS: ClassVar[int] = 0x60

    amplitude: int = 0
    first_decay_rate: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "amplitude", _check_byte(self.amplitude))
        object.__setattr__(self, "first_decay_rate", _check_byte(self.first_decay_rate))

    @classmethod
    def from_byte(cls, value: int) -> AmplitudeAndFirstDecayRate:
        value = _check_byte(value)
        return cls(value >> 7, value & 0b11111)

    def to_byte(self) -> int:
        return ((self.amplitude << 7) | self.first_decay_rate) & 0xFF


@dataclass(frozen=True, order=True)
class SecondDecayRate(_ByteOperatorRegister):
    """Second decay rate of an operator."""

    BASE_ADDRESS: ClassVar[int] = 0x70

    @classmethod
    def from_byte(cls, value: int) -> SecondDecayRate:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class SecondAmplitudeAndReleaseRate(OperatorRegister):
    """Secondary amplitude (sustain level) and release rate of an operator."""

    BASE_ADDRESS: ClassVar[int] = 0x80

    second_amplitude: int = 0
    release_rate: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "second_amplitude", _check_byte(self.second_amplitude))
        object.__setattr__(self, "release_rate", _check_byte(self.release_rate))

    @classmethod
    def from_byte(cls, value: int) -> SecondAmplitudeAndReleaseRate:
        value = _check_byte(value)
        return cls(value >> 4, value & 0b1111)

    def to_byte(self) -> int:
        return ((self.second_amplitude << 4) | self.release_rate) & 0xFF


class SsgFlags(IntFlag):
    """Bits of the SSG-EG envelope mode."""

    DISABLED = 0
    HOLD = 1
    ALTERNATE = 2
    ATTACK = 4
    ENABLE = 8


_SSG_MASK = int(SsgFlags.HOLD | SsgFlags.ALTERNATE | SsgFlags.ATTACK | SsgFlags.ENABLE)


@dataclass(frozen=True, order=True)
class SoftwareSoundGeneratorMode(OperatorRegister):
    """SSG-EG envelope mode of an operator; unknown bits are dropped."""

    BASE_ADDRESS: ClassVar[int] = 0x90

    flags: SsgFlags = SsgFlags.DISABLED

    def __post_init__(self) -> None:
        bits = _check_byte(self.flags) & _SSG_MASK
        object.__setattr__(self, "flags", SsgFlags(bits))

    @classmethod
    def from_byte(cls, value: int) -> SoftwareSoundGeneratorMode:
        return cls(SsgFlags(_check_byte(value) & _SSG_MASK))

    def to_byte(self) -> int:
        return int(self.flags)