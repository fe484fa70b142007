"""Chip-wide registers of the OPN2: LFO, timers, channel 3 mode, key on/off and DAC."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import ClassVar

from .registers import Channel, GlobalRegister


def _check_byte(value: int) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"register value {value} does not fit in 8 bits")
    return value


def _bit(value: int, position: int) -> bool:
    return (value >> position) & 0b1 > 0


class LfoFrequency(IntEnum):
    """Low-frequency oscillator rate; the value is its 3-bit code."""

    HZ_3_98 = 0
    HZ_5_56 = 1
    HZ_6_02 = 2
    HZ_6_37 = 3
    HZ_6_88 = 4
    HZ_9_67 = 5
    HZ_48_1 = 6
    HZ_72_2 = 7


@dataclass(frozen=True)
class Lfo(GlobalRegister):
    """The LFO register; a frequency of None means the LFO is disabled."""

    BASE_ADDRESS: ClassVar[int] = 0x22

    frequency: LfoFrequency | None = None

    def __post_init__(self) -> None:
        if self.frequency is not None:
            object.__setattr__(self, "frequency", LfoFrequency(self.frequency))

    @property
    def enabled(self) -> bool:
        """Whether the LFO runs."""
        return self.frequency is not None

    @classmethod
    def from_byte(cls, value: int) -> Lfo:
        value = _check_byte(value)
        if value >> 3 > 0:
            return cls(LfoFrequency(value & 0b111))
        return cls()

    def to_byte(self) -> int:
        if self.frequency is None:
            return 0
        return (1 << 3) | int(self.frequency)


@dataclass(frozen=True, order=True)
class _ByteRegister(GlobalRegister):
    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _check_byte(self.value))


@dataclass(frozen=True, order=True)
class TimerAMsb(_ByteRegister):
    """High byte of timer A."""

    BASE_ADDRESS: ClassVar[int] = 0x24

    @classmethod
    def from_byte(cls, value: int) -> TimerAMsb:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class TimerALsb(_ByteRegister):
    """Low bits of timer A."""

    BASE_ADDRESS: ClassVar[int] = 0x25

    @classmethod
    def from_byte(cls, value: int) -> TimerALsb:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class TimerA:
    """Timer A as its pair of registers; plain integers are accepted for either half."""

    msb: TimerAMsb = field(default_factory=TimerAMsb)
    lsb: TimerALsb = field(default_factory=TimerALsb)

    def __post_init__(self) -> None:
        if not isinstance(self.msb, TimerAMsb):
            object.__setattr__(self, "msb", TimerAMsb(self.msb))
        if not isinstance(self.lsb, TimerALsb):
            object.__setattr__(self, "lsb", TimerALsb(self.lsb))


@dataclass(frozen=True, order=True)
class TimerB(_ByteRegister):
    """Timer B."""

    BASE_ADDRESS: ClassVar[int] = 0x26

    @classmethod
    def from_byte(cls, value: int) -> TimerB:
        return cls(value)

    def to_byte(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class Timer:
    """Control flags of one timer."""

    load: bool = False
    enable: bool = False
    reset: bool = False


@dataclass(frozen=True, order=True)
class Timers:
    """Control flags of timers A and B."""

    timer_a: Timer = field(default_factory=Timer)
    timer_b: Timer = field(default_factory=Timer)

    @classmethod
    def from_flags(
        cls,
        load_a: bool,
        load_b: bool,
        enable_a: bool,
        enable_b: bool,
        reset_a: bool,
        reset_b: bool,
    ) -> Timers:
        """Build from flags in register bit order."""
        return cls(Timer(load_a, enable_a, reset_a), Timer(load_b, enable_b, reset_b))

    def flags(self) -> tuple[bool, bool, bool, bool, bool, bool]:
        """Return (load_a, load_b, enable_a, enable_b, reset_a, reset_b)."""
        return (
            self.timer_a.load,
            self.timer_b.load,
            self.timer_a.enable,
            self.timer_b.enable,
            self.timer_a.reset,
            self.timer_b.reset,
        )


class Channel3Mode(IntEnum):
    """Operating mode of channel 3."""

    NORMAL = 0
    """Normal channel behaviour."""
    SPECIAL = 1
    """Four separate frequencies for channel 3/6."""
    SPECIAL_CSM = 2
    """Special mode with automatic key on/off driven by timer A."""


@dataclass(frozen=True, order=True)
class TimersAndChannel3Mode(GlobalRegister):
    """Timer control flags together with the channel 3 mode."""

    BASE_ADDRESS: ClassVar[int] = 0x27

    timers: Timers = field(default_factory=Timers)
    channel_3_mode: Channel3Mode = Channel3Mode.NORMAL

    def __post_init__(self) -> None:
        object.__setattr__(self, "channel_3_mode", Channel3Mode(self.channel_3_mode))

    @classmethod
    def from_byte(cls, value: int) -> TimersAndChannel3Mode:
        value = _check_byte(value)
        timers = Timers.from_flags(*(_bit(value, position) for position in range(6)))
        mode = value >> 6
        try:
            channel_3_mode = Channel3Mode(mode)
        except ValueError:
            raise ValueError(f"Invalid channel 3 mode {mode}") from None
        return cls(timers, channel_3_mode)

    def to_byte(self) -> int:
        data = int(self.channel_3_mode)
        for flag in reversed(self.timers.flags()):
            data = (data << 1) | int(flag)
        return data


class Operators(IntFlag):
    """Bit mask of the operators keyed on."""

    OPERATOR_NONE = 0b00000000
    OPERATOR_1 = 0b00010000
    OPERATOR_2 = 0b00100000
    OPERATOR_3 = 0b01000000
    OPERATOR_4 = 0b10000000
    OPERATOR_ALL = 0b11110000


@dataclass(frozen=True, order=True)
class KeyOnOff(GlobalRegister):
    """Keys a set of operators of one channel on; the rest are keyed off."""

    BASE_ADDRESS: ClassVar[int] = 0x28

    channel: Channel = Channel.CHANNEL_1
    operators: Operators = Operators.OPERATOR_NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "channel", Channel(self.channel))
        object.__setattr__(self, "operators", Operators(self.operators) & Operators.OPERATOR_ALL)

    @classmethod
    def from_byte(cls, value: int) -> KeyOnOff:
        value = _check_byte(value)
        code = value & 0b111
        try:
            channel = Channel(code)
        except ValueError:
            raise ValueError(f"Invalid channel {code}") from None
        return cls(channel, Operators(value & int(Operators.OPERATOR_ALL)))

    def to_byte(self) -> int:
        return int(self.operators) | int(self.channel)


@dataclass(frozen=True, order=True)
class DacEnable(GlobalRegister):
    """Switches channel 6 between FM and the DAC."""

    BASE_ADDRESS: ClassVar[int] = 0x2A

    enabled: bool = False

    @classmethod
    def from_byte(cls, value: int) -> DacEnable:
        return cls(_check_byte(value) > 0)

    def to_byte(self) -> int:
        return int(bool(self.enabled))

    def __bool__(self) -> bool:
        return bool(self.enabled)


@dataclass(frozen=True, order=True)
class DacAmplitude(_ByteRegister):
    """The DAC sample value."""

    BASE_ADDRESS: ClassVar[int] = 0x2B

    @classmethod
    def from_byte(cls, value: int) -> DacAmplitude:
        return cls(value)

    def to_byte(self) -> int:
        return self.value