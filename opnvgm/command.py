"""High-level commands addressed to an OPN2 chip."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .registers import (
    Channel,
    ChannelRegister,
    GlobalRegister,
    Operator,
    OperatorRegister,
    Port,
)
from .wait_samples import SAMPLE_RATE, WaitSamples


class Opn2Command:
    """Base of every command; reports the port, channel and operator it targets, if any."""

    def port(self) -> Port | None:
        """The port the command writes through, or None for chip-wide commands."""
        return None

    def channel(self) -> Channel | None:
        """The channel the command targets, or None."""
        return None

    def operator(self) -> Operator | None:
        """The operator the command targets, or None."""
        return None


@dataclass(frozen=True, order=True)
class SetClockRate(Opn2Command):
    """Sets the clock rate the chip runs at, in Hz."""

    clock_rate: int

    def __post_init__(self) -> None:
        rate = int(self.clock_rate)
        if not 0 <= rate <= 0xFFFFFFFF:
            raise ValueError(f"clock rate {rate} does not fit in 32 bits")
        object.__setattr__(self, "clock_rate", rate)


@dataclass(frozen=True, order=True)
class Wait(Opn2Command):
    """Pauses for a duration; accepts seconds, a timedelta or a WaitSamples."""

    seconds: float

    def __post_init__(self) -> None:
        value = self.seconds
        if isinstance(value, WaitSamples):
            seconds = value.samples / SAMPLE_RATE
        elif isinstance(value, timedelta):
            seconds = value.total_seconds()
        else:
            seconds = float(value)
        if seconds < 0:
            raise ValueError(f"wait of {seconds} seconds is negative")
        object.__setattr__(self, "seconds", seconds)

    @property
    def duration(self) -> timedelta:
        """The wait as a timedelta."""
        return timedelta(seconds=self.seconds)


@dataclass(frozen=True)
class GlobalCommand(Opn2Command):
    """Writes a chip-wide register."""

    register: GlobalRegister

    def __post_init__(self) -> None:
        if not isinstance(self.register, GlobalRegister):
            raise TypeError(f"{self.register!r} is not a global register")


@dataclass(frozen=True)
class ChannelCommand(Opn2Command):
    """Writes a per-channel register on a given port."""

    target_port: Port
    target_channel: Channel
    register: ChannelRegister

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_port", Port(self.target_port))
        object.__setattr__(self, "target_channel", Channel(self.target_channel))
        if not isinstance(self.register, ChannelRegister):
            raise TypeError(f"{self.register!r} is not a channel register")

    def port(self) -> Port:
        return self.target_port

    def channel(self) -> Channel:
        return self.target_channel


@dataclass(frozen=True)
class OperatorCommand(Opn2Command):
    """Writes a per-operator register on a given port."""

    target_port: Port
    target_channel: Channel
    target_operator: Operator
    register: OperatorRegister

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_port", Port(self.target_port))
        object.__setattr__(self, "target_channel", Channel(self.target_channel))
        object.__setattr__(self, "target_operator", Operator(self.target_operator))
        if not isinstance(self.register, OperatorRegister):
            raise TypeError(f"{self.register!r} is not an operator register")

    def port(self) -> Port:
        return self.target_port

    def channel(self) -> Channel:
        return self.target_channel

    def operator(self) -> Operator:
        return self.target_operator