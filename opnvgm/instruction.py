"""Raw instructions for an OPN2 driver, and the lowering of commands into them."""

from __future__ import annotations

from dataclasses import dataclass

from .command import (
    ChannelCommand,
    GlobalCommand,
    Opn2Command,
    OperatorCommand,
    SetClockRate,
    Wait,
)
from .registers import Port
from .wait_samples import WaitSamples


class Opn2Instruction:
    """Base of every raw driver instruction."""


@dataclass(frozen=True, order=True)
class ClockRateInstruction(Opn2Instruction):
    """Sets the chip clock rate, in Hz."""

    clock_rate: int


@dataclass(frozen=True, order=True, repr=False)
class WriteInstruction(Opn2Instruction):
    """Writes one byte to a bus address."""

    port: int
    data: int

    def __post_init__(self) -> None:
        port = int(self.port)
        data = int(self.data)
        if not 0 <= port <= 0xFFFFFFFF:
            raise ValueError(f"port {port} does not fit in 32 bits")
        if not 0 <= data <= 0xFF:
            raise ValueError(f"data {data} does not fit in 8 bits")
        object.__setattr__(self, "port", port)
        object.__setattr__(self, "data", data)

    def __repr__(self) -> str:
        data = self.data
        return f"WriteInstruction(port={self.port}, data='{data} (0x{data:02x}) ({data:#010b})')"


@dataclass(frozen=True, order=True)
class WaitInstruction(Opn2Instruction):
    """Pauses for a number of samples."""

    samples: WaitSamples

    def __post_init__(self) -> None:
        if not isinstance(self.samples, WaitSamples):
            object.__setattr__(self, "samples", WaitSamples(int(self.samples)))


def _register_write(port: int, address: int, data: int) -> list[Opn2Instruction]:
    return [WriteInstruction(port, address), WriteInstruction(port + 1, data)]


def to_instructions(command: Opn2Command) -> list[Opn2Instruction]:
    """Lower a command into the raw instructions that carry it out."""
    match command:
        case SetClockRate(clock_rate=rate):
            return [ClockRateInstruction(rate)]
        case Wait(seconds=seconds):
            return [WaitInstruction(WaitSamples.from_duration(seconds))]
        case GlobalCommand(register=register):
            return _register_write(
                int(Port.PORT_1), register.BASE_ADDRESS, register.to_byte()
            )
        case ChannelCommand(target_port=port, target_channel=channel, register=register):
            return _register_write(
                int(port), register.address_of(channel), register.to_byte()
            )
        case OperatorCommand(
            target_port=port,
            target_channel=channel,
            target_operator=operator,
            register=register,
        ):
            return _register_write(
                int(port), register.address_of(channel, operator), register.to_byte()
            )
    raise TypeError(f"cannot convert {command!r} to instructions")