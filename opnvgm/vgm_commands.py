"""Commands of a VGM data stream, and the decoder that reads them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .parsing import ParseError
from .wait_samples import WaitSamples

_END_OF_DATA = 0x66


def _check_byte(value: int, what: str) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{what} {value} does not fit in 8 bits")
    return value


class VgmCommand:
    """Base of every command found in a VGM data stream."""


@dataclass(frozen=True, order=True)
class WriteYm2612(VgmCommand):
    """Writes a data byte to a YM2612 register through the given port."""

    port: int
    address: int
    data: int

    def __post_init__(self) -> None:
        port = int(self.port)
        if not 0 <= port <= 0xFFFFFFFF:
            raise ValueError(f"port {port} does not fit in 32 bits")
        object.__setattr__(self, "port", port)
        object.__setattr__(self, "address", _check_byte(self.address, "address"))
        object.__setattr__(self, "data", _check_byte(self.data, "data"))


@dataclass(frozen=True, order=True)
class GameGearPsgStereo(VgmCommand):
    """Writes the Game Gear PSG stereo byte."""

    data: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _check_byte(self.data, "data"))


@dataclass(frozen=True, order=True)
class WritePsg(VgmCommand):
    """Writes a byte to the PSG."""

    data: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _check_byte(self.data, "data"))


@dataclass(frozen=True, order=True)
class VgmWait(VgmCommand):
    """Waits a number of samples; plain integers are accepted."""

    samples: WaitSamples

    def __post_init__(self) -> None:
        if not isinstance(self.samples, WaitSamples):
            object.__setattr__(self, "samples", WaitSamples(int(self.samples)))


_FIXED_WAITS = {0x62: 735, 0x63: 882, **{code: code - 0x6F for code in range(0x70, 0x80)}}


def _take(it: Iterator[int], what: str) -> int:
    try:
        return next(it)
    except StopIteration:
        raise ParseError(what) from None


def parse_commands(data: Iterable[int]) -> list[VgmCommand]:
    """Decode commands up to the end-of-data marker or the end of the input."""
    it = iter(data)
    commands: list[VgmCommand] = []
    for opcode in it:
        if opcode == _END_OF_DATA:
            break
        if opcode == 0x4F:
            commands.append(GameGearPsgStereo(_take(it, "No game gear stereo data")))
        elif opcode == 0x50:
            commands.append(WritePsg(_take(it, "No data")))
        elif opcode in (0x52, 0x53):
            port = 4000 if opcode == 0x52 else 4002
            address = _take(it, "No address")
            value = _take(it, "No data")
            commands.append(WriteYm2612(port, address, value))
        elif opcode == 0x61:
            low = _take(it, "No wait byte")
            high = _take(it, "No wait byte")
            commands.append(VgmWait(WaitSamples((high << 8) | low)))
        elif opcode in _FIXED_WAITS:
            commands.append(VgmWait(WaitSamples(_FIXED_WAITS[opcode])))
        else:
            raise ParseError(f"Unrecognized VGM command 0x{opcode:02x}")
    return commands