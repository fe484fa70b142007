"""A whole VGM file: header, GD3 tag and command stream."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .gd3 import Gd3
from .header import Header
from .parsing import ParseError
from .vgm_commands import VgmCommand, parse_commands

_HEADER_SIZE = 256
_GD3_OFFSET_BASE = 0x14
_DATA_OFFSET_BASE = 0x34


@dataclass
class VgmFile:
    """A decoded VGM file; iterating yields its commands."""

    header: Header = field(default_factory=Header)
    gd3: Gd3 = field(default_factory=Gd3)
    commands: list[VgmCommand] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> VgmFile:
        """Decode a VGM file from its raw bytes."""
        data = bytes(data)
        if len(data) < _HEADER_SIZE:
            raise ParseError(f"VGM data of {len(data)} bytes is shorter than the header")
        header = Header.from_bytes(data[:_HEADER_SIZE])
        gd3_start = _GD3_OFFSET_BASE + header.gd3_offset
        data_start = _DATA_OFFSET_BASE + header.vgm_data_offset
        for name, start in (("GD3", gd3_start), ("command data", data_start)):
            if start > len(data):
                raise ParseError(f"{name} offset {start} lies beyond the end of the data")
        gd3 = Gd3.from_bytes(data[gd3_start:])
        commands = parse_commands(data[data_start:])
        return cls(header, gd3, commands)

    @classmethod
    def parse(cls, path: str | os.PathLike[str]) -> VgmFile:
        """Read and decode the VGM file at the given path."""
        return cls.from_bytes(Path(path).read_bytes())

    def __iter__(self) -> Iterator[VgmCommand]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)