"""The GD3 metadata tag of a VGM file."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .parsing import parse_ident, parse_u16, parse_u32


def _parse_string(it: Iterator[int]) -> str:
    units = []
    while (unit := parse_u16(it)) != 0:
        units.append(unit)
    raw = struct.pack(f"<{len(units)}H", *units)
    return raw.decode("utf-16-le", errors="ignore")


@dataclass(frozen=True, order=True)
class Gd3:
    """Track metadata from a GD3 tag."""

    version: int = 0
    track_name_en: str = ""
    track_name_jp: str = ""
    game_name_en: str = ""
    game_name_jp: str = ""
    system_name_en: str = ""
    system_name_jp: str = ""
    track_author_en: str = ""
    track_author_jp: str = ""
    game_release_date: str = ""
    vgm_author: str = ""
    notes: str = ""

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> Gd3:
        """Decode a GD3 tag starting at its identifier."""
        it = iter(data)
        parse_ident(it)
        version = parse_u32(it)
        parse_u32(it)
        return cls(
            version,
            *(_parse_string(it) for _ in range(11)),
        )

    def __str__(self) -> str:
        return (
            f"Track Title:\t{self.track_name_en}\n"
            f"Game Name:\t{self.game_name_en}\n"
            f"System:\t\t{self.system_name_en}\n"
            f"Composer:\t{self.track_author_en}\n"
            f"Release:\t{self.game_release_date}\n"
            f"Version:\t0x{self.version:03x}\n"
            f"VGM by:\t\t{self.vgm_author}\n"
            f"Notes:\t{self.notes}\n"
        )