"""The fixed header at the start of a VGM file."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .parsing import parse_ident, parse_u8, parse_u16, parse_u32

# Field name and width in bytes, in file order; None marks bytes read and discarded.
_LAYOUT: tuple[tuple[str | None, int], ...] = (
    ("eof_offset", 4),
    ("version", 4),
    ("sn76489_clock", 4),
    ("ym2413_clock", 4),
    ("gd3_offset", 4),
    ("total_samples", 4),
    ("loop_offset", 4),
    ("loop_samples", 4),
    ("rate", 4),
    ("sn_fb", 2),
    ("snw", 1),
    ("sf", 1),
    ("ym2612_clock", 4),
    ("ym2151_clock", 4),
    ("vgm_data_offset", 4),
    ("sega_pcm_clock", 4),
    ("spcm_interface", 4),
    ("rf5c68_clock", 4),
    ("ym2203_clock", 4),
    ("ym2608_clock", 4),
    ("ym2610b_clock", 4),
    ("ym3812_clock", 4),
    ("ym3526_clock", 4),
    ("ym8950_clock", 4),
    ("ymf262_clock", 4),
    ("ymf278b_clock", 4),
    ("ymf271_clock", 4),
    ("ymz280b_clock", 4),
    ("rf5c164_clock", 4),
    ("pwm_clock", 4),
    ("ay8910_clock", 4),
    ("ayt", 1),
    ("ayt_and_flags", 4),
    ("vm", 1),
    (None, 1),
    ("lb", 1),
    ("lm", 1),
    ("gb_dmg_clock", 4),
    ("nes_apu_clock", 4),
    ("multi_pcm_clock", 4),
    ("upd7759_clock", 4),
    ("okim6258_clock", 4),
    ("of", 1),
    ("kf", 1),
    ("cf", 1),
    ("okim6295_clock", 4),
    ("k051649_clock", 4),
    ("k054539_clock", 4),
    ("huc6280_clock", 4),
    ("c140_clock", 4),
    ("k053260_clock", 4),
    ("pokey_clock", 4),
    ("qsound_clock", 4),
    ("scsp_clock", 4),
    ("extra_hdr_ofs", 4),
    ("wonderswan_clock", 4),
    ("vsu_clock", 4),
    ("saa1099_clock", 4),
    ("es5503_clock", 4),
    ("es5506_clock", 4),
    ("es_chns", 2),
    ("cd", 1),
    ("x1_010_clock", 4),
    ("c352_clock", 4),
    ("ga20_clock", 4),
)

_READERS = {1: parse_u8, 2: parse_u16, 4: parse_u32}


@dataclass(frozen=True, order=True)
class Header:
    """Decoded VGM header fields."""

    ident: str = "\0\0\0\0"
    eof_offset: int = 0
    version: int = 0
    sn76489_clock: int = 0
    ym2413_clock: int = 0
    gd3_offset: int = 0
    total_samples: int = 0
    loop_offset: int = 0
    loop_samples: int = 0
    rate: int = 0
    sn_fb: int = 0
    snw: int = 0
    sf: int = 0
    ym2612_clock: int = 0
    ym2151_clock: int = 0
    vgm_data_offset: int = 0
    sega_pcm_clock: int = 0
    spcm_interface: int = 0
    rf5c68_clock: int = 0
    ym2203_clock: int = 0
    ym2608_clock: int = 0
    ym2610b_clock: int = 0
    ym3812_clock: int = 0
    ym3526_clock: int = 0
    ym8950_clock: int = 0
    ymf262_clock: int = 0
    ymf278b_clock: int = 0
    ymf271_clock: int = 0
    ymz280b_clock: int = 0
    rf5c164_clock: int = 0
    pwm_clock: int = 0
    ay8910_clock: int = 0
    ayt: int = 0
    ayt_and_flags: int = 0
    vm: int = 0
    lb: int = 0
    lm: int = 0
    gb_dmg_clock: int = 0
    nes_apu_clock: int = 0
    multi_pcm_clock: int = 0
    upd7759_clock: int = 0
    okim6258_clock: int = 0
    of: int = 0
    kf: int = 0
    cf: int = 0
    okim6295_clock: int = 0
    k051649_clock: int = 0
    k054539_clock: int = 0
    huc6280_clock: int = 0
    c140_clock: int = 0
    k053260_clock: int = 0
    pokey_clock: int = 0
    qsound_clock: int = 0
    scsp_clock: int = 0
    extra_hdr_ofs: int = 0
    wonderswan_clock: int = 0
    vsu_clock: int = 0
    saa1099_clock: int = 0
    es5503_clock: int = 0
    es5506_clock: int = 0
    es_chns: int = 0
    cd: int = 0
    x1_010_clock: int = 0
    c352_clock: int = 0
    ga20_clock: int = 0

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> Header:
        """Decode a header from the start of the given bytes."""
        it = iter(data)
        fields: dict[str, object] = {"ident": parse_ident(it)}
        for name, width in _LAYOUT:
            value = _READERS[width](it)
            if name is not None:
                fields[name] = value
        return cls(**fields)