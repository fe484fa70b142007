import struct

import pytest

from opnvgm.gd3 import Gd3
from opnvgm.parsing import ParseError

STRINGS = [
    "Green Hill Zone",
    "グリーンヒル",
    "Sonic the Hedgehog",
    "ソニック",
    "Sega Mega Drive",
    "メガドライブ",
    "Composer Name",
    "作曲者",
    "1991",
    "someone",
    "first loop only",
]


def _encode(strings, version=0x100):
    body = b"".join(s.encode("utf-16-le") + b"\0\0" for s in strings)
    return b"Gd3 " + struct.pack("<II", version, len(body)) + body


def test_parses_all_strings():
    gd3 = Gd3.from_bytes(_encode(STRINGS))
    assert gd3.version == 0x100
    assert [
        gd3.track_name_en,
        gd3.track_name_jp,
        gd3.game_name_en,
        gd3.game_name_jp,
        gd3.system_name_en,
        gd3.system_name_jp,
        gd3.track_author_en,
        gd3.track_author_jp,
        gd3.game_release_date,
        gd3.vgm_author,
        gd3.notes,
    ] == STRINGS


def test_empty_strings():
    gd3 = Gd3.from_bytes(_encode([""] * 11))
    assert gd3 == Gd3(version=0x100)


def test_unpaired_surrogate_is_dropped():
    units = struct.pack("<3H", 0x41, 0xD800, 0x42) + b"\0\0"
    body = units + b"\0\0" * 10
    data = b"Gd3 " + struct.pack("<II", 0x100, len(body)) + body
    assert Gd3.from_bytes(data).track_name_en == "AB"


def test_truncated_raises():
    data = _encode(STRINGS)
    with pytest.raises(ParseError):
        Gd3.from_bytes(data[:-4])


def test_display():
    text = str(Gd3.from_bytes(_encode(STRINGS)))
    assert text.startswith(f"Track Title:\t{STRINGS[0]}\n")
    assert f"System:\t\t{STRINGS[4]}\n" in text
    assert "Version:\t0x100\n" in text
    assert text.endswith(f"Notes:\t{STRINGS[10]}\n")
    assert len(text.splitlines()) == 8