import pytest

from opnvgm.parsing import ParseError
from opnvgm.vgm_commands import VgmWait, WritePsg, WriteYm2612
from opnvgm.vgm_file import VgmFile

STRINGS = (
    "Green Hill",
    "",
    "Some Game",
    "",
    "Mega Drive",
    "",
    "Composer",
    "",
    "1991",
    "Ripper",
    "notes here",
)

COMMANDS = bytes([0x52, 0x2A, 0x80, 0x50, 0x9F, 0x62, 0x66])


def _gd3_block(strings):
    body = b"".join(s.encode("utf-16-le") + b"\0\0" for s in strings)
    return (
        b"Gd3 "
        + (0x100).to_bytes(4, "little")
        + len(body).to_bytes(4, "little")
        + body
    )


def _vgm_bytes(commands=COMMANDS, strings=STRINGS):
    header = bytearray(256)
    header[0:4] = b"Vgm "
    header[0x34:0x38] = (0x100 - 0x34).to_bytes(4, "little")
    gd3_start = 0x100 + len(commands)
    header[0x14:0x18] = (gd3_start - 0x14).to_bytes(4, "little")
    return bytes(header) + commands + _gd3_block(strings)


def test_commands_are_decoded():
    vgm = VgmFile.from_bytes(_vgm_bytes())
    assert vgm.commands == [WriteYm2612(4000, 0x2A, 0x80), WritePsg(0x9F), VgmWait(735)]


def test_iteration_and_length_follow_commands():
    vgm = VgmFile.from_bytes(_vgm_bytes())
    assert list(vgm) == vgm.commands
    assert len(vgm) == 3


def test_header_offsets():
    vgm = VgmFile.from_bytes(_vgm_bytes())
    assert vgm.header.vgm_data_offset == 0x100 - 0x34
    assert vgm.header.gd3_offset == 0x100 + len(COMMANDS) - 0x14


def test_gd3_is_decoded():
    vgm = VgmFile.from_bytes(_vgm_bytes())
    assert vgm.gd3.version == 0x100
    assert vgm.gd3.track_name_en == STRINGS[0]
    assert vgm.gd3.system_name_en == STRINGS[4]
    assert vgm.gd3.notes == STRINGS[10]


def test_parse_reads_from_path(tmp_path):
    path = tmp_path / "song.vgm"
    path.write_bytes(_vgm_bytes())
    assert VgmFile.parse(path) == VgmFile.from_bytes(_vgm_bytes())
    assert VgmFile.parse(str(path)).commands == VgmFile.from_bytes(_vgm_bytes()).commands


def test_parse_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        VgmFile.parse(tmp_path / "absent.vgm")


def test_short_data_is_rejected():
    with pytest.raises(ParseError):
        VgmFile.from_bytes(b"Vgm " + bytes(20))


def test_offset_beyond_data_is_rejected():
    data = bytearray(_vgm_bytes())
    data[0x14:0x18] = (0xFFFF).to_bytes(4, "little")
    with pytest.raises(ParseError):
        VgmFile.from_bytes(bytes(data))


def test_default_file_is_empty():
    vgm = VgmFile()
    assert len(vgm) == 0
    assert list(vgm) == []