import struct

import pytest

from opnvgm.header import Header
from opnvgm.parsing import ParseError


def _header_bytes():
    buf = bytearray(256)
    buf[0:4] = b"Vgm "
    struct.pack_into("<I", buf, 0x04, 0x1234)
    struct.pack_into("<I", buf, 0x08, 0x150)
    struct.pack_into("<I", buf, 0x14, 0x2000)
    struct.pack_into("<I", buf, 0x18, 882000)
    struct.pack_into("<I", buf, 0x2C, 7670453)
    struct.pack_into("<I", buf, 0x34, 0x0C)
    return bytes(buf)


def test_parses_leading_fields():
    header = Header.from_bytes(_header_bytes())
    assert header.ident == " mgV"
    assert header.eof_offset == 0x1234
    assert header.version == 0x150
    assert header.gd3_offset == 0x2000
    assert header.total_samples == 882000
    assert header.ym2612_clock == 7670453
    assert header.vgm_data_offset == 0x0C


def test_zeroed_tail():
    header = Header.from_bytes(_header_bytes())
    assert header.ga20_clock == 0
    assert header.sn76489_clock == 0


def test_default_is_zero():
    header = Header()
    assert header.version == 0
    assert header.gd3_offset == 0
    assert header.ident == "\0\0\0\0"


def test_short_data_raises():
    with pytest.raises(ParseError):
        Header.from_bytes(_header_bytes()[:0x40])


def test_equal_inputs_give_equal_headers():
    assert Header.from_bytes(_header_bytes()) == Header.from_bytes(bytearray(_header_bytes()))