from datetime import timedelta

import pytest

from opnvgm.wait_samples import WaitSamples


def test_from_duration():
    assert WaitSamples.from_duration(timedelta(seconds=1)) == WaitSamples(44100)


def test_into_duration():
    assert WaitSamples(44100).to_duration() == timedelta(seconds=1)


def test_from_seconds_number():
    assert WaitSamples.from_duration(1.0) == WaitSamples(44100)


def test_saturates_high_and_low():
    assert WaitSamples.from_duration(timedelta(seconds=10)).samples == 0xFFFF
    assert WaitSamples.from_duration(timedelta(seconds=-1)).samples == 0
    assert WaitSamples.from_duration(float("nan")).samples == 0


def test_int_conversion():
    assert int(WaitSamples(735)) == 735


def test_rejects_out_of_range():
    with pytest.raises(ValueError):
        WaitSamples(0x10000)
    with pytest.raises(ValueError):
        WaitSamples(-1)


def test_round_trip_through_duration():
    for n in (0, 1, 735, 882, 44100, 0xFFFF):
        assert abs(WaitSamples.from_duration(WaitSamples(n).to_duration()).samples - n) <= 1


def test_ordering():
    assert WaitSamples(1) < WaitSamples(2)