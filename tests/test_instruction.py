import pytest

from opnvgm.channel_registers import FrequencyMsb, StereoAndLfoSensitivity
from opnvgm.command import (
    ChannelCommand,
    GlobalCommand,
    OperatorCommand,
    SetClockRate,
    Wait,
)
from opnvgm.global_registers import KeyOnOff, Lfo, LfoFrequency, Operators
from opnvgm.instruction import (
    ClockRateInstruction,
    WaitInstruction,
    WriteInstruction,
    to_instructions,
)
from opnvgm.operator_registers import TotalLevel
from opnvgm.registers import Channel, Operator, Port
from opnvgm.wait_samples import WaitSamples


def test_clock_rate():
    assert to_instructions(SetClockRate(7670453)) == [ClockRateInstruction(7670453)]


def test_wait_of_one_second():
    assert to_instructions(Wait(1.0)) == [WaitInstruction(WaitSamples(44100))]


def test_wait_samples_round_trip():
    for samples in (1, 2, 735, 882, 44100):
        [instruction] = to_instructions(Wait(WaitSamples(samples)))
        assert instruction.samples.samples == samples


def test_global_register_written_through_port_1():
    lfo = Lfo(LfoFrequency.HZ_72_2)
    assert to_instructions(GlobalCommand(lfo)) == [
        WriteInstruction(4000, 0x22),
        WriteInstruction(4001, lfo.to_byte()),
    ]


def test_key_on_off_write():
    key = KeyOnOff(Channel.CHANNEL_4, Operators.OPERATOR_ALL)
    address, data = to_instructions(GlobalCommand(key))
    assert address == WriteInstruction(4000, KeyOnOff.BASE_ADDRESS)
    assert data == WriteInstruction(4001, key.to_byte())


def test_channel_register_uses_command_port():
    register = FrequencyMsb(0x22)
    command = ChannelCommand(Port.PORT_2, Channel.CHANNEL_6, register)
    assert to_instructions(command) == [
        WriteInstruction(4002, FrequencyMsb.address_of(Channel.CHANNEL_6)),
        WriteInstruction(4003, 0x22),
    ]


def test_operator_register_write():
    register = TotalLevel(0x1F)
    command = OperatorCommand(Port.PORT_1, Channel.CHANNEL_2, Operator.OPERATOR_3, register)
    assert to_instructions(command) == [
        WriteInstruction(4000, TotalLevel.address_of(Channel.CHANNEL_2, Operator.OPERATOR_3)),
        WriteInstruction(4001, 0x1F),
    ]


def test_stereo_register_data_matches_encoding():
    register = StereoAndLfoSensitivity.from_byte(0xC0)
    [_, data] = to_instructions(ChannelCommand(Port.PORT_1, Channel.CHANNEL_1, register))
    assert data.data == 0xC0


def test_write_repr_shows_data_in_three_bases():
    assert repr(WriteInstruction(4000, 0x28)) == (
        "WriteInstruction(port=4000, data='40 (0x28) (0b00101000)')"
    )


def test_write_rejects_out_of_range_data():
    with pytest.raises(ValueError):
        WriteInstruction(4000, 256)


def test_unknown_command_rejected():
    with pytest.raises(TypeError):
        to_instructions("not a command")