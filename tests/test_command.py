from datetime import timedelta

import pytest

from opnvgm.channel_registers import FeedbackAndAlgorithm, FrequencyLsb
from opnvgm.command import (
    ChannelCommand,
    GlobalCommand,
    OperatorCommand,
    SetClockRate,
    Wait,
)
from opnvgm.global_registers import KeyOnOff, Lfo, TimerB
from opnvgm.operator_registers import TotalLevel
from opnvgm.registers import Channel, Operator, Port
from opnvgm.wait_samples import WaitSamples


@pytest.mark.parametrize(
    "command",
    [SetClockRate(7670453), Wait(0.5), GlobalCommand(Lfo()), GlobalCommand(TimerB(3))],
)
def test_chip_wide_commands_have_no_target(command):
    assert (command.port(), command.channel(), command.operator()) == (None, None, None)


def test_channel_command_targets():
    command = ChannelCommand(Port.PORT_2, Channel.CHANNEL_5, FrequencyLsb(0x12))
    assert command.port() is Port.PORT_2
    assert command.channel() is Channel.CHANNEL_5
    assert command.operator() is None


def test_operator_command_targets():
    command = OperatorCommand(
        Port.PORT_1, Channel.CHANNEL_2, Operator.OPERATOR_4, TotalLevel(10)
    )
    assert command.port() is Port.PORT_1
    assert command.channel() is Channel.CHANNEL_2
    assert command.operator() is Operator.OPERATOR_4


def test_plain_values_are_coerced():
    command = OperatorCommand(4002, 4, 2, TotalLevel())
    assert command.port() is Port.PORT_2
    assert command.channel() is Channel.CHANNEL_4
    assert command.operator() is Operator.OPERATOR_3


def test_invalid_port_rejected():
    with pytest.raises(ValueError):
        ChannelCommand(4001, Channel.CHANNEL_1, FrequencyLsb(0))


def test_wrong_register_kind_rejected():
    with pytest.raises(TypeError):
        GlobalCommand(TotalLevel())
    with pytest.raises(TypeError):
        ChannelCommand(Port.PORT_1, Channel.CHANNEL_1, KeyOnOff())
    with pytest.raises(TypeError):
        OperatorCommand(Port.PORT_1, Channel.CHANNEL_1, Operator.OPERATOR_1, FeedbackAndAlgorithm())


def test_wait_accepts_several_duration_forms():
    assert Wait(timedelta(seconds=1)).seconds == 1.0
    assert Wait(WaitSamples(44100)).seconds == 1.0
    assert Wait(2).duration == timedelta(seconds=2)


def test_negative_wait_rejected():
    with pytest.raises(ValueError):
        Wait(-1.0)


def test_commands_compare_by_value():
    a = ChannelCommand(Port.PORT_1, Channel.CHANNEL_1, FrequencyLsb(5))
    b = ChannelCommand(4000, 0, FrequencyLsb(5))
    assert a == b
    assert hash(a) == hash(b)
    assert SetClockRate(1) < SetClockRate(2)