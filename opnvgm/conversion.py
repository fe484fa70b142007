"""Conversion of VGM commands into OPN2 commands and raw instructions."""

from __future__ import annotations

from collections.abc import Iterable

from .channel_registers import (
    Channel3SupplementaryFrequencyMsb,
    FeedbackAndAlgorithm,
    FrequencyLsb,
    FrequencyMsb,
    StereoAndLfoSensitivity,
)
from .command import ChannelCommand, GlobalCommand, Opn2Command, OperatorCommand, Wait
from .global_registers import (
    DacAmplitude,
    DacEnable,
    KeyOnOff,
    Lfo,
    TimerALsb,
    TimerAMsb,
    TimerB,
    TimersAndChannel3Mode,
)
from .instruction import Opn2Instruction, to_instructions
from .operator_registers import (
    AmplitudeAndFirstDecayRate,
    DetuneAndMultiple,
    RateScalingAndAttackRate,
    SecondAmplitudeAndReleaseRate,
    SecondDecayRate,
    SoftwareSoundGeneratorMode,
    TotalLevel,
)
from .registers import (
    Channel,
    ChannelRegister,
    Operator,
    OperatorRegister,
    Port,
    PortChannel,
)
from .vgm_commands import VgmCommand, VgmWait, WriteYm2612


class ConversionError(ValueError):
    """Raised when a VGM command has no OPN2 counterpart."""


_GLOBAL_REGISTERS = {
    cls.BASE_ADDRESS: cls
    for cls in (
        Lfo,
        TimerAMsb,
        TimerALsb,
        TimerB,
        TimersAndChannel3Mode,
        KeyOnOff,
        DacEnable,
        DacAmplitude,
    )
}

# Each register family owns addresses from its base up to the given end (None: no end).
# FrequencyMsb's range runs up to the supplementary MSB base, so the supplementary
# LSB addresses decode as FrequencyMsb.
_RANGED_REGISTERS: tuple[tuple[type, int | None], ...] = (
    (DetuneAndMultiple, TotalLevel.BASE_ADDRESS),
    (TotalLevel, RateScalingAndAttackRate.BASE_ADDRESS),
    (RateScalingAndAttackRate, AmplitudeAndFirstDecayRate.BASE_ADDRESS),
    (AmplitudeAndFirstDecayRate, SecondDecayRate.BASE_ADDRESS),
    (SecondDecayRate, SecondAmplitudeAndReleaseRate.BASE_ADDRESS),
    (SecondAmplitudeAndReleaseRate, SoftwareSoundGeneratorMode.BASE_ADDRESS),
    (SoftwareSoundGeneratorMode, FrequencyLsb.BASE_ADDRESS),
    (FrequencyLsb, FrequencyMsb.BASE_ADDRESS),
    (FrequencyMsb, Channel3SupplementaryFrequencyMsb.BASE_ADDRESS),
    (Channel3SupplementaryFrequencyMsb, FeedbackAndAlgorithm.BASE_ADDRESS),
    (FeedbackAndAlgorithm, StereoAndLfoSensitivity.BASE_ADDRESS),
    (StereoAndLfoSensitivity, None),
)

_PORT_CHANNELS = {
    int(Port.PORT_1): (Channel.CHANNEL_1, Channel.CHANNEL_2, Channel.CHANNEL_3),
    int(Port.PORT_2): (Channel.CHANNEL_4, Channel.CHANNEL_5, Channel.CHANNEL_6),
}


def _register_class(address: int) -> type | None:
    for cls, end in _RANGED_REGISTERS:
        if cls.BASE_ADDRESS <= address and (end is None or address < end):
            return cls
    return None


def _operator(cls: type[OperatorRegister], address: int) -> Operator:
    offset = (address - cls.BASE_ADDRESS) - (address % 4)
    offsets = (
        cls.OPERATOR_1_OFFSET,
        cls.OPERATOR_2_OFFSET,
        cls.OPERATOR_3_OFFSET,
        cls.OPERATOR_4_OFFSET,
    )
    for operator, candidate in zip(Operator, offsets):
        if offset == candidate:
            return operator
    raise ConversionError(
        f"Unrecognized operator offset {address} for base address {cls.BASE_ADDRESS}"
    )


def _port_channel(cls: type[ChannelRegister | OperatorRegister], address: int) -> PortChannel:
    offset = (address - cls.BASE_ADDRESS) % 4
    offsets = (cls.CHANNEL_1_OFFSET, cls.CHANNEL_2_OFFSET, cls.CHANNEL_3_OFFSET)
    for port_channel, candidate in zip(PortChannel, offsets):
        if offset == candidate:
            return port_channel
    raise ConversionError(
        f"Unrecognized channel offset {address} for base address {cls.BASE_ADDRESS}"
    )


def _channel(port: int, port_channel: PortChannel) -> Channel:
    try:
        return _PORT_CHANNELS[port][int(port_channel)]
    except KeyError:
        raise ConversionError(f"Invalid port {port}") from None


def _convert_write(port: int, address: int, data: int) -> Opn2Command:
    global_register = _GLOBAL_REGISTERS.get(address)
    if global_register is not None:
        return GlobalCommand(global_register.from_byte(data))
    cls = _register_class(address)
    if cls is None:
        raise ValueError(f"Unhandled address 0x{address:02x}")
    if issubclass(cls, OperatorRegister):
        operator = _operator(cls, address)
        channel = _channel(port, _port_channel(cls, address))
        return OperatorCommand(Port(port), channel, operator, cls.from_byte(data))
    channel = _channel(port, _port_channel(cls, address))
    return ChannelCommand(Port(port), channel, cls.from_byte(data))


def command_to_opn2(command: VgmCommand) -> Opn2Command:
    """Convert one VGM command to an OPN2 command.

    Raises ConversionError for commands with no OPN2 counterpart; register data
    that cannot be decoded, or an address no register covers, raises ValueError.
    """
    match command:
        case WriteYm2612(port=port, address=address, data=data):
            return _convert_write(port, address, data)
        case VgmWait(samples=samples):
            return Wait(samples)
    raise ConversionError(f"Failed to convert {command!r}")


def vgm_to_commands(vgm: Iterable[VgmCommand]) -> list[Opn2Command]:
    """Convert every VGM command that has an OPN2 counterpart, skipping the rest."""
    commands: list[Opn2Command] = []
    for command in vgm:
        try:
            commands.append(command_to_opn2(command))
        except ConversionError:
            continue
    return commands


def vgm_to_instructions(vgm: Iterable[VgmCommand]) -> list[Opn2Instruction]:
    """Convert VGM commands all the way down to raw driver instructions."""
    return [
        instruction
        for command in vgm_to_commands(vgm)
        for instruction in to_instructions(command)
    ]