"""Addressing primitives of the OPN2 chip: channels, ports, operators, register families."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import ClassVar


class Channel(IntEnum):
    """One of the six FM channels; the value is the channel's key-on code."""

    CHANNEL_1 = 0
    CHANNEL_2 = 1
    CHANNEL_3 = 2
    CHANNEL_4 = 4
    CHANNEL_5 = 5
    CHANNEL_6 = 6


class PortChannel(IntEnum):
    """Position of a channel within its port (each port drives three channels)."""

    PORT_CHANNEL_1 = 0
    PORT_CHANNEL_2 = 1
    PORT_CHANNEL_3 = 2

    @classmethod
    def from_channel(cls, channel: Channel) -> PortChannel:
        """Return the slot the given channel occupies within its port."""
        return _PORT_CHANNELS[Channel(channel)]


class Port(IntEnum):
    """The two register ports of the chip, valued by their bus address."""

    PORT_1 = 4000
    PORT_2 = 4002

    @classmethod
    def of_channel(cls, channel: Channel) -> Port:
        """Return the port through which the given channel is addressed."""
        channel = Channel(channel)
        if channel in (Channel.CHANNEL_1, Channel.CHANNEL_2, Channel.CHANNEL_3):
            return cls.PORT_1
        return cls.PORT_2


class Operator(IntEnum):
    """One of the four operators of an FM channel."""

    OPERATOR_1 = 0
    OPERATOR_2 = 1
    OPERATOR_3 = 2
    OPERATOR_4 = 3


_PORT_CHANNELS = {
    Channel.CHANNEL_1: PortChannel.PORT_CHANNEL_1,
    Channel.CHANNEL_2: PortChannel.PORT_CHANNEL_2,
    Channel.CHANNEL_3: PortChannel.PORT_CHANNEL_3,
    Channel.CHANNEL_4: PortChannel.PORT_CHANNEL_1,
    Channel.CHANNEL_5: PortChannel.PORT_CHANNEL_2,
    Channel.CHANNEL_6: PortChannel.PORT_CHANNEL_3,
}


class Register(ABC):
    """A single register of the chip, encodable to and decodable from one byte."""

    BASE_ADDRESS: ClassVar[int]

    @classmethod
    @abstractmethod
    def from_byte(cls, value: int) -> Register:
        """Decode the register from its data byte."""

    @abstractmethod
    def to_byte(self) -> int:
        """Encode the register as its data byte."""


class GlobalRegister(Register):
    """A register that applies to the whole chip and lives on port 1."""


class ChannelRegister(Register):
    """A set of registers with one address per channel within a port."""

    CHANNEL_1_OFFSET: ClassVar[int] = 0x0
    CHANNEL_2_OFFSET: ClassVar[int] = 0x1
    CHANNEL_3_OFFSET: ClassVar[int] = 0x2

    @classmethod
    def _channel_offset(cls, channel: Channel) -> int:
        slot = PortChannel.from_channel(channel)
        return {
            PortChannel.PORT_CHANNEL_1: cls.CHANNEL_1_OFFSET,
            PortChannel.PORT_CHANNEL_2: cls.CHANNEL_2_OFFSET,
            PortChannel.PORT_CHANNEL_3: cls.CHANNEL_3_OFFSET,
        }[slot]

    @classmethod
    def address_of(cls, channel: Channel) -> int:
        """Return the register address for the given channel."""
        return cls.BASE_ADDRESS + cls._channel_offset(channel)

    @classmethod
    def port_of(cls, channel: Channel) -> Port:
        """Return the port through which the channel's register is written."""
        return Port.of_channel(channel)


class OperatorRegister(Register):
    """A set of registers with one address per channel and operator within a port."""

    OPERATOR_1_OFFSET: ClassVar[int] = 0x0
    OPERATOR_2_OFFSET: ClassVar[int] = 0x4
    OPERATOR_3_OFFSET: ClassVar[int] = 0x8
    OPERATOR_4_OFFSET: ClassVar[int] = 0xC

    CHANNEL_1_OFFSET: ClassVar[int] = 0x0
    CHANNEL_2_OFFSET: ClassVar[int] = 0x1
    CHANNEL_3_OFFSET: ClassVar[int] = 0x2

    @classmethod
    def address_of(cls, channel: Channel, operator: Operator) -> int:
        """Return the register address for the given channel and operator."""
        slot = PortChannel.from_channel(channel)
        channel_offset = {
            PortChannel.PORT_CHANNEL_1: cls.CHANNEL_1_OFFSET,
            PortChannel.PORT_CHANNEL_2: cls.CHANNEL_2_OFFSET,
            PortChannel.PORT_CHANNEL_3: cls.CHANNEL_3_OFFSET,
        }[slot]
        operator_offset = {
            Operator.OPERATOR_1: cls.OPERATOR_1_OFFSET,
            Operator.OPERATOR_2: cls.OPERATOR_2_OFFSET,
            Operator.OPERATOR_3: cls.OPERATOR_3_OFFSET,
            Operator.OPERATOR_4: cls.OPERATOR_4_OFFSET,
        }[Operator(operator)]
        return cls.BASE_ADDRESS + operator_offset + channel_offset

    @classmethod
    def port_of(cls, channel: Channel) -> Port:
        """Return the port through which the channel's register is written."""
        return Port.of_channel(channel)