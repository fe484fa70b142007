# opnvgm

`opnvgm` reads VGM music files and turns their YM2612 (OPN2) data into
structured register commands and raw port writes.

It covers:

- parsing the VGM header (`Header`), the GD3 tag (`Gd3`) and the command
  stream (`parse_commands`, `VgmFile`);
- typed OPN2 registers: global ones (LFO, timers, key on/off, DAC),
  per-channel ones (frequency, feedback/algorithm, stereo and LFO
  sensitivity) and per-operator ones (detune/multiple, total level, envelope
  rates, SSG-EG), each with `from_byte` and `to_byte`;
- converting VGM commands into `Opn2Command` values and then into the
  `Opn2Instruction` writes that a driver sends to the chip;
- converting between waits in samples at 44100 Hz and `timedelta` values
  (`WaitSamples`).

It needs nothing beyond the standard library.

## Installation

```
pip install opnvgm
```

To run the tests:

```
pip install "opnvgm[test]"
pytest
```

## Reading a file

```python
from opnvgm.vgm_file import VgmFile

vgm = VgmFile.parse("song.vgm")
print(vgm.gd3)                          # track title, game, composer, ...
print(hex(vgm.header.ym2612_clock))
print(len(vgm), "commands")

for command in vgm:
    print(command)
```

`VgmFile.from_bytes` does the same for data already in memory. Truncated or
malformed data, and unknown command bytes in the stream, raise
`opnvgm.parsing.ParseError`. The stream decoder understands the Game Gear
stereo byte, PSG writes, YM2612 writes on both ports, waits and the
end-of-data marker.

## Converting to OPN2

```python
from opnvgm.conversion import vgm_to_commands, vgm_to_instructions

commands = vgm_to_commands(vgm)          # high-level register commands
instructions = vgm_to_instructions(vgm)  # raw writes and waits

for instruction in instructions:
    print(instruction)
```

`vgm_to_commands` leaves out the commands that have no OPN2 meaning, such
as PSG writes. To convert a single command, use
`opnvgm.conversion.command_to_opn2`. It raises `ConversionError` when the
command has no OPN2 counterpart, and `ValueError` when the register data
cannot be decoded or no register covers the address.

The commands are `SetClockRate`, `Wait`, `GlobalCommand`, `ChannelCommand`
and `OperatorCommand` in `opnvgm.command`; each reports its target through
`port()`, `channel()` and `operator()`.

`opnvgm.instruction.to_instructions` expands one `Opn2Command` into its
instructions (`ClockRateInstruction`, `WriteInstruction`,
`WaitInstruction`). A register write becomes an address write to the port
and a data write to the port plus one. Port 1 is at 4000 and port 2 is at
4002.

## Registers

```python
from opnvgm.channel_registers import FeedbackAndAlgorithm
from opnvgm.registers import Channel, Operator
from opnvgm.operator_registers import TotalLevel

fb_al = FeedbackAndAlgorithm.from_byte(0x3A)
assert fb_al.to_byte() == 0x3A

address = TotalLevel.address_of(Channel.CHANNEL_2, Operator.OPERATOR_3)
```

## Waits

```python
from datetime import timedelta
from opnvgm.wait_samples import WaitSamples

WaitSamples.from_duration(timedelta(seconds=1))  # 44100 samples
WaitSamples(44100).to_duration()                 # one second
```

## What it does not do

`opnvgm` is a library only. It has no command-line program, does not play
or render audio, and does not send the instructions it produces to a chip
or driver; it stops at the list of `Opn2Instruction` values.