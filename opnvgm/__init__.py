"""Parse VGM music files and convert YM2612 data into OPN2 commands and register writes."""

__version__ = "0.1.0"

__all__ = [
    "channel_registers",
    "command",
    "conversion",
    "gd3",
    "global_registers",
    "header",
    "instruction",
    "operator_registers",
    "parsing",
    "registers",
    "vgm_commands",
    "vgm_file",
    "wait_samples",
]