"""Little-endian readers over an iterator of bytes."""

from __future__ import annotations

from collections.abc import Iterator


class ParseError(ValueError):
    """Raised when the input runs out before a value is complete."""


def _next(it: Iterator[int], what: str) -> int:
    try:
        return next(it)
    except StopIteration:
        raise ParseError(f"Failed to read {what}") from None


def take_2(it: Iterator[int]) -> tuple[int, int]:
    """Take the next two bytes."""
    return tuple(_next(it, f"byte {i}") for i in range(2))  # type: ignore[return-value]


def take_4(it: Iterator[int]) -> tuple[int, int, int, int]:
    """Take the next four bytes."""
    return tuple(_next(it, f"byte {i}") for i in range(4))  # type: ignore[return-value]


def parse_ident(it: Iterator[int]) -> str:
    """Read four bytes as characters, in reverse order of appearance."""
    return "".join(chr(b) for b in reversed(take_4(it)))


def parse_u8(it: Iterator[int]) -> int:
    """Read one byte."""
    return _next(it, "byte 0")


def parse_u16(it: Iterator[int]) -> int:
    """Read a little-endian 16-bit unsigned integer."""
    return int.from_bytes(bytes(take_2(it)), "little")


def parse_u32(it: Iterator[int]) -> int:
    """Read a little-endian 32-bit unsigned integer."""
    return int.from_bytes(bytes(take_4(it)), "little")