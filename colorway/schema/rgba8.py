# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Packed 8-bit sRGB colors.

Byte order at the packed boundary is fixed little-endian: red is the least
significant byte of ``to_u32`` and alpha the most significant, so the
memory layout is ``[r, g, b, a]`` on every platform.
"""

from __future__ import annotations

from dataclasses import dataclass


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in [0, 255], got {value}")


def _unpack(packed: int) -> tuple[int, int, int, int]:
    if not 0 <= packed <= 0xFFFFFFFF:
        raise ValueError(f"Packed color must fit in 32 bits, got {packed:#x}")
    return (
        packed & 0xFF,
        (packed >> 8) & 0xFF,
        (packed >> 16) & 0xFF,
        (packed >> 24) & 0xFF,
    )


@dataclass(frozen=True, slots=True)
class Rgba8:
    """
    An sRGB color with separate alpha, 8 bits per channel.

    Attributes:
        r: Red [0, 255]
        g: Green [0, 255]
        b: Blue [0, 255]
        a: Alpha [0, 255]
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for name in ("r", "g", "b", "a"):
            _check_byte(name, getattr(self, name))

    def to_u8_array(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_u32(self) -> int:
        """Pack into a 32-bit integer, little-endian."""
        return int.from_bytes(bytes(self.to_u8_array()), "little")

    def to_bytes(self) -> bytes:
        return bytes(self.to_u8_array())

    @classmethod
    def from_u32(cls, packed: int) -> Rgba8:
        return cls(*_unpack(packed))

    @classmethod
    def from_bytes(cls, data: bytes) -> Rgba8:
        if len(data) != 4:
            raise ValueError(f"Expected 4 bytes, got {len(data)}")
        return cls(data[0], data[1], data[2], data[3])


@dataclass(frozen=True, slots=True)
class PremulRgba8:
    """
    A premultiplied sRGB color, 8 bits per channel.

    Color channels are already scaled by alpha.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for name in ("r", "g", "b", "a"):
            _check_byte(name, getattr(self, name))

    def to_u8_array(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def to_u32(self) -> int:
        """Pack into a 32-bit integer, little-endian."""
        return int.from_bytes(bytes(self.to_u8_array()), "little")

    def to_bytes(self) -> bytes:
        return bytes(self.to_u8_array())

    @classmethod
    def from_u32(cls, packed: int) -> PremulRgba8:
        return cls(*_unpack(packed))
