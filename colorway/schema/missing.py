# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
The set of missing components of a color.

A missing component is the CSS ``none`` keyword: no information. Indices
0, 1 and 2 are the color channels and 3 is alpha. Wherever a bit is set
the stored component is kept at 0.0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_ALL = 0b1111


@dataclass(frozen=True, slots=True)
class Missing:
    """
    A set over the four component indices.

    Attributes:
        bits: Bit i set means component i is missing
    """
    bits: int = 0

    def __post_init__(self) -> None:
        """Validate the bit pattern."""
        if not 0 <= self.bits <= _ALL:
            raise ValueError(f"Missing bits must be in [0, {_ALL}], got {self.bits}")

    @classmethod
    def single(cls, index: int) -> Missing:
        """The set containing only ``index``."""
        _check_index(index)
        return cls(1 << index)

    @classmethod
    def of(cls, *indices: int) -> Missing:
        result = cls()
        for index in indices:
            result = result.insert(index)
        return result

    def contains(self, index: int) -> bool:
        _check_index(index)
        return bool(self.bits & (1 << index))

    def insert(self, index: int) -> Missing:
        """Return a new set with ``index`` added."""
        _check_index(index)
        return Missing(self.bits | (1 << index))

    def is_empty(self) -> bool:
        return self.bits == 0

    def __and__(self, other: Missing) -> Missing:
        return Missing(self.bits & other.bits)

    def __or__(self, other: Missing) -> Missing:
        return Missing(self.bits | other.bits)

    def __invert__(self) -> Missing:
        return Missing(~self.bits & _ALL)

    def __contains__(self, index: int) -> bool:
        return self.contains(index)

    def __iter__(self) -> Iterator[int]:
        return (i for i in range(4) if self.bits & (1 << i))

    def __len__(self) -> int:
        return bin(self.bits).count("1")

    def __bool__(self) -> bool:
        return self.bits != 0

    def __repr__(self) -> str:
        return f"Missing({sorted(self)})"


def _check_index(index: int) -> None:
    if not 0 <= index <= 3:
        raise ValueError(f"Component index must be in [0, 3], got {index}")
