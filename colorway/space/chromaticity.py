# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
White point chromaticities and Bradford chromatic adaptation.

All color spaces are defined relative to linear sRGB, whose reference white
is D65. Spaces with a different white (D50 for Lab and ProPhoto, the ACES
white for ACEScg) are adapted with the linear Bradford transform, following
CSS Color 4.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

import numpy as np
from numpy.typing import NDArray


# Bradford cone response matrix
_BRADFORD = np.array([
    [0.8951, 0.2664, -0.1614],
    [-0.7502, 1.7135, 0.0367],
    [0.0389, -0.0685, 1.0296],
], dtype=np.float64)

_BRADFORD_INV = np.linalg.inv(_BRADFORD)


@dataclass(frozen=True, slots=True)
class Chromaticity:
    """
    CIE 1931 xy chromaticity of a reference white.

    Attributes:
        x: x chromaticity coordinate
        y: y chromaticity coordinate (must be nonzero)
    """
    x: float
    y: float

    def __post_init__(self) -> None:
        """Validate that the chromaticity can be lifted to XYZ."""
        if self.y == 0.0:
            raise ValueError("Chromaticity y must be nonzero")

    def to_xyz(self) -> NDArray[np.float64]:
        """XYZ tristimulus of this white, normalized to Y = 1."""
        return np.array(
            [self.x / self.y, 1.0, (1.0 - self.x - self.y) / self.y],
            dtype=np.float64,
        )


D65 = Chromaticity(0.3127, 0.3290)
D50 = Chromaticity(0.3457, 0.3585)
ACES = Chromaticity(0.32168, 0.33767)


@lru_cache(maxsize=32)
def bradford_matrix(src: Chromaticity, dst: Chromaticity) -> NDArray[np.float64]:
    """
    XYZ → XYZ matrix adapting colors seen under ``src`` white to ``dst`` white.

    The returned array is shared between callers and must not be mutated.
    """
    if src == dst:
        matrix = np.eye(3, dtype=np.float64)
    else:
        src_lms = _BRADFORD @ src.to_xyz()
        dst_lms = _BRADFORD @ dst.to_xyz()
        matrix = _BRADFORD_INV @ np.diag(dst_lms / src_lms) @ _BRADFORD
    matrix.flags.writeable = False
    return matrix
