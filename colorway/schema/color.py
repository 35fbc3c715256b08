# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Static color values.

Each value carries the descriptor class of its color space alongside its
components. Operations that combine two values require both to be in the
same space; converting is always explicit.

- OpaqueColor: three components, no alpha
- AlphaColor: three components plus separate alpha
- PremulColor: non-hue components premultiplied by alpha

Hue channels are never premultiplied.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from colorway.schema.rgba8 import PremulRgba8, Rgba8
from colorway.space.base import ColorSpace, ColorSpaceLayout, Vec3
from colorway.space.colorspace import Srgb


# =============================================================================
# Hue fixup
# =============================================================================


class HueDirection(Enum):
    """
    Which way round the hue circle to interpolate.

    See CSS Color 4 §12.4.
    """
    SHORTER = "shorter"
    LONGER = "longer"
    INCREASING = "increasing"
    DECREASING = "decreasing"


def fixup_hue(h1: float, h2: float, direction: HueDirection) -> float:
    """
    Shift ``h2`` by a multiple of 360° so ``h1 → h2`` runs in ``direction``.

    Resulting ``h2 - h1``:
    - SHORTER: in [-180, 180]; an exact half turn is left as it is, so a
      difference of -180 is not moved to +180
    - LONGER: magnitude in [180, 360)
    - INCREASING: in [0, 360)
    - DECREASING: in (-360, 0]
    """
    dh = (h2 - h1) / 360.0
    if direction is HueDirection.SHORTER:
        if dh - math.floor(dh) == 0.5:
            rounded = math.trunc(dh)
        else:
            rounded = round(dh)
        return h2 - 360.0 * rounded
    if direction is HueDirection.LONGER:
        t = 2.0 * math.ceil(abs(dh)) - math.floor(abs(dh) + 1.5)
        # 0.0 - dh keeps a positive zero for equal hues
        return h2 + 360.0 * math.copysign(t, 0.0 - dh)
    if direction is HueDirection.INCREASING:
        return h2 - 360.0 * math.floor(dh)
    return h2 - 360.0 * math.ceil(dh)


def fixup_hues_for_interpolate(
    a: Sequence[float],
    b: Sequence[float],
    layout: ColorSpaceLayout,
    direction: HueDirection,
) -> tuple[float, ...]:
    """Return ``b`` with its hue channel (if any) fixed up relative to ``a``."""
    ix = layout.hue_channel
    if ix is None:
        return tuple(b)
    fixed = list(b)
    fixed[ix] = fixup_hue(a[ix], b[ix], direction)
    return tuple(fixed)


# =============================================================================
# Shared behaviour
# =============================================================================


def _coerce(components: Sequence[float], size: int) -> tuple[float, ...]:
    if len(components) != size:
        raise ValueError(f"Expected {size} components, got {len(components)}")
    return tuple(float(c) for c in components)


def _to_byte(value: float) -> int:
    # NaN quantizes to 0
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 1.0) * 255.0 + 0.5)


class _ColorArithmetic:
    """Componentwise arithmetic for static colors of one space."""
    __slots__ = ()

    def _same_space(self, other) -> bool:
        return type(other) is type(self) and other.cs is self.cs

    def __add__(self, other):
        if not self._same_space(other):
            return NotImplemented
        return type(self)(self.cs, [x + y for x, y in zip(self.components, other.components)])

    def __sub__(self, other):
        if not self._same_space(other):
            return NotImplemented
        return type(self)(self.cs, [x - y for x, y in zip(self.components, other.components)])

    def __mul__(self, rhs):
        if not isinstance(rhs, (int, float)):
            return NotImplemented
        return type(self)(self.cs, [x * rhs for x in self.components])

    __rmul__ = __mul__

    def __truediv__(self, rhs):
        if not isinstance(rhs, (int, float)):
            return NotImplemented
        return type(self)(self.cs, [x / rhs for x in self.components])

    def difference(self, other) -> float:
        """Euclidean distance between the component vectors."""
        if not self._same_space(other):
            raise TypeError(
                f"Cannot compare {self.cs.__name__} with {getattr(other, 'cs', other)!r}"
            )
        return math.sqrt(sum((x - y) ** 2 for x, y in zip(self.components, other.components)))


# =============================================================================
# Opaque
# =============================================================================


@dataclass(frozen=True, slots=True)
class OpaqueColor(_ColorArithmetic):
    """
    A color with three components and no alpha.

    Attributes:
        cs: Color space descriptor class
        components: The three channel values
    """
    cs: type[ColorSpace]
    components: Vec3

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", _coerce(self.components, 3))

    def convert(self, target: type[ColorSpace]) -> OpaqueColor:
        return OpaqueColor(target, self.cs.convert(target, self.components))

    def with_alpha(self, alpha: float) -> AlphaColor:
        return AlphaColor(self.cs, (*self.components, alpha))

    def lerp_rect(self, other: OpaqueColor, t: float) -> OpaqueColor:
        """Interpolate componentwise, treating hue as an ordinary number."""
        return self + t * (other - self)

    def fixup_hues(self, other: OpaqueColor, direction: HueDirection) -> OpaqueColor:
        """Return ``other`` with its hue shifted for interpolation from ``self``."""
        fixed = fixup_hues_for_interpolate(
            self.components, other.components, self.cs.LAYOUT, direction
        )
        return OpaqueColor(other.cs, fixed)

    def lerp(self, other: OpaqueColor, t: float, direction: HueDirection = HueDirection.SHORTER) -> OpaqueColor:
        return self.lerp_rect(self.fixup_hues(other, direction), t)

    def scale_chroma(self, scale: float) -> OpaqueColor:
        return OpaqueColor(self.cs, self.cs.scale_chroma(self.components, scale))

    def clip(self) -> OpaqueColor:
        return OpaqueColor(self.cs, self.cs.clip(self.components))

    def relative_luminance(self) -> float:
        """Relative luminance per WCAG 2.1."""
        r, g, b = self.cs.to_linear_srgb(self.components)
        return 0.2126 * r + 0.7152 * g + 0.0722 * b


# =============================================================================
# Separate alpha
# =============================================================================


@dataclass(frozen=True, slots=True)
class AlphaColor(_ColorArithmetic):
    """
    A color with separate (straight) alpha.

    Attributes:
        cs: Color space descriptor class
        components: Three channel values followed by alpha
    """
    cs: type[ColorSpace]
    components: tuple[float, float, float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", _coerce(self.components, 4))

    @property
    def alpha(self) -> float:
        return self.components[3]

    def split(self) -> tuple[OpaqueColor, float]:
        return OpaqueColor(self.cs, self.components[:3]), self.components[3]

    def convert(self, target: type[ColorSpace]) -> AlphaColor:
        opaque = self.cs.convert(target, self.components[:3])
        return AlphaColor(target, (*opaque, self.alpha))

    def premultiply(self) -> PremulColor:
        opaque = self.cs.LAYOUT.scale(self.components[:3], self.alpha)
        return PremulColor(self.cs, (*opaque, self.alpha))

    def lerp_rect(self, other: AlphaColor, t: float) -> AlphaColor:
        """Interpolate in premultiplied form without hue fixup."""
        return self.premultiply().lerp_rect(other.premultiply(), t).un_premultiply()

    def lerp(self, other: AlphaColor, t: float, direction: HueDirection = HueDirection.SHORTER) -> AlphaColor:
        return self.premultiply().lerp(other.premultiply(), t, direction).un_premultiply()

    def with_alpha(self, alpha: float) -> AlphaColor:
        return AlphaColor(self.cs, (*self.components[:3], alpha))

    def multiply_alpha(self, rhs: float) -> AlphaColor:
        return AlphaColor(self.cs, (*self.components[:3], self.alpha * rhs))

    def scale_chroma(self, scale: float) -> AlphaColor:
        opaque = self.cs.scale_chroma(self.components[:3], scale)
        return AlphaColor(self.cs, (*opaque, self.alpha))

    def clip(self) -> AlphaColor:
        opaque = self.cs.clip(self.components[:3])
        return AlphaColor(self.cs, (*opaque, min(max(self.alpha, 0.0), 1.0)))

    def relative_luminance(self) -> float:
        """Relative luminance of the opaque color; alpha is ignored."""
        return self.split()[0].relative_luminance()

    @classmethod
    def from_rgba8(cls, rgba: Rgba8) -> AlphaColor:
        """Lift an 8-bit color into sRGB by ``value / 255`` scaling."""
        return cls(Srgb, [v / 255.0 for v in rgba.to_u8_array()])

    def to_rgba8(self) -> Rgba8:
        """Quantize to 8-bit sRGB, clamping out-of-gamut channels."""
        r, g, b, a = self.convert(Srgb).components
        return Rgba8(_to_byte(r), _to_byte(g), _to_byte(b), _to_byte(a))


# =============================================================================
# Premultiplied alpha
# =============================================================================


@dataclass(frozen=True, slots=True)
class PremulColor(_ColorArithmetic):
    """
    A color with premultiplied alpha.

    The hue channel of a cylindrical space is stored as-is; every other
    color channel is multiplied by alpha.

    Attributes:
        cs: Color space descriptor class
        components: Three premultiplied channel values followed by alpha
    """
    cs: type[ColorSpace]
    components: tuple[float, float, float, float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", _coerce(self.components, 4))

    @property
    def alpha(self) -> float:
        return self.components[3]

    def convert(self, target: type[ColorSpace]) -> PremulColor:
        if self.cs is target:
            return self
        if self.cs.IS_LINEAR and target.IS_LINEAR:
            # Linear maps commute with the alpha scaling
            opaque = target.from_linear_srgb(self.cs.to_linear_srgb(self.components[:3]))
            return PremulColor(target, (*opaque, self.alpha))
        return self.un_premultiply().convert(target).premultiply()

    def un_premultiply(self) -> AlphaColor:
        """Undo premultiplication. Zero alpha leaves the channels as they are."""
        scale = 1.0 if self.alpha == 0.0 else 1.0 / self.alpha
        opaque = self.cs.LAYOUT.scale(self.components[:3], scale)
        return AlphaColor(self.cs, (*opaque, self.alpha))

    def lerp_rect(self, other: PremulColor, t: float) -> PremulColor:
        """Interpolate componentwise without hue fixup."""
        return self + t * (other - self)

    def fixup_hues(self, other: PremulColor, direction: HueDirection) -> PremulColor:
        fixed = fixup_hues_for_interpolate(
            self.components, other.components, self.cs.LAYOUT, direction
        )
        return PremulColor(other.cs, fixed)

    def lerp(self, other: PremulColor, t: float, direction: HueDirection = HueDirection.SHORTER) -> PremulColor:
        return self.lerp_rect(self.fixup_hues(other, direction), t)

    def multiply_alpha(self, rhs: float) -> PremulColor:
        opaque = self.cs.LAYOUT.scale(self.components[:3], rhs)
        return PremulColor(self.cs, (*opaque, self.alpha * rhs))

    def to_rgba8(self) -> PremulRgba8:
        """Quantize to premultiplied 8-bit sRGB."""
        r, g, b, a = self.convert(Srgb).components
        return PremulRgba8(_to_byte(r), _to_byte(g), _to_byte(b), _to_byte(a))
