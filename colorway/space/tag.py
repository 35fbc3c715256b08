# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Runtime color space tags.

A ``ColorSpaceTag`` names one of the known color spaces at runtime and
dispatches to its descriptor class. It also classifies channels as
lightness, chroma or hue so that missing components can be carried across
conversions between unrelated spaces.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Optional, Sequence

from colorway.space.base import ColorSpaceLayout, Vec3, as_vec3

if TYPE_CHECKING:
    from colorway.schema.missing import Missing
    from colorway.space.base import ColorSpace
    from colorway.space.chromaticity import Chromaticity


class ColorSpaceTag(Enum):
    """
    Runtime identifier of a color space.

    Values are the CSS identifiers used by ``color()`` (or the function name
    for spaces with their own CSS function).
    """
    SRGB = "srgb"
    LINEAR_SRGB = "srgb-linear"
    LAB = "lab"
    LCH = "lch"
    HSL = "hsl"
    HWB = "hwb"
    OKLAB = "oklab"
    OKLCH = "oklch"
    DISPLAY_P3 = "display-p3"
    A98_RGB = "a98-rgb"
    PROPHOTO_RGB = "prophoto-rgb"
    REC2020 = "rec2020"
    ACES_CG = "--acescg"
    XYZ_D50 = "xyz-d50"
    XYZ_D65 = "xyz-d65"

    @classmethod
    def from_name(cls, name: str) -> ColorSpaceTag:
        """
        Look up a tag by its CSS identifier (case-insensitive).

        ``xyz`` is accepted as an alias of ``xyz-d65``.

        Raises:
            ValueError: If the name is not a known color space
        """
        key = name.strip().lower()
        if key == "xyz":
            return cls.XYZ_D65
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown color space: {name!r}") from None

    # -------------------------------------------------------------------------
    # Descriptor dispatch
    # -------------------------------------------------------------------------

    @property
    def space(self) -> type[ColorSpace]:
        """The descriptor class for this tag."""
        # Lazy import to avoid circular imports
        from colorway.space.colorspace import TAGGED_SPACES

        return TAGGED_SPACES[self]

    @property
    def layout(self) -> ColorSpaceLayout:
        return self.space.LAYOUT

    @property
    def is_cylindrical(self) -> bool:
        return self.layout is not ColorSpaceLayout.RECTANGULAR

    def same_analogous(self, other: ColorSpaceTag) -> bool:
        """
        Whether two spaces belong to the same analogous family.

        Missing components carry over positionally only between members of
        one family.
        """
        for family in _ANALOGOUS_FAMILIES:
            if self in family and other in family:
                return True
        return False

    def to_linear_srgb(self, src: Sequence[float]) -> Vec3:
        return self.space.to_linear_srgb(src)

    def from_linear_srgb(self, src: Sequence[float]) -> Vec3:
        return self.space.from_linear_srgb(src)

    def to_linear_srgb_absolute(self, src: Sequence[float]) -> Vec3:
        return self.space.to_linear_srgb_absolute(src)

    def from_linear_srgb_absolute(self, src: Sequence[float]) -> Vec3:
        return self.space.from_linear_srgb_absolute(src)

    def convert(self, target: ColorSpaceTag, src: Sequence[float]) -> Vec3:
        """
        Convert opaque components into ``target``.

        Uses a direct path between closely related spaces and goes through
        linear sRGB otherwise.
        """
        if self is target:
            return as_vec3(src)
        shortcut = _shortcuts().get((self, target))
        if shortcut is not None:
            return shortcut(src)
        return target.from_linear_srgb(self.to_linear_srgb(src))

    def convert_absolute(self, target: ColorSpaceTag, src: Sequence[float]) -> Vec3:
        """Convert opaque components into ``target`` without chromatic adaptation."""
        if self is target:
            return as_vec3(src)
        # The direct paths never cross a white point change
        shortcut = _shortcuts().get((self, target))
        if shortcut is not None:
            return shortcut(src)
        return target.from_linear_srgb_absolute(self.to_linear_srgb_absolute(src))

    def chromatically_adapt(
        self,
        src: Sequence[float],
        source: Chromaticity,
        destination: Chromaticity,
    ) -> Vec3:
        return self.space.chromatically_adapt(src, source, destination)

    def scale_chroma(self, src: Sequence[float], scale: float) -> Vec3:
        return self.space.scale_chroma(src, scale)

    def clip(self, src: Sequence[float]) -> Vec3:
        return self.space.clip(src)

    # -------------------------------------------------------------------------
    # Channel classes
    # -------------------------------------------------------------------------

    @property
    def lightness_channel(self) -> Optional[int]:
        """Index of the lightness-like channel, if any."""
        if self in _LAB_LIKE:
            return 0
        if self is ColorSpaceTag.HSL:
            return 2
        return None

    @property
    def chroma_channel(self) -> Optional[int]:
        """Index of the chroma-like (or saturation) channel, if any."""
        if self in _LAB_LIKE or self is ColorSpaceTag.HSL:
            return 1
        return None

    @property
    def hue_channel(self) -> Optional[int]:
        return self.layout.hue_channel

    def carry_missing(
        self,
        target: ColorSpaceTag,
        missing: Missing,
        components: list[float],
    ) -> Missing:
        """
        Translate a missing set into ``target`` when the spaces are not analogous.

        Alpha's bit passes through. A missing hue, chroma or lightness
        channel marks the target's channel of the same class missing and
        zeroes it in ``components``; if the target has no such channel the
        bit is dropped.
        """
        # Lazy import to avoid circular imports
        from colorway.schema.missing import Missing

        result = missing & Missing.single(3)
        for source_index, target_index in (
            (self.hue_channel, target.hue_channel),
            (self.chroma_channel, target.chroma_channel),
            (self.lightness_channel, target.lightness_channel),
        ):
            if source_index is None or target_index is None:
                continue
            if missing.contains(source_index):
                result = result.insert(target_index)
                components[target_index] = 0.0
        return result


_RGB_LIKE = frozenset({
    ColorSpaceTag.SRGB,
    ColorSpaceTag.LINEAR_SRGB,
    ColorSpaceTag.DISPLAY_P3,
    ColorSpaceTag.A98_RGB,
    ColorSpaceTag.PROPHOTO_RGB,
    ColorSpaceTag.REC2020,
    ColorSpaceTag.ACES_CG,
    ColorSpaceTag.XYZ_D50,
    ColorSpaceTag.XYZ_D65,
})

_LAB_LIKE = frozenset({
    ColorSpaceTag.LAB,
    ColorSpaceTag.LCH,
    ColorSpaceTag.OKLAB,
    ColorSpaceTag.OKLCH,
})

_ANALOGOUS_FAMILIES = (
    _RGB_LIKE,
    frozenset({ColorSpaceTag.LAB, ColorSpaceTag.OKLAB}),
    frozenset({ColorSpaceTag.LCH, ColorSpaceTag.OKLCH}),
)


@lru_cache(maxsize=None)
def _shortcuts():
    """Direct conversions between closely related spaces."""
    from colorway.space import colorspace as spaces

    def via_srgb(to_srgb, from_srgb):
        return lambda src: from_srgb(to_srgb(src))

    return {
        (ColorSpaceTag.LAB, ColorSpaceTag.LCH): spaces.lab_to_lch,
        (ColorSpaceTag.LCH, ColorSpaceTag.LAB): spaces.lch_to_lab,
        (ColorSpaceTag.OKLAB, ColorSpaceTag.OKLCH): spaces.lab_to_lch,
        (ColorSpaceTag.OKLCH, ColorSpaceTag.OKLAB): spaces.lch_to_lab,
        (ColorSpaceTag.SRGB, ColorSpaceTag.HSL): spaces.srgb_to_hsl,
        (ColorSpaceTag.HSL, ColorSpaceTag.SRGB): spaces.hsl_to_srgb,
        (ColorSpaceTag.SRGB, ColorSpaceTag.HWB): spaces.srgb_to_hwb,
        (ColorSpaceTag.HWB, ColorSpaceTag.SRGB): spaces.hwb_to_srgb,
        (ColorSpaceTag.HSL, ColorSpaceTag.HWB): via_srgb(spaces.hsl_to_srgb, spaces.srgb_to_hwb),
        (ColorSpaceTag.HWB, ColorSpaceTag.HSL): via_srgb(spaces.hwb_to_srgb, spaces.srgb_to_hsl),
    }
