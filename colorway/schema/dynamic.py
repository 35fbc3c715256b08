# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Colors whose color space is chosen at runtime.

``DynamicColor`` is the value produced by parsing CSS and the one used for
interpolation. Besides the components it tracks which of them are missing
(the CSS ``none`` keyword) and, for named colors, the name they were
written with.

Missing components follow CSS Color 4 §4.4 and §12:
- they read as 0.0 in every numeric operation except interpolation
- conversion carries them over positionally between analogous spaces and
  by channel class (lightness, chroma, hue) otherwise
- an achromatic color converted into a cylindrical space gets a missing hue
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from colorway.schema.color import AlphaColor, HueDirection, fixup_hues_for_interpolate
from colorway.schema.missing import Missing
from colorway.space.base import ColorSpace, ColorSpaceLayout, Vec3
from colorway.space.chromaticity import Chromaticity
from colorway.space.colorspace import LinearSrgb
from colorway.space.tag import ColorSpaceTag


# Chroma (or saturation) below this makes the hue powerless
POWERLESS_EPSILON = 1e-6

Components = tuple[float, float, float, float]


def _split(components: Sequence[float]) -> tuple[Vec3, float]:
    return (components[0], components[1], components[2]), components[3]


@dataclass(frozen=True, slots=True)
class DynamicColor:
    """
    A color tagged with its color space at runtime.

    Attributes:
        cs: The color space
        components: Three channel values followed by alpha
        missing: Components that are missing; each is stored as 0.0
        name: The CSS named color this value was parsed from, if any
    """
    cs: ColorSpaceTag
    components: Components
    missing: Missing = Missing()
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if len(self.components) != 4:
            raise ValueError(f"Expected 4 components, got {len(self.components)}")
        object.__setattr__(self, "components", tuple(float(c) for c in self.components))

    # -------------------------------------------------------------------------
    # Static interop
    # -------------------------------------------------------------------------

    @classmethod
    def from_alpha_color(cls, color: AlphaColor) -> DynamicColor:
        """
        Lift a static color.

        Spaces without a tag are lifted by way of linear sRGB.
        """
        if color.cs.TAG is not None:
            return cls(color.cs.TAG, color.components)
        return cls.from_alpha_color(color.convert(LinearSrgb))

    def to_alpha_color(self, cs: type[ColorSpace]) -> AlphaColor:
        """Convert to a static color. Missing components read as 0."""
        if cs.TAG is not None:
            return AlphaColor(cs, self.convert(cs.TAG).components)
        return self.to_alpha_color(LinearSrgb).convert(cs)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def convert(
        self,
        cs: ColorSpaceTag,
        *,
        powerless_epsilon: float = POWERLESS_EPSILON,
    ) -> DynamicColor:
        """
        Convert to another color space.

        Converting to the current space returns the color unchanged,
        missing components included.
        """
        return self._convert(cs, False, powerless_epsilon)

    def convert_absolute(
        self,
        cs: ColorSpaceTag,
        *,
        powerless_epsilon: float = POWERLESS_EPSILON,
    ) -> DynamicColor:
        """
        Convert to another color space without chromatic adaptation.

        Colors keep their absolute XYZ coordinates, so white in a D50 space
        does not map to white in a D65 space.
        """
        return self._convert(cs, True, powerless_epsilon)

    def _convert(self, cs: ColorSpaceTag, absolute: bool, powerless_epsilon: float) -> DynamicColor:
        if self.cs is cs:
            return self
        opaque, alpha = _split(self.components)
        if absolute:
            converted = self.cs.convert_absolute(cs, opaque)
        else:
            converted = self.cs.convert(cs, opaque)
        components = [*converted, alpha]

        # CSS Color 4 §12.2
        missing = Missing()
        if not self.missing.is_empty():
            if self.cs.same_analogous(cs):
                for i in self.missing:
                    components[i] = 0.0
                missing = self.missing
            else:
                missing = self.cs.carry_missing(cs, self.missing, components)

        missing = _powerless_to_missing(cs, components, missing, powerless_epsilon)
        return DynamicColor(cs, tuple(components), missing)

    def chromatically_adapt(self, source: Chromaticity, destination: Chromaticity) -> DynamicColor:
        """
        Adapt the color from one reference white to another (Bradford).

        Missing components are read as 0 and the result has none.
        """
        if source == destination:
            return self
        opaque, alpha = _split(self._zero_missing().components)
        adapted = self.cs.chromatically_adapt(opaque, source, destination)
        return DynamicColor(self.cs, (*adapted, alpha))

    def _zero_missing(self) -> DynamicColor:
        """Restore zeros for missing components after they were changed."""
        if self.missing.is_empty():
            return self
        components = list(self.components)
        for i in self.missing:
            components[i] = 0.0
        return DynamicColor(self.cs, tuple(components), self.missing, self.name)

    # -------------------------------------------------------------------------
    # Alpha and chroma
    # -------------------------------------------------------------------------

    def multiply_alpha(self, rhs: float) -> DynamicColor:
        """Multiply alpha by ``rhs``. A missing alpha is left missing."""
        if self.missing.contains(3):
            return self
        opaque, alpha = _split(self.components)
        return DynamicColor(self.cs, (*opaque, alpha * rhs), self.missing)

    def with_alpha(self, alpha: float) -> DynamicColor:
        """Replace alpha. A missing alpha is left missing."""
        if self.missing.contains(3):
            return self
        opaque, _ = _split(self.components)
        return DynamicColor(self.cs, (*opaque, alpha), self.missing)

    def scale_chroma(self, scale: float) -> DynamicColor:
        opaque, alpha = _split(self.components)
        scaled = self.cs.scale_chroma(opaque, scale)
        return DynamicColor(self.cs, (*scaled, alpha), self.missing)._zero_missing()

    def clip(self) -> DynamicColor:
        """Clip to the natural gamut of the space and clamp alpha to [0, 1]."""
        opaque, alpha = _split(self.components)
        clipped = self.cs.clip(opaque)
        return DynamicColor(
            self.cs, (*clipped, min(max(alpha, 0.0), 1.0)), self.missing, self.name
        )

    def relative_luminance(self) -> float:
        """Relative luminance per WCAG 2.1; alpha is ignored."""
        r, g, b, _ = self.convert(ColorSpaceTag.LINEAR_SRGB).components
        return 0.2126 * r + 0.7152 * g + 0.0722 * b

    # -------------------------------------------------------------------------
    # Interpolation
    # -------------------------------------------------------------------------

    def _premultiply_split(self) -> tuple[Vec3, float]:
        opaque, alpha = _split(self.components)
        if alpha == 1.0 or self.missing.contains(3):
            return opaque, alpha
        return self.cs.layout.scale(opaque, alpha), alpha

    def interpolate(
        self,
        other: DynamicColor,
        cs: ColorSpaceTag,
        direction: HueDirection = HueDirection.SHORTER,
    ) -> Interpolator:
        """
        Prepare to interpolate from this color to ``other`` in ``cs``.

        Follows CSS Color 4 §12: a component missing in only one endpoint
        takes the other endpoint's value, and a component missing in both
        stays missing in every interpolated color.
        """
        a = self.convert(cs)
        b = other.convert(cs)
        missing = a.missing & b.missing
        if a.missing != b.missing:
            a_components = list(a.components)
            b_components = list(b.components)
            for i in a.missing & ~b.missing:
                a_components[i] = b_components[i]
            for i in ~a.missing & b.missing:
                b_components[i] = a_components[i]
            # Filled components are no longer missing
            a = DynamicColor(cs, tuple(a_components), missing)
            b = DynamicColor(cs, tuple(b_components), missing)

        premul1, alpha1 = a._premultiply_split()
        premul2, alpha2 = b._premultiply_split()
        premul2 = fixup_hues_for_interpolate(premul1, premul2, cs.layout, direction)
        return Interpolator(
            premul1=premul1,
            alpha1=alpha1,
            delta_premul=(
                premul2[0] - premul1[0],
                premul2[1] - premul1[1],
                premul2[2] - premul1[2],
            ),
            delta_alpha=alpha2 - alpha1,
            cs=cs,
            missing=missing,
        )

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    def map(self, f: Callable[[float, float, float, float], Sequence[float]]) -> DynamicColor:
        """Apply ``f`` to the four raw components."""
        return DynamicColor(self.cs, tuple(f(*self.components)), self.missing)._zero_missing()

    def map_in(
        self,
        cs: ColorSpaceTag,
        f: Callable[[float, float, float, float], Sequence[float]],
    ) -> DynamicColor:
        """Apply ``f`` to the components in ``cs``, then convert back."""
        return self.convert(cs).map(f).convert(self.cs)

    def map_lightness(self, f: Callable[[float], float]) -> DynamicColor:
        """
        Map the lightness of the color.

        Lightness is normalized so that 1.0 is white, the natural range of
        Oklab. Spaces without a lightness channel map it in Oklab.
        """
        if self.cs in (ColorSpaceTag.LAB, ColorSpaceTag.LCH):
            return self.map(lambda l, c1, c2, a: (100.0 * f(l * 0.01), c1, c2, a))
        if self.cs in (ColorSpaceTag.OKLAB, ColorSpaceTag.OKLCH):
            return self.map(lambda l, c1, c2, a: (f(l), c1, c2, a))
        if self.cs is ColorSpaceTag.HSL:
            return self.map(lambda h, s, l, a: (h, s, 100.0 * f(l * 0.01), a))
        return self.map_in(ColorSpaceTag.OKLAB, lambda l, a, b, alpha: (f(l), a, b, alpha))

    def map_hue(self, f: Callable[[float], float]) -> DynamicColor:
        """Map the hue in degrees; spaces without hue map it in Oklch."""
        layout = self.cs.layout
        if layout is ColorSpaceLayout.HUE_FIRST:
            return self.map(lambda h, c1, c2, a: (f(h), c1, c2, a))
        if layout is ColorSpaceLayout.HUE_THIRD:
            return self.map(lambda c0, c1, h, a: (c0, c1, f(h), a))
        return self.map_in(ColorSpaceTag.OKLCH, lambda l, c, h, a: (l, c, f(h), a))

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_css(self) -> str:
        """Serialize as CSS Color 4 text."""
        from colorway.runtime.serializers.css import to_css
        return to_css(self)

    def to_dict(self) -> dict:
        """
        Serialize to dictionary.

        Missing components are written as None.
        """
        d = {
            "cs": self.cs.value,
            "components": [
                None if self.missing.contains(i) else value
                for i, value in enumerate(self.components)
            ],
        }
        if self.name is not None:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> DynamicColor:
        """Deserialize from dictionary."""
        raw = data["components"]
        missing = Missing.of(*(i for i, value in enumerate(raw) if value is None))
        components = tuple(0.0 if value is None else value for value in raw)
        return cls(
            cs=ColorSpaceTag.from_name(data["cs"]),
            components=components,
            missing=missing,
            name=data.get("name"),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> DynamicColor:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))


def _powerless_to_missing(
    cs: ColorSpaceTag,
    components: list[float],
    missing: Missing,
    epsilon: float,
) -> Missing:
    """
    Mark the hue of an achromatic color missing.

    HWB has no chroma channel; it is achromatic once whiteness and
    blackness add up to 100%.
    """
    hue = cs.hue_channel
    if hue is None:
        return missing
    if cs is ColorSpaceTag.HWB:
        achromatic = components[1] + components[2] >= 100.0 * (1.0 - epsilon)
    else:
        achromatic = components[1] < epsilon
    if achromatic:
        components[hue] = 0.0
        return missing.insert(hue)
    return missing


@dataclass(frozen=True, slots=True)
class Interpolator:
    """
    Precomputed interpolation between two colors.

    Evaluating at ``t`` steps linearly through premultiplied components;
    values outside [0, 1] extrapolate.
    """
    premul1: Vec3
    alpha1: float
    delta_premul: Vec3
    delta_alpha: float
    cs: ColorSpaceTag
    missing: Missing

    def eval(self, t: float) -> DynamicColor:
        premul = (
            self.premul1[0] + t * self.delta_premul[0],
            self.premul1[1] + t * self.delta_premul[1],
            self.premul1[2] + t * self.delta_premul[2],
        )
        alpha = self.alpha1 + t * self.delta_alpha
        if alpha == 0.0 or alpha == 1.0:
            opaque = premul
        else:
            opaque = self.cs.layout.scale(premul, 1.0 / alpha)
        return DynamicColor(self.cs, (*opaque, alpha), self.missing)
