# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""
Color space descriptors.

Conversion hub: every space converts to and from linear sRGB (D65).

References:
- CSS Color 4 conversion code: https://drafts.csswg.org/css-color-4/#color-conversion-code
- OKLab: https://bottosson.github.io/posts/oklab/

Transfer functions extend to negative values by odd symmetry so that
out-of-gamut colors survive a round trip.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from colorway.space.base import (
    LINEAR_SRGB_TO_XYZ_D65,
    XYZ_D65_TO_LINEAR_SRGB,
    ColorSpace,
    ColorSpaceLayout,
    Vec3,
    as_vec3,
    matmul,
)
from colorway.space.chromaticity import ACES, D50, D65, bradford_matrix
from colorway.space.tag import ColorSpaceTag


def _clamp(x: float, lo: float, hi: float) -> float:
    return min(max(x, lo), hi)


# =============================================================================
# Transfer functions
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert gamma-encoded sRGB values to linear light.

    sRGB uses a piecewise gamma curve:
    - For |value| <= 0.04045: value/12.92
    - Otherwise: ((|value| + 0.055) / 1.055) ^ 2.4, sign restored
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    return np.where(
        magnitude <= 0.04045,
        srgb / 12.92,
        np.copysign(np.power((magnitude + 0.055) / 1.055, 2.4), srgb),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear light to gamma-encoded sRGB.

    Inverse of srgb_to_linear. No clipping is applied.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    return np.where(
        magnitude <= 0.0031308,
        linear * 12.92,
        np.copysign(1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055, linear),
    )


_A98_GAMMA = 563.0 / 256.0


def _a98_to_linear(v: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.copysign(np.power(np.abs(v), _A98_GAMMA), v)


def _linear_to_a98(v: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.copysign(np.power(np.abs(v), 1.0 / _A98_GAMMA), v)


def _prophoto_to_linear(v: NDArray[np.float64]) -> NDArray[np.float64]:
    magnitude = np.abs(v)
    return np.where(
        magnitude <= 16.0 / 512.0,
        v / 16.0,
        np.copysign(np.power(magnitude, 1.8), v),
    )


def _linear_to_prophoto(v: NDArray[np.float64]) -> NDArray[np.float64]:
    magnitude = np.abs(v)
    return np.where(
        magnitude >= 1.0 / 512.0,
        np.copysign(np.power(magnitude, 1.0 / 1.8), v),
        v * 16.0,
    )


_REC2020_ALPHA = 1.09929682680944
_REC2020_BETA = 0.018053968510807


def _rec2020_to_linear(v: NDArray[np.float64]) -> NDArray[np.float64]:
    magnitude = np.abs(v)
    return np.where(
        magnitude < _REC2020_BETA * 4.5,
        v / 4.5,
        np.copysign(
            np.power((magnitude + _REC2020_ALPHA - 1.0) / _REC2020_ALPHA, 1.0 / 0.45),
            v,
        ),
    )


def _linear_to_rec2020(v: NDArray[np.float64]) -> NDArray[np.float64]:
    magnitude = np.abs(v)
    return np.where(
        magnitude > _REC2020_BETA,
        np.copysign(_REC2020_ALPHA * np.power(magnitude, 0.45) - (_REC2020_ALPHA - 1.0), v),
        v * 4.5,
    )


# =============================================================================
# Primaries
# =============================================================================

_LINEAR_P3_TO_XYZ_D65 = np.array([
    [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
    [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
    [0.0000000000000000, 0.04511338185890264, 1.043944368900976],
], dtype=np.float64)

_LINEAR_A98_TO_XYZ_D65 = np.array([
    [573536 / 994567, 263643 / 1420810, 187206 / 994567],
    [591459 / 1989134, 6239551 / 9945670, 374412 / 4972835],
    [53769 / 1989134, 351524 / 4972835, 4929758 / 4972835],
], dtype=np.float64)

_LINEAR_REC2020_TO_XYZ_D65 = np.array([
    [63426534 / 99577255, 20160776 / 139408157, 47086771 / 278816314],
    [26158966 / 99577255, 472592308 / 697040785, 8267143 / 139408157],
    [0.0, 19567812 / 697040785, 295819943 / 278816314],
], dtype=np.float64)

_LINEAR_PROPHOTO_TO_XYZ_D50 = np.array([
    [0.7977666449006423, 0.13518129740053308, 0.0313477341283922],
    [0.2880748288194013, 0.711835234241873, 0.00008993693872564],
    [0.0, 0.0, 0.8251046025104602],
], dtype=np.float64)

# ACES AP1 (ACEScg) and AP0 (ACES 2065-1), relative to the ACES white
_AP1_TO_XYZ_ACES = np.array([
    [0.6624541811, 0.1340042065, 0.1561876870],
    [0.2722287168, 0.6740817658, 0.0536895174],
    [-0.0055746495, 0.0040607335, 1.0103391003],
], dtype=np.float64)

_AP0_TO_XYZ_ACES = np.array([
    [0.9525523959, 0.0, 0.0000936786],
    [0.3439664498, 0.7281660966, -0.0721325464],
    [0.0, 0.0, 1.0088251844],
], dtype=np.float64)


def _via_xyz(to_xyz: NDArray[np.float64], white=D65) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Build (space → linear sRGB, linear sRGB → space) matrices."""
    to_srgb = XYZ_D65_TO_LINEAR_SRGB @ bradford_matrix(white, D65) @ to_xyz
    return to_srgb, np.linalg.inv(to_srgb)


_P3_TO_SRGB, _SRGB_TO_P3 = _via_xyz(_LINEAR_P3_TO_XYZ_D65)
_A98_TO_SRGB, _SRGB_TO_A98 = _via_xyz(_LINEAR_A98_TO_XYZ_D65)
_REC2020_TO_SRGB, _SRGB_TO_REC2020 = _via_xyz(_LINEAR_REC2020_TO_XYZ_D65)
_PROPHOTO_TO_SRGB, _SRGB_TO_PROPHOTO = _via_xyz(_LINEAR_PROPHOTO_TO_XYZ_D50, D50)
_ACESCG_TO_SRGB, _SRGB_TO_ACESCG = _via_xyz(_AP1_TO_XYZ_ACES, ACES)
_ACES2065_TO_SRGB, _SRGB_TO_ACES2065 = _via_xyz(_AP0_TO_XYZ_ACES, ACES)
_XYZ_D50_TO_SRGB, _SRGB_TO_XYZ_D50 = _via_xyz(np.eye(3), D50)

# Half-float range, the conventional limit for scene-referred ACES values
_ACES_MAX = 65504.0


# =============================================================================
# RGB-like spaces
# =============================================================================


def _clip_unit(src: Sequence[float]) -> Vec3:
    return (_clamp(src[0], 0.0, 1.0), _clamp(src[1], 0.0, 1.0), _clamp(src[2], 0.0, 1.0))


class LinearSrgb(ColorSpace):
    """Linear-light sRGB; the hub of all conversions."""
    IS_LINEAR = True
    TAG = ColorSpaceTag.LINEAR_SRGB

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return as_vec3(src)

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return as_vec3(src)

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return _clip_unit(src)

    @classmethod
    def scale_chroma(cls, src: Sequence[float], scale: float) -> Vec3:
        # Scale around the Oklab lightness in cube-root LMS, which is linear
        # in Oklab a/b.
        lms = np.cbrt(_M1 @ np.asarray(src, dtype=np.float64))
        lightness = float(_M2[0] @ lms)
        lms_scaled = lightness + scale * (lms - lightness)
        return matmul(_M1_INV, lms_scaled ** 3)


class Srgb(ColorSpace):
    """The sRGB color space (gamma encoded, D65)."""
    TAG = ColorSpaceTag.SRGB

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return as_vec3(srgb_to_linear(src))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return as_vec3(linear_to_srgb(src))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return _clip_unit(src)


class DisplayP3(ColorSpace):
    """Display P3: DCI-P3 primaries, D65 white, sRGB transfer curve."""
    TAG = ColorSpaceTag.DISPLAY_P3

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_P3_TO_SRGB, srgb_to_linear(src))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return as_vec3(linear_to_srgb(_SRGB_TO_P3 @ np.asarray(src, dtype=np.float64)))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return _clip_unit(src)


class A98Rgb(ColorSpace):
    """Adobe RGB (1998) compatible space."""
    TAG = ColorSpaceTag.A98_RGB

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_A98_TO_SRGB, _a98_to_linear(np.asarray(src, dtype=np.float64)))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return as_vec3(_linear_to_a98(_SRGB_TO_A98 @ np.asarray(src, dtype=np.float64)))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return _clip_unit(src)


class ProphotoRgb(ColorSpace):
    """ProPhoto RGB (ROMM RGB), D50 white."""
    TAG = ColorSpaceTag.PROPHOTO_RGB
    WHITE_POINT = D50

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_PROPHOTO_TO_SRGB, _prophoto_to_linear(np.asarray(src, dtype=np.float64)))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return as_vec3(_linear_to_prophoto(_SRGB_TO_PROPHOTO @ np.asarray(src, dtype=np.float64)))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return _clip_unit(src)


class Rec2020(ColorSpace):
    """ITU-R BT.2020 with its own transfer curve."""
    TAG = ColorSpaceTag.REC2020

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_REC2020_TO_SRGB, _rec2020_to_linear(np.asarray(src, dtype=np.float64)))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return as_vec3(_linear_to_rec2020(_SRGB_TO_REC2020 @ np.asarray(src, dtype=np.float64)))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return _clip_unit(src)


class AcesCg(ColorSpace):
    """ACEScg: linear AP1 primaries, ACES white. Values may exceed 1."""
    IS_LINEAR = True
    TAG = ColorSpaceTag.ACES_CG
    WHITE_POINT = ACES

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_ACESCG_TO_SRGB, src)

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_SRGB_TO_ACESCG, src)

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return (
            _clamp(src[0], 0.0, _ACES_MAX),
            _clamp(src[1], 0.0, _ACES_MAX),
            _clamp(src[2], 0.0, _ACES_MAX),
        )


class Aces2065_1(ColorSpace):
    """
    ACES 2065-1: linear AP0 primaries, ACES white.

    An interchange space with no runtime tag; dynamic colors reach it by
    way of linear sRGB.
    """
    IS_LINEAR = True
    WHITE_POINT = ACES

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_ACES2065_TO_SRGB, src)

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_SRGB_TO_ACES2065, src)

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return (
            _clamp(src[0], 0.0, _ACES_MAX),
            _clamp(src[1], 0.0, _ACES_MAX),
            _clamp(src[2], 0.0, _ACES_MAX),
        )


class XyzD65(ColorSpace):
    """CIE XYZ relative to D65. Unbounded; clipping is a no-op."""
    IS_LINEAR = True
    TAG = ColorSpaceTag.XYZ_D65
    WHITE = as_vec3(D65.to_xyz())

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(XYZ_D65_TO_LINEAR_SRGB, src)

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(LINEAR_SRGB_TO_XYZ_D65, src)


class XyzD50(ColorSpace):
    """CIE XYZ relative to D50. Unbounded; clipping is a no-op."""
    IS_LINEAR = True
    TAG = ColorSpaceTag.XYZ_D50
    WHITE_POINT = D50
    WHITE = as_vec3(D50.to_xyz())

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_XYZ_D50_TO_SRGB, src)

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_SRGB_TO_XYZ_D50, src)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Inverse matrices
_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: Sequence[float]) -> Vec3:
    """Convert linear sRGB to OKLab (L, a, b)."""
    lms = _M1 @ np.asarray(rgb, dtype=np.float64)
    # Cube root keeps the sign for out-of-gamut colors
    return matmul(_M2, np.cbrt(lms))


def oklab_to_linear_rgb(lab: Sequence[float]) -> Vec3:
    """Convert OKLab (L, a, b) to linear sRGB."""
    lms_cbrt = _M2_INV @ np.asarray(lab, dtype=np.float64)
    return matmul(_M1_INV, lms_cbrt ** 3)


# =============================================================================
# Rectangular ↔ polar
# =============================================================================


def lab_to_lch(lab: Sequence[float]) -> Vec3:
    """
    Convert rectangular (L, a, b) to polar (L, C, H).

    H is in degrees [0, 360).
    """
    L, a, b = lab[0], lab[1], lab[2]
    hue = math.degrees(math.atan2(b, a))
    if hue < 0.0:
        hue += 360.0
    return (float(L), math.hypot(a, b), hue)


def lch_to_lab(lch: Sequence[float]) -> Vec3:
    """Convert polar (L, C, H in degrees) to rectangular (L, a, b)."""
    L, C, H = lch[0], lch[1], lch[2]
    h_rad = math.radians(H)
    return (float(L), C * math.cos(h_rad), C * math.sin(h_rad))


# =============================================================================
# CIE Lab (D50)
# =============================================================================

_KAPPA = 24389.0 / 27.0
_EPSILON = 216.0 / 24389.0
_D50_XYZ = D50.to_xyz()


def _xyz_d50_to_lab(xyz: Sequence[float]) -> Vec3:
    scaled = np.asarray(xyz, dtype=np.float64) / _D50_XYZ
    f = np.where(scaled > _EPSILON, np.cbrt(scaled), (_KAPPA * scaled + 16.0) / 116.0)
    return (
        float(116.0 * f[1] - 16.0),
        float(500.0 * (f[0] - f[1])),
        float(200.0 * (f[1] - f[2])),
    )


def _lab_to_xyz_d50(lab: Sequence[float]) -> NDArray[np.float64]:
    L, a, b = lab[0], lab[1], lab[2]
    f1 = (L + 16.0) / 116.0
    f0 = a / 500.0 + f1
    f2 = f1 - b / 200.0
    x = f0 ** 3 if f0 ** 3 > _EPSILON else (116.0 * f0 - 16.0) / _KAPPA
    y = f1 ** 3 if L > _KAPPA * _EPSILON else L / _KAPPA
    z = f2 ** 3 if f2 ** 3 > _EPSILON else (116.0 * f2 - 16.0) / _KAPPA
    return np.array([x, y, z], dtype=np.float64) * _D50_XYZ


class Lab(ColorSpace):
    """CIE Lab (D50). Lightness in [0, 100]."""
    TAG = ColorSpaceTag.LAB
    WHITE_POINT = D50
    WHITE = (100.0, 0.0, 0.0)

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return matmul(_XYZ_D50_TO_SRGB, _lab_to_xyz_d50(src))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return _xyz_d50_to_lab(matmul(_SRGB_TO_XYZ_D50, src))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return (_clamp(src[0], 0.0, 100.0), float(src[1]), float(src[2]))

    @classmethod
    def scale_chroma(cls, src: Sequence[float], scale: float) -> Vec3:
        return (float(src[0]), src[1] * scale, src[2] * scale)


class Lch(ColorSpace):
    """Cylindrical CIE Lab (D50): lightness, chroma, hue."""
    TAG = ColorSpaceTag.LCH
    LAYOUT = ColorSpaceLayout.HUE_THIRD
    WHITE_POINT = D50
    WHITE = (100.0, 0.0, 0.0)

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return Lab.to_linear_srgb(lch_to_lab(src))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return lab_to_lch(Lab.from_linear_srgb(src))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return (_clamp(src[0], 0.0, 100.0), max(src[1], 0.0), float(src[2]))

    @classmethod
    def scale_chroma(cls, src: Sequence[float], scale: float) -> Vec3:
        return (float(src[0]), src[1] * scale, float(src[2]))


class Oklab(ColorSpace):
    """OKLab. Lightness in [0, 1]; the perceptual difference space."""
    TAG = ColorSpaceTag.OKLAB
    WHITE = (1.0, 0.0, 0.0)

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return oklab_to_linear_rgb(src)

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return linear_rgb_to_oklab(src)

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return (_clamp(src[0], 0.0, 1.0), float(src[1]), float(src[2]))

    @classmethod
    def scale_chroma(cls, src: Sequence[float], scale: float) -> Vec3:
        return (float(src[0]), src[1] * scale, src[2] * scale)


class Oklch(ColorSpace):
    """Cylindrical OKLab: lightness, chroma, hue in degrees."""
    TAG = ColorSpaceTag.OKLCH
    LAYOUT = ColorSpaceLayout.HUE_THIRD
    WHITE = (1.0, 0.0, 0.0)

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return oklab_to_linear_rgb(lch_to_lab(src))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return lab_to_lch(linear_rgb_to_oklab(src))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return (_clamp(src[0], 0.0, 1.0), max(src[1], 0.0), float(src[2]))

    @classmethod
    def scale_chroma(cls, src: Sequence[float], scale: float) -> Vec3:
        return (float(src[0]), src[1] * scale, float(src[2]))


# =============================================================================
# sRGB-derived cylindrical spaces
# =============================================================================

# Below this, RGB channels are treated as equal (achromatic)
_HSL_EPSILON = 1e-6


def srgb_to_hsl(rgb: Sequence[float]) -> Vec3:
    """
    Convert gamma-encoded sRGB to HSL.

    Saturation and lightness are in [0, 100]. Out-of-gamut input can yield
    negative saturation; it is made positive by rotating the hue 180°.
    """
    red, green, blue = float(rgb[0]), float(rgb[1]), float(rgb[2])
    mx = max(red, green, blue)
    mn = min(red, green, blue)
    hue = 0.0
    sat = 0.0
    light = 0.5 * (mn + mx)
    d = mx - mn

    if d > _HSL_EPSILON:
        denom = min(light, 1.0 - light)
        if abs(denom) > _HSL_EPSILON:
            sat = (mx - light) / denom
        if mx == red:
            hue = (green - blue) / d
        elif mx == green:
            hue = (blue - red) / d + 2.0
        else:
            hue = (red - green) / d + 4.0
        hue *= 60.0
        if sat < 0.0:
            hue += 180.0
            sat = -sat
        hue %= 360.0
    return (hue, sat * 100.0, light * 100.0)


def hsl_to_srgb(hsl: Sequence[float]) -> Vec3:
    """Convert HSL (saturation and lightness in [0, 100]) to sRGB."""
    hue = float(hsl[0])
    sat = hsl[1] * 0.01
    light = hsl[2] * 0.01
    a = sat * min(light, 1.0 - light)

    def channel(n: float) -> float:
        k = (n + hue / 30.0) % 12.0
        return light - a * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

    return (channel(0.0), channel(8.0), channel(4.0))


def srgb_to_hwb(rgb: Sequence[float]) -> Vec3:
    """Convert sRGB to HWB (whiteness and blackness in [0, 100])."""
    hue = srgb_to_hsl(rgb)[0]
    white = min(rgb[0], rgb[1], rgb[2])
    black = 1.0 - max(rgb[0], rgb[1], rgb[2])
    return (hue, float(white) * 100.0, float(black) * 100.0)


def hwb_to_srgb(hwb: Sequence[float]) -> Vec3:
    """Convert HWB to sRGB."""
    white = hwb[1] * 0.01
    black = hwb[2] * 0.01
    if white + black >= 1.0:
        gray = white / (white + black)
        return (gray, gray, gray)
    rgb = hsl_to_srgb((hwb[0], 100.0, 50.0))
    scale = 1.0 - white - black
    return (rgb[0] * scale + white, rgb[1] * scale + white, rgb[2] * scale + white)


class Hsl(ColorSpace):
    """HSL over sRGB: hue in degrees, saturation and lightness in [0, 100]."""
    TAG = ColorSpaceTag.HSL
    LAYOUT = ColorSpaceLayout.HUE_FIRST
    WHITE = (0.0, 0.0, 100.0)

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return Srgb.to_linear_srgb(hsl_to_srgb(src))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return srgb_to_hsl(Srgb.from_linear_srgb(src))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return (float(src[0]), max(src[1], 0.0), _clamp(src[2], 0.0, 100.0))

    @classmethod
    def scale_chroma(cls, src: Sequence[float], scale: float) -> Vec3:
        return (float(src[0]), src[1] * scale, float(src[2]))


class Hwb(ColorSpace):
    """HWB over sRGB: hue in degrees, whiteness and blackness in [0, 100]."""
    TAG = ColorSpaceTag.HWB
    LAYOUT = ColorSpaceLayout.HUE_FIRST
    WHITE = (0.0, 100.0, 0.0)

    @classmethod
    def to_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return Srgb.to_linear_srgb(hwb_to_srgb(src))

    @classmethod
    def from_linear_srgb(cls, src: Sequence[float]) -> Vec3:
        return srgb_to_hwb(Srgb.from_linear_srgb(src))

    @classmethod
    def clip(cls, src: Sequence[float]) -> Vec3:
        return (float(src[0]), _clamp(src[1], 0.0, 100.0), _clamp(src[2], 0.0, 100.0))


# =============================================================================
# Registry
# =============================================================================

TAGGED_SPACES: dict[ColorSpaceTag, type[ColorSpace]] = {
    space.TAG: space
    for space in (
        Srgb,
        LinearSrgb,
        Lab,
        Lch,
        Hsl,
        Hwb,
        Oklab,
        Oklch,
        DisplayP3,
        A98Rgb,
        ProphotoRgb,
        Rec2020,
        AcesCg,
        XyzD50,
        XyzD65,
    )
}
