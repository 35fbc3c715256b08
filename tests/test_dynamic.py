# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""Tests for runtime-tagged colors: conversion, missing components, interpolation."""

import json

import numpy as np
import pytest

from colorway import parse_color
from colorway.schema import AlphaColor, DynamicColor, HueDirection, Missing
from colorway.space import D50, D65, AcesCg, ColorSpaceTag, Srgb
from colorway.space.colorspace import Aces2065_1

RED = DynamicColor(ColorSpaceTag.SRGB, (1.0, 0.0, 0.0, 1.0))
GREEN = DynamicColor(ColorSpaceTag.SRGB, (0.0, 1.0, 0.0, 1.0))
BLUE = DynamicColor(ColorSpaceTag.SRGB, (0.0, 0.0, 1.0, 1.0))


class TestConvert:
    """Conversion and missing-component propagation."""

    def test_convert_to_self_is_identity(self):
        color = parse_color("oklch(0.5 none 120 / none)")
        assert color.convert(ColorSpaceTag.OKLCH) is color

    def test_no_missing_stays_empty(self):
        converted = RED.convert(ColorSpaceTag.DISPLAY_P3)
        assert converted.missing.is_empty()
        assert converted.cs is ColorSpaceTag.DISPLAY_P3

    def test_analogous_carries_positionally(self):
        color = parse_color("color(srgb 0.5 none 0)")
        converted = color.convert(ColorSpaceTag.XYZ_D65)
        assert converted.missing == Missing.single(1)
        assert converted.components[1] == 0.0

    def test_non_analogous_lightness_dropped(self):
        color = parse_color("oklab(none 0.2 -0.3)")
        assert color.convert(ColorSpaceTag.SRGB).missing.is_empty()

    def test_hue_carries_by_class(self):
        color = parse_color("oklch(0.2 0.3 none)")
        converted = color.convert(ColorSpaceTag.HSL)
        assert converted.missing == Missing.single(0)
        assert converted.components[0] == 0.0

    def test_missing_chroma_makes_hue_powerless(self):
        color = parse_color("oklch(0.2 none 240)")
        converted = color.convert(ColorSpaceTag.HSL)
        assert converted.missing == Missing.of(0, 1)

    def test_achromatic_hue_is_missing(self):
        converted = parse_color("oklab(0.2 0 0)").convert(ColorSpaceTag.HSL)
        assert converted.missing.contains(0)
        assert converted.components[0] == 0.0

    def test_alpha_missing_always_carries(self):
        color = parse_color("oklab(0.5 0.1 0.1 / none)")
        assert color.convert(ColorSpaceTag.SRGB).missing == Missing.single(3)

    def test_lab_chroma_class_carries_to_lch(self):
        color = parse_color("lab(50 none 20)")
        # chroma zeroed in Lch, so the hue is powerless too
        assert color.convert(ColorSpaceTag.LCH).missing == Missing.of(1, 2)

    def test_hwb_gray_has_powerless_hue(self):
        gray = DynamicColor(ColorSpaceTag.SRGB, (0.5, 0.5, 0.5, 1.0)).convert(ColorSpaceTag.HWB)
        assert gray.missing == Missing.single(0)
        red = RED.convert(ColorSpaceTag.HWB)
        assert red.missing.is_empty()
        assert red.components[:3] == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_powerless_epsilon_is_tunable(self):
        nearly_gray = DynamicColor(ColorSpaceTag.SRGB, (0.5, 0.5, 0.501, 1.0))
        assert not nearly_gray.convert(ColorSpaceTag.OKLCH).missing.contains(2)
        loose = nearly_gray.convert(ColorSpaceTag.OKLCH, powerless_epsilon=0.01)
        assert loose.missing.contains(2)

    def test_convert_absolute(self):
        white = DynamicColor(ColorSpaceTag.LAB, (100.0, 0.0, 0.0, 1.0))
        adapted = white.convert(ColorSpaceTag.XYZ_D65)
        absolute = white.convert_absolute(ColorSpaceTag.XYZ_D65)
        np.testing.assert_allclose(adapted.components[:3], D65.to_xyz(), atol=1e-4)
        np.testing.assert_allclose(absolute.components[:3], D50.to_xyz(), atol=1e-4)

    def test_chromatically_adapt(self):
        white = DynamicColor(ColorSpaceTag.XYZ_D65, (*D65.to_xyz(), 1.0))
        adapted = white.chromatically_adapt(D65, D50)
        np.testing.assert_allclose(adapted.components[:3], D50.to_xyz(), atol=1e-4)
        assert adapted.components[3] == 1.0
        assert white.chromatically_adapt(D65, D65) is white


class TestStaticInterop:
    """Lifting static colors and lowering back."""

    def test_tagged_space(self):
        color = DynamicColor.from_alpha_color(AlphaColor(Srgb, (0.1, 0.2, 0.3, 0.4)))
        assert color.cs is ColorSpaceTag.SRGB
        assert color.components == (0.1, 0.2, 0.3, 0.4)
        assert color.missing.is_empty()

    def test_untagged_space_lifts_through_linear_srgb(self):
        static = AlphaColor(Aces2065_1, (0.2, 0.3, 0.4, 1.0))
        color = DynamicColor.from_alpha_color(static)
        assert color.cs is ColorSpaceTag.LINEAR_SRGB
        back = color.to_alpha_color(Aces2065_1)
        np.testing.assert_allclose(back.components, static.components, atol=1e-9)

    def test_to_alpha_color_zeroes_missing(self):
        color = parse_color("color(srgb 0.5 none 0.2)")
        static = color.to_alpha_color(Srgb)
        assert static.components == pytest.approx((0.5, 0.0, 0.2, 1.0))

    def test_to_alpha_color_converts(self):
        static = RED.to_alpha_color(AcesCg)
        expected = AlphaColor(Srgb, (1.0, 0.0, 0.0, 1.0)).convert(AcesCg)
        np.testing.assert_allclose(static.components, expected.components, atol=1e-9)

    def test_component_count(self):
        with pytest.raises(ValueError):
            DynamicColor(ColorSpaceTag.SRGB, (1.0, 0.0, 0.0))


class TestAlphaAndChroma:
    """Alpha operations, chroma scaling and clipping."""

    def test_missing_alpha_guard(self):
        color = parse_color("rgb(10 20 30 / none)")
        assert color.with_alpha(0.5) is color
        assert color.multiply_alpha(0.5) is color

    def test_alpha_operations(self):
        assert RED.with_alpha(0.25).components[3] == 0.25
        assert RED.with_alpha(0.5).multiply_alpha(0.5).components[3] == 0.25

    def test_named_color_loses_name(self):
        named = DynamicColor(ColorSpaceTag.SRGB, (1.0, 0.0, 0.0, 1.0), name="red")
        assert named.scale_chroma(0.5).name is None
        assert named.with_alpha(0.5).name is None
        assert named.convert(ColorSpaceTag.OKLAB).name is None

    def test_clip_keeps_name(self):
        named = DynamicColor(ColorSpaceTag.SRGB, (1.0, 0.0, 0.0, 1.0), name="red")
        assert named.clip().name == "red"

    def test_scale_chroma_rezeroes_missing(self):
        color = parse_color("oklab(0.5 none 0.1)")
        scaled = color.scale_chroma(2.0)
        assert scaled.missing == Missing.single(1)
        assert scaled.components == pytest.approx((0.5, 0.0, 0.2, 1.0))

    def test_scale_chroma_cylindrical(self):
        color = DynamicColor(ColorSpaceTag.OKLCH, (0.6, 0.1, 30.0, 1.0))
        assert color.scale_chroma(0.5).components == pytest.approx((0.6, 0.05, 30.0, 1.0))

    def test_clip(self):
        color = DynamicColor(ColorSpaceTag.SRGB, (1.2, -0.1, 0.5, 1.5))
        assert color.clip().components == (1.0, 0.0, 0.5, 1.0)

    def test_relative_luminance(self):
        assert GREEN.relative_luminance() == pytest.approx(0.7152)
        white = DynamicColor(ColorSpaceTag.OKLAB, (1.0, 0.0, 0.0, 1.0))
        assert white.relative_luminance() == pytest.approx(1.0, abs=1e-6)


class TestInterpolation:
    """Interpolation with premultiplication, hue fixup and missing resolution."""

    def test_hsl_increasing_midpoint(self):
        mid = RED.interpolate(GREEN, ColorSpaceTag.HSL, HueDirection.INCREASING).eval(0.5)
        assert mid.cs is ColorSpaceTag.HSL
        assert mid.components[0] == pytest.approx(60.0, abs=0.01)

    def test_hsl_decreasing_goes_the_long_way(self):
        mid = RED.interpolate(GREEN, ColorSpaceTag.HSL, HueDirection.DECREASING).eval(0.5)
        assert mid.components[0] == pytest.approx(-120.0, abs=0.01)

    def test_endpoints(self):
        interp = RED.interpolate(BLUE, ColorSpaceTag.OKLAB)
        np.testing.assert_allclose(
            interp.eval(0.0).components, RED.convert(ColorSpaceTag.OKLAB).components, atol=1e-12
        )
        np.testing.assert_allclose(
            interp.eval(1.0).components, BLUE.convert(ColorSpaceTag.OKLAB).components, atol=1e-12
        )

    def test_extrapolation(self):
        interp = RED.interpolate(GREEN, ColorSpaceTag.SRGB)
        assert interp.eval(2.0).components == pytest.approx((-1.0, 2.0, 0.0, 1.0))

    def test_premultiplied_alpha(self):
        clear_blue = BLUE.with_alpha(0.0)
        mid = RED.interpolate(clear_blue, ColorSpaceTag.SRGB).eval(0.5)
        assert mid.components == pytest.approx((1.0, 0.0, 0.0, 0.5))

    def test_missing_takes_other_value(self):
        a = parse_color("oklch(0.5 0.1 none)")
        b = DynamicColor(ColorSpaceTag.OKLCH, (0.7, 0.1, 200.0, 1.0))
        interp = a.interpolate(b, ColorSpaceTag.OKLCH)
        assert interp.missing.is_empty()
        for t in (0.0, 0.5, 1.0):
            assert interp.eval(t).components[2] == pytest.approx(200.0)

    def test_missing_in_both_stays_missing(self):
        a = parse_color("oklch(0.5 0.1 none)")
        b = parse_color("oklch(0.7 0.2 none)")
        interp = a.interpolate(b, ColorSpaceTag.OKLCH)
        assert interp.missing == Missing.single(2)
        mid = interp.eval(0.5)
        assert mid.missing == Missing.single(2)
        assert mid.components[0] == pytest.approx(0.6)

    def test_missing_alpha_in_one_endpoint(self):
        a = parse_color("rgb(255 0 0 / none)")
        b = DynamicColor(ColorSpaceTag.SRGB, (0.0, 0.0, 1.0, 0.5))
        interp = a.interpolate(b, ColorSpaceTag.SRGB)
        start = interp.eval(0.0)
        assert start.components == pytest.approx((1.0, 0.0, 0.0, 0.5))
        mid = interp.eval(0.5)
        assert mid.components == pytest.approx((0.5, 0.0, 0.5, 0.5))
        assert mid.missing.is_empty()

    def test_missing_alpha_in_both_endpoints(self):
        a = parse_color("rgb(255 0 0 / none)")
        b = parse_color("rgb(0 0 255 / none)")
        interp = a.interpolate(b, ColorSpaceTag.SRGB)
        mid = interp.eval(0.5)
        assert mid.missing == Missing.single(3)
        assert mid.components[:3] == pytest.approx((0.5, 0.0, 0.5))

    def test_gray_endpoint_takes_hue_of_other(self):
        white = DynamicColor(ColorSpaceTag.OKLAB, (1.0, 0.0, 0.0, 1.0))
        interp = white.interpolate(BLUE, ColorSpaceTag.OKLCH)
        blue_hue = BLUE.convert(ColorSpaceTag.OKLCH).components[2]
        assert interp.eval(0.5).components[2] == pytest.approx(blue_hue)


class TestMapping:
    """Component mapping keeps missing components at zero."""

    def test_map_rezeroes_missing(self):
        color = parse_color("color(srgb 0.2 none 0.4)")
        mapped = color.map(lambda r, g, b, a: (r * 2, g + 1, b, a))
        assert mapped.components == pytest.approx((0.4, 0.0, 0.4, 1.0))
        assert mapped.missing == Missing.single(1)

    def test_map_in(self):
        mapped = RED.map_in(ColorSpaceTag.OKLAB, lambda l, a, b, alpha: (l, a, b, alpha * 0.5))
        assert mapped.cs is ColorSpaceTag.SRGB
        assert mapped.components == pytest.approx((1.0, 0.0, 0.0, 0.5), abs=1e-9)

    def test_map_lightness_lab(self):
        color = DynamicColor(ColorSpaceTag.LAB, (50.0, 10.0, 10.0, 1.0))
        assert color.map_lightness(lambda l: l + 0.1).components == pytest.approx((60.0, 10.0, 10.0, 1.0))

    def test_map_lightness_hsl(self):
        color = DynamicColor(ColorSpaceTag.HSL, (120.0, 50.0, 40.0, 1.0))
        assert color.map_lightness(lambda l: l * 0.5).components == pytest.approx((120.0, 50.0, 20.0, 1.0))

    def test_map_lightness_oklch(self):
        color = DynamicColor(ColorSpaceTag.OKLCH, (0.4, 0.1, 60.0, 1.0))
        assert color.map_lightness(lambda l: 1.0 - l).components == pytest.approx((0.6, 0.1, 60.0, 1.0))

    def test_map_lightness_through_oklab(self):
        darker = RED.map_lightness(lambda l: l * 0.5)
        assert darker.cs is ColorSpaceTag.SRGB
        before = RED.convert(ColorSpaceTag.OKLAB).components[0]
        after = darker.convert(ColorSpaceTag.OKLAB).components[0]
        assert after == pytest.approx(before * 0.5, abs=1e-9)

    def test_map_hue_direct(self):
        color = DynamicColor(ColorSpaceTag.HSL, (100.0, 50.0, 50.0, 1.0))
        assert color.map_hue(lambda h: h + 20.0).components[0] == pytest.approx(120.0)

    def test_map_hue_through_oklch(self):
        shifted = RED.map_hue(lambda h: h + 120.0)
        before = RED.convert(ColorSpaceTag.OKLCH).components[2]
        after = shifted.convert(ColorSpaceTag.OKLCH).components[2]
        assert (after - before) % 360.0 == pytest.approx(120.0, abs=1e-6)


class TestSerialization:
    """Dictionary and JSON round trips."""

    def test_to_dict(self):
        color = parse_color("oklch(0.5 none 120 / 0.5)")
        assert color.to_dict() == {"cs": "oklch", "components": [0.5, None, 120.0, 0.5]}

    def test_name_is_written(self):
        named = DynamicColor(ColorSpaceTag.SRGB, (1.0, 0.0, 0.0, 1.0), name="red")
        assert named.to_dict()["name"] == "red"

    def test_json_round_trip(self):
        color = DynamicColor(
            ColorSpaceTag.DISPLAY_P3, (0.25, 0.0, 0.75, 1.0), Missing.single(1), name="accent"
        )
        data = json.loads(color.to_json())
        assert data["components"][1] is None
        assert DynamicColor.from_json(color.to_json(indent=2)) == color

    def test_from_dict_xyz_alias(self):
        color = DynamicColor.from_dict({"cs": "xyz", "components": [0.1, 0.2, 0.3, 1.0]})
        assert color.cs is ColorSpaceTag.XYZ_D65
