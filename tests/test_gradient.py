# Copyright (c) 2026 Colorway
# SPDX-License-Identifier: MIT

"""Tests for gradient approximation."""

import logging
import math

import numpy as np
import pytest

from colorway import parse_color
from colorway.ramp import GradientConfig, gradient
from colorway.schema import DynamicColor, HueDirection
from colorway.space import ColorSpaceTag, DisplayP3, Oklab, Srgb

RED = DynamicColor(ColorSpaceTag.SRGB, (1.0, 0.0, 0.0, 1.0))
BLUE = DynamicColor(ColorSpaceTag.SRGB, (0.0, 0.0, 1.0, 1.0))


def _max_midpoint_error(color0, color1, interp_cs, direction, stops):
    """Largest ΔEOK between the exact ramp and the stops at each segment midpoint."""
    interpolator = color0.interpolate(color1, interp_cs, direction)
    worst = 0.0
    for (t_a, c_a), (t_b, c_b) in zip(stops, stops[1:]):
        exact = interpolator.eval(0.5 * (t_a + t_b)).to_alpha_color(Oklab).premultiply()
        approx = c_a.lerp_rect(c_b, 0.5).convert(Oklab)
        worst = max(worst, exact.difference(approx))
    return worst


class TestGradientConfig:
    """Configuration validation."""

    def test_defaults(self):
        config = GradientConfig()
        assert config.tolerance == 0.01
        assert config.max_depth == 24

    def test_negative_tolerance(self):
        with pytest.raises(ValueError, match="Tolerance"):
            GradientConfig(tolerance=-0.1)

    def test_max_depth_range(self):
        with pytest.raises(ValueError, match="max_depth"):
            GradientConfig(max_depth=60)

    def test_tolerance_argument_is_validated(self):
        with pytest.raises(ValueError, match="Tolerance"):
            gradient(RED, BLUE, ColorSpaceTag.SRGB, tolerance=-1.0)
        with pytest.raises(ValueError, match="Tolerance"):
            gradient(RED, BLUE, ColorSpaceTag.SRGB, tolerance=math.nan)


class TestGradient:
    """Stop placement and the error bound."""

    @pytest.mark.parametrize(
        "text0, text1, interp_cs, direction",
        [
            ("red", "blue", ColorSpaceTag.OKLAB, HueDirection.SHORTER),
            ("red", "blue", ColorSpaceTag.OKLCH, HueDirection.LONGER),
            ("#ff8800", "#0088ff80", ColorSpaceTag.LAB, HueDirection.SHORTER),
            ("hsl(30 80% 50%)", "hsl(300 60% 40%)", ColorSpaceTag.HSL, HueDirection.INCREASING),
            ("white", "black", ColorSpaceTag.LINEAR_SRGB, HueDirection.SHORTER),
        ],
    )
    @pytest.mark.parametrize("tolerance", [0.05, 0.01, 0.002])
    def test_error_bound(self, text0, text1, interp_cs, direction, tolerance):
        named = {"red": (255, 0, 0, 255), "blue": (0, 0, 255, 255),
                 "white": (255, 255, 255, 255), "black": (0, 0, 0, 255)}
        color0 = parse_color(text0, lookup=named.get)
        color1 = parse_color(text1, lookup=named.get)
        stops = list(gradient(color0, color1, interp_cs, direction, tolerance))

        assert stops[0][0] == 0.0
        assert stops[-1][0] == 1.0
        assert [t for t, _ in stops] == sorted({t for t, _ in stops})
        assert _max_midpoint_error(color0, color1, interp_cs, direction, stops) <= tolerance

    def test_first_and_last_stops(self):
        stops = list(gradient(RED, BLUE))
        assert stops[0][1] == RED.to_alpha_color(Srgb).premultiply()
        assert stops[-1][1] == BLUE.to_alpha_color(Srgb).premultiply()

    def test_linear_ramp_needs_no_subdivision(self):
        stops = list(gradient(RED, BLUE, ColorSpaceTag.SRGB))
        assert [t for t, _ in stops] == [0.0, 1.0]
        assert stops[0][1].components == (1.0, 0.0, 0.0, 1.0)
        assert stops[1][1].components == (0.0, 0.0, 1.0, 1.0)

    def test_tighter_tolerance_adds_stops(self):
        coarse = list(gradient(RED, BLUE, config=GradientConfig(tolerance=0.05)))
        fine = list(gradient(RED, BLUE, tolerance=0.001))
        assert len(fine) > len(coarse)

    def test_tolerance_argument_overrides_config(self):
        config = GradientConfig(tolerance=0.5)
        overridden = list(gradient(RED, BLUE, tolerance=0.001, config=config))
        assert len(overridden) == len(list(gradient(RED, BLUE, tolerance=0.001)))

    def test_depth_cap_gives_uniform_stops(self):
        config = GradientConfig(tolerance=0.0, max_depth=3)
        stops = list(gradient(RED, BLUE, ColorSpaceTag.OKLCH, config=config))
        assert [t for t, _ in stops] == [k / 8 for k in range(9)]

    def test_target_space(self):
        stops = list(gradient(RED, BLUE, target=DisplayP3))
        assert all(color.cs is DisplayP3 for _, color in stops)

    def test_missing_endpoint_resolved(self):
        color0 = parse_color("oklch(0.7 0.1 none)")
        color1 = parse_color("oklch(0.5 0.1 200)")
        stops = list(gradient(color0, color1, ColorSpaceTag.OKLCH))
        expected = DynamicColor(ColorSpaceTag.OKLCH, (0.7, 0.1, 200.0, 1.0))
        np.testing.assert_allclose(
            stops[0][1].components,
            expected.to_alpha_color(Srgb).premultiply().components,
            atol=1e-9,
        )

    def test_missing_alpha_endpoint_premultiplied(self):
        color0 = parse_color("rgb(255 0 0 / none)")
        color1 = DynamicColor(ColorSpaceTag.SRGB, (0.0, 0.0, 1.0, 0.5))
        stops = list(gradient(color0, color1, ColorSpaceTag.SRGB))
        np.testing.assert_allclose(stops[0][1].components, (0.5, 0.0, 0.0, 0.5), atol=1e-12)
        np.testing.assert_allclose(stops[-1][1].components, (0.0, 0.0, 0.5, 0.5), atol=1e-12)

    def test_iterator_is_forward_only(self):
        it = gradient(RED, BLUE)
        stops = list(it)
        assert len(stops) >= 2
        with pytest.raises(StopIteration):
            next(it)


class TestDegenerateInput:
    """Non-finite components must not hang the subdivision."""

    def test_nan_terminates(self, caplog):
        broken = DynamicColor(ColorSpaceTag.SRGB, (math.nan, 0.0, 0.0, 1.0))
        with caplog.at_level(logging.DEBUG, logger="colorway.ramp.gradient"):
            stops = list(gradient(broken, BLUE))
        assert stops[0][0] == 0.0
        assert stops[-1][0] == 1.0
        assert "Non-finite" in caplog.text

    def test_infinite_terminates(self):
        broken = DynamicColor(ColorSpaceTag.OKLAB, (math.inf, 0.0, 0.0, 1.0))
        stops = list(gradient(broken, RED, config=GradientConfig(max_depth=8)))
        assert stops[-1][0] == 1.0
