# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (HSV ↔ RGB ↔ HSL, CMYK, HEX)."""

import logging

import numpy as np
import pytest

from tinct.engine.colorspace import (
    cmyk_to_rgb,
    hex_to_rgb,
    hex_to_rgba,
    hsl_to_hex,
    hsl_to_hsv,
    hsl_to_rgb,
    hsl_to_rgb_array,
    hsv_to_hex,
    hsv_to_hsl,
    hsv_to_rgb,
    hsv_to_rgb_array,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsl_array,
    rgb_to_hsv,
    rgb_to_hsv_array,
    round_half_up,
)
from tinct.schema import CMYKColor, HSLColor, HSVColor, RGBColor


def _rgb_slab(red: int) -> np.ndarray:
    """All 65536 (red, g, b) triples for one red value."""
    g, b = np.meshgrid(np.arange(256), np.arange(256), indexing="ij")
    return np.stack([np.full_like(g, red), g, b], axis=-1).reshape(-1, 3)


class TestRounding:

    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3  # banker's rounding would give 2
        assert round_half_up(127.5) == 128

    def test_halves_round_away_from_zero_when_negative(self):
        assert round_half_up(-2.5) == -3

    def test_below_half_rounds_down(self):
        assert round_half_up(76.245) == 76


class TestHSVToRGB:

    def test_pure_green(self):
        assert hsv_to_rgb(120, 100, 100) == RGBColor(0, 255, 0)

    def test_sector_boundaries(self):
        assert hsv_to_rgb(0, 100, 100) == RGBColor(255, 0, 0)
        assert hsv_to_rgb(60, 100, 100) == RGBColor(255, 255, 0)
        assert hsv_to_rgb(180, 100, 100) == RGBColor(0, 255, 255)
        assert hsv_to_rgb(240, 100, 100) == RGBColor(0, 0, 255)
        assert hsv_to_rgb(300, 100, 100) == RGBColor(255, 0, 255)

    def test_mid_sector(self):
        assert hsv_to_rgb(210, 66.66666666666667, 60) == RGBColor(51, 102, 153)

    @pytest.mark.parametrize("hue", [0, 37.5, 120, 199, 359.9])
    def test_zero_saturation_is_gray(self, hue):
        rgb = hsv_to_rgb(hue, 0, 40)
        assert rgb.r == rgb.g == rgb.b == 102

    def test_hue_wraps(self):
        assert hsv_to_rgb(480, 100, 100) == hsv_to_rgb(120, 100, 100)
        assert hsv_to_rgb(-60, 100, 100) == RGBColor(255, 0, 255)

    def test_tiny_negative_hue_wraps_to_zero(self):
        assert hsv_to_rgb(-1e-20, 100, 100) == RGBColor(255, 0, 0)

    def test_out_of_range_percentages_clamp(self):
        assert hsv_to_rgb(0, 150, 120) == RGBColor(255, 0, 0)
        assert hsv_to_rgb(0, -5, -5) == RGBColor(0, 0, 0)

    def test_nan_treated_as_zero(self):
        assert hsv_to_rgb(float("nan"), 100, 100) == RGBColor(255, 0, 0)

    def test_value_zero_is_black(self):
        assert hsv_to_rgb(200, 80, 0) == RGBColor(0, 0, 0)


class TestRGBToHSV:

    def test_pure_red(self):
        hsv = rgb_to_hsv(255, 0, 0)
        assert hsv == HSVColor(0.0, 100.0, 100.0)

    def test_mid_color(self):
        hsv = rgb_to_hsv(51, 102, 153)
        assert hsv.h == pytest.approx(210.0)
        assert hsv.s == pytest.approx(66.6667, abs=1e-3)
        assert hsv.v == pytest.approx(60.0)

    def test_negative_hue_wraps(self):
        # magenta-ish: max is red and g < b
        hsv = rgb_to_hsv(255, 0, 128)
        assert 300.0 < hsv.h < 360.0

    def test_achromatic_has_zero_hue(self):
        hsv = rgb_to_hsv(128, 128, 128)
        assert hsv.h == 0.0
        assert hsv.s == 0.0

    def test_black(self):
        assert rgb_to_hsv(0, 0, 0) == HSVColor(0.0, 0.0, 0.0)

    def test_rounded_display(self):
        assert rgb_to_hsv(51, 102, 153).rounded() == HSVColor(210, 67, 60)


class TestHSL:

    def test_pure_red(self):
        assert rgb_to_hsl(255, 0, 0) == HSLColor(0.0, 100.0, 50.0)

    def test_pure_blue_hue(self):
        assert rgb_to_hsl(0, 0, 255).h == pytest.approx(240.0)

    def test_gray(self):
        hsl = rgb_to_hsl(128, 128, 128)
        assert hsl.s == 0.0
        assert hsl.rounded() == HSLColor(0, 0, 50)

    def test_light_color_uses_upper_saturation_branch(self):
        hsl = rgb_to_hsl(204, 230, 255)
        assert hsl.l > 50.0
        assert hsl.s == pytest.approx(100.0)

    def test_hsl_to_rgb(self):
        assert hsl_to_rgb(0, 100, 50) == RGBColor(255, 0, 0)
        assert hsl_to_rgb(210, 50, 40) == RGBColor(51, 102, 153)

    def test_zero_saturation(self):
        assert hsl_to_rgb(123, 0, 100) == RGBColor(255, 255, 255)
        assert hsl_to_rgb(123, 0, 0) == RGBColor(0, 0, 0)

    def test_hsl_clamps(self):
        assert hsl_to_rgb(360, 200, 50) == RGBColor(255, 0, 0)

    def test_hsv_hsl_bridge(self):
        assert hsv_to_hsl(0, 100, 100) == HSLColor(0.0, 100.0, 50.0)
        assert hsl_to_hsv(0, 100, 50) == HSVColor(0.0, 100.0, 100.0)

    def test_hsv_hsl_bridge_keeps_precision(self):
        hsl = hsv_to_hsl(210, 66.66666666666667, 60)
        assert hsl.h == pytest.approx(210.0)
        assert hsl.s == pytest.approx(50.0)
        assert hsl.l == pytest.approx(40.0)


class TestCMYK:

    def test_black(self):
        assert rgb_to_cmyk(0, 0, 0) == CMYKColor(0, 0, 0, 100)

    def test_white(self):
        assert rgb_to_cmyk(255, 255, 255) == CMYKColor(0, 0, 0, 0)

    def test_red(self):
        assert rgb_to_cmyk(255, 0, 0) == CMYKColor(0, 100, 100, 0)

    def test_mid_color(self):
        assert rgb_to_cmyk(51, 102, 153) == CMYKColor(67, 33, 0, 40)

    def test_near_black_reports_pure_black(self):
        # K rounds to 100, so the residual inks are dropped
        assert rgb_to_cmyk(1, 0, 0) == CMYKColor(0, 0, 0, 100)

    def test_cmyk_to_rgb(self):
        assert cmyk_to_rgb(0, 0, 0, 100) == RGBColor(0, 0, 0)
        assert cmyk_to_rgb(0, 0, 0, 0) == RGBColor(255, 255, 255)
        assert cmyk_to_rgb(0, 100, 100, 0) == RGBColor(255, 0, 0)

    def test_cmyk_to_rgb_rounds_half_up(self):
        assert cmyk_to_rgb(50, 0, 0, 0) == RGBColor(128, 255, 255)

    def test_cmyk_to_rgb_clamps(self):
        assert cmyk_to_rgb(-10, 0, 0, 150) == RGBColor(0, 0, 0)


class TestHex:

    def test_encode(self):
        assert rgb_to_hex(255, 0, 128) == "#FF0080"

    def test_encode_with_alpha(self):
        assert rgb_to_hex(255, 0, 128, alpha=0.5) == "#FF008080"

    def test_opaque_alpha_omitted(self):
        assert rgb_to_hex(255, 0, 128, alpha=1.0) == "#FF0080"

    def test_encode_clamps(self):
        assert rgb_to_hex(300, -4, 15.6) == "#FF0010"

    def test_shorthand(self):
        assert hex_to_rgb("#FFF") == RGBColor(255, 255, 255)
        assert hex_to_rgb("0a9") == RGBColor(0, 170, 153)

    def test_full_form_case_insensitive(self):
        assert hex_to_rgb("#ff0080") == RGBColor(255, 0, 128)
        assert hex_to_rgb("FF0080") == RGBColor(255, 0, 128)

    @pytest.mark.parametrize(
        "text",
        ["not-a-color", "", "#", "#FFFF", "#12345G", "##FFF", "#FF000080", " #FFF", "FF 00 80"],
    )
    def test_malformed_returns_none(self, text):
        assert hex_to_rgb(text) is None

    def test_non_string_returns_none(self):
        assert hex_to_rgb(None) is None
        assert hex_to_rgb(0xFFFFFF) is None

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tinct.engine.colorspace"):
            hex_to_rgb("not-a-color")
        assert "not-a-color" in caplog.text

    def test_rgba_eight_digits(self):
        rgb, alpha = hex_to_rgba("#FF000080")
        assert rgb == RGBColor(255, 0, 0)
        assert alpha == pytest.approx(128 / 255)

    def test_rgba_short_forms_are_opaque(self):
        assert hex_to_rgba("#0F0") == (RGBColor(0, 255, 0), 1.0)
        assert hex_to_rgba("00FF00") == (RGBColor(0, 255, 0), 1.0)

    def test_rgba_malformed(self):
        assert hex_to_rgba("#FF00008") is None

    def test_hsv_and_hsl_to_hex(self):
        assert hsv_to_hex(0, 100, 100) == "#FF0000"
        assert hsl_to_hex(210, 50, 40) == "#336699"

    def test_roundtrip_grid(self):
        for r in range(0, 256, 17):
            for g in range(0, 256, 17):
                for b in range(0, 256, 17):
                    assert hex_to_rgb(rgb_to_hex(r, g, b)) == RGBColor(r, g, b)


class TestArrayKernels:

    def test_shapes_and_dtypes(self):
        pixels = np.zeros((4, 5, 3), dtype=np.uint8)
        hsv = rgb_to_hsv_array(pixels)
        assert hsv.shape == (4, 5, 3)
        assert hsv.dtype == np.float64
        back = hsv_to_rgb_array(hsv)
        assert back.shape == (4, 5, 3)
        assert back.dtype == np.uint8

    def test_matches_scalar(self):
        rng = np.random.RandomState(7)
        samples = rng.randint(0, 256, size=(200, 3))
        hsv = rgb_to_hsv_array(samples)
        hsl = rgb_to_hsl_array(samples)
        for i, (r, g, b) in enumerate(samples.tolist()):
            assert rgb_to_hsv(r, g, b).as_tuple() == tuple(hsv[i].tolist())
            assert rgb_to_hsl(r, g, b).as_tuple() == tuple(hsl[i].tolist())

    def test_hue_range(self):
        hsv = rgb_to_hsv_array(_rgb_slab(200))
        assert np.all(hsv[:, 0] >= 0.0)
        assert np.all(hsv[:, 0] < 360.0)


class TestFullCubeRoundtrip:
    """Every 8-bit RGB triple must survive a trip through HSV and HSL."""

    def test_hsv_roundtrip_exact(self):
        for red in range(256):
            rgb = _rgb_slab(red)
            np.testing.assert_array_equal(hsv_to_rgb_array(rgb_to_hsv_array(rgb)), rgb)

    def test_hsl_roundtrip_exact(self):
        for red in range(256):
            rgb = _rgb_slab(red)
            np.testing.assert_array_equal(hsl_to_rgb_array(rgb_to_hsl_array(rgb)), rgb)

    def test_hex_roundtrip_exact(self):
        # Channels encode and decode independently, so covering every
        # byte value in every position covers the whole cube.
        for v in range(256):
            assert hex_to_rgb(rgb_to_hex(v, v, v)) == RGBColor(v, v, v)
            for color in (RGBColor(v, 0, 255), RGBColor(255, v, 0), RGBColor(0, 255, v)):
                text = rgb_to_hex(*color)
                assert text == "#" + "".join(f"{c:02X}" for c in color)
                assert hex_to_rgb(text) == color
                assert hex_to_rgb(text.lower()) == color


class TestDeterminism:

    def test_repeated_calls_identical(self):
        assert rgb_to_hsv(12, 200, 99) == rgb_to_hsv(12, 200, 99)
        assert hsv_to_rgb(33.3, 44.4, 55.5) == hsv_to_rgb(33.3, 44.4, 55.5)
        assert rgb_to_cmyk(10, 20, 30) == rgb_to_cmyk(10, 20, 30)
