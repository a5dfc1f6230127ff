# Copyright (c) 2026 Tinct
# SPDX-License-Identifier: MIT

"""Tests for color vision deficiency simulation."""

import logging

import numpy as np
import pytest

from tinct.engine.vision import (
    SIMULATION_MATRICES,
    VisionDeficiency,
    simulate_all,
    simulate_array,
    simulate_color_blindness,
)
from tinct.schema import RGBColor


class TestIdentity:

    def test_normal_is_identity(self):
        rng = np.random.RandomState(11)
        for r, g, b in rng.randint(0, 256, (100, 3)).tolist():
            assert simulate_color_blindness(r, g, b, "normal") == RGBColor(r, g, b)

    def test_unknown_variant_is_identity(self):
        assert simulate_color_blindness(10, 20, 30, "deuteranomaly-x") == RGBColor(10, 20, 30)

    def test_unknown_variant_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tinct.engine.vision"):
            simulate_color_blindness(10, 20, 30, "bogus")
        assert "bogus" in caplog.text

    def test_normal_clamps_input(self):
        assert simulate_color_blindness(300, -5, 0, "normal") == RGBColor(255, 0, 0)


class TestMatrices:

    def test_achromatopsia_red(self):
        assert simulate_color_blindness(255, 0, 0, "achromatopsia") == RGBColor(76, 76, 76)

    def test_achromatopsia_always_gray(self):
        rng = np.random.RandomState(5)
        out = simulate_array(rng.randint(0, 256, (500, 3)), VisionDeficiency.ACHROMATOPSIA)
        assert np.all(out[:, 0] == out[:, 1])
        assert np.all(out[:, 1] == out[:, 2])

    def test_protanopia_red(self):
        assert simulate_color_blindness(255, 0, 0, "protanopia") == RGBColor(145, 142, 0)

    def test_tritanopia_blue(self):
        assert simulate_color_blindness(0, 0, 255, "tritanopia") == RGBColor(0, 145, 134)

    def test_protanomaly_red(self):
        assert simulate_color_blindness(255, 0, 0, "protanomaly") == RGBColor(208, 85, 0)

    @pytest.mark.parametrize("variant", list(VisionDeficiency))
    def test_black_and_white_fixed(self, variant):
        assert simulate_color_blindness(0, 0, 0, variant) == RGBColor(0, 0, 0)
        assert simulate_color_blindness(255, 255, 255, variant) == RGBColor(255, 255, 255)

    def test_matrices_read_only(self):
        with pytest.raises(ValueError):
            SIMULATION_MATRICES[VisionDeficiency.PROTANOPIA][0, 0] = 1.0

    def test_variant_name_case_insensitive(self):
        assert simulate_color_blindness(255, 0, 0, "Protanopia") == RGBColor(145, 142, 0)


class TestArraySimulation:

    def test_shape_and_dtype(self):
        img = np.full((8, 6, 3), [255, 0, 0], dtype=np.uint8)
        out = simulate_array(img, "deuteranopia")
        assert out.shape == (8, 6, 3)
        assert out.dtype == np.uint8

    def test_matches_scalar(self):
        rng = np.random.RandomState(9)
        samples = rng.randint(0, 256, (100, 3))
        for variant in VisionDeficiency:
            out = simulate_array(samples, variant)
            for i, (r, g, b) in enumerate(samples.tolist()):
                assert simulate_color_blindness(r, g, b, variant).as_tuple() == tuple(out[i].tolist())

    def test_unknown_variant_passthrough(self):
        samples = np.array([[1, 2, 3], [250, 100, 0]], dtype=np.uint8)
        np.testing.assert_array_equal(simulate_array(samples, "nope"), samples)


class TestSimulateAll:

    def test_covers_every_variant(self):
        results = simulate_all(255, 0, 0)
        assert list(results) == list(VisionDeficiency)
        assert results[VisionDeficiency.NORMAL] == RGBColor(255, 0, 0)
        assert results[VisionDeficiency.ACHROMATOPSIA] == RGBColor(76, 76, 76)
