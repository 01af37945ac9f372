# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""Tests for the Swatcher session facade."""

import numpy as np
import pytest
from PIL import Image

from swatcher import (
    Accuracy,
    InvalidArgument,
    OutOfRange,
    Region,
    RGBColor,
    Swatcher,
    SwatcherConfig,
)

RED = RGBColor(255, 0, 0)
BLUE = RGBColor(0, 0, 255)


def _red_with_blue_corner(height=4, width=4):
    img = np.full((height, width, 3), [255, 0, 0], dtype=np.uint8)
    img[0, 0] = [0, 0, 255]
    return img


class TestConstruction:

    def test_default_accuracy_is_low(self):
        s = Swatcher(_red_with_blue_corner())
        assert s.accuracy is Accuracy.LOW
        assert s.stride == 4

    def test_accuracy_label(self):
        assert Swatcher(_red_with_blue_corner(), "Medium").stride == 2

    def test_unknown_accuracy_rejected(self):
        with pytest.raises(InvalidArgument):
            Swatcher(_red_with_blue_corner(), "Extreme")

    def test_image_attributes(self, tmp_path):
        path = tmp_path / "img.png"
        Image.fromarray(_red_with_blue_corner(height=3, width=5)).save(path)
        s = Swatcher(path)
        assert (s.width, s.height, s.format) == (5, 3, "PNG")

    def test_from_config(self):
        config = SwatcherConfig(accuracy=Accuracy.HIGH, tile_stride=2, composite_deadline=3.0)
        s = Swatcher.from_config(_red_with_blue_corner(), config)
        assert s.stride == 1
        assert s.tile_stride == 2
        assert s.composite_deadline == 3.0


class TestAnalyze:

    def test_whole_image_at_high(self):
        tally = Swatcher(_red_with_blue_corner(), "High").analyze_pixels()
        assert tally.as_dict() == {"rgb(255, 0, 0)": 15, "rgb(0, 0, 255)": 1}

    def test_low_accuracy_subsamples(self):
        tally = Swatcher(_red_with_blue_corner(), "Low").analyze_pixels()
        assert tally.total == 1
        assert tally.colors == (BLUE,)

    def test_square_section(self):
        tally = Swatcher(_red_with_blue_corner(), "High").analyze_pixels((1, 1), 2)
        assert tally.region == Region(1, 1, 2, 2)
        assert tally.as_dict() == {"rgb(255, 0, 0)": 4}

    def test_section_defaults_to_far_edges(self):
        tally = Swatcher(_red_with_blue_corner(), "High").analyze_pixels((1, 2))
        assert tally.region == Region(1, 2, 3, 2)

    def test_explicit_width_height(self):
        tally = Swatcher(_red_with_blue_corner(), "High").analyze_pixels((0, 0), width=1, height=4)
        assert tally.total == 4

    def test_section_out_of_range(self):
        with pytest.raises(OutOfRange):
            Swatcher(_red_with_blue_corner(), "High").analyze_pixels((2, 2), 3)

    @pytest.mark.parametrize("nw", [(20, 20), (4, 0), (0, 4), (-1, 0)])
    def test_corner_outside_image_without_size(self, nw):
        with pytest.raises(OutOfRange, match="outside 4x4"):
            Swatcher(_red_with_blue_corner(), "High").analyze_pixels(nw)

    def test_corner_outside_image_with_explicit_width(self):
        with pytest.raises(OutOfRange):
            Swatcher(_red_with_blue_corner(), "High").analyze_pixels((9, 0), width=1)


class TestSwatches:

    def test_top_swatches(self):
        s = Swatcher(_red_with_blue_corner(), "High")
        assert s.top_swatches(2) == (RED, BLUE)

    def test_top_one_is_tuple(self):
        assert Swatcher(_red_with_blue_corner(), "High").top_swatches(1) == (RED,)

    def test_dominant(self):
        assert str(Swatcher(_red_with_blue_corner(), "High").dominant()) == "rgb(255, 0, 0)"

    def test_too_many_swatches(self):
        with pytest.raises(OutOfRange):
            Swatcher(_red_with_blue_corner(), "High").top_swatches(3)


class TestComposite:

    def test_tile_stride_independent_of_accuracy(self):
        s = Swatcher(_red_with_blue_corner(height=8, width=8), "Low")
        composite = s.generate_composite(4)
        assert composite.tiles[0].color == RED
        assert len(composite) == 4

    def test_configured_tile_stride(self):
        s = Swatcher(_red_with_blue_corner(height=8, width=8), tile_stride=4)
        assert s.generate_composite(4).tiles[0].color == BLUE

    def test_iter_composite(self):
        s = Swatcher(_red_with_blue_corner(height=8, width=8))
        assert [t.nw for t in s.iter_composite(4)] == [(0, 0), (0, 4), (4, 0), (4, 4)]

    def test_invalid_tile_size(self):
        with pytest.raises(InvalidArgument):
            Swatcher(_red_with_blue_corner()).generate_composite(0)
