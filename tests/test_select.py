# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""Tests for top swatch selection."""

import numpy as np
import pytest

from swatcher import (
    InvalidArgument,
    OutOfRange,
    Region,
    RGBColor,
    analyze_pixels,
    dominant_swatch,
    top_swatches,
)


def _striped_image():
    """6 columns: 3 red, 2 green, 1 blue; 2 rows."""
    img = np.zeros((2, 6, 3), dtype=np.uint8)
    img[:, :3] = [255, 0, 0]
    img[:, 3:5] = [0, 255, 0]
    img[:, 5:] = [0, 0, 255]
    return img


@pytest.fixture
def tally():
    return analyze_pixels(_striped_image(), stride=1)


class TestTopSwatches:

    def test_returns_ranked_tuple(self, tally):
        assert top_swatches(tally, 3) == (
            RGBColor(255, 0, 0),
            RGBColor(0, 255, 0),
            RGBColor(0, 0, 255),
        )

    def test_truncates_to_n(self, tally):
        assert top_swatches(tally, 2) == (RGBColor(255, 0, 0), RGBColor(0, 255, 0))

    def test_single_is_still_a_tuple(self, tally):
        result = top_swatches(tally, 1)
        assert isinstance(result, tuple)
        assert result == (RGBColor(255, 0, 0),)

    def test_too_many_raises(self, tally):
        with pytest.raises(OutOfRange, match="only 3 distinct"):
            top_swatches(tally, 4)

    def test_too_many_is_an_index_error(self, tally):
        with pytest.raises(IndexError):
            top_swatches(tally, 10)

    @pytest.mark.parametrize("n", [0, -2, 2.0])
    def test_invalid_count_raises(self, tally, n):
        with pytest.raises(InvalidArgument):
            top_swatches(tally, n)


class TestDominantSwatch:

    def test_most_frequent(self, tally):
        assert dominant_swatch(tally) == RGBColor(255, 0, 0)
        assert str(dominant_swatch(tally)) == "rgb(255, 0, 0)"

    def test_matches_top_one(self, tally):
        assert (dominant_swatch(tally),) == top_swatches(tally, 1)

    def test_tie_goes_to_first_seen(self):
        img = np.zeros((1, 2, 3), dtype=np.uint8)
        img[0, 0] = [0, 255, 0]
        img[0, 1] = [255, 0, 0]
        assert dominant_swatch(analyze_pixels(img, stride=1)) == RGBColor(0, 255, 0)

    def test_maximum_count_over_random_images(self):
        rng = np.random.default_rng(0)
        for _ in range(10):
            palette = rng.integers(0, 256, size=(4, 3), dtype=np.uint8)
            img = palette[rng.integers(0, 4, size=(9, 9))]
            tally = analyze_pixels(img, stride=1)
            best = max(e.count for e in tally)
            assert tally.count_of(dominant_swatch(tally)) == best

    def test_empty_tally_raises(self):
        img = np.zeros((4, 4, 3), dtype=np.uint8)
        empty = analyze_pixels(img, Region(0, 0, 0, 0), stride=1)
        with pytest.raises(OutOfRange, match="empty"):
            dominant_swatch(empty)
