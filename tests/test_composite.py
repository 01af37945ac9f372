# Copyright (c) 2026 Swatcher
# SPDX-License-Identifier: MIT

"""Tests for the tile composite builder."""

import importlib
import itertools
import json

import numpy as np
import pytest

from swatcher import (
    Composite,
    CompositeTimeout,
    InvalidArgument,
    RGBColor,
    generate_composite,
    iter_composite,
    render_composite,
)

RED = RGBColor(255, 0, 0)


def _solid_image(r, g, b, height=8, width=8):
    return np.full((height, width, 3), [r, g, b], dtype=np.uint8)


def _quadrant_image():
    """8x8 image: top-left red, bottom-left green, top-right blue, bottom-right white."""
    img = np.zeros((8, 8, 3), dtype=np.uint8)
    img[:4, :4] = [255, 0, 0]
    img[4:, :4] = [0, 255, 0]
    img[:4, 4:] = [0, 0, 255]
    img[4:, 4:] = [255, 255, 255]
    return img


class TestSolidRedScenario:

    def test_four_tiles(self):
        composite = generate_composite(_solid_image(255, 0, 0), 4)
        assert isinstance(composite, Composite)
        assert len(composite) == 4
        assert (composite.columns, composite.rows) == (2, 2)

    def test_all_red(self):
        composite = generate_composite(_solid_image(255, 0, 0), 4)
        assert all(t.color == RED for t in composite)
        assert all(str(t.color) == "rgb(255, 0, 0)" for t in composite)

    def test_bounding_boxes_column_major(self):
        composite = generate_composite(_solid_image(255, 0, 0), 4)
        assert [(t.nw, t.se) for t in composite] == [
            ((0, 0), (4, 4)),
            ((0, 4), (4, 8)),
            ((4, 0), (8, 4)),
            ((4, 4), (8, 8)),
        ]


class TestTileGeometry:

    @pytest.mark.parametrize("width, height, size", [
        (8, 8, 4), (10, 7, 3), (9, 16, 4), (5, 5, 1), (12, 4, 4),
    ])
    def test_tile_count_and_shape(self, width, height, size):
        composite = generate_composite(_solid_image(1, 2, 3, height=height, width=width), size)
        assert len(composite) == (width // size) * (height // size)
        for tile in composite:
            assert (tile.se[0] - tile.nw[0], tile.se[1] - tile.nw[1]) == (size, size)
            assert tile.size == size

    def test_tiles_do_not_overlap(self):
        composite = generate_composite(_solid_image(1, 2, 3, height=10, width=13), 3)
        covered = set()
        for tile in composite:
            pixels = {
                (x, y)
                for x in range(tile.nw[0], tile.se[0])
                for y in range(tile.nw[1], tile.se[1])
            }
            assert not covered & pixels
            covered |= pixels

    def test_remainder_strip_dropped(self):
        composite = generate_composite(_solid_image(1, 2, 3, height=7, width=10), 3)
        assert (composite.columns, composite.rows) == (3, 2)
        assert max(t.se[0] for t in composite) == 9
        assert max(t.se[1] for t in composite) == 6

    def test_tile_larger_than_image_is_empty(self):
        composite = generate_composite(_solid_image(1, 2, 3, height=8, width=8), 9)
        assert len(composite) == 0
        assert (composite.columns, composite.rows) == (0, 0)

    def test_tile_taller_than_image_is_empty(self):
        composite = generate_composite(_solid_image(1, 2, 3, height=3, width=20), 4)
        assert len(composite) == 0
        assert composite.columns == 5

    def test_column_and_row_indices(self):
        composite = generate_composite(_solid_image(1, 2, 3, height=6, width=9), 3)
        assert [(t.column, t.row) for t in composite] == [
            (0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1),
        ]
        assert composite.get_tile(2, 1).nw == (6, 3)


class TestTileColors:

    def test_quadrants(self):
        composite = generate_composite(_quadrant_image(), 4)
        assert [t.color.as_tuple() for t in composite] == [
            (255, 0, 0),
            (0, 255, 0),
            (0, 0, 255),
            (255, 255, 255),
        ]

    def test_tile_dominant_uses_full_scan_by_default(self):
        img = _solid_image(255, 0, 0, height=4, width=4)
        img[0, 0] = [0, 0, 255]
        # stride 4 would only see the blue corner
        composite = generate_composite(img, 4)
        assert composite.tiles[0].color == RED
        assert composite.stride == 1

    def test_tile_stride_is_explicit(self):
        img = _solid_image(255, 0, 0, height=4, width=4)
        img[0, 0] = [0, 0, 255]
        composite = generate_composite(img, 4, stride=4)
        assert composite.tiles[0].color == RGBColor(0, 0, 255)


class TestIterComposite:

    def test_is_single_use(self):
        tiles = iter_composite(_solid_image(255, 0, 0), 4)
        assert len(list(tiles)) == 4
        assert list(tiles) == []

    def test_matches_generate(self):
        img = _quadrant_image()
        assert tuple(iter_composite(img, 2)) == generate_composite(img, 2).tiles

    @pytest.mark.parametrize("size", [0, -4, 2.5])
    def test_invalid_size_raises_immediately(self, size):
        with pytest.raises(InvalidArgument, match="Tile size"):
            iter_composite(_solid_image(1, 2, 3), size)

    def test_invalid_stride_raises(self):
        with pytest.raises(InvalidArgument, match="Stride"):
            generate_composite(_solid_image(1, 2, 3), 4, stride=0)

    def test_invalid_deadline_raises(self):
        with pytest.raises(InvalidArgument, match="Deadline"):
            iter_composite(_solid_image(1, 2, 3), 4, deadline=0)

    def test_numpy_integer_arguments_serialize(self):
        composite = generate_composite(_solid_image(255, 0, 0), np.int64(4), stride=np.int64(2))
        assert type(composite.stride) is int
        assert type(composite.tile_size) is int
        data = json.loads(composite.to_json())
        assert (data["tile_size"], data["stride"]) == (4, 2)
        assert Composite.from_json(composite.to_json()) == composite


class TestDeadline:

    def _fake_clock(self, monkeypatch, readings):
        composite_module = importlib.import_module("swatcher.measure.composite")
        clock = itertools.chain(readings, itertools.repeat(readings[-1]))
        monkeypatch.setattr(composite_module.time, "monotonic", lambda: next(clock))

    def test_timeout_after_budget(self, monkeypatch):
        # start, tile 0, tile 1, then the clock jumps past the budget
        self._fake_clock(monkeypatch, [0.0, 0.0, 0.5, 100.0])
        tiles = iter_composite(_solid_image(255, 0, 0), 4, deadline=1.0)
        assert next(tiles).nw == (0, 0)
        assert next(tiles).nw == (0, 4)
        with pytest.raises(CompositeTimeout, match="after 2 of 4 tiles"):
            next(tiles)

    def test_timeout_is_a_timeout_error(self, monkeypatch):
        self._fake_clock(monkeypatch, [0.0, 100.0])
        with pytest.raises(TimeoutError):
            generate_composite(_solid_image(255, 0, 0), 4, deadline=1.0)

    def test_within_budget_completes(self, monkeypatch):
        self._fake_clock(monkeypatch, [0.0])
        composite = generate_composite(_solid_image(255, 0, 0), 4, deadline=1.0)
        assert len(composite) == 4


class TestRenderComposite:

    def test_full_scale(self):
        image = render_composite(generate_composite(_quadrant_image(), 4))
        assert image.size == (8, 8)
        assert image.mode == "RGB"
        assert image.getpixel((0, 0)) == (255, 0, 0)
        assert image.getpixel((0, 7)) == (0, 255, 0)
        assert image.getpixel((7, 0)) == (0, 0, 255)
        assert image.getpixel((7, 7)) == (255, 255, 255)

    def test_one_pixel_per_tile(self):
        image = render_composite(generate_composite(_quadrant_image(), 4), scale=1)
        assert image.size == (2, 2)
        assert image.getpixel((1, 0)) == (0, 0, 255)

    def test_matches_original_for_blocky_image(self):
        img = _quadrant_image()
        rendered = np.array(render_composite(generate_composite(img, 4)))
        np.testing.assert_array_equal(rendered, img)

    def test_empty_composite_raises(self):
        with pytest.raises(InvalidArgument, match="empty"):
            render_composite(generate_composite(_solid_image(1, 2, 3), 16))

    def test_invalid_scale_raises(self):
        with pytest.raises(InvalidArgument, match="Scale"):
            render_composite(generate_composite(_quadrant_image(), 4), scale=0)
