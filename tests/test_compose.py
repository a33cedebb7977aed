"""Tests for the 4-panel compositor"""

import numpy as np
import pytest

from cvdemo.compose import Compositor
from cvdemo.process import DemoProcessor
from cvdemo.synth import synthesize


class TestCompositor:

    def test_grid_is_twice_the_input(self):
        rng = np.random.default_rng(1)
        img = rng.integers(0, 256, size=(80, 120, 3), dtype=np.uint8)
        grid = Compositor().compose(img, DemoProcessor().run(img))
        assert grid.shape == (160, 240, 3)

    def test_panel_layout(self):
        img = synthesize(save_path=None)
        res = DemoProcessor().run(img)
        grid = Compositor().compose(img, res)
        h, w = img.shape[:2]
        # sample below the label strip of each panel
        assert np.array_equal(grid[h - 20:h, :w], img[h - 20:h])
        assert np.array_equal(grid[h - 20:h, w:, 0], res.edges[h - 20:h])
        assert np.array_equal(grid[2 * h - 20:, :w], res.contour_image[h - 20:])
        assert np.array_equal(grid[2 * h - 20:, w:], res.color_result[h - 20:])

    def test_labels_are_white(self):
        img = synthesize(save_path=None)
        grid = Compositor().compose(img, DemoProcessor().run(img))
        strip = grid[10:35, 10:110]
        assert np.all(strip == 255, axis=-1).any()

    def test_label_positions(self):
        assert Compositor().label_positions(600, 400) == [(10, 30), (610, 30), (10, 460), (610, 460)]

    def test_mismatched_panels_rejected(self):
        img = synthesize(save_path=None)
        res = DemoProcessor().run(img)
        res.color_result = res.color_result[:-1]
        with pytest.raises(ValueError):
            Compositor().compose(img, res)

    def test_save(self, tmp_path):
        img = synthesize(save_path=None)
        grid = Compositor().compose(img, DemoProcessor().run(img))
        p = Compositor.save(grid, str(tmp_path / "out.jpg"))
        assert (tmp_path / "out.jpg").exists()
        assert p.endswith("out.jpg")

    def test_needs_four_labels(self):
        with pytest.raises(ValueError):
            Compositor(labels=("a", "b"))
