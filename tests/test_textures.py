"""
Tests for background texture loading.
"""

import os
import tempfile
import unittest

import pygfx as gfx
from PIL import Image

from core.textures import TextureLoader, read_image

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def save_banded_image(path, top=RED, bottom=BLUE, size=(8, 4)):
    """Write an image whose top half is ``top`` and bottom half is ``bottom``."""
    width, height = size
    img = Image.new("RGBA", size, bottom)
    img.paste(Image.new("RGBA", (width, height // 2), top), (0, 0))
    img.save(path)


class TestReadImage(unittest.TestCase):
    """Tests for image decoding and row orientation."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_read_image_is_rgba(self):
        """Decoded data is (height, width, 4) uint8 with alpha kept."""
        path = os.path.join(self.tmpdir.name, "land.png")
        Image.new("RGBA", (4, 2), (255, 0, 0, 128)).save(path)
        data = read_image(path)
        self.assertEqual(data.shape, (2, 4, 4))
        self.assertEqual(tuple(data[0, 0]), (255, 0, 0, 128))

    def test_image_top_lands_on_last_row(self):
        """Row 0 samples v=0 (south), so the image top must be the last row."""
        path = os.path.join(self.tmpdir.name, "bands.png")
        save_banded_image(path)
        data = read_image(path)
        self.assertEqual(tuple(data[-1, 0]), RED)
        self.assertEqual(tuple(data[0, 0]), BLUE)

    def test_rgb_image_gains_opaque_alpha(self):
        """Images without alpha decode as fully opaque RGBA."""
        path = os.path.join(self.tmpdir.name, "bg.png")
        Image.new("RGB", (3, 3), (10, 20, 30)).save(path)
        self.assertEqual(tuple(read_image(path)[1, 1]), (10, 20, 30, 255))


class TestTextureLoader(unittest.TestCase):
    """Tests for the asynchronous loader and its per-frame hand-over."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "land.png")
        Image.new("RGBA", (4, 2), (255, 0, 0, 128)).save(self.path)
        self.loader = TextureLoader()

    def tearDown(self):
        self.loader.shutdown()
        self.tmpdir.cleanup()

    def test_material_untextured_until_applied(self):
        """A finished load only reaches the material through apply_ready()."""
        material = gfx.MeshPhongMaterial()
        request = self.loader.request(self.path, material)
        request.future.result(timeout=5)
        self.assertIsNone(material.map)

        self.assertEqual(self.loader.apply_ready(), 1)
        self.assertIsNotNone(material.map)
        self.assertEqual(self.loader.pending, 0)

    def test_missing_file_degrades_silently(self):
        """A missing file logs a warning and leaves the material untextured."""
        material = gfx.MeshBasicMaterial()
        request = self.loader.request(os.path.join(self.tmpdir.name, "nope.png"), material)
        with self.assertRaises(Exception):
            request.future.result(timeout=5)

        with self.assertLogs("core.textures", level="WARNING"):
            self.assertEqual(self.loader.apply_ready(), 0)
        self.assertIsNone(material.map)
        self.assertEqual(self.loader.pending, 0)

    def test_apply_ready_without_requests(self):
        """Polling with nothing requested is a no-op."""
        self.assertEqual(self.loader.apply_ready(), 0)


if __name__ == "__main__":
    unittest.main()
