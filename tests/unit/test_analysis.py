import sys
import unittest
from pathlib import Path

from PIL import Image, ImageDraw

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from guildcrest_renderer.analysis import accent_coverage, accent_mask, count_clusters, count_rosettes
from guildcrest_renderer.models import Point

RED = (255, 0, 0)


class AnalysisTests(unittest.TestCase):
    def test_coverage(self):
        img = Image.new("RGB", (10, 10), (0, 0, 0))
        ImageDraw.Draw(img).rectangle((0, 0, 4, 9), fill=RED)
        self.assertAlmostEqual(accent_coverage(img, RED), 0.5)

    def test_tolerance(self):
        img = Image.new("RGB", (2, 1), (250, 3, 0))
        self.assertFalse(accent_mask(img, RED).any())
        self.assertTrue(accent_mask(img, RED, tolerance=5).all())

    def test_clusters(self):
        img = Image.new("RGB", (30, 10), (0, 0, 0))
        draw = ImageDraw.Draw(img)
        for x in (0, 10, 25):
            draw.rectangle((x, 2, x + 2, 7), fill=RED)
        self.assertEqual(count_clusters(img, RED), 3)
        self.assertEqual(count_clusters(img, RED, band=(8, 10)), 0)

    def test_rosettes_need_every_vertex(self):
        img = Image.new("RGB", (60, 30), (0, 0, 0))
        draw = ImageDraw.Draw(img)
        draw.ellipse((5, 5, 25, 25), outline=RED, width=2)
        draw.arc((35, 5, 55, 25), start=0, end=180, fill=RED, width=2)
        centers = [Point(15, 15), Point(45, 15)]
        self.assertEqual(count_rosettes(img, RED, centers, 10), 1)

    def test_rosette_outside_image_not_counted(self):
        img = Image.new("RGB", (20, 20), RED)
        self.assertEqual(count_rosettes(img, RED, [Point(100, 100)], 5), 0)
        self.assertEqual(count_rosettes(img, RED, [], 5), 0)


if __name__ == "__main__":
    unittest.main()
