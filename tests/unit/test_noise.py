import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from guildcrest_renderer.models import NoiseSpec
from guildcrest_renderer.noise import apply_noise
from guildcrest_renderer.surface import Layer, Surface

GREEN = (13, 61, 43)


def _textured(seed, spec=NoiseSpec(dots=500)):
    surface = Surface.create(64, 64)
    surface.fill_background(GREEN)
    apply_noise(surface, spec, random.Random(seed))
    return surface


class NoiseTests(unittest.TestCase):
    def test_seeded_noise_is_reproducible(self):
        a = _textured(42).to_image().tobytes()
        b = _textured(42).to_image().tobytes()
        self.assertEqual(a, b)

    def test_different_seeds_differ(self):
        a = _textured(1, NoiseSpec(dots=2000, max_radius=2.0)).to_image().tobytes()
        b = _textured(2, NoiseSpec(dots=2000, max_radius=2.0)).to_image().tobytes()
        self.assertNotEqual(a, b)

    def test_no_dots_keeps_background(self):
        image = _textured(3, NoiseSpec(dots=0)).to_image()
        self.assertEqual(image.getcolors(), [(64 * 64, GREEN + (255,))])

    def test_state_restored(self):
        surface = _textured(4)
        self.assertEqual(surface.global_alpha, 1.0)
        self.assertIs(surface.layer, Layer.INK)

    def test_grain_is_faint(self):
        image = _textured(5, NoiseSpec(dots=1000, max_radius=1.5)).to_image().convert("RGB")
        for _, color in image.getcolors(64 * 64):
            for got, base in zip(color, GREEN):
                self.assertLessEqual(base - got, 30)
                self.assertGreaterEqual(base - got, 0)


if __name__ == "__main__":
    unittest.main()
