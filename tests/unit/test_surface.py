import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from guildcrest_renderer.models import InvalidParameterError, Point, StrokeStyle
from guildcrest_renderer.surface import CompositeMode, Layer, Surface

GREEN = (13, 61, 43)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


class SurfaceTests(unittest.TestCase):
    def test_create_is_transparent(self):
        surface = Surface.create(8, 4)
        image = surface.to_image()
        self.assertEqual(image.size, (8, 4))
        self.assertEqual(image.getpixel((0, 0)), (0, 0, 0, 0))

    def test_create_rejects_bad_size(self):
        with self.assertRaises(InvalidParameterError):
            Surface.create(0, 4)

    def test_fill_background(self):
        surface = Surface.create(6, 6)
        surface.fill_background(GREEN)
        self.assertEqual(surface.to_image().getpixel((5, 5)), GREEN + (255,))

    def test_out_of_range_drawing_is_clipped(self):
        surface = Surface.create(10, 10)
        surface.fill_background(GREEN)
        surface.fill_circle(Point(-100, -100), 5, RED)
        surface.stroke_path([(Point(-50, 5), Point(-10, 5))], StrokeStyle(RED, 2, cap="butt"))
        surface.fill_rect((20, 20, 40, 40), RED)
        self.assertEqual(surface.to_image().getcolors(), [(100, GREEN + (255,))])

    def test_destination_over_paints_behind_ink_but_above_ground(self):
        surface = Surface.create(10, 10)
        surface.fill_background(GREEN)
        style_red = StrokeStyle(RED, 1, cap="butt")
        style_blue = StrokeStyle(BLUE, 1, cap="butt")
        surface.stroke_path([(Point(0, 5), Point(9, 5))], style_red)
        with surface.composite(CompositeMode.DESTINATION_OVER):
            surface.stroke_path([(Point(5, 0), Point(5, 9))], style_blue)
        self.assertIs(surface.composite_mode, CompositeMode.SOURCE_OVER)

        image = surface.to_image()
        self.assertEqual(image.getpixel((5, 5)), RED + (255,))
        self.assertEqual(image.getpixel((5, 2)), BLUE + (255,))
        self.assertEqual(image.getpixel((1, 1)), GREEN + (255,))

    def test_source_over_paints_on_top(self):
        surface = Surface.create(10, 10)
        surface.stroke_path([(Point(0, 5), Point(9, 5))], StrokeStyle(RED, 1, cap="butt"))
        surface.stroke_path([(Point(5, 0), Point(5, 9))], StrokeStyle(BLUE, 1, cap="butt"))
        self.assertEqual(surface.to_image().getpixel((5, 5)), BLUE + (255,))

    def test_alpha_context_restores_opacity(self):
        surface = Surface.create(4, 4)
        surface.fill_background((255, 255, 255))
        with surface.alpha(0.5):
            self.assertEqual(surface.global_alpha, 0.5)
            surface.fill_rect((0, 0, 4, 4), (0, 0, 0))
        self.assertEqual(surface.global_alpha, 1.0)
        r, g, b, a = surface.to_image().getpixel((1, 1))
        self.assertEqual(a, 255)
        self.assertTrue(120 <= r <= 135)

    def test_drawing_on_restores_layer(self):
        surface = Surface.create(4, 4)
        with surface.drawing_on(Layer.GROUND):
            self.assertIs(surface.layer, Layer.GROUND)
        self.assertIs(surface.layer, Layer.INK)


if __name__ == "__main__":
    unittest.main()
