import sys
import unittest
from pathlib import Path
from unittest.mock import patch

import arabic_reshaper
from bidi.algorithm import get_display

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from guildcrest_renderer.models import Point, TextSpec
from guildcrest_renderer.surface import Surface
from guildcrest_renderer import text as text_module
from guildcrest_renderer.text import _candidate_files, draw_text, layout_text, resolve_font

GOLD = (212, 175, 55)
SUBTITLE = "مجتمع المسلمين"


class FontResolutionTests(unittest.TestCase):
    def test_missing_family_falls_back(self):
        font = resolve_font(["Definitely Not Installed"], 24)
        self.assertIsNotNone(font)

    def test_zero_size_is_clamped(self):
        self.assertIsNotNone(resolve_font(["serif"], 0, weight="bold"))

    def test_unknown_family_file_names(self):
        self.assertEqual(_candidate_files("Open Sans", "bold"), ("OpenSans-Bold.ttf", "OpenSans-Regular.ttf"))
        self.assertIn("Amiri-Regular.ttf", _candidate_files("Amiri", "normal"))


class DrawTextTests(unittest.TestCase):
    def test_text_is_centered_horizontally(self):
        surface = Surface.create(300, 100)
        spec = TextSpec("MMMM", ("serif",), 32, Point(150, 20), weight="bold")
        draw_text(surface, [spec], GOLD)
        bbox = surface.to_image().getbbox()
        self.assertIsNotNone(bbox)
        left, top, right, _ = bbox
        self.assertLessEqual(abs((left + right) / 2 - 150), 4)
        self.assertGreaterEqual(top, 18)

    def test_middle_baseline_centers_vertically(self):
        surface = Surface.create(300, 100)
        draw_text(surface, [TextSpec("HHHH", ("serif",), 30, Point(150, 50), baseline="middle")], GOLD)
        _, top, _, bottom = surface.to_image().getbbox()
        self.assertLessEqual(abs((top + bottom) / 2 - 50), 4)

    def test_empty_content_is_skipped(self):
        surface = Surface.create(50, 50)
        draw_text(surface, [TextSpec("", ("serif",), 20, Point(25, 25))], GOLD)
        self.assertIsNone(surface.to_image().getbbox())


class RightToLeftTests(unittest.TestCase):
    def _spec(self, direction):
        return TextSpec(SUBTITLE, ("Amiri",), 24, Point(100, 10), direction=direction)

    def test_shaped_without_layout_engine(self):
        content, direction = layout_text(self._spec("rtl"), rtl_engine=False)
        self.assertIsNone(direction)
        self.assertEqual(content, get_display(arabic_reshaper.reshape(SUBTITLE)))
        self.assertNotEqual(content, SUBTITLE)

    def test_left_to_right_left_alone(self):
        self.assertEqual(layout_text(self._spec(None), rtl_engine=False), (SUBTITLE, None))

    def test_layout_engine_gets_logical_text(self):
        self.assertEqual(layout_text(self._spec("rtl"), rtl_engine=True), (SUBTITLE, "rtl"))

    def test_rtl_and_ltr_specs_draw_different_strings(self):
        drawn = []

        def record(_surface, content, *args, **kwargs):
            drawn.append((content, kwargs.get("direction")))

        surface = Surface.create(200, 60)
        with patch.object(text_module, "supports_rtl", return_value=False), patch.object(Surface, "fill_text", record):
            draw_text(surface, [self._spec("rtl"), self._spec(None)], GOLD)
        (rtl_content, rtl_direction), (ltr_content, _) = drawn
        self.assertNotEqual(rtl_content, ltr_content)
        self.assertEqual(ltr_content, SUBTITLE)
        self.assertIsNone(rtl_direction)


if __name__ == "__main__":
    unittest.main()
