"""RGBA drawing surface with canvas-style compositing."""

from __future__ import annotations

import math
from contextlib import contextmanager
from enum import Enum
from functools import lru_cache
from typing import Callable, Iterator, Sequence

from PIL import Image, ImageDraw, ImageFont

from .models import RGB, CanvasSize, Point, StrokeStyle

Segment = tuple[Point, Point]
Painter = Callable[[ImageDraw.ImageDraw, tuple[int, int]], None]


class CompositeMode(str, Enum):
    SOURCE_OVER = "source-over"
    DESTINATION_OVER = "destination-over"


class Layer(str, Enum):
    GROUND = "ground"
    INK = "ink"


@lru_cache(maxsize=32)
def _alpha_lut(k: float) -> list[int]:
    return [round(a * k) for a in range(256)]


def _rgba(color: RGB) -> tuple[int, int, int, int]:
    return (color[0], color[1], color[2], 255)


class Surface:
    """Fixed-size canvas split into a ground layer and an ink layer.

    Background fill and grain go to the ground. Motifs and text go to the ink
    layer, where ``DESTINATION_OVER`` slides new strokes underneath what is
    already drawn while still sitting above the ground. Every primitive is
    rasterized on a scratch layer the size of its clipped bounding box and then
    composited, so shapes falling outside the canvas are simply cut off.
    """

    def __init__(self, width: int, height: int) -> None:
        size = CanvasSize(width, height)
        self.width = size.width
        self.height = size.height
        self.composite_mode = CompositeMode.SOURCE_OVER
        self.global_alpha = 1.0
        self.layer = Layer.INK
        self._ground = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        self._ink = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))

    @classmethod
    def create(cls, width: int, height: int) -> "Surface":
        return cls(width, height)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def set_composite_mode(self, mode: CompositeMode) -> None:
        self.composite_mode = CompositeMode(mode)

    @contextmanager
    def composite(self, mode: CompositeMode) -> Iterator["Surface"]:
        previous = self.composite_mode
        self.set_composite_mode(mode)
        try:
            yield self
        finally:
            self.composite_mode = previous

    @contextmanager
    def alpha(self, value: float) -> Iterator["Surface"]:
        previous = self.global_alpha
        self.global_alpha = max(0.0, min(1.0, float(value)))
        try:
            yield self
        finally:
            self.global_alpha = previous

    @contextmanager
    def drawing_on(self, layer: Layer) -> Iterator["Surface"]:
        previous = self.layer
        self.layer = Layer(layer)
        try:
            yield self
        finally:
            self.layer = previous

    def fill_background(self, color: RGB) -> None:
        with self.drawing_on(Layer.GROUND):
            self.fill_rect((0, 0, self.width, self.height), color)

    def fill_rect(self, box: tuple[float, float, float, float], color: RGB) -> None:
        x0, y0, x1, y1 = box

        def painter(draw: ImageDraw.ImageDraw, origin: tuple[int, int]) -> None:
            ox, oy = origin
            left, top = x0 - ox, y0 - oy
            draw.rectangle((left, top, max(left, x1 - ox - 1), max(top, y1 - oy - 1)), fill=_rgba(color))

        self._paint((x0, y0, x1, y1), painter)

    def fill_circle(self, center: Point, radius: float, color: RGB) -> None:
        r = max(0.0, radius)

        def painter(draw: ImageDraw.ImageDraw, origin: tuple[int, int]) -> None:
            cx, cy = center.x - origin[0], center.y - origin[1]
            draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=_rgba(color))

        self._paint((center.x - r, center.y - r, center.x + r, center.y + r), painter)

    def stroke_path(self, segments: Sequence[Segment], style: StrokeStyle) -> None:
        if not segments:
            return
        half = style.width / 2
        xs = [p.x for seg in segments for p in seg]
        ys = [p.y for seg in segments for p in seg]
        line_width = max(1, round(style.width))
        fill = _rgba(style.color)

        def painter(draw: ImageDraw.ImageDraw, origin: tuple[int, int]) -> None:
            ox, oy = origin
            for start, end in segments:
                a = (start.x - ox, start.y - oy)
                b = (end.x - ox, end.y - oy)
                draw.line([a, b], fill=fill, width=line_width)
                if style.cap == "round":
                    for px, py in (a, b):
                        draw.ellipse((px - half, py - half, px + half, py + half), fill=fill)

        self._paint((min(xs) - half, min(ys) - half, max(xs) + half, max(ys) + half), painter)

    def fill_text(
        self,
        text: str,
        anchor: Point,
        font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
        color: RGB,
        baseline: str = "top",
        direction: str | None = None,
    ) -> None:
        if not text:
            return
        probe = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
        left, top, right, bottom = probe.textbbox((0, 0), text, font=font, direction=direction)
        ox = anchor.x - (right - left) / 2 - left
        if baseline == "middle":
            oy = anchor.y - (top + bottom) / 2
        else:
            oy = anchor.y

        def painter(draw: ImageDraw.ImageDraw, origin: tuple[int, int]) -> None:
            draw.text((ox - origin[0], oy - origin[1]), text, font=font, fill=_rgba(color), direction=direction)

        self._paint((ox + left, oy + top, ox + right, oy + bottom), painter)

    def to_image(self) -> Image.Image:
        return Image.alpha_composite(self._ground, self._ink)

    def _paint(self, box: tuple[float, float, float, float], painter: Painter) -> None:
        x0, y0, x1, y1 = box
        left = max(0, math.floor(x0))
        top = max(0, math.floor(y0))
        right = min(self.width, math.ceil(x1) + 1)
        bottom = min(self.height, math.ceil(y1) + 1)
        if right <= left or bottom <= top:
            return

        scratch = Image.new("RGBA", (right - left, bottom - top), (0, 0, 0, 0))
        painter(ImageDraw.Draw(scratch), (left, top))
        if self.global_alpha < 1.0:
            scratch.putalpha(scratch.getchannel("A").point(_alpha_lut(self.global_alpha)))

        target = self._ground if self.layer is Layer.GROUND else self._ink
        if self.composite_mode is CompositeMode.SOURCE_OVER:
            target.alpha_composite(scratch, dest=(left, top))
        else:
            region = target.crop((left, top, right, bottom))
            target.paste(Image.alpha_composite(scratch, region), (left, top))
