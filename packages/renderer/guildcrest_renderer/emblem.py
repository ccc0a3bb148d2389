"""Logo and banner composer for community branding."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from PIL import Image

from .encoder import encode
from .models import BrandText, CanvasSize, ImageBuffer, LatticeSpec, NoiseSpec, Palette, Point, StarSpec, StrokeStyle, TextSpec
from .motifs import draw_border, draw_lattice, draw_star
from .noise import apply_noise
from .palettes import BRAND_PALETTE
from .surface import Surface
from .text import draw_text

LATTICE_DIVISIONS = 4
BORDER_COUNT = 10


@dataclass(frozen=True)
class LogoLayout:
    star: StarSpec
    lattice: LatticeSpec
    stroke: StrokeStyle


def logo_layout(size: int, palette: Palette) -> LogoLayout:
    center = Point(size / 2, size / 2.1)
    outer = size * 0.28
    inner = outer * 0.55
    return LogoLayout(
        star=StarSpec(center=center, outer_radius=outer, inner_radius=inner, point_count=8),
        lattice=LatticeSpec(center=center, half_extent=inner * 1.3, divisions=LATTICE_DIVISIONS),
        stroke=StrokeStyle(color=palette.accent, width=max(2, size * 0.02), cap="round"),
    )


def logo_text(size: int, text: BrandText) -> list[TextSpec]:
    cx = size / 2
    title_size = math.floor(size * 0.09)
    specs = [
        TextSpec(line, text.title_families, title_size, Point(cx, size * offset), weight="bold")
        for line, offset in zip(text.title_lines, (0.68, 0.78))
    ]
    specs.append(
        TextSpec(
            text.subtitle,
            text.subtitle_families,
            math.floor(size * 0.075),
            Point(cx, size * 0.90),
            direction="rtl",
        )
    )
    return specs


def banner_text(width: int, height: int, text: BrandText) -> list[TextSpec]:
    cx = width / 2
    mid = height / 2
    return [
        TextSpec(
            text.banner_title,
            text.title_families,
            math.floor(height * 0.22),
            Point(cx, mid - height * 0.08),
            weight="bold",
            baseline="middle",
        ),
        TextSpec(
            text.subtitle,
            text.subtitle_families,
            math.floor(height * 0.16),
            Point(cx, mid + height * 0.14),
            baseline="middle",
            direction="rtl",
        ),
    ]


class EmblemRenderer:
    """Draws the square logo and the wide banner from primitives only."""

    def __init__(
        self,
        palette: Palette = BRAND_PALETTE,
        text: BrandText | None = None,
        noise: NoiseSpec | None = None,
        border_count: int = BORDER_COUNT,
    ) -> None:
        self.palette = palette
        self.text = text or BrandText()
        self.noise = noise or NoiseSpec()
        self.border_count = border_count

    def render_logo(self, size: int = 512, rng: random.Random | None = None) -> ImageBuffer:
        return encode(self._logo_surface(size, rng))

    def render_banner(self, width: int = 1920, height: int = 480, rng: random.Random | None = None) -> ImageBuffer:
        return encode(self._banner_surface(width, height, rng))

    def logo_image(self, size: int = 512, rng: random.Random | None = None) -> Image.Image:
        return self._logo_surface(size, rng).to_image()

    def banner_image(self, width: int = 1920, height: int = 480, rng: random.Random | None = None) -> Image.Image:
        return self._banner_surface(width, height, rng).to_image()

    def _ground(self, width: int, height: int, rng: random.Random | None) -> Surface:
        surface = Surface.create(width, height)
        surface.fill_background(self.palette.background)
        apply_noise(surface, self.noise, rng or random.Random())
        return surface

    def _logo_surface(self, size: int, rng: random.Random | None) -> Surface:
        CanvasSize.square(size)
        surface = self._ground(size, size, rng)
        layout = logo_layout(size, self.palette)
        draw_star(surface, layout.star, layout.stroke)
        draw_lattice(surface, layout.lattice, layout.stroke)
        draw_text(surface, logo_text(size, self.text), self.palette.accent)
        return surface

    def _banner_surface(self, width: int, height: int, rng: random.Random | None) -> Surface:
        surface = self._ground(width, height, rng)
        stroke = StrokeStyle(color=self.palette.accent, width=max(2, height * 0.02), cap="butt")
        draw_border(surface, stroke, count=self.border_count, radius=height * 0.18)
        draw_text(surface, banner_text(width, height, self.text), self.palette.accent)
        return surface


def render_logo(
    size: int = 512,
    palette: Palette = BRAND_PALETTE,
    text: BrandText | None = None,
    noise: NoiseSpec | None = None,
    rng: random.Random | None = None,
) -> ImageBuffer:
    return EmblemRenderer(palette=palette, text=text, noise=noise).render_logo(size, rng=rng)


def render_banner(
    width: int = 1920,
    height: int = 480,
    palette: Palette = BRAND_PALETTE,
    text: BrandText | None = None,
    noise: NoiseSpec | None = None,
    rng: random.Random | None = None,
) -> ImageBuffer:
    return EmblemRenderer(palette=palette, text=text, noise=noise).render_banner(width, height, rng=rng)
