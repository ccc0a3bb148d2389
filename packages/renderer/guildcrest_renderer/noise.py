"""Grain texture scattered over the background."""

from __future__ import annotations

import random

from .models import NoiseSpec, Point
from .surface import Layer, Surface


def apply_noise(surface: Surface, spec: NoiseSpec, rng: random.Random) -> None:
    """Speckle the ground layer with translucent dots.

    Each dot consumes three draws from ``rng`` (x, y, radius), so a seeded
    generator reproduces the same texture pixel for pixel.
    """
    with surface.drawing_on(Layer.GROUND), surface.alpha(spec.opacity):
        for _ in range(spec.dots):
            x = rng.random() * surface.width
            y = rng.random() * surface.height
            r = rng.random() * spec.max_radius
            surface.fill_circle(Point(x, y), r, spec.color)
