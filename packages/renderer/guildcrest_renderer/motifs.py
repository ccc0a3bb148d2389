"""Rosette, lattice and border geometry."""

from __future__ import annotations

import math

from .models import LatticeSpec, Point, StarSpec, StrokeStyle
from .surface import CompositeMode, Segment, Surface


def star_chords(center: Point, radius: float, point_count: int = 8) -> list[Segment]:
    """Chords joining consecutive points spaced evenly on a circle."""
    sweep = 2 * math.pi / point_count
    chords: list[Segment] = []
    for i in range(point_count):
        a1 = i * sweep
        a2 = a1 + sweep
        chords.append(
            (
                Point(center.x + radius * math.cos(a1), center.y + radius * math.sin(a1)),
                Point(center.x + radius * math.cos(a2), center.y + radius * math.sin(a2)),
            )
        )
    return chords


def draw_rosette(surface: Surface, center: Point, radius: float, style: StrokeStyle, point_count: int = 8) -> None:
    surface.stroke_path(star_chords(center, radius, point_count), style)


def draw_star(surface: Surface, spec: StarSpec, style: StrokeStyle) -> None:
    # Outer then inner outline.
    draw_rosette(surface, spec.center, spec.outer_radius, style, spec.point_count)
    draw_rosette(surface, spec.center, spec.inner_radius, style, spec.point_count)


def lattice_segments(spec: LatticeSpec) -> tuple[list[Segment], list[Segment]]:
    step = spec.step
    extent = step * spec.divisions
    cx, cy = spec.center.x, spec.center.y
    horizontal: list[Segment] = []
    vertical: list[Segment] = []
    for i in range(-spec.divisions, spec.divisions + 1):
        horizontal.append((Point(cx - extent, cy + i * step), Point(cx + extent, cy + i * step)))
        vertical.append((Point(cx + i * step, cy - extent), Point(cx + i * step, cy + extent)))
    return horizontal, vertical


def draw_lattice(surface: Surface, spec: LatticeSpec, style: StrokeStyle) -> None:
    """Stroke the grid underneath whatever ink is already on the surface."""
    horizontal, vertical = lattice_segments(spec)
    segments = [seg for pair in zip(horizontal, vertical) for seg in pair]
    surface.set_composite_mode(CompositeMode.DESTINATION_OVER)
    try:
        surface.stroke_path(segments, style)
    finally:
        surface.set_composite_mode(CompositeMode.SOURCE_OVER)


def border_centers(width: int, height: int, count: int = 10) -> list[Point]:
    if count < 1:
        return []
    margin = height * 0.08
    y = height / 2
    if count == 1:
        return [Point(width / 2, y)]
    spacing = (width - margin * 2) / (count - 1)
    return [Point(margin + i * spacing, y) for i in range(count)]


def draw_border(surface: Surface, style: StrokeStyle, count: int = 10, radius: float | None = None) -> list[Point]:
    r = surface.height * 0.18 if radius is None else radius
    centers = border_centers(surface.width, surface.height, count)
    for center in centers:
        draw_rosette(surface, center, r, style, 8)
    return centers
