"""Renderer package for procedural logo and banner synthesis."""

from .analysis import accent_coverage, accent_mask, count_clusters, count_rosettes
from .emblem import EmblemRenderer, render_banner, render_logo
from .encoder import encode
from .models import (
    BrandText,
    CanvasSize,
    ImageBuffer,
    InvalidParameterError,
    LatticeSpec,
    NoiseSpec,
    Palette,
    Point,
    StarSpec,
    StrokeStyle,
    TextSpec,
)
from .motifs import border_centers, draw_border, draw_lattice, draw_rosette, draw_star, lattice_segments, star_chords
from .noise import apply_noise
from .palettes import BRAND_ACCENT, BRAND_BACKGROUND, BRAND_PALETTE, DEFAULT_PALETTE_NAME
from .surface import CompositeMode, Layer, Surface
from .text import draw_text, resolve_font

__all__ = [
    "BRAND_ACCENT",
    "BRAND_BACKGROUND",
    "BRAND_PALETTE",
    "BrandText",
    "CanvasSize",
    "CompositeMode",
    "DEFAULT_PALETTE_NAME",
    "EmblemRenderer",
    "ImageBuffer",
    "InvalidParameterError",
    "LatticeSpec",
    "Layer",
    "NoiseSpec",
    "Palette",
    "Point",
    "StarSpec",
    "StrokeStyle",
    "Surface",
    "TextSpec",
    "accent_coverage",
    "accent_mask",
    "apply_noise",
    "border_centers",
    "count_clusters",
    "count_rosettes",
    "draw_border",
    "draw_lattice",
    "draw_rosette",
    "draw_star",
    "draw_text",
    "encode",
    "lattice_segments",
    "render_banner",
    "render_logo",
    "resolve_font",
    "star_chords",
]
