"""Centered title text with ordered font fallback."""

from __future__ import annotations

import logging
from typing import Sequence

import arabic_reshaper
from bidi.algorithm import get_display
from PIL import ImageFont, features

from .models import RGB, TextSpec
from .surface import Surface

logger = logging.getLogger("guildcrest.renderer.text")

GENERIC_SERIF = "serif"

FONT_FILES: dict[str, dict[str, tuple[str, ...]]] = {
    "Noto Naskh Arabic": {
        "normal": ("NotoNaskhArabic-Regular.ttf",),
        "bold": ("NotoNaskhArabic-Bold.ttf", "NotoNaskhArabic-Regular.ttf"),
    },
    "Amiri": {
        "normal": ("Amiri-Regular.ttf",),
        "bold": ("Amiri-Bold.ttf", "Amiri-Regular.ttf"),
    },
    GENERIC_SERIF: {
        "normal": ("DejaVuSerif.ttf", "LiberationSerif-Regular.ttf", "Times New Roman.ttf", "times.ttf"),
        "bold": ("DejaVuSerif-Bold.ttf", "LiberationSerif-Bold.ttf", "Times New Roman Bold.ttf", "timesbd.ttf"),
    },
}


def _candidate_files(family: str, weight: str) -> tuple[str, ...]:
    known = FONT_FILES.get(family)
    if known is not None:
        return known.get(weight, known["normal"])
    stem = family.replace(" ", "")
    if weight == "bold":
        return (f"{stem}-Bold.ttf", f"{stem}-Regular.ttf")
    return (f"{stem}-Regular.ttf", f"{stem}.ttf")


def resolve_font(families: Sequence[str], size: int, weight: str = "normal"):
    """First loadable family wins, then generic serif, then Pillow's default."""
    size = max(1, int(size))
    chain = list(families)
    if GENERIC_SERIF not in chain:
        chain.append(GENERIC_SERIF)

    for family in chain:
        for filename in _candidate_files(family, weight):
            try:
                return ImageFont.truetype(filename, size)
            except OSError:
                logger.debug("font %s unavailable for family %s", filename, family)
    return ImageFont.load_default(size)


def supports_rtl() -> bool:
    return bool(features.check_feature("raqm"))


def layout_text(spec: TextSpec, rtl_engine: bool) -> tuple[str, str | None]:
    """Content and direction to hand to Pillow for ``spec``.

    Without raqm, Pillow lays glyphs out left to right in logical order, so
    right-to-left content is shaped into presentation forms and reordered into
    visual order before drawing.
    """
    if spec.direction != "rtl":
        return spec.content, spec.direction if rtl_engine else None
    if rtl_engine:
        return spec.content, "rtl"
    logger.debug("raqm unavailable, reshaping rtl text")
    return get_display(arabic_reshaper.reshape(spec.content)), None


def draw_text(surface: Surface, specs: Sequence[TextSpec], color: RGB) -> None:
    rtl_engine = supports_rtl()
    for spec in specs:
        if not spec.content:
            continue
        font = resolve_font(spec.families, spec.size, spec.weight)
        content, direction = layout_text(spec, rtl_engine)
        surface.fill_text(content, spec.anchor, font, color, baseline=spec.baseline, direction=direction)
