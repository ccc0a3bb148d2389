"""Brand palette shared by the logo and the banner."""

from __future__ import annotations

from .models import Palette

DEFAULT_PALETTE_NAME = "Emerald Gold"

BRAND_BACKGROUND = "#0d3d2b"
BRAND_ACCENT = "#d4af37"

BRAND_PALETTE = Palette.from_hex(DEFAULT_PALETTE_NAME, background=BRAND_BACKGROUND, accent=BRAND_ACCENT)
