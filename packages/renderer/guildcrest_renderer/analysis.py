"""Pixel inspection helpers for rendered emblems."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from PIL import Image

from .models import RGB, Point


def accent_mask(image: Image.Image, color: RGB, tolerance: int = 0) -> np.ndarray:
    arr = np.asarray(image.convert("RGB"), dtype=np.int16)
    target = np.array(color[:3], dtype=np.int16)
    return np.all(np.abs(arr - target) <= tolerance, axis=-1)


def accent_coverage(image: Image.Image, color: RGB, tolerance: int = 0) -> float:
    mask = accent_mask(image, color, tolerance)
    if mask.size == 0:
        return 0.0
    return float(mask.mean())


def count_clusters(
    image: Image.Image,
    color: RGB,
    band: tuple[int, int] | None = None,
    tolerance: int = 0,
) -> int:
    """Count runs of adjacent columns that contain ``color`` inside a row band."""
    mask = accent_mask(image, color, tolerance)
    if band is not None:
        top, bottom = band
        mask = mask[max(0, top) : max(0, bottom)]
    if mask.size == 0:
        return 0
    cols = mask.any(axis=0).astype(np.int8)
    edges = np.diff(np.concatenate(([0], cols)))
    return int((edges == 1).sum())


def count_rosettes(
    image: Image.Image,
    color: RGB,
    centers: Sequence[Point],
    radius: float,
    point_count: int = 8,
    window: int = 2,
) -> int:
    """Count ``centers`` whose rosette vertices are all drawn in ``color``.

    Only vertices inside the image are checked; a center with none inside
    does not count. Text in the same colour can only add pixels, so it never
    hides a rosette.
    """
    mask = accent_mask(image, color)
    height, width = mask.shape
    found = 0
    for center in centers:
        checked = 0
        hits = 0
        for i in range(point_count):
            angle = i * 2 * math.pi / point_count
            x = round(center.x + radius * math.cos(angle))
            y = round(center.y + radius * math.sin(angle))
            if not (0 <= x < width and 0 <= y < height):
                continue
            checked += 1
            patch = mask[max(0, y - window) : y + window + 1, max(0, x - window) : x + window + 1]
            if patch.any():
                hits += 1
        if checked and hits == checked:
            found += 1
    return found
