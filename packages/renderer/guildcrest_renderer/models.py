"""Typed renderer models."""

from __future__ import annotations

import base64
from dataclasses import dataclass

from PIL import ImageColor

RGB = tuple[int, int, int]


class InvalidParameterError(ValueError):
    """Raised for sizes or specs that cannot produce a usable image."""


def _require_positive_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {value}")


@dataclass(frozen=True)
class CanvasSize:
    width: int
    height: int

    def __post_init__(self) -> None:
        _require_positive_int("width", self.width)
        _require_positive_int("height", self.height)

    @classmethod
    def square(cls, size: int) -> "CanvasSize":
        _require_positive_int("size", size)
        return cls(size, size)


@dataclass(frozen=True)
class Palette:
    name: str
    background: RGB
    accent: RGB

    @classmethod
    def from_hex(cls, name: str, background: str, accent: str) -> "Palette":
        return cls(
            name=name,
            background=ImageColor.getrgb(background)[:3],
            accent=ImageColor.getrgb(accent)[:3],
        )


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @property
    def xy(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class StarSpec:
    center: Point
    outer_radius: float
    inner_radius: float
    point_count: int = 8

    def __post_init__(self) -> None:
        if not 0 < self.inner_radius < self.outer_radius:
            raise InvalidParameterError("star radii must satisfy 0 < inner < outer")
        if self.point_count < 3:
            raise InvalidParameterError("star needs at least 3 points")


@dataclass(frozen=True)
class LatticeSpec:
    center: Point
    half_extent: float
    divisions: int

    def __post_init__(self) -> None:
        if self.divisions < 1:
            raise InvalidParameterError("lattice divisions must be >= 1")
        if self.half_extent <= 0:
            raise InvalidParameterError("lattice half_extent must be > 0")

    @property
    def step(self) -> float:
        return self.half_extent / self.divisions


@dataclass(frozen=True)
class StrokeStyle:
    color: RGB
    width: float
    cap: str = "round"


@dataclass(frozen=True)
class TextSpec:
    content: str
    families: tuple[str, ...]
    size: int
    anchor: Point
    weight: str = "normal"
    baseline: str = "top"
    direction: str | None = None


@dataclass(frozen=True)
class NoiseSpec:
    dots: int = 4000
    max_radius: float = 1.5
    opacity: float = 0.05
    color: RGB = (0, 0, 0)

    def __post_init__(self) -> None:
        if self.dots < 0:
            raise InvalidParameterError("noise dots must be >= 0")
        if not 0.0 <= self.opacity <= 1.0:
            raise InvalidParameterError("noise opacity must be within [0, 1]")
        if self.max_radius < 0:
            raise InvalidParameterError("noise max_radius must be >= 0")


@dataclass(frozen=True)
class BrandText:
    title_lines: tuple[str, ...] = ("MUSLIM", "CREATORS HUB")
    banner_title: str = "Muslim Creators Hub"
    subtitle: str = "مجتمع المسلمين المبدعين"
    title_families: tuple[str, ...] = ("serif",)
    subtitle_families: tuple[str, ...] = ("Noto Naskh Arabic", "Amiri")


@dataclass(frozen=True)
class ImageBuffer:
    data: bytes
    width: int
    height: int
    mime_type: str = "image/png"

    def data_url(self) -> str:
        b64 = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{b64}"
