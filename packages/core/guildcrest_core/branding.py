"""Hand-off of rendered emblems to a community provisioning target."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from guildcrest_renderer import BrandText, EmblemRenderer, ImageBuffer, NoiseSpec, Palette

from .config import AppConfig
from .logging_setup import get_logger


class BrandingTarget(Protocol):
    def set_icon(self, image: ImageBuffer) -> None: ...

    def set_banner(self, image: ImageBuffer) -> None: ...


@dataclass
class BrandingReport:
    icon_applied: bool = False
    banner_applied: bool = False
    banner_error: str | None = None
    icon_bytes: int = 0
    banner_bytes: int = 0


class DirectoryTarget:
    """Writes the emblems as ``icon.png`` and ``banner.png`` into a folder."""

    def __init__(self, out_dir: Path) -> None:
        self.out_dir = Path(out_dir)

    def _write(self, name: str, image: ImageBuffer) -> Path:
        self.out_dir.mkdir(parents=True, exist_ok=True)
        path = self.out_dir / name
        path.write_bytes(image.data)
        return path

    def set_icon(self, image: ImageBuffer) -> None:
        self._write("icon.png", image)

    def set_banner(self, image: ImageBuffer) -> None:
        self._write("banner.png", image)


def renderer_from_config(cfg: AppConfig) -> EmblemRenderer:
    palette = Palette.from_hex("Configured", background=cfg.palette.background, accent=cfg.palette.accent)
    text = BrandText(
        title_lines=tuple(cfg.text.title_lines),
        banner_title=cfg.text.banner_title,
        subtitle=cfg.text.subtitle,
        subtitle_families=tuple(cfg.text.subtitle_families),
    )
    noise = NoiseSpec(dots=cfg.noise.dots, max_radius=cfg.noise.max_radius, opacity=cfg.noise.opacity)
    return EmblemRenderer(palette=palette, text=text, noise=noise, border_count=cfg.banner.border_count)


def rng_from_config(cfg: AppConfig) -> random.Random:
    return random.Random(cfg.noise.seed)


def apply_branding(target: BrandingTarget, cfg: AppConfig, rng: random.Random | None = None) -> BrandingReport:
    """Render both emblems and push them to ``target``.

    Icon failures propagate. A rejected banner (some tiers do not allow one) is
    logged and recorded on the report instead.
    """
    logger = get_logger()
    renderer = renderer_from_config(cfg)
    rng = rng or rng_from_config(cfg)
    report = BrandingReport()

    logger.info("rendering logo", extra={"event": "logo_render"})
    icon = renderer.render_logo(cfg.logo.size, rng=rng)
    target.set_icon(icon)
    report.icon_applied = True
    report.icon_bytes = len(icon.data)
    logger.info("icon applied", extra={"event": "icon_applied"})

    logger.info("rendering banner", extra={"event": "banner_render"})
    banner = renderer.render_banner(cfg.banner.width, cfg.banner.height, rng=rng)
    report.banner_bytes = len(banner.data)
    try:
        target.set_banner(banner)
    except Exception as exc:
        report.banner_error = str(exc) or exc.__class__.__name__
        logger.warning(f"banner rejected: {report.banner_error}", extra={"event": "banner_rejected"})
    else:
        report.banner_applied = True
        logger.info("banner applied", extra={"event": "banner_applied"})
    return report
