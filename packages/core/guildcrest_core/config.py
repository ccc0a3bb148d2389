"""Persistent branding settings schema and load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from PIL import ImageColor

from guildcrest_renderer.palettes import BRAND_ACCENT, BRAND_BACKGROUND


CONFIG_VERSION = 2


@dataclass
class PaletteConfig:
    background: str = BRAND_BACKGROUND
    accent: str = BRAND_ACCENT


@dataclass
class LogoConfig:
    size: int = 512


@dataclass
class BannerConfig:
    width: int = 1920
    height: int = 480
    border_count: int = 10


@dataclass
class NoiseConfig:
    dots: int = 4000
    max_radius: float = 1.5
    opacity: float = 0.05
    seed: int | None = None


@dataclass
class TextConfig:
    title_lines: list[str] = field(default_factory=lambda: ["MUSLIM", "CREATORS HUB"])
    banner_title: str = "Muslim Creators Hub"
    subtitle: str = "مجتمع المسلمين المبدعين"
    subtitle_families: list[str] = field(default_factory=lambda: ["Noto Naskh Arabic", "Amiri"])


@dataclass
class LoggingConfig:
    keep_files: int = 7
    level: str = "INFO"
    directory: str | None = None
    console: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    palette: PaletteConfig = field(default_factory=PaletteConfig)
    logo: LogoConfig = field(default_factory=LogoConfig)
    banner: BannerConfig = field(default_factory=BannerConfig)
    noise: NoiseConfig = field(default_factory=NoiseConfig)
    text: TextConfig = field(default_factory=TextConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Guildcrest" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Guildcrest" / "config.json"
    return Path.home() / ".config" / "guildcrest" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _as_float(value: Any, default: float) -> float:
    if isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _coerce_ints(section: Any, names: tuple[str, ...]) -> None:
    defaults = type(section)()
    for name in names:
        setattr(section, name, _as_int(getattr(section, name), getattr(defaults, name)))


def _valid_color(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        ImageColor.getrgb(value)
    except ValueError:
        return False
    return True


def _normalize_palette(cfg: AppConfig) -> None:
    if not _valid_color(cfg.palette.background):
        cfg.palette.background = BRAND_BACKGROUND
    if not _valid_color(cfg.palette.accent):
        cfg.palette.accent = BRAND_ACCENT


def _normalize_sizes(cfg: AppConfig) -> None:
    # Zero or negative sizes are kept so rendering rejects them explicitly.
    _coerce_ints(cfg.logo, ("size",))
    _coerce_ints(cfg.banner, ("width", "height", "border_count"))
    cfg.banner.border_count = max(0, cfg.banner.border_count)


def _normalize_noise(cfg: AppConfig) -> None:
    defaults = NoiseConfig()
    cfg.noise.dots = max(0, _as_int(cfg.noise.dots, defaults.dots))
    cfg.noise.max_radius = max(0.0, _as_float(cfg.noise.max_radius, defaults.max_radius))
    cfg.noise.opacity = max(0.0, min(1.0, _as_float(cfg.noise.opacity, defaults.opacity)))
    if cfg.noise.seed is not None:
        cfg.noise.seed = _as_int(cfg.noise.seed, None)  # type: ignore[arg-type]


def _normalize_text(cfg: AppConfig) -> None:
    cfg.text.title_lines = [str(line) for line in (cfg.text.title_lines or [])][:2]
    cfg.text.subtitle_families = [str(f) for f in (cfg.text.subtitle_families or [])]


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.keep_files = max(2, _as_int(cfg.logging.keep_files, LoggingConfig.keep_files))
    level = str(cfg.logging.level).upper()
    cfg.logging.level = level if isinstance(logging.getLevelName(level), int) else LoggingConfig.level
    if cfg.logging.directory is not None:
        cfg.logging.directory = str(cfg.logging.directory)
    cfg.logging.console = bool(cfg.logging.console)


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    version = _as_int(raw.get("config_version", 1), 1)
    data = dict(raw)

    if version < 2:
        # v2 moves logging settings into the file.
        data.setdefault("logging", {})
        data["config_version"] = 2

    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=_as_int(data.get("config_version"), CONFIG_VERSION),
        palette=_merge(PaletteConfig, data.get("palette", {})),
        logo=_merge(LogoConfig, data.get("logo", {})),
        banner=_merge(BannerConfig, data.get("banner", {})),
        noise=_merge(NoiseConfig, data.get("noise", {})),
        text=_merge(TextConfig, data.get("text", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
    )

    _normalize_palette(cfg)
    _normalize_sizes(cfg)
    _normalize_noise(cfg)
    _normalize_text(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True, ensure_ascii=False), encoding="utf-8")
    return path
