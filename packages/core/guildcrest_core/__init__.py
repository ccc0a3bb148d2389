"""Core services for branding settings, logging, and provisioning hand-off."""

from .branding import (
    BrandingReport,
    BrandingTarget,
    DirectoryTarget,
    apply_branding,
    renderer_from_config,
    rng_from_config,
)
from .config import AppConfig, config_path, load_config, save_config

__all__ = [
    "AppConfig",
    "BrandingReport",
    "BrandingTarget",
    "DirectoryTarget",
    "apply_branding",
    "config_path",
    "load_config",
    "renderer_from_config",
    "rng_from_config",
    "save_config",
]
