"""CLI entrypoints for rendering, exporting, and inspecting community emblems."""

from __future__ import annotations

import argparse
import json
import random
from dataclasses import asdict
from pathlib import Path

from PIL import Image

from guildcrest_core import DirectoryTarget, apply_branding, load_config, renderer_from_config, save_config
from guildcrest_core.config import AppConfig
from guildcrest_core.logging_setup import configure_logging, get_logger
from guildcrest_renderer import (
    ImageBuffer,
    InvalidParameterError,
    accent_coverage,
    border_centers,
    count_rosettes,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str, ensure_ascii=False))


def _load(args: argparse.Namespace) -> AppConfig:
    return load_config(Path(args.config).expanduser() if args.config else None)


def _rng(args: argparse.Namespace, cfg: AppConfig) -> random.Random:
    seed = args.seed if args.seed is not None else cfg.noise.seed
    return random.Random(seed)


def _emit(image: ImageBuffer, kind: str, out: str | None) -> dict:
    payload = {
        "success": True,
        "kind": kind,
        "width": image.width,
        "height": image.height,
        "mime_type": image.mime_type,
        "bytes": len(image.data),
    }
    if out:
        path = Path(out).expanduser().resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(image.data)
        payload["path"] = str(path)
    return payload


def cmd_logo(args: argparse.Namespace) -> int:
    cfg = _load(args)
    size = args.size if args.size is not None else cfg.logo.size
    image = renderer_from_config(cfg).render_logo(size, rng=_rng(args, cfg))
    _print_json(_emit(image, "logo", args.out))
    return 0


def cmd_banner(args: argparse.Namespace) -> int:
    cfg = _load(args)
    width = args.width if args.width is not None else cfg.banner.width
    height = args.height if args.height is not None else cfg.banner.height
    image = renderer_from_config(cfg).render_banner(width, height, rng=_rng(args, cfg))
    _print_json(_emit(image, "banner", args.out))
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    cfg = _load(args)
    out_dir = Path(args.out_dir).expanduser().resolve()
    report = apply_branding(DirectoryTarget(out_dir), cfg, rng=_rng(args, cfg))
    payload = asdict(report)
    payload["success"] = report.icon_applied
    payload["out_dir"] = str(out_dir)
    _print_json(payload)
    return 0


def cmd_inspect(args: argparse.Namespace) -> int:
    cfg = _load(args)
    palette = renderer_from_config(cfg).palette
    with Image.open(args.path) as img:
        img.load()
        payload = {
            "path": str(args.path),
            "width": img.width,
            "height": img.height,
            "format": img.format,
            "accent_coverage": accent_coverage(img, palette.accent),
        }
        if args.clusters:
            centers = border_centers(img.width, img.height, cfg.banner.border_count)
            payload["border_clusters"] = count_rosettes(img, palette.accent, centers, img.height * 0.18)
            payload["expected_clusters"] = len(centers)
    _print_json(payload)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    cfg = _load(args)
    payload: dict = asdict(cfg)
    if args.write:
        path = save_config(cfg, Path(args.config).expanduser() if args.config else None)
        payload = {"written": str(path), "config": payload}
    _print_json(payload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="guildcrest", description="Procedural community logo and banner generator")
    parser.add_argument("--config", default=None, help="Path to settings JSON (defaults to the per-user location)")
    sub = parser.add_subparsers(dest="command", required=True)

    logo_cmd = sub.add_parser("logo", help="Render the square logo")
    logo_cmd.add_argument("--size", type=int, default=None)
    logo_cmd.add_argument("--seed", type=int, default=None, help="Seed for the grain texture")
    logo_cmd.add_argument("--out", default=None, help="Optional PNG output path")
    logo_cmd.set_defaults(func=cmd_logo)

    banner_cmd = sub.add_parser("banner", help="Render the wide banner")
    banner_cmd.add_argument("--width", type=int, default=None)
    banner_cmd.add_argument("--height", type=int, default=None)
    banner_cmd.add_argument("--seed", type=int, default=None, help="Seed for the grain texture")
    banner_cmd.add_argument("--out", default=None, help="Optional PNG output path")
    banner_cmd.set_defaults(func=cmd_banner)

    export_cmd = sub.add_parser("export", help="Render both emblems into a directory as icon.png and banner.png")
    export_cmd.add_argument("--out-dir", required=True)
    export_cmd.add_argument("--seed", type=int, default=None)
    export_cmd.set_defaults(func=cmd_export)

    inspect_cmd = sub.add_parser("inspect", help="Report size and accent statistics of a rendered PNG")
    inspect_cmd.add_argument("path")
    inspect_cmd.add_argument("--clusters", action="store_true", help="Count border rosettes along the midline")
    inspect_cmd.set_defaults(func=cmd_inspect)

    config_cmd = sub.add_parser("config", help="Print the effective settings")
    config_cmd.add_argument("--write", action="store_true", help="Persist the effective settings")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(_load(args).logging)
    try:
        return int(args.func(args))
    except InvalidParameterError as exc:
        get_logger().warning(f"invalid parameter: {exc}", extra={"event": "invalid_parameter"})
        _print_json({"success": False, "error": str(exc)})
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
