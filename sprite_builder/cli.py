from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .build import build_icons
from .models import (
    DEFAULT_EXTENSION,
    DEFAULT_GENERATOR_COMMAND,
    DEFAULT_INPUT_DIR,
    DEFAULT_SPRITE_PATH,
    DEFAULT_TYPES_PATH,
    SpriteConfig,
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="build-icons",
        description="Combine individual SVG icons into one <symbol> sprite and an IconName type",
    )
    ap.add_argument("--root", default=None, help="Project root; other paths are relative to it (default: cwd)")
    ap.add_argument("--input", default=str(DEFAULT_INPUT_DIR), help="Directory scanned recursively for icons")
    ap.add_argument("--sprite", default=str(DEFAULT_SPRITE_PATH), help="Sprite output path")
    ap.add_argument("--types", default=str(DEFAULT_TYPES_PATH), help="IconName type output path")
    ap.add_argument("--extension", default=DEFAULT_EXTENSION, help="Icon file extension")
    ap.add_argument(
        "--generator-command",
        default=DEFAULT_GENERATOR_COMMAND,
        help="Command named in the generated file header",
    )
    ap.add_argument("--max-workers", type=int, default=None, help="Parallel file reads (default: executor default)")
    return ap


def config_from_args(args: argparse.Namespace) -> SpriteConfig:
    kwargs = {
        "input_dir": Path(args.input),
        "sprite_path": Path(args.sprite),
        "types_path": Path(args.types),
        "extension": args.extension,
        "generator_command": args.generator_command,
        "max_workers": args.max_workers,
    }
    if args.root:
        kwargs["root"] = Path(args.root)
    return SpriteConfig(**kwargs)


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    try:
        config = config_from_args(args)
    except ValidationError as e:
        ap.error(str(e))

    build_icons(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
