#!/usr/bin/env python3
"""
Рендер идентикона из командной строки.

По умолчанию текст хешируется (MD5, как у GitHub) и идентикон сохраняется в PNG.
Значения по умолчанию берутся из конфигурации (default.yaml + IDENTICON_*).

Запуск:
  identicon octocat -o octocat.png
  identicon octocat --mode identiconjs --saturation 0.5 -o octocat.png
  identicon d41d8cd98f00b204e9800998ecf8427e --hex --grid
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml

from identicon.config.loader import Config
from identicon.core.logging_config import setup_logging
from identicon.models.mode_model import MODE_NAMES, mode_from_name
from identicon.services.hash_service import ALGORITHMS, HashService
from identicon.services.identicon_service import Identicon
from identicon.services.image_service import ImageService
from identicon.services.pattern_service import PatternService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2

# 4096 x 4096 RGB is 48 MiB
MAX_SIZE = 4096


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="identicon", description="Render an identicon for a text or a hash.")
    parser.add_argument("text", help="Text to hash (or a hex digest with --hex)")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output image path (.png, .bmp, ...)")
    parser.add_argument("--mode", choices=MODE_NAMES, default=config.mode, help="Color derivation mode")
    parser.add_argument("--saturation", type=float, default=config.saturation, help="Identicon.js saturation, 0..1")
    parser.add_argument("--brightness", type=float, default=config.brightness, help="Identicon.js brightness, 0..1")
    parser.add_argument("--size", type=int, default=config.size, help=f"Image edge length in pixels, 1..{MAX_SIZE}")
    parser.add_argument("--hash", dest="algorithm", choices=ALGORITHMS, default=config.hash_algorithm)
    parser.add_argument("--hex", action="store_true", help="Treat TEXT as a ready hex digest")
    parser.add_argument("--grid", action="store_true", help="Print the 5x5 pattern to stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", help="YAML config file (default: packaged default.yaml)")
    return parser


def run(args: argparse.Namespace) -> int:
    hashes = HashService()
    source = hashes.from_hex(args.text) if args.hex else hashes.digest(args.text, args.algorithm)
    mode = mode_from_name(args.mode, saturation=args.saturation, brightness=args.brightness)
    if args.size > MAX_SIZE:
        raise ValueError(f"Размер {args.size} px больше допустимого {MAX_SIZE} px")

    rendered = Identicon(source, size=args.size, mode=mode).render()
    logger.info("identicon for %s: color %s", rendered.source_hex, rendered.foreground_hex)

    if args.grid:
        print(PatternService().to_text(rendered.pixels))
    if args.output is not None:
        ImageService().save_image(rendered.pil_image, args.output)
    elif not args.grid:
        print(f"{rendered.source_hex} {rendered.foreground_hex}")
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None, config_path: Optional[str] = None) -> int:
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--config", default=config_path)
    known, rest = pre.parse_known_args(argv)

    try:
        config = Config.load(known.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"identicon: ошибка конфигурации: {exc}", file=sys.stderr)
        return EXIT_ERROR

    args = build_parser(config).parse_args(rest)
    setup_logging(level="DEBUG" if args.verbose else config.log_level, use_json=config.log_json, stream=sys.stderr)

    try:
        return run(args)
    except (ValueError, OSError) as exc:
        logger.warning("render failed: %s", exc)
        print(f"identicon: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
