"""
Command-line entry point.

Usage:
    swoosh-toolkit collage --layout grid A.jpg B.jpg C.jpg D.jpg -o out.png
    swoosh-toolkit compress photo.png --quality 0.4 -o small.jpg

Exit codes: 0 on success, 2 when the layout needs more images, 1 on any
other failure.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from swoosh_toolkit import __version__
from swoosh_toolkit.collage import (
    SLOT_COUNT,
    CollageConfig,
    CollageEngine,
    ComposeError,
    FitMode,
    InsufficientImagesError,
)
from swoosh_toolkit.compress import compress_image
from swoosh_toolkit.core.models import CollageLayout
from swoosh_toolkit.services import ServiceError, load_image
from swoosh_toolkit.utils import configure_logging

logger = logging.getLogger("swoosh_toolkit.cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INSUFFICIENT_IMAGES = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swoosh-toolkit",
        description="Make photo collages and compress images",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    sub = parser.add_subparsers(dest="command", required=True)

    collage = sub.add_parser("collage", help="Compose images into a 600x600 collage")
    collage.add_argument(
        "--layout",
        "-l",
        default="grid",
        help="Layout: grid, vertical, horizontal or main-with-side (default: grid)",
    )
    collage.add_argument("images", nargs="+", type=Path, help="Slot images in order (up to 4)")
    collage.add_argument("--output", "-o", type=Path, required=True, help="Output image path")
    collage.add_argument(
        "--fit",
        choices=[mode.value for mode in FitMode],
        default=FitMode.STRETCH.value,
        help="How images fill their slots (default: stretch)",
    )

    compress = sub.add_parser("compress", help="Re-encode an image as JPEG at a lower quality")
    compress.add_argument("image", type=Path, help="Source image")
    compress.add_argument(
        "--quality", "-q", type=float, default=0.5, help="Quality in (0, 1] (default: 0.5)"
    )
    compress.add_argument("--output", "-o", type=Path, required=True, help="Output JPEG path")
    return parser


def _run_collage(args: argparse.Namespace) -> int:
    if len(args.images) > SLOT_COUNT:
        logger.error(f"At most {SLOT_COUNT} images are supported, got {len(args.images)}")
        return EXIT_FAILURE

    layout = CollageLayout.from_name(args.layout)
    engine = CollageEngine(CollageConfig(fit_mode=FitMode(args.fit)), layout)
    for index, path in enumerate(args.images):
        engine.set_slot(index, load_image(path))

    try:
        image = engine.compose()
    except InsufficientImagesError as e:
        logger.error(str(e))
        return EXIT_INSUFFICIENT_IMAGES

    args.output.parent.mkdir(parents=True, exist_ok=True)
    image.save(args.output)
    logger.info(f"Wrote {layout.label} collage to {args.output}")
    return EXIT_OK


def _run_compress(args: argparse.Namespace) -> int:
    source = load_image(args.image)
    result = compress_image(source, args.quality)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_bytes(result.data)
    logger.info(
        f"Wrote {args.output} at {result.quality_percent}% quality ({result.size_kb} KB)"
    )
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    handlers = {"collage": _run_collage, "compress": _run_compress}
    try:
        return handlers[args.command](args)
    except (ComposeError, ServiceError, OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
