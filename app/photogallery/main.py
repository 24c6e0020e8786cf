from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from app.photogallery.layout.engine import DEFAULTS, compute_layout
from app.photogallery.layout.models import DIRECTIONS, Photo, gallery_height
from app.photogallery.utils.loading import load_photos_from_dir, load_photos_json

logger = logging.getLogger(__name__)


def load_photos(source: str) -> List[Photo]:
    path = Path(source)
    if path.is_dir():
        return load_photos_from_dir(path)
    return load_photos_json(path)


def run_layout(args: argparse.Namespace) -> dict:
    photos = load_photos(args.source)
    thumbs = compute_layout(
        photos,
        args.width,
        direction=args.direction,
        margin=args.margin,
        target_row_height=args.target_row_height,
        search_window=args.search_window,
        columns=args.columns,
        allow_unfinished_last_row=not args.fill_last_row,
    )
    margin = DEFAULTS.margin if args.margin is None else args.margin
    return {
        "direction": args.direction,
        "container_width": args.width,
        "height": gallery_height(thumbs, args.direction, margin),
        "thumbs": [
            {
                "index": t.index,
                "key": t.key,
                "left": t.left,
                "top": t.top,
                "width": t.width,
                "height": t.height,
                "container_height": t.container_height,
                "photo": asdict(t.photo),
            }
            for t in thumbs
        ],
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute a justified or masonry photo layout")
    parser.add_argument("source", help="JSON photo manifest or a directory of images")
    parser.add_argument("--width", type=float, required=True, help="Container width in px")
    parser.add_argument("--direction", choices=DIRECTIONS, default=DEFAULTS.direction)
    parser.add_argument("--margin", type=float, default=None)
    parser.add_argument("--target-row-height", type=float, default=None)
    parser.add_argument("--search-window", type=int, default=None)
    parser.add_argument("--columns", type=int, default=None)
    parser.add_argument(
        "--fill-last-row",
        action="store_true",
        help="Stretch a short last row to the full width",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        result = run_layout(args)
    except ValueError as e:
        # LayoutError and malformed manifests both land here.
        logger.error("Layout failed: %s", e)
        return 2
    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
