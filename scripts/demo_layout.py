#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.photogallery.layout.engine import compute_layout
from app.photogallery.layout.models import Photo, gallery_height

SAMPLE = [
    Photo("sunset.jpg", 1500, 1000),
    Photo("portrait.jpg", 1000, 1500),
    Photo("square.jpg", 1000, 1000),
    Photo("wide.jpg", 1920, 1080),
    Photo("tall.jpg", 1200, 1600),
    Photo("panorama.jpg", 3000, 1000),
]


def main() -> None:
    for direction in ("row", "column"):
        thumbs = compute_layout(SAMPLE, 1000, direction=direction)
        print(f"{direction}: height={gallery_height(thumbs, direction, 2):.1f}")
        for t in thumbs:
            print(f"  {t.key:<14} x={t.left:7.1f} y={t.top:7.1f} {t.width:6.1f}x{t.height:6.1f}")


if __name__ == "__main__":
    main()
