from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from PIL import Image, UnidentifiedImageError

from app.photogallery.layout.models import Photo

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp", ".tif", ".tiff"}


def load_photos_json(path: str | Path) -> List[Photo]:
    """Read photos from a JSON manifest.

    Accepts a bare list of objects or ``{"photos": [...]}``. Each object needs
    ``src``, ``width`` and ``height``; ``key`` and ``alt`` are optional and any
    other fields end up in ``Photo.extra``. Dimensions are validated later by
    the layout engine, not here.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("photos", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of photos")

    photos: List[Photo] = []
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise ValueError(f"{path}: photo[{i}] is not an object")
        raw = dict(raw)
        photos.append(
            Photo(
                src=str(raw.pop("src", "")),
                width=raw.pop("width", 0),
                height=raw.pop("height", 0),
                key=raw.pop("key", None),
                alt=raw.pop("alt", None),
                extra=raw,
            )
        )
    return photos


def load_photos_from_dir(path: str | Path) -> List[Photo]:
    """Read image sizes from a directory, sorted by file name.

    Pillow only parses the header here; pixel data is never decoded.
    """
    root = Path(path)
    photos: List[Photo] = []
    for file in sorted(p for p in root.iterdir() if p.suffix.lower() in IMAGE_SUFFIXES):
        try:
            with Image.open(file) as img:
                width, height = img.size
        except (UnidentifiedImageError, OSError) as e:
            logger.warning("Skipping %s: %s", file, e)
            continue
        photos.append(Photo(src=file.as_posix(), width=width, height=height, key=file.name))
    logger.info("Loaded %d photos from %s", len(photos), root)
    return photos
