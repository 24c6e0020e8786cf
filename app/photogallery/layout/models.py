"""Input and output records shared by the layout engines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

ROW = "row"
COLUMN = "column"
DIRECTIONS = (ROW, COLUMN)


@dataclass(frozen=True)
class Photo:
    """A source image with known intrinsic dimensions."""

    src: str
    width: float
    height: float
    key: Optional[str] = None
    alt: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class NormalizedItem:
    index: int
    aspect_ratio: float
    photo: Any


@dataclass(frozen=True)
class Thumb:
    """Placement of one photo.

    For row layouts container_height is the height of the thumb's row; for
    column layouts it is the height of the tallest column.
    """

    index: int
    left: float
    top: float
    width: float
    height: float
    container_height: float
    photo: Any

    @property
    def key(self) -> str:
        photo = self.photo
        if isinstance(photo, Mapping):
            return str(photo.get("key") or photo.get("src") or self.index)
        return str(getattr(photo, "key", None) or getattr(photo, "src", None) or self.index)


def gallery_height(thumbs: Sequence[Thumb], direction: str, margin: float) -> float:
    """Total height of the laid-out block."""

    if not thumbs:
        return 0.0
    if direction == COLUMN:
        return thumbs[-1].container_height
    last = thumbs[-1]
    # top already includes the leading margin of the row.
    return last.top + last.height + margin
