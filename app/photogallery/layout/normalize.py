"""Aspect-ratio normalization for layout input."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable, List, Mapping

from app.photogallery.errors import ItemValidationError
from app.photogallery.layout.models import NormalizedItem


def _dimension(photo: Any, name: str, index: int) -> float:
    if isinstance(photo, Mapping):
        if name not in photo:
            raise ItemValidationError(index, f"missing {name}")
        value = photo[name]
    else:
        if not hasattr(photo, name):
            raise ItemValidationError(index, f"missing {name}")
        value = getattr(photo, name)

    if isinstance(value, bool) or not isinstance(value, Real):
        raise ItemValidationError(index, f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ItemValidationError(index, f"{name} must be > 0, got {value!r}")
    return value


def normalize_items(photos: Iterable[Any]) -> List[NormalizedItem]:
    """Attach an aspect ratio to every photo, preserving order.

    Photos may be ``Photo`` records, mappings or any object exposing
    ``width`` and ``height``. The whole list is validated before anything is
    returned, so one bad photo rejects the batch.
    """

    items: List[NormalizedItem] = []
    for index, photo in enumerate(photos):
        width = _dimension(photo, "width", index)
        height = _dimension(photo, "height", index)
        items.append(NormalizedItem(index=index, aspect_ratio=width / height, photo=photo))
    return items
