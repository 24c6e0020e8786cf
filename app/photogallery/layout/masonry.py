"""Masonry (balanced column) layout.

This module is intentionally UI-framework agnostic.

Photos keep their input order; each one drops into whichever column is
currently shortest. Nothing is sorted by size, so adding a photo at the end
never reshuffles the ones before it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from app.photogallery.layout.models import NormalizedItem, Thumb

logger = logging.getLogger(__name__)


@dataclass
class Column:
    index: int
    height: float = 0.0
    items: List[int] = field(default_factory=list)


def column_width(container_width: float, columns: int, margin: float) -> float:
    if columns <= 0:
        raise ValueError("columns must be > 0")
    if container_width <= 0:
        raise ValueError("container_width must be > 0")
    if margin < 0:
        raise ValueError("margin must be >= 0")

    usable = container_width - 2 * margin * columns
    if usable <= 0:
        raise ValueError("container too small for given columns/margin")
    return usable / columns


def compute_column_layout(
    items: Sequence[NormalizedItem],
    *,
    container_width: float,
    columns: int,
    margin: float,
) -> List[Thumb]:
    """Compute placements; every thumb carries the tallest column's height."""

    if not items or container_width <= 0:
        return []

    col_w = column_width(container_width, columns, margin)
    cols = [Column(index=c) for c in range(columns)]

    placed = []
    for item in items:
        # Shortest column; min() keeps the lowest index on ties.
        col = min(cols, key=lambda c: c.height)
        height = col_w / item.aspect_ratio
        left = col.index * (col_w + 2 * margin) + margin
        top = col.height + margin
        placed.append((item, left, top, height))

        col.items.append(item.index)
        col.height += height + 2 * margin

    container_height = max(c.height for c in cols)
    logger.debug(
        "column layout: %d photos, heights=%s",
        len(items),
        [round(c.height, 1) for c in cols],
    )
    return [
        Thumb(
            index=item.index,
            left=left,
            top=top,
            width=col_w,
            height=height,
            container_height=container_height,
            photo=item.photo,
        )
        for item, left, top, height in placed
    ]
