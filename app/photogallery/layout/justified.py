"""Justified-row layout.

Photos are split into contiguous rows. Each row is scaled to a common height
so that it exactly spans the container; the split is the one whose row
heights stay closest to the target height overall.

The search is a shortest path over breakpoints 0..N where an edge i -> j
means "photos[i:j] form one row". Edges only reach ``search_window`` photos
ahead, so the whole search is O(N * search_window).
"""

from __future__ import annotations

import logging
import math
from typing import List, Sequence, Tuple

from app.photogallery.layout.models import NormalizedItem, Thumb

logger = logging.getLogger(__name__)


def common_height(aspect_sum: float, count: int, container_width: float, margin: float) -> float:
    """Height at which ``count`` photos plus their margins fill the width."""

    return (container_width - 2 * margin * count) / aspect_sum


def row_cost(
    height: float, count: int, target_row_height: float, *, weighted: bool = False
) -> float:
    if height <= 0:
        return math.inf
    cost = (height - target_row_height) ** 2
    return cost * count if weighted else cost


def partition_rows(
    items: Sequence[NormalizedItem],
    *,
    container_width: float,
    target_row_height: float,
    margin: float,
    search_window: int,
    weighted: bool = False,
) -> List[Tuple[int, int]]:
    """Return the minimum-cost split of ``items`` as (start, end) spans."""

    n = len(items)
    best = [math.inf] * (n + 1)
    back = [0] * (n + 1)
    best[0] = 0.0

    for start in range(n):
        if best[start] == math.inf:
            continue
        aspect_sum = 0.0
        for end in range(start + 1, min(n, start + search_window) + 1):
            aspect_sum += items[end - 1].aspect_ratio
            count = end - start
            height = common_height(aspect_sum, count, container_width, margin)
            cost = best[start] + row_cost(height, count, target_row_height, weighted=weighted)
            if cost < best[end]:
                best[end] = cost
                back[end] = start

    if n and best[n] == math.inf:
        # Only reachable when not even a single photo fits between its margins.
        raise ValueError("container too small for the given margin")

    spans: List[Tuple[int, int]] = []
    end = n
    while end > 0:
        start = back[end]
        spans.append((start, end))
        end = start
    spans.reverse()
    return spans


def compute_row_layout(
    items: Sequence[NormalizedItem],
    *,
    container_width: float,
    target_row_height: float,
    margin: float,
    search_window: int,
    allow_unfinished_last_row: bool = True,
    weighted: bool = False,
) -> List[Thumb]:
    if not items or container_width <= 0:
        return []
    if search_window < 1:
        raise ValueError("search_window must be >= 1")

    spans = partition_rows(
        items,
        container_width=container_width,
        target_row_height=target_row_height,
        margin=margin,
        search_window=search_window,
        weighted=weighted,
    )

    thumbs: List[Thumb] = []
    top = 0.0
    for row_number, (start, end) in enumerate(spans):
        row = items[start:end]
        height = common_height(
            sum(item.aspect_ratio for item in row), len(row), container_width, margin
        )
        is_last = row_number == len(spans) - 1
        if is_last and allow_unfinished_last_row and len(spans) > 1:
            # A last row that would have to grow past the target to fill the
            # width is left short at the target height instead.
            height = min(height, target_row_height)

        left = 0.0
        for item in row:
            width = item.aspect_ratio * height
            thumbs.append(
                Thumb(
                    index=item.index,
                    left=left + margin,
                    top=top + margin,
                    width=width,
                    height=height,
                    container_height=height,
                    photo=item.photo,
                )
            )
            left += width + 2 * margin
        top += height + 2 * margin

    logger.debug(
        "row layout: %d photos in %d rows (width=%s, target=%s, window=%d)",
        len(items),
        len(spans),
        container_width,
        target_row_height,
        search_window,
    )
    return thumbs
