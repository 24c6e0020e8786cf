"""Default lookahead for the justified-row search."""

from __future__ import annotations

import math

NARROW_WINDOW = 2
NARROW_WIDTH_THRESHOLD = 450


def find_ideal_node_search(*, container_width: float, target_row_height: float) -> int:
    """Estimate how many photos a row can usefully hold.

    container_width / target_row_height is the combined aspect ratio of a row
    at target height; typical photos are ~1.5 wide, and a fixed slack of 8
    lets the search consider rows noticeably fuller than the estimate.
    Halves round up.
    """

    if target_row_height <= 0:
        raise ValueError("target_row_height must be > 0")
    row_aspect_ratio = container_width / target_row_height
    return max(NARROW_WINDOW, math.floor(row_aspect_ratio / 1.5 + 0.5) + 8)


def default_search_window(
    *,
    container_width: float,
    target_row_height: float,
    threshold: float = NARROW_WIDTH_THRESHOLD,
    narrow_window: int = NARROW_WINDOW,
) -> int:
    # Narrow containers hold few photos per row; searching further buys nothing.
    if container_width < threshold:
        return narrow_window
    return find_ideal_node_search(
        container_width=container_width, target_row_height=target_row_height
    )
