"""Responsive column-count and breakpoint helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple


@dataclass(frozen=True)
class Breakpoints:
    """Width thresholds mapped to a value.

    ``steps`` are ``(upper_bound, value)`` pairs in ascending order: the
    first step whose bound is strictly greater than the width wins, and
    ``fallback`` applies at or beyond the last bound.
    """

    steps: Tuple[Tuple[float, int], ...]
    fallback: int

    def __post_init__(self) -> None:
        bounds = [bound for bound, _ in self.steps]
        if bounds != sorted(bounds):
            raise ValueError("breakpoint bounds must be ascending")

    def pick(self, width: float) -> int:
        for bound, value in self.steps:
            if width < bound:
                return value
        return self.fallback


DEFAULT_COLUMN_BREAKPOINTS = Breakpoints(steps=((500, 1), (900, 2), (1500, 3)), fallback=4)


def choose_columns(
    *,
    container_width_px: int,
    min_column_width_px: int,
    gutter_px: int,
    max_columns: int = 12,
) -> int:
    """Choose a reasonable column count.

    Policy:
    - columns >= 1
    - each column should be at least min_column_width_px
    - account for gutters between columns
    - clamp to max_columns
    """

    if container_width_px <= 0:
        raise ValueError("container_width_px must be > 0")
    if min_column_width_px <= 0:
        raise ValueError("min_column_width_px must be > 0")
    if gutter_px < 0:
        raise ValueError("gutter_px must be >= 0")
    if max_columns <= 0:
        raise ValueError("max_columns must be > 0")

    # Largest N with N*min + (N-1)*gutter <= container,
    # i.e. N <= (container+gutter)/(min+gutter).
    denom = min_column_width_px + gutter_px
    n = (container_width_px + gutter_px) // denom
    return int(max(1, min(max_columns, n)))


def columns_for_min_width(
    min_column_width_px: int, *, gutter_px: int = 4, max_columns: int = 12
) -> Callable[[float], int]:
    """Build a ``columns`` callable for the layout engine.

    The gallery puts ``margin`` on both sides of each column, so the gutter
    between two columns is ``2 * margin`` (4 with the default margin).
    """

    def columns(container_width: float) -> int:
        return choose_columns(
            container_width_px=int(container_width),
            min_column_width_px=min_column_width_px,
            gutter_px=gutter_px,
            max_columns=max_columns,
        )

    return columns
