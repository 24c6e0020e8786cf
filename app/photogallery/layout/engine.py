"""Layout facade.

Resolves the width-dependent parameters once, validates the photos and hands
off to the row or column engine. Holds no state between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Iterable, List, Optional, Union

from app.photogallery.errors import ParameterError
from app.photogallery.layout.columns import DEFAULT_COLUMN_BREAKPOINTS, Breakpoints
from app.photogallery.layout.justified import compute_row_layout
from app.photogallery.layout.masonry import compute_column_layout
from app.photogallery.layout.models import COLUMN, DIRECTIONS, ROW, Thumb
from app.photogallery.layout.normalize import normalize_items
from app.photogallery.layout.search_window import NARROW_WIDTH_THRESHOLD, default_search_window

Number = Union[int, float]
ParamValue = Union[Number, Callable[[float], Number], None]


@dataclass(frozen=True)
class LayoutDefaults:
    margin: float = 2
    direction: str = ROW
    target_row_height: float = 300
    search_window: int = 2
    search_window_threshold: float = NARROW_WIDTH_THRESHOLD
    column_breakpoints: Breakpoints = DEFAULT_COLUMN_BREAKPOINTS


DEFAULTS = LayoutDefaults()


def _check_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ParameterError(name, "must be a number", value)
    value = float(value)
    if not math.isfinite(value):
        raise ParameterError(name, "must be finite", value)
    return value


def _check_count(name: str, value: Any) -> int:
    number = _check_number(name, value)
    if number != int(number) or number < 1:
        raise ParameterError(name, "must be an integer >= 1", value)
    return int(number)


@dataclass(frozen=True)
class WidthParam:
    """A parameter given either as a literal or as a function of width."""

    name: str
    literal: Optional[Number] = None
    per_width: Optional[Callable[[float], Number]] = None

    @classmethod
    def of(cls, name: str, value: ParamValue) -> Optional["WidthParam"]:
        if value is None:
            return None
        if callable(value):
            return cls(name=name, per_width=value)
        return cls(name=name, literal=value)

    def resolve(self, container_width: float) -> float:
        if self.per_width is not None:
            return _check_number(self.name, self.per_width(container_width))
        return _check_number(self.name, self.literal)


@dataclass(frozen=True)
class ResolvedParams:
    direction: str
    margin: float
    target_row_height: Optional[float] = None
    search_window: Optional[int] = None
    columns: Optional[int] = None


def resolve_params(
    container_width: float,
    *,
    direction: str = ROW,
    margin: Optional[Number] = None,
    target_row_height: ParamValue = None,
    search_window: ParamValue = None,
    columns: ParamValue = None,
    defaults: LayoutDefaults = DEFAULTS,
) -> ResolvedParams:
    """Evaluate every width-dependent parameter exactly once."""

    if direction not in DIRECTIONS:
        raise ParameterError("direction", f"must be one of {DIRECTIONS}", direction)

    margin_value = _check_number("margin", defaults.margin if margin is None else margin)
    if margin_value < 0:
        raise ParameterError("margin", "must be >= 0", margin)

    if direction == COLUMN:
        param = WidthParam.of("columns", columns)
        if param is None:
            count = defaults.column_breakpoints.pick(container_width)
        else:
            count = _check_count("columns", param.resolve(container_width))
        return ResolvedParams(direction=COLUMN, margin=margin_value, columns=count)

    param = WidthParam.of("target_row_height", target_row_height)
    height = (
        float(defaults.target_row_height) if param is None else param.resolve(container_width)
    )
    if height <= 0:
        raise ParameterError("target_row_height", "must be > 0", height)

    param = WidthParam.of("search_window", search_window)
    if param is None:
        window = default_search_window(
            container_width=container_width,
            target_row_height=height,
            threshold=defaults.search_window_threshold,
            narrow_window=defaults.search_window,
        )
    else:
        window = _check_count("search_window", param.resolve(container_width))

    return ResolvedParams(
        direction=ROW, margin=margin_value, target_row_height=height, search_window=window
    )


def compute_layout(
    photos: Iterable[Any],
    container_width: float,
    *,
    direction: str = ROW,
    margin: Optional[Number] = None,
    target_row_height: ParamValue = None,
    search_window: ParamValue = None,
    columns: ParamValue = None,
    allow_unfinished_last_row: bool = True,
    weight_rows_by_count: bool = False,
    layout_width: Optional[float] = None,
    defaults: LayoutDefaults = DEFAULTS,
) -> List[Thumb]:
    """Lay out ``photos`` inside a container ``container_width`` wide.

    Parameter callables and the search-window threshold see
    ``container_width``; the engines fill ``layout_width`` when given (the
    gallery shaves a pixel off the measured width).

    A width of 0 means "not measured yet" and yields no thumbs.
    """

    if container_width <= 0:
        return []

    params = resolve_params(
        container_width,
        direction=direction,
        margin=margin,
        target_row_height=target_row_height,
        search_window=search_window,
        columns=columns,
        defaults=defaults,
    )
    items = normalize_items(photos)
    width = container_width if layout_width is None else layout_width
    if not items or width <= 0:
        return []
    if width <= 2 * params.margin:
        raise ParameterError("margin", "leaves no room inside the container", params.margin)
    if params.direction == COLUMN and width <= 2 * params.margin * params.columns:
        raise ParameterError("columns", "margins leave no room for this many columns", params.columns)

    if params.direction == COLUMN:
        return compute_column_layout(
            items, container_width=width, columns=params.columns, margin=params.margin
        )
    return compute_row_layout(
        items,
        container_width=width,
        target_row_height=params.target_row_height,
        margin=params.margin,
        search_window=params.search_window,
        allow_unfinished_last_row=allow_unfinished_last_row,
        weighted=weight_rows_by_count,
    )
