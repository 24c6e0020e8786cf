"""Gallery glue: width observation, render callback and click neighbours."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from app.photogallery.errors import LayoutError
from app.photogallery.layout.engine import DEFAULTS, ParamValue, compute_layout
from app.photogallery.layout.models import COLUMN, Thumb, gallery_height
from app.photogallery.reactive import Scheduler, TimerScheduler, WidthCell

logger = logging.getLogger(__name__)

# Browsers may round the measured width up by a pixel.
SUBPIXEL_GUARD_PX = 1


@dataclass(frozen=True)
class ClickEvent:
    index: int
    photo: Any
    previous: Optional[Any]
    next: Optional[Any]


@dataclass(frozen=True)
class RenderRequest:
    left: float
    top: float
    container_height: float
    index: int
    margin: float
    direction: str
    on_click: Optional[Callable[[Any, int], None]]
    photo: Thumb
    key: str


def click_context(photos: Sequence[Any], index: int) -> ClickEvent:
    if not 0 <= index < len(photos):
        raise IndexError(f"no photo at index {index}")
    return ClickEvent(
        index=index,
        photo=photos[index],
        previous=photos[index - 1] if index > 0 else None,
        next=photos[index + 1] if index + 1 < len(photos) else None,
    )


def _photo_attr(photo: Any, name: str) -> Any:
    if isinstance(photo, dict):
        return photo.get(name)
    return getattr(photo, name, None)


def describe_photo(request: RenderRequest) -> Dict[str, Any]:
    """Default renderer: a plain ``img`` description."""

    thumb = request.photo
    style: Dict[str, Any] = {"margin": request.margin, "display": "block"}
    if request.direction == COLUMN:
        style.update(position="absolute", left=request.left, top=request.top)
    if request.on_click is not None:
        style["cursor"] = "pointer"
    return {
        "tag": "img",
        "key": request.key,
        "src": _photo_attr(thumb.photo, "src"),
        "alt": _photo_attr(thumb.photo, "alt"),
        "width": thumb.width,
        "height": thumb.height,
        "style": style,
    }


class Gallery:
    """Keeps a photo list laid out against a changing container width.

    Widths arrive through ``observe`` (or are fixed by the parent when
    ``use_parent_container_width`` is set). Each settled width triggers one
    layout, delivered to ``on_layout``. Layout errors raised there go to
    ``on_error`` (and the log) instead of the scheduler.
    """

    def __init__(
        self,
        photos: Sequence[Any],
        *,
        direction: str = DEFAULTS.direction,
        margin: float = DEFAULTS.margin,
        columns: ParamValue = None,
        target_row_height: ParamValue = DEFAULTS.target_row_height,
        search_window: ParamValue = None,
        allow_unfinished_last_row: bool = True,
        render_image: Optional[Callable[[RenderRequest], Any]] = None,
        on_click: Optional[Callable[[Any, ClickEvent], None]] = None,
        on_layout: Optional[Callable[[List[Thumb]], None]] = None,
        on_error: Optional[Callable[[LayoutError], None]] = None,
        use_parent_container_width: bool = False,
        parent_container_width: Optional[float] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.photos = list(photos)
        self.direction = direction
        self.margin = margin
        self.columns = columns
        self.target_row_height = target_row_height
        self.search_window = search_window
        self.allow_unfinished_last_row = allow_unfinished_last_row
        self.render_image = render_image or describe_photo
        self.on_click = on_click
        self.on_layout = on_layout
        self.on_error = on_error
        self.use_parent_container_width = use_parent_container_width
        self.parent_container_width = parent_container_width

        self._cell: Optional[WidthCell] = None
        if not use_parent_container_width:
            self._cell = WidthCell(self._width_settled, scheduler or TimerScheduler())

    @property
    def container_width(self) -> int:
        if self.use_parent_container_width:
            width = self.parent_container_width or 0
            return int(math.floor(width)) if width > 0 else 0
        if self._cell is None:
            return 0
        return self._cell.width

    def observe(self, width: float) -> None:
        """Feed a measured width; ignored when the parent supplies it."""
        if self._cell is not None:
            self._cell.push(width)

    def close(self) -> None:
        if self._cell is not None:
            self._cell.close()

    def _width_settled(self, width: int) -> None:
        # Called from the scheduler; errors must not escape it.
        try:
            thumbs = self.layout()
        except LayoutError as e:
            logger.warning("layout at width %d failed: %s", width, e)
            if self.on_error is not None:
                self.on_error(e)
            return
        if self.on_layout is not None:
            self.on_layout(thumbs)

    def layout(self) -> List[Thumb]:
        width = self.container_width
        if not width:
            return []
        return compute_layout(
            self.photos,
            width,
            direction=self.direction,
            margin=self.margin,
            target_row_height=self.target_row_height,
            search_window=self.search_window,
            columns=self.columns,
            allow_unfinished_last_row=self.allow_unfinished_last_row,
            layout_width=width - SUBPIXEL_GUARD_PX,
        )

    def height(self, thumbs: Optional[List[Thumb]] = None) -> float:
        if thumbs is None:
            thumbs = self.layout()
        return gallery_height(thumbs, self.direction, self.margin)

    def handle_click(self, event: Any, index: int) -> None:
        if self.on_click is None:
            return
        self.on_click(event, click_context(self.photos, index))

    def render(self) -> List[Any]:
        thumbs = self.layout()
        on_click = self.handle_click if self.on_click is not None else None
        rendered = [
            self.render_image(
                RenderRequest(
                    left=thumb.left,
                    top=thumb.top,
                    container_height=thumb.container_height,
                    index=thumb.index,
                    margin=self.margin,
                    direction=self.direction,
                    on_click=on_click,
                    photo=thumb,
                    key=thumb.key,
                )
            )
            for thumb in thumbs
        ]
        logger.debug("rendered %d thumbs at width %d", len(rendered), self.container_width)
        return rendered
