"""Layout of the volume pane: bar shapes, axis ticks, average lines and crosshair."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

Point = Tuple[int, int]
Line = Tuple[Point, Point]
Color = Tuple[int, int, int]

FALLING_COLOR: Color = (85, 252, 252)
RISING_COLOR: Color = (255, 0, 0)
CROSS_COLOR: Color = (255, 255, 255)
AVERAGE_COLORS = {5: (255, 255, 255), 10: (255, 255, 0)}
TITLE = "VOL"
TITLE_COLOR: Color = (255, 255, 0)
TOP_INFO_HEIGHT = 20
MIN_LINE_WIDTH = 3
VOLUME_UNIT = 100


def _qround(value: float) -> int:
    """Round half away from zero, the way integer screen points are formed."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return int(math.ceil(value - 0.5))


@dataclass(frozen=True)
class VolumeBar:
    """Data of one bar that the volume pane needs."""

    open_price: float
    close_price: float
    total_volume: float
    volume_average5: float = 0.0
    volume_average10: float = 0.0

    @property
    def falling(self) -> bool:
        """True when the bar closed below its open."""
        return self.open_price > self.close_price


@dataclass(frozen=True)
class BarShape:
    """How one volume bar is drawn: a thick line when falling, an outline when rising."""

    index: int
    falling: bool
    color: Color
    pen_width: int
    lines: Tuple[Line, ...]


@dataclass
class VolumeChart:
    """Volume pane over the bars from begin_day up to, not including, end_day."""

    bars: Sequence[VolumeBar]
    begin_day: int = 0
    end_day: Optional[int] = None
    total_day: Optional[int] = None
    widget_width: int = 800
    widget_height: int = 200
    margin_left: int = 10
    margin_right: int = 100
    margin_top: int = 20
    margin_bottom: int = 20
    h_grid_num: int = 4
    _end: int = field(init=False, repr=False)
    _total: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._end = len(self.bars) if self.end_day is None else self.end_day
        if not 0 <= self.begin_day <= self._end <= len(self.bars):
            raise ValueError(
                f"bar range {self.begin_day}..{self._end} is outside 0..{len(self.bars)}"
            )
        self._total = (self._end - self.begin_day) if self.total_day is None else self.total_day
        if self._total <= 0:
            raise ValueError("total_day must be positive")
        if self.h_grid_num <= 0:
            raise ValueError("h_grid_num must be positive")

    @property
    def grid_width(self) -> int:
        return self.widget_width - self.margin_left - self.margin_right

    @property
    def grid_height(self) -> int:
        return self.widget_height - self.margin_top - self.margin_bottom

    @property
    def atom_grid_height(self) -> float:
        return self.grid_height / self.h_grid_num

    @property
    def _baseline(self) -> int:
        return self.widget_height - self.margin_bottom

    @property
    def _x_step(self) -> float:
        return self.grid_width / self._total

    def _visible(self):
        for index in range(self.begin_day, self._end):
            yield index, self.bars[index]

    def _y_scale(self) -> float:
        top = self.max_volume()
        return self.grid_height / top if top else 0.0

    def max_volume(self) -> float:
        """Largest volume among the visible bars, in units of one hundred."""
        largest = max((bar.total_volume for _, bar in self._visible()), default=0.0)
        return max(largest, 0.0) / VOLUME_UNIT

    def y_ticks(self) -> List[Tuple[int, int, str]]:
        """Positions and labels of the volume axis, from the baseline upwards."""
        step = self.max_volume() / self.h_grid_num
        x = self.widget_width - self.margin_right + 10
        return [
            (x, _qround(self._baseline - i * self.atom_grid_height), str(int(i * step)))
            for i in range(self.h_grid_num)
        ]

    def line_width(self) -> int:
        """Width of one bar, leaving a gap between neighbours, at least 3."""
        width = int(self.grid_width / self._total)
        width = int(width - 0.2 * width)
        return max(width, MIN_LINE_WIDTH)

    def bar_shapes(self) -> List[BarShape]:
        """Shapes of every visible bar."""
        width = self.line_width()
        y_scale = self._y_scale()
        base = self._baseline
        shapes = []
        for index, bar in self._visible():
            x = self.margin_left + self._x_step * (index - self.begin_day)
            top = base - int(bar.total_volume / VOLUME_UNIT) * y_scale
            if bar.falling:
                cx = _qround(x + 0.5 * width)
                lines: Tuple[Line, ...] = (
                    ((cx, _qround(top + 0.5 * width)), (cx, _qround(base - 0.5 * width))),
                )
                shapes.append(BarShape(index, True, FALLING_COLOR, width, lines))
            else:
                left, right = _qround(x), _qround(x + width)
                p1, p2 = (left, _qround(top)), (right, _qround(top))
                p3, p4 = (left, base), (right, base)
                lines = ((p1, p2), (p1, p3), (p2, p4), (p3, p4))
                shapes.append(BarShape(index, False, RISING_COLOR, 1, lines))
        return shapes

    def average_line(self, day: int) -> List[Point]:
        """Polyline of the 5- or 10-bar volume average, skipping bars without one."""
        if day not in AVERAGE_COLORS:
            raise ValueError(f"no volume average for {day} bars")
        width = self.line_width()
        y_scale = self._y_scale()
        points = []
        for index, bar in self._visible():
            value = bar.volume_average5 if day == 5 else bar.volume_average10
            if value == 0:
                continue
            x = self.margin_left + self._x_step * (index - self.begin_day) + 0.5 * width
            y = self._baseline - value / VOLUME_UNIT * y_scale
            points.append((_qround(x), _qround(y)))
        return points

    def cross_lines(
        self, mouse_x: int, mouse_y: int, key_down: bool, under_mouse: bool
    ) -> List[Line]:
        """Crosshair lines for the mouse position.

        With a key held the vertical line snaps to the bar under the mouse;
        otherwise it follows the mouse and is hidden outside the grid.
        """
        left = self.margin_left
        right = self.widget_width - self.margin_right
        top, bottom = self.margin_top, self._baseline
        horizontal = ((left, mouse_y), (right, mouse_y))
        lines: List[Line] = []

        if key_down:
            step = self._x_step
            x_pos = float(left)
            while mouse_x - x_pos > step:
                x_pos += step
            x_pos += 0.5 * self.line_width()
            lines.append(((int(x_pos), top), (int(x_pos), bottom)))
            if under_mouse:
                lines.append(horizontal)
            return lines

        inside_x = left <= mouse_x <= right
        inside_y = top <= mouse_y <= bottom
        if under_mouse and inside_x and inside_y:
            lines.append(horizontal)
        if inside_x and (inside_y or not under_mouse):
            lines.append(((mouse_x, top), (mouse_x, bottom)))
        return lines