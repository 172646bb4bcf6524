"""Stroke storage and anti-aliased thick line rasterisation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

WINDOW_WIDTH = 700
WINDOW_HEIGHT = 600
RENDER_WINDOW_WIDTH = 3840
RENDER_WINDOW_HEIGHT = 2160
FONT_SIZE = 16
POINTS_THRESHOLD = 1


@dataclass(frozen=True)
class Point:
    """A sampled pointer position belonging to a stroke."""

    x: int
    y: int
    line_thickness: int
    connect: bool


class PointStore:
    """Ordered collection of stroke points with distance-based thinning."""

    def __init__(self, threshold: float = POINTS_THRESHOLD) -> None:
        self.threshold = threshold
        self._points: list[Point] = []

    def add(self, x: int, y: int, line_thickness: int, connect: bool) -> bool:
        """Store a point; connected points closer than the threshold are dropped.

        Returns True when the point was stored.
        """
        if connect and self._points:
            last = self._points[-1]
            if math.hypot(last.x - x, last.y - y) <= self.threshold:
                return False
        self._points.append(Point(x, y, line_thickness, connect))
        return True

    def clear(self) -> None:
        self._points.clear()

    def segments(self) -> Iterator[tuple[Point, Point]]:
        """Yield consecutive point pairs that are both part of a stroke."""
        for first, second in zip(self._points, self._points[1:]):
            if first.connect and second.connect:
                yield first, second

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)


def _c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    return int(a / b)


def line_pixels(
    x1: int, y1: int, x2: int, y2: int, thickness: int
) -> Iterator[tuple[int, int, float]]:
    """Yield (x, y, intensity) pixels of a thick anti-aliased line.

    Uses Wu's algorithm, repeated for parallel lines offset along the
    perpendicular to give the line its thickness.
    """
    steep = abs(y2 - y1) > abs(x2 - x1)
    if steep:
        x1, y1 = y1, x1
        x2, y2 = y2, x2
    if x1 > x2:
        x1, x2 = x2, x1
        y1, y2 = y2, y1

    dx = float(x2 - x1)
    dy = float(y2 - y1)
    gradient = 1.0 if dx == 0.0 else dy / dx
    perpendicular = 1.0 if gradient == 0.0 else -1.0 / gradient
    angle = math.atan(perpendicular)

    def plot(px: int, py: int, intensity: float) -> tuple[int, int, float]:
        return (py, px, intensity) if steep else (px, py, intensity)

    half = _c_div(thickness, 2)
    for t in range(-half, half + 1):
        offset_x = t * math.cos(angle)
        offset_y = t * math.sin(angle)

        ax1 = int(x1 + offset_x)
        ay1 = int(y1 + offset_y)
        ax2 = int(x2 + offset_x)
        ay2 = int(y2 + offset_y)

        adx = float(ax2 - ax1)
        ady = float(ay2 - ay1)
        agrad = 1.0 if adx == 0.0 else ady / adx
        intery = ay1 + agrad * (ax1 - x1)

        xpxl1 = ax1
        ypxl1 = ay1
        xgap = 1 - (ax1 + 0.5 - math.floor(ax1 + 0.5))
        frac = intery - math.floor(intery)
        yield plot(xpxl1, ypxl1, (1 - frac) * xgap)
        yield plot(xpxl1, ypxl1 + 1, frac * xgap)
        intery += agrad

        for x in range(xpxl1 + 1, ax2):
            y = math.floor(intery)
            f = intery - y
            yield plot(x, y, 1 - f)
            yield plot(x, y + 1, f)
            intery += agrad