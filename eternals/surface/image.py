"""Pillow raster surface.

Paths are flattened to point lists (quadratic curves and arcs are sampled
with NumPy) and rasterized with ``ImageDraw`` onto a transparent layer that
is then alpha-composited over the image. Compositing each fill and stroke
separately is what lets translucent colors such as ``#f3f3f31c`` blend with
whatever is already drawn, the same way a browser canvas does.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from eternals.color import parse_color
from eternals.config import DEFAULT_CURVE_STEPS
from eternals.surface.base import RadialGradient
from eternals.types import Point

FloatArray = npt.NDArray[np.float64]

TRANSPARENT = (0, 0, 0, 0)
MAX_ARC_STEPS = 4096


@dataclass
class _Subpath:
    points: List[Point] = field(default_factory=list)
    closed: bool = False


def sample_quadratic(
    p0: Point, p1: Point, p2: Point, steps: int
) -> List[Point]:
    """Sample a quadratic Bezier curve, excluding its start point."""
    t: FloatArray = np.linspace(0.0, 1.0, steps + 1)[1:]
    one_t: FloatArray = 1.0 - t
    x = one_t**2 * p0[0] + 2.0 * one_t * t * p1[0] + t**2 * p2[0]
    y = one_t**2 * p0[1] + 2.0 * one_t * t * p1[1] + t**2 * p2[1]
    return list(zip(x.tolist(), y.tolist()))


def sample_arc(
    cx: float,
    cy: float,
    radius: float,
    start: float,
    end: float,
    min_steps: int,
    max_steps: int = MAX_ARC_STEPS,
) -> List[Point]:
    """Sample a circular arc, including both end points."""
    # roughly one point every 4px of arc length, bounded for huge radii
    steps = max(min_steps, int(math.ceil(abs(end - start) * radius / 4.0)))
    steps = min(steps, max(min_steps, max_steps))
    angles: FloatArray = np.linspace(start, end, steps + 1)
    x = cx + radius * np.cos(angles)
    y = cy + radius * np.sin(angles)
    return list(zip(x.tolist(), y.tolist()))


class ImageSurface:
    """RGBA raster surface backed by a ``PIL.Image``."""

    image: Image.Image
    curve_steps: int

    def __init__(
        self, width: int = 0, height: int = 0, curve_steps: int = DEFAULT_CURVE_STEPS
    ):
        self.curve_steps = curve_steps
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)
        self._subpaths: List[_Subpath] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def to_image(self) -> Image.Image:
        """Return a copy of the current raster."""
        return self.image.copy()

    # -------- Surface protocol --------

    def set_size(self, width: int, height: int) -> None:
        self.image = Image.new("RGBA", (width, height), TRANSPARENT)
        self._subpaths = []

    def fill_rect(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        if width <= 0 or height <= 0:
            return
        corners = [(x, y), (x + width - 1, y + height - 1)]
        region = self._region([corners], pad=0)
        if region is None:
            return
        layer, draw, (left, top) = self._layer(region)
        (x0, y0), (x1, y1) = _shift(corners, left, top)
        draw.rectangle((x0, y0, x1, y1), fill=parse_color(color))
        self.image.alpha_composite(layer, (left, top))

    def fill_rect_gradient(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        gradient: RadialGradient,
    ) -> None:
        img_w, img_h = self.image.size
        left, top = max(0, int(math.floor(x))), max(0, int(math.floor(y)))
        right = min(img_w, int(math.ceil(x + width)))
        bottom = min(img_h, int(math.ceil(y + height)))
        if right <= left or bottom <= top:
            return

        # Distances are measured from pixel centers
        ys, xs = np.mgrid[top:bottom, left:right].astype(np.float64) + 0.5
        dist: FloatArray = np.hypot(xs - gradient.x0, ys - gradient.y0)
        t: FloatArray = np.clip(
            (dist - gradient.r0) / (gradient.r1 - gradient.r0), 0.0, 1.0
        )

        offsets = [stop.offset for stop in gradient.stops]
        colors: FloatArray = np.array(
            [parse_color(stop.color) for stop in gradient.stops], dtype=np.float64
        )
        channels = [np.interp(t, offsets, colors[:, c]) for c in range(4)]
        rgba = np.rint(np.stack(channels, axis=-1)).astype(np.uint8)

        self.image.alpha_composite(Image.fromarray(rgba), (left, top))

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(_Subpath([(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        if self._ensure_subpath(x, y):
            self._subpaths[-1].points.append((x, y))

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self._ensure_subpath(cpx, cpy)
        current = self._subpaths[-1]
        current.points.extend(
            sample_quadratic(current.points[-1], (cpx, cpy), (x, y), self.curve_steps)
        )

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        points = sample_arc(x, y, radius, start, end, self.curve_steps)
        first_x, first_y = points[0]
        if self._subpaths and not self._subpaths[-1].closed:
            self.line_to(first_x, first_y)
        else:
            self.move_to(first_x, first_y)
        self._subpaths[-1].points.extend(points[1:])

    def close_path(self) -> None:
        if self._subpaths:
            self._subpaths[-1].closed = True

    def fill(self, color: str) -> None:
        polygons = [s.points for s in self._subpaths if len(s.points) >= 3]
        region = self._region(polygons, pad=1)
        if region is None:
            return
        layer, draw, (left, top) = self._layer(region)
        rgba = parse_color(color)
        for points in polygons:
            draw.polygon(_shift(points, left, top), fill=rgba)
        self.image.alpha_composite(layer, (left, top))

    def stroke(self, width: float, color: str) -> None:
        if width <= 0:
            return
        polylines: List[List[Point]] = []
        for subpath in self._subpaths:
            points = list(subpath.points)
            if subpath.closed:
                # repeat the first segment so the start point gets a joint too
                points.extend(points[:2])
            if len(points) >= 2:
                polylines.append(points)

        line_width = max(1, int(round(width)))
        region = self._region(polylines, pad=line_width)
        if region is None:
            return
        layer, draw, (left, top) = self._layer(region)
        rgba = parse_color(color)
        for points in polylines:
            draw.line(_shift(points, left, top), fill=rgba, width=line_width, joint="curve")
        self.image.alpha_composite(layer, (left, top))

    # -------- Internal helpers --------

    def _ensure_subpath(self, x: float, y: float) -> bool:
        """Make sure a subpath is open; returns False if (x, y) started a new one."""
        if not self._subpaths:
            self.move_to(x, y)
            return False
        if self._subpaths[-1].closed:
            # Drawing after close_path continues from the closed subpath's start
            self.move_to(*self._subpaths[-1].points[0])
        return True

    def _region(
        self, polylines: Sequence[Sequence[Point]], pad: int
    ) -> Optional[Tuple[int, int, int, int]]:
        """Pixel box covering the points plus ``pad``, clipped to the image."""
        if not polylines:
            return None
        xs = [p[0] for points in polylines for p in points]
        ys = [p[1] for points in polylines for p in points]
        img_w, img_h = self.image.size
        left = max(0, int(math.floor(min(xs))) - pad)
        top = max(0, int(math.floor(min(ys))) - pad)
        right = min(img_w, int(math.ceil(max(xs))) + pad + 1)
        bottom = min(img_h, int(math.ceil(max(ys))) + pad + 1)
        if right <= left or bottom <= top:
            return None
        return left, top, right, bottom

    def _layer(
        self, region: Tuple[int, int, int, int]
    ) -> Tuple[Image.Image, ImageDraw.ImageDraw, Tuple[int, int]]:
        """Transparent layer covering ``region``, its drawer and its offset."""
        left, top, right, bottom = region
        layer = Image.new("RGBA", (right - left, bottom - top), TRANSPARENT)
        return layer, ImageDraw.Draw(layer), (left, top)


def _shift(points: Sequence[Point], left: int, top: int) -> List[Point]:
    return [(x - left, y - top) for x, y in points]
