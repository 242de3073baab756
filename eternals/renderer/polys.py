"""Built-in poly stack renderers.

Each renderer draws one :class:`~eternals.blueprint.PolyStack` (one eye, one
horn, one mouth segment) onto a surface. Feature layers accept any callable
with the same signature, so the drawing style of each family can be changed
per render without touching blueprint data.

Contract (``PolyStackRenderer``):

* ``None`` stack is a silent no-op; an absent slot is expected, not an error.
* Polys are drawn in sequence order (largest first, so smaller polys sit on
  top).
* Renderers must not mutate the stack or the borders.
"""

import math
from typing import Dict, Optional

from eternals.blueprint import Borders, PolyStack
from eternals.renderer.path import build_path, build_straight_path
from eternals.surface.base import Surface
from eternals.types import PolyStackRenderer

TWO_PI = 2 * math.pi
SHARP_BORDER_WIDTH = 1


def draw_polys(
    surface: Surface, stack: Optional[PolyStack], borders: Borders
) -> None:
    """Standard renderer: curved hexagons with the blueprint borders."""
    if stack is None:
        return

    for poly in stack.polys:
        build_path(surface, poly.x, poly.y)
        surface.fill(poly.color)
        surface.stroke(borders.size, borders.color)


def sharp_polys(
    surface: Surface, stack: Optional[PolyStack], borders: Borders
) -> None:
    """Angular hexagons with a thin border in the blueprint border color."""
    if stack is None:
        return

    for poly in stack.polys:
        build_straight_path(surface, poly.x, poly.y)
        surface.fill(poly.color)
        surface.stroke(SHARP_BORDER_WIDTH, borders.color)


def round_circles(
    surface: Surface, stack: Optional[PolyStack], borders: Borders
) -> None:
    """Concentric circles around the stack center, one per poly.

    Circle diameters come from ``poly.size`` instead of the corner arrays.
    """
    if stack is None:
        return

    for poly in stack.polys:
        surface.begin_path()
        surface.arc(stack.center_x, stack.center_y, poly.size / 2, 0, TWO_PI)
        surface.fill(poly.color)
        surface.stroke(borders.size, borders.color)


DEFAULT_STRATEGY: PolyStackRenderer = draw_polys

STRATEGY_REGISTRY: Dict[str, PolyStackRenderer] = {
    "default": draw_polys,
    "sharp": sharp_polys,
    "round": round_circles,
}
"""Registry of built-in renderer names to callables.

Callers may pass a custom renderer directly to the feature layers or extend
this registry so it shows up in the viewer app.
"""
