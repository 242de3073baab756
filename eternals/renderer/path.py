"""Corner-curve path construction.

Each poly is a hexagon whose six corners are drawn as quadratic curves, so a
blueprint can give every corner its own rounding (this is how eternals get
their different "expressions"). For corner ``k`` the arrays hold three
points at ``p = 3k``::

    x = [a, a, a, b, b, b, c, c, c, d, d, d, e, e, e, f, f, f]

The path enters the corner at ``p``, curves through the control point
``p + 1`` and leaves at ``p + 2``; a straight edge connects each exit to the
next corner's entry, and closing the path joins the last exit back to the
first entry.

The builders only emit path commands; filling and stroking is left to the
caller.
"""

from typing import Sequence

from eternals.blueprint import POINTS_PER_CORNER, POINTS_PER_POLY, check_corner_arrays
from eternals.surface.base import Surface


def build_path(surface: Surface, x: Sequence[float], y: Sequence[float]) -> None:
    """Emit the closed curved path of one poly.

    Raises:
        ValueError: If either array does not hold exactly 18 values. Nothing
            is emitted in that case.
    """
    check_corner_arrays(x, y)

    surface.begin_path()
    for point in range(0, POINTS_PER_POLY, POINTS_PER_CORNER):
        if point == 0:
            surface.move_to(x[point], y[point])
        else:
            surface.line_to(x[point], y[point])
        surface.quadratic_curve_to(x[point + 1], y[point + 1], x[point + 2], y[point + 2])
    surface.close_path()


def build_straight_path(
    surface: Surface, x: Sequence[float], y: Sequence[float]
) -> None:
    """Emit a straight-edged hexagon through the six corner entry points."""
    check_corner_arrays(x, y)

    surface.begin_path()
    for point in range(0, POINTS_PER_POLY, POINTS_PER_CORNER):
        if point == 0:
            surface.move_to(x[point], y[point])
        else:
            surface.line_to(x[point], y[point])
    surface.close_path()
