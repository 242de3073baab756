"""Common type aliases.

``PolyStackRenderer`` is the central extension point of the renderer: every
feature family (horns, eyes, mouth) is drawn by one of these callables, so the
rendering style can be swapped without touching blueprint data.
"""

from typing import Callable, Optional, Tuple, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from eternals.blueprint import Borders, PolyStack
    from eternals.surface.base import Surface

HexColor = str
RGBA = Tuple[int, int, int, int]
Point = Tuple[float, float]

PolyStackRenderer = Callable[
    ["Surface", Optional["PolyStack"], "Borders"],
    None,
]
"""Draws one poly stack onto a surface.

Contract:

* ``None`` stack is a silent no-op (the slot is simply absent).
* Must not mutate the stack or the borders.
* Polys are drawn in sequence order; the first poly ends up at the bottom.
"""
