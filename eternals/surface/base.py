"""Drawing surface protocol.

The renderer only ever talks to a :class:`Surface`: a 2D drawing context with
a small path API (move / line / quadratic curve / arc / close) plus fill and
stroke. Implementations decide what the commands mean: the Pillow surface
rasterizes them, the recording surface keeps them as a display list.

Fill and stroke take their style explicitly instead of holding a mutable
"current style", so a command is fully described by its arguments.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from pyrsistent import pvector
from pyrsistent.typing import PVector


@dataclass(frozen=True)
class ColorStop:
    """Gradient stop at ``offset`` in [0, 1] with a hex ``color``."""

    offset: float
    color: str


@dataclass(frozen=True)
class RadialGradient:
    """Radial gradient between two circles.

    Only concentric circles are supported: the color at a point depends on
    its distance to the shared center, mapped linearly from ``r0`` (offset 0)
    to ``r1`` (offset 1) and clamped outside that band.
    """

    x0: float
    y0: float
    r0: float
    x1: float
    y1: float
    r1: float
    stops: PVector[ColorStop] = pvector()

    def __post_init__(self) -> None:
        if (self.x0, self.y0) != (self.x1, self.y1):
            raise ValueError("Only concentric radial gradients are supported")
        if self.r1 <= self.r0:
            raise ValueError(f"Outer radius {self.r1} must exceed inner radius {self.r0}")
        if len(self.stops) < 2:
            raise ValueError("A gradient needs at least two color stops")


@runtime_checkable
class Surface(Protocol):
    """2D drawing context consumed by the renderer."""

    def set_size(self, width: int, height: int) -> None:
        """Resize and clear the surface to transparent black."""
        ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None: ...

    def fill_rect_gradient(
        self, x: float, y: float, width: float, height: float, gradient: RadialGradient
    ) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None: ...

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, color: str) -> None:
        """Fill the current path."""
        ...

    def stroke(self, width: float, color: str) -> None:
        """Stroke the current path outline."""
        ...
