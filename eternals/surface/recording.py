"""Display-list surface.

:class:`RecordingSurface` keeps every drawing call as an immutable
:class:`DrawCommand`. A recording can be compared against another one
(renders are deterministic, so equal blueprints give equal lists),
inspected in tests, or replayed onto a real surface later.
"""

from dataclasses import dataclass
from typing import Any, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from eternals.surface.base import RadialGradient, Surface


@dataclass(frozen=True)
class DrawCommand:
    """One surface call: method ``name`` applied to ``args``."""

    name: str
    args: Tuple[Any, ...] = ()


class RecordingSurface:
    """Surface that records commands instead of drawing them."""

    commands: PVector[DrawCommand]
    width: int
    height: int

    def __init__(self) -> None:
        self.commands = pvector()
        self.width = 0
        self.height = 0

    def count(self, name: str) -> int:
        """Number of recorded commands called ``name``."""
        return sum(1 for command in self.commands if command.name == name)

    def names(self) -> Tuple[str, ...]:
        return tuple(command.name for command in self.commands)

    def clear(self) -> None:
        self.commands = pvector()

    def replay(self, target: Surface) -> None:
        """Issue every recorded command, in order, on ``target``."""
        for command in self.commands:
            getattr(target, command.name)(*command.args)

    def _record(self, name: str, *args: Any) -> None:
        self.commands = self.commands.append(DrawCommand(name, args))

    # -------- Surface protocol --------

    def set_size(self, width: int, height: int) -> None:
        self.width, self.height = width, height
        self._record("set_size", width, height)

    def fill_rect(
        self, x: float, y: float, width: float, height: float, color: str
    ) -> None:
        self._record("fill_rect", x, y, width, height, color)

    def fill_rect_gradient(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        gradient: RadialGradient,
    ) -> None:
        self._record("fill_rect_gradient", x, y, width, height, gradient)

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        self._record("quadratic_curve_to", cpx, cpy, x, y)

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        self._record("arc", x, y, radius, start, end)

    def close_path(self) -> None:
        self._record("close_path")

    def fill(self, color: str) -> None:
        self._record("fill", color)

    def stroke(self, width: float, color: str) -> None:
        self._record("stroke", width, color)
