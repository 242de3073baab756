# tests/renderer/test_features.py

from typing import List, Optional

from eternals.blueprint import Borders, Horns, Mouth, PolyStack
from eternals.renderer.features import (
    EYE_SLOTS,
    MOUTH_SLOTS,
    render_eyes,
    render_horns,
    render_mouth,
)
from eternals.surface.base import Surface
from eternals.surface.recording import RecordingSurface
from tests.test_utils import make_blueprint, make_stack


class SpyStrategy:
    """Poly stack renderer that only remembers what it was given."""

    def __init__(self) -> None:
        self.stacks: List[Optional[PolyStack]] = []
        self.borders: List[Borders] = []

    def __call__(
        self, surface: Surface, stack: Optional[PolyStack], borders: Borders
    ) -> None:
        self.stacks.append(stack)
        self.borders.append(borders)


def test_slot_orders() -> None:
    assert EYE_SLOTS == ("left", "middle", "right")
    assert MOUTH_SLOTS == (
        "left3",
        "left2",
        "left1",
        "middle",
        "right1",
        "right2",
        "right3",
    )


def test_mouth_with_only_middle_draws_one_stack() -> None:
    bp = make_blueprint()
    spy = SpyStrategy()
    render_mouth(RecordingSurface(), bp, spy)

    assert len(spy.stacks) == 7
    drawn = [s for s in spy.stacks if s is not None]
    assert drawn == [bp.mouth.middle]
    assert spy.stacks.index(bp.mouth.middle) == 3


def test_mouth_default_strategy_fills_middle_polys() -> None:
    bp = make_blueprint()
    surface = RecordingSurface()
    render_mouth(surface, bp)
    assert bp.mouth.middle is not None
    assert surface.count("fill") == len(bp.mouth.middle.polys)


def test_mouth_draws_outer_left_to_outer_right() -> None:
    stacks = {slot: make_stack(1, center=(i * 100, 500)) for i, slot in enumerate(MOUTH_SLOTS)}
    bp = make_blueprint()
    bp = type(bp)(
        width=bp.width,
        height=bp.height,
        background=bp.background,
        borders=bp.borders,
        mouth=Mouth(count=7, **stacks),
    )
    spy = SpyStrategy()
    render_mouth(RecordingSurface(), bp, spy)
    assert [s.center_x for s in spy.stacks if s is not None] == [0, 100, 200, 300, 400, 500, 600]


def test_eyes_pass_blueprint_borders() -> None:
    bp = make_blueprint()
    spy = SpyStrategy()
    render_eyes(RecordingSurface(), bp, spy)

    assert spy.stacks == [bp.eyes.left, None, bp.eyes.right]
    assert spy.borders == [bp.borders] * 3


def test_absent_horns_draw_nothing() -> None:
    surface = RecordingSurface()
    render_horns(surface, make_blueprint())
    assert len(surface.commands) == 0


def test_horns_draw_left_then_right() -> None:
    left, right = make_stack(1, center=(100, 80)), make_stack(1, center=(700, 80))
    bp = make_blueprint()
    bp = type(bp)(
        width=bp.width,
        height=bp.height,
        background=bp.background,
        borders=bp.borders,
        horns=Horns(count=2, left=left, right=right),
    )
    spy = SpyStrategy()
    render_horns(RecordingSurface(), bp, spy)
    assert spy.stacks == [left, right]
