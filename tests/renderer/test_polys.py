# tests/renderer/test_polys.py

import math

import pytest
from pyrsistent import pvector

from eternals.blueprint import PolyStack
from eternals.renderer.polys import (
    SHARP_BORDER_WIDTH,
    STRATEGY_REGISTRY,
    draw_polys,
    round_circles,
    sharp_polys,
)
from eternals.surface.recording import DrawCommand, RecordingSurface
from tests.test_utils import BORDERS, make_stack


@pytest.mark.parametrize("strategy", list(STRATEGY_REGISTRY.values()))
def test_none_stack_is_noop(strategy) -> None:
    surface = RecordingSurface()
    strategy(surface, None, BORDERS)
    assert len(surface.commands) == 0


@pytest.mark.parametrize("strategy", list(STRATEGY_REGISTRY.values()))
def test_empty_stack_draws_nothing(strategy) -> None:
    surface = RecordingSurface()
    strategy(surface, PolyStack(center_x=10, center_y=10, polys=pvector()), BORDERS)
    assert len(surface.commands) == 0


def test_draw_polys_fills_then_strokes_in_order() -> None:
    surface = RecordingSurface()
    stack = make_stack(3, colors=["#111111", "#222222", "#333333"])
    draw_polys(surface, stack, BORDERS)

    assert surface.count("begin_path") == 3
    assert surface.count("quadratic_curve_to") == 18
    fills = [c for c in surface.commands if c.name in ("fill", "stroke")]
    assert fills == [
        DrawCommand("fill", ("#111111",)),
        DrawCommand("stroke", (8, "#222222")),
        DrawCommand("fill", ("#222222",)),
        DrawCommand("stroke", (8, "#222222")),
        DrawCommand("fill", ("#333333",)),
        DrawCommand("stroke", (8, "#222222")),
    ]
    # each path is closed before it is painted
    names = surface.names()
    first_fill = names.index("fill")
    assert names[first_fill - 1] == "close_path"


def test_draw_polys_does_not_touch_stack() -> None:
    stack = make_stack(2)
    before = stack
    draw_polys(RecordingSurface(), stack, BORDERS)
    assert stack == before


def test_sharp_polys_uses_straight_edges_and_thin_border() -> None:
    surface = RecordingSurface()
    sharp_polys(surface, make_stack(2), BORDERS)

    assert surface.count("quadratic_curve_to") == 0
    assert surface.count("line_to") == 10
    strokes = [c for c in surface.commands if c.name == "stroke"]
    assert strokes == [DrawCommand("stroke", (SHARP_BORDER_WIDTH, "#222222"))] * 2


def test_round_circles_uses_center_and_size() -> None:
    surface = RecordingSurface()
    stack = make_stack(2, center=(120, 80), colors=["#abcdef", "#fedcba"])
    round_circles(surface, stack, BORDERS)

    arcs = [c for c in surface.commands if c.name == "arc"]
    assert arcs == [
        DrawCommand("arc", (120, 80, 50.0, 0, 2 * math.pi)),
        DrawCommand("arc", (120, 80, 45.0, 0, 2 * math.pi)),
    ]
    assert [c.args[0] for c in surface.commands if c.name == "fill"] == [
        "#abcdef",
        "#fedcba",
    ]
