# tests/renderer/test_path.py

import pytest

from eternals.renderer.path import build_path, build_straight_path
from eternals.surface.recording import DrawCommand, RecordingSurface
from tests.test_utils import corner_arrays


def test_build_path_command_sequence() -> None:
    surface = RecordingSurface()
    x, y = corner_arrays()
    build_path(surface, x, y)

    assert surface.names() == (
        "begin_path",
        "move_to",
        "quadratic_curve_to",
        *(["line_to", "quadratic_curve_to"] * 5),
        "close_path",
    )
    assert surface.count("quadratic_curve_to") == 6
    assert surface.count("line_to") == 5
    assert surface.count("move_to") == 1
    assert surface.count("close_path") == 1


def test_build_path_indexes_corner_triples() -> None:
    surface = RecordingSurface()
    x, y = corner_arrays()
    build_path(surface, x, y)
    commands = surface.commands

    assert commands[1] == DrawCommand("move_to", (x[0], y[0]))
    assert commands[2] == DrawCommand("quadratic_curve_to", (x[1], y[1], x[2], y[2]))
    # second corner enters at point 3
    assert commands[3] == DrawCommand("line_to", (x[3], y[3]))
    assert commands[4] == DrawCommand("quadratic_curve_to", (x[4], y[4], x[5], y[5]))
    assert commands[-2] == DrawCommand("quadratic_curve_to", (x[16], y[16], x[17], y[17]))


@pytest.mark.parametrize("builder", [build_path, build_straight_path])
def test_wrong_length_emits_nothing(builder) -> None:
    surface = RecordingSurface()
    x, y = corner_arrays()
    with pytest.raises(ValueError):
        builder(surface, x[:12], y)
    with pytest.raises(ValueError):
        builder(surface, x, y + [1.0])
    assert len(surface.commands) == 0


def test_build_straight_path_uses_entry_points() -> None:
    surface = RecordingSurface()
    x, y = corner_arrays()
    build_straight_path(surface, x, y)

    assert surface.count("quadratic_curve_to") == 0
    assert surface.names() == (
        "begin_path",
        "move_to",
        *(["line_to"] * 5),
        "close_path",
    )
    points = [c.args for c in surface.commands if c.name in ("move_to", "line_to")]
    assert points == [(x[p], y[p]) for p in range(0, 18, 3)]
