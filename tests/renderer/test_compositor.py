# tests/renderer/test_compositor.py

import asyncio
import math
from dataclasses import replace

import pytest
from pyrsistent import pvector

from eternals.config import RenderConfig
from eternals.fetch import FetchResult
from eternals.renderer.compositor import (
    CUSTOM_PROFILE,
    EternalRenderer,
    RenderProfile,
    render,
    render_skin,
    vignette_gradient,
)
from eternals.surface.base import ColorStop, RadialGradient
from eternals.surface.recording import DrawCommand, RecordingSurface
from eternals.surface.registry import (
    SurfaceNotFoundError,
    register_surface,
    unregister_surface,
)
from tests.test_utils import make_blueprint


def test_no_blueprint_draws_placeholder_only() -> None:
    surface = RecordingSurface()
    render(surface, None)
    assert list(surface.commands) == [
        DrawCommand("set_size", (800, 800)),
        DrawCommand("fill_rect", (0, 0, 800, 800, "#eeeeee")),
    ]


def test_placeholder_follows_config() -> None:
    surface = RecordingSurface()
    render(surface, None, config=RenderConfig(placeholder_size=64, placeholder_color="#123456"))
    assert list(surface.commands) == [
        DrawCommand("set_size", (64, 64)),
        DrawCommand("fill_rect", (0, 0, 64, 64, "#123456")),
    ]


def test_skin_bubble_uses_encoded_alpha() -> None:
    surface = RecordingSurface()
    render_skin(surface, make_blueprint())
    assert list(surface.commands) == [
        DrawCommand("begin_path"),
        DrawCommand("arc", (330, 0, 16.39, 0, 2 * math.pi)),
        DrawCommand("fill", ("#f3f3f31c",)),
    ]


def test_layer_order() -> None:
    bp = make_blueprint()
    surface = RecordingSurface()
    render(surface, bp)
    commands = surface.commands

    assert commands[0] == DrawCommand("set_size", (800, 800))
    assert commands[1] == DrawCommand("fill_rect", (0, 0, 800, 800, "#4872fa"))
    assert [c.name for c in commands[2:5]] == ["begin_path", "arc", "fill"]
    assert commands[5].name == "fill_rect_gradient"
    assert (surface.width, surface.height) == (800, 800)

    # eyes (2 polys each) come before the single mouth poly
    fills = [c.args[0] for c in commands if c.name == "fill"]
    assert fills == ["#f3f3f31c", "#222222", "#ffffff", "#222222", "#ffffff", "#222222"]
    assert surface.count("quadratic_curve_to") == 5 * 6


def test_vignette_gradient() -> None:
    gradient = vignette_gradient(make_blueprint())
    assert gradient == RadialGradient(
        400,
        400,
        400,
        400,
        400,
        800,
        pvector([ColorStop(0.0, "#00000000"), ColorStop(1.0, "#00000080")]),
    )


def test_render_is_deterministic() -> None:
    bp = make_blueprint()
    first, second = RecordingSurface(), RecordingSurface()
    render(first, bp)
    render(second, bp)
    assert first.commands == second.commands
    assert bp == make_blueprint()


def test_profile_switches_layers() -> None:
    surface = RecordingSurface()
    render(surface, make_blueprint(), profile=RenderProfile(vignette=False, mouth=False))
    assert surface.count("fill_rect_gradient") == 0
    # only the four eye polys remain after the bubble
    assert surface.count("fill") == 1 + 4


def test_custom_profile_changes_style() -> None:
    surface = RecordingSurface()
    render(surface, make_blueprint(), profile=CUSTOM_PROFILE)

    fills = [c.args[0] for c in surface.commands if c.name == "fill"]
    assert "#f3f3f31c" not in fills
    assert surface.count("quadratic_curve_to") == 0
    # round eyes: one arc per eye poly
    assert surface.count("arc") == 4


def test_render_by_surface_id() -> None:
    surface = RecordingSurface()
    register_surface("eternal-canvas", surface)
    try:
        render("eternal-canvas", make_blueprint())
    finally:
        unregister_surface("eternal-canvas")
    assert surface.commands[0] == DrawCommand("set_size", (800, 800))

    with pytest.raises(SurfaceNotFoundError):
        render("eternal-canvas", make_blueprint())


class StubClient:
    def __init__(self, result: FetchResult) -> None:
        self.result = result
        self.requested = []

    async def fetch(self, eternal_id: str) -> FetchResult:
        self.requested.append(eternal_id)
        return self.result


def test_eternal_renderer_load_replaces_blueprint_on_success() -> None:
    bp = make_blueprint()
    renderer = EternalRenderer()
    client = StubClient(FetchResult(status=200, blueprint=bp, meta={"name": "Eternal #7"}))

    status = asyncio.run(renderer.load("7", client))  # type: ignore[arg-type]

    assert status == 200
    assert client.requested == ["7"]
    assert renderer.blueprint == bp
    assert renderer.meta == {"name": "Eternal #7"}


def test_eternal_renderer_keeps_blueprint_on_failure() -> None:
    bp = make_blueprint()
    renderer = EternalRenderer(bp)
    status = asyncio.run(renderer.load("7", StubClient(FetchResult(status=404))))  # type: ignore[arg-type]
    assert status == 404
    assert renderer.blueprint == bp

    surface = RecordingSurface()
    renderer.render(surface)
    assert surface.count("fill_rect_gradient") == 1


def test_eternal_renderer_uses_its_profile() -> None:
    renderer = EternalRenderer(
        make_blueprint(), profile=replace(RenderProfile(), background=False, skin=False)
    )
    surface = RecordingSurface()
    renderer.render(surface)
    assert surface.count("fill_rect") == 0
    assert surface.count("arc") == 0
