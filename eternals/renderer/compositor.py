"""Full eternal composition.

Layers are applied in a fixed order, each one painting over the previous:

1. background: flat ``background.color`` fill
2. skin: translucent ``bubble_color`` circles, one per bubble
3. vignette: radial darkening toward the edges (not part of the blueprint)
4. horns, 5. eyes, 6. mouth: poly stacks via :mod:`eternals.renderer.features`

A :class:`RenderProfile` chooses which layers run and which poly stack
renderer each feature family uses, so alternative styles are values rather
than subclasses. Rendering keeps no state between calls: the same blueprint
on two fresh surfaces yields the same commands.
"""

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Optional, Union

from PIL import Image
from pyrsistent import pvector

from eternals.blueprint import Blueprint
from eternals.color import encode_alpha
from eternals.config import DEFAULT_RENDER_CONFIG, RenderConfig
from eternals.renderer.features import render_eyes, render_horns, render_mouth
from eternals.renderer.polys import (
    DEFAULT_STRATEGY,
    draw_polys,
    round_circles,
    sharp_polys,
)
from eternals.surface.base import ColorStop, RadialGradient, Surface
from eternals.surface.image import ImageSurface
from eternals.surface.registry import resolve_surface
from eternals.types import PolyStackRenderer

if TYPE_CHECKING:
    from eternals.fetch import BlueprintClient

log = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class RenderProfile:
    """Which layers to draw and how to draw each feature family.

    Attributes:
        background: Draw the flat background fill.
        skin: Draw the skin bubbles.
        vignette: Draw the vignette overlay.
        horns: Draw the horn layer.
        eyes: Draw the eye layer.
        mouth: Draw the mouth layer.
        horns_strategy: Poly stack renderer for horns.
        eyes_strategy: Poly stack renderer for eyes.
        mouth_strategy: Poly stack renderer for mouth segments.
    """

    background: bool = True
    skin: bool = True
    vignette: bool = True
    horns: bool = True
    eyes: bool = True
    mouth: bool = True
    horns_strategy: PolyStackRenderer = DEFAULT_STRATEGY
    eyes_strategy: PolyStackRenderer = DEFAULT_STRATEGY
    mouth_strategy: PolyStackRenderer = DEFAULT_STRATEGY


DEFAULT_PROFILE = RenderProfile()

CUSTOM_PROFILE = RenderProfile(
    skin=False,
    horns_strategy=draw_polys,
    eyes_strategy=round_circles,
    mouth_strategy=sharp_polys,
)

PROFILE_REGISTRY: Dict[str, RenderProfile] = {
    "standard": DEFAULT_PROFILE,
    "custom": CUSTOM_PROFILE,
}


def init_surface(
    surface: Surface,
    blueprint: Optional[Blueprint],
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> None:
    """Size the surface for the blueprint.

    Without a blueprint the surface becomes a flat placeholder square.
    """
    if blueprint is None:
        size = config.placeholder_size
        surface.set_size(size, size)
        surface.fill_rect(0, 0, size, size, config.placeholder_color)
        return

    surface.set_size(blueprint.width, blueprint.height)


def render_background(surface: Surface, blueprint: Blueprint) -> None:
    surface.fill_rect(0, 0, blueprint.width, blueprint.height, blueprint.background.color)


def render_skin(surface: Surface, blueprint: Blueprint) -> None:
    """Draw every skin bubble as a filled circle in the shared bubble color.

    Each bubble's opacity becomes the alpha byte of its fill, e.g. bubble
    ``[330, 0, 16.39, 0.11]`` with ``#f3f3f3`` is filled with ``#f3f3f31c``.
    """
    background = blueprint.background
    for bubble in background.bubbles:
        surface.begin_path()
        surface.arc(bubble.center_x, bubble.center_y, bubble.radius, 0, TWO_PI)
        surface.fill(encode_alpha(background.bubble_color, bubble.opacity))


def vignette_gradient(
    blueprint: Blueprint, config: RenderConfig = DEFAULT_RENDER_CONFIG
) -> RadialGradient:
    """Gradient from half the width (clear) to the full width (darkest)."""
    half = blueprint.width / 2
    return RadialGradient(
        half,
        half,
        half,
        half,
        half,
        blueprint.width,
        pvector(
            [
                ColorStop(0.0, encode_alpha(config.vignette_color, config.vignette_inner_opacity)),
                ColorStop(1.0, encode_alpha(config.vignette_color, config.vignette_outer_opacity)),
            ]
        ),
    )


def render_vignette(
    surface: Surface,
    blueprint: Blueprint,
    config: RenderConfig = DEFAULT_RENDER_CONFIG,
) -> None:
    surface.fill_rect_gradient(
        0, 0, blueprint.width, blueprint.height, vignette_gradient(blueprint, config)
    )


def render(
    surface_or_id: Union[Surface, str],
    blueprint: Optional[Blueprint],
    profile: Optional[RenderProfile] = None,
    config: Optional[RenderConfig] = None,
) -> None:
    """Draw a full eternal onto a surface (or the surface registered under an id).

    Arguments:
        surface_or_id: Target surface, or the identifier it was registered with.
        blueprint: Eternal to draw; ``None`` draws the flat placeholder only.
        profile: Layer switches and per-family renderers; defaults to the standard look.
        config: Placeholder and vignette settings.

    Raises:
        SurfaceNotFoundError: If an identifier names no registered surface.
    """
    surface = resolve_surface(surface_or_id)
    profile = profile or DEFAULT_PROFILE
    config = config or DEFAULT_RENDER_CONFIG

    init_surface(surface, blueprint, config)
    if blueprint is None:
        log.debug("No blueprint, drew %dpx placeholder", config.placeholder_size)
        return

    log.debug("Rendering %dx%d eternal", blueprint.width, blueprint.height)
    if profile.background:
        render_background(surface, blueprint)
    if profile.skin:
        render_skin(surface, blueprint)
    if profile.vignette:
        render_vignette(surface, blueprint, config)
    if profile.horns:
        render_horns(surface, blueprint, profile.horns_strategy)
    if profile.eyes:
        render_eyes(surface, blueprint, profile.eyes_strategy)
    if profile.mouth:
        render_mouth(surface, blueprint, profile.mouth_strategy)


def render_image(
    blueprint: Optional[Blueprint],
    profile: Optional[RenderProfile] = None,
    config: Optional[RenderConfig] = None,
) -> Image.Image:
    """Render onto a fresh :class:`ImageSurface` and return the Pillow image."""
    config = config or DEFAULT_RENDER_CONFIG
    surface = ImageSurface(curve_steps=config.curve_steps)
    render(surface, blueprint, profile=profile, config=config)
    return surface.to_image()


class EternalRenderer:
    """Holds one blueprint and the style used to draw it.

    The blueprint can be supplied up front or loaded later with
    :meth:`load`; the full metadata payload of the last load is kept in
    ``meta`` for reference.
    """

    blueprint: Optional[Blueprint]
    profile: RenderProfile
    config: RenderConfig
    meta: Optional[Dict[str, object]]

    def __init__(
        self,
        blueprint: Optional[Blueprint] = None,
        profile: Optional[RenderProfile] = None,
        config: Optional[RenderConfig] = None,
    ):
        self.blueprint = blueprint
        self.profile = profile or DEFAULT_PROFILE
        self.config = config or DEFAULT_RENDER_CONFIG
        self.meta = None

    async def load(self, eternal_id: str, client: "BlueprintClient") -> int:
        """Fetch the blueprint for ``eternal_id``; returns the fetch status.

        The held blueprint is only replaced when the status is 200.
        """
        result = await client.fetch(eternal_id)
        self.meta = result.meta
        if result.blueprint is not None:
            self.blueprint = result.blueprint
        return result.status

    def render(self, surface_or_id: Union[Surface, str]) -> None:
        render(surface_or_id, self.blueprint, profile=self.profile, config=self.config)

    def render_image(self) -> Image.Image:
        return render_image(self.blueprint, profile=self.profile, config=self.config)

