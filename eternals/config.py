"""Renderer and fetch client configuration.

Both configs are frozen value objects with defaults matching the standard
eternal collection; pass a modified copy (``dataclasses.replace``) to change
them per call.
"""

from dataclasses import dataclass


DEFAULT_BASE_URL = "https://pix.ls/meta/eternals"
DEFAULT_INCLUDE = "blueprint"
DEFAULT_TIMEOUT_S = 10.0

PLACEHOLDER_SIZE = 800
PLACEHOLDER_COLOR = "#eeeeee"

VIGNETTE_COLOR = "#000000"
VIGNETTE_INNER_OPACITY = 0.0
VIGNETTE_OUTER_OPACITY = 0.5

DEFAULT_CURVE_STEPS = 16


@dataclass(frozen=True)
class FetchConfig:
    """Blueprint metadata endpoint settings.

    Attributes:
        base_url: Metadata collection URL; the eternal id is appended as a path segment.
        include: Value of the ``include`` query flag that embeds the blueprint.
        timeout_s: Request timeout in seconds.
    """

    base_url: str = DEFAULT_BASE_URL
    include: str = DEFAULT_INCLUDE
    timeout_s: float = DEFAULT_TIMEOUT_S


@dataclass(frozen=True)
class RenderConfig:
    """Compositor settings that are not part of the blueprint.

    Attributes:
        placeholder_size: Square surface size used when no blueprint is available.
        placeholder_color: Flat fill for the placeholder surface.
        vignette_color: Base color of the vignette overlay.
        vignette_inner_opacity: Vignette opacity at the inner radius.
        vignette_outer_opacity: Vignette opacity at the outer radius.
        curve_steps: Segments used to flatten each curve on raster surfaces.
    """

    placeholder_size: int = PLACEHOLDER_SIZE
    placeholder_color: str = PLACEHOLDER_COLOR
    vignette_color: str = VIGNETTE_COLOR
    vignette_inner_opacity: float = VIGNETTE_INNER_OPACITY
    vignette_outer_opacity: float = VIGNETTE_OUTER_OPACITY
    curve_steps: int = DEFAULT_CURVE_STEPS


DEFAULT_FETCH_CONFIG = FetchConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()
