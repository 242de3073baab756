"""Named output surfaces.

Applications register their surfaces under an identifier and pass that
identifier to :func:`eternals.renderer.compositor.render`, the way a page
refers to a canvas element by id.
"""

from typing import Dict, Union

from eternals.surface.base import Surface


class SurfaceNotFoundError(KeyError):
    """Raised when an identifier names no registered surface."""


_SURFACE_REGISTRY: Dict[str, Surface] = {}


def register_surface(name: str, surface: Surface) -> None:
    # Re-registering a name replaces the previous surface
    _SURFACE_REGISTRY[name] = surface


def unregister_surface(name: str) -> None:
    _SURFACE_REGISTRY.pop(name, None)


def resolve_surface(surface_or_id: Union[Surface, str]) -> Surface:
    """Return the surface itself, or the one registered under the given id."""
    if isinstance(surface_or_id, str):
        if surface_or_id not in _SURFACE_REGISTRY:
            raise SurfaceNotFoundError(f"No surface registered as {surface_or_id!r}")
        return _SURFACE_REGISTRY[surface_or_id]
    return surface_or_id
