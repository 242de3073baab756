"""eternals.surface
=================================

Drawing surfaces the renderer can target.

* :class:`Surface` is the protocol every target implements.
* :class:`ImageSurface` rasterizes onto a Pillow RGBA image.
* :class:`RecordingSurface` keeps an immutable display list.
* :func:`resolve_surface` turns a registered identifier into a surface.

"""

from .base import ColorStop, RadialGradient, Surface
from .image import ImageSurface
from .recording import DrawCommand, RecordingSurface
from .registry import (
    SurfaceNotFoundError,
    register_surface,
    resolve_surface,
    unregister_surface,
)

__all__ = [
    "ColorStop",
    "DrawCommand",
    "ImageSurface",
    "RadialGradient",
    "RecordingSurface",
    "Surface",
    "SurfaceNotFoundError",
    "register_surface",
    "resolve_surface",
    "unregister_surface",
]
