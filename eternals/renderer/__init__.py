"""Rendering subpackage.

Turns an immutable :class:`~eternals.blueprint.Blueprint` into drawing
commands on a :class:`~eternals.surface.Surface`. The renderer focuses on:

* A fixed layer order: background, skin bubbles, vignette, horns, eyes, mouth.
* Corner-curve hexagon paths built from 18-point corner arrays.
* Swappable poly stack renderers per feature family, chosen through a
  :class:`~eternals.renderer.compositor.RenderProfile`.

See :mod:`eternals.renderer.compositor` for the entry point and
:mod:`eternals.renderer.polys` for the built-in renderers.
"""
