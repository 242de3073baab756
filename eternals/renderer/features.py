"""Feature layers: horns, eyes and mouth.

Every layer walks its family's slots in a fixed order and hands each slot to
the poly stack renderer, present or not; the renderer's ``None`` rule takes
care of absent slots. The slot order is also the stacking order:

* horns: left, right
* eyes: left, middle, right
* mouth: left3, left2, left1, middle, right1, right2, right3 (outer left
  first, outer right last)
"""

from typing import Optional, Sequence

from eternals.blueprint import Blueprint, Borders, Eyes, FeatureFamily, Horns, Mouth
from eternals.renderer.polys import DEFAULT_STRATEGY
from eternals.surface.base import Surface
from eternals.types import PolyStackRenderer

HORN_SLOTS = Horns.SLOTS
EYE_SLOTS = Eyes.SLOTS
MOUTH_SLOTS = Mouth.SLOTS


def render_slots(
    surface: Surface,
    family: FeatureFamily,
    slots: Sequence[str],
    borders: Borders,
    strategy: Optional[PolyStackRenderer] = None,
) -> None:
    draw = strategy or DEFAULT_STRATEGY
    for slot in slots:
        draw(surface, getattr(family, slot), borders)


def render_horns(
    surface: Surface,
    blueprint: Blueprint,
    strategy: Optional[PolyStackRenderer] = None,
) -> None:
    # usually not present
    render_slots(surface, blueprint.horns, HORN_SLOTS, blueprint.borders, strategy)


def render_eyes(
    surface: Surface,
    blueprint: Blueprint,
    strategy: Optional[PolyStackRenderer] = None,
) -> None:
    render_slots(surface, blueprint.eyes, EYE_SLOTS, blueprint.borders, strategy)


def render_mouth(
    surface: Surface,
    blueprint: Blueprint,
    strategy: Optional[PolyStackRenderer] = None,
) -> None:
    render_slots(surface, blueprint.mouth, MOUTH_SLOTS, blueprint.borders, strategy)
