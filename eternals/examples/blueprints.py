from __future__ import annotations

import math
import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from pyrsistent import pvector

from eternals.blueprint import (
    Background,
    Blueprint,
    Borders,
    Bubble,
    CORNERS_PER_POLY,
    Eyes,
    Horns,
    Mouth,
    Poly,
    PolyStack,
    Shape,
)

DEFAULT_SIZE = 800
DEFAULT_BUBBLE_SPACING = 40
DEFAULT_BORDER_SIZE = 8
DEFAULT_BORDER_COLOR = "#222222"

BACKGROUND_COLORS = ["#4872fa", "#f25c54", "#43aa8b", "#f9c74f", "#9b5de5", "#00bbf9"]
BUBBLE_COLORS = ["#f3f3f3", "#e0e0e0", "#101010"]
IRIS_COLORS = ["#ffd166", "#06d6a0", "#ef476f", "#118ab2", "#ffffff"]
MOUTH_COLORS = ["#ffffff", "#ff99c8", "#fcf6bd", "#d0f4de"]
HORN_COLORS = ["#f4f1de", "#e07a5f", "#3d405b"]

# Which mouth slots are filled for each segment count
MOUTH_LAYOUTS: Dict[int, Tuple[str, ...]] = {
    1: ("middle",),
    3: ("left1", "middle", "right1"),
    5: ("left2", "left1", "middle", "right1", "right2"),
    7: ("left3", "left2", "left1", "middle", "right1", "right2", "right3"),
}
EYE_LAYOUTS: Dict[int, Tuple[str, ...]] = {
    1: ("middle",),
    2: ("left", "right"),
    3: ("left", "middle", "right"),
}


def corner_template(roundness: float, rotation: float = 0.0) -> Shape:
    """Hexagon corner template scaled to 100, centered on the origin.

    ``roundness`` in (0, 0.5] is how far along each edge the corner curve
    starts; larger values give softer corners.
    """
    radius = 50.0
    corners = [
        (
            radius * math.cos(rotation + math.radians(-90 + 60 * k)),
            radius * math.sin(rotation + math.radians(-90 + 60 * k)),
        )
        for k in range(CORNERS_PER_POLY)
    ]
    xs: List[float] = []
    ys: List[float] = []
    for k, (cx, cy) in enumerate(corners):
        px, py = corners[k - 1]
        nx, ny = corners[(k + 1) % CORNERS_PER_POLY]
        xs += [cx + (px - cx) * roundness, cx, cx + (nx - cx) * roundness]
        ys += [cy + (py - cy) * roundness, cy, cy + (ny - cy) * roundness]
    return Shape(x=pvector(_round(xs)), y=pvector(_round(ys)))


def make_stack(
    center: Tuple[float, float],
    sizes: Sequence[float],
    colors: Sequence[str],
    shape: Shape,
) -> PolyStack:
    """Scale ``shape`` to each size around ``center``; sizes largest first."""
    cx, cy = center
    polys = [
        Poly(
            color=color,
            x=pvector(_round(cx + v * size / 100 for v in shape.x)),
            y=pvector(_round(cy + v * size / 100 for v in shape.y)),
            size=size,
        )
        for size, color in zip(sizes, colors)
    ]
    return PolyStack(center_x=cx, center_y=cy, polys=pvector(polys), shape=shape)


def _round(values: Iterable[float]) -> List[float]:
    return [round(v, 2) for v in values]


def _bubbles(
    rng: random.Random, width: int, height: int, spacing: int
) -> List[Bubble]:
    return [
        Bubble(
            center_x=x,
            center_y=y,
            radius=round(rng.uniform(spacing * 0.15, spacing * 0.45), 2),
            opacity=round(rng.uniform(0.03, 0.15), 2),
        )
        for y in range(0, height + 1, spacing)
        for x in range(0, width + 1, spacing)
    ]


def _eyes(rng: random.Random, width: int, height: int, border_color: str) -> Eyes:
    count = rng.choice(sorted(EYE_LAYOUTS))
    size = width * (0.3 if count == 1 else 0.22 if count == 2 else 0.17)
    shape = corner_template(rng.uniform(0.15, 0.45), rotation=rng.uniform(0, math.pi / 3))
    iris = rng.choice(IRIS_COLORS)
    positions = {"left": 0.3, "middle": 0.5, "right": 0.7}
    slots: Dict[str, Optional[PolyStack]] = {
        slot: make_stack(
            (round(width * positions[slot], 2), round(height * 0.38, 2)),
            [size, size * 0.78, size * 0.5, size * 0.22],
            [border_color, "#ffffff", iris, border_color],
            shape,
        )
        for slot in EYE_LAYOUTS[count]
    }
    return Eyes(count=count, **slots)


def _mouth(rng: random.Random, width: int, height: int, border_color: str) -> Mouth:
    count = rng.choice(sorted(MOUTH_LAYOUTS))
    size = width * 0.1
    shape = corner_template(rng.uniform(0.1, 0.4))
    color = rng.choice(MOUTH_COLORS)
    slots: Dict[str, Optional[PolyStack]] = {}
    for slot in MOUTH_LAYOUTS[count]:
        # left3 -> -3, middle -> 0, right2 -> 2
        offset = 0 if slot == "middle" else int(slot[-1])
        if slot.startswith("left"):
            offset = -offset
        scale = 1.0 - 0.12 * abs(offset)
        segment = size * scale
        center = (
            round(width / 2 + offset * size * 0.85, 2),
            round(height * 0.68 - abs(offset) * size * 0.2, 2),
        )
        slots[slot] = make_stack(
            center,
            [segment, segment * 0.6],
            [border_color, color],
            shape,
        )
    return Mouth(count=count, **slots)


def _horns(rng: random.Random, width: int, height: int, border_color: str) -> Horns:
    if rng.random() >= 0.3:
        return Horns()
    size = width * 0.16
    shape = corner_template(rng.uniform(0.05, 0.2))
    color = rng.choice(HORN_COLORS)
    sizes = [size, size * 0.55]
    colors = [border_color, color]
    return Horns(
        count=2,
        left=make_stack((width * 0.22, height * 0.12), sizes, colors, shape),
        right=make_stack((width * 0.78, height * 0.12), sizes, colors, shape),
    )


def generate(
    seed: Optional[int] = None,
    width: int = DEFAULT_SIZE,
    height: int = DEFAULT_SIZE,
    bubble_spacing: int = DEFAULT_BUBBLE_SPACING,
) -> Blueprint:
    """Procedurally build a plausible eternal blueprint.

    The same seed always gives the same blueprint; useful for demos and
    offline rendering without the metadata service.
    """
    rng = random.Random(seed)
    border_color = DEFAULT_BORDER_COLOR
    return Blueprint(
        width=width,
        height=height,
        background=Background(
            color=rng.choice(BACKGROUND_COLORS),
            bubble_color=rng.choice(BUBBLE_COLORS),
            bubbles=pvector(_bubbles(rng, width, height, bubble_spacing)),
        ),
        borders=Borders(size=DEFAULT_BORDER_SIZE, color=border_color),
        horns=_horns(rng, width, height, border_color),
        eyes=_eyes(rng, width, height, border_color),
        mouth=_mouth(rng, width, height, border_color),
    )
