"""Immutable blueprint model.

A :class:`Blueprint` is the declarative description of one eternal: surface
size, background color and skin bubbles, border style, and the poly stacks
of every facial feature slot. It is the sole input of the renderer and is
never mutated, so one instance can be shared by any number of renders.

Design notes:

* Every type is a frozen dataclass and every sequence a ``pyrsistent``
    ``PVector``; a blueprint is deeply immutable and hashable.
* Payloads coming from the metadata service are validated once by
    :meth:`Blueprint.from_dict`. Renderers trust the model afterwards and do
    not re-check optional fields at each access.
* Feature slots are independently optional. ``None`` means "not drawn".

Poly geometry: each poly is a hexagon described by 18 values per axis, three
per corner. Point ``3k`` is where the path enters corner ``k``, ``3k + 1`` is
the control point of the corner curve and ``3k + 2`` is where the curve exits
toward the next corner.
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Mapping, Optional, Sequence, Tuple, Type, TypeVar

from pyrsistent import pvector
from pyrsistent.typing import PVector

from eternals.color import is_base_hex_color, is_hex_color


CORNERS_PER_POLY = 6
POINTS_PER_CORNER = 3
POINTS_PER_POLY = CORNERS_PER_POLY * POINTS_PER_CORNER


class BlueprintError(ValueError):
    """Raised when a blueprint payload does not match the schema."""


def check_corner_arrays(x: Sequence[float], y: Sequence[float]) -> None:
    """Fail fast unless both coordinate arrays hold exactly 18 values."""
    if len(x) != POINTS_PER_POLY or len(y) != POINTS_PER_POLY:
        raise ValueError(
            f"Poly coordinates must hold {POINTS_PER_POLY} values per axis, "
            f"got x={len(x)} y={len(y)}"
        )


@dataclass(frozen=True)
class Shape:
    """Normalized corner template (scaled to 100) shared by a stack's polys.

    Not needed by the default renderer; alternative strategies may use it.
    """

    x: PVector[float]
    y: PVector[float]

    def __post_init__(self) -> None:
        check_corner_arrays(self.x, self.y)


@dataclass(frozen=True)
class Poly:
    """One curved hexagon.

    Attributes:
        color: Fill color.
        x: 18 x coordinates (6 corners x entry/control/exit).
        y: 18 y coordinates.
        size: Nominal diameter; informational for alternative shapes.
    """

    color: str
    x: PVector[float]
    y: PVector[float]
    size: float = 0.0

    def __post_init__(self) -> None:
        check_corner_arrays(self.x, self.y)


@dataclass(frozen=True)
class PolyStack:
    """Ordered polys of one feature instance, drawn largest to smallest.

    Attributes:
        center_x: Reference point of the stack (used by alternative strategies).
        center_y: Reference point of the stack.
        polys: Draw order; the first poly ends up at the bottom.
        shape: Optional corner template the polys were built from.
    """

    center_x: float
    center_y: float
    polys: PVector[Poly] = pvector()
    shape: Optional[Shape] = None


@dataclass(frozen=True)
class Bubble:
    """Translucent skin circle ``[center_x, center_y, radius, opacity]``."""

    center_x: float
    center_y: float
    radius: float
    opacity: float


@dataclass(frozen=True)
class Background:
    color: str
    bubble_color: str
    bubbles: PVector[Bubble] = pvector()


@dataclass(frozen=True)
class Borders:
    """Stroke style applied to every poly border."""

    size: float
    color: str


@dataclass(frozen=True)
class FeatureFamily:
    """Common fields of the horns / eyes / mouth groups.

    ``count`` and ``shape`` are carried through from the payload for
    reference; rendering only looks at the slots.
    """

    SLOTS: ClassVar[Tuple[str, ...]] = ()

    count: int = 0
    shape: Optional[Shape] = None


@dataclass(frozen=True)
class Horns(FeatureFamily):
    SLOTS: ClassVar[Tuple[str, ...]] = ("left", "right")

    left: Optional[PolyStack] = None
    right: Optional[PolyStack] = None


@dataclass(frozen=True)
class Eyes(FeatureFamily):
    SLOTS: ClassVar[Tuple[str, ...]] = ("left", "middle", "right")

    left: Optional[PolyStack] = None
    middle: Optional[PolyStack] = None
    right: Optional[PolyStack] = None


@dataclass(frozen=True)
class Mouth(FeatureFamily):
    SLOTS: ClassVar[Tuple[str, ...]] = (
        "left3",
        "left2",
        "left1",
        "middle",
        "right1",
        "right2",
        "right3",
    )

    left3: Optional[PolyStack] = None
    left2: Optional[PolyStack] = None
    left1: Optional[PolyStack] = None
    middle: Optional[PolyStack] = None
    right1: Optional[PolyStack] = None
    right2: Optional[PolyStack] = None
    right3: Optional[PolyStack] = None


@dataclass(frozen=True)
class Blueprint:
    """Complete geometry and color description of one eternal.

    Attributes:
        width (int): Output surface width in pixels.
        height (int): Output surface height in pixels.
        background (Background): Base color and skin bubbles.
        borders (Borders): Stroke style for every poly.
        horns (Horns): Left / right horn stacks (usually absent).
        eyes (Eyes): Left / middle / right eye stacks.
        mouth (Mouth): Seven mouth segment stacks, outer left to outer right.
    """

    width: int
    height: int
    background: Background
    borders: Borders
    horns: Horns = Horns()
    eyes: Eyes = Eyes()
    mouth: Mouth = Mouth()

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Blueprint dimensions must be positive, got {self.width}x{self.height}"
            )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Blueprint":
        """Validate a JSON-like payload and build the model.

        Raises:
            BlueprintError: On the first schema violation, naming its path.
        """
        return parse_blueprint(payload)

    def to_dict(self) -> Dict[str, Any]:
        """Plain JSON-compatible form, same layout as the service payload."""
        return {
            "width": self.width,
            "height": self.height,
            "background": {
                "color": self.background.color,
                "bubble_color": self.background.bubble_color,
                "bubbles": [
                    [b.center_x, b.center_y, b.radius, b.opacity]
                    for b in self.background.bubbles
                ],
            },
            "borders": {"size": self.borders.size, "color": self.borders.color},
            "horns": _family_to_dict(self.horns),
            "eyes": _family_to_dict(self.eyes),
            "mouth": _family_to_dict(self.mouth),
        }


# --- Serialization ---


def _shape_to_dict(shape: Optional[Shape]) -> Optional[Dict[str, Any]]:
    if shape is None:
        return None
    return {"x": list(shape.x), "y": list(shape.y)}


def _stack_to_dict(stack: Optional[PolyStack]) -> Optional[Dict[str, Any]]:
    if stack is None:
        return None
    return {
        "center_x": stack.center_x,
        "center_y": stack.center_y,
        "polys": [
            {"size": p.size, "x": list(p.x), "y": list(p.y), "color": p.color}
            for p in stack.polys
        ],
        "shape": _shape_to_dict(stack.shape),
    }


def _family_to_dict(family: FeatureFamily) -> Dict[str, Any]:
    out: Dict[str, Any] = {"count": family.count}
    for slot in family.SLOTS:
        out[slot] = _stack_to_dict(getattr(family, slot))
    out["shape"] = _shape_to_dict(family.shape)
    return out


# --- Validation ---


def _mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise BlueprintError(f"{path}: expected an object, got {type(value).__name__}")
    return value


def _require(payload: Mapping[str, Any], key: str, path: str) -> Any:
    if key not in payload or payload[key] is None:
        raise BlueprintError(f"{_join(path, key)}: missing required field")
    return payload[key]


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _number(value: Any, path: str) -> float:
    # bool is an int subclass but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BlueprintError(f"{path}: expected a number, got {value!r}")
    return value


def _integer(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        # JSON encoders may emit 800.0 for integral sizes
        if isinstance(value, float) and value.is_integer():
            return int(value)
        raise BlueprintError(f"{path}: expected an integer, got {value!r}")
    return value


def _color(value: Any, path: str, base_only: bool = False) -> str:
    valid = is_base_hex_color(value) if base_only else is_hex_color(value)
    if not valid:
        expected = "#rrggbb" if base_only else "a hex color"
        raise BlueprintError(f"{path}: expected {expected}, got {value!r}")
    return value


def _coords(value: Any, path: str) -> PVector[float]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise BlueprintError(f"{path}: expected a list of numbers")
    if len(value) != POINTS_PER_POLY:
        raise BlueprintError(
            f"{path}: expected {POINTS_PER_POLY} values, got {len(value)}"
        )
    return pvector(_number(v, f"{path}[{i}]") for i, v in enumerate(value))


def _sequence(value: Any, path: str) -> Sequence[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise BlueprintError(f"{path}: expected a list")
    return value


def _parse_shape(value: Any, path: str) -> Optional[Shape]:
    if value is None:
        return None
    shape = _mapping(value, path)
    return Shape(
        x=_coords(_require(shape, "x", path), _join(path, "x")),
        y=_coords(_require(shape, "y", path), _join(path, "y")),
    )


def _parse_poly(value: Any, path: str) -> Poly:
    poly = _mapping(value, path)
    size = poly.get("size")
    return Poly(
        color=_color(_require(poly, "color", path), _join(path, "color")),
        x=_coords(_require(poly, "x", path), _join(path, "x")),
        y=_coords(_require(poly, "y", path), _join(path, "y")),
        size=0.0 if size is None else _number(size, _join(path, "size")),
    )


def _parse_stack(value: Any, path: str) -> Optional[PolyStack]:
    if value is None:
        return None
    stack = _mapping(value, path)
    polys_path = _join(path, "polys")
    polys = _sequence(stack.get("polys", []), polys_path)
    return PolyStack(
        center_x=_number(stack.get("center_x", 0), _join(path, "center_x")),
        center_y=_number(stack.get("center_y", 0), _join(path, "center_y")),
        polys=pvector(
            _parse_poly(p, f"{polys_path}[{i}]") for i, p in enumerate(polys)
        ),
        shape=_parse_shape(stack.get("shape"), _join(path, "shape")),
    )


FamilyT = TypeVar("FamilyT", bound=FeatureFamily)


def _parse_family(family_type: Type[FamilyT], value: Any, path: str) -> FamilyT:
    if value is None:
        return family_type()
    family = _mapping(value, path)
    slots: Dict[str, Optional[PolyStack]] = {
        f.name: _parse_stack(family.get(f.name), _join(path, f.name))
        for f in fields(family_type)
        if f.name in family_type.SLOTS
    }
    count = family.get("count")
    return family_type(
        count=0 if count is None else _integer(count, _join(path, "count")),
        shape=_parse_shape(family.get("shape"), _join(path, "shape")),
        **slots,
    )


def _parse_bubble(value: Any, path: str) -> Bubble:
    bubble = _sequence(value, path)
    if len(bubble) != 4:
        raise BlueprintError(
            f"{path}: expected [center_x, center_y, radius, opacity], got {len(bubble)} values"
        )
    center_x, center_y, radius, opacity = (
        _number(v, f"{path}[{i}]") for i, v in enumerate(bubble)
    )
    if radius < 0:
        raise BlueprintError(f"{path}[2]: radius must be non-negative, got {radius}")
    if not 0.0 <= opacity <= 1.0:
        raise BlueprintError(f"{path}[3]: opacity must be within [0, 1], got {opacity}")
    return Bubble(center_x, center_y, radius, opacity)


def _parse_background(value: Any, path: str) -> Background:
    background = _mapping(value, path)
    bubbles_path = _join(path, "bubbles")
    bubbles = _sequence(background.get("bubbles", []), bubbles_path)
    return Background(
        color=_color(_require(background, "color", path), _join(path, "color")),
        bubble_color=_color(
            _require(background, "bubble_color", path),
            _join(path, "bubble_color"),
            base_only=True,
        ),
        bubbles=pvector(
            _parse_bubble(b, f"{bubbles_path}[{i}]") for i, b in enumerate(bubbles)
        ),
    )


def _parse_borders(value: Any, path: str) -> Borders:
    borders = _mapping(value, path)
    size = _number(_require(borders, "size", path), _join(path, "size"))
    if size < 0:
        raise BlueprintError(f"{_join(path, 'size')}: must be non-negative, got {size}")
    return Borders(
        size=size,
        color=_color(_require(borders, "color", path), _join(path, "color")),
    )


def parse_blueprint(payload: Mapping[str, Any]) -> Blueprint:
    """Validate a blueprint payload (see :meth:`Blueprint.from_dict`)."""
    bp = _mapping(payload, "blueprint")
    width = _integer(_require(bp, "width", ""), "width")
    height = _integer(_require(bp, "height", ""), "height")
    if width <= 0 or height <= 0:
        raise BlueprintError(f"width/height: must be positive, got {width}x{height}")
    return Blueprint(
        width=width,
        height=height,
        background=_parse_background(_require(bp, "background", ""), "background"),
        borders=_parse_borders(_require(bp, "borders", ""), "borders"),
        horns=_parse_family(Horns, bp.get("horns"), "horns"),
        eyes=_parse_family(Eyes, bp.get("eyes"), "eyes"),
        mouth=_parse_family(Mouth, bp.get("mouth"), "mouth"),
    )
