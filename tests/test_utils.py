from typing import Any, Dict, List, Optional, Tuple

from pyrsistent import pvector

from eternals.blueprint import Blueprint, Borders, Poly, PolyStack


def corner_arrays(offset: float = 0.0) -> Tuple[List[float], List[float]]:
    """18 distinct, monotonically increasing values per axis."""
    x = [10.0 + offset + i for i in range(18)]
    y = [200.0 + offset + 2 * i for i in range(18)]
    return x, y


def make_poly_payload(
    color: str = "#222222", size: float = 100, offset: float = 0.0
) -> Dict[str, Any]:
    x, y = corner_arrays(offset)
    return {"size": size, "x": x, "y": y, "color": color}


def make_stack_payload(
    center: Tuple[float, float] = (265, 290),
    colors: Tuple[str, ...] = ("#222222", "#ffffff"),
) -> Dict[str, Any]:
    return {
        "center_x": center[0],
        "center_y": center[1],
        "polys": [
            make_poly_payload(color=color, size=350 - 100 * i, offset=i)
            for i, color in enumerate(colors)
        ],
        "shape": None,
    }


def make_blueprint_payload(**overrides: Any) -> Dict[str, Any]:
    """Standard eternal payload: two eyes, one mouth segment, no horns."""
    payload: Dict[str, Any] = {
        "width": 800,
        "height": 800,
        "background": {
            "color": "#4872fa",
            "bubble_color": "#f3f3f3",
            "bubbles": [[330, 0, 16.39, 0.11]],
        },
        "borders": {"size": 8, "color": "#222222"},
        "eyes": {
            "count": 2,
            "left": make_stack_payload((265, 290)),
            "middle": None,
            "right": make_stack_payload((535, 290)),
        },
        "horns": {"count": 0, "left": None, "right": None, "shape": None},
        "mouth": {
            "count": 1,
            "left3": None,
            "left2": None,
            "left1": None,
            "middle": make_stack_payload((400, 560), ("#222222",)),
            "right1": None,
            "right2": None,
            "right3": None,
            "shape": None,
        },
    }
    payload.update(overrides)
    return payload


def make_blueprint(**overrides: Any) -> Blueprint:
    return Blueprint.from_dict(make_blueprint_payload(**overrides))


def make_poly(color: str = "#222222", size: float = 100, offset: float = 0.0) -> Poly:
    x, y = corner_arrays(offset)
    return Poly(color=color, x=pvector(x), y=pvector(y), size=size)


def make_stack(
    num_polys: int = 2,
    center: Tuple[float, float] = (100, 100),
    colors: Optional[List[str]] = None,
) -> PolyStack:
    colors = colors or [f"#{i:02x}{i:02x}{i:02x}" for i in range(num_polys)]
    return PolyStack(
        center_x=center[0],
        center_y=center[1],
        polys=pvector(
            make_poly(color=colors[i], size=100 - 10 * i, offset=i)
            for i in range(num_polys)
        ),
    )


BORDERS = Borders(size=8, color="#222222")
