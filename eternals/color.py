"""Hex color helpers.

Blueprints carry plain ``#rrggbb`` strings. Translucent fills (skin bubbles,
vignette stops) are expressed as ``#rrggbbaa`` by appending an alpha byte to
the base color, which every surface understands as a regular fill color.
"""

import math
import re
from functools import lru_cache

from PIL import ImageColor

from eternals.types import RGBA


_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_BASE_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


def is_hex_color(value: object) -> bool:
    """Return True for ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` strings."""
    return isinstance(value, str) and _HEX_COLOR.match(value) is not None


def is_base_hex_color(value: object) -> bool:
    """Return True for ``#rrggbb`` strings (the only form an alpha byte can extend)."""
    return isinstance(value, str) and _BASE_HEX_COLOR.match(value) is not None


def opacity_to_byte(opacity: float) -> int:
    """Map an opacity in [0, 1] to a byte, rounding halves up.

    Raises:
        ValueError: If ``opacity`` is outside [0, 1].
    """
    if not 0.0 <= opacity <= 1.0:
        raise ValueError(f"Opacity must be within [0, 1], got {opacity}")
    return math.floor(opacity * 255 + 0.5)


def encode_alpha(base_hex: str, opacity: float) -> str:
    """Append an alpha byte to a ``#rrggbb`` color.

    ``encode_alpha("#101010", 0.11)`` gives ``"#1010101c"`` (0.11 -> 28 -> ``1c``).

    Raises:
        ValueError: If ``base_hex`` is not ``#rrggbb`` or ``opacity`` is out of range.
    """
    if not is_base_hex_color(base_hex):
        raise ValueError(f"Base color must be #rrggbb, got {base_hex!r}")
    return f"{base_hex}{opacity_to_byte(opacity):02x}"


@lru_cache(maxsize=1024)
def parse_color(color: str) -> RGBA:
    """Parse a hex color into an ``(r, g, b, a)`` tuple of bytes."""
    if not is_hex_color(color):
        raise ValueError(f"Not a hex color: {color!r}")
    r, g, b, a = ImageColor.getcolor(color, "RGBA")
    return r, g, b, a
