"""RGB colors and the color precedence chain."""

import re
from dataclasses import dataclass

from core.errors import ColorParseError

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


@dataclass(frozen=True)
class Color:
    """An RGB color with 0-255 channels."""
    r: int
    g: int
    b: int

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_api(self) -> dict:
        """Return the color in the shape the Govee control endpoint expects."""
        return {'r': self.r, 'g': self.g, 'b': self.b}

    @classmethod
    def from_api(cls, data: dict) -> 'Color':
        return cls(int(data.get('r', 0)), int(data.get('g', 0)), int(data.get('b', 0)))

    def __str__(self) -> str:
        return self.hex


def parse_color(value: str) -> Color:
    """Parse a hex color string.

    Accepts ``#rgb`` and ``#rrggbb`` (the ``#`` is optional, case is ignored).

    Raises:
        ColorParseError: If the string is not a valid hex color
    """
    match = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ColorParseError(value)

    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)

    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def resolve_color(explicit: str | None, override: str | None,
                  default: str | None) -> Color | None:
    """Pick a color by precedence: explicit > per-device override > default.

    Only the selected candidate is parsed. An invalid selected value raises
    ColorParseError instead of falling through to the next level.

    Returns:
        The parsed Color, or None if no candidate was given
    """
    for candidate in (explicit, override, default):
        if candidate is not None:
            return parse_color(candidate)
    return None
