"""Color value type and color-science utilities.

This module provides the 8-bit sRGB ``Color`` model with its ``#RRGGBB``
codec, WCAG 2.1 relative luminance and contrast ratio, and HSL-space
manipulation (lighten, darken, saturate, desaturate, hue rotation) plus
linear alpha blending.
"""

import colorsys
import math
import re
from typing import TYPE_CHECKING, Annotated, Callable, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_serializer

from .errors import InvalidHexError

if TYPE_CHECKING:
    from .contrast import ContrastLevel

_HEX_RE = re.compile(r'#[0-9A-Fa-f]{6}')

# WCAG 2.1 relative luminance constants
_LINEAR_THRESHOLD = 0.04045
_LUMA_R = 0.2126
_LUMA_G = 0.7152
_LUMA_B = 0.0722
_LUMINANCE_OFFSET = 0.05

Channel = Annotated[int, Field(ge=0, le=255, strict=True)]


def _linearize(channel: int) -> float:
    """Convert one sRGB channel to linear light."""
    s = channel / 255.0
    if s <= _LINEAR_THRESHOLD:
        return s / 12.92
    return ((s + 0.055) / 1.055) ** 2.4


def _clamp_channel(value: float) -> int:
    """Scale a [0, 1] component to 0-255, rounding half away from zero."""
    return int(min(max(math.floor(value * 255.0 + 0.5), 0), 255))


class Color(BaseModel):
    """Immutable 8-bit RGB color.

    Equality and hashing are structural. The canonical text form is
    ``#RRGGBB`` with uppercase digits, which is also what the model
    serializes to.
    """

    model_config = ConfigDict(frozen=True)

    r: Channel
    g: Channel
    b: Channel

    @classmethod
    def parse_hex(cls, text: str) -> 'Color':
        """Parse exactly ``#`` followed by six hex digits (any case).

        Raises:
            InvalidHexError: For any other input, carrying the original text
        """
        if not isinstance(text, str) or not _HEX_RE.fullmatch(text):
            raise InvalidHexError(str(text))
        return cls(r=int(text[1:3], 16), g=int(text[3:5], 16), b=int(text[5:7], 16))

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex()

    @model_serializer
    def serialize_hex(self) -> str:
        return self.to_hex()

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def relative_luminance(self) -> float:
        """WCAG 2.1 relative luminance in ``[0.0, 1.0]``."""
        return (
            _LUMA_R * _linearize(self.r)
            + _LUMA_G * _linearize(self.g)
            + _LUMA_B * _linearize(self.b)
        )

    def contrast_ratio(self, other: 'Color') -> float:
        return contrast_ratio(self, other)

    def meets_level(self, other: 'Color', level: 'ContrastLevel') -> bool:
        """Whether contrast against ``other`` meets a ``ContrastLevel``."""
        return level.passes(contrast_ratio(self, other))

    # HSL manipulation. Non-finite arguments return the color unchanged.

    def lighten(self, amount: float) -> 'Color':
        return _adjust_hsl(self, amount, lambda h, s, l, a: (h, s, _clamp_unit(l + a)))

    def darken(self, amount: float) -> 'Color':
        return _adjust_hsl(self, amount, lambda h, s, l, a: (h, s, _clamp_unit(l - a)))

    def saturate(self, amount: float) -> 'Color':
        return _adjust_hsl(self, amount, lambda h, s, l, a: (h, _clamp_unit(s + a), l))

    def desaturate(self, amount: float) -> 'Color':
        return _adjust_hsl(self, amount, lambda h, s, l, a: (h, _clamp_unit(s - a), l))

    def rotate_hue(self, degrees: float) -> 'Color':
        return _adjust_hsl(self, degrees, lambda h, s, l, d: ((h + d) % 360.0, s, l))

    def blend(self, bg: 'Color', alpha: float) -> 'Color':
        """Composite this color over ``bg``; see :func:`blend`."""
        return blend(self, bg, alpha)


def parse_hex(text: str) -> Color:
    """Parse a ``#RRGGBB`` string into a :class:`Color`."""
    return Color.parse_hex(text)


def format_hex(color: Color) -> str:
    """Format a color as ``#RRGGBB`` with uppercase digits."""
    return color.to_hex()


def relative_luminance(color: Color) -> float:
    return color.relative_luminance()


def contrast_ratio(a: Color, b: Color) -> float:
    """WCAG 2.1 contrast ratio between two colors, in ``[1.0, 21.0]``.

    Symmetric: the lighter color always goes in the numerator.
    """
    la = a.relative_luminance()
    lb = b.relative_luminance()
    lighter, darker = (la, lb) if la >= lb else (lb, la)
    return (lighter + _LUMINANCE_OFFSET) / (darker + _LUMINANCE_OFFSET)


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def rgb_to_hsl(color: Color) -> Tuple[float, float, float]:
    """Convert to (hue degrees in [0, 360), saturation, lightness).

    Achromatic colors get hue 0 and saturation 0, so saturating a pure gray
    tints it toward red.
    """
    h, l, s = colorsys.rgb_to_hls(color.r / 255.0, color.g / 255.0, color.b / 255.0)
    return h * 360.0, s, l


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Color:
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)
    return Color(r=_clamp_channel(r), g=_clamp_channel(g), b=_clamp_channel(b))


HslAdjust = Callable[[float, float, float, float], Tuple[float, float, float]]


def _adjust_hsl(color: Color, amount: float, adjust: HslAdjust) -> Color:
    if not math.isfinite(amount):
        return color
    h, s, l = rgb_to_hsl(color)
    return hsl_to_rgb(*adjust(h, s, l, amount))


def blend(fg: Color, bg: Color, alpha: float) -> Color:
    """Alpha-composite ``fg`` over ``bg`` in RGB space.

    ``alpha`` is clamped to ``[0, 1]``. Non-finite alpha returns ``bg``.
    """
    if not math.isfinite(alpha):
        return bg
    a = _clamp_unit(alpha)

    def mix(f: int, b: int) -> int:
        value = b * (1.0 - a) + f * a
        return int(min(max(math.floor(value + 0.5), 0), 255))

    return Color(r=mix(fg.r, bg.r), g=mix(fg.g, bg.g), b=mix(fg.b, bg.b))
