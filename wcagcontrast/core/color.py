"""Color value type with WCAG 2.0 relative luminance and contrast ratio.

Formulas from https://www.w3.org/TR/WCAG20/#relativeluminancedef and
https://www.w3.org/TR/WCAG20/#contrast-ratiodef.
"""

from __future__ import annotations

import numbers
import re
from collections.abc import Sequence
from dataclasses import dataclass

# sRGB transfer function
LINEAR_THRESHOLD = 0.03928
LINEAR_SCALE = 12.92
GAMMA_OFFSET = 0.055
GAMMA = 2.4

# Luminosity weights for R, G, B
WEIGHTS = (0.2126, 0.7152, 0.0722)

# Added to both luminances before dividing (flare term)
FLARE = 0.05

_HEX_FIELD = re.compile(r'[0-9a-fA-F]{2}')


class InvalidColorFormat(ValueError):
    """Raised when a string cannot be parsed as a #RRGGBB colour."""

    def __init__(self, value: object, reason: str):
        super().__init__(f'invalid colour {value!r}: {reason}')
        self.value = value
        self.reason = reason


def channel_luminance(value: int) -> float:
    """Linearise one 8-bit sRGB channel."""
    c = value / 255.0
    if c <= LINEAR_THRESHOLD:
        return c / LINEAR_SCALE
    return ((c + GAMMA_OFFSET) / (1 + GAMMA_OFFSET)) ** GAMMA


@dataclass(frozen=True, order=True)
class Color:
    """An sRGB colour with 8-bit red, green and blue channels.

    Ordering is lexicographic over (r, g, b). It exists for sorting and
    deduplication and says nothing about brightness or contrast.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise ValueError(f'channel {name} must be an int, got {type(v).__name__}')
            if not 0 <= v <= 255:
                raise ValueError(f'channel {name} out of range 0..255: {v}')
            # numpy integers are normalised to plain int
            object.__setattr__(self, name, int(v))

    @classmethod
    def new(cls, r: int, g: int, b: int) -> Color:
        return cls(r, g, b)

    @classmethod
    def from_rgb_tuple(cls, rgb: Sequence[int]) -> Color:
        if len(rgb) != 3:
            raise ValueError(f'expected an (r, g, b) triple, got {len(rgb)} values')
        r, g, b = rgb
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, s: str) -> Color:
        """Parse '#RRGGBB' (hex digits in either case).

        Reads the fields at fixed offsets 1, 3 and 5. The first character is
        not checked and anything after the seventh is ignored.

        Raises InvalidColorFormat if the string is too short or a field is
        not two hex digits.
        """
        if not isinstance(s, str):
            raise InvalidColorFormat(s, 'expected a string')
        if len(s) < 7:
            raise InvalidColorFormat(s, 'expected #RRGGBB')

        channels = []
        for start in (1, 3, 5):
            field = s[start : start + 2]
            if not _HEX_FIELD.fullmatch(field):
                raise InvalidColorFormat(s, f'{field!r} is not a hex byte')
            channels.append(int(field, 16))
        return cls(*channels)

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def hex(self) -> str:
        """Lower-case '#rrggbb'. Inverse of from_hex."""
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'

    def __str__(self) -> str:
        return self.hex()

    def relative_luminance(self) -> float:
        """WCAG relative luminance in [0.0, 1.0]. Black is 0.0, white is 1.0."""
        wr, wg, wb = WEIGHTS
        return (
            wr * channel_luminance(self.r)
            + wg * channel_luminance(self.g)
            + wb * channel_luminance(self.b)
        )

    def contrast_ratio(self, other: Color) -> float:
        """WCAG contrast ratio in [1.0, 21.0]. Symmetric in its operands."""
        if not isinstance(other, Color):
            raise TypeError(f'expected Color, got {type(other).__name__}')
        lighter = self.relative_luminance()
        darker = other.relative_luminance()
        if lighter < darker:
            lighter, darker = darker, lighter
        return (lighter + FLARE) / (darker + FLARE)
