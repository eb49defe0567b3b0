"""RGB colours with hex, ``rgb(...)`` and ``hsl(...)`` parsing."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass

_R_MASK = 0xFF_00_00
_G_MASK = 0x00_FF_00
_B_MASK = 0x00_00_FF
_R_SHIFT = 16
_G_SHIFT = 8
_B_SHIFT = 0

_U8_MAX = 0xFF
_U32_MAX = 0xFFFF_FFFF

_HEX_DIGITS = re.compile(r"\+?[0-9A-Fa-f]+")
_DEC_DIGITS = re.compile(r"\+?[0-9]+")
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


class ColorParseError(ValueError):
    """Raised when a string cannot be parsed as a colour."""


def _parse_uint(text: str, pattern: re.Pattern[str], base: int, limit: int) -> int:
    if not text:
        raise ColorParseError("cannot parse integer from empty string")
    if not pattern.fullmatch(text):
        raise ColorParseError("invalid digit found in string")
    value = int(text, base)
    if value > limit:
        raise ColorParseError("number too large to fit in target type")
    return value


def _parse_float(text: str) -> float:
    if not text:
        raise ColorParseError("cannot parse float from empty string")
    if not _FLOAT_LITERAL.fullmatch(text):
        raise ColorParseError("invalid float literal")
    return float(text)


def _scale(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 1.0) * 255.0)


def _split_components(body: str, source: str, missing: str) -> tuple[str, str, str]:
    parts = body.replace(" ", "").split(",")
    if len(parts) < 3:
        raise ColorParseError(missing)
    if len(parts) > 3:
        raise ColorParseError(f"the given string appears to be invalid: '{source}'")
    return parts[0], parts[1], parts[2]


def _strip_wrapper(string: str, prefix: str) -> str | None:
    if string.startswith(prefix):
        rest = string[len(prefix):]
        if rest.endswith(")"):
            return rest[:-1]
    return None


@dataclass(frozen=True, order=True)
class Color:
    """An RGB colour with 8-bit components."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= _U8_MAX:
                raise ValueError(f"component {name} must be an integer within 0..=255, got {value!r}")

    @classmethod
    def from_u32(cls, rgb: int) -> Color:
        """Create a colour from a packed ``0xRRGGBB`` value."""
        if not 0 <= rgb <= _U32_MAX:
            raise ValueError(f"packed colour must fit in 32 bits, got {rgb!r}")
        return cls(
            (rgb & _R_MASK) >> _R_SHIFT,
            (rgb & _G_MASK) >> _G_SHIFT,
            (rgb & _B_MASK) >> _B_SHIFT,
        )

    @classmethod
    def from_scaled(cls, r: float, g: float, b: float) -> Color:
        """Create a colour from components in [0, 1]; values outside are clamped."""
        return cls(_scale(r), _scale(g), _scale(b))

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> Color:
        """Create a colour from hue in [0, 360), saturation and lightness in [0, 1]."""
        chroma = (1.0 - abs(2.0 * lightness - 1.0)) * saturation
        hue_prime = hue / 60.0
        x = chroma * (1.0 - abs(math.fmod(hue_prime, 2.0) - 1.0))
        modifier = lightness - chroma / 2.0

        if 0.0 <= hue_prime < 1.0:
            r1, g1, b1 = chroma, x, 0.0
        elif 1.0 <= hue_prime < 2.0:
            r1, g1, b1 = x, chroma, 0.0
        elif 2.0 <= hue_prime < 3.0:
            r1, g1, b1 = 0.0, chroma, x
        elif 3.0 <= hue_prime < 4.0:
            r1, g1, b1 = 0.0, x, chroma
        elif 4.0 <= hue_prime < 5.0:
            r1, g1, b1 = x, 0.0, chroma
        elif 5.0 <= hue_prime < 6.0:
            r1, g1, b1 = chroma, 0.0, x
        else:
            raise ValueError(f"hue must be within [0, 360), got {hue!r}")

        return cls.from_scaled(r1 + modifier, g1 + modifier, b1 + modifier)

    @classmethod
    def parse(cls, string: str) -> Color:
        """Parse ``#RRGGBB``, ``rgb(r, g, b)``, ``hsl(h, s, l)`` or a decimal packed value."""
        if string.startswith("#"):
            return cls.from_u32(_parse_uint(string[1:], _HEX_DIGITS, 16, _U32_MAX))

        rgb_body = _strip_wrapper(string, "rgb(")
        if rgb_body is not None:
            parts = _split_components(
                rgb_body, string, "the given string is missing at least one rgb component"
            )
            if any("." in part for part in parts):
                r, g, b = (_parse_float(part) for part in parts)
                return cls.from_scaled(r, g, b)
            r, g, b = (_parse_uint(part, _DEC_DIGITS, 10, _U8_MAX) for part in parts)
            return cls(r, g, b)

        hsl_body = _strip_wrapper(string, "hsl(")
        if hsl_body is not None:
            parts = _split_components(
                hsl_body, string, "the given string is missing at least one hsl component"
            )
            h, s, l = (_parse_float(part) for part in parts)
            return cls.from_hsl(h, s, l)

        return cls.from_u32(_parse_uint(string, _DEC_DIGITS, 10, _U32_MAX))

    def r_scaled(self) -> float:
        """The R component scaled to [0, 1]."""
        return self.r / 255.0

    def g_scaled(self) -> float:
        """The G component scaled to [0, 1]."""
        return self.g / 255.0

    def b_scaled(self) -> float:
        """The B component scaled to [0, 1]."""
        return self.b / 255.0

    def rgb(self) -> int:
        """The packed ``0xRRGGBB`` value."""
        return (self.r << _R_SHIFT) | (self.g << _G_SHIFT) | (self.b << _B_SHIFT)

    def rgb_scaled(self) -> tuple[float, float, float]:
        """All three components scaled to [0, 1]."""
        return self.r_scaled(), self.g_scaled(), self.b_scaled()

    def hsl(self) -> tuple[float, float, float]:
        """Return (hue, saturation, lightness)."""
        r, g, b = self.rgb_scaled()
        high = max(r, g, b)
        low = min(r, g, b)
        chroma = high - low
        eps = sys.float_info.epsilon

        if chroma < eps:
            hue = 0.0
        elif abs(high - r) < eps:
            hue = math.fmod((g - b) / chroma, 6.0)
        elif abs(high - g) < eps:
            hue = (b - r) / chroma + 2.0
        else:
            hue = (r - g) / chroma + 4.0

        lightness = (high + low) / 2.0
        if lightness in (0.0, 1.0):
            saturation = 0.0
        else:
            saturation = chroma / (1.0 - abs(2.0 * lightness - 1.0))

        return hue * 60.0, saturation, lightness

    def to_list(self) -> list[int]:
        """The components as ``[r, g, b]``."""
        return [self.r, self.g, self.b]

    def __int__(self) -> int:
        return self.rgb()

    def __str__(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def __format__(self, spec: str) -> str:
        if spec == "x":
            return f"#{self.rgb():06x}"
        if spec == "X":
            return f"#{self.rgb():06X}"
        return format(str(self), spec)