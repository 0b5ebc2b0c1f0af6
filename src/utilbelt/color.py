"""RGBA colour values with floating point channels in ``[0, 1]``."""
from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .numeric import clamp, lerp, resolve_rng

_HEX_RGBA = re.compile(r"#([0-9A-Fa-f]{8})")

# ITU-R BT.601 luma weights.
_LUMA_WEIGHTS = (0.299, 0.587, 0.114)


@dataclass(frozen=True)
class Color:
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> Optional["Color"]:
        """Parse an ``#RRGGBBAA`` string, returning ``None`` for any other format."""

        match = _HEX_RGBA.fullmatch(value)
        if match is None:
            return None
        number = int(match.group(1), 16)
        return cls(
            red=((number >> 24) & 0xFF) / 255.0,
            green=((number >> 16) & 0xFF) / 255.0,
            blue=((number >> 8) & 0xFF) / 255.0,
            alpha=(number & 0xFF) / 255.0,
        )

    @classmethod
    def random(cls, alpha: float = 1.0, rng: Optional[random.Random] = None) -> "Color":
        """Colour with random red, green and blue channels."""

        rng = resolve_rng(rng)
        return cls(rng.random(), rng.random(), rng.random(), alpha)

    def lerp(self, other: "Color", amount: float) -> "Color":
        """Componentwise linear interpolation towards ``other``."""

        return Color(
            red=lerp(self.red, other.red, amount),
            green=lerp(self.green, other.green, amount),
            blue=lerp(self.blue, other.blue, amount),
            alpha=lerp(self.alpha, other.alpha, amount),
        )

    def grayscale(self) -> "Color":
        """Grey of matching perceived brightness; alpha is kept."""

        wr, wg, wb = _LUMA_WEIGHTS
        luma = wr * self.red + wg * self.green + wb * self.blue
        return Color(luma, luma, luma, self.alpha)

    def to_rgba8(self) -> Tuple[int, int, int, int]:
        """Convert to an 8-bit RGBA tuple."""

        return tuple(
            int(clamp(channel, 0.0, 1.0) * 255 + 0.5)
            for channel in (self.red, self.green, self.blue, self.alpha)
        )  # type: ignore[return-value]

    def to_hex(self) -> str:
        return "#" + "".join(f"{channel:02X}" for channel in self.to_rgba8())


__all__ = ["Color"]
