"""Placeholder images and simple photo filters built on Pillow."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from PIL import Image, ImageChops, ImageFilter, ImageOps

from .color import Color
from .geometry import Size
from .numeric import clamp

logger = logging.getLogger(__name__)

# Rows produce R', G', B' from (R, G, B, offset).
_SEPIA_MATRIX = (
    0.393, 0.769, 0.189, 0.0,
    0.349, 0.686, 0.168, 0.0,
    0.272, 0.534, 0.131, 0.0,
)


class FilterKind(str, Enum):
    GRAYSCALE = "grayscale"
    SEPIA = "sepia"
    BLUR = "blur"
    VIGNETTE = "vignette"


@dataclass(frozen=True)
class FilterSpec:
    """One filter step; ``amount`` is the blur radius or vignette strength."""

    kind: FilterKind
    amount: float = 0.0

    @classmethod
    def grayscale(cls) -> "FilterSpec":
        return cls(FilterKind.GRAYSCALE)

    @classmethod
    def sepia(cls) -> "FilterSpec":
        return cls(FilterKind.SEPIA)

    @classmethod
    def blur(cls, amount: float) -> "FilterSpec":
        return cls(FilterKind.BLUR, amount)

    @classmethod
    def vignette(cls, amount: float) -> "FilterSpec":
        return cls(FilterKind.VIGNETTE, amount)


def placeholder_image(size: Union[Size, Tuple[int, int]], color: Color) -> Image.Image:
    """Solid RGBA image of ``size`` filled with ``color``."""

    if isinstance(size, Size):
        width, height = int(round(size.width)), int(round(size.height))
    else:
        width, height = size
    return Image.new("RGBA", (width, height), color.to_rgba8())


def _split_alpha(image: Image.Image) -> Tuple[Image.Image, Optional[Image.Image]]:
    if image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info:
        rgba = image.convert("RGBA")
        return rgba.convert("RGB"), rgba.getchannel("A")
    return image.convert("RGB"), None


def _vignette_mask(width: int, height: int, strength: float) -> Image.Image:
    cx = (width - 1) / 2.0
    cy = (height - 1) / 2.0
    max_radius = max(math.sqrt(cx * cx + cy * cy), 1e-6)
    data = []
    for y in range(height):
        dy = y - cy
        for x in range(width):
            dx = x - cx
            factor = 1.0 - strength * ((math.sqrt(dx * dx + dy * dy) / max_radius) ** 1.5)
            data.append(int(clamp(factor, 0.0, 1.0) * 255 + 0.5))
    mask = Image.new("L", (width, height))
    mask.putdata(data)
    return mask


def _apply_rgb(rgb: Image.Image, spec: FilterSpec) -> Image.Image:
    if spec.kind is FilterKind.GRAYSCALE:
        return ImageOps.grayscale(rgb).convert("RGB")
    if spec.kind is FilterKind.SEPIA:
        return rgb.convert("RGB", _SEPIA_MATRIX)
    if spec.kind is FilterKind.BLUR:
        if spec.amount <= 0:
            return rgb.copy()
        return rgb.filter(ImageFilter.GaussianBlur(radius=spec.amount))
    if spec.kind is FilterKind.VIGNETTE:
        if spec.amount <= 0:
            return rgb.copy()
        mask = _vignette_mask(rgb.width, rgb.height, spec.amount)
        return ImageChops.multiply(rgb, Image.merge("RGB", (mask, mask, mask)))
    raise ValueError(f"Unsupported filter kind: {spec.kind!r}")


def apply_filter(image: Image.Image, spec: FilterSpec) -> Image.Image:
    """Return a filtered copy of ``image``.

    The result is ``RGBA`` when the source carries transparency, otherwise
    ``RGB``. Alpha is passed through untouched.
    """

    rgb, alpha = _split_alpha(image)
    result = _apply_rgb(rgb, spec)
    if alpha is not None:
        result.putalpha(alpha)
    logger.debug("Applied %s filter (amount=%s) to %sx%s image", spec.kind.value, spec.amount, *image.size)
    return result


def apply_filters(image: Image.Image, specs: Iterable[FilterSpec]) -> Image.Image:
    """Apply ``specs`` in order."""

    result = image
    for spec in specs:
        result = apply_filter(result, spec)
    return result


__all__ = ["FilterKind", "FilterSpec", "placeholder_image", "apply_filter", "apply_filters"]
