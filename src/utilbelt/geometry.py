"""2-D points, sizes, rectangles and affine transforms."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional

from .errors import ZeroLengthVectorError


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    ZERO: ClassVar["Point"]

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def distance_squared(self, other: "Point") -> float:
        """Squared Euclidean distance, cheaper than :meth:`distance` for comparisons."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: "Point") -> float:
        return math.sqrt(self.distance_squared(other))

    def manhattan_distance(self, other: "Point") -> float:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def normalized(self) -> "Point":
        """Unit-length point in the same direction from the origin."""
        length = self.distance(Point.ZERO)
        if length == 0.0:
            raise ZeroLengthVectorError("Cannot normalize a point at the origin")
        return Point(self.x / length, self.y / length)


Point.ZERO = Point(0.0, 0.0)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)


def aspect_fit_rect(content: Size, bounds: Rect) -> Rect:
    """Rectangle occupied by ``content`` when scaled to fit inside ``bounds``.

    The content keeps its aspect ratio and is centred. Degenerate content
    sizes leave ``bounds`` unchanged.
    """

    if content.width <= 0 or content.height <= 0:
        return bounds
    scale = min(bounds.width / content.width, bounds.height / content.height)
    width = content.width * scale
    height = content.height * scale
    return Rect(
        x=bounds.x + (bounds.width - width) / 2.0,
        y=bounds.y + (bounds.height - height) / 2.0,
        width=width,
        height=height,
    )


@dataclass(frozen=True)
class Transform:
    """Affine transform mapping ``(x, y)`` to ``(a*x + c*y + tx, b*x + d*y + ty)``."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    IDENTITY: ClassVar["Transform"]

    @property
    def rotation(self) -> float:
        """Rotation angle in radians."""
        return math.atan2(self.b, self.a)

    @property
    def scale(self) -> float:
        return math.sqrt(self.a * self.a + self.c * self.c)

    @property
    def translation(self) -> Point:
        return Point(self.tx, self.ty)

    def concatenating(self, other: "Transform") -> "Transform":
        """Apply ``self`` first, then ``other``."""
        return Transform(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            tx=self.tx * other.a + self.ty * other.c + other.tx,
            ty=self.tx * other.b + self.ty * other.d + other.ty,
        )

    # The builders below prepend the new operation, so it acts in the
    # transform's local coordinate space.

    def rotated(self, angle: float) -> "Transform":
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Transform(cos_a, sin_a, -sin_a, cos_a).concatenating(self)

    def scaled(self, sx: float, sy: Optional[float] = None) -> "Transform":
        return Transform(sx, 0.0, 0.0, sx if sy is None else sy).concatenating(self)

    def translated(self, dx: float, dy: float) -> "Transform":
        return Transform(tx=dx, ty=dy).concatenating(self)

    def apply(self, point: Point) -> Point:
        return Point(
            self.a * point.x + self.c * point.y + self.tx,
            self.b * point.x + self.d * point.y + self.ty,
        )


Transform.IDENTITY = Transform()


__all__ = ["Point", "Size", "Rect", "aspect_fit_rect", "Transform"]
