"""Small numeric, text, collection, geometry, colour and image helpers."""

from .color import Color
from .errors import (
    ConfigError,
    EmptySequenceError,
    IndexOutOfRange,
    InvalidPatternError,
    InvalidRangeError,
    ResourceError,
    UtilbeltError,
    ZeroLengthVectorError,
)
from .geometry import Point, Rect, Size, Transform, aspect_fit_rect
from .imaging import FilterKind, FilterSpec, apply_filter, apply_filters, placeholder_image
from .numeric import clamp, lerp, random01, smooth_step, smooth_step2
from .sequences import any_match, average, indexes_of, is_unique, none_match, sample, shuffle, shuffled, total
from .serialization import decode_resource, to_json_bytes, to_json_string
from .text import (
    char_at,
    deleting_prefix,
    deleting_suffix,
    replace_bounded,
    slice_closed,
    slice_from,
    slice_range,
    slice_through,
    slice_to,
    slugify,
    substitute_variables,
    truncate,
    with_prefix,
    with_suffix,
)

__all__ = [
    "Color",
    "ConfigError",
    "EmptySequenceError",
    "IndexOutOfRange",
    "InvalidPatternError",
    "InvalidRangeError",
    "ResourceError",
    "UtilbeltError",
    "ZeroLengthVectorError",
    "Point",
    "Rect",
    "Size",
    "Transform",
    "aspect_fit_rect",
    "FilterKind",
    "FilterSpec",
    "apply_filter",
    "apply_filters",
    "placeholder_image",
    "clamp",
    "lerp",
    "random01",
    "smooth_step",
    "smooth_step2",
    "any_match",
    "average",
    "indexes_of",
    "is_unique",
    "none_match",
    "sample",
    "shuffle",
    "shuffled",
    "total",
    "decode_resource",
    "to_json_bytes",
    "to_json_string",
    "char_at",
    "deleting_prefix",
    "deleting_suffix",
    "replace_bounded",
    "slice_closed",
    "slice_from",
    "slice_range",
    "slice_through",
    "slice_to",
    "slugify",
    "substitute_variables",
    "truncate",
    "with_prefix",
    "with_suffix",
]
