"""String helpers.

Every offset in this module counts user-perceived characters (extended
grapheme clusters), not code points, so ``"e\\u0301"`` has length one.
Range slicing is lenient: a start at or past the end yields ``""`` and an end
past the string is clamped. Negative offsets are programmer errors and raise
:class:`~utilbelt.errors.IndexOutOfRange`.
"""
from __future__ import annotations

import re
from decimal import Decimal
from typing import List, Mapping, Optional, Union
from urllib.parse import quote, urlsplit, urlunsplit

import regex
from unidecode import unidecode

from .errors import IndexOutOfRange, InvalidPatternError, InvalidRangeError

Stringable = Union[str, int, float, Decimal, bool]

ELLIPSIS = "..."

_GRAPHEME = regex.compile(r"\X")
_VARIABLE = re.compile(r"\{\$([^}]+)\}")
_SLUG_SEPARATOR = re.compile(r"[^0-9A-Za-z-]+")
_WORD = re.compile(r"\w+")
_WEB_ADDRESS = re.compile(
    r"(?:https?://|www\.)[^\s<>\"']*[^\s<>\"'.,;:!?)\]]"
    r"|[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"
)


def graphemes(text: str) -> List[str]:
    """Split ``text`` into grapheme clusters."""

    return _GRAPHEME.findall(text)


letters = graphemes


def length(text: str) -> int:
    return len(graphemes(text))


def _check_offsets(text_length: int, *offsets: int) -> None:
    for offset in offsets:
        if offset < 0:
            raise IndexOutOfRange(offset, text_length)


def char_at(text: str, index: int) -> str:
    """Return the character at ``index``."""

    clusters = graphemes(text)
    if not 0 <= index < len(clusters):
        raise IndexOutOfRange(index, len(clusters))
    return clusters[index]


def slice_range(text: str, lo: int, hi: int) -> str:
    """Characters in the half-open range ``[lo, hi)``."""

    clusters = graphemes(text)
    _check_offsets(len(clusters), lo, hi)
    if lo > hi:
        raise InvalidRangeError(f"Range start {lo} is after range end {hi}")
    if lo >= len(clusters):
        return ""
    return "".join(clusters[lo:hi])


def slice_closed(text: str, lo: int, hi: int) -> str:
    """Characters in the closed range ``[lo, hi]``."""

    _check_offsets(length(text), lo, hi)
    if lo > hi:
        raise InvalidRangeError(f"Range start {lo} is after range end {hi}")
    return slice_range(text, lo, hi + 1)


def slice_from(text: str, lo: int) -> str:
    """Characters from ``lo`` to the end."""

    clusters = graphemes(text)
    _check_offsets(len(clusters), lo)
    return "".join(clusters[lo:])


def slice_to(text: str, hi: int) -> str:
    """Characters in ``[0, hi)``."""

    clusters = graphemes(text)
    _check_offsets(len(clusters), hi)
    return "".join(clusters[:hi])


def slice_through(text: str, hi: int) -> str:
    """Characters in ``[0, hi]``."""

    _check_offsets(length(text), hi)
    return slice_to(text, hi + 1)


def _starts_with(clusters: List[str], affix: List[str]) -> bool:
    return clusters[: len(affix)] == affix


def _ends_with(clusters: List[str], affix: List[str]) -> bool:
    return not affix or clusters[-len(affix):] == affix


def deleting_prefix(text: str, prefix: str) -> str:
    """Drop ``prefix`` when ``text`` starts with it as whole characters."""

    clusters, affix = graphemes(text), graphemes(prefix)
    if not affix or not _starts_with(clusters, affix):
        return text
    return "".join(clusters[len(affix):])


def deleting_suffix(text: str, suffix: str) -> str:
    clusters, affix = graphemes(text), graphemes(suffix)
    if not affix or not _ends_with(clusters, affix):
        return text
    return "".join(clusters[: -len(affix)])


def with_prefix(text: str, prefix: str) -> str:
    """Ensure ``text`` starts with ``prefix``."""

    return text if _starts_with(graphemes(text), graphemes(prefix)) else prefix + text


def with_suffix(text: str, suffix: str) -> str:
    """Ensure ``text`` ends with ``suffix``."""

    return text if _ends_with(graphemes(text), graphemes(suffix)) else text + suffix


def truncate(text: str, max_length: int, add_ellipsis: bool = False) -> str:
    """Trim ``text`` to ``max_length`` characters.

    Text that already fits is returned unchanged. The optional ``"..."`` does
    not count towards ``max_length``.
    """

    clusters = graphemes(text)
    _check_offsets(len(clusters), max_length)
    if len(clusters) <= max_length:
        return text
    trimmed = "".join(clusters[:max_length])
    return trimmed + ELLIPSIS if add_ellipsis else trimmed


def replace_bounded(text: str, search: str, replacement: str, max_count: int) -> str:
    """Replace at most ``max_count`` occurrences of ``search``, left to right."""

    if max_count < 0:
        raise ValueError(f"max_count must be non-negative, got {max_count}")
    if not search:
        return text
    return text.replace(search, replacement, max_count)


def substitute_variables(template: str, variables: Mapping[str, Stringable]) -> str:
    """Replace ``{$name}`` tokens with values from ``variables``.

    Unknown names are replaced with an empty string. Booleans render as
    ``true``/``false``.
    """

    if "{$" not in template:
        return template

    def _lookup(match: "re.Match[str]") -> str:
        value = variables.get(match.group(1), "")
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    return _VARIABLE.sub(_lookup, template)


def slugify(text: str) -> Optional[str]:
    """Lower-case ASCII slug of ``text`` joined with hyphens.

    Returns ``None`` when nothing usable remains.
    """

    latin = unidecode(text).lower()
    parts = [part for part in _SLUG_SEPARATOR.split(latin) if part]
    return "-".join(parts) or None


def matches(text: str, pattern: str, case_insensitive: bool = False) -> bool:
    """Return ``True`` when ``pattern`` matches anywhere in ``text``."""

    flags = re.IGNORECASE if case_insensitive else 0
    try:
        compiled = re.compile(pattern, flags)
    except re.error as exc:
        raise InvalidPatternError(f"Invalid regular expression {pattern!r}: {exc}") from exc
    return compiled.search(text) is not None


def is_numeric(text: str) -> bool:
    if not text or text != text.strip() or "_" in text:
        return False
    try:
        float(text)
    except ValueError:
        return False
    return True


def lines(text: str) -> List[str]:
    return text.split("\n")


def trimmed(text: str) -> str:
    return text.strip()


def word_count(text: str) -> int:
    return len(_WORD.findall(text))


def web_addresses(text: str) -> List[str]:
    """Web links and e-mail addresses found in ``text``, in order."""

    return _WEB_ADDRESS.findall(text)


def append_path_component(url: str, component: str) -> str:
    """Append ``component`` to the path of ``url``, keeping query and fragment."""

    parts = urlsplit(url)
    path = parts.path.rstrip("/") + "/" + quote(component.lstrip("/"))
    return urlunsplit(parts._replace(path=path))


__all__ = [
    "Stringable",
    "ELLIPSIS",
    "graphemes",
    "letters",
    "length",
    "char_at",
    "slice_range",
    "slice_closed",
    "slice_from",
    "slice_to",
    "slice_through",
    "deleting_prefix",
    "deleting_suffix",
    "with_prefix",
    "with_suffix",
    "truncate",
    "replace_bounded",
    "substitute_variables",
    "slugify",
    "matches",
    "is_numeric",
    "lines",
    "trimmed",
    "word_count",
    "web_addresses",
    "append_path_component",
]
