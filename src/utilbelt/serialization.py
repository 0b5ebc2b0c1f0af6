"""JSON encoding and resource file decoding."""
from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, Optional, Sequence, Type, TypeVar

import yaml

from .errors import ResourceError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_YAML_SUFFIXES = (".yaml", ".yml")


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return value


def to_json_string(value: Any) -> Optional[str]:
    """Compact JSON text for ``value``, or ``None`` when it cannot be encoded."""

    try:
        return json.dumps(_plain(value), separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        logger.debug("Could not encode %r as JSON: %s", value, exc)
        return None


def to_json_bytes(value: Any) -> Optional[bytes]:
    """UTF-8 encoded form of :func:`to_json_string`."""

    text = to_json_string(value)
    return None if text is None else text.encode("utf-8")


def locate(candidate: str, *, search_paths: Sequence[Path] = ()) -> Optional[Path]:
    """Return the first existing file matching ``candidate`` in ``search_paths``."""

    if not candidate:
        return None
    path = Path(candidate)
    if path.is_file():
        return path
    for base in search_paths:
        probe = Path(base) / candidate
        if probe.is_file():
            return probe
    return None


def load_document(path: Path | str) -> Any:
    """Parse a JSON or YAML file, chosen by suffix."""

    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def _build(kind: Type[T], data: Any) -> T:
    from_dict = getattr(kind, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    if dataclasses.is_dataclass(kind):
        if not isinstance(data, dict):
            raise TypeError(f"Expected a mapping for {kind.__name__}, got {type(data).__name__}")
        return kind(**data)
    if not isinstance(data, kind):
        raise TypeError(f"Expected {kind.__name__}, got {type(data).__name__}")
    return data


def decode_resource(kind: Type[T], filename: str, search_paths: Sequence[Path] = ()) -> T:
    """Load ``filename`` and build an instance of ``kind`` from its contents.

    ``kind`` may provide a ``from_dict`` classmethod, be a dataclass taking the
    document's keys as keyword arguments, or be a plain container type such as
    ``dict`` or ``list`` that the document must already be.
    """

    path = locate(filename, search_paths=search_paths)
    if path is None:
        raise ResourceError(f"Failed to locate {filename}")
    try:
        data = load_document(path)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
        raise ResourceError(f"Failed to load {filename}: {exc}") from exc
    try:
        result = _build(kind, data)
    except (TypeError, ValueError, KeyError) as exc:
        raise ResourceError(f"Failed to decode {filename}: {exc}") from exc
    logger.debug("Decoded %s from %s", kind.__name__, path)
    return result


__all__ = [
    "to_json_string",
    "to_json_bytes",
    "locate",
    "load_document",
    "decode_resource",
]
