"""Configuration structures for filter pipelines and templates."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .errors import ConfigError
from .imaging import FilterKind, FilterSpec
from .text import Stringable

logger = logging.getLogger(__name__)

_KIND_ALIASES = {
    "grayscale": FilterKind.GRAYSCALE,
    "greyscale": FilterKind.GRAYSCALE,
    "gray": FilterKind.GRAYSCALE,
    "grey": FilterKind.GRAYSCALE,
    "noir": FilterKind.GRAYSCALE,
    "sepia": FilterKind.SEPIA,
    "blur": FilterKind.BLUR,
    "gaussian_blur": FilterKind.BLUR,
    "vignette": FilterKind.VIGNETTE,
}


def parse_filter(item: Any) -> FilterSpec:
    """Build a :class:`FilterSpec` from ``{"kind": ..., "amount": ...}`` or ``"kind:amount"``."""

    if isinstance(item, str):
        kind_raw, _, amount_raw = item.partition(":")
        item = {"kind": kind_raw, "amount": amount_raw or 0.0}
    if not isinstance(item, dict):
        raise ConfigError(f"Filter entry must be a mapping, got {type(item).__name__}")
    kind_raw = str(item.get("kind", item.get("type", ""))).strip().lower()
    kind = _KIND_ALIASES.get(kind_raw)
    if kind is None:
        raise ConfigError(f"Unknown filter kind: {kind_raw!r}")
    try:
        amount = float(item.get("amount", item.get("radius", item.get("intensity", 0.0))))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid amount for {kind.value} filter: {exc}") from exc
    return FilterSpec(kind=kind, amount=amount)


@dataclass(frozen=True)
class FilterPipelineConfig:
    """Ordered chain of image filters."""

    filters: Tuple[FilterSpec, ...] = ()
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FilterPipelineConfig":
        raw_filters = data.get("filters", [])
        if not isinstance(raw_filters, list):
            raise ConfigError("'filters' must be a list")
        filters = tuple(parse_filter(item) for item in raw_filters)
        name = data.get("name")
        return cls(filters=filters, name=str(name) if name is not None else None)

    @classmethod
    def load(cls, path: Path | str) -> "FilterPipelineConfig":
        """Load a pipeline from a YAML file."""
        data = _load_mapping(Path(path))
        return cls.from_dict(data)


@dataclass(frozen=True)
class TemplateConfig:
    """A ``{$name}`` template together with its variables."""

    template: str
    variables: Dict[str, Stringable] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base_path: Optional[Path] = None) -> "TemplateConfig":
        if "template" in data:
            template = str(data["template"])
        elif "template_file" in data:
            template_path = Path(str(data["template_file"]))
            if base_path is not None and not template_path.is_absolute():
                template_path = base_path / template_path
            try:
                template = template_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigError(f"Cannot read template file {template_path}: {exc}") from exc
        else:
            raise ConfigError("Template config needs 'template' or 'template_file'")

        raw_variables = data.get("variables") or {}
        if not isinstance(raw_variables, dict):
            raise ConfigError("'variables' must be a mapping")
        variables: Dict[str, Stringable] = {}
        for key, value in raw_variables.items():
            if value is None:
                value = ""
            if not isinstance(value, (str, int, float, bool)):
                raise ConfigError(f"Variable {key!r} must be a scalar, got {type(value).__name__}")
            variables[str(key)] = value
        return cls(template=template, variables=variables)

    @classmethod
    def load(cls, path: Path | str) -> "TemplateConfig":
        """Load a template config from a YAML file."""
        path = Path(path)
        return cls.from_dict(_load_mapping(path), base_path=path.parent)


def _load_mapping(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"{path} is not UTF-8 text: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration root must be a mapping")
    logger.debug("Loaded configuration from %s", path)
    return data


__all__ = ["parse_filter", "FilterPipelineConfig", "TemplateConfig"]
