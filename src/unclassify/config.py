"""Run configuration and its JSON loader."""

from __future__ import annotations

import importlib
import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from unclassify.classifier import ClassFilter
from unclassify.errors import ConfigurationError

# JSON keys that toggle a preset, mapped to the preset name.
PRESET_KEYS = {
    "bootstrap_classes": "bootstrap",
    "foundation_classes": "foundation",
    "html5bp_classes": "html5bp",
}


@dataclass(frozen=True)
class UnclassifyConfig:
    stylesheets: tuple[str, ...] = ()
    custom_classes: Any = ()  # whitespace-delimited str or list of str
    js_classes: Any = True  # bool, or prefixes as str / list of str
    presets: Mapping[str, Any] = field(default_factory=dict)
    filter: Optional[ClassFilter] = None  # returning False keeps the class
    knockout: bool = False
    separator: str = "\n"
    overwrite: bool = False
    dry: bool = False
    dest: Optional[str] = None
    jobs: int = 1

    def merged(self, **overrides: Any) -> UnclassifyConfig:
        """Return a copy with every override that is not None applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        if "presets" in updates:
            updates["presets"] = {**self.presets, **updates["presets"]}
        return replace(self, **updates)


def config_from_mapping(data: Mapping[str, Any]) -> UnclassifyConfig:
    """Build a config from a plain mapping such as a parsed JSON file."""
    known = {f.name for f in fields(UnclassifyConfig)}
    kwargs: dict[str, Any] = {}
    raw_presets = data.get("presets") or {}
    if not isinstance(raw_presets, Mapping):
        raise ConfigurationError("presets must be an object mapping preset names to toggles")
    presets: dict[str, Any] = dict(raw_presets)
    for key, value in data.items():
        if key in PRESET_KEYS:
            presets[PRESET_KEYS[key]] = value
        elif key == "presets":
            continue
        elif key in known:
            kwargs[key] = value
        else:
            raise ConfigurationError(f"Unknown configuration key {key!r}")

    if isinstance(kwargs.get("stylesheets"), str):
        kwargs["stylesheets"] = (kwargs["stylesheets"],)
    elif "stylesheets" in kwargs:
        kwargs["stylesheets"] = tuple(kwargs["stylesheets"])
    if "filter" in kwargs:
        kwargs["filter"] = resolve_filter(kwargs["filter"])
    if "jobs" in kwargs and (not isinstance(kwargs["jobs"], int) or kwargs["jobs"] < 1):
        raise ConfigurationError(f"jobs must be a positive integer, got {kwargs['jobs']!r}")
    return UnclassifyConfig(presets=presets, **kwargs)


def load_config(path: str | Path) -> UnclassifyConfig:
    """Load a JSON configuration file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object at the top level")
    return config_from_mapping(data)


def resolve_filter(spec: Any) -> Optional[ClassFilter]:
    """Resolve a filter given as a callable or a ``"module:function"`` string."""
    if spec is None or callable(spec):
        return spec
    if not isinstance(spec, str) or ":" not in spec:
        raise ConfigurationError(f"filter must be callable or 'module:function', got {spec!r}")
    module_name, _, attr = spec.partition(":")
    try:
        module = importlib.import_module(module_name)
        func = getattr(module, attr)
    except (ImportError, AttributeError) as exc:
        raise ConfigurationError(f"Cannot load filter {spec!r}: {exc}") from exc
    if not callable(func):
        raise ConfigurationError(f"Filter {spec!r} is not callable")
    return func
