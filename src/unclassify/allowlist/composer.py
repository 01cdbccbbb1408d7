"""Allowlist composer: merge harvested classes with custom lists and presets."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Union

from unclassify.allowlist.presets import PRESETS
from unclassify.errors import ConfigurationError

__all__ = [
    "tokenize_classes",
    "resolve_preset",
    "static_classes",
    "compose_allowed_classes",
]

ClassListInput = Optional[Union[str, Iterable[str]]]
PresetToggle = Optional[Union[bool, str, Iterable[str]]]


def tokenize_classes(value: ClassListInput, option: str = "custom_classes") -> list[str]:
    """Turn a whitespace-delimited string or a list of names into a list.

    Raises ConfigurationError for any other shape.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple, set, frozenset)):
        names: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(
                    f"{option} entries must be strings, got {type(item).__name__}: {item!r}"
                )
            names.extend(item.split())
        return names
    raise ConfigurationError(
        f"{option} must be a string or a list of strings, got {type(value).__name__}"
    )


def resolve_preset(name: str, toggle: PresetToggle) -> list[str]:
    """Resolve one preset toggle.

    ``True`` selects the built-in list for *name*; ``False``/``None``
    contributes nothing; a string or list is used as given.
    """
    if name not in PRESETS:
        known = ", ".join(sorted(PRESETS))
        raise ConfigurationError(f"Unknown preset {name!r} (known presets: {known})")
    if toggle is True:
        return list(PRESETS[name])
    if toggle is False or toggle is None:
        return []
    return tokenize_classes(toggle, option=f"preset {name!r}")


def static_classes(
    custom_classes: ClassListInput = None,
    presets: Mapping[str, PresetToggle] | None = None,
) -> frozenset[str]:
    """Union of the custom class list and every enabled preset."""
    classes = set(tokenize_classes(custom_classes))
    for name, toggle in (presets or {}).items():
        classes.update(resolve_preset(name, toggle))
    return frozenset(classes)


def compose_allowed_classes(
    harvested: Iterable[str],
    custom_classes: ClassListInput = None,
    presets: Mapping[str, PresetToggle] | None = None,
) -> frozenset[str]:
    """Return the allowed-class set for a run."""
    return frozenset(harvested) | static_classes(custom_classes, presets)
