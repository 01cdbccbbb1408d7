from unclassify.allowlist.composer import (
    compose_allowed_classes,
    resolve_preset,
    static_classes,
    tokenize_classes,
)
from unclassify.allowlist.presets import PRESET_VERSION, PRESETS

__all__ = [
    "compose_allowed_classes",
    "resolve_preset",
    "static_classes",
    "tokenize_classes",
    "PRESETS",
    "PRESET_VERSION",
]
