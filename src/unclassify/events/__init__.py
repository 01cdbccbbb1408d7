from unclassify.events.bus import EventBus
from unclassify.events.logging_listener import logging_listener
from unclassify.events.types import (
    ClassesHarvested,
    DocumentCleaned,
    DocumentParseDegraded,
    DocumentWriteFailed,
    DocumentWriteFallback,
    ElementCleaned,
    RunCompleted,
    RunStarted,
)

__all__ = [
    "EventBus",
    "logging_listener",
    "RunStarted",
    "ClassesHarvested",
    "ElementCleaned",
    "DocumentCleaned",
    "DocumentParseDegraded",
    "DocumentWriteFallback",
    "DocumentWriteFailed",
    "RunCompleted",
]
