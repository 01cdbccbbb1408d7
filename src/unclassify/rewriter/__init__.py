from unclassify.rewriter.rewriter import ElementRecord, RewriteResult, rewrite_document
from unclassify.rewriter.serializer import PRESERVING_FORMATTER, AmpersandMask
from unclassify.rewriter.template_guard import (
    PLACEHOLDER_TAG,
    escape_templates,
    restore_templates,
)

__all__ = [
    "rewrite_document",
    "RewriteResult",
    "ElementRecord",
    "escape_templates",
    "restore_templates",
    "PLACEHOLDER_TAG",
    "AmpersandMask",
    "PRESERVING_FORMATTER",
]
