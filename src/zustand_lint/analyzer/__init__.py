"""Selector classification and shape analysis shared by the rules."""

from zustand_lint.analyzer.classifier import FileContext, build_file_context, is_hook_call
from zustand_lint.analyzer.literal_shape import classify_literal
from zustand_lint.analyzer.models import LiteralShape, SelectorShape
from zustand_lint.analyzer.selector_shape import classify_selector

__all__ = [
    "FileContext",
    "LiteralShape",
    "SelectorShape",
    "build_file_context",
    "classify_literal",
    "classify_selector",
    "is_hook_call",
]
