"""Outcome -> Diagnostic mapping. Pure; the sink decides how to show them."""

from __future__ import annotations

from dataclasses import dataclass, field

from zustand_lint.analyzer.classifier import hook_display_name
from zustand_lint.analyzer.models import (
    LiteralShape,
    PreferUseShallowOptions,
    RequireSelectorOptions,
    SelectorShape,
)
from zustand_lint.ir.nodes import Call, Node


@dataclass(frozen=True)
class Diagnostic:
    node: Node                  # location anchor
    message_id: str
    data: dict[str, str] = field(default_factory=dict)


def report_selector_shape(
    shape: SelectorShape,
    call: Call,
    options: RequireSelectorOptions,
) -> Diagnostic | None:
    if shape is SelectorShape.MISSING:
        return Diagnostic(call, "missingSelector", {"hook": hook_display_name(call)})
    selector = call.arguments[0] if call.arguments else call
    if shape is SelectorShape.IDENTITY and options.forbid_identity_selector:
        return Diagnostic(selector, "identity")
    if shape is SelectorShape.SINGLE_LEVEL_PROPERTY and options.forbid_direct_slice:
        return Diagnostic(selector, "directSlice")
    return None


def report_literal_shape(
    shape: LiteralShape,
    selector: Node,
    options: PreferUseShallowOptions,
) -> Diagnostic | None:
    if shape is LiteralShape.OBJECT_LITERAL and options.check_object_literal:
        kind = "object"
    elif shape is LiteralShape.ARRAY_LITERAL and options.check_array_literal:
        kind = "array"
    else:
        return None
    return Diagnostic(selector, "preferUseShallow", {"kind": kind, "shallow": options.shallow_hook_name})
