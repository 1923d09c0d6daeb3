"""zustand-prefer-use-shallow: wrap selectors that build objects/arrays in useShallow."""

from __future__ import annotations

from zustand_lint.analyzer.classifier import build_file_context, is_hook_call
from zustand_lint.analyzer.literal_shape import classify_literal
from zustand_lint.analyzer.models import PreferUseShallowOptions
from zustand_lint.analyzer.reporter import report_literal_shape
from zustand_lint.analyzer.selector_shape import selector_argument
from zustand_lint.ir.nodes import Call
from zustand_lint.rules.base import Rule, RuleContext, RuleMeta, Visitor

RULE_ID = "zustand-prefer-use-shallow"

META = RuleMeta(
    type="suggestion",
    description=(
        "Recommend wrapping selectors that return object/array literals with "
        "useShallow to prevent unnecessary re-renders."
    ),
    messages={
        "preferUseShallow": "Selector returns an {kind} literal. Consider wrapping it with {shallow}(...).",
    },
    options_model=PreferUseShallowOptions,
)


def create(context: RuleContext) -> Visitor:
    options: PreferUseShallowOptions = context.options
    file_context = build_file_context(context.module, options.store_factories, context.type_service)

    def visit_call(node: Call) -> None:
        if not is_hook_call(node, options, file_context):
            return
        selector = selector_argument(node)
        if selector is None:
            # nothing to wrap; require-selector owns this case
            return
        shape = classify_literal(selector, options.shallow_hook_name)
        diagnostic = report_literal_shape(shape, selector, options)
        if diagnostic is not None:
            context.report(diagnostic)

    return visit_call


RULE = Rule(name=RULE_ID, meta=META, create=create)
