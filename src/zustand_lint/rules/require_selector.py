"""zustand-require-selector: store hooks must be called with a narrowing selector."""

from __future__ import annotations

from zustand_lint.analyzer.classifier import build_file_context, is_hook_call
from zustand_lint.analyzer.models import RequireSelectorOptions
from zustand_lint.analyzer.reporter import report_selector_shape
from zustand_lint.analyzer.selector_shape import classify_selector
from zustand_lint.ir.nodes import Call
from zustand_lint.rules.base import Rule, RuleContext, RuleMeta, Visitor

RULE_ID = "zustand-require-selector"

META = RuleMeta(
    type="problem",
    description="Require granular selectors when using Zustand store hooks.",
    messages={
        "missingSelector": "Do not call {hook}() without a selector.",
        "identity": "Selector must not return the entire store.",
        "directSlice": "Avoid selecting a full slice; select specific fields instead.",
    },
    options_model=RequireSelectorOptions,
)


def create(context: RuleContext) -> Visitor:
    options: RequireSelectorOptions = context.options
    file_context = build_file_context(context.module, options.store_factories, context.type_service)

    def visit_call(node: Call) -> None:
        if not is_hook_call(node, options, file_context):
            return
        diagnostic = report_selector_shape(classify_selector(node), node, options)
        if diagnostic is not None:
            context.report(diagnostic)

    return visit_call


RULE = Rule(name=RULE_ID, meta=META, create=create)
