"""Rule objects: metadata + a factory that returns a call visitor.

A rule is a thin shim over the pure analyzers; ``RuleContext.report`` is the
diagnostic sink and turns each Diagnostic into a Finding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

from pydantic import BaseModel

from zustand_lint.analyzer.models import Finding, Severity
from zustand_lint.analyzer.reporter import Diagnostic
from zustand_lint.ir.capability_registry import TypeService
from zustand_lint.ir.nodes import Call, Module

Visitor = Callable[[Call], None]


@dataclass(frozen=True)
class RuleMeta:
    type: Literal["problem", "suggestion"]
    description: str
    messages: dict[str, str]
    options_model: type[BaseModel]

    @property
    def schema(self) -> dict[str, Any]:
        """JSON schema of the rule options, camelCase keys."""
        return self.options_model.model_json_schema(by_alias=True)

    def default_options(self) -> BaseModel:
        return self.options_model()


@dataclass
class RuleContext:
    rule_id: str
    severity: Severity
    options: Any
    module: Module
    messages: dict[str, str]
    type_service: TypeService | None = None
    findings: list[Finding] = field(default_factory=list)

    def report(self, diagnostic: Diagnostic) -> None:
        template = self.messages[diagnostic.message_id]
        span = diagnostic.node.span
        self.findings.append(Finding(
            rule_id=self.rule_id,
            message_id=diagnostic.message_id,
            severity=self.severity,
            file=self.module.path,
            line=span.line,
            column=span.column,
            end_line=span.end_line,
            end_column=span.end_column,
            message=template.format_map(diagnostic.data),
            data=dict(diagnostic.data),
        ))


@dataclass(frozen=True)
class Rule:
    name: str
    meta: RuleMeta
    create: Callable[[RuleContext], Visitor]
