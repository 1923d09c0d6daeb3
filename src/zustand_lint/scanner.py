"""Scanner: parse each file, run the enabled rules over its calls, collect findings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from zustand_lint.analyzer.models import FileStatus, Finding, LintReport
from zustand_lint.config import LintConfig, recommended_config
from zustand_lint.ir import load_module
from zustand_lint.ir.capability_registry import TypeService
from zustand_lint.ir.nodes import Module
from zustand_lint.ir.treesitter_frontend import parse_source
from zustand_lint.rules import RULES, RuleContext
from zustand_lint.utils import discover_files

log = logging.getLogger(__name__)

# Builds the type service for one file (None when types are unavailable)
TypeServiceFactory = Callable[[Module], "TypeService | None"]


def lint_module(
    module: Module,
    config: LintConfig | None = None,
    type_service: TypeService | None = None,
) -> list[Finding]:
    """Run every enabled rule over one module's calls, in document order."""
    config = config or recommended_config()
    contexts: list[RuleContext] = []
    visitors = []
    for rule_id, setting in config.rules.items():
        rule = RULES[rule_id]
        ctx = RuleContext(
            rule_id=rule_id,
            severity=setting.severity,
            options=setting.options,
            module=module,
            messages=rule.meta.messages,
            type_service=type_service,
        )
        contexts.append(ctx)
        visitors.append(rule.create(ctx))

    for call in module.calls:
        for visit in visitors:
            visit(call)

    findings = [f for ctx in contexts for f in ctx.findings]
    findings.sort(key=lambda f: (f.line, f.column, f.rule_id))
    return findings


def lint_source(
    source: str,
    path: str = "<input>.tsx",
    config: LintConfig | None = None,
    type_service: TypeService | None = None,
) -> list[Finding]:
    """Parse and lint JS/TS source text."""
    return lint_module(parse_source(source, path), config, type_service)


def lint_paths(
    paths: Iterable[Path],
    config: LintConfig | None = None,
    *,
    type_service_factory: TypeServiceFactory | None = None,
) -> LintReport:
    """Lint files and directories.

    Args:
        paths: Files or directories; directories are walked recursively.
        config: Rule settings. Defaults to the recommended config.
        type_service_factory: Optional per-file type service builder.

    Returns:
        LintReport with all findings and a status per file. A file that fails
        to load is recorded as an error and the scan continues.
    """
    config = config or recommended_config()
    report = LintReport()

    for root in paths:
        root = root.resolve()
        workspace = root if root.is_dir() else root.parent
        files = discover_files(root)
        log.info("Linting %d files under %s", len(files), root)

        for fpath in files:
            rel = str(fpath.relative_to(workspace))
            try:
                module = load_module(fpath, workspace)
                service = type_service_factory(module) if type_service_factory else None
                findings = lint_module(module, config, service)
            except Exception as e:
                log.exception("Failed to lint %s", rel)
                report.files.append(FileStatus(file=rel, status="error", error=str(e)))
                continue
            report.findings.extend(findings)
            report.files.append(FileStatus(file=rel, findings=len(findings)))

    log.info(
        "Lint complete: %d files, %d errors, %d warnings",
        len(report.files), report.error_count, report.warning_count,
    )
    return report
