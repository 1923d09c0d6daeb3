"""Render a LintReport as terminal text, grouped by file."""

from __future__ import annotations

from itertools import groupby

from zustand_lint.analyzer.models import LintReport


def render_stylish(report: LintReport) -> str:
    lines: list[str] = []
    findings = sorted(report.findings, key=lambda f: (f.file, f.line, f.column))

    for file, group in groupby(findings, key=lambda f: f.file):
        lines.append(file)
        for f in group:
            sev = "error" if f.severity == "error" else "warning"
            lines.append(f"  {f.line}:{f.column}  {sev:<7}  {f.message}  {f.rule_id}")
        lines.append("")

    for status in report.files:
        if status.status == "error":
            lines.append(f"{status.file}: failed to lint ({status.error})")

    total = len(report.findings)
    if total:
        lines.append(
            f"✖ {total} problem{'s' if total != 1 else ''} "
            f"({report.error_count} error{'s' if report.error_count != 1 else ''}, "
            f"{report.warning_count} warning{'s' if report.warning_count != 1 else ''})"
        )
    else:
        lines.append(f"No problems found in {len(report.files)} files.")
    return "\n".join(lines)
