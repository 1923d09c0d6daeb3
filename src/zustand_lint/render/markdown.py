"""Render a LintReport as a Markdown report."""

from __future__ import annotations

from collections import Counter

from zustand_lint.analyzer.models import LintReport
from zustand_lint.rules import RULES


def render_markdown(report: LintReport, title: str = "Zustand selector report") -> str:
    """Produce a full Markdown report from a LintReport."""
    sections: list[str] = [f"# {title}\n"]

    # ── Summary box ──────────────────────────────────────────────────────
    sections.append("\n".join([
        f"- **Files linted**: {len(report.files)}",
        f"- **Errors**: {report.error_count}",
        f"- **Warnings**: {report.warning_count}",
        f"- **Files that failed to parse**: {report.failed_files}",
    ]) + "\n")

    # ── Per-rule counts ──────────────────────────────────────────────────
    if report.findings:
        counts = Counter(f.rule_id for f in report.findings)
        sections.append("## Rules\n")
        sections.append("| Rule | Findings | Description |")
        sections.append("|---|---|---|")
        for rule_id, n in counts.most_common():
            rule = RULES.get(rule_id)
            desc = rule.meta.description if rule else ""
            sections.append(f"| `{rule_id}` | {n} | {desc} |")
        sections.append("")

        # ── Findings ─────────────────────────────────────────────────────
        sections.append("## Findings\n")
        sections.append("| Location | Severity | Message |")
        sections.append("|---|---|---|")
        for f in sorted(report.findings, key=lambda f: (f.file, f.line, f.column)):
            sections.append(
                f"| `{f.file}:{f.line}:{f.column}` | {f.severity} | {_escape(f.message)} |"
            )
        sections.append("")

    failed = [s for s in report.files if s.status == "error"]
    if failed:
        sections.append("## Failed files\n")
        for s in failed:
            sections.append(f"- `{s.file}`: {s.error}")
        sections.append("")

    return "\n".join(sections)


def _escape(text: str) -> str:
    return text.replace("|", "\\|")
