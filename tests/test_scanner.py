"""Tests for the scanner, file discovery and the report renderers."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

from zustand_lint.analyzer.models import LintReport
from zustand_lint.render.markdown import render_markdown
from zustand_lint.render.stylish import render_stylish
from zustand_lint.scanner import lint_module, lint_paths
from zustand_lint.ir.treesitter_frontend import parse_source
from zustand_lint.utils import discover_files


def write(root: Path, rel: str, code: str) -> Path:
    f = root / rel
    f.parent.mkdir(parents=True, exist_ok=True)
    f.write_text(textwrap.dedent(code))
    return f


STORE = """
import { create } from "zustand";

export const useBears = create<BearState>()((set) => ({
  bears: 0,
  fish: 0,
}));
"""

COMPONENT = """
import { useBears } from "./store";

export function BearCounter() {
  const bears = useBears();
  const pair = useBears((s) => ({ bears: s.bears, fish: s.fish }));
  const count = useStore((s) => s.count);
  return bears + pair + count;
}
"""


class TestDiscovery:
    def test_skips_ignored_dirs_and_declarations(self, tmp_path: Path):
        write(tmp_path, "src/App.tsx", "useStore();")
        write(tmp_path, "src/store.ts", "")
        write(tmp_path, "src/types.d.ts", "")
        write(tmp_path, "node_modules/zustand/index.js", "")
        write(tmp_path, "dist/bundle.js", "")
        write(tmp_path, "README.md", "")
        found = [str(p.relative_to(tmp_path)) for p in discover_files(tmp_path)]
        assert found == ["src/App.tsx", "src/store.ts"]

    def test_estree_dump_replaces_its_source(self, tmp_path: Path):
        write(tmp_path, "app.ts", "useStore();")
        write(tmp_path, "app.ts.estree.json", '{"type": "Program", "body": []}')
        found = [p.name for p in discover_files(tmp_path)]
        assert found == ["app.ts.estree.json"]

    def test_single_file(self, tmp_path: Path):
        f = write(tmp_path, "App.jsx", "useStore();")
        assert discover_files(f) == [f]


class TestLintPaths:
    def test_aliases_do_not_leak_between_files(self, tmp_path: Path):
        write(tmp_path, "store.ts", STORE + "\nuseBears();\n")
        write(tmp_path, "component.tsx", COMPONENT)
        report = lint_paths([tmp_path])

        by_file = {}
        for f in report.findings:
            by_file.setdefault(f.file, []).append(f.message_id)

        # useBears is only known as a hook inside the file that creates it
        assert by_file == {"store.ts": ["missingSelector"]}
        assert [s.file for s in report.files] == ["component.tsx", "store.ts"]
        assert all(s.status == "ok" for s in report.files)

    def test_configured_hooks_apply_everywhere(self, tmp_path: Path):
        write(tmp_path, "component.tsx", COMPONENT.replace("useStore((s) => s.count)", "useStore()"))
        report = lint_paths([tmp_path])
        assert [f.message_id for f in report.findings] == ["missingSelector"]
        assert report.error_count == 1
        assert report.warning_count == 0

    def test_unreadable_file_is_recorded_not_fatal(self, tmp_path: Path):
        write(tmp_path, "broken.estree.json", "{not json")
        write(tmp_path, "ok.ts", "useStore();")
        report = lint_paths([tmp_path])
        statuses = {s.file: s.status for s in report.files}
        assert statuses == {"broken.estree.json": "error", "ok.ts": "ok"}
        assert report.failed_files == 1
        assert len(report.findings) == 1

    def test_type_service_factory_is_per_file(self, tmp_path: Path):
        write(tmp_path, "a.ts", "useThing();")
        write(tmp_path, "b.ts", "useThing();")
        seen: list[str] = []

        def factory(module):
            seen.append(module.path)
            return None

        lint_paths([tmp_path], type_service_factory=factory)
        assert seen == ["a.ts", "b.ts"]

    def test_estree_file(self, tmp_path: Path):
        prog = {"type": "Program", "body": [{"type": "ExpressionStatement", "expression": {
            "type": "CallExpression",
            "callee": {"type": "Identifier", "name": "useStore"},
            "arguments": [],
            "loc": {"start": {"line": 3, "column": 2}, "end": {"line": 3, "column": 12}},
        }}]}
        write(tmp_path, "app.estree.json", json.dumps(prog))
        report = lint_paths([tmp_path])
        [finding] = report.findings
        assert finding.message == "Do not call useStore() without a selector."
        assert (finding.line, finding.column) == (3, 3)


class TestLintModule:
    def test_findings_in_document_order(self):
        m = parse_source("useStore((s) => [s.a]);\nuseStore();\nuseStore((s) => s);\n", "a.tsx")
        findings = lint_module(m)
        assert [(f.line, f.message_id) for f in findings] == [
            (1, "preferUseShallow"), (2, "missingSelector"), (3, "identity"),
        ]


class TestRender:
    def _report(self) -> LintReport:
        m = parse_source("useStore();\nuseStore((s) => ({ a: s.a }));\n", "src/App.tsx")
        return LintReport(findings=lint_module(m))

    def test_stylish(self):
        text = render_stylish(self._report())
        assert "src/App.tsx" in text
        assert "1:1  error" in text
        assert "zustand-prefer-use-shallow" in text
        assert "✖ 2 problems (1 error, 1 warning)" in text

    def test_stylish_clean(self):
        assert render_stylish(LintReport()) == "No problems found in 0 files."

    def test_markdown(self):
        md = render_markdown(self._report())
        assert md.startswith("# Zustand selector report")
        assert "- **Errors**: 1" in md
        assert "| `zustand-require-selector` | 1 |" in md
        assert "`src/App.tsx:1:1`" in md
