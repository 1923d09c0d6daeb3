"""ESTree frontend: typescript-estree JSON (``*.estree.json``) -> Module.

Accepts the Program node produced by ``@typescript-eslint/typescript-estree``
with ``loc`` and ``range`` enabled. When the source text is supplied,
node text is sliced from it via ``range``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from zustand_lint.ir.nodes import (
    ArrayLiteral,
    Block,
    Call,
    Declaration,
    FunctionLiteral,
    Identifier,
    ImportBinding,
    MemberAccess,
    Module,
    Node,
    NO_SPAN,
    ObjectLiteral,
    Opaque,
    Return,
    Span,
    Wrapper,
    WrapperKind,
)

log = logging.getLogger(__name__)

ESTREE_SUFFIX = ".estree.json"

_WRAPPERS: dict[str, WrapperKind] = {
    "TSAsExpression": WrapperKind.TYPE_ASSERTION,
    "TSTypeAssertion": WrapperKind.TYPE_ASSERTION,
    "TSSatisfiesExpression": WrapperKind.TYPE_ASSERTION,
    "TSNonNullExpression": WrapperKind.NON_NULL,
    "ChainExpression": WrapperKind.OPTIONAL_CHAIN,
}

# Keys that never lead to child syntax nodes
_SKIP_KEYS = {"loc", "range", "parent", "tokens", "comments", "type"}


class ESTreeError(ValueError):
    """The JSON document is not an ESTree Program."""


def load_program(fpath: Path) -> dict[str, Any]:
    data = json.loads(fpath.read_text(encoding="utf-8"))
    if isinstance(data, dict) and data.get("type") != "Program" and isinstance(data.get("ast"), dict):
        data = data["ast"]
    if not isinstance(data, dict) or data.get("type") != "Program":
        raise ESTreeError(f"{fpath}: expected an ESTree Program node")
    return data


def parse_file(fpath: Path, rel: str | None = None) -> Module:
    """Load a ``*.estree.json`` file. A sibling source file (same name without
    ``.estree.json``) is used for node text when one exists."""
    program = load_program(fpath)
    source = None
    name = fpath.name
    if name.endswith(ESTREE_SUFFIX):
        sibling = fpath.with_name(name[: -len(ESTREE_SUFFIX)])
        if sibling.is_file():
            source = sibling.read_text(encoding="utf-8", errors="replace")
    return convert_program(program, rel or str(fpath), source)


def convert_program(program: dict[str, Any], path: str = "<input>", source: str | None = None) -> Module:
    conv = _Converter(source)
    calls: list[Call] = []
    declarations: list[Declaration] = []
    imports: list[ImportBinding] = []

    for raw in _walk(program):
        t = raw.get("type")
        if t == "CallExpression":
            calls.append(conv.call(raw))
        elif t == "VariableDeclarator":
            ident = raw.get("id") or {}
            init = raw.get("init")
            if ident.get("type") == "Identifier" and isinstance(init, dict):
                declarations.append(Declaration(
                    ident["name"], conv.convert(init), line=_span(raw).line,
                ))
        elif t == "ImportDeclaration":
            imports.extend(_imports(raw))

    return Module(
        path=path,
        calls=tuple(calls),
        declarations=tuple(declarations),
        imports=tuple(imports),
    )


def _children(raw: dict[str, Any]) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for key, value in raw.items():
        if key in _SKIP_KEYS:
            continue
        if isinstance(value, dict) and "type" in value:
            out.append(value)
        elif isinstance(value, list):
            out.extend(v for v in value if isinstance(v, dict) and "type" in v)
    # JSON key order is not guaranteed to follow the source
    if all("range" in c for c in out):
        out.sort(key=lambda c: c["range"][0])
    return out


def _walk(root: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Pre-order, document-order traversal."""
    stack = [root]
    while stack:
        raw = stack.pop()
        yield raw
        stack.extend(reversed(_children(raw)))


def _span(raw: dict[str, Any]) -> Span:
    loc = raw.get("loc")
    if not loc:
        return NO_SPAN
    start, end = loc["start"], loc["end"]
    # ESTree columns are 0-based
    return Span(start["line"], start["column"] + 1, end["line"], end["column"] + 1)


def _imports(raw: dict[str, Any]) -> list[ImportBinding]:
    source = str((raw.get("source") or {}).get("value", ""))
    out: list[ImportBinding] = []
    for spec in raw.get("specifiers") or []:
        local = (spec.get("local") or {}).get("name")
        if not local:
            continue
        kind = spec.get("type")
        if kind == "ImportDefaultSpecifier":
            out.append(ImportBinding(local, "default", source))
        elif kind == "ImportNamespaceSpecifier":
            out.append(ImportBinding(local, "*", source))
        elif kind == "ImportSpecifier":
            imported = spec.get("imported") or {}
            name = imported.get("name") or imported.get("value") or local
            out.append(ImportBinding(local, str(name), source))
    return out


class _Converter:
    def __init__(self, source: str | None) -> None:
        self.source = source

    def _text(self, raw: dict[str, Any]) -> str:
        rng = raw.get("range")
        if self.source is None or not rng:
            return ""
        return self.source[rng[0]:rng[1]]

    def call(self, raw: dict[str, Any]) -> Call:
        return Call(
            self.convert(raw["callee"]),
            tuple(self.convert(a) for a in raw.get("arguments") or []),
            optional=bool(raw.get("optional")),
            span=_span(raw),
            text=self._text(raw),
        )

    def convert(self, raw: dict[str, Any]) -> Node:
        t = raw.get("type", "")
        span, text = _span(raw), self._text(raw)

        if t == "ParenthesizedExpression":
            return self.convert(raw["expression"])
        if t == "Identifier":
            return Identifier(raw["name"], span=span, text=text)
        if t == "MemberExpression":
            prop = raw.get("property") or {}
            computed = bool(raw.get("computed"))
            name = None
            if not computed and prop.get("type") in ("Identifier", "PrivateIdentifier"):
                name = prop["name"]
            return MemberAccess(
                self.convert(raw["object"]),
                name,
                computed=computed,
                optional=bool(raw.get("optional")),
                span=span,
                text=text,
            )
        if t == "CallExpression":
            return self.call(raw)
        if t == "ObjectExpression":
            return ObjectLiteral(span=span, text=text)
        if t == "ArrayExpression":
            return ArrayLiteral(span=span, text=text)
        if t in ("ArrowFunctionExpression", "FunctionExpression"):
            return FunctionLiteral(
                tuple(self._param(p) for p in raw.get("params") or []),
                self.convert(raw["body"]),
                arrow=t == "ArrowFunctionExpression",
                span=span,
                text=text,
            )
        if t in _WRAPPERS:
            return Wrapper(_WRAPPERS[t], self.convert(raw["expression"]), span=span, text=text)
        if t == "BlockStatement":
            return Block(tuple(self.convert(s) for s in raw.get("body") or []), span=span, text=text)
        if t == "ReturnStatement":
            arg = raw.get("argument")
            return Return(self.convert(arg) if arg else None, span=span, text=text)
        return Opaque(t or "unknown", span=span, text=text)

    def _param(self, raw: dict[str, Any]) -> Node:
        if raw.get("type") == "Identifier":
            return Identifier(raw["name"], span=_span(raw), text=self._text(raw))
        return Opaque(raw.get("type", "unknown"), span=_span(raw), text=self._text(raw))
