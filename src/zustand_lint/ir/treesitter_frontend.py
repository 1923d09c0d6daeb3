"""tree-sitter frontend: JS/TS source text -> Module.

Parentheses are dropped during conversion (ESTree parsers do the same), so
``(s) => ({ a: 1 })`` yields an ``ObjectLiteral`` body.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Node as TSNode, Parser

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
    ObjectLiteral,
    Opaque,
    Return,
    Span,
    Wrapper,
    WrapperKind,
)

log = logging.getLogger(__name__)

TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts"}
TSX_SUFFIXES = {".tsx", ".js", ".jsx", ".mjs", ".cjs"}
SOURCE_SUFFIXES = TYPESCRIPT_SUFFIXES | TSX_SUFFIXES

_FUNCTION_TYPES = {"arrow_function", "function_expression", "function"}
_ASSERTION_TYPES = {"as_expression", "satisfies_expression"}


@lru_cache(maxsize=2)
def _language(dialect: str) -> Language:
    if dialect == "tsx":
        return Language(tree_sitter_typescript.language_tsx())
    return Language(tree_sitter_typescript.language_typescript())


def dialect_for(path: str | Path) -> str:
    """Pick the grammar for a file name: "typescript" or "tsx"."""
    return "typescript" if Path(path).suffix.lower() in TYPESCRIPT_SUFFIXES else "tsx"


def parse_source(source: str, path: str = "<input>.ts", dialect: str | None = None) -> Module:
    """Parse JS/TS source text into a Module."""
    dialect = dialect or dialect_for(path)
    parser = Parser(_language(dialect))
    source_bytes = source.encode("utf-8")
    tree = parser.parse(source_bytes)
    if tree.root_node.has_error:
        log.debug("%s: syntax errors, analyzing the recoverable parts", path)
    return _Converter(path, source_bytes).module(tree.root_node)


def parse_file(fpath: Path, rel: str | None = None) -> Module:
    source = fpath.read_text(encoding="utf-8", errors="replace")
    return parse_source(source, rel or str(fpath), dialect_for(fpath))


def _named(node: TSNode) -> list[TSNode]:
    return [c for c in node.named_children if c.type != "comment"]


def _text(node: TSNode) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text else ""


def _string_value(node: TSNode) -> str:
    raw = _text(node)
    if len(raw) >= 2 and raw[0] in "'\"`" and raw[-1] == raw[0]:
        return raw[1:-1]
    return raw


class _Converter:
    """Converts one tree; memoizes by byte range so nested calls convert once."""

    def __init__(self, path: str, source: bytes = b"") -> None:
        self.path = path
        self._lines = source.split(b"\n")
        self._memo: dict[tuple[int, int, str], Node] = {}

    def _column(self, point: tuple[int, int]) -> int:
        """1-based character column; tree-sitter points count bytes."""
        row, byte_col = point
        if row >= len(self._lines):
            return byte_col + 1
        return len(self._lines[row][:byte_col].decode("utf-8", errors="replace")) + 1

    def _span(self, node: TSNode) -> Span:
        return Span(
            node.start_point[0] + 1, self._column(node.start_point),
            node.end_point[0] + 1, self._column(node.end_point),
        )

    def module(self, root: TSNode) -> Module:
        calls: list[Call] = []
        declarations: list[Declaration] = []
        imports: list[ImportBinding] = []

        # Pre-order walk; children pushed in reverse to pop in source order.
        stack = [root]
        while stack:
            n = stack.pop()
            if n.type == "call_expression":
                converted = self.convert(n)
                if isinstance(converted, Call):
                    calls.append(converted)
            elif n.type == "variable_declarator":
                decl = self._declaration(n)
                if decl is not None:
                    declarations.append(decl)
            elif n.type == "import_statement":
                imports.extend(self._imports(n))
            stack.extend(reversed(n.children))

        return Module(
            path=self.path,
            calls=tuple(calls),
            declarations=tuple(declarations),
            imports=tuple(imports),
        )

    # ── Expressions ──────────────────────────────────────────────────────

    def convert(self, node: TSNode) -> Node:
        key = (node.start_byte, node.end_byte, node.type)
        cached = self._memo.get(key)
        if cached is None:
            cached = self._convert(node)
            self._memo[key] = cached
        return cached

    def _convert(self, node: TSNode) -> Node:
        t = node.type
        span, text = self._span(node), _text(node)

        if t == "parenthesized_expression":
            inner = _named(node)
            if len(inner) == 1:
                return self.convert(inner[0])
            return Opaque("sequence", span=span, text=text)

        if t == "identifier":
            return Identifier(text, span=span, text=text)

        if t == "member_expression":
            obj = node.child_by_field_name("object")
            prop = node.child_by_field_name("property")
            optional = any(c.type == "optional_chain" for c in node.children)
            return MemberAccess(
                self.convert(obj) if obj is not None else Opaque("missing", span=span),
                _text(prop) if prop is not None else None,
                computed=False,
                optional=optional,
                span=span,
                text=text,
            )

        if t == "subscript_expression":
            obj = node.child_by_field_name("object")
            optional = any(c.type == "optional_chain" for c in node.children)
            return MemberAccess(
                self.convert(obj) if obj is not None else Opaque("missing", span=span),
                None,
                computed=True,
                optional=optional,
                span=span,
                text=text,
            )

        if t == "call_expression":
            return self._call(node, span, text)

        if t == "object":
            return ObjectLiteral(span=span, text=text)

        if t == "array":
            return ArrayLiteral(span=span, text=text)

        if t in _FUNCTION_TYPES:
            return self._function(node, span, text)

        if t in _ASSERTION_TYPES:
            inner = _named(node)
            if inner:
                return Wrapper(WrapperKind.TYPE_ASSERTION, self.convert(inner[0]),
                               span=span, text=text)

        if t == "type_assertion":
            # <T>expr: type_arguments come first, the expression last
            inner = _named(node)
            if inner:
                return Wrapper(WrapperKind.TYPE_ASSERTION, self.convert(inner[-1]),
                               span=span, text=text)

        if t == "non_null_expression":
            inner = _named(node)
            if inner:
                return Wrapper(WrapperKind.NON_NULL, self.convert(inner[0]),
                               span=span, text=text)

        if t == "statement_block":
            return Block(tuple(self.convert(c) for c in _named(node)), span=span, text=text)

        if t == "return_statement":
            inner = _named(node)
            arg = self.convert(inner[0]) if inner else None
            return Return(arg, span=span, text=text)

        return Opaque(t, span=span, text=text)

    def _call(self, node: TSNode, span: Span, text: str) -> Node:
        callee = node.child_by_field_name("function")
        args = node.child_by_field_name("arguments")
        if callee is None or args is None or args.type != "arguments":
            # tagged template literal: tag`...`
            return Opaque("tagged_template", span=span, text=text)
        optional = any(c.type == "optional_chain" for c in node.children)
        return Call(
            self.convert(callee),
            tuple(self.convert(a) for a in _named(args)),
            optional=optional,
            span=span,
            text=text,
        )

    def _function(self, node: TSNode, span: Span, text: str) -> Node:
        single = node.child_by_field_name("parameter")
        if single is not None:
            params: tuple[Node, ...] = (self._param(single),)
        else:
            plist = node.child_by_field_name("parameters")
            params = tuple(self._param(p) for p in _named(plist)) if plist is not None else ()
        body = node.child_by_field_name("body")
        return FunctionLiteral(
            params,
            self.convert(body) if body is not None else Opaque("missing", span=span),
            arrow=node.type == "arrow_function",
            span=span,
            text=text,
        )

    def _param(self, node: TSNode) -> Node:
        if node.type == "identifier":
            return Identifier(_text(node), span=self._span(node), text=_text(node))
        if node.type in ("required_parameter", "optional_parameter"):
            pattern = node.child_by_field_name("pattern")
            has_default = node.child_by_field_name("value") is not None
            if pattern is not None and pattern.type == "identifier" and not has_default:
                return Identifier(_text(pattern), span=self._span(pattern), text=_text(pattern))
        return Opaque(node.type, span=self._span(node), text=_text(node))

    # ── Declarations & imports ───────────────────────────────────────────

    def _declaration(self, node: TSNode) -> Declaration | None:
        name = node.child_by_field_name("name")
        value = node.child_by_field_name("value")
        if name is None or value is None or name.type != "identifier":
            return None
        return Declaration(_text(name), self.convert(value), line=node.start_point[0] + 1)

    def _imports(self, node: TSNode) -> list[ImportBinding]:
        source_node = node.child_by_field_name("source")
        if source_node is None:
            return []
        source = _string_value(source_node)
        out: list[ImportBinding] = []
        for clause in _named(node):
            if clause.type != "import_clause":
                continue
            for part in _named(clause):
                if part.type == "identifier":
                    out.append(ImportBinding(_text(part), "default", source))
                elif part.type == "namespace_import":
                    ids = [c for c in _named(part) if c.type == "identifier"]
                    if ids:
                        out.append(ImportBinding(_text(ids[0]), "*", source))
                elif part.type == "named_imports":
                    for spec in _named(part):
                        if spec.type != "import_specifier":
                            continue
                        imported = spec.child_by_field_name("name")
                        alias = spec.child_by_field_name("alias")
                        if imported is None:
                            continue
                        local = alias if alias is not None else imported
                        out.append(ImportBinding(
                            _string_value(local), _string_value(imported), source,
                        ))
        return out
