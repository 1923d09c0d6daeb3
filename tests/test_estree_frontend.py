"""Tests for the ESTree frontend (typescript-estree JSON -> Module)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from zustand_lint.ir.estree_frontend import ESTreeError, convert_program, load_program, parse_file
from zustand_lint.ir.nodes import (
    Call,
    FunctionLiteral,
    Identifier,
    ImportBinding,
    MemberAccess,
    ObjectLiteral,
    Opaque,
    Wrapper,
    WrapperKind,
)


def ident(name: str) -> dict:
    return {"type": "Identifier", "name": name}


def call(callee: dict, *args: dict) -> dict:
    return {"type": "CallExpression", "callee": callee, "arguments": list(args), "optional": False}


def arrow(params: list[dict], body: dict) -> dict:
    return {"type": "ArrowFunctionExpression", "params": params, "body": body}


def program(*exprs: dict) -> dict:
    return {
        "type": "Program",
        "body": [{"type": "ExpressionStatement", "expression": e} for e in exprs],
    }


class TestConvert:
    def test_call_with_selector(self):
        member = {"type": "MemberExpression", "object": ident("s"),
                  "property": ident("count"), "computed": False, "optional": False}
        m = convert_program(program(call(ident("useStore"), arrow([ident("s")], member))))
        assert len(m.calls) == 1
        fn = m.calls[0].arguments[0]
        assert isinstance(fn, FunctionLiteral)
        assert fn.params == (Identifier("s"),)
        assert fn.body == MemberAccess(Identifier("s"), "count")

    def test_computed_member_has_no_property(self):
        member = {"type": "MemberExpression", "object": ident("s"),
                  "property": ident("key"), "computed": True, "optional": False}
        m = convert_program(program(call(ident("useStore"), arrow([ident("s")], member))))
        body = m.calls[0].arguments[0].body
        assert body.computed is True
        assert body.property is None

    def test_ts_wrappers(self):
        wrapped = {
            "type": "TSAsExpression",
            "expression": call(ident("useShallow"), arrow([ident("s")], {"type": "ObjectExpression", "properties": []})),
            "typeAnnotation": {"type": "TSAnyKeyword"},
        }
        m = convert_program(program(call(ident("useStore"), wrapped)))
        arg = m.calls[0].arguments[0]
        assert isinstance(arg, Wrapper)
        assert arg.kind == WrapperKind.TYPE_ASSERTION
        assert isinstance(arg.expression, Call)

    def test_chain_expression(self):
        chained = {"type": "ChainExpression", "expression": {
            "type": "CallExpression", "callee": ident("useStore"), "arguments": [], "optional": True,
        }}
        m = convert_program(program(chained))
        assert len(m.calls) == 1
        assert m.calls[0].optional is True

    def test_pattern_param_is_opaque(self):
        pattern = {"type": "ObjectPattern", "properties": []}
        m = convert_program(program(call(ident("useStore"), arrow([pattern], ident("count")))))
        assert isinstance(m.calls[0].arguments[0].params[0], Opaque)

    def test_document_order_outer_first(self):
        inner = call(ident("useShallow"), arrow([ident("s")], {"type": "ObjectExpression", "properties": []}))
        m = convert_program(program(call(ident("useStore"), inner)))
        assert [c.callee.name for c in m.calls] == ["useStore", "useShallow"]
        assert isinstance(m.calls[1].arguments[0].body, ObjectLiteral)

    def test_children_sorted_by_range(self):
        # key order deliberately reversed against the source order
        first = {"type": "CallExpression", "callee": ident("a"), "arguments": [], "range": [0, 3]}
        second = {"type": "CallExpression", "callee": ident("b"), "arguments": [], "range": [5, 8]}
        prog = {"type": "Program", "range": [0, 8], "body": [
            {"type": "ExpressionStatement", "expression": second, "range": [5, 9]},
            {"type": "ExpressionStatement", "expression": first, "range": [0, 4]},
        ]}
        m = convert_program(prog)
        assert [c.callee.name for c in m.calls] == ["a", "b"]

    def test_declarations_and_imports(self):
        prog = {"type": "Program", "body": [
            {"type": "ImportDeclaration", "source": {"type": "Literal", "value": "zustand"}, "specifiers": [
                {"type": "ImportSpecifier", "imported": ident("create"), "local": ident("makeStore")},
                {"type": "ImportDefaultSpecifier", "local": ident("legacyCreate")},
            ]},
            {"type": "VariableDeclaration", "kind": "const", "declarations": [
                {"type": "VariableDeclarator", "id": ident("useBears"),
                 "init": call(call(ident("makeStore")), arrow([], {"type": "ObjectExpression", "properties": []}))},
            ]},
        ]}
        m = convert_program(prog)
        assert m.imports == (
            ImportBinding("makeStore", "create", "zustand"),
            ImportBinding("legacyCreate", "default", "zustand"),
        )
        assert [d.name for d in m.declarations] == ["useBears"]
        assert isinstance(m.declarations[0].init, Call)


class TestFiles:
    def test_parse_file_reads_sibling_source(self, tmp_path: Path):
        source = "useStore();\n"
        prog = {
            "type": "Program", "range": [0, 11],
            "loc": {"start": {"line": 1, "column": 0}, "end": {"line": 1, "column": 11}},
            "body": [{
                "type": "ExpressionStatement", "range": [0, 11],
                "loc": {"start": {"line": 1, "column": 0}, "end": {"line": 1, "column": 11}},
                "expression": {
                    "type": "CallExpression", "range": [0, 10], "arguments": [], "optional": False,
                    "loc": {"start": {"line": 1, "column": 0}, "end": {"line": 1, "column": 10}},
                    "callee": {
                        "type": "Identifier", "name": "useStore", "range": [0, 8],
                        "loc": {"start": {"line": 1, "column": 0}, "end": {"line": 1, "column": 8}},
                    },
                },
            }],
        }
        (tmp_path / "app.ts").write_text(source)
        dump = tmp_path / "app.ts.estree.json"
        dump.write_text(json.dumps(prog))

        m = parse_file(dump, "app.ts.estree.json")
        call_node = m.calls[0]
        assert call_node.text == "useStore()"
        assert call_node.callee.text == "useStore"
        assert (call_node.span.line, call_node.span.column) == (1, 1)
        assert call_node.span.end_column == 11

    def test_wrapped_ast_document(self, tmp_path: Path):
        f = tmp_path / "x.estree.json"
        f.write_text(json.dumps({"ast": program()}))
        assert load_program(f)["type"] == "Program"

    def test_rejects_non_program(self, tmp_path: Path):
        f = tmp_path / "x.estree.json"
        f.write_text(json.dumps({"type": "Identifier", "name": "x"}))
        with pytest.raises(ESTreeError):
            load_program(f)
