"""Literal shape analysis for the prefer-use-shallow check."""

from __future__ import annotations

from zustand_lint.analyzer.models import LiteralShape
from zustand_lint.analyzer.selector_shape import sole_return_expression
from zustand_lint.ir.nodes import ArrayLiteral, Call, FunctionLiteral, Identifier, Node, ObjectLiteral
from zustand_lint.ir.normalize import normalize


def is_shallow_call(selector: Node, shallow_hook_name: str) -> bool:
    """``useShallow(fn)``, also when written ``useShallow(fn) as Selector``."""
    expr = normalize(selector)
    if not isinstance(expr, Call):
        return False
    callee = normalize(expr.callee)
    return isinstance(callee, Identifier) and callee.name == shallow_hook_name


def classify_literal(selector: Node, shallow_hook_name: str) -> LiteralShape:
    if is_shallow_call(selector, shallow_hook_name):
        return LiteralShape.ALREADY_WRAPPED

    fn = normalize(selector)
    if not isinstance(fn, FunctionLiteral):
        return LiteralShape.NOT_A_FUNCTION

    returned = sole_return_expression(fn)
    if returned is None:
        return LiteralShape.OTHER

    returned = normalize(returned)
    if isinstance(returned, ObjectLiteral):
        return LiteralShape.OBJECT_LITERAL
    if isinstance(returned, ArrayLiteral):
        return LiteralShape.ARRAY_LITERAL
    return LiteralShape.OTHER
