"""Selector shape analysis for the require-selector check."""

from __future__ import annotations

from zustand_lint.analyzer.models import SelectorShape
from zustand_lint.ir.nodes import Block, Call, FunctionLiteral, Identifier, MemberAccess, Node, Return
from zustand_lint.ir.normalize import normalize


def sole_return_expression(fn: FunctionLiteral) -> Node | None:
    """The single value a selector returns, or None when the body is not
    an expression or a block holding exactly one ``return <expr>``."""
    body = fn.body
    if not isinstance(body, Block):
        return body
    if len(body.statements) != 1:
        return None
    stmt = body.statements[0]
    if isinstance(stmt, Return) and stmt.argument is not None:
        return stmt.argument
    return None


def selector_argument(call: Call) -> Node | None:
    return call.arguments[0] if call.arguments else None


def classify_selector(call: Call) -> SelectorShape:
    selector = selector_argument(call)
    if selector is None:
        return SelectorShape.MISSING

    fn = normalize(selector)
    if not isinstance(fn, FunctionLiteral) or len(fn.params) != 1:
        return SelectorShape.UNANALYZABLE

    returned = sole_return_expression(fn)
    if returned is None:
        return SelectorShape.UNANALYZABLE

    param = fn.params[0]
    if not isinstance(param, Identifier):
        # destructured / defaulted parameter: no single name to compare against
        return SelectorShape.OTHER

    returned = normalize(returned)
    if isinstance(returned, Identifier) and returned.name == param.name:
        return SelectorShape.IDENTITY
    if isinstance(returned, MemberAccess) and not returned.computed and returned.property:
        obj = normalize(returned.object)
        if isinstance(obj, Identifier) and obj.name == param.name:
            return SelectorShape.SINGLE_LEVEL_PROPERTY
    return SelectorShape.OTHER
