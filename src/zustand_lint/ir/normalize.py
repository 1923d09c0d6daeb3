"""Expression normalization: strip semantically transparent wrappers."""

from __future__ import annotations

from zustand_lint.ir.nodes import Call, Identifier, MemberAccess, Node, Opaque, Wrapper


def normalize(expr: Node) -> Node:
    """Return ``expr`` with any chain of type-assertion, non-null and
    optional-chain wrappers removed.

    Each step descends one level into a frozen tree, so the loop is bounded by
    the wrapper depth. ``normalize(normalize(x)) is normalize(x)``.
    """
    current = expr
    while isinstance(current, Wrapper):
        current = current.expression
    return current


def display_text(expr: Node) -> str:
    """Source text for a node, or a structural rendering when the frontend had none."""
    if expr.text:
        return expr.text
    return _render(expr)


def _render(expr: Node) -> str:
    expr = normalize(expr)
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, MemberAccess):
        obj = _render(expr.object)
        dot = "?." if expr.optional else "."
        if expr.computed or expr.property is None:
            return f"{obj}[…]"
        return f"{obj}{dot}{expr.property}"
    if isinstance(expr, Call):
        return f"{_render(expr.callee)}(…)"
    if isinstance(expr, Opaque):
        return f"<{expr.kind}>"
    return f"<{type(expr).__name__}>"
