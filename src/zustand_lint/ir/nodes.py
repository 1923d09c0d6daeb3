"""Closed set of syntax node shapes the checks inspect. Pure data, no logic.

Frontends map every host node outside this set to ``Opaque``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Span:
    line: int          # 1-based
    column: int        # 1-based
    end_line: int
    end_column: int


NO_SPAN = Span(0, 0, 0, 0)


class WrapperKind(str, Enum):
    TYPE_ASSERTION = "type_assertion"    # x as T, <T>x, x satisfies T
    NON_NULL = "non_null"                # x!
    OPTIONAL_CHAIN = "optional_chain"    # ESTree ChainExpression


@dataclass(frozen=True)
class Node:
    span: Span = field(default=NO_SPAN, kw_only=True, compare=False)
    text: str = field(default="", kw_only=True, compare=False)


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class MemberAccess(Node):
    object: Node
    property: str | None      # None when computed
    computed: bool = False
    optional: bool = False


@dataclass(frozen=True)
class Call(Node):
    callee: Node
    arguments: tuple[Node, ...] = ()
    optional: bool = False


@dataclass(frozen=True)
class ObjectLiteral(Node):
    pass


@dataclass(frozen=True)
class ArrayLiteral(Node):
    pass


@dataclass(frozen=True)
class Return(Node):
    argument: Node | None = None


@dataclass(frozen=True)
class Block(Node):
    statements: tuple[Node, ...] = ()


@dataclass(frozen=True)
class FunctionLiteral(Node):
    params: tuple[Node, ...]         # Identifier for plain names, Opaque for patterns
    body: Node                       # expression, or Block
    arrow: bool = True


@dataclass(frozen=True)
class Wrapper(Node):
    kind: WrapperKind
    expression: Node


@dataclass(frozen=True)
class Opaque(Node):
    kind: str                        # host node type, kept for debugging


@dataclass(frozen=True)
class Declaration:
    name: str
    init: Node
    line: int = 0


@dataclass(frozen=True)
class ImportBinding:
    local: str
    imported: str        # "default", "*", or the exported name
    source: str          # module specifier, e.g. "zustand"


@dataclass(frozen=True)
class Module:
    """One parsed file as seen by the checks."""
    path: str
    calls: tuple[Call, ...] = ()          # document order, outer call first
    declarations: tuple[Declaration, ...] = ()
    imports: tuple[ImportBinding, ...] = ()
