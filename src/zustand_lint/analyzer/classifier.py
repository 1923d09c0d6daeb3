"""Hook call classification: is this call a Zustand store hook call?

Strategies (any match wins, evaluated in order):
  1. Structural type match: callee type is callable and carries the store API
  2. Explicit configuration: callee name is in ``hooks``
  3. Local alias inference: callee was declared from a store factory call
     (only without a type service; the type match covers it)

New strategies are new entries in ``STRATEGIES``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from zustand_lint.analyzer.models import HookOptions
from zustand_lint.ir.capability_registry import (
    DEFAULT_EXPORT_FACTORY_MODULES,
    Capability,
    TypeService,
    flatten_type,
    lookup_factory,
    satisfies,
)
from zustand_lint.ir.nodes import Call, Identifier, MemberAccess, Module, Node
from zustand_lint.ir.normalize import display_text, normalize

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileContext:
    """Per-file state: built once per file, never shared between files."""
    path: str
    aliases: frozenset[str] = frozenset()
    type_service: TypeService | None = None


def build_file_context(
    module: Module,
    store_factories: frozenset[str],
    type_service: TypeService | None = None,
) -> FileContext:
    """Pre-pass over imports and declarations; fills the alias registry.

    Skipped (empty registry) when a type service is available.
    """
    if type_service is not None:
        return FileContext(path=module.path, type_service=type_service)

    factory_locals = set(store_factories)
    for imp in module.imports:
        if imp.imported in store_factories:
            factory_locals.add(imp.local)
        elif imp.imported == "default" and imp.source in DEFAULT_EXPORT_FACTORY_MODULES:
            factory_locals.add(imp.local)

    aliases: set[str] = set()
    for decl in module.declarations:
        root = factory_root(decl.init)
        if root is None:
            continue
        if isinstance(root, Identifier) and root.name in factory_locals:
            aliases.add(decl.name)
        elif (
            isinstance(root, MemberAccess)
            and not root.computed
            and root.property in store_factories
        ):
            aliases.add(decl.name)
        else:
            continue
        entry = lookup_factory(root.name if isinstance(root, Identifier) else root.property or "")
        log.debug(
            "%s:%d: %s is a store hook (%s)",
            module.path, decl.line, decl.name,
            entry.service_name if entry else display_text(root),
        )

    return FileContext(path=module.path, aliases=frozenset(aliases))


def factory_root(init: Node) -> Node | None:
    """Innermost callee of a call chain: ``create<T>()(devtools(fn))`` -> ``create``.

    Returns None when ``init`` is not a call.
    """
    current = normalize(init)
    if not isinstance(current, Call):
        return None
    while isinstance(current, Call):
        current = normalize(current.callee)
    return current


# ── Strategies ────────────────────────────────────────────────────────────

Strategy = Callable[[Call, HookOptions, FileContext], bool]


def matches_store_type(call: Call, options: HookOptions, context: FileContext) -> bool:
    """Callee type (or any union/intersection member) is a store hook."""
    service = context.type_service
    if service is None:
        return False
    callee = normalize(call.callee)
    try:
        resolved = service.type_of(callee)
        if resolved is None:
            return False
        return any(satisfies(t, Capability.STORE_HOOK) for t in flatten_type(resolved))
    except Exception:
        log.debug(
            "%s:%d: type resolution failed for %s",
            context.path, call.span.line, display_text(callee), exc_info=True,
        )
        return False


def matches_configured_name(call: Call, options: HookOptions, context: FileContext) -> bool:
    callee = normalize(call.callee)
    return isinstance(callee, Identifier) and callee.name in options.hooks


def matches_local_alias(call: Call, options: HookOptions, context: FileContext) -> bool:
    if context.type_service is not None:
        return False
    callee = normalize(call.callee)
    return isinstance(callee, Identifier) and callee.name in context.aliases


STRATEGIES: tuple[Strategy, ...] = (
    matches_store_type,
    matches_configured_name,
    matches_local_alias,
)


def is_hook_call(call: Call, options: HookOptions, context: FileContext) -> bool:
    """True if any strategy recognizes the call as a store hook call."""
    return any(strategy(call, options, context) for strategy in STRATEGIES)


def hook_display_name(call: Call) -> str:
    """Bare name for identifier callees, otherwise the callee's text."""
    callee = normalize(call.callee)
    if isinstance(callee, Identifier):
        return callee.name
    return display_text(call.callee)
