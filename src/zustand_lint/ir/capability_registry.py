"""Central extensibility point: store factories and structural capabilities.

New store libraries or factory helpers = new dict entries, no classifier changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Sequence


class Capability(str, Enum):
    STORE_HOOK = "store_hook"


@dataclass(frozen=True)
class CapabilityEntry:
    capability: Capability
    callable: bool                                   # needs at least one call signature
    required_members: frozenset[str] = field(default_factory=frozenset)


CAPABILITY_REGISTRY: dict[Capability, CapabilityEntry] = {
    # A bound Zustand hook: `useStore(selector)` plus the vanilla store API
    # attached as static members.
    Capability.STORE_HOOK: CapabilityEntry(
        capability=Capability.STORE_HOOK,
        callable=True,
        required_members=frozenset({"getState", "setState", "subscribe"}),
    ),
}


@dataclass(frozen=True)
class StoreFactoryEntry:
    name: str
    module: str                 # module the factory is exported from
    service_name: str           # human readable


# Keyed by exported factory name
STORE_FACTORY_REGISTRY: dict[str, StoreFactoryEntry] = {
    "create": StoreFactoryEntry(
        name="create",
        module="zustand",
        service_name="Zustand",
    ),
    "createWithEqualityFn": StoreFactoryEntry(
        name="createWithEqualityFn",
        module="zustand/traditional",
        service_name="Zustand (traditional)",
    ),
}

# Modules whose default export is a hook factory (zustand < 4 exported `create` as default)
DEFAULT_EXPORT_FACTORY_MODULES: frozenset[str] = frozenset({"zustand"})


def default_store_factories() -> frozenset[str]:
    """Return all registered factory names."""
    return frozenset(STORE_FACTORY_REGISTRY.keys())


def lookup_factory(name: str) -> StoreFactoryEntry | None:
    """Look up a StoreFactoryEntry by exported name."""
    return STORE_FACTORY_REGISTRY.get(name)


# ── Type resolution interface ─────────────────────────────────────────────


class ResolvedType(Protocol):
    """One type as reported by the host's type checker."""

    @property
    def constituents(self) -> Sequence["ResolvedType"]:
        """Member types of a union/intersection; empty for any other type."""
        ...

    def is_callable(self) -> bool:
        ...

    def has_member(self, name: str) -> bool:
        ...


class TypeService(Protocol):
    """Resolves the static type of an expression node, or None when unknown."""

    def type_of(self, node: object) -> ResolvedType | None:
        ...


def flatten_type(resolved: ResolvedType) -> list[ResolvedType]:
    """Flatten nested unions/intersections into the leaf constituent types.

    Union/intersection types themselves are not part of the result. Types seen
    twice (by identity) are expanded once, so self-referential aliases stop.
    """
    out: list[ResolvedType] = []
    seen: set[int] = set()
    stack: list[ResolvedType] = [resolved]
    while stack:
        t = stack.pop()
        if id(t) in seen:
            continue
        seen.add(id(t))
        parts = list(t.constituents or ())
        if parts:
            stack.extend(reversed(parts))
        else:
            out.append(t)
    return out


def satisfies(resolved: ResolvedType, capability: Capability) -> bool:
    """True if a single (non-union) type provides every part of the capability."""
    entry = CAPABILITY_REGISTRY[capability]
    if entry.callable and not resolved.is_callable():
        return False
    return all(resolved.has_member(m) for m in entry.required_members)
