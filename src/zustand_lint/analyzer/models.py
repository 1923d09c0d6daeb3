"""Pydantic models for rule options and lint reports, plus the shape outcomes."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from zustand_lint.ir.capability_registry import default_store_factories


# ── Shape outcomes ──────────────────────────────────────────────────────────

class SelectorShape(str, Enum):
    MISSING = "missing"
    UNANALYZABLE = "unanalyzable"
    IDENTITY = "identity"
    SINGLE_LEVEL_PROPERTY = "singleLevelProperty"
    OTHER = "other"


class LiteralShape(str, Enum):
    ALREADY_WRAPPED = "alreadyWrapped"
    NOT_A_FUNCTION = "notAFunction"
    OBJECT_LITERAL = "objectLiteral"
    ARRAY_LITERAL = "arrayLiteral"
    OTHER = "other"


# ── Rule options ────────────────────────────────────────────────────────────

class HookOptions(BaseModel):
    """Options shared by every rule that needs to recognize hook calls."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    hooks: frozenset[str] = Field(default=frozenset({"useStore"}))
    store_factories: frozenset[str] = Field(
        default_factory=default_store_factories, alias="storeFactories",
    )


class RequireSelectorOptions(HookOptions):
    forbid_identity_selector: bool = Field(default=True, alias="forbidIdentitySelector")
    forbid_direct_slice: bool = Field(default=False, alias="forbidDirectSlice")


class PreferUseShallowOptions(HookOptions):
    shallow_hook_name: str = Field(default="useShallow", alias="shallowHookName", min_length=1)
    check_object_literal: bool = Field(default=True, alias="checkObjectLiteral")
    check_array_literal: bool = Field(default=True, alias="checkArrayLiteral")


# ── Report ──────────────────────────────────────────────────────────────────

Severity = Literal["error", "warn"]


class Finding(BaseModel):
    rule_id: str
    message_id: str
    severity: Severity
    file: str
    line: int
    column: int
    end_line: int
    end_column: int
    message: str
    data: dict[str, str] = Field(default_factory=dict)


class FileStatus(BaseModel):
    file: str
    status: Literal["ok", "error"] = "ok"
    error: str | None = None
    findings: int = 0


class LintReport(BaseModel):
    findings: list[Finding] = Field(default_factory=list)
    files: list[FileStatus] = Field(default_factory=list)

    @computed_field
    @property
    def error_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == "error")

    @computed_field
    @property
    def warning_count(self) -> int:
        return sum(1 for f in self.findings if f.severity == "warn")

    @computed_field
    @property
    def failed_files(self) -> int:
        return sum(1 for f in self.files if f.status == "error")
