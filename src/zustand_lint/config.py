"""Lint configuration: YAML file -> validated per-rule settings.

Format (every key optional; rules not listed keep the recommended setting)::

    rules:
      zustand-require-selector: error
      zustand-prefer-use-shallow: [warn, {shallowHookName: useShallow}]

A rule is disabled with ``off`` (or ``0``; PyYAML reads a bare ``off`` as
False, which compares equal to 0).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from zustand_lint.analyzer.models import Severity
from zustand_lint.rules import RECOMMENDED, RULES

log = logging.getLogger(__name__)

CONFIG_FILENAMES = (".zustand-lint.yaml", ".zustand-lint.yml")

_SEVERITY_ALIASES: dict[Any, str] = {
    "off": "off", 0: "off",
    "warn": "warn", "warning": "warn", 1: "warn",
    "error": "error", 2: "error",
}


class ConfigError(Exception):
    """Invalid lint configuration. Raised before any file is analyzed."""


@dataclass(frozen=True)
class RuleSetting:
    severity: Severity
    options: BaseModel


@dataclass(frozen=True)
class LintConfig:
    rules: dict[str, RuleSetting] = field(default_factory=dict)
    source: Path | None = None


def recommended_config() -> LintConfig:
    return parse_config({})


def parse_config(raw: dict[str, Any] | None, source: Path | None = None) -> LintConfig:
    """Validate a raw config mapping, starting from the recommended severities."""
    raw = raw or {}
    where = f"{source}: " if source else ""
    if not isinstance(raw, dict):
        raise ConfigError(f"{where}top level must be a mapping")
    unknown_keys = set(raw) - {"rules"}
    if unknown_keys:
        raise ConfigError(f"{where}unknown keys: {', '.join(sorted(unknown_keys))}")

    entries: dict[str, Any] = dict(RECOMMENDED)
    rules_raw = raw.get("rules") or {}
    if not isinstance(rules_raw, dict):
        raise ConfigError(f"{where}'rules' must be a mapping of rule id to setting")
    entries.update(rules_raw)

    settings: dict[str, RuleSetting] = {}
    for rule_id, entry in entries.items():
        rule = RULES.get(rule_id)
        if rule is None:
            raise ConfigError(f"{where}unknown rule '{rule_id}'")

        if isinstance(entry, list):
            if not 1 <= len(entry) <= 2:
                raise ConfigError(f"{where}{rule_id}: expected [severity] or [severity, options]")
            level, opts = entry[0], (entry[1] if len(entry) == 2 else {})
        else:
            level, opts = entry, {}

        severity = _SEVERITY_ALIASES.get(level) if isinstance(level, (str, int)) else None
        if severity is None:
            raise ConfigError(f"{where}{rule_id}: invalid severity {level!r}")
        if not isinstance(opts, dict):
            raise ConfigError(f"{where}{rule_id}: options must be a mapping")
        if severity == "off":
            continue

        try:
            options = rule.meta.options_model.model_validate(opts)
        except ValidationError as e:
            raise ConfigError(f"{where}{rule_id}: invalid options\n{e}") from e
        settings[rule_id] = RuleSetting(severity=severity, options=options)

    return LintConfig(rules=settings, source=source)


def find_config(start: Path) -> Path | None:
    for name in CONFIG_FILENAMES:
        candidate = start / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> LintConfig:
    """Load ``path``, or the config file found in ``cwd``, or the recommended config."""
    if path is None:
        path = find_config(cwd or Path.cwd())
        if path is None:
            log.debug("No config file found, using recommended settings")
            return recommended_config()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"{path}: cannot read config ({e})") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML\n{e}") from e

    config = parse_config(raw, source=path)
    log.info("Loaded config from %s: %d rules enabled", path, len(config.rules))
    return config
