"""Tests for config loading and option validation."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from zustand_lint.analyzer.models import PreferUseShallowOptions, RequireSelectorOptions
from zustand_lint.config import ConfigError, find_config, load_config, parse_config, recommended_config


class TestOptionDefaults:
    def test_require_selector_defaults(self):
        opts = RequireSelectorOptions()
        assert opts.hooks == frozenset({"useStore"})
        assert opts.forbid_identity_selector is True
        assert opts.forbid_direct_slice is False
        assert opts.store_factories == frozenset({"create", "createWithEqualityFn"})

    def test_prefer_use_shallow_defaults(self):
        opts = PreferUseShallowOptions()
        assert opts.hooks == frozenset({"useStore"})
        assert opts.shallow_hook_name == "useShallow"
        assert opts.check_object_literal is True
        assert opts.check_array_literal is True

    def test_camel_case_keys(self):
        opts = RequireSelectorOptions.model_validate({"forbidDirectSlice": True, "hooks": ["useA", "useB"]})
        assert opts.forbid_direct_slice is True
        assert opts.hooks == frozenset({"useA", "useB"})

    def test_options_are_immutable(self):
        opts = PreferUseShallowOptions()
        with pytest.raises(Exception):
            opts.shallow_hook_name = "other"

    def test_schema_uses_camel_case(self):
        schema = PreferUseShallowOptions.model_json_schema(by_alias=True)
        assert set(schema["properties"]) == {
            "hooks", "storeFactories", "shallowHookName", "checkObjectLiteral", "checkArrayLiteral",
        }
        assert schema["additionalProperties"] is False


class TestParseConfig:
    def test_recommended(self):
        config = recommended_config()
        assert config.rules["zustand-require-selector"].severity == "error"
        assert config.rules["zustand-prefer-use-shallow"].severity == "warn"

    def test_override_severity_and_options(self):
        config = parse_config({"rules": {
            "zustand-prefer-use-shallow": ["error", {"shallowHookName": "useShallowCompare"}],
        }})
        setting = config.rules["zustand-prefer-use-shallow"]
        assert setting.severity == "error"
        assert setting.options.shallow_hook_name == "useShallowCompare"
        # untouched rules keep the recommended setting
        assert config.rules["zustand-require-selector"].severity == "error"

    def test_numeric_severities(self):
        config = parse_config({"rules": {"zustand-require-selector": 1, "zustand-prefer-use-shallow": 0}})
        assert config.rules["zustand-require-selector"].severity == "warn"
        assert "zustand-prefer-use-shallow" not in config.rules

    def test_yaml_false_means_off(self):
        config = parse_config({"rules": {"zustand-require-selector": False}})
        assert "zustand-require-selector" not in config.rules

    @pytest.mark.parametrize("raw, fragment", [
        ({"rules": {"zustand-nope": "error"}}, "unknown rule"),
        ({"rules": {"zustand-require-selector": "fatal"}}, "invalid severity"),
        ({"rules": {"zustand-require-selector": ["error", {"bogus": True}]}}, "invalid options"),
        ({"rules": {"zustand-require-selector": ["error", {"forbidDirectSlice": "maybe"}]}}, "invalid options"),
        ({"rules": {"zustand-prefer-use-shallow": ["warn", {"shallowHookName": ""}]}}, "invalid options"),
        ({"rules": {"zustand-require-selector": ["error", "x"]}}, "options must be a mapping"),
        ({"rules": {"zustand-require-selector": []}}, "expected [severity]"),
        ({"rules": ["zustand-require-selector"]}, "'rules' must be a mapping"),
        ({"plugins": []}, "unknown keys"),
    ])
    def test_errors(self, raw, fragment):
        with pytest.raises(ConfigError) as exc:
            parse_config(raw)
        assert fragment in str(exc.value)


class TestLoadConfig:
    def test_no_file_gives_recommended(self, tmp_path: Path):
        config = load_config(cwd=tmp_path)
        assert set(config.rules) == {"zustand-require-selector", "zustand-prefer-use-shallow"}
        assert config.source is None

    def test_discovers_file(self, tmp_path: Path):
        f = tmp_path / ".zustand-lint.yaml"
        f.write_text(textwrap.dedent("""
            rules:
              zustand-prefer-use-shallow: off
              zustand-require-selector: [warn, {forbidDirectSlice: true, hooks: [useStore, useCart]}]
        """))
        assert find_config(tmp_path) == f
        config = load_config(cwd=tmp_path)
        assert config.source == f
        assert set(config.rules) == {"zustand-require-selector"}
        setting = config.rules["zustand-require-selector"]
        assert setting.severity == "warn"
        assert setting.options.forbid_direct_slice is True
        assert setting.options.hooks == frozenset({"useStore", "useCart"})

    def test_invalid_yaml(self, tmp_path: Path):
        f = tmp_path / "lint.yaml"
        f.write_text("rules: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(f)

    def test_empty_file_is_recommended(self, tmp_path: Path):
        f = tmp_path / "lint.yaml"
        f.write_text("")
        config = load_config(f)
        assert set(config.rules) == {"zustand-require-selector", "zustand-prefer-use-shallow"}
