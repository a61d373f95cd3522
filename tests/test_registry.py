"""Tests for rule tables and the rule registry."""

import logging
import re

import pytest

from highlightkit.core import (
    DARK_THEME,
    LIGHT_THEME,
    Language,
    RuleRegistry,
    RuleSpec,
    TokenCategory,
    load_rule_tables,
    parse_flags,
    parse_rule_tables,
    style_for,
)


class TestDefaultRegistry:
    """Tests for the packaged rule tables."""

    def test_every_language_but_plaintext_has_rules(self, registry):
        for language in Language:
            if language is Language.PLAINTEXT:
                assert language not in registry
            else:
                assert registry.specs_for(language), language

    @pytest.mark.parametrize("theme", [LIGHT_THEME, DARK_THEME])
    def test_every_builtin_pattern_compiles(self, registry, theme):
        for language in registry.languages():
            for rule in registry.rules_for(language, theme):
                assert rule.compile() is not None, (language, rule.pattern)

    def test_unsupported_language_is_empty(self, registry, light_theme):
        assert registry.rules_for(Language.PLAINTEXT, light_theme) == ()
        assert registry.rules_for(None, light_theme) == ()

    def test_rules_are_resolved_against_theme(self, registry, dark_theme):
        rules = registry.rules_for(Language.PYTHON, dark_theme)
        for rule in rules:
            assert rule.style == style_for(rule.category, dark_theme)

    def test_resolution_is_cached(self, registry, light_theme):
        first = registry.rules_for(Language.GO, light_theme)
        assert registry.rules_for(Language.GO, light_theme) is first

    def test_themes_resolve_separately(self, registry):
        light = registry.rules_for(Language.SQL, LIGHT_THEME)
        dark = registry.rules_for(Language.SQL, DARK_THEME)
        assert [r.pattern for r in light] == [r.pattern for r in dark]
        assert [r.style for r in light] != [r.style for r in dark]

    def test_strings_and_comments_come_last(self, registry):
        """Comments are declared after keywords so they override them."""
        categories = [spec.category for spec in registry.specs_for(Language.PYTHON)]
        assert categories.index(TokenCategory.COMMENT) > categories.index(TokenCategory.KEYWORD)
        assert categories.index(TokenCategory.STRING) > categories.index(TokenCategory.NUMBER)


class TestParseRuleTables:
    """Tests for turning raw YAML data into rule tables."""

    def test_order_is_preserved(self):
        tables = parse_rule_tables({
            "go": [
                {"category": "keyword", "pattern": "func"},
                {"category": "comment", "pattern": "//.*"},
                {"category": "string", "pattern": '"[^"]*"'},
            ]
        })
        assert [s.pattern for s in tables[Language.GO]] == ["func", "//.*", '"[^"]*"']

    def test_flags_and_group(self):
        tables = parse_rule_tables({
            "sql": [{"category": "keyword", "pattern": "(select)", "flags": ["ignorecase"], "group": 1}]
        })
        spec = tables[Language.SQL][0]
        assert spec.flags == re.IGNORECASE
        assert spec.group == 1

    def test_single_flag_string(self):
        tables = parse_rule_tables({"sql": [{"category": "keyword", "pattern": "x", "flags": "MULTILINE"}]})
        assert tables[Language.SQL][0].flags == re.MULTILINE

    def test_aliases_are_accepted(self):
        tables = parse_rule_tables({"py": [{"category": "comment", "pattern": "#.*"}]})
        assert Language.PYTHON in tables

    @pytest.mark.parametrize("entry", [
        {"category": "keyword"},
        {"category": "keyword", "pattern": ""},
        {"category": "bogus", "pattern": "x"},
        {"pattern": "x"},
        {"category": "keyword", "pattern": "x", "flags": ["NOPE"]},
        {"category": "keyword", "pattern": "x", "group": -1},
        {"category": "keyword", "pattern": "x", "group": "one"},
        {"category": "keyword", "pattern": "x", "flags": 2},
        {"category": "keyword", "pattern": "x", "flags": {"IGNORECASE": True}},
        "not a mapping",
    ])
    def test_malformed_entries_are_dropped(self, entry, caplog):
        data = {"go": [entry, {"category": "number", "pattern": r"\d+"}]}
        with caplog.at_level(logging.WARNING, logger="highlightkit"):
            tables = parse_rule_tables(data, source="test")
        assert [s.pattern for s in tables[Language.GO]] == [r"\d+"]
        assert "Invalid rule #0" in caplog.text

    def test_unknown_language_is_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="highlightkit"):
            tables = parse_rule_tables({"cobol": [{"category": "keyword", "pattern": "MOVE"}]})
        assert tables == {}
        assert "Unknown language 'cobol'" in caplog.text

    def test_non_list_table_is_dropped(self):
        assert parse_rule_tables({"go": {"category": "keyword"}}) == {}

    def test_non_mapping_data(self, caplog):
        with caplog.at_level(logging.ERROR, logger="highlightkit"):
            assert parse_rule_tables(["go"]) == {}
        assert "must be a mapping" in caplog.text

    def test_invalid_pattern_is_kept(self):
        """Pattern validity is checked at match time, not load time."""
        tables = parse_rule_tables({"go": [{"category": "keyword", "pattern": "(["}]})
        assert tables[Language.GO][0].pattern == "(["


class TestLoadRuleTables:
    """Tests for reading rule files."""

    def test_from_yaml(self, tmp_path, light_theme):
        path = tmp_path / "rules.yaml"
        path.write_text(
            "ruby:\n"
            "  - category: comment\n"
            "    pattern: '#.*'\n"
        )
        registry = RuleRegistry.from_yaml(path)
        assert registry.languages() == [Language.RUBY]
        (rule,) = registry.rules_for(Language.RUBY, light_theme)
        assert rule.category == TokenCategory.COMMENT

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR, logger="highlightkit"):
            assert load_rule_tables(tmp_path / "missing.yaml") == {}
        assert "Failed to load rule tables" in caplog.text

    def test_scalar_flags_entry_is_dropped(self, tmp_path, light_theme):
        path = tmp_path / "rules.yaml"
        path.write_text(
            "python:\n"
            "  - category: keyword\n"
            "    pattern: 'def'\n"
            "    flags: 2\n"
            "  - category: comment\n"
            "    pattern: '#.*'\n"
        )
        registry = RuleRegistry.from_yaml(path)
        (rule,) = registry.rules_for(Language.PYTHON, light_theme)
        assert rule.category == TokenCategory.COMMENT

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("go: [unclosed\n")
        assert load_rule_tables(path) == {}


class TestRegistryExtend:
    """Tests for layering tables."""

    def test_extend_replaces_table(self, registry, light_theme):
        custom = {Language.GO: [RuleSpec(pattern="TODO", category=TokenCategory.COMMENT)]}
        extended = registry.extend(custom)

        assert [r.pattern for r in extended.rules_for(Language.GO, light_theme)] == ["TODO"]
        assert len(registry.rules_for(Language.GO, light_theme)) > 1
        assert extended.specs_for(Language.PYTHON) == registry.specs_for(Language.PYTHON)

    def test_extend_adds_language(self, light_theme):
        extended = RuleRegistry().extend({Language.PLAINTEXT: [RuleSpec("x", TokenCategory.KEYWORD)]})
        assert len(extended.rules_for(Language.PLAINTEXT, light_theme)) == 1
        assert len(extended) == 1


class TestParseFlags:
    """Tests for flag name parsing."""

    def test_combines(self):
        assert parse_flags(["IGNORECASE", "dotall"]) == re.IGNORECASE | re.DOTALL

    def test_empty(self):
        assert parse_flags([]) == 0

    def test_unknown(self):
        with pytest.raises(ValueError):
            parse_flags(["GLOBAL"])
