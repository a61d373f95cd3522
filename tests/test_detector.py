"""Tests for heuristic language detection."""

import pytest

from highlightkit.core import (
    DETECTION_SIGNALS,
    Language,
    LanguageDetector,
    detect_language,
    language_for_filename,
    normalize_language,
)


class TestDetectLanguage:
    """Tests for the default ordered signal list."""

    def test_go_package_main(self):
        """Go wins over Swift's generic 'func ' signal."""
        assert detect_language("package main\nfunc main() {}") == Language.GO

    def test_empty_text_is_unknown(self):
        assert detect_language("") is None

    def test_no_signal_is_unknown(self):
        assert detect_language("hello world") is None

    def test_case_insensitive(self):
        assert detect_language("SELECT name FROM users") == Language.SQL

    @pytest.mark.parametrize("code,expected", [
        ("<?php echo 'hi'; ?>", Language.PHP),
        ("<!DOCTYPE html>\n<html></html>", Language.HTML),
        ("#!/bin/bash\necho hi", Language.BASH),
        ("import SwiftUI\nstruct ContentView {}", Language.SWIFT),
        ('using System;\nclass Program {\n    static void Main() {\n        Console.WriteLine("Hello");\n    }\n}', Language.CSHARP),
        ("public class Main { }", Language.JAVA),
        ("fun main() { println(1) }", Language.KOTLIN),
        ("#include <iostream>\nint main() { std::cout << 1; }", Language.CPP),
        ("#include <stdio.h>\nint main(void) { return 0; }", Language.C),
        ("interface User { name: string }", Language.TYPESCRIPT),
        ("const add = (a, b) => a + b;", Language.JAVASCRIPT),
        ("puts 'hello'", Language.RUBY),
        ("import os\n\ndef main():\n    print('hi')\n", Language.PYTHON),
        ("body { color: red; }", Language.CSS),
        ('{"name": "value"}', Language.JSON),
    ])
    def test_typical_snippets(self, code, expected):
        assert detect_language(code) == expected

    def test_earlier_entry_wins(self):
        """PHP is listed before HTML, so a PHP file with markup is PHP."""
        assert detect_language("<?php ?>\n<html><body></body></html>") == Language.PHP

    @pytest.mark.parametrize("code", [
        "#include <iostream>\nusing namespace std;\nint main() { return 0; }",
        "using namespace std;\nint x = 0;",
    ])
    def test_cpp_namespace_is_not_csharp(self, code):
        assert detect_language(code) == Language.CPP

    def test_csharp_namespace_system(self):
        assert detect_language("namespace System.Text {\n}") == Language.CSHARP

    def test_substring_not_word_matching(self):
        """Signals match inside other words."""
        assert detect_language("undef foo") == Language.PYTHON

    def test_signals_are_lower_case(self):
        """Default signals can match lower-cased input."""
        for _, signals in DETECTION_SIGNALS:
            for signal in signals:
                assert signal == signal.lower()


class TestLanguageDetector:
    """Tests for custom ordered detectors."""

    def test_first_matching_entry_wins(self):
        """Order, not match count, decides."""
        detector = LanguageDetector([
            (Language.PYTHON, ["def "]),
            (Language.RUBY, ["def ", "end", "puts"]),
        ])
        assert detector.detect("def greet\n  puts 'hi'\nend") == Language.PYTHON

    def test_reordering_changes_result(self):
        detector = LanguageDetector([
            (Language.RUBY, ["def ", "end", "puts"]),
            (Language.PYTHON, ["def "]),
        ])
        assert detector.detect("def greet\n  puts 'hi'\nend") == Language.RUBY

    def test_signals_are_lowered(self):
        detector = LanguageDetector([(Language.SQL, ["SELECT "])])
        assert detector.detect("select 1") == Language.SQL

    def test_empty_list_never_matches(self):
        assert LanguageDetector([]).detect("anything") is None

    def test_deterministic(self):
        detector = LanguageDetector()
        code = "package main\nimport \"fmt\""
        assert detector.detect(code) == detector.detect(code) == Language.GO


class TestLanguageForFilename:
    """Tests for filename based detection."""

    @pytest.mark.parametrize("filename,expected", [
        ("main.py", Language.PYTHON),
        ("src/App.TSX", Language.TYPESCRIPT),
        ("lib.rs.h", Language.C),
        ("query.sql", Language.SQL),
        ("/home/me/.bashrc", Language.BASH),
        ("Gemfile", Language.RUBY),
    ])
    def test_known_names(self, filename, expected):
        assert language_for_filename(filename) == expected

    def test_pygments_fallback(self):
        """Names only pygments knows are mapped through lexer aliases."""
        assert language_for_filename("SConstruct") == Language.PYTHON

    def test_unsupported(self):
        assert language_for_filename("archive.unknownext") is None


class TestNormalizeLanguage:
    """Tests for language name normalization."""

    @pytest.mark.parametrize("name,expected", [
        ("python", Language.PYTHON),
        ("PY", Language.PYTHON),
        (" js ", Language.JAVASCRIPT),
        ("c++", Language.CPP),
        ("golang", Language.GO),
        ("text", Language.PLAINTEXT),
        (Language.SQL, Language.SQL),
    ])
    def test_aliases(self, name, expected):
        assert normalize_language(name) == expected

    @pytest.mark.parametrize("name", ["", None, "brainfuck"])
    def test_unknown(self, name):
        assert normalize_language(name) is None
