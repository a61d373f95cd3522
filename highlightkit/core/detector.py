"""
Language Detector for HighlightKit
===================================
Best-effort language guess from raw text using ordered substring signals.

Detection walks DETECTION_SIGNALS in order and returns the first language
with any signal contained in the lower-cased text. The first hit wins even
if a later language matches more signals, so generic signals belong near
the end of the list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from .tokens import Language, normalize_language

# Configure module logger
logger = logging.getLogger(__name__)


# Ordered (language, signals) checks; signals are lower-case substrings
DETECTION_SIGNALS: List[Tuple[Language, List[str]]] = [
    (Language.PHP, ["<?php"]),
    (Language.HTML, ["<!doctype html", "<html", "<head>", "<body", "<div", "<span"]),
    (Language.BASH, ["#!/bin/bash", "#!/bin/sh", "#!/usr/bin/env bash", "#!/usr/bin/env sh"]),
    (Language.GO, ["package main", "func main(", "fmt.print", ":= "]),
    (Language.SWIFT, ["import swiftui", "import foundation", "import uikit", "guard let "]),
    (Language.CSHARP, ["using system", "namespace system", "console.write"]),
    (Language.JAVA, ["public class", "system.out.println", "static void", "import java."]),
    (Language.KOTLIN, ["fun main(", "fun ", "\nval ", "data class "]),
    (Language.CPP, ["#include <iostream>", "using namespace std", "std::", "cout <<", "template <", "nullptr"]),
    (Language.C, ["#include", "int main(", "printf(", "malloc("]),
    (Language.TYPESCRIPT, ["interface ", ": string", ": number", ": boolean"]),
    (Language.JAVASCRIPT, ["function ", "const ", "console.log", "=>", "let "]),
    (Language.SWIFT, ["func ", "var "]),
    (Language.RUBY, ["puts ", "elsif ", "attr_accessor", "require '", " do |"]),
    (Language.PYTHON, ["def ", "import ", "elif ", "print(", "self."]),
    (Language.SQL, ["select ", "insert into", "create table", "delete from", "update "]),
    (Language.CSS, ["color:", "background:", "font-family:", "margin:", "padding:"]),
    (Language.BASH, ["echo ", "fi\n", ";;", "$("]),
    (Language.JSON, ['":', '{"', '["']),
]

# Extension to language mapping
EXTENSION_LANGUAGES: Dict[str, Language] = {
    '.swift': Language.SWIFT,
    '.py': Language.PYTHON,
    '.pyw': Language.PYTHON,
    '.pyi': Language.PYTHON,
    '.js': Language.JAVASCRIPT,
    '.mjs': Language.JAVASCRIPT,
    '.cjs': Language.JAVASCRIPT,
    '.jsx': Language.JAVASCRIPT,
    '.ts': Language.TYPESCRIPT,
    '.tsx': Language.TYPESCRIPT,
    '.cs': Language.CSHARP,
    '.java': Language.JAVA,
    '.json': Language.JSON,
    '.html': Language.HTML,
    '.htm': Language.HTML,
    '.css': Language.CSS,
    '.cpp': Language.CPP,
    '.cxx': Language.CPP,
    '.cc': Language.CPP,
    '.hpp': Language.CPP,
    '.hxx': Language.CPP,
    '.c': Language.C,
    '.h': Language.C,
    '.go': Language.GO,
    '.kt': Language.KOTLIN,
    '.kts': Language.KOTLIN,
    '.rb': Language.RUBY,
    '.php': Language.PHP,
    '.sh': Language.BASH,
    '.bash': Language.BASH,
    '.zsh': Language.BASH,
    '.sql': Language.SQL,
    '.txt': Language.PLAINTEXT,
}

# Well-known file names without a telling extension
FILENAME_LANGUAGES: Dict[str, Language] = {
    '.bashrc': Language.BASH,
    '.zshrc': Language.BASH,
    '.bash_profile': Language.BASH,
    '.profile': Language.BASH,
    'gemfile': Language.RUBY,
    'rakefile': Language.RUBY,
}


class LanguageDetector:
    """
    Ordered substring-signal language detector.

    Usage:
        detector = LanguageDetector([(Language.GO, ["package main"])])
        detector.detect("package main")  # Language.GO
    """

    def __init__(self, checks: Optional[Sequence[Tuple[Language, Sequence[str]]]] = None):
        """
        Initialize the detector.

        Args:
            checks: Ordered (language, signals) pairs; defaults to
                DETECTION_SIGNALS. Signals are lower-cased once here.
        """
        source = DETECTION_SIGNALS if checks is None else checks
        self.checks: Tuple[Tuple[Language, Tuple[str, ...]], ...] = tuple(
            (language, tuple(signal.lower() for signal in signals))
            for language, signals in source
        )

    def detect(self, text: str) -> Optional[Language]:
        """
        Guess the language of text.

        Args:
            text: Raw source text

        Returns:
            Language of the first entry with a signal in text, or None
        """
        lowered = text.lower()

        for language, signals in self.checks:
            if any(signal in lowered for signal in signals):
                return language

        return None


_DEFAULT_DETECTOR = LanguageDetector()


def detect_language(text: str) -> Optional[Language]:
    """
    Detect the language of text with the default signal list.

    Args:
        text: Raw source text

    Returns:
        Detected Language, or None when no signal matches
    """
    return _DEFAULT_DETECTOR.detect(text)


def language_for_filename(filename: str) -> Optional[Language]:
    """
    Map a file name to a Language.

    Tries the extension table, then well-known names, then asks pygments
    for a lexer and maps its aliases.

    Args:
        filename: File name or path

    Returns:
        Language, or None if the file type is not supported
    """
    path = Path(filename)

    ext = path.suffix.lower()
    if ext in EXTENSION_LANGUAGES:
        return EXTENSION_LANGUAGES[ext]

    name = path.name.lower()
    if name in FILENAME_LANGUAGES:
        return FILENAME_LANGUAGES[name]

    try:
        lexer = get_lexer_for_filename(path.name)
    except ClassNotFound:
        return None

    for alias in lexer.aliases:
        language = normalize_language(alias)
        if language is not None:
            logger.debug(f"Mapped {path.name} to {language.value} via pygments alias '{alias}'")
            return language

    return None


__all__ = [
    'DETECTION_SIGNALS',
    'EXTENSION_LANGUAGES',
    'FILENAME_LANGUAGES',
    'LanguageDetector',
    'detect_language',
    'language_for_filename',
]
