"""
Token Categories and Languages for HighlightKit
================================================
Closed enumerations used as lookup keys by the registry and style resolver.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union


class TokenCategory(Enum):
    """Semantic roles a span of source text can be classified under"""
    KEYWORD = "keyword"
    TYPE = "type"
    FUNCTION = "function"
    VARIABLE = "variable"
    CONSTANT = "constant"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"


class Language(Enum):
    """Languages with (potential) rule tables"""
    SWIFT = "swift"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    CSHARP = "csharp"
    JAVA = "java"
    JSON = "json"
    HTML = "html"
    CSS = "css"
    CPP = "cpp"
    C = "c"
    GO = "go"
    KOTLIN = "kotlin"
    RUBY = "ruby"
    PHP = "php"
    BASH = "bash"
    SQL = "sql"
    PLAINTEXT = "text"


# Language aliases mapping
LANGUAGE_ALIASES: Dict[str, Language] = {
    # Python
    'py': Language.PYTHON,
    'python3': Language.PYTHON,
    'py3': Language.PYTHON,
    'pyw': Language.PYTHON,

    # JavaScript/TypeScript
    'js': Language.JAVASCRIPT,
    'mjs': Language.JAVASCRIPT,
    'cjs': Language.JAVASCRIPT,
    'jsx': Language.JAVASCRIPT,
    'node': Language.JAVASCRIPT,
    'ts': Language.TYPESCRIPT,
    'tsx': Language.TYPESCRIPT,

    # Shell
    'sh': Language.BASH,
    'shell': Language.BASH,
    'zsh': Language.BASH,

    # Web
    'htm': Language.HTML,
    'xhtml': Language.HTML,

    # Systems
    'c++': Language.CPP,
    'cxx': Language.CPP,
    'hpp': Language.CPP,
    'h': Language.C,
    'cs': Language.CSHARP,
    'c#': Language.CSHARP,
    'kt': Language.KOTLIN,
    'kts': Language.KOTLIN,
    'rb': Language.RUBY,
    'golang': Language.GO,

    # Other
    'jsonc': Language.JSON,
    'plaintext': Language.PLAINTEXT,
    'plain': Language.PLAINTEXT,
    'txt': Language.PLAINTEXT,
}


def normalize_language(language: Optional[Union[str, Language]]) -> Optional[Language]:
    """
    Normalize a language identifier.

    Args:
        language: Language member, enum value ("python") or alias ("py")

    Returns:
        Matching Language, or None if the name is not recognised
    """
    if isinstance(language, Language):
        return language

    if not language:
        return None

    name = language.lower().strip()

    if name in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[name]

    try:
        return Language(name)
    except ValueError:
        return None


__all__ = [
    'TokenCategory',
    'Language',
    'LANGUAGE_ALIASES',
    'normalize_language',
]
