"""HighlightKit - Lightweight regex-based syntax highlighting with language detection"""

__version__ = "1.0.0"

from .core import (
    Language,
    TokenCategory,
    DisplayMode,
    Theme,
    DARK_THEME,
    LIGHT_THEME,
    theme_for,
    Rule,
    RuleRegistry,
    Span,
    StyledText,
    apply_rules,
    detect_language,
    language_for_filename,
    normalize_language,
    style_for,
)
from .highlighter import highlight, Highlighter, DEFAULT_LANGUAGE
from .render import format_code

__all__ = [
    "Language",
    "TokenCategory",
    "DisplayMode",
    "Theme",
    "DARK_THEME",
    "LIGHT_THEME",
    "theme_for",
    "Rule",
    "RuleRegistry",
    "Span",
    "StyledText",
    "apply_rules",
    "detect_language",
    "language_for_filename",
    "normalize_language",
    "style_for",
    "highlight",
    "Highlighter",
    "DEFAULT_LANGUAGE",
    "format_code",
]
