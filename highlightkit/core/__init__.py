"""
HighlightKit Core Package
==========================
Language detection, rule registry, style resolution and the match engine.
"""

from .tokens import (
    TokenCategory,
    Language,
    LANGUAGE_ALIASES,
    normalize_language,
)

from .theme import (
    DisplayMode,
    Theme,
    DARK_THEME,
    LIGHT_THEME,
    BUILTIN_THEMES,
    theme_for,
)

from .styles import (
    SUPPLEMENTARY_COLORS,
    style_for,
    merge_styles,
)

from .rules import (
    Rule,
    parse_flags,
    compile_pattern,
)

from .styled import (
    Span,
    StyledText,
)

from .engine import (
    apply_rules,
    coalesce,
)

from .registry import (
    RuleSpec,
    RuleRegistry,
    parse_rule_tables,
    load_rule_tables,
    get_default_registry,
    rules_for,
)

from .detector import (
    DETECTION_SIGNALS,
    LanguageDetector,
    detect_language,
    language_for_filename,
)

__all__ = [
    # Enumerations
    'TokenCategory',
    'Language',
    'LANGUAGE_ALIASES',
    'normalize_language',

    # Themes and styles
    'DisplayMode',
    'Theme',
    'DARK_THEME',
    'LIGHT_THEME',
    'BUILTIN_THEMES',
    'theme_for',
    'SUPPLEMENTARY_COLORS',
    'style_for',
    'merge_styles',

    # Rules and engine
    'Rule',
    'parse_flags',
    'compile_pattern',
    'Span',
    'StyledText',
    'apply_rules',
    'coalesce',

    # Registry
    'RuleSpec',
    'RuleRegistry',
    'parse_rule_tables',
    'load_rule_tables',
    'get_default_registry',
    'rules_for',

    # Detection
    'DETECTION_SIGNALS',
    'LanguageDetector',
    'detect_language',
    'language_for_filename',
]
