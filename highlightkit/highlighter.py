"""
Highlighting Facade for HighlightKit
=====================================
Detector -> registry -> match engine in a single call. This is the entry
point rendering code uses.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from .core.detector import detect_language
from .core.engine import apply_rules
from .core.registry import RuleRegistry, get_default_registry
from .core.styled import StyledText
from .core.styles import style_for
from .core.theme import Theme
from .core.tokens import Language, normalize_language

# Configure module logger
logger = logging.getLogger(__name__)


# Language used when detection finds nothing
DEFAULT_LANGUAGE = Language.PLAINTEXT


def resolve_language(
    text: str,
    language: Optional[Union[str, Language]] = None,
    default_language: Language = DEFAULT_LANGUAGE
) -> Language:
    """
    Decide which language to highlight text as.

    Args:
        text: Source text
        language: Explicit language (member or name); skips detection
        default_language: Fallback when detection returns None

    Returns:
        The language to use
    """
    if language is not None:
        resolved = normalize_language(language)
        if resolved is not None:
            return resolved
        logger.warning(f"Unknown language '{language}', falling back to detection")

    detected = detect_language(text)
    if detected is None:
        logger.debug(f"No language detected, using default '{default_language.value}'")
        return default_language

    logger.debug(f"Detected language: {detected.value}")
    return detected


def highlight(
    text: str,
    theme: Theme,
    language: Optional[Union[str, Language]] = None,
    default_language: Language = DEFAULT_LANGUAGE,
    registry: Optional[RuleRegistry] = None
) -> StyledText:
    """
    Highlight source text.

    Args:
        text: Source text
        theme: Theme to style with
        language: Explicit language; detected from text if omitted
        default_language: Language used when detection finds nothing
        registry: Rule registry (defaults to the packaged tables)

    Returns:
        StyledText with spans covering the text and the theme's plain
        color as its base style
    """
    if registry is None:
        registry = get_default_registry()
    resolved = resolve_language(text, language, default_language)
    rules = registry.rules_for(resolved, theme)
    return apply_rules(text, rules, base_style=style_for(None, theme))


class Highlighter:
    """
    Highlighter bound to one language and theme.

    The rule set is resolved once at construction and reused for every
    call.

    Usage:
        highlighter = Highlighter(Language.PYTHON, theme_for("dark"))
        styled = highlighter.highlight("def f(): pass")
    """

    def __init__(
        self,
        language: Union[str, Language],
        theme: Theme,
        registry: Optional[RuleRegistry] = None
    ):
        resolved = normalize_language(language)
        if resolved is None:
            logger.warning(f"Unknown language '{language}', highlighting as plain text")
            resolved = Language.PLAINTEXT

        if registry is None:
            registry = get_default_registry()

        self.language = resolved
        self.theme = theme
        self.rules = registry.rules_for(resolved, theme)
        self._base_style = style_for(None, theme)

    def highlight(self, code: str) -> StyledText:
        """Highlight code with the bound rule set"""
        return apply_rules(code, self.rules, base_style=self._base_style)

    def __repr__(self):
        return f"Highlighter({self.language.value}, theme={self.theme.name!r}, {len(self.rules)} rules)"


__all__ = [
    'DEFAULT_LANGUAGE',
    'resolve_language',
    'highlight',
    'Highlighter',
]
