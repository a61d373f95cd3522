"""
Style Resolver for HighlightKit
================================
Maps token categories to rich styles for a theme, and merges styles.
"""

from __future__ import annotations

from typing import Dict, Optional

from rich.style import Style

from .theme import Theme
from .tokens import TokenCategory


# Fixed colors for categories a theme does not parameterize
SUPPLEMENTARY_COLORS: Dict[TokenCategory, str] = {
    TokenCategory.TYPE: "#4ec9b0",
    TokenCategory.FUNCTION: "#dcdcaa",
    TokenCategory.VARIABLE: "#9cdcfe",
    TokenCategory.CONSTANT: "#4fc1ff",
    TokenCategory.OPERATOR: "#d16969",
    TokenCategory.PUNCTUATION: "#808080",
}


def style_for(category: Optional[TokenCategory], theme: Theme) -> Style:
    """
    Resolve the visual attribute for a token category.

    Args:
        category: Token category, or None for plain text
        theme: Theme to pull colors from

    Returns:
        Rich style carrying the foreground color
    """
    if category is None:
        return Style(color=theme.plain)

    color = getattr(theme, category.value, None)
    if color is None:
        color = SUPPLEMENTARY_COLORS[category]
    return Style(color=color)


def merge_styles(base: Style, overlay: Style) -> Style:
    """
    Merge two styles key by key.

    Attributes set on overlay replace those on base; attributes overlay
    leaves unset are kept from base. Neither argument is modified.
    """
    return base + overlay


__all__ = ['SUPPLEMENTARY_COLORS', 'style_for', 'merge_styles']
