"""
Match Engine for HighlightKit
==============================
Runs an ordered list of rules over the original text and merges their
styles per character. Later rules win on overlapping characters for the
attributes they set; attributes they leave unset survive from earlier rules.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from rich.style import Style

from .rules import Rule
from .styled import Span, StyledText
from .styles import merge_styles

# Configure module logger
logger = logging.getLogger(__name__)


def apply_rules(
    text: str,
    rules: Sequence[Rule],
    base_style: Style = Style.null()
) -> StyledText:
    """
    Apply rules to text in priority (declaration) order.

    Every rule is matched against the original text, never against an
    intermediate result. Rules whose pattern cannot be compiled are skipped.

    Args:
        text: Source text
        rules: Ordered rules; position is priority
        base_style: Style to record as the StyledText base (e.g. plain color)

    Returns:
        StyledText whose spans cover the text exactly
    """
    surface: List[Style] = [Style.null()] * len(text)

    for rule in rules:
        regex = rule.compile()
        if regex is None:
            continue

        for match in regex.finditer(text):
            start, end = match.span(rule.group)
            # Group did not take part in this match
            if start < 0:
                continue
            for i in range(start, end):
                surface[i] = merge_styles(surface[i], rule.style)

    spans = coalesce(surface)
    logger.debug(f"Applied {len(rules)} rule(s) to {len(text)} chars: {len(spans)} span(s)")
    return StyledText(text=text, spans=spans, base_style=base_style)


def coalesce(surface: Sequence[Style]) -> tuple:
    """
    Collapse per-character styles into maximal runs.

    Args:
        surface: One style per character

    Returns:
        Tuple of Span covering range(len(surface))
    """
    spans: List[Span] = []
    start = 0
    for i in range(1, len(surface) + 1):
        if i == len(surface) or surface[i] != surface[start]:
            spans.append(Span(start, i, surface[start]))
            start = i
    return tuple(spans)


__all__ = ['apply_rules', 'coalesce']
