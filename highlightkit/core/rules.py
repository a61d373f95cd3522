"""
Syntax Rules for HighlightKit
==============================
A rule pairs a regex pattern and its flags with an already-resolved style.
Rules carry no behavior of their own; the match engine runs them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Iterable, Optional, Pattern

from rich.style import Style

from .tokens import TokenCategory

# Configure module logger
logger = logging.getLogger(__name__)


# Flag names accepted in rule tables
REGEX_FLAGS: Dict[str, int] = {
    'IGNORECASE': re.IGNORECASE,
    'MULTILINE': re.MULTILINE,
    'DOTALL': re.DOTALL,
    'VERBOSE': re.VERBOSE,
    'ASCII': re.ASCII,
}


def parse_flags(names: Iterable[str]) -> int:
    """
    Combine flag names into an re flags value.

    Args:
        names: Flag names such as "IGNORECASE" (case-insensitive)

    Returns:
        Combined flags

    Raises:
        ValueError: If a name is not a supported flag
    """
    flags = 0
    for name in names:
        key = str(name).upper().strip()
        if key not in REGEX_FLAGS:
            raise ValueError(f"Unknown regex flag: {name}")
        flags |= REGEX_FLAGS[key]
    return flags


@lru_cache(maxsize=512)
def compile_pattern(pattern: str, flags: int = 0) -> Optional[Pattern]:
    """
    Compile a rule pattern, returning None if it is invalid.

    Results (including failures) are cached, so a broken pattern is
    reported once rather than on every highlight call.
    """
    try:
        return re.compile(pattern, flags)
    except (re.error, ValueError, TypeError, OverflowError, RecursionError) as e:
        logger.warning(f"Skipping rule with invalid pattern {pattern!r}: {e}")
        return None


@dataclass(frozen=True)
class Rule:
    """
    A highlighting rule with pattern and resolved style.

    Attributes:
        pattern: Regular expression source
        style: Style merged into every character the rule matches
        flags: re flags used when compiling the pattern
        category: Token category the style was resolved from, if any
        group: Capture group to highlight (0 for the whole match)
    """
    pattern: str
    style: Style = field(default_factory=Style.null)
    flags: int = 0
    category: Optional[TokenCategory] = None
    group: int = 0

    def compile(self) -> Optional[Pattern]:
        """Compile the pattern, or None if it is not usable"""
        compiled = compile_pattern(self.pattern, self.flags)
        if compiled is not None and not 0 <= self.group <= compiled.groups:
            logger.warning(
                f"Skipping rule {self.pattern!r}: group {self.group} "
                f"is not one of its {compiled.groups} capture group(s)"
            )
            return None
        return compiled


__all__ = ['Rule', 'REGEX_FLAGS', 'parse_flags', 'compile_pattern']
