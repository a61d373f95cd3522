"""
Code Block Rendering for HighlightKit
======================================
Wrap StyledText in rich renderables for terminal display.
"""

from __future__ import annotations

from typing import Optional

from rich.box import ROUNDED
from rich.panel import Panel
from rich.text import Text

from .core.styled import StyledText


def render_lines(
    styled: StyledText,
    line_numbers: bool = False,
    start_line: int = 1
) -> Text:
    """
    Build a rich Text for styled code, optionally with a line number gutter.

    Args:
        styled: Highlighted text
        line_numbers: Whether to prefix each line with its number
        start_line: Number of the first line

    Returns:
        Rich Text ready for printing
    """
    text = styled.to_text()
    if not line_numbers:
        return text

    lines = text.split("\n", allow_blank=True)
    width = len(str(start_line + len(lines) - 1))

    result = Text(style=styled.base_style)
    for offset, line in enumerate(lines):
        if offset:
            result.append("\n")
        result.append(f"{start_line + offset:>{width}} ", style="dim")
        result.append_text(line)
    return result


def format_code(
    styled: StyledText,
    title: Optional[str] = None,
    line_numbers: bool = False,
    start_line: int = 1,
    border_style: str = "cyan"
) -> Panel:
    """
    Format highlighted code in a panel.

    Args:
        styled: Highlighted text
        title: Optional panel title
        line_numbers: Whether to show line numbers
        start_line: Starting line number
        border_style: Panel border style

    Returns:
        Rich Panel with highlighted code
    """
    return Panel(
        render_lines(styled, line_numbers=line_numbers, start_line=start_line),
        title=title,
        border_style=border_style,
        box=ROUNDED,
        padding=(0, 1)
    )


__all__ = ['render_lines', 'format_code']
