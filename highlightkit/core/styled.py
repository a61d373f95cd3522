"""
Styled Text for HighlightKit
=============================
Engine output: the original text plus spans covering every position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Tuple

from rich.style import Style
from rich.text import Text


class Span(NamedTuple):
    """Half-open range [start, end) of code points sharing one style"""
    start: int
    end: int
    style: Style

    @property
    def is_plain(self) -> bool:
        """True if no rule styled this range"""
        return not self.style


@dataclass(frozen=True)
class StyledText:
    """
    Text with its final styling.

    Attributes:
        text: The original input text
        spans: Ordered, non-overlapping spans covering the whole text
        base_style: Style painted under every span (the theme's plain color)
    """
    text: str
    spans: Tuple[Span, ...] = ()
    base_style: Style = field(default_factory=Style.null)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def plain(self) -> str:
        """The unstyled text"""
        return self.text

    def styled_spans(self) -> Iterator[Span]:
        """Spans that carry a style override"""
        return (span for span in self.spans if not span.is_plain)

    def fragments(self) -> Iterator[Tuple[str, Style]]:
        """Yield (substring, style) pairs in text order"""
        for span in self.spans:
            yield self.text[span.start:span.end], span.style

    def to_text(self) -> Text:
        """
        Build a rich Text for rendering.

        Returns:
            Text whose base style is base_style and whose runs carry the
            span styles
        """
        text = Text(style=self.base_style)
        for fragment, style in self.fragments():
            text.append(fragment, style=style or None)
        return text

    def __rich__(self) -> Text:
        return self.to_text()


__all__ = ['Span', 'StyledText']
