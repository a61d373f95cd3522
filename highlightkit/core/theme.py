"""
Syntax Themes for HighlightKit
===============================
Fixed palettes of rich color strings, resolved for a display mode.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Union

from rich.color import Color, ColorParseError


class DisplayMode(Enum):
    """Display mode signal owned by the rendering side"""
    LIGHT = "light"
    DARK = "dark"


# Optional per-category colors a theme may parameterize
OPTIONAL_COLOR_FIELDS = (
    "type",
    "function",
    "variable",
    "constant",
    "operator",
    "punctuation",
)


@dataclass(frozen=True)
class Theme:
    """
    Immutable syntax palette.

    Attributes:
        keyword: Color for keywords
        string: Color for string literals
        comment: Color for comments
        number: Color for numeric literals
        plain: Color for text no rule touches
        name: Display name of the theme
        type..punctuation: Optional overrides; the style resolver falls back
            to fixed supplementary colors when these are unset

    Colors are anything rich can parse ("blue", "#ff8800", "color(208)").
    """
    keyword: str
    string: str
    comment: str
    number: str
    plain: str = "default"
    name: str = "custom"
    type: Optional[str] = None
    function: Optional[str] = None
    variable: Optional[str] = None
    constant: Optional[str] = None
    operator: Optional[str] = None
    punctuation: Optional[str] = None

    def __post_init__(self):
        for f in fields(self):
            if f.name == "name":
                continue
            value = getattr(self, f.name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"Color for '{f.name}' in theme '{self.name}' must be a string, got {value!r}")
            try:
                Color.parse(value)
            except ColorParseError as e:
                raise ValueError(f"Invalid color for '{f.name}' in theme '{self.name}': {e}") from e

    @classmethod
    def from_colors(
        cls,
        keyword: str,
        string: str,
        comment: str,
        number: str,
        plain: str = "default",
        name: str = "custom"
    ) -> "Theme":
        """Build a theme from the five base colors"""
        return cls(
            keyword=keyword,
            string=string,
            comment=comment,
            number=number,
            plain=plain,
            name=name
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any], name: Optional[str] = None) -> "Theme":
        """Create from dictionary (e.g. a YAML theme entry)"""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        if name is not None:
            values["name"] = name
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization, dropping unset colors"""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


DARK_THEME = Theme(
    name="dark",
    keyword="#569cd6",
    string="#ce9178",
    comment="#6a9955",
    number="#b5cea8",
    plain="#d4d4d4",
)

LIGHT_THEME = Theme(
    name="light",
    keyword="#0000ff",
    string="#a31515",
    comment="#008000",
    number="#800080",
    plain="#000000",
)

BUILTIN_THEMES: Dict[DisplayMode, Theme] = {
    DisplayMode.LIGHT: LIGHT_THEME,
    DisplayMode.DARK: DARK_THEME,
}


def theme_for(mode: Union[DisplayMode, str] = DisplayMode.LIGHT) -> Theme:
    """
    Select the built-in theme for a display mode.

    Args:
        mode: DisplayMode or its value ("light" / "dark")

    Returns:
        The matching built-in theme

    Raises:
        ValueError: If mode is not a known display mode
    """
    if not isinstance(mode, DisplayMode):
        mode = DisplayMode(str(mode).lower().strip())
    return BUILTIN_THEMES[mode]


__all__ = [
    'DisplayMode',
    'Theme',
    'DARK_THEME',
    'LIGHT_THEME',
    'BUILTIN_THEMES',
    'OPTIONAL_COLOR_FIELDS',
    'theme_for',
]
