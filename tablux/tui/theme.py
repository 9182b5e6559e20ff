"""
Colors, styles and glyphs shared by the viewers.

The theme is a frozen dataclass; viewers receive it at construction and
never modify it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.style import Style

# Base colors
PRIMARY_COLOR = "#4B6BEF"
SECONDARY_COLOR = "#5A5AA0"
HIGHLIGHT_COLOR = "#5555CC"
TEXT_COLOR = "#FFFFFF"
MUTED_TEXT_COLOR = "#AAAAAA"
BACKGROUND_COLOR = "#333333"
COLLAPSED_HEADER_COLOR = "#777777"
ERROR_COLOR = "#FF5555"

# JSON node colors
KEY_COLOR = "#88AAFF"
STRING_COLOR = "#7CFC00"
NUMBER_COLOR = "#FFD700"
BOOL_COLOR = "#FF9F5F"
NULL_COLOR = "#FF5F5F"
BRACKET_COLOR = "#F8F8F2"


def _cell(fg: str | None = None, bg: str | None = None, bold: bool = False) -> Style:
    return Style(color=fg, bgcolor=bg, bold=bold or None)


@dataclass(frozen=True)
class TreeGlyphs:
    """Glyphs used to draw the JSON tree. Every glyph is two cells wide."""

    pipe: str = "│ "
    empty: str = "  "
    expanded: str = "▼ "
    collapsed: str = "► "
    leaf: str = "  "


@dataclass(frozen=True)
class Theme:
    """Read-only styling for the tree and table viewers."""

    # Tree
    key: Style = field(default_factory=lambda: Style(color=KEY_COLOR))
    string: Style = field(default_factory=lambda: Style(color=STRING_COLOR))
    number: Style = field(default_factory=lambda: Style(color=NUMBER_COLOR))
    boolean: Style = field(default_factory=lambda: Style(color=BOOL_COLOR))
    null: Style = field(default_factory=lambda: Style(color=NULL_COLOR))
    bracket: Style = field(default_factory=lambda: Style(color=BRACKET_COLOR))
    separator: Style = field(default_factory=lambda: Style(color=MUTED_TEXT_COLOR))
    guide: Style = field(default_factory=lambda: Style(color=MUTED_TEXT_COLOR))
    selected_node: Style = field(default_factory=lambda: Style(bgcolor=BACKGROUND_COLOR))
    glyphs: TreeGlyphs = field(default_factory=TreeGlyphs)

    # Table
    header: Style = field(default_factory=lambda: _cell(TEXT_COLOR, PRIMARY_COLOR, bold=True))
    header_cursor: Style = field(default_factory=lambda: _cell(TEXT_COLOR, HIGHLIGHT_COLOR, bold=True))
    cell: Style = field(default_factory=Style)
    selected_row: Style = field(default_factory=lambda: _cell(bg=BACKGROUND_COLOR))
    selected_column: Style = field(default_factory=lambda: _cell(TEXT_COLOR, SECONDARY_COLOR))
    selected_cell: Style = field(default_factory=lambda: _cell(TEXT_COLOR, HIGHLIGHT_COLOR, bold=True))
    collapsed_header: Style = field(default_factory=lambda: _cell(TEXT_COLOR, COLLAPSED_HEADER_COLOR, bold=True))
    collapsed_cell: Style = field(default_factory=lambda: _cell(MUTED_TEXT_COLOR, BACKGROUND_COLOR))
    collapsed_column: str = "│"
    collapsed_column_width: int = 2
    sort_ascending: str = " ▲"
    sort_descending: str = " ▼"
    ellipsis: str = "..."

    # Application chrome
    error: Style = field(default_factory=lambda: Style(color=ERROR_COLOR, bold=True))
    info: Style = field(default_factory=lambda: Style(color=TEXT_COLOR, italic=True))


DEFAULT_THEME = Theme()
