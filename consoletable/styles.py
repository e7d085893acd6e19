"""
Styles — Built-in catalog of table styles

Plain text styles work on any console; box-drawing styles need a
terminal that can show Unicode. get_style("auto") picks one for the
current environment.

Example (PLAIN):
    Pet Age
    --- ---
    Cat   5
    Dog  10
"""

import os
import sys
from typing import Dict, Optional, Union

from .style import ColumnKind, PatternStyle, RowKind, Style


NO_PADDING = ("", "")

#                        LEFT  CELL  SEP   RIGHT

PLAIN = PatternStyle("plain", (
    None,
    ("",   "H",  " ",  ""),
    ("",   "-",  " ",  ""),
    ("",   "1",  " ",  ""),
    None,
    None,
))

SQL = PatternStyle("sql", (
    None,
    ("",   "H",  " ",  ""),
    ("",   "-",  " ",  ""),
    ("",   "1",  " ",  ""),
    None,
    None,
), paddings=NO_PADDING)

# No borders and no cell padding
MINIMAL = PatternStyle("minimal", (
    None,
    ("",   "H",  " ",  ""),
    None,
    ("",   "1",  " ",  ""),
    None,
    None,
), paddings=NO_PADDING)

NO_LINES = PatternStyle("no_lines", (
    None,
    ("",   "H",  "",   ""),
    None,
    ("",   "1",  "",   ""),
    None,
    None,
))

BORDER = PatternStyle("border", (
    ("┌─", "─",  "─",  "─┐"),
    ("│ ", "H",  " ",  " │"),
    ("│ ", "─",  " ",  " │"),
    ("│ ", "1",  " ",  " │"),
    ("│ ", " ",  " ",  " │"),
    ("└─", "─",  "─",  "─┘"),
), paddings=NO_PADDING)

# Journal tables: rules above and below, no vertical lines
SCIENTIFIC = PatternStyle("scientific", (
    ("─",  "─",  "─",  "─"),
    (" ",  "H",  " ",  " "),
    ("─",  "─",  "─",  "─"),
    (" ",  "D",  " ",  " "),
    (" ",  " ",  " ",  " "),
    ("─",  "─",  "─",  "─"),
))

BASIC = PatternStyle("basic", (
    ("+",  "-",  "+",  "+"),
    ("|",  "H",  "|",  "|"),
    ("+",  "-",  "+",  "+"),
    ("|",  "1",  "|",  "|"),
    ("+",  "-",  "+",  "+"),
    ("+",  "-",  "+",  "+"),
))

SIMPLE = PatternStyle("simple", (
    ("·",  "-",  "-",  "·"),
    ("|",  "H",  "|",  "|"),
    ("|",  "-",  "+",  "|"),
    ("|",  "1",  "|",  "|"),
    ("|",  "-",  "+",  "|"),
    ("·",  "-",  "-",  "·"),
))

DOTS = PatternStyle("dots", (
    (".",  ".",  ".",  "."),
    (":",  "H",  ":",  ":"),
    (":",  ".",  ":",  ":"),
    (":",  "1",  ":",  ":"),
    (":",  ".",  ":",  ":"),
    (":",  ".",  ":",  ":"),
))

# U+00B7 MIDDLE DOT, not a full stop
MIDDLE_DOTS = PatternStyle("middle_dots", (
    ("·",  "·",  "·",  "·"),
    (":",  "H",  ":",  ":"),
    (":",  "·",  ":",  ":"),
    (":",  "1",  ":",  ":"),
    (":",  "·",  ":",  ":"),
    ("·",  "·",  "·",  "·"),
))

DASHES = PatternStyle("dashes", (
    (" ",  "_",  " ",  " "),
    ("|",  "H",  "|",  "|"),
    ("|",  "_",  "|",  "|"),
    ("|",  "1",  "|",  "|"),
    ("|",  "_",  "|",  "|"),
    ("|",  "_",  "|",  "|"),
))

STARS = PatternStyle("stars", (
    ("*",  ".",  "*",  "*"),
    (":",  "H",  ":",  ":"),
    (":",  ".",  "*",  ":"),
    (":",  "1",  ":",  ":"),
    (":",  ".",  "*",  ":"),
    ("*",  ".",  "*",  "*"),
))

LIGHT = PatternStyle("light", (
    ("┌",  "─",  "┬",  "┐"),
    ("│",  "H",  "│",  "│"),
    ("├",  "─",  "┼",  "┤"),
    ("│",  "1",  "│",  "│"),
    ("├",  "─",  "┼",  "┤"),
    ("└",  "─",  "┴",  "┘"),
))

DASHED = PatternStyle("dashed", (
    ("┌",  "╌",  "┬",  "┐"),
    ("┆",  "H",  "┆",  "┆"),
    ("┆",  "╌",  "┆",  "┆"),
    ("┆",  "1",  "┆",  "┆"),
    ("┆",  "╌",  "┆",  "┆"),
    ("└",  "╌",  "┴",  "┘"),
))

ROUNDED = PatternStyle("rounded", (
    ("╭",  "─",  "┬",  "╮"),
    ("│",  "H",  "│",  "│"),
    ("├",  "─",  "┼",  "┤"),
    ("│",  "1",  "│",  "│"),
    ("├",  "─",  "┼",  "┤"),
    ("╰",  "─",  "┴",  "╯"),
))

HEAVY = PatternStyle("heavy", (
    ("┏",  "━",  "┳",  "┓"),
    ("┃",  "H",  "┃",  "┃"),
    ("┣",  "━",  "╋",  "┫"),
    ("┃",  "1",  "┃",  "┃"),
    ("┣",  "━",  "╋",  "┫"),
    ("┗",  "━",  "┻",  "┛"),
))

HEAVY_BORDER = PatternStyle("heavy_border", (
    ("┏",  "━",  "┯",  "┓"),
    ("┃",  "H",  "│",  "┃"),
    ("┣",  "━",  "┿",  "┫"),
    ("┃",  "1",  "│",  "┃"),
    ("┠",  "─",  "┼",  "┨"),
    ("┗",  "━",  "┷",  "┛"),
))

LIGHT_HEADER = PatternStyle("light_header", (
    ("┏",  "━",  "┯",  "┓"),
    ("┃",  "H",  "│",  "┃"),
    ("┠",  "─",  "┼",  "┨"),
    ("┃",  "1",  "│",  "┃"),
    ("┠",  "─",  "┼",  "┨"),
    ("┗",  "━",  "┷",  "┛"),
))

DOUBLE_BORDER = PatternStyle("double_border", (
    ("╔",  "═",  "╤",  "╗"),
    ("║",  "H",  "│",  "║"),
    ("╠",  "═",  "╪",  "╣"),
    ("║",  "1",  "│",  "║"),
    ("╟",  "─",  "┼",  "╢"),
    ("╚",  "═",  "╧",  "╝"),
))

DOUBLED = PatternStyle("doubled", (
    ("┌",  "─",  "┐┌", "┐"),
    ("│",  "H",  "││", "│"),
    ("├",  "─",  "┤├", "┤"),
    ("│",  "1",  "││", "│"),
    ("├",  "─",  "┤├", "┤"),
    ("└",  "─",  "┘└", "┘"),
))

COMPACT = PatternStyle.from_compact("compact", [
    "┌─┬┐",
    "│H││",
    "├─┼┤",
    "│D││",
    "├─┼┤",
    "└─┴┘",
])


# =============================================================================
# Style Registry
# =============================================================================

STYLES: Dict[str, PatternStyle] = {
    style.name: style for style in (
        PLAIN, SQL, MINIMAL, NO_LINES, BORDER, SCIENTIFIC, BASIC, SIMPLE,
        DOTS, MIDDLE_DOTS, DASHES, STARS, LIGHT, DASHED, ROUNDED, HEAVY,
        HEAVY_BORDER, LIGHT_HEADER, DOUBLE_BORDER, DOUBLED, COMPACT,
    )
}

DEFAULT_STYLE = LIGHT
ASCII_STYLE = BASIC


def supports_unicode() -> bool:
    """
    Check if environment likely supports Unicode output.

    Conservative: defaults to ASCII if uncertain.
    """
    # Explicit environment override
    if os.environ.get('CONSOLETABLE_ASCII_ONLY', '').lower() in ('1', 'true', 'yes'):
        return False
    if os.environ.get('CONSOLETABLE_UNICODE', '').lower() in ('1', 'true', 'yes'):
        return True

    stdout_encoding = getattr(sys.stdout, 'encoding', None)
    if stdout_encoding:
        encoding_lower = stdout_encoding.lower().replace('-', '').replace('_', '')
        if encoding_lower.startswith('cp') or encoding_lower in ('ascii', 'latin1', 'iso88591'):
            return False
        if encoding_lower.startswith('utf'):
            return True

    lang = os.environ.get('LANG', '').lower()
    lc_all = os.environ.get('LC_ALL', '').lower()
    if 'utf-8' in lang or 'utf8' in lang:
        return True
    if 'utf-8' in lc_all or 'utf8' in lc_all:
        return True

    # Windows Terminal
    if os.environ.get('WT_SESSION'):
        return True

    return False


def get_style(preference: Union[str, Style, None] = None) -> Style:
    """
    Resolve a style from a catalog name.

    Args:
        preference: Catalog name (any case), "auto"/None to detect,
                    or a Style which is returned as is

    Returns:
        The matching Style

    Raises:
        ValueError: If the name is not in the catalog
    """
    if isinstance(preference, Style):
        return preference
    if preference is None or preference.lower() == 'auto':
        return DEFAULT_STYLE if supports_unicode() else ASCII_STYLE

    name = preference.lower().replace('-', '_')
    if name not in STYLES:
        valid = ", ".join(STYLES.keys())
        raise ValueError(f"Unknown style '{preference}'. Valid: auto, {valid}")
    return STYLES[name]


# =============================================================================
# Style Dump
# =============================================================================

def _describe_glyph(glyph: Optional[str], column: ColumnKind) -> str:
    """Show a glyph so that empty and blank glyphs stay visible."""
    if glyph is None:
        return "null" if column == ColumnKind.LEFT else ""
    if glyph == "":
        return "''"
    if glyph.strip() != glyph:
        return f"'{glyph}'"
    return glyph


def dump_style(style: Style):
    """
    Build a table showing every glyph of a style, drawn in that style.

    Args:
        style: Style to describe

    Returns:
        ConsoleTable with one row per RowKind and one column per ColumnKind
    """
    from .table import ConsoleTable

    headers = [None] + ["'" + column.name for column in ColumnKind]
    rows = [
        [row.name] + [_describe_glyph(style.pattern(row, column), column) for column in ColumnKind]
        for row in RowKind
    ]
    return ConsoleTable(headers, rows).with_style(style)
