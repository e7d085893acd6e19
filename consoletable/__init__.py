"""
ConsoleTable — Tables of rows and columns for the console

Formats headers and rows into one multi-line string for a monospaced
font, drawn in one of many pluggable styles.

Usage:
    from consoletable import ConsoleTable, styles

    table = ConsoleTable().with_style(styles.HEAVY)
    table.set_headers("-City", "'Lat", "Longitude")
    table.add_row("Paris", 48.86, 2.34)
    table.add_row("Brisbane", -27.47, 153.03)
    print(table)
"""

__version__ = "0.1.0"

from .columns import Aligned, ColumnFormat
from .style import RowKind, ColumnKind, Style, PatternStyle, UnsupportedColumnError
from .styles import STYLES, get_style, dump_style, supports_unicode
from .widths import calculate_widths
from .table import ConsoleTable, render_table
from .config import TableConfig, ConfigManager, load_config

__all__ = [
    # Columns
    'Aligned', 'ColumnFormat',
    # Styles
    'RowKind', 'ColumnKind', 'Style', 'PatternStyle', 'UnsupportedColumnError',
    'STYLES', 'get_style', 'dump_style', 'supports_unicode',
    # Rendering
    'calculate_widths', 'ConsoleTable', 'render_table',
    # Config
    'TableConfig', 'ConfigManager', 'load_config',
]
