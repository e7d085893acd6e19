"""
ConsoleTable — Render rows and columns as monospaced text

Example:
    table = ConsoleTable().with_style(BASIC)
    table.set_headers("-Pet", "Age")
    table.add_row("Cat", 5)
    table.add_row("Dog", 10)
    print(table)

    +-----+-----+
    | Pet | Age |
    +-----+-----+
    | Cat |   5 |
    | Dog |  10 |
    +-----+-----+

Input is never rejected for its shape: missing headers, short or long
rows, None rows and None cells all render as empty space.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .columns import Aligned, ColumnFormat, resolve_heading
from .style import ColumnKind, RowKind, Style, DEFAULT_PADDING
from .styles import DEFAULT_STYLE
from .widths import calculate_widths, cell_at, display_width

logger = logging.getLogger(__name__)


def justify(text: str, width: int, aligned: Aligned) -> str:
    """
    Pad text to exactly width characters.

    CENTRE puts the odd extra space on the left.
    """
    if width == 0:
        return ""
    if aligned == Aligned.RIGHT:
        return text.rjust(width)
    if aligned == Aligned.CENTRE:
        left_pad = (width - display_width(text) + 1) // 2
        text = " " * left_pad + text
    return text.ljust(width)


def fill(glyph: Optional[str], length: int) -> str:
    """Repeat glyph and cut it to exactly length characters."""
    if not glyph:
        return ""
    return (glyph * length)[:length]


def _as_sequence(values: tuple) -> Optional[Sequence[Any]]:
    """
    Normalize *args of set_headers()/add_row().

    No arguments or a lone None mean "nothing"; a lone list or tuple is
    taken as the whole sequence.
    """
    if not values:
        return None
    if len(values) == 1:
        if values[0] is None:
            return None
        if isinstance(values[0], (list, tuple)):
            return values[0]
    return values


class ConsoleTable:
    """
    A table of rows and columns formatted into a single string.

    Setters return the table so calls can be chained:

        ConsoleTable().with_style(HEAVY).with_row_rules().add_row(1, 2)

    Attributes:
        headers: Column headings, None when no header line is shown
        rows: Rows in insertion order; an entry may be None
        style: Style drawing borders and rules
        alignment: Alignment of columns without a ColumnFormat
        show_borders: Draw LEFT/RIGHT/SEPARATOR glyphs
        show_row_rules: Draw a ROW_RULE line between data rows
        left_padding: Drawn before each cell's text
        right_padding: Drawn after each cell's text
    """

    def __init__(
        self,
        headers: Optional[Sequence[Any]] = None,
        rows: Optional[Iterable[Optional[Sequence[Any]]]] = None,
        style: Optional[Style] = None
    ):
        self.headers: Optional[List[Any]] = None
        self.rows: List[Optional[Sequence[Any]]] = []
        self.style: Style = style or DEFAULT_STYLE
        self.alignment = Aligned.RIGHT
        self.show_borders = True
        self.show_row_rules = False
        self.left_padding = DEFAULT_PADDING
        self.right_padding = DEFAULT_PADDING

        if style is not None:
            self.with_style(style)
        if isinstance(headers, str):
            self.set_headers(headers)
        elif headers is not None:
            self.set_headers(list(headers))
        if rows is not None:
            self.add_rows(rows)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_records(
        cls,
        records: Optional[List[Dict[str, Any]]],
        columns: Optional[List[str]] = None,
        keys: Optional[List[str]] = None,
        style: Optional[Style] = None
    ) -> "ConsoleTable":
        """
        Build a table from a list of dicts.

        Args:
            records: One dict per row
            columns: Column headings (defaults to title-cased keys of first record)
            keys: Dict keys per column (inferred from columns if not given)
            style: Table style

        Returns:
            ConsoleTable with one row per record
        """
        records = records or []
        columns = columns if columns is not None else _infer_columns(records)
        keys = keys if keys is not None else _infer_keys(columns, records)

        table = cls(style=style)
        table.set_headers(list(columns))
        for record in records:
            if record is None:
                table.add_row()
            else:
                table.add_row([record.get(key) for key in keys])
        return table

    @classmethod
    def from_config(cls, config) -> "ConsoleTable":
        """Empty table with the defaults of a TableConfig."""
        return config.apply(cls())

    # =========================================================================
    # Configuration
    # =========================================================================

    def with_style(self, style: Style) -> "ConsoleTable":
        """Use style for drawing, and take the style's cell padding."""
        self.style = style
        padding = getattr(style, "padding", None)
        if padding is None:
            self.left_padding = self.right_padding = DEFAULT_PADDING
        else:
            self.left_padding = padding(ColumnKind.LEFT)
            self.right_padding = padding(ColumnKind.RIGHT)
        return self

    def with_alignment(self, aligned: Aligned) -> "ConsoleTable":
        """Alignment for columns whose heading has no ColumnFormat."""
        self.alignment = aligned
        return self

    def with_borders(self, show: bool) -> "ConsoleTable":
        """
        Draw the LEFT, SEPARATOR and RIGHT glyphs.

        Without borders, columns are joined by a single space.
        """
        self.show_borders = show
        return self

    with_vertical_lines = with_borders

    def with_row_rules(self, show: bool = True) -> "ConsoleTable":
        """Draw a ROW_RULE line between data rows."""
        self.show_row_rules = show
        return self

    def with_column_padding(self, left: str, right: Optional[str] = None) -> "ConsoleTable":
        """Set cell padding; one argument sets both sides."""
        self.left_padding = left
        self.right_padding = left if right is None else right
        return self

    # =========================================================================
    # Data
    # =========================================================================

    def set_headers(self, *headers) -> "ConsoleTable":
        """
        Set the column headings.

        By default a column is right aligned. A heading starting with "-"
        makes it left aligned, one starting with "'" makes it centred.
        Pass a ColumnFormat for an explicit alignment. No headings (or
        None) removes the header line.
        """
        values = _as_sequence(headers)
        if not values:
            self.headers = None
        else:
            self.headers = [resolve_heading(heading) for heading in values]
        return self

    def add_row(self, *cells) -> "ConsoleTable":
        """
        Add a row of data.

        No cells (or None) adds a row in which every column is empty.
        """
        values = _as_sequence(cells)
        self.rows.append(None if values is None else list(values))
        return self

    def add_rows(self, rows: Iterable[Optional[Sequence[Any]]]) -> "ConsoleTable":
        """Append rows in order; a None row becomes an empty row."""
        for row in rows:
            self.rows.append(None if row is None else list(row))
        return self

    # =========================================================================
    # Rendering
    # =========================================================================

    def calculate_widths(self) -> List[int]:
        """Display width of every column of the current data."""
        return calculate_widths(self.headers, self.rows)

    def render(self) -> str:
        """
        Render the whole table.

        Returns:
            Multi-line string, every line ending in a newline
        """
        widths = self.calculate_widths()
        logger.debug(
            "Rendering %d rows x %d columns with style %s",
            len(self.rows), len(widths), self.style
        )

        lines = [self.render_row(RowKind.TOP, widths)]

        if self.headers:
            lines.append(self.render_row(RowKind.HEADER, widths, self.headers))
            lines.append(self.render_row(RowKind.HEADER_RULE, widths))

        last = len(self.rows) - 1
        for i, row in enumerate(self.rows):
            lines.append(self.render_row(RowKind.DATA, widths, row))
            if self.show_row_rules and i != last:
                lines.append(self.render_row(RowKind.ROW_RULE, widths))

        lines.append(self.render_row(RowKind.BOTTOM, widths))

        return "".join(lines)

    def render_row(
        self,
        row: RowKind,
        widths: Sequence[int],
        cells: Optional[Sequence[Any]] = None
    ) -> str:
        """
        Render one line of the table.

        Args:
            row: Kind of line
            widths: Width of every column
            cells: Cell values for HEADER and DATA lines

        Returns:
            The line with its newline, or "" if the style hides this kind of row
        """
        left = self.style.pattern(row, ColumnKind.LEFT)
        if left is None:
            return ""

        if self.show_borders:
            separator = self.style.pattern(row, ColumnKind.SEPARATOR) or ""
        else:
            separator = " "

        parts = []
        for i, width in enumerate(widths):
            if row.is_rule:
                span = len(self.left_padding) + width + len(self.right_padding)
                parts.append(fill(self.style.pattern(row, ColumnKind.CELL), span))
            else:
                text = justify(cell_at(cells, i), width, self._alignment_for(i))
                parts.append(self.left_padding + text + self.right_padding)

        line = separator.join(parts)
        if self.show_borders:
            line = left + line + (self.style.pattern(row, ColumnKind.RIGHT) or "")
        return line + "\n"

    def _alignment_for(self, index: int) -> Aligned:
        """Alignment of column index: its ColumnFormat, else the table default."""
        if self.headers is not None and index < len(self.headers):
            heading = self.headers[index]
            if isinstance(heading, ColumnFormat):
                return heading.alignment
        return self.alignment

    def __str__(self) -> str:
        return self.render()


# =============================================================================
# Record Inference
# =============================================================================

def _infer_columns(records: List[Dict[str, Any]]) -> List[str]:
    """Infer column headings from first record's keys."""
    if not records or not isinstance(records[0], dict):
        return []
    return [key.replace("_", " ").title() for key in records[0].keys()]


def _infer_keys(columns: List[str], records: List[Dict[str, Any]]) -> List[str]:
    """Infer dict keys from column headings."""
    if not records or not isinstance(records[0], dict):
        return list(columns)

    record_keys = list(records[0].keys())

    if len(columns) == len(record_keys):
        return record_keys

    keys = []
    for column in columns:
        normalized = str(column).lstrip("-'").lower().replace(" ", "_")
        for key in record_keys:
            if key.lower() == normalized:
                keys.append(key)
                break
        else:
            keys.append(normalized)
    return keys


# =============================================================================
# Convenience Functions
# =============================================================================

def render_table(
    headers: Optional[Sequence[Any]],
    rows: Iterable[Optional[Sequence[Any]]],
    style: Optional[Style] = None,
    alignment: Optional[Aligned] = None,
    borders: bool = True,
    row_rules: bool = False,
    padding: Optional[str] = None
) -> str:
    """
    Convenience function to render a table directly.

    Args:
        headers: Column headings (None for no header line)
        rows: Rows of cell values
        style: Table style (default LIGHT)
        alignment: Default column alignment (default RIGHT)
        borders: Draw vertical borders
        row_rules: Draw rules between data rows
        padding: Cell padding on both sides (default: the style's)

    Returns:
        Rendered table text
    """
    table = ConsoleTable(headers, rows, style=style)
    if alignment is not None:
        table.with_alignment(alignment)
    table.with_borders(borders).with_row_rules(row_rules)
    if padding is not None:
        table.with_column_padding(padding)
    return table.render()
