"""
Widths — Column sizing for ragged tables

Width is measured in Unicode code points of a value's text form.
Wide and combining characters get no special treatment.
"""

from typing import Any, List, Optional, Sequence


def cell_text(value: Any) -> str:
    """Text form of a cell value. None renders as empty text."""
    if value is None:
        return ""
    return str(value)


def display_width(value: Any) -> int:
    """Number of code points in the text form of value."""
    return len(cell_text(value))


def cell_at(cells: Optional[Sequence[Any]], index: int) -> str:
    """
    Text of cells[index], or empty text when the row is None
    or too short to reach index.
    """
    if cells is None or index >= len(cells):
        return ""
    return cell_text(cells[index])


def calculate_widths(
    headers: Optional[Sequence[Any]],
    rows: Sequence[Optional[Sequence[Any]]]
) -> List[int]:
    """
    Calculate the display width of every column.

    The column count is the longest of the headers and all rows. A
    column only reached by some rows is sized from those rows alone.

    Args:
        headers: Header values (None = no headers)
        rows: Rows of cell values; a row may be None

    Returns:
        One width per column, 0 for columns that hold only empty values
    """
    widths: List[int] = []

    for cells in [headers, *rows]:
        if not cells:
            continue
        if len(cells) > len(widths):
            widths.extend([0] * (len(cells) - len(widths)))
        for i, value in enumerate(cells):
            widths[i] = max(widths[i], display_width(value))

    return widths
