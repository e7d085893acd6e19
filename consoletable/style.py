"""
Style — The glyphs that draw a ConsoleTable

A style answers, for each kind of line and each position on the line,
which string to draw there:

                  LEFT   CELL    SEPARATOR   RIGHT
    TOP            +--------+--------+
    HEADER         | Header | Header |
    HEADER_RULE    +--------+--------+
    DATA           |  Data  |  Data  |
    ROW_RULE       +--------+--------+
    DATA           |  Data  |  Data  |
    BOTTOM         +--------+--------+

A None LEFT glyph hides that kind of line completely.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class RowKind(Enum):
    """The kinds of line in a rendered table, top to bottom."""
    TOP = 0
    HEADER = 1
    HEADER_RULE = 2
    DATA = 3
    ROW_RULE = 4
    BOTTOM = 5

    @property
    def is_rule(self) -> bool:
        """True for lines drawn from the CELL glyph instead of cell text."""
        return self not in (RowKind.HEADER, RowKind.DATA)


class ColumnKind(Enum):
    """The positions on a line that a style supplies glyphs for."""
    LEFT = 0
    CELL = 1
    SEPARATOR = 2
    RIGHT = 3


class UnsupportedColumnError(ValueError):
    """Raised when padding is asked for a column kind other than LEFT or RIGHT."""

    def __init__(self, column: ColumnKind):
        self.column = column
        super().__init__(f"Padding is only defined for LEFT and RIGHT, not {column.name}")


DEFAULT_PADDING = " "


class Style(ABC):
    """
    Base class for table styles.

    Subclasses must implement pattern(). padding() defaults to a single
    space on each side of the cell text.
    """

    @abstractmethod
    def pattern(self, row: RowKind, column: ColumnKind) -> Optional[str]:
        """
        Glyph to draw at the given row kind and column position.

        Returns:
            The glyph, or None if this kind of row is not drawn
        """

    def padding(self, column: ColumnKind) -> str:
        """
        Padding drawn on the LEFT or RIGHT side of each cell's text.

        Raises:
            UnsupportedColumnError: For CELL or SEPARATOR
        """
        if column not in (ColumnKind.LEFT, ColumnKind.RIGHT):
            raise UnsupportedColumnError(column)
        return DEFAULT_PADDING


# One glyph per ColumnKind, in ColumnKind order
GlyphRow = Tuple[Optional[str], Optional[str], Optional[str], Optional[str]]


@dataclass(frozen=True)
class PatternStyle(Style):
    """
    A style described by a table of glyphs.

    Attributes:
        name: Catalog name
        rows: One GlyphRow (or None to hide the row) per RowKind
        paddings: (left, right) cell padding
    """
    name: str
    rows: Tuple[Optional[GlyphRow], ...]
    paddings: Tuple[str, str] = (DEFAULT_PADDING, DEFAULT_PADDING)

    def pattern(self, row: RowKind, column: ColumnKind) -> Optional[str]:
        glyphs = self.rows[row.value]
        if glyphs is None:
            return None
        return glyphs[column.value]

    def padding(self, column: ColumnKind) -> str:
        if column == ColumnKind.LEFT:
            return self.paddings[0]
        if column == ColumnKind.RIGHT:
            return self.paddings[1]
        raise UnsupportedColumnError(column)

    @classmethod
    def from_compact(cls, name: str, lines: Sequence[str]) -> "PatternStyle":
        """
        Build a style of single-character glyphs, one string per RowKind.

        Example:
            PatternStyle.from_compact("compact", [
                "┌─┬┐", "│H││", "├─┼┤", "│D││", "├─┼┤", "└─┴┘"])
        """
        return cls(name=name, rows=tuple(tuple(line) for line in lines))

    def __str__(self) -> str:
        return self.name
