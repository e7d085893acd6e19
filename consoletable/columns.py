"""
Columns — Per-column heading and alignment

A heading can carry its alignment as a leading marker, like the
"%-9s" convention of printf:

    "-Pet"    -> LEFT aligned, heading "Pet"
    "'Sex"    -> CENTRE aligned, heading "Sex"
    "Age"     -> RIGHT aligned (default), heading "Age"
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Aligned(Enum):
    """Alignment of the text in a column."""
    LEFT = "left"
    CENTRE = "centre"
    RIGHT = "right"

    @classmethod
    def parse(cls, text: str) -> "Aligned":
        """
        Parse alignment from config/CLI text.

        Accepts the enum value or name in any case, and "center".

        Raises:
            ValueError: If text is not a known alignment
        """
        value = (text or "").strip().lower()
        if value == "center":
            value = "centre"
        for aligned in cls:
            if aligned.value == value:
                return aligned
        valid = ", ".join(a.value for a in cls)
        raise ValueError(f"Unknown alignment '{text}'. Valid: {valid}")


# Leading heading character -> alignment it selects
HEADING_MARKERS = {
    "-": Aligned.LEFT,
    "'": Aligned.CENTRE,
}


@dataclass
class ColumnFormat:
    """
    Heading and alignment for one column of a ConsoleTable.

    A marker at the start of the heading is always stripped. An explicit
    alignment wins over the alignment the marker would select.

    Attributes:
        heading: Column heading text, without marker
        alignment: Column alignment (RIGHT when neither given nor marked)
    """
    heading: str
    alignment: Optional[Aligned] = None

    def __post_init__(self):
        marker = self.heading[:1]
        if marker in HEADING_MARKERS:
            self.heading = self.heading[1:]
            if self.alignment is None:
                self.alignment = HEADING_MARKERS[marker]
        if self.alignment is None:
            self.alignment = Aligned.RIGHT

    def __str__(self) -> str:
        return self.heading


def is_marked(heading) -> bool:
    """True if heading is text that starts with an alignment marker."""
    return isinstance(heading, str) and heading[:1] in HEADING_MARKERS


def resolve_heading(heading):
    """
    Convert a marked text heading into a ColumnFormat.

    Anything else (None, empty text, unmarked text, other values,
    ColumnFormat) is returned unchanged.
    """
    if is_marked(heading):
        return ColumnFormat(heading)
    return heading
