"""
Computed browser row values and their wire shape.

The query layer hands over a Row whose cells already follow the active
column order. encode_row() only reshapes it into a BrowserRow for the
frontend: nothing is reordered, dropped, or checked against the column set.
"""

import enum
from dataclasses import dataclass, field
from typing import Iterable, List


class Color(enum.Enum):
    """Row highlight. One per row; precedence is decided upstream."""
    DEFAULT = 0
    MARKED = 1
    SUSPENDED = 2
    FLAG_RED = 3
    FLAG_ORANGE = 4
    FLAG_GREEN = 5
    FLAG_BLUE = 6

    @property
    def code(self) -> int:
        return self.value

    @classmethod
    def from_code(cls, code: int) -> "Color":
        try:
            return cls(code)
        except ValueError:
            return cls.DEFAULT


@dataclass(frozen=True)
class Cell:
    text: str
    is_rtl: bool = False


@dataclass(frozen=True)
class FontSpec:
    """Font applied to the whole row."""
    name: str
    size: int


@dataclass(frozen=True)
class Row:
    """A row as computed by the query layer."""
    cells: tuple
    color: Color = Color.DEFAULT
    font: FontSpec = FontSpec("", 0)

    def __post_init__(self):
        # Accept any iterable of cells but keep the row immutable
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))


# ── Wire shape ───────────────────────────────────────────────────

@dataclass
class BrowserCell:
    text: str = ""
    is_rtl: bool = False


@dataclass
class BrowserRow:
    """Row as sent to the rendering frontend."""
    cells: List[BrowserCell] = field(default_factory=list)
    color: int = Color.DEFAULT.value
    font_name: str = ""
    font_size: int = 0

    def to_dict(self) -> dict:
        return {
            "cells": [{"text": c.text, "isRtl": c.is_rtl} for c in self.cells],
            "color": self.color,
            "fontName": self.font_name,
            "fontSize": self.font_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BrowserRow":
        return cls(
            cells=[
                BrowserCell(text=c.get("text", ""), is_rtl=c.get("isRtl", False))
                for c in data.get("cells", [])
            ],
            color=data.get("color", Color.DEFAULT.value),
            font_name=data.get("fontName", ""),
            font_size=data.get("fontSize", 0),
        )

    def to_row(self) -> Row:
        """Decode back into a Row (unknown color codes read as DEFAULT)."""
        return Row(
            cells=tuple(Cell(c.text, c.is_rtl) for c in self.cells),
            color=Color.from_code(self.color),
            font=FontSpec(self.font_name, self.font_size),
        )


def encode_cell(cell: Cell) -> BrowserCell:
    return BrowserCell(text=cell.text, is_rtl=cell.is_rtl)


def encode_row(row: Row) -> BrowserRow:
    return BrowserRow(
        cells=[encode_cell(c) for c in row.cells],
        color=row.color.code,
        font_name=row.font.name,
        font_size=row.font.size,
    )


def encode_rows(rows: Iterable[Row]) -> List[BrowserRow]:
    return [encode_row(r) for r in rows]
