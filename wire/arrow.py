"""
Arrow batch encoding for browser rows and columns.

Provides:
- row_schema() → pyarrow schema of an encoded row batch
- rows_to_arrow(rows) → pa.Table, one record per row
- rows_from_arrow(table) → list of BrowserRow
- columns_to_arrow(columns) → pa.Table, one record per descriptor
"""

from typing import Iterable, List

import pyarrow as pa

from browser_table.registry import BrowserColumns
from browser_table.rows import BrowserCell, BrowserRow, Row, encode_row

_CELL_TYPE = pa.struct([
    ("text", pa.string()),
    ("is_rtl", pa.bool_()),
])


def row_schema() -> pa.Schema:
    return pa.schema([
        ("cells", pa.list_(_CELL_TYPE)),
        ("color", pa.int8()),
        ("font_name", pa.string()),
        ("font_size", pa.int32()),
    ])


def column_schema() -> pa.Schema:
    return pa.schema([
        ("key", pa.string()),
        ("label", pa.string()),
        ("is_sortable", pa.bool_()),
        ("sorts_reversed", pa.bool_()),
        ("uses_cell_font", pa.bool_()),
        ("alignment", pa.int8()),
    ])


def _as_browser_row(row):
    """Accept either a computed Row or an already-encoded BrowserRow."""
    if isinstance(row, Row):
        return encode_row(row)
    return row


def rows_to_arrow(rows: Iterable) -> pa.Table:
    encoded = [_as_browser_row(r) for r in rows]
    return pa.table(
        {
            "cells": [
                [{"text": c.text, "is_rtl": c.is_rtl} for c in r.cells]
                for r in encoded
            ],
            "color": [r.color for r in encoded],
            "font_name": [r.font_name for r in encoded],
            "font_size": [r.font_size for r in encoded],
        },
        schema=row_schema(),
    )


def rows_from_arrow(table: pa.Table) -> List[BrowserRow]:
    rows = []
    for record in table.to_pylist():
        rows.append(BrowserRow(
            cells=[BrowserCell(c["text"], c["is_rtl"]) for c in record["cells"]],
            color=record["color"],
            font_name=record["font_name"],
            font_size=record["font_size"],
        ))
    return rows


def columns_to_arrow(columns: BrowserColumns) -> pa.Table:
    return pa.table(
        {
            "key": [d.key for d in columns],
            "label": [d.label for d in columns],
            "is_sortable": [d.sortable for d in columns],
            "sorts_reversed": [d.sorts_reversed for d in columns],
            "uses_cell_font": [d.uses_cell_font for d in columns],
            "alignment": [int(d.alignment) for d in columns],
        },
        schema=column_schema(),
    )
