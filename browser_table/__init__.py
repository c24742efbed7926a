"""
Column metadata and row encoding for the card and note browser.
"""

from browser_table.columns import (
    Column, EntityKind, key_of, parse, is_known_key,
    parse_column_list, column_keys, active_columns,
)
from browser_table.registry import (
    Alignment, ColumnDescriptor, BrowserColumns, ColumnRegistry,
    CARD_COLUMNS, NOTE_COLUMNS, build_descriptor,
)
from browser_table.rows import Cell, Color, FontSpec, Row, BrowserRow, encode_row

__all__ = [
    "Column", "EntityKind", "key_of", "parse", "is_known_key",
    "parse_column_list", "column_keys", "active_columns",
    "Alignment", "ColumnDescriptor", "BrowserColumns", "ColumnRegistry",
    "CARD_COLUMNS", "NOTE_COLUMNS", "build_descriptor",
    "Cell", "Color", "FontSpec", "Row", "BrowserRow", "encode_row",
]
