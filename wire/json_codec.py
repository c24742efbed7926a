"""
JSON wire format for the browser frontend.

Field names follow the frontend's camelCase contract:

    BrowserColumns  [{key, label, isSortable, sortsReversed, usesCellFont, alignment}]
    BrowserRow      {cells: [{text, isRtl}], color, fontName, fontSize}
"""

import enum
import json
from typing import List

from browser_table.columns import Column, key_of
from browser_table.registry import BrowserColumns, ColumnDescriptor
from browser_table.rows import BrowserRow, Row, encode_row


def descriptor_to_dict(d: ColumnDescriptor) -> dict:
    return {
        "key": d.key,
        "label": d.label,
        "isSortable": d.sortable,
        "sortsReversed": d.sorts_reversed,
        "usesCellFont": d.uses_cell_font,
        "alignment": int(d.alignment),
    }


class _JSONEncoder(json.JSONEncoder):
    """Handles descriptors, wire rows, computed rows and enums.

    Columns encode as their persistence key, never their member value.
    """

    def default(self, obj):
        if isinstance(obj, ColumnDescriptor):
            return descriptor_to_dict(obj)
        if isinstance(obj, BrowserRow):
            return obj.to_dict()
        if isinstance(obj, Row):
            return encode_row(obj).to_dict()
        if isinstance(obj, Column):
            return key_of(obj)
        if isinstance(obj, enum.Enum):
            return obj.value
        return super().default(obj)


def dumps(obj, **kwargs) -> str:
    return json.dumps(obj, cls=_JSONEncoder, ensure_ascii=False, **kwargs)


def columns_to_json(columns: BrowserColumns) -> str:
    return dumps({"columns": list(columns)})


def rows_to_json(rows) -> str:
    """Encode computed or already-encoded rows as a JSON array."""
    return dumps(list(rows))


def rows_from_json(json_str: str) -> List[BrowserRow]:
    return [BrowserRow.from_dict(d) for d in json.loads(json_str)]
