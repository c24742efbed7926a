"""
Tests for the JSON and Arrow wire encodings.

Covers:
- camelCase JSON contract for columns and rows
- JSON row decoding
- Arrow schema, row batches and decoding
- Arrow export of descriptor lists
"""

import os
import sys
import json
import pytest
import pyarrow as pa

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from browser_table.columns import Column
from browser_table.i18n import english
from browser_table.registry import ColumnRegistry
from browser_table.rows import Cell, Color, FontSpec, Row, encode_row
from wire.json_codec import (
    columns_to_json, descriptor_to_dict, dumps, rows_from_json, rows_to_json,
)
from wire.arrow import (
    column_schema, columns_to_arrow, row_schema, rows_from_arrow, rows_to_arrow,
)


@pytest.fixture
def reg():
    return ColumnRegistry(english())


@pytest.fixture
def rows():
    return [
        Row([Cell("What is 2+2?"), Cell("Default")], Color.MARKED,
            FontSpec("Times", 12)),
        Row([Cell("שלום", True), Cell("Hebrew")], Color.FLAG_BLUE,
            FontSpec("David", 16)),
    ]


# ===========================================================================
# A. JSON
# ===========================================================================

class TestJSON:

    def test_descriptor_fields(self, reg):
        d = descriptor_to_dict(reg.all_card_columns().by_key("noteFld"))
        assert d == {
            "key": "noteFld",
            "label": "Sort Field",
            "isSortable": True,
            "sortsReversed": True,
            "usesCellFont": True,
            "alignment": 0,
        }

    def test_columns_to_json(self, reg):
        data = json.loads(columns_to_json(reg.all_note_columns()))
        assert [c["label"] for c in data["columns"]] == \
            [d.label for d in reg.all_note_columns()]

    def test_rows_round_trip(self, rows):
        decoded = rows_from_json(rows_to_json(rows))
        assert decoded == [encode_row(r) for r in rows]
        assert [r.to_row() for r in decoded] == rows

    def test_rows_keep_unicode(self, rows):
        assert "שלום" in rows_to_json(rows)

    def test_dumps_encoded_rows_and_enums(self, rows):
        data = json.loads(dumps({"row": encode_row(rows[0]), "color": Color.SUSPENDED}))
        assert data["row"]["fontName"] == "Times"
        assert data["color"] == 2

    def test_dumps_columns_as_keys(self):
        data = json.loads(dumps({"active": [Column.QUESTION, Column.NOTE_FIELD,
                                            Column.CUSTOM]}))
        assert data["active"] == ["question", "noteFld", ""]

    def test_dumps_rejects_unknown(self):
        with pytest.raises(TypeError):
            dumps(object())


# ===========================================================================
# B. Arrow
# ===========================================================================

class TestArrow:

    def test_schema(self):
        schema = row_schema()
        assert schema.names == ["cells", "color", "font_name", "font_size"]
        assert schema.field("color").type == pa.int8()

    def test_rows_to_arrow(self, rows):
        table = rows_to_arrow(rows)
        assert table.num_rows == 2
        assert table.schema.equals(row_schema())
        assert table.column("color").to_pylist() == [1, 6]
        assert table.column("cells").to_pylist()[1][0] == \
            {"text": "שלום", "is_rtl": True}

    def test_accepts_encoded_rows(self, rows):
        encoded = [encode_row(r) for r in rows]
        assert rows_to_arrow(encoded).equals(rows_to_arrow(rows))

    def test_round_trip(self, rows):
        assert rows_from_arrow(rows_to_arrow(rows)) == [encode_row(r) for r in rows]

    def test_empty_batch(self):
        table = rows_to_arrow([])
        assert table.num_rows == 0
        assert rows_from_arrow(table) == []

    def test_columns_to_arrow(self, reg):
        cols = reg.all_card_columns()
        table = columns_to_arrow(cols)
        assert table.schema.equals(column_schema())
        assert table.column("key").to_pylist() == cols.keys
        assert table.column("is_sortable").to_pylist() == [d.sortable for d in cols]
