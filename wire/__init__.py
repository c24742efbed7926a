"""
Wire encodings for the browser frontend.

JSON for single requests, Arrow for row batches. Both take the values
produced by browser_table and never compute anything themselves.
"""

from wire.json_codec import dumps, columns_to_json, rows_to_json, rows_from_json
from wire.arrow import rows_to_arrow, rows_from_arrow, columns_to_arrow, row_schema

__all__ = [
    "dumps", "columns_to_json", "rows_to_json", "rows_from_json",
    "rows_to_arrow", "rows_from_arrow", "columns_to_arrow", "row_schema",
]
