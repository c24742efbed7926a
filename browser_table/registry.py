"""
Column Registry — display metadata for the card and note browser views.

ColumnDescriptor captures what the frontend needs to draw a header:
  key             stable persistence key (see browser_table.columns)
  label           localized header text
  sortable        False for columns rendered on demand from templates
  sorts_reversed  True for the sort field, which collates descending
  uses_cell_font  True for columns drawn in the note's editing font
  alignment       START for free text and names, CENTER for the rest

The descriptor rules are kind-agnostic. The card and note views differ only
in which columns they offer (CARD_COLUMNS / NOTE_COLUMNS).
"""

import dataclasses
import enum
from typing import Iterable, List

from browser_table.columns import Column, EntityKind, key_of
from browser_table.i18n import Translator, message_id_for


class Alignment(enum.IntEnum):
    START = 0
    CENTER = 1


@dataclasses.dataclass(frozen=True)
class ColumnDescriptor:
    """Derived display metadata for one column. Never persisted."""
    key: str
    label: str
    sortable: bool
    sorts_reversed: bool
    uses_cell_font: bool
    alignment: Alignment


class BrowserColumns(list):
    """Ordered descriptor list handed to the frontend's column picker."""

    @property
    def keys(self) -> List[str]:
        return [d.key for d in self]

    def by_key(self, key: str) -> ColumnDescriptor:
        for d in self:
            if d.key == key:
                return d
        raise KeyError(key)


# ── Column sets ──────────────────────────────────────────────────

CARD_COLUMNS = (
    Column.QUESTION,
    Column.ANSWER,
    Column.CARD_DECK,
    Column.CARD_DUE,
    Column.CARD_EASE,
    Column.CARD_LAPSES,
    Column.CARD_INTERVAL,
    Column.CARD_MOD,
    Column.CARD_REPS,
    Column.CARD_TEMPLATE,
    Column.NOTE_CREATION,
    Column.NOTE_FIELD,
    Column.NOTE_MOD,
    Column.NOTE_TAGS,
    Column.NOTETYPE,
)

NOTE_COLUMNS = (
    Column.NOTE_CARDS,
    Column.NOTE_CREATION,
    Column.NOTE_DUE,
    Column.NOTE_EASE,
    Column.NOTE_FIELD,
    Column.NOTE_INTERVAL,
    Column.NOTE_LAPSES,
    Column.NOTE_MOD,
    Column.NOTE_REPS,
    Column.NOTE_TAGS,
    Column.NOTETYPE,
)

_COLUMNS_BY_KIND = {
    EntityKind.CARDS: CARD_COLUMNS,
    EntityKind.NOTES: NOTE_COLUMNS,
}


# ── Descriptor rules ─────────────────────────────────────────────

_UNSORTABLE = frozenset({Column.QUESTION, Column.ANSWER, Column.CUSTOM})

_CELL_FONT = frozenset({Column.QUESTION, Column.ANSWER, Column.NOTE_FIELD})

_START_ALIGNED = frozenset({
    Column.QUESTION,
    Column.ANSWER,
    Column.CARD_TEMPLATE,
    Column.CARD_DECK,
    Column.NOTE_FIELD,
    Column.NOTETYPE,
    Column.NOTE_TAGS,
})


def is_sortable(column: Column) -> bool:
    return column not in _UNSORTABLE


def sorts_reversed(column: Column) -> bool:
    return column is Column.NOTE_FIELD


def uses_cell_font(column: Column) -> bool:
    return column in _CELL_FONT


def alignment_of(column: Column) -> Alignment:
    return Alignment.START if column in _START_ALIGNED else Alignment.CENTER


def build_descriptor(column: Column, translator: Translator) -> ColumnDescriptor:
    """Derive the display metadata of a column in the translator's locale."""
    return ColumnDescriptor(
        key=key_of(column),
        label=translator.translate(message_id_for(column)),
        sortable=is_sortable(column),
        sorts_reversed=sorts_reversed(column),
        uses_cell_font=uses_cell_font(column),
        alignment=alignment_of(column),
    )


def build_columns(columns: Iterable[Column],
                  translator: Translator) -> BrowserColumns:
    """Descriptors for columns, ordered by localized label."""
    descriptors = [build_descriptor(c, translator) for c in columns]
    descriptors.sort(key=lambda d: translator.sort_key(d.label))
    return BrowserColumns(descriptors)


class ColumnRegistry:
    """
    Descriptor lists for the card and note browser views.

    Built fresh on every call; labels follow whatever locale the injected
    translator speaks.
    """

    def __init__(self, translator: Translator):
        self.translator = translator

    def all_card_columns(self) -> BrowserColumns:
        return build_columns(CARD_COLUMNS, self.translator)

    def all_note_columns(self) -> BrowserColumns:
        return build_columns(NOTE_COLUMNS, self.translator)

    def columns_for(self, kind: EntityKind) -> BrowserColumns:
        return build_columns(_COLUMNS_BY_KIND[kind], self.translator)

    def descriptor(self, column: Column) -> ColumnDescriptor:
        return build_descriptor(column, self.translator)
