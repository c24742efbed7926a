"""
The closed set of columns the browser can display.

Every Column has exactly one stable string key. Keys are what users'
saved column selections hold, so they are append-only: never renamed,
never reused.

    parse("cardDue")             → Column.CARD_DUE
    key_of(Column.NOTE_FIELD)    → "noteFld"
    parse("retiredColumn")       → Column.CUSTOM
"""

import enum
import logging
from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from browser_table.config import Config

logger = logging.getLogger(__name__)


class ColumnTableError(Exception):
    """Raised at import time when the column key table is inconsistent."""


class Column(enum.Enum):
    """A displayable attribute of a card or note.

    Append new members at the end; never remove or reorder.
    """

    CUSTOM = enum.auto()
    QUESTION = enum.auto()
    ANSWER = enum.auto()
    CARD_DECK = enum.auto()
    CARD_DUE = enum.auto()
    CARD_EASE = enum.auto()
    CARD_LAPSES = enum.auto()
    CARD_INTERVAL = enum.auto()
    CARD_MOD = enum.auto()
    CARD_REPS = enum.auto()
    CARD_TEMPLATE = enum.auto()
    NOTE_CARDS = enum.auto()
    NOTE_CREATION = enum.auto()
    NOTE_DUE = enum.auto()
    NOTE_EASE = enum.auto()
    NOTE_FIELD = enum.auto()
    NOTE_INTERVAL = enum.auto()
    NOTE_LAPSES = enum.auto()
    NOTE_MOD = enum.auto()
    NOTE_REPS = enum.auto()
    NOTE_TAGS = enum.auto()
    NOTETYPE = enum.auto()

    @property
    def key(self) -> str:
        return _KEY_BY_COLUMN[self]

    @classmethod
    def from_key(cls, key: str) -> "Column":
        return parse(key)


class EntityKind(enum.Enum):
    """Which browser view a column list belongs to."""
    CARDS = "cards"
    NOTES = "notes"


# ── Key table ────────────────────────────────────────────────────
# Persisted in user preferences. Append only.

_KEY_BY_COLUMN = {
    Column.CUSTOM: "",
    Column.QUESTION: "question",
    Column.ANSWER: "answer",
    Column.CARD_DECK: "deck",
    Column.CARD_DUE: "cardDue",
    Column.CARD_EASE: "cardEase",
    Column.CARD_LAPSES: "cardLapses",
    Column.CARD_INTERVAL: "cardIvl",
    Column.CARD_MOD: "cardMod",
    Column.CARD_REPS: "cardReps",
    Column.CARD_TEMPLATE: "template",
    Column.NOTE_CARDS: "noteCards",
    Column.NOTE_CREATION: "noteCrt",
    Column.NOTE_DUE: "noteDue",
    Column.NOTE_EASE: "noteEase",
    Column.NOTE_FIELD: "noteFld",
    Column.NOTE_INTERVAL: "noteIvl",
    Column.NOTE_LAPSES: "noteLapses",
    Column.NOTE_MOD: "noteMod",
    Column.NOTE_REPS: "noteReps",
    Column.NOTE_TAGS: "noteTags",
    Column.NOTETYPE: "note",
}


def _invert_key_table(table: dict) -> dict:
    """Build key → Column, checking the table is a bijection over Column."""
    missing = [c.name for c in Column if c not in table]
    if missing:
        raise ColumnTableError(f"Columns without a key: {', '.join(missing)}")

    inverse = {}
    for column, key in table.items():
        if key in inverse:
            raise ColumnTableError(
                f"Key '{key}' is shared by {inverse[key].name} "
                f"and {column.name}"
            )
        inverse[key] = column
    return inverse


_COLUMN_BY_KEY = _invert_key_table(_KEY_BY_COLUMN)

# Shown until the user saves a selection of their own
DEFAULT_CARD_COLUMNS = ("noteFld", "template", "cardDue", "deck")
DEFAULT_NOTE_COLUMNS = ("noteFld", "note", "noteCards", "noteTags")


# ── Single keys ──────────────────────────────────────────────────

def key_of(column: Column) -> str:
    """The stable persistence key of a column."""
    return _KEY_BY_COLUMN[column]


def parse(key: str) -> Column:
    """Map a persisted key back to its Column.

    Unknown keys become Column.CUSTOM, so a preference list written by a
    newer or older release still renders.
    """
    return _COLUMN_BY_KEY.get(key, Column.CUSTOM)


def is_known_key(key: str) -> bool:
    """True if key names a column of this release.

    parse() folds unknown keys into CUSTOM; use this to tell a retired
    key apart from a genuine extension column.
    """
    return key in _COLUMN_BY_KEY


# ── Column lists ─────────────────────────────────────────────────

def parse_column_list(keys: Iterable[str]) -> List[Column]:
    """Parse a saved column selection, keeping order and length."""
    keys = list(keys)
    unknown = [k for k in keys if not is_known_key(k)]
    if unknown:
        logger.warning(
            "Unknown browser column keys shown as custom columns: %s",
            ", ".join(repr(k) for k in unknown),
        )
    return [parse(k) for k in keys]


def column_keys(columns: Iterable[Column]) -> List[str]:
    """Serialize an active column list for the preference store."""
    return [key_of(c) for c in columns]


def default_column_keys(kind: EntityKind) -> List[str]:
    """Built-in column selection for a view the user never customised."""
    if kind is EntityKind.CARDS:
        return list(DEFAULT_CARD_COLUMNS)
    return list(DEFAULT_NOTE_COLUMNS)


def active_columns(saved: Optional[Iterable[str]], kind: EntityKind,
                   config: Optional["Config"] = None) -> List[Column]:
    """Columns to show for a view.

    saved is the list loaded from preferences, or None when the user never
    saved one; in that case the configured (or built-in) defaults for kind
    are used. An empty saved list is honoured as-is.
    """
    if saved is None:
        if config is not None:
            saved = config.default_columns(kind)
        else:
            saved = default_column_keys(kind)
    return parse_column_list(saved)
