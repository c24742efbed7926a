"""
Localization provider for column labels.

The registry never reaches for a global catalog: it is handed a Translator.
Anything with translate(message_id) and sort_key(label) will do, which is
how tests substitute a deterministic fake.

Each Column has a fixed message identifier (MESSAGE_IDS). Two columns may
share one message, e.g. card and note due dates both read "Due".
"""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Protocol

import yaml

from browser_table.columns import Column
from browser_table.config import Config, ConfigError

logger = logging.getLogger(__name__)


class MissingTranslation(KeyError):
    """Raised when neither the locale nor the fallback catalog has a message."""


class Translator(Protocol):
    """Read-only message lookup for one locale."""

    def translate(self, message_id: str) -> str:
        ...

    def sort_key(self, label: str) -> Any:
        ...


# ── Message identifiers ──────────────────────────────────────────

MESSAGE_IDS = {
    Column.CUSTOM: "browsing-addon",
    Column.QUESTION: "browsing-question",
    Column.ANSWER: "browsing-answer",
    Column.CARD_DECK: "decks-deck",
    Column.CARD_DUE: "statistics-due-date",
    Column.CARD_EASE: "browsing-ease",
    Column.CARD_INTERVAL: "browsing-interval",
    Column.CARD_LAPSES: "scheduling-lapses",
    Column.CARD_MOD: "search-card-modified",
    Column.CARD_REPS: "scheduling-reviews",
    Column.CARD_TEMPLATE: "browsing-card",
    Column.NOTE_CARDS: "editing-cards",
    Column.NOTE_CREATION: "browsing-created",
    Column.NOTE_DUE: "statistics-due-date",
    Column.NOTE_EASE: "browsing-average-ease",
    Column.NOTE_FIELD: "browsing-sort-field",
    Column.NOTE_INTERVAL: "browsing-average-interval",
    Column.NOTE_MOD: "search-note-modified",
    Column.NOTE_LAPSES: "scheduling-lapses",
    Column.NOTE_REPS: "scheduling-reviews",
    Column.NOTE_TAGS: "editing-tags",
    Column.NOTETYPE: "browsing-note",
}


def message_id_for(column: Column) -> str:
    return MESSAGE_IDS[column]


# Built-in fallback catalog
ENGLISH = {
    "browsing-addon": "Add-on",
    "browsing-question": "Question",
    "browsing-answer": "Answer",
    "decks-deck": "Deck",
    "statistics-due-date": "Due",
    "browsing-ease": "Ease",
    "browsing-interval": "Interval",
    "scheduling-lapses": "Lapses",
    "search-card-modified": "Card Modified",
    "scheduling-reviews": "Reviews",
    "browsing-card": "Card",
    "editing-cards": "Cards",
    "browsing-created": "Created",
    "browsing-average-ease": "Avg. Ease",
    "browsing-sort-field": "Sort Field",
    "browsing-average-interval": "Avg. Interval",
    "search-note-modified": "Note Modified",
    "editing-tags": "Tags",
    "browsing-note": "Note",
}


# ── Catalog-backed translator ────────────────────────────────────

class CatalogTranslator:
    """Translator over an in-memory message catalog.

    Messages absent from the locale catalog are looked up in the fallback
    catalog. Labels sort by plain code point order.
    """

    def __init__(self, messages: Mapping[str, str],
                 fallback: Optional[Mapping[str, str]] = None,
                 locale: str = "en"):
        self.locale = locale
        self._messages = dict(messages)
        self._fallback = dict(fallback) if fallback is not None else {}

    def translate(self, message_id: str) -> str:
        if message_id in self._messages:
            return self._messages[message_id]
        if message_id in self._fallback:
            return self._fallback[message_id]
        raise MissingTranslation(
            f"No '{self.locale}' or fallback message for '{message_id}'"
        )

    def sort_key(self, label: str) -> Any:
        return label


def english() -> CatalogTranslator:
    return CatalogTranslator(ENGLISH, locale="en")


def load_catalog(path) -> dict:
    """Read a flat message_id → text mapping from a YAML file.

    Raises ConfigError for invalid YAML or a document that is not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML catalog: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: catalog must be a mapping of message ids")
    return {str(k): str(v) for k, v in data.items()}


def load_translator(config: Config) -> CatalogTranslator:
    """Build the translator for config.locale.

    Reads <catalog_dir>/<locale>.yaml when a catalog directory is
    configured. English fills in whatever the locale file lacks.
    """
    locale = config.locale
    if not config.catalog_dir:
        return CatalogTranslator(ENGLISH, locale=locale)

    path = Path(config.catalog_dir).expanduser() / f"{locale}.yaml"
    if not path.exists():
        if locale != "en":
            logger.warning("No catalog for locale '%s' at %s; using English",
                           locale, path)
        return CatalogTranslator(ENGLISH, locale=locale)

    messages = load_catalog(path)
    missing = sorted(set(MESSAGE_IDS.values()) - set(messages))
    if missing:
        logger.info("Locale '%s' falls back to English for: %s",
                    locale, ", ".join(missing))
    return CatalogTranslator(messages, fallback=ENGLISH, locale=locale)


def verify_catalog(translator: Translator) -> None:
    """Resolve every column label once; raises MissingTranslation on a gap."""
    for column in Column:
        translator.translate(message_id_for(column))
