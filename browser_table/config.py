"""
Browser table configuration.

Loaded from a YAML file; every field has a default so a missing file is
fine. BROWSER_TABLE_LOCALE overrides the configured locale.

    locale: de
    catalog_dir: ~/.local/share/browser-table/i18n
    default_card_columns: [noteFld, template, cardDue, deck]
    default_note_columns: [noteFld, note, noteCards, noteTags]
    log_level: INFO
"""

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import List, Optional

import yaml

from browser_table.columns import DEFAULT_CARD_COLUMNS, DEFAULT_NOTE_COLUMNS, EntityKind

logger = logging.getLogger(__name__)

LOCALE_ENV = "BROWSER_TABLE_LOCALE"


class ConfigError(Exception):
    """Raised when a config file exists but cannot be used."""


@dataclass
class Config:
    """Runtime configuration for the browser table layer."""

    locale: str = "en"
    catalog_dir: Optional[str] = None  # None = built-in English only

    # Shown when the user has never saved a column selection
    default_card_columns: List[str] = field(
        default_factory=lambda: list(DEFAULT_CARD_COLUMNS))
    default_note_columns: List[str] = field(
        default_factory=lambda: list(DEFAULT_NOTE_COLUMNS))

    log_level: str = "WARNING"

    def default_columns(self, kind: EntityKind) -> List[str]:
        if kind is EntityKind.CARDS:
            return list(self.default_card_columns)
        return list(self.default_note_columns)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "Config":
        """Load config from YAML, falling back to defaults if there is no file."""
        data = {}
        if path is not None:
            cfg_path = Path(path).expanduser()
            if cfg_path.exists():
                try:
                    with open(cfg_path, "r", encoding="utf-8") as f:
                        data = yaml.safe_load(f) or {}
                except yaml.YAMLError as e:
                    raise ConfigError(f"{cfg_path}: invalid YAML: {e}") from e
                if not isinstance(data, dict):
                    raise ConfigError(f"{cfg_path}: expected a mapping at top level")
            else:
                logger.info("Config file %s not found; using defaults", cfg_path)

        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

        cfg = cls(**{k: v for k, v in data.items() if k in known})

        env_locale = os.environ.get(LOCALE_ENV)
        if env_locale:
            cfg.locale = env_locale
        return cfg
