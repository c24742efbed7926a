"""
Tests for Config loading and the command-line entry point.
"""

import os
import sys
import io
import json
import tempfile
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from browser_table.cli import main
from browser_table.columns import EntityKind
from browser_table.config import Config, ConfigError, LOCALE_ENV


@pytest.fixture
def tmpdir_path():
    with tempfile.TemporaryDirectory() as d:
        yield d


def _write(path, text):
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


@pytest.fixture(autouse=True)
def _no_locale_env(monkeypatch):
    monkeypatch.delenv(LOCALE_ENV, raising=False)


class TestConfig:

    def test_defaults(self):
        cfg = Config.load()
        assert cfg.locale == "en"
        assert cfg.catalog_dir is None
        assert cfg.default_columns(EntityKind.CARDS) == \
            ["noteFld", "template", "cardDue", "deck"]
        assert cfg.default_columns(EntityKind.NOTES) == \
            ["noteFld", "note", "noteCards", "noteTags"]

    def test_missing_file_is_defaults(self, tmpdir_path):
        cfg = Config.load(os.path.join(tmpdir_path, "nope.yaml"))
        assert cfg == Config()

    def test_load_yaml(self, tmpdir_path):
        path = _write(os.path.join(tmpdir_path, "config.yaml"),
                      "locale: ja\ndefault_note_columns: [noteFld, noteTags]\n")
        cfg = Config.load(path)
        assert cfg.locale == "ja"
        assert cfg.default_columns(EntityKind.NOTES) == ["noteFld", "noteTags"]

    def test_empty_file(self, tmpdir_path):
        path = _write(os.path.join(tmpdir_path, "config.yaml"), "")
        assert Config.load(path) == Config()

    def test_unknown_keys_ignored(self, tmpdir_path, caplog):
        path = _write(os.path.join(tmpdir_path, "config.yaml"),
                      "locale: de\nfavourite_color: blue\n")
        cfg = Config.load(path)
        assert cfg.locale == "de"
        assert "favourite_color" in caplog.text

    def test_invalid_yaml_raises(self, tmpdir_path):
        path = _write(os.path.join(tmpdir_path, "config.yaml"), "locale: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            Config.load(path)

    def test_non_mapping_raises(self, tmpdir_path):
        path = _write(os.path.join(tmpdir_path, "config.yaml"), "- en\n")
        with pytest.raises(ConfigError, match="mapping"):
            Config.load(path)

    def test_env_overrides_locale(self, monkeypatch):
        monkeypatch.setenv(LOCALE_ENV, "pt_BR")
        assert Config.load().locale == "pt_BR"

    def test_default_columns_returns_copy(self):
        cfg = Config()
        cfg.default_columns(EntityKind.CARDS).append("x")
        assert "x" not in cfg.default_card_columns


class TestCLI:

    def test_columns_cards(self):
        out = io.StringIO()
        assert main(["columns", "cards"], out=out) == 0
        data = json.loads(out.getvalue())
        assert len(data) == 15
        assert data[0]["label"] == "Answer"
        assert data[0]["isSortable"] is False

    def test_columns_notes(self):
        out = io.StringIO()
        assert main(["columns", "notes"], out=out) == 0
        keys = [c["key"] for c in json.loads(out.getvalue())]
        assert "noteCards" in keys
        assert "question" not in keys

    def test_parse(self):
        out = io.StringIO()
        assert main(["parse", "question", "bogusKey", "cardDue"], out=out) == 0
        lines = out.getvalue().splitlines()
        assert lines == [
            "'question' -> QUESTION",
            "'bogusKey' -> CUSTOM  (unknown)",
            "'cardDue' -> CARD_DUE",
        ]

    def test_locale_after_subcommand(self, tmpdir_path):
        _write(os.path.join(tmpdir_path, "de.yaml"), "browsing-answer: Antwort\n")
        cfg_path = _write(os.path.join(tmpdir_path, "config.yaml"),
                          f"catalog_dir: {tmpdir_path}\n")
        out = io.StringIO()
        assert main(["columns", "cards", "--config", cfg_path,
                     "--locale", "de"], out=out) == 0
        labels = [c["label"] for c in json.loads(out.getvalue())]
        assert "Antwort" in labels

    def test_locale_before_subcommand(self, tmpdir_path):
        _write(os.path.join(tmpdir_path, "de.yaml"), "browsing-answer: Antwort\n")
        cfg_path = _write(os.path.join(tmpdir_path, "config.yaml"),
                          f"catalog_dir: {tmpdir_path}\n")
        out = io.StringIO()
        assert main(["--config", cfg_path, "--locale", "de",
                     "columns", "cards"], out=out) == 0
        labels = [c["label"] for c in json.loads(out.getvalue())]
        assert "Antwort" in labels

    def test_locale_en_after_subcommand(self):
        out = io.StringIO()
        assert main(["columns", "cards", "--locale", "en"], out=out) == 0
        assert len(json.loads(out.getvalue())) == 15

    def test_bad_kind_exits(self):
        with pytest.raises(SystemExit):
            main(["columns", "decks"], out=io.StringIO())
