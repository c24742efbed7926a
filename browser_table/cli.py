"""
Command-line inspection of browser columns.

Run:  python -m browser_table columns cards --locale en
      python -m browser_table parse question bogusKey cardDue
"""

import argparse
import json
import logging
import sys

from browser_table.columns import EntityKind, is_known_key, parse_column_list
from browser_table.config import Config
from browser_table.i18n import load_translator, verify_catalog
from browser_table.registry import ColumnRegistry
from wire.json_codec import descriptor_to_dict

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    # Accepted before or after the subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=argparse.SUPPRESS, help="Path to config.yaml")
    common.add_argument("--locale", default=argparse.SUPPRESS,
                        help="Override the configured locale")

    parser = argparse.ArgumentParser(prog="browser_table", parents=[common])
    sub = parser.add_subparsers(dest="command", required=True)

    cols = sub.add_parser("columns", parents=[common],
                          help="List all columns of a view, sorted by label")
    cols.add_argument("kind", choices=[k.value for k in EntityKind])

    p = sub.add_parser("parse", parents=[common], help="Parse saved column keys")
    p.add_argument("keys", nargs="*")
    return parser


def main(argv=None, out=None) -> int:
    args = _build_parser().parse_args(argv)
    out = out or sys.stdout

    cfg = Config.load(getattr(args, "config", None))
    locale = getattr(args, "locale", None)
    if locale:
        cfg.locale = locale

    logging.basicConfig(
        level=getattr(logging, str(cfg.log_level).upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("locale=%s catalog_dir=%s", cfg.locale, cfg.catalog_dir)

    if args.command == "columns":
        translator = load_translator(cfg)
        verify_catalog(translator)
        registry = ColumnRegistry(translator)
        columns = registry.columns_for(EntityKind(args.kind))
        json.dump([descriptor_to_dict(d) for d in columns], out,
                  ensure_ascii=False, indent=2)
        out.write("\n")
        return 0

    parsed = parse_column_list(args.keys)
    for key, column in zip(args.keys, parsed):
        marker = "" if is_known_key(key) else "  (unknown)"
        out.write(f"{key!r} -> {column.name}{marker}\n")
    return 0
