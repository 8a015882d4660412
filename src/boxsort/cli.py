from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .buffer import FileBuffer
from .config import REORDER_DELAY_MAX_MS, REORDER_DELAY_MIN_MS, SettingsStore
from .logging_utils import setup_logging
from .reorder import run_reorder_pass


def _add_logging_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log", default=None, help="Also write logs to this file.")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="boxsort", description="Move checked Markdown checkboxes below unchecked ones."
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    r = sub.add_parser("reorder", help="Run one reorder pass over a text file.")
    r.add_argument("--input", "-i", required=True, help="Path to the Markdown/text file")
    r.add_argument("--output", "-o", default=None, help="Write result here instead of in place.")
    r.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the file would be reordered.",
    )
    _add_logging_args(r)

    c = sub.add_parser("config", help="Show or update persisted settings.")
    c.add_argument("action", choices=["show", "set"])
    c.add_argument("--config", "-c", required=True, help="Path to YAML settings file")
    toggle = c.add_mutually_exclusive_group()
    toggle.add_argument("--enable", dest="enable", action="store_true", default=None, help="Enable auto-reorder.")
    toggle.add_argument("--disable", dest="enable", action="store_false", default=None, help="Disable auto-reorder.")
    c.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help=f"Reorder delay in milliseconds ({REORDER_DELAY_MIN_MS}-{REORDER_DELAY_MAX_MS}).",
    )
    _add_logging_args(c)
    return p


def _run_reorder(args: argparse.Namespace) -> int:
    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Input file not found: {input_path}", file=sys.stderr)
        return 1

    buffer = FileBuffer(input_path)
    result = run_reorder_pass(buffer)
    if args.check:
        state = "needs reorder" if result.modified else "ok"
        print(f"{input_path}: {state} ({len(result.patches)}/{result.groups_found} groups)")
        return 1 if result.modified else 0

    if result.modified or args.output is not None:
        out_path = buffer.save(args.output)
        print(f"Written: {out_path} ({len(result.patches)}/{result.groups_found} groups reordered)")
    else:
        print(f"{input_path}: already ordered ({result.groups_found} groups)")
    return 0


def _run_config(args: argparse.Namespace) -> int:
    try:
        store = SettingsStore(args.config)
        if args.action == "set":
            changes: dict[str, object] = {}
            if args.enable is not None:
                changes["enable_auto_reorder"] = bool(args.enable)
            if args.delay_ms is not None:
                changes["reorder_delay_ms"] = int(args.delay_ms)
            store.update(**changes)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    cfg = store.settings
    print(f"enable_auto_reorder: {str(cfg.enable_auto_reorder).lower()}")
    print(f"reorder_delay_ms: {cfg.reorder_delay_ms}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(
        Path(args.log) if args.log else None,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    if args.cmd == "reorder":
        return _run_reorder(args)
    if args.cmd == "config":
        return _run_config(args)

    print(f"Unknown command: {args.cmd}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
