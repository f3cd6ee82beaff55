from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from mc_chat_export import __version__
from mc_chat_export.core.classifier import build_classifier
from mc_chat_export.core.config import ClassifierConfig, configure_logging
from mc_chat_export.core.errors import ChatExportError
from mc_chat_export.core.log_service import get_records
from mc_chat_export.core.models import OutputFormat
from mc_chat_export.core.selection import (
    AllSelector,
    IndexSelector,
    PromptSelector,
    Selector,
    parse_index_spec,
    resolve_selection,
)
from mc_chat_export.render import render_records

logger = logging.getLogger(__name__)


def _parse_selection(s: str) -> IndexSelector:
    try:
        return IndexSelector(frozenset(parse_index_spec(s)))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("must be an integer") from e
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="mc-chat-export",
        description="Extract chat messages from a game log and render them as text, CSV or an image.",
    )
    p.add_argument("-i", "--input", required=True, help="Path to log file (.log or .log.gz)")
    p.add_argument("-o", "--output", required=True, help="Path to output file")
    p.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TXT.value,
        help="Format of output file (default: txt)",
    )
    pick = p.add_mutually_exclusive_group()
    pick.add_argument(
        "--select",
        type=_parse_selection,
        default=None,
        help="Message indices to render, e.g. 0,3,5-7 (default: all)",
    )
    pick.add_argument(
        "--interactive", action="store_true", help="List messages and ask which ones to render"
    )
    p.add_argument(
        "--loose",
        action="store_true",
        help="Also accept any timestamped line containing '<name> ' (may pick up non-chat lines)",
    )
    p.add_argument("--workers", type=_positive_int, default=None, help="Worker threads for parsing")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _selector(args: argparse.Namespace) -> Selector:
    if args.interactive:
        return PromptSelector()
    if args.select is not None:
        return args.select
    return AllSelector()


def run(args: argparse.Namespace) -> Path:
    """Run one extract -> select -> render pass."""
    classifier = build_classifier(ClassifierConfig(include_loose=args.loose))
    records = asyncio.run(
        get_records(Path(args.input), classifier=classifier, max_workers=args.workers)
    )
    logger.info("Found %d chat message(s) in %s", len(records), args.input)

    chosen = _selector(args).select([r.display_text for r in records])
    selected = resolve_selection(chosen, records)
    out = render_records(args.format, selected, Path(args.output))
    print(f"Wrote {len(selected)} message(s) to {out}")
    return out


def main(argv: Sequence[str] | None = None) -> None:
    args = build_arg_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    try:
        run(args)
    except ChatExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)


if __name__ == "__main__":
    main()
