#!/usr/bin/env python3
"""
Command-line entry point: compile a LaTeX-Lite or IR JSON deck to IR JSON.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import Settings
from .errors import SlideCompilerError, format_error
from .loader import FORMATS, load_file
from .models import IR_SCHEMA_VERSION
from .outline import outline

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="slidec", description="Compile a LaTeX-Lite or IR JSON slide deck to validated IR JSON.")
    p.add_argument("source", type=Path, help="Deck file (.tex, .txt or .json)")
    p.add_argument("--output", "-o", type=Path, help="Write IR JSON here instead of stdout")
    p.add_argument("--format", "-f", choices=FORMATS, default="auto", help="Input format (default: from file extension)")
    p.add_argument("--outline", action="store_true", help="Print a slide outline instead of IR JSON")
    p.add_argument("--strict-params", action="store_true", help="Reject malformed [animate=...] equation parameters")
    p.add_argument("--unique-ids", action="store_true", help="Reject decks whose slide ids repeat")
    p.add_argument("--debug", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__} (IR schema {IR_SCHEMA_VERSION})")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Run the compiler; returns the process exit code."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(levelname)s  %(message)s",
    )

    settings = Settings()
    if args.strict_params:
        settings.strict_params = True
    if args.unique_ids:
        settings.unique_ids = True

    if not args.source.exists():
        logger.error("Deck file '%s' not found", args.source)
        return 1

    try:
        deck = load_file(args.source, fmt=args.format, settings=settings)
    except SlideCompilerError as exc:
        print(format_error(exc), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read deck file '%s': %s", args.source, exc)
        return 1

    rendered = outline(deck) if args.outline else deck.to_json()

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered + "\n", encoding="utf-8")
        logger.info("Wrote %d slides to %s", len(deck.slides), args.output)
    else:
        print(rendered)

    return 0


if __name__ == "__main__":
    sys.exit(main())
