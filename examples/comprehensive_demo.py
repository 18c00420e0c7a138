#!/usr/bin/env python3
"""
Comprehensive Feature Demo - Slide Compiler
===========================================

Demonstrates both front ends:
• LaTeX-Lite source parsed, then re-validated
• IR JSON validated directly (the only way to set author/date/alt/caption)
• Parse and validation errors formatted for display

Run this file to print an outline of each deck and the resulting IR JSON.
"""

import json
import logging
import sys
from pathlib import Path

# Add the project root to the path so we can import our modules
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from slide_compiler import SlideCompilerError, load_file, load_text
from slide_compiler.errors import format_error
from slide_compiler.models import EXAMPLE_SLIDE_DECK
from slide_compiler.outline import outline

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(message)s')
logger = logging.getLogger(__name__)


def main():
    tex_path = Path(__file__).parent / "calculus.tex"
    deck = load_file(tex_path)
    logger.info("Parsed %s: %d slides", tex_path.name, len(deck.slides))
    print(outline(deck))
    print()

    json_deck = load_text(json.dumps(EXAMPLE_SLIDE_DECK))
    print(outline(json_deck))
    print()

    # Broken inputs, one of each error kind
    broken_inputs = [
        ("\\slide{Oops}{\\lemma{x}}", "latex"),
        ('{"meta": {}, "slides": [{"type": "bogus"}]}', "json"),
        ('{"meta": ', "json"),
    ]
    for broken, fmt in broken_inputs:
        try:
            load_text(broken, fmt=fmt)
        except SlideCompilerError as exc:
            print(format_error(exc))
            print()

    print(deck.to_json())


if __name__ == "__main__":
    main()
