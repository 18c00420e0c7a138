"""
Loading decks from text or files.

This is the boundary the presentation shell calls: it decides whether input
is IR JSON or LaTeX-Lite, runs the matching front end, and always passes the
result through the validator before handing it on.
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from .config import Settings
from .errors import SourceFormatError, UnsupportedFormatError
from .models import SlideDeck
from .parser import parse
from .validator import validate

logger = logging.getLogger(__name__)

FORMATS = ("auto", "json", "latex")

EXTENSION_FORMATS = {
    ".json": "json",
    ".tex": "latex",
    ".txt": "latex",
}


def _decode_json(text: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SourceFormatError(str(exc), exc.lineno, exc.colno) from exc


def load_json(text: str, settings: Optional[Settings] = None) -> SlideDeck:
    """Decode IR JSON text and validate it."""
    return validate(_decode_json(text), settings)


def load_latex(text: str, settings: Optional[Settings] = None) -> SlideDeck:
    """Parse LaTeX-Lite text, then validate the parser's output."""
    return validate(parse(text, settings), settings)


def load_text(text: str, fmt: str = "auto", settings: Optional[Settings] = None) -> SlideDeck:
    """
    Load a deck from in-memory text.

    Args:
        text: Pasted or read document text
        fmt: ``json``, ``latex`` or ``auto``. ``auto`` tries JSON first and
            falls back to LaTeX-Lite when the text is not valid JSON.
        settings: Optional settings forwarded to parser and validator

    Returns:
        A validated :class:`SlideDeck`

    Raises:
        ParseError, ValidationError, SourceFormatError
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format '{fmt}', expected one of {FORMATS}")

    if fmt == "json":
        return load_json(text, settings)
    if fmt == "latex":
        return load_latex(text, settings)

    try:
        candidate = _decode_json(text)
    except SourceFormatError:
        logger.debug("Input is not JSON, parsing as LaTeX-Lite")
        return load_latex(text, settings)
    return validate(candidate, settings)


def load_file(path: Union[str, Path], fmt: str = "auto", settings: Optional[Settings] = None) -> SlideDeck:
    """
    Load a deck from disk, choosing the front end by file extension.

    ``.json`` is IR JSON, ``.tex`` and ``.txt`` are LaTeX-Lite. Other
    extensions are refused unless ``fmt`` names the format explicitly.
    """
    path = Path(path)
    if fmt == "auto":
        suffix = path.suffix.lower()
        if suffix not in EXTENSION_FORMATS:
            raise UnsupportedFormatError(
                f"Unsupported file type: {suffix or '(none)'}. Use .json, .tex, or .txt"
            )
        fmt = EXTENSION_FORMATS[suffix]

    # utf-8-sig drops the byte-order mark some editors write
    text = path.read_text(encoding="utf-8-sig")
    logger.debug("Loading %s as %s", path, fmt)
    return load_text(text, fmt, settings)
