"""
Slide Compiler Package

Compiles LaTeX-Lite source or IR JSON into a validated slide deck IR.
"""
from .errors import (
    ParseError,
    SlideCompilerError,
    SourceFormatError,
    UnsupportedFormatError,
    ValidationError,
    ValidationIssue,
    format_parse_error,
    format_validation_error,
)
from .loader import load_file, load_text
from .models import IR_SCHEMA_VERSION, SlideDeck, SlideNode
from .parser import parse
from .tokenizer import tokenize
from .validator import validate

__version__ = "0.1.0"

__all__ = [
    "IR_SCHEMA_VERSION",
    "ParseError",
    "SlideCompilerError",
    "SlideDeck",
    "SlideNode",
    "SourceFormatError",
    "UnsupportedFormatError",
    "ValidationError",
    "ValidationIssue",
    "format_parse_error",
    "format_validation_error",
    "load_file",
    "load_text",
    "parse",
    "tokenize",
    "validate",
]
