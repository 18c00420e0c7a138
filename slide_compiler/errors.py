"""
Exception hierarchy and user-facing formatters.

Parsing and validation fail through two disjoint exception types so callers
can tell a grammar problem (single fault, with a source location) apart from
a schema problem (many path-qualified issues gathered in one pass).
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

PathSegment = Union[str, int]


class SlideCompilerError(Exception):
    """Base class for every error raised by slide_compiler."""


class ParseError(SlideCompilerError):
    """
    Lexical or grammatical error in LaTeX-Lite source.

    Always points at the first offending token; parsing stops there.
    """

    def __init__(self, message: str, line: int, column: int):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"Parse error at line {line}, column {column}: {message}")


@dataclass(frozen=True)
class ValidationIssue:
    """One schema violation: where it happened and what was wrong."""
    path: Tuple[PathSegment, ...]
    message: str

    @property
    def dotted_path(self) -> str:
        if not self.path:
            return "root"
        return ".".join(str(segment) for segment in self.path)

    def render(self) -> str:
        return f"{self.dotted_path}: {self.message}"


class ValidationError(SlideCompilerError):
    """Candidate IR does not match the schema. ``issues`` is never empty."""

    def __init__(self, message: str, issues: Sequence[ValidationIssue]):
        if not issues:
            raise ValueError("ValidationError requires at least one issue")
        self.message = message
        self.issues: List[ValidationIssue] = list(issues)
        details = "\n".join(issue.render() for issue in self.issues)
        super().__init__(f"{message}:\n{details}")


class SourceFormatError(SlideCompilerError):
    """Raw text claimed to be JSON but could not be decoded."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(message)


class UnsupportedFormatError(SlideCompilerError):
    """Input file type that is neither IR JSON nor LaTeX-Lite."""


def format_parse_error(error: ParseError) -> str:
    return f"Parse Error\n\nLine {error.line}, Column {error.column}:\n{error.message}"


def format_validation_error(error: ValidationError) -> str:
    """
    Render every issue as a numbered ``Path``/``Error`` pair.

    Args:
        error: The validation failure to display

    Returns:
        Multi-line string suitable for showing to the deck author
    """
    entries = [
        f"{index}. Path: {issue.dotted_path}\n   Error: {issue.message}"
        for index, issue in enumerate(error.issues, 1)
    ]
    return "IR Validation Failed\n\n" + "\n\n".join(entries)


def format_source_error(error: SourceFormatError) -> str:
    return f"JSON Parse Error\n\n{error.message}"


def format_error(error: SlideCompilerError) -> str:
    """Pick the formatter matching the error kind."""
    if isinstance(error, ParseError):
        return format_parse_error(error)
    if isinstance(error, ValidationError):
        return format_validation_error(error)
    if isinstance(error, SourceFormatError):
        return format_source_error(error)
    return str(error)
