"""
Tokenizer for the LaTeX-Lite dialect.

Turns raw source into a flat list of tokens with line/column positions.
Tokenizing never fails: anything that is not a command, delimiter or newline
is folded into TEXT and judged later by the parser.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List


class TokenKind(Enum):
    COMMAND = "COMMAND"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"
    TEXT = "TEXT"
    NEWLINE = "NEWLINE"
    EOF = "END-OF-INPUT"


SINGLE_CHAR_TOKENS = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "\n": TokenKind.NEWLINE,
}

# Characters that end a TEXT run.
TEXT_STOP_CHARS = frozenset("\\{}[]\n")

# Skipped between tokens; newlines are tokens of their own.
WHITESPACE = frozenset(" \t\r")


@dataclass(frozen=True)
class Token:
    """
    One lexical unit.

    ``offset``/``end`` delimit the token in the string it was scanned from,
    which lets the parser slice brace groups out of the source verbatim.
    """
    kind: TokenKind
    value: str
    line: int
    column: int
    offset: int = 0
    end: int = 0

    @property
    def literal(self) -> str:
        """Source text this token stands for."""
        if self.kind is TokenKind.COMMAND:
            return "\\" + self.value
        return self.value


class Tokenizer:
    """
    Single left-to-right scanner over one source string.

    Each instance owns its cursor; nested slide bodies get their own
    instance. ``line``/``column`` let a nested scan report positions in the
    enclosing document.
    """

    def __init__(self, source: str, line: int = 1, column: int = 1):
        self.source = source
        self.pos = 0
        self.line = line
        self.column = column

    def _peek(self) -> str:
        if self.pos < len(self.source):
            return self.source[self.pos]
        return ""

    def _advance(self) -> str:
        char = self.source[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return char

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.source) and self.source[self.pos] in WHITESPACE:
            self._advance()

    def _read_command(self) -> str:
        self._advance()  # backslash
        start = self.pos
        while self.pos < len(self.source):
            char = self.source[self.pos]
            if not (char.isascii() and char.isalpha()):
                break
            self._advance()
        return self.source[start:self.pos]

    def _read_text(self) -> str:
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] not in TEXT_STOP_CHARS:
            self._advance()
        return self.source[start:self.pos].strip()

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []

        while self.pos < len(self.source):
            self._skip_whitespace()
            if self.pos >= len(self.source):
                break

            char = self._peek()
            line, column, start = self.line, self.column, self.pos

            if char == "\\":
                name = self._read_command()
                tokens.append(Token(TokenKind.COMMAND, name, line, column, start, self.pos))
            elif char in SINGLE_CHAR_TOKENS:
                self._advance()
                tokens.append(Token(SINGLE_CHAR_TOKENS[char], char, line, column, start, self.pos))
            else:
                text = self._read_text()
                # All-whitespace runs (e.g. a lone form feed) produce nothing
                if text:
                    tokens.append(Token(TokenKind.TEXT, text, line, column, start, self.pos))

        tokens.append(Token(TokenKind.EOF, "", self.line, self.column, self.pos, self.pos))
        return tokens


def tokenize(source: str, line: int = 1, column: int = 1) -> List[Token]:
    """
    Scan ``source`` into tokens terminated by exactly one EOF token.

    Args:
        source: LaTeX-Lite text
        line: Line number of the first character (for nested scans)
        column: Column number of the first character

    Returns:
        List of tokens, the last one always of kind ``TokenKind.EOF``
    """
    return Tokenizer(source, line=line, column=column).tokenize()
