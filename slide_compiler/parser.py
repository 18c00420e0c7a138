"""
Recursive-descent parser for LaTeX-Lite.

Grammar, top level::

    \\title{text}             deck title, last one wins
    \\slide{title}{content}   one slide; content is parsed again as a
                             flat list of content commands and bare text

Inside a slide body only ``definition``, ``theorem``, ``proof``,
``equation``, ``figure``, ``algorithm`` and ``note`` are accepted. Any other
command is an error. Parsing is all-or-nothing: the first violation raises
:class:`ParseError` with the offending token's position.
"""
import logging
import re
from collections import Counter
from typing import Callable, Dict, List, Optional, Tuple

from .config import Settings, settings as default_settings
from .errors import ParseError
from .models import (
    ANIMATION_MODES,
    AlgorithmNode,
    DeckMeta,
    DefinitionNode,
    EquationNode,
    FigureNode,
    NoteNode,
    ProofNode,
    SlideDeck,
    SlideNode,
    TextNode,
    TheoremNode,
)
from .tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

ANIMATE_KEY = "animate"


def slugify_title(title: str) -> str:
    """
    Derive a slide id from its title.

    ``"Mean Value Theorem!"`` becomes ``"slide-mean-value-theorem"``. Titles
    that normalize to the same text give the same id.
    """
    slug = re.sub(r"\s+", "-", title.lower())
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return f"slide-{slug}"


def parse_animate_param(params: str) -> Optional[str]:
    """
    Read an equation's bracket parameter of the form ``animate=<mode>``.

    Returns:
        The animation mode, or ``None`` when ``params`` is not exactly one
        ``animate`` key followed by one of the known modes
    """
    key, sep, value = params.partition("=")
    if not sep or key != ANIMATE_KEY:
        return None
    if value not in ANIMATION_MODES:
        return None
    return value


def split_steps(blob: str) -> List[str]:
    """Split a comma-delimited steps blob, dropping empty pieces."""
    return [step.strip() for step in blob.split(",") if step.strip()]


class Parser:
    """
    Parser over one token stream.

    Args:
        tokens: Output of :func:`tokenize` for ``source``
        source: The exact string the tokens were scanned from
        settings: Strictness settings; defaults to the module-level settings
    """

    def __init__(self, tokens: List[Token], source: str, settings: Optional[Settings] = None):
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("token stream must end with an EOF token")
        self.tokens = tokens
        self.source = source
        self.settings = settings or default_settings
        self.pos = 0

        self._content_parsers: Dict[str, Callable[[Token], object]] = {
            "definition": self._parse_definition,
            "theorem": self._parse_theorem,
            "proof": self._parse_proof,
            "equation": self._parse_equation,
            "figure": self._parse_figure,
            "algorithm": self._parse_algorithm,
            "note": self._parse_note,
        }

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.tokens[-1]

    def _advance(self) -> Token:
        token = self._current()
        if token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def _expect(self, kind: TokenKind) -> Token:
        token = self._current()
        if token.kind is not kind:
            raise ParseError(f"Expected {kind.value}, got {token.kind.value}", token.line, token.column)
        return self._advance()

    # ------------------------------------------------------------------
    # Argument groups
    # ------------------------------------------------------------------

    def _read_brace_span(self) -> Tuple[Token, Token]:
        """
        Consume a ``{...}`` group, allowing balanced braces inside it.

        Returns:
            The opening and the matching closing brace tokens
        """
        opening = self._expect(TokenKind.LBRACE)
        depth = 1

        while True:
            token = self._current()
            if token.kind is TokenKind.EOF:
                raise ParseError(
                    f"Unexpected end of input: brace group opened at line {opening.line}, "
                    f"column {opening.column} is never closed",
                    token.line,
                    token.column,
                )
            self._advance()
            if token.kind is TokenKind.LBRACE:
                depth += 1
            elif token.kind is TokenKind.RBRACE:
                depth -= 1
                if depth == 0:
                    return opening, token

    def _read_brace_content(self) -> str:
        opening, closing = self._read_brace_span()
        return self.source[opening.end:closing.offset].strip()

    def _read_bracket_content(self) -> str:
        opening = self._expect(TokenKind.LBRACKET)
        while self._current().kind not in (TokenKind.RBRACKET, TokenKind.EOF):
            self._advance()
        closing = self._expect(TokenKind.RBRACKET)
        return self.source[opening.end:closing.offset].strip()

    # ------------------------------------------------------------------
    # Content nodes
    # ------------------------------------------------------------------

    def _parse_definition(self, token: Token) -> DefinitionNode:
        title = self._read_brace_content()
        body = self._read_brace_content()
        return DefinitionNode(type="definition", title=title, body=body)

    def _parse_theorem(self, token: Token) -> TheoremNode:
        title = self._read_brace_content()
        body = self._read_brace_content()
        return TheoremNode(type="theorem", title=title, body=body)

    def _parse_proof(self, token: Token) -> ProofNode:
        return ProofNode(type="proof", body=self._read_brace_content())

    def _parse_equation(self, token: Token) -> EquationNode:
        animate = "none"

        if self._current().kind is TokenKind.LBRACKET:
            bracket = self._current()
            params = self._read_bracket_content()
            mode = parse_animate_param(params)
            if mode is not None:
                animate = mode
            elif self.settings.strict_params:
                raise ParseError(
                    f"Invalid equation parameter '{params}': expected animate=none|reveal|highlight",
                    bracket.line,
                    bracket.column,
                )
            else:
                logger.warning(
                    "Ignoring equation parameter '%s' at line %d, column %d",
                    params, bracket.line, bracket.column,
                )

        latex = self._read_brace_content()
        return EquationNode(type="equation", latex=latex, animate=animate)

    def _parse_figure(self, token: Token) -> FigureNode:
        return FigureNode(type="figure", ref=self._read_brace_content())

    def _parse_algorithm(self, token: Token) -> AlgorithmNode:
        name = self._read_brace_content()
        steps = split_steps(self._read_brace_content())
        return AlgorithmNode(type="algorithm", name=name, steps=steps)

    def _parse_note(self, token: Token) -> NoteNode:
        return NoteNode(type="note", body=self._read_brace_content())

    def parse_content(self) -> list:
        """Parse the whole stream as a flat list of content nodes."""
        nodes = []

        while self._current().kind is not TokenKind.EOF:
            token = self._advance()

            if token.kind is TokenKind.COMMAND:
                handler = self._content_parsers.get(token.value)
                if handler is None:
                    raise ParseError(f"Unknown command: \\{token.value}", token.line, token.column)
                nodes.append(handler(token))
            elif token.kind is TokenKind.TEXT:
                if token.value.strip():
                    nodes.append(TextNode(type="text", content=token.value))
            # newlines and stray delimiters carry no content

        return nodes

    # ------------------------------------------------------------------
    # Top level
    # ------------------------------------------------------------------

    def _parse_slide(self, token: Token) -> SlideNode:
        title = self._read_brace_content()
        opening, closing = self._read_brace_span()

        # The body is scanned again on its own, positioned where it starts
        # in this source so nested errors keep absolute line/column values.
        body = self.source[opening.end:closing.offset]
        body_tokens = tokenize(body, line=opening.line, column=opening.column + 1)
        content = Parser(body_tokens, body, self.settings).parse_content()

        return SlideNode(type="slide", id=slugify_title(title), title=title, content=content)

    def parse(self) -> SlideDeck:
        """Parse a complete document into a :class:`SlideDeck`."""
        slides: List[SlideNode] = []
        deck_title = self.settings.default_title

        while self._current().kind is not TokenKind.EOF:
            token = self._current()

            if token.kind is TokenKind.COMMAND:
                self._advance()
                if token.value == "slide":
                    slides.append(self._parse_slide(token))
                elif token.value == "title":
                    deck_title = self._read_brace_content()
                else:
                    raise ParseError(
                        f"Unexpected command at top level: \\{token.value}. "
                        "Only \\slide and \\title are allowed.",
                        token.line,
                        token.column,
                    )
            elif token.kind is TokenKind.NEWLINE:
                self._advance()
            elif token.kind is TokenKind.TEXT:
                raise ParseError(f"Unexpected text at top level: '{token.value}'", token.line, token.column)
            else:
                raise ParseError(f"Unexpected token at top level: {token.kind.value}", token.line, token.column)

        duplicates = [slide_id for slide_id, count in Counter(s.id for s in slides).items() if count > 1]
        if duplicates:
            logger.warning("Slide titles produce duplicate ids: %s", ", ".join(duplicates))

        logger.debug("Parsed deck '%s' with %d slides", deck_title, len(slides))
        return SlideDeck(meta=DeckMeta(title=deck_title), slides=slides)


def parse(source: str, settings: Optional[Settings] = None) -> SlideDeck:
    """
    Parse LaTeX-Lite source text into a candidate IR deck.

    Args:
        source: LaTeX-Lite document
        settings: Optional strictness/default settings

    Returns:
        The parsed :class:`SlideDeck` (still to be run through the validator)

    Raises:
        ParseError: On the first grammar violation
    """
    return Parser(tokenize(source), source, settings).parse()
