"""Test LaTeX-Lite tokenization."""

from slide_compiler.tokenizer import Token, TokenKind, tokenize


def kinds(tokens):
    return [t.kind for t in tokens]


def test_scenario_tokens_and_positions():
    """Commands, braces, text and newlines carry line/column."""
    tokens = tokenize("\\title{T}\n\\slide{S1}{x}")

    assert kinds(tokens) == [
        TokenKind.COMMAND, TokenKind.LBRACE, TokenKind.TEXT, TokenKind.RBRACE,
        TokenKind.NEWLINE,
        TokenKind.COMMAND, TokenKind.LBRACE, TokenKind.TEXT, TokenKind.RBRACE,
        TokenKind.LBRACE, TokenKind.TEXT, TokenKind.RBRACE,
        TokenKind.EOF,
    ]
    assert tokens[0].value == "title"
    assert (tokens[0].line, tokens[0].column) == (1, 1)
    assert (tokens[2].value, tokens[2].column) == ("T", 8)
    assert (tokens[4].line, tokens[4].column) == (1, 10)
    assert (tokens[5].value, tokens[5].line, tokens[5].column) == ("slide", 2, 1)
    assert (tokens[7].value, tokens[7].column) == ("S1", 8)
    assert (tokens[-1].line, tokens[-1].column) == (2, 14)


def test_eof_always_present_exactly_once():
    for source in ["", "   ", "\\slide", "text only", "{[]}\n"]:
        tokens = tokenize(source)
        assert tokens[-1].kind is TokenKind.EOF
        assert kinds(tokens).count(TokenKind.EOF) == 1


def test_empty_source():
    tokens = tokenize("")
    assert tokens == [Token(TokenKind.EOF, "", 1, 1, 0, 0)]


def test_text_is_trimmed_but_keeps_inner_spacing():
    tokens = tokenize("   hello   world  {")
    assert tokens[0].kind is TokenKind.TEXT
    assert tokens[0].value == "hello   world"
    assert tokens[0].column == 4
    assert tokens[1].kind is TokenKind.LBRACE


def test_whitespace_only_run_yields_no_token():
    tokens = tokenize("\f\v")
    assert kinds(tokens) == [TokenKind.EOF]


def test_command_name_is_letters_only():
    tokens = tokenize("\\equation2")
    assert tokens[0].kind is TokenKind.COMMAND
    assert tokens[0].value == "equation"
    assert tokens[1].kind is TokenKind.TEXT
    assert tokens[1].value == "2"


def test_bare_backslash_gives_empty_command():
    tokens = tokenize("abc \\")
    assert kinds(tokens) == [TokenKind.TEXT, TokenKind.COMMAND, TokenKind.EOF]
    assert tokens[1].value == ""
    assert tokens[1].literal == "\\"


def test_brackets_and_text_inside():
    tokens = tokenize("[animate=reveal]")
    assert kinds(tokens) == [TokenKind.LBRACKET, TokenKind.TEXT, TokenKind.RBRACKET, TokenKind.EOF]
    assert tokens[1].value == "animate=reveal"


def test_newline_resets_column():
    tokens = tokenize("a\n\n  b")
    assert [(t.kind, t.line, t.column) for t in tokens] == [
        (TokenKind.TEXT, 1, 1),
        (TokenKind.NEWLINE, 1, 2),
        (TokenKind.NEWLINE, 2, 1),
        (TokenKind.TEXT, 3, 3),
        (TokenKind.EOF, 3, 4),
    ]


def test_carriage_returns_are_skipped():
    tokens = tokenize("\\note\r\n{x}")
    assert kinds(tokens) == [
        TokenKind.COMMAND, TokenKind.NEWLINE, TokenKind.LBRACE,
        TokenKind.TEXT, TokenKind.RBRACE, TokenKind.EOF,
    ]


def test_start_position_offsets_line_and_column():
    """Nested scans report positions in the enclosing document."""
    tokens = tokenize("x\n\\y", line=5, column=11)
    assert (tokens[0].line, tokens[0].column) == (5, 11)
    assert (tokens[2].line, tokens[2].column) == (6, 1)


def test_offsets_slice_back_to_source():
    source = "\\proof{a b}"
    tokens = tokenize(source)
    for token in tokens[:-1]:
        assert source[token.offset:token.end].strip() == token.literal
