"""Lexer."""

from collections.abc import Iterator

from delphipy.lexer.tokens import EOF_TEXT, PUNCTUATION_KINDS, Token, TokenFlags, TokenKind
from delphipy.text import TextRange, TextSize, slice_text_range


class Lexer:
    """Pull-based lexer over a string of code points.

    Emits trivia (whitespace, comments) and solid tokens one at a time; the only
    state is the cursor position.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        start = TextSize.from_int(self._position)

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(start), EOF_TEXT)

        kind, flags = self._lex_token()
        token_range = TextRange.new(start, TextSize.from_int(self._position))
        return Token(kind, token_range, slice_text_range(self._source, token_range), flags)

    def __iter__(self) -> Iterator[Token]:
        """Lazily yield tokens up to and including the first EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def lex(self) -> list[Token]:
        return list(self)

    def _lex_token(self) -> tuple[TokenKind, TokenFlags]:
        ch = self._current_char()

        if ch.isspace():
            self._consume_whitespaces()
            return TokenKind.WHITESPACE, TokenFlags.NONE

        if ch.isalpha() or ch == "_":
            self._lex_word()
            return TokenKind.WORD, TokenFlags.NONE

        if ch == "/" and self._peek_char() == "/":
            self._lex_line_comment()
            return TokenKind.COMMENT, TokenFlags.NONE
        if ch == "{":
            return self._lex_block_comment(opener_len=1, closer="}")
        if ch == "(" and self._peek_char() == "*":
            return self._lex_block_comment(opener_len=2, closer="*)")

        kind = PUNCTUATION_KINDS.get(ch)
        if kind is not None:
            self._advance(1)
            return kind, TokenFlags.NONE

        # Anything else is one illegal code point; always advance.
        self._advance(1)
        return TokenKind.ILLEGAL, TokenFlags.NONE

    def _lex_word(self) -> None:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalpha() or ch.isdecimal() or ch == "_":
                self._advance(1)
                continue
            break

    def _lex_line_comment(self) -> None:
        # Consume until end of line, do not consume the newline itself.
        self._advance(2)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)

    def _lex_block_comment(self, *, opener_len: int, closer: str) -> tuple[TokenKind, TokenFlags]:
        # Block comments do not nest.
        self._advance(opener_len)
        end = self._source.find(closer, self._position)
        if end < 0:
            self._position = len(self._source)
            return TokenKind.ILLEGAL, TokenFlags.UNTERMINATED
        self._position = end + len(closer)
        return TokenKind.COMMENT, TokenFlags.NONE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof and self._current_char().isspace():
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return ""
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return ""
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} flags={tok.flags!r} text={tok.text!r}")
