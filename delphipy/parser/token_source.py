"""Token source that hides trivia from the parser."""

from delphipy.lexer import Lexer, Token, TokenKind
from delphipy.text import TextRange


class TokenSource:
    """Bridge between lexer and parser that skips whitespace and comments."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current = self._next_solid_token()

    @property
    def current(self) -> Token:
        return self._current

    @property
    def current_range(self) -> TextRange:
        return self._current.range

    def bump(self) -> None:
        if self._current.kind != TokenKind.EOF:
            self._current = self._next_solid_token()

    def _next_solid_token(self) -> Token:
        token = self._lexer.next_token()
        while token.kind.is_trivia:
            token = self._lexer.next_token()
        return token
