"""Single-pass parser core."""

from delphipy.diagnostics import Diagnostic, DiagnosticSpec, diagnostic_from_spec
from delphipy.lexer import Token, TokenKind, render_token
from delphipy.parser.options import ParserOptions
from delphipy.parser.token_source import TokenSource
from delphipy.text import TextRange


class Parser:
    """Parser over solid tokens.

    There is no recovery: grammar routines stop at the first `error` call and
    the parser records at most one diagnostic.
    """

    def __init__(
        self,
        source: TokenSource,
        *,
        source_name: str = "<memory>",
        options: ParserOptions | None = None,
    ) -> None:
        self._source = source
        self._source_name = source_name
        self._options = options or ParserOptions()
        self._diagnostics: list[Diagnostic] = []

    @property
    def source_name(self) -> str:
        return self._source_name

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> Token:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    def at(self, kind: TokenKind) -> bool:
        return self.current.kind == kind

    def at_word(self, word: str) -> bool:
        return self.current.is_word(word)

    def bump(self) -> None:
        self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.at(kind):
            self.bump()
            return True
        return False

    def eat_word(self, word: str) -> bool:
        if self.at_word(word):
            self.bump()
            return True
        return False

    def error(self, spec: DiagnosticSpec, **details: str) -> None:
        """Report `spec` at the current token; `found` is filled in from it."""
        if self._diagnostics:
            raise RuntimeError("Parser already reported an error; grammar routines must stop at the first one")
        if "{found}" in spec.message:
            details.setdefault("found", render_token(self.current))
        self._diagnostics.append(diagnostic_from_spec(spec, self.current_range, **details))

    def has_error(self) -> bool:
        return bool(self._diagnostics)

    def finish(self) -> list[Diagnostic]:
        return self._diagnostics
