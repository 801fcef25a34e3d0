"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Final

from delphipy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    ILLEGAL = 0
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer, skipped by the parser)
    # -------------------------
    WHITESPACE = 10
    COMMENT = 11

    # -------------------------
    # Identifiers / keywords
    # -------------------------
    WORD = 20

    # -------------------------
    # Punctuation
    # -------------------------
    SEMICOLON = 40  # ;
    DOT = 41  # .

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.COMMENT)

    @property
    def punctuation(self) -> str | None:
        """Literal character of a punctuation kind, None for everything else."""
        return _PUNCTUATION.get(self)


_PUNCTUATION: Final[dict[TokenKind, str]] = {
    TokenKind.SEMICOLON: ";",
    TokenKind.DOT: ".",
}

PUNCTUATION_KINDS: Final[dict[str, TokenKind]] = {char: kind for kind, char in _PUNCTUATION.items()}
"""Single-character punctuation recognized by the lexer."""


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    UNTERMINATED = 1 << 0  # block comment missing its closing delimiter


# Display text carried by EOF tokens.
EOF_TEXT: Final[str] = "end of file"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or solid)."""

    kind: TokenKind
    range: TextRange
    text: str
    flags: TokenFlags = TokenFlags.NONE

    @property
    def is_unterminated(self) -> bool:
        return bool(self.flags & TokenFlags.UNTERMINATED)

    def is_word(self, word: str) -> bool:
        """Case-insensitive keyword match."""
        return self.kind == TokenKind.WORD and self.text.casefold() == word.casefold()


def render_token(token: Token) -> str:
    """Human-readable form of a token as used in parser messages."""
    match token.kind:
        case TokenKind.SEMICOLON | TokenKind.DOT:
            return f"'{token.kind.punctuation}'"
        case TokenKind.WORD:
            return f"'{token.text}'"
        case TokenKind.EOF:
            return EOF_TEXT
        case TokenKind.COMMENT:
            return "comment"
        case TokenKind.WHITESPACE:
            return "white space"
        case TokenKind.ILLEGAL:
            if token.is_unterminated:
                return "illegal token (unterminated comment)"
            return f"illegal token ('{token.text}')"
        case _:
            raise ValueError(f"Cannot render token kind: {token.kind!r}")
