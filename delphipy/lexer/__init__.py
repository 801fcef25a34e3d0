"""Lexer."""

from delphipy.lexer.lexer import Lexer, dump_tokens
from delphipy.lexer.tokens import (
    EOF_TEXT,
    PUNCTUATION_KINDS,
    Token,
    TokenFlags,
    TokenKind,
    render_token,
)

__all__ = [
    "EOF_TEXT",
    "PUNCTUATION_KINDS",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
    "render_token",
]
