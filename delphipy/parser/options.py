"""Parser configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling decoding and grammar strictness."""

    fallback_encoding: str | None = None
    reject_trailing_content: bool = False
