"""Typed result of a skeleton parse."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FileKind(StrEnum):
    """Structural kind a Delphi source file declares with its first keyword."""

    PROGRAM = "program"  # .dpr files
    LIBRARY = "library"  # .dpr files as well
    UNIT = "unit"  # .pas files
    PACKAGE = "package"  # .dpk files

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]

    @staticmethod
    def from_keyword(text: str) -> FileKind | None:
        """Case-insensitive keyword lookup; None when `text` is not one of the four keywords."""
        try:
            return FileKind(text.casefold())
        except ValueError:
            return None


_EXTENSIONS: dict[FileKind, str] = {
    FileKind.PROGRAM: ".dpr",
    FileKind.LIBRARY: ".dpr",
    FileKind.UNIT: ".pas",
    FileKind.PACKAGE: ".dpk",
}

DELPHI_SOURCE_EXTENSIONS: frozenset[str] = frozenset(_EXTENSIONS.values())


def is_identifier(text: str) -> bool:
    """Check `text` against the lexer's word grammar."""
    if not text or not (text[0].isalpha() or text[0] == "_"):
        return False
    return all(ch.isalpha() or ch.isdecimal() or ch == "_" for ch in text[1:])


@dataclass(frozen=True, slots=True)
class DelphiFile:
    """Kind and name declared by a Delphi source file."""

    kind: FileKind
    name: str

    def __post_init__(self):
        if not is_identifier(self.name):
            raise ValueError(f"Invalid {self.kind} name: {self.name!r}")
