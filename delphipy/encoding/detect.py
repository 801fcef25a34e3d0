"""Byte-order-mark detection and decoding of Delphi source bytes."""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Final, Protocol


class EncodingError(ValueError):
    """Raised by a decoder that cannot turn bytes into text."""


@dataclass(frozen=True, slots=True)
class DecodedText:
    """Source text plus how it was decoded."""

    text: str
    encoding: str
    had_bom: bool = False


class TextDecoder(Protocol):
    def decode(self, data: bytes) -> DecodedText: ...


# Longer marks first: the UTF-32 LE mark starts with the UTF-16 LE mark.
_BOMS: Final[tuple[tuple[bytes, str], ...]] = (
    (codecs.BOM_UTF32_LE, "utf-32-le"),
    (codecs.BOM_UTF32_BE, "utf-32-be"),
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def detect_bom(data: bytes) -> tuple[str, int] | None:
    """Return `(encoding, bom_length)` for a byte-order mark at the start of `data`."""
    for bom, encoding in _BOMS:
        if data.startswith(bom):
            return encoding, len(bom)
    return None


@dataclass(frozen=True, slots=True)
class DefaultTextDecoder:
    """BOM-aware decoder.

    Without a byte-order mark the bytes must be valid UTF-8, unless a fallback
    code page (typically the Windows ANSI page the file was saved with) is set.
    """

    fallback_encoding: str | None = None

    def decode(self, data: bytes) -> DecodedText:
        detected = detect_bom(data)
        if detected is not None:
            encoding, bom_length = detected
            return DecodedText(_strict_decode(data[bom_length:], encoding), encoding, had_bom=True)

        try:
            return DecodedText(data.decode("utf-8"), "utf-8")
        except UnicodeDecodeError as exc:
            if self.fallback_encoding is None:
                raise EncodingError(f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc

        return DecodedText(_strict_decode(data, self.fallback_encoding), self.fallback_encoding)


def _strict_decode(data: bytes, encoding: str) -> str:
    try:
        return data.decode(encoding)
    except LookupError as exc:
        raise EncodingError(f"unknown codec {encoding!r}") from exc
    except UnicodeDecodeError as exc:
        raise EncodingError(f"not valid {encoding} ({exc.reason} at byte {exc.start})") from exc
