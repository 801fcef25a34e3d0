"""Source encoding detection."""

from delphipy.encoding.detect import (
    DecodedText,
    DefaultTextDecoder,
    EncodingError,
    TextDecoder,
    detect_bom,
)

__all__ = [
    "DecodedText",
    "DefaultTextDecoder",
    "EncodingError",
    "TextDecoder",
    "detect_bom",
]
