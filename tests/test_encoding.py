import codecs

import pytest

from delphipy.encoding import DecodedText, DefaultTextDecoder, EncodingError, detect_bom

SOURCE = "program Empty;\nbegin\nend.\n"


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (codecs.BOM_UTF8 + b"x", ("utf-8", 3)),
        (codecs.BOM_UTF16_LE + b"x\x00", ("utf-16-le", 2)),
        (codecs.BOM_UTF16_BE + b"\x00x", ("utf-16-be", 2)),
        (codecs.BOM_UTF32_LE + b"x\x00\x00\x00", ("utf-32-le", 4)),
        (codecs.BOM_UTF32_BE + b"\x00\x00\x00x", ("utf-32-be", 4)),
        (b"program", None),
        (b"", None),
    ],
)
def test_detect_bom(data: bytes, expected: tuple[str, int] | None) -> None:
    assert detect_bom(data) == expected


@pytest.mark.parametrize("encoding", ["utf-8", "utf-16-le", "utf-16-be", "utf-32-le", "utf-32-be"])
def test_decoder_strips_bom(encoding: str) -> None:
    bom = {
        "utf-8": codecs.BOM_UTF8,
        "utf-16-le": codecs.BOM_UTF16_LE,
        "utf-16-be": codecs.BOM_UTF16_BE,
        "utf-32-le": codecs.BOM_UTF32_LE,
        "utf-32-be": codecs.BOM_UTF32_BE,
    }[encoding]

    decoded = DefaultTextDecoder().decode(bom + SOURCE.encode(encoding))

    assert decoded == DecodedText(SOURCE, encoding, had_bom=True)


def test_decoder_accepts_plain_utf8() -> None:
    decoded = DefaultTextDecoder().decode("program Größe;".encode("utf-8"))

    assert decoded == DecodedText("program Größe;", "utf-8", had_bom=False)


def test_decoder_rejects_invalid_utf8_without_fallback() -> None:
    with pytest.raises(EncodingError, match="not valid UTF-8"):
        DefaultTextDecoder().decode(b"program Caf\xe9;")


def test_decoder_uses_fallback_code_page() -> None:
    decoded = DefaultTextDecoder(fallback_encoding="cp1252").decode(b"program Caf\xe9;")

    assert decoded == DecodedText("program Café;", "cp1252", had_bom=False)


def test_decoder_prefers_utf8_over_fallback() -> None:
    decoded = DefaultTextDecoder(fallback_encoding="cp1252").decode("Café".encode("utf-8"))

    assert decoded.text == "Café"
    assert decoded.encoding == "utf-8"


def test_decoder_reports_bytes_undefined_in_fallback() -> None:
    with pytest.raises(EncodingError, match="not valid cp1252"):
        DefaultTextDecoder(fallback_encoding="cp1252").decode(b"\x81\xff")


def test_decoder_reports_unknown_fallback_codec() -> None:
    with pytest.raises(EncodingError, match="unknown codec 'no-such-codec'"):
        DefaultTextDecoder(fallback_encoding="no-such-codec").decode(b"\xff")


def test_decoder_reports_truncated_utf16_after_bom() -> None:
    with pytest.raises(EncodingError, match="not valid utf-16-le"):
        DefaultTextDecoder().decode(codecs.BOM_UTF16_LE + b"x")


def test_encoding_error_is_value_error() -> None:
    assert issubclass(EncodingError, ValueError)
