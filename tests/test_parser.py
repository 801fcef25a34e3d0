import pytest

from delphipy.ast import DelphiFile, FileKind
from delphipy.diagnostics import PARSER_MISSING_NAME, PARSER_MISSING_SEMICOLON
from delphipy.lexer import Lexer, TokenKind
from delphipy.parser import Parser, ParserOptions, TokenSource, parse_source_file, parse_text
from tests._debug import debug_dump_diagnostics
from tests._shared_cases import ERROR_CASES, VALID_CASES, DelphiCase, case_id


@pytest.mark.parametrize("case", VALID_CASES, ids=case_id)
def test_valid_sources_produce_file(case: DelphiCase) -> None:
    result = parse_text(case.source, source_name=case.source_name)
    debug_dump_diagnostics(case.name, result.diagnostics, case.source)

    assert result.diagnostics == ()
    assert result.has_errors is False
    assert result.file == case.expected_file


@pytest.mark.parametrize("case", ERROR_CASES, ids=case_id)
def test_invalid_sources_report_exactly_one_error(case: DelphiCase) -> None:
    result = parse_text(case.source, source_name=case.source_name)
    debug_dump_diagnostics(case.name, result.diagnostics, case.source)

    assert result.file is None
    assert result.has_errors is True
    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].message == case.expected_message
    assert result.diagnostics[0].code == case.expected_code
    assert result.diagnostics[0].category == "parser"
    assert result.error is result.diagnostics[0]


@pytest.mark.parametrize("keyword", ["program", "PROGRAM", "Program", "PrOgRaM"])
def test_program_keyword_is_case_insensitive(keyword: str) -> None:
    result = parse_text(f"{keyword} Empty;\nbegin\nend.\n")

    assert result.file == DelphiFile(FileKind.PROGRAM, "Empty")


@pytest.mark.parametrize(("begin", "end"), [("BEGIN", "END"), ("Begin", "End"), ("bEgIn", "eNd")])
def test_begin_and_end_are_case_insensitive(begin: str, end: str) -> None:
    result = parse_text(f"program Empty;\n{begin}\n{end}.\n")

    assert result.file == DelphiFile(FileKind.PROGRAM, "Empty")


def test_name_keeps_source_spelling() -> None:
    result = parse_text("program MiXeD_Case;\nbegin\nend.\n")

    assert result.file is not None
    assert result.file.name == "MiXeD_Case"


def test_reserved_word_is_accepted_as_name() -> None:
    result = parse_text("program begin;\nbegin\nend.\n")

    assert result.file == DelphiFile(FileKind.PROGRAM, "begin")


def test_missing_dpr_keyword_without_dpr_extension_lists_all_keywords() -> None:
    result = parse_text("Empty;\nbegin\nend.\n", source_name="empty.dpk")

    assert result.diagnostics[0].message == (
        "Delphi files must start with one of these keywords: 'program', 'library', 'unit', 'package'"
    )


def test_error_range_points_at_offending_token() -> None:
    source = "program Empty\nbegin\nend.\n"

    result = parse_text(source)

    diagnostic = result.diagnostics[0]
    assert diagnostic.range.as_tuple() == (14, 19)
    assert source[14:19] == "begin"


def test_missing_final_dot_range_is_empty_at_end_of_input() -> None:
    source = "program Empty;\nbegin\nend\n"

    result = parse_text(source)

    assert result.diagnostics[0].range.as_tuple() == (len(source), len(source))
    assert result.diagnostics[0].range.is_empty()


def test_unsupported_kind_is_reported_on_keyword() -> None:
    result = parse_text("  unit Helpers;")

    assert result.diagnostics[0].range.as_tuple() == (2, 6)


def test_reject_trailing_content_reports_first_solid_token() -> None:
    options = ParserOptions(reject_trailing_content=True)

    result = parse_text("program Empty;\nbegin\nend. { done }\nextra\n", options=options)

    assert result.file is None
    assert result.diagnostics[0].code == "PARSER_TRAILING_CONTENT"
    assert result.diagnostics[0].message == "unexpected 'extra' after final '.'"


def test_reject_trailing_content_accepts_trailing_trivia() -> None:
    options = ParserOptions(reject_trailing_content=True)

    result = parse_text("program Empty;\nbegin\nend.\n// that's all\n\n", options=options)

    assert result.file == DelphiFile(FileKind.PROGRAM, "Empty")


def test_reject_trailing_content_reports_extra_dot() -> None:
    options = ParserOptions(reject_trailing_content=True)

    result = parse_text("program Empty;\nbegin\nend..", options=options)

    assert result.diagnostics[0].message == "unexpected '.' after final '.'"


def test_parse_text_records_source_metadata() -> None:
    source = "program Empty;\nbegin\nend.\n"

    result = parse_text(source, source_name="empty.dpr", encoding="utf-16-le", had_bom=True)

    assert result.source_name == "empty.dpr"
    assert result.source_text == source
    assert result.encoding == "utf-16-le"
    assert result.had_bom is True


def test_token_source_skips_whitespace_and_comments() -> None:
    source = TokenSource(Lexer("  { a }  program // b\n (* c *) Empty"))

    assert source.current.kind == TokenKind.WORD
    assert source.current.text == "program"
    source.bump()
    assert source.current.text == "Empty"
    source.bump()
    assert source.current.kind == TokenKind.EOF
    source.bump()
    assert source.current.kind == TokenKind.EOF


def test_parser_eat_only_consumes_matching_tokens() -> None:
    parser = Parser(TokenSource(Lexer("begin ;")))

    assert parser.eat(TokenKind.SEMICOLON) is False
    assert parser.eat_word("BEGIN") is True
    assert parser.at(TokenKind.SEMICOLON)
    assert parser.eat_word("end") is False
    assert parser.eat(TokenKind.SEMICOLON) is True
    assert parser.at(TokenKind.EOF)


def test_parser_error_fills_found_from_current_token() -> None:
    parser = Parser(TokenSource(Lexer("begin")))

    parser.error(PARSER_MISSING_SEMICOLON, kind="program")

    assert parser.has_error()
    assert [d.message for d in parser.finish()] == ["missing ';' after program name, found 'begin'"]


def test_parser_refuses_second_error() -> None:
    parser = Parser(TokenSource(Lexer("")))
    parser.error(PARSER_MISSING_NAME, kind="program")

    with pytest.raises(RuntimeError, match="already reported"):
        parser.error(PARSER_MISSING_NAME, kind="program")


def test_parse_source_file_uses_parser_source_name() -> None:
    parser = Parser(TokenSource(Lexer("Empty;")), source_name="C:\\Projects\\Empty.dpr")

    assert parse_source_file(parser) is None
    assert parser.diagnostics[0].message == "DPR file must start with 'program' or 'library' keyword"


@pytest.mark.parametrize(
    ("keyword", "kind"),
    [
        ("program", FileKind.PROGRAM),
        ("LIBRARY", FileKind.LIBRARY),
        ("Unit", FileKind.UNIT),
        ("pAcKaGe", FileKind.PACKAGE),
    ],
)
def test_file_kind_from_keyword(keyword: str, kind: FileKind) -> None:
    assert FileKind.from_keyword(keyword) is kind


def test_file_kind_from_keyword_rejects_other_words() -> None:
    assert FileKind.from_keyword("programs") is None
    assert FileKind.from_keyword("") is None


def test_file_kind_extensions() -> None:
    assert FileKind.PROGRAM.extension == ".dpr"
    assert FileKind.LIBRARY.extension == ".dpr"
    assert FileKind.UNIT.extension == ".pas"
    assert FileKind.PACKAGE.extension == ".dpk"


@pytest.mark.parametrize("name", ["", "1st", "has space", "semi;", "dotted.name"])
def test_delphi_file_rejects_non_identifier_names(name: str) -> None:
    with pytest.raises(ValueError, match="Invalid program name"):
        DelphiFile(FileKind.PROGRAM, name)


def test_delphi_file_is_immutable() -> None:
    file = DelphiFile(FileKind.PROGRAM, "Empty")

    with pytest.raises(AttributeError):
        file.name = "Other"  # type: ignore[misc]
