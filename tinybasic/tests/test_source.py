"""Tests for source loading and the compiler helpers."""
import io

import pytest

from tinybasic.compiler import scan_file, translate_file, translate_source
from tinybasic.exceptions import LexError, ParseError, SourceError
from tinybasic.lexer import TokenKind
from tinybasic.source import MAX_SOURCE_BYTES, load_source


def test_load_source(tmp_path):
    path = tmp_path / "ok.bas"
    path.write_text('PRINT "hi"\n', encoding="utf-8")
    assert load_source(str(path)) == 'PRINT "hi"\n'


def test_empty_file_is_rejected(tmp_path):
    path = tmp_path / "empty.bas"
    path.write_text("", encoding="utf-8")
    with pytest.raises(SourceError) as exc:
        load_source(str(path))
    assert "Input file empty" in str(exc.value)
    assert exc.value.category == "source"


def test_oversized_file_is_rejected(tmp_path):
    path = tmp_path / "big.bas"
    path.write_bytes(b"\n" * (MAX_SOURCE_BYTES + 1))
    with pytest.raises(SourceError) as exc:
        load_source(str(path))
    assert "too large" in str(exc.value)


def test_file_at_size_limit_is_accepted(tmp_path):
    path = tmp_path / "limit.bas"
    path.write_bytes(b"\n" * MAX_SOURCE_BYTES)
    assert len(load_source(str(path))) == MAX_SOURCE_BYTES


def test_translate_file_writes_output(tmp_path):
    src = tmp_path / "in.bas"
    src.write_text("INPUT A\nPRINT A\n", encoding="utf-8")
    out = tmp_path / "out.c"
    c_code = translate_file(str(src), str(out))
    assert out.read_text(encoding="utf-8") == c_code
    assert '\tscanf("%f", &A);' in c_code.splitlines()


def test_translate_source_reports_file_in_lex_errors():
    with pytest.raises(LexError) as exc:
        translate_source("PRINT @\n", "script.bas")
    assert str(exc.value).endswith("in script.bas")
    assert exc.value.file == "script.bas"


def test_translate_file_writes_listing_before_translating(tmp_path):
    src = tmp_path / "in.bas"
    src.write_text("PRINT 1 2\n", encoding="utf-8")
    listing = io.StringIO()
    with pytest.raises(ParseError):
        translate_file(str(src), listing=listing)
    assert '"type": "PRINT"' in listing.getvalue()


def test_translate_file_without_out_writes_nothing(tmp_path):
    src = tmp_path / "in.bas"
    src.write_text("LET A = 1\n", encoding="utf-8")
    c_code = translate_file(str(src))
    assert "\tA = 1;" in c_code.splitlines()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["in.bas"]


def test_scan_file(tmp_path):
    src = tmp_path / "in.bas"
    src.write_text("INPUT A\n", encoding="utf-8")
    assert [t.kind for t in scan_file(str(src))] == [
        TokenKind.INPUT, TokenKind.IDENTIFIER, TokenKind.NEWLINE, TokenKind.EOF
    ]


def test_scan_file_missing(tmp_path):
    with pytest.raises(SourceError):
        scan_file(str(tmp_path / "nope.bas"))
