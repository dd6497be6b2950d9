"""Test centered rendering."""

import copy
import io

import pytest
from cntr.model import Document, Paragraph
from cntr.parser import parse_document
from cntr.render import center_line, compute_padding, render_document, render_lines


def _render(text, width):
    out = io.StringIO()
    render_document(parse_document(text), width, out)
    return out.getvalue()


def test_hello_world_width_11():
    """Both words are padded by (11 - 5) // 2 = 3 spaces."""
    assert _render("Hello\n\nWorld", 11) == "   Hello\n\n   World\n"


def test_render_empty_document():
    """An empty document produces no output at all."""
    assert _render("", 80) == ""
    assert list(render_lines(Document(), 80)) == []


def test_padding_uses_floor_division():
    assert compute_padding("abc", 10) == 3
    assert compute_padding("abcd", 10) == 3
    assert compute_padding("", 11) == 5


def test_padding_never_negative():
    long_line = "x" * 100
    assert compute_padding(long_line, 80) == 0
    assert compute_padding("abc", 0) == 0
    assert compute_padding("abc", -5) == 0


@pytest.mark.parametrize("line", ["a", "hello", "日本語", "été", "x" * 90])
@pytest.mark.parametrize("width", [1, 11, 40, 80])
def test_padding_formula(line, width):
    from cntr.width import display_width
    assert compute_padding(line, width) == max(0, (width - display_width(line)) // 2)


def test_wide_characters_centered_by_display_width():
    """Two wide characters occupy four columns, not two."""
    assert center_line("日本", 10) == "   日本"


def test_combining_characters_centered_by_display_width():
    assert center_line("é", 5) == "  é"


def test_long_line_not_wrapped_or_truncated():
    long_line = "word " * 30
    assert _render(long_line, 40) == long_line + "\n"


def test_lines_within_paragraph_centered_individually():
    out = _render("a\nabc\nabcde", 9)
    assert out == "    a\n   abc\n  abcde\n"


def test_one_blank_line_between_paragraphs():
    out = _render("a\n\n\n\nb\n\nc", 3)
    assert out == " a\n\n b\n\n c\n"


def test_no_blank_line_after_last_paragraph():
    out = _render("a\n\nb\n\n", 3)
    assert not out.endswith("\n\n")


def test_render_lines_matches_stream_output():
    doc = parse_document("one\ntwo\n\nthree")
    out = io.StringIO()
    render_document(doc, 20, out)
    assert out.getvalue() == "".join(line + "\n" for line in render_lines(doc, 20))


def test_empty_line_is_padded():
    doc = Document([Paragraph([""])])
    assert list(render_lines(doc, 10)) == ["     "]


def test_rendering_is_idempotent_and_does_not_mutate():
    doc = parse_document("Title\n\nSome body text\nmore text\n\n日本語")
    before = copy.deepcopy(doc)
    first = list(render_lines(doc, 30))
    second = list(render_lines(doc, 30))
    assert first == second
    assert doc == before
