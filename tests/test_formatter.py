"""Unit tests for reassembly and plain-text formatting."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from services.formatter import join_chunks, contains_html, format_plain_text_to_html


def test_join_chunks_uses_blank_line():
    assert join_chunks(["one", "two", "three"]) == "one\n\ntwo\n\nthree"


def test_join_single_chunk():
    assert join_chunks(["only"]) == "only"


@pytest.mark.parametrize("text", [
    "<p>para</p>",
    "text with <b>bold</b>",
    "<DIV class='x'>upper</DIV>",
    "<br>",
])
def test_contains_html_detects_tags(text):
    assert contains_html(text) is True


@pytest.mark.parametrize("text", [
    "plain text",
    "a < b and c > d",
    "1 <2> 3",
    "</>",
])
def test_contains_html_ignores_non_tags(text):
    assert contains_html(text) is False


def test_plain_text_single_paragraph():
    assert format_plain_text_to_html("Hello world") == "<p>Hello world</p>"


def test_plain_text_paragraphs_and_line_breaks():
    text = "  First para\nsecond line  \n\n\n\nSecond para\n\n   \n\nThird"

    assert format_plain_text_to_html(text) == (
        "<p>First para<br>second line</p><p>Second para</p><p>Third</p>"
    )


def test_blank_text_gives_empty_markup():
    assert format_plain_text_to_html("\n\n  \n\n") == ""


def test_markup_passthrough():
    markup = "<p>Already marked up</p>\n\n<p>Second</p>"
    assert format_plain_text_to_html(markup) == markup


def test_formatting_markup_is_idempotent():
    once = format_plain_text_to_html("One\n\nTwo\nlines")
    twice = format_plain_text_to_html(once)

    assert once == "<p>One</p><p>Two<br>lines</p>"
    assert twice == once
