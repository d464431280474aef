"""Unit tests for the section body block parser.

These tests cover how ``parse_blocks`` splits raw section text into
``SubHeading`` and ``Paragraph`` blocks, including blank-line handling, empty
sub-sections, and the per-target paragraph helpers.

Usage
-----
Run ``pytest tests/test_markdown_parser.py -v``.
"""

from __future__ import annotations

from article_pages.markdown_parser import html_run, parse_blocks, preview_lines
from article_pages.models import Paragraph, SubHeading

SAMPLE_CONTENT = "Intro line.\n\n### Sub One\nBody one.\n\n### Sub Two\nBody two."


def test_sub_headings_split_paragraphs() -> None:
    """Sub-heading lines become blocks between the surrounding paragraphs."""
    assert parse_blocks(SAMPLE_CONTENT) == (
        Paragraph(("Intro line.",)),
        SubHeading("Sub One"),
        Paragraph(("Body one.",)),
        SubHeading("Sub Two"),
        Paragraph(("Body two.",)),
    )


def test_lines_without_blank_separator_stay_in_one_paragraph() -> None:
    """Adjacent non-blank lines accumulate into one paragraph."""
    blocks = parse_blocks("first\nsecond\n\nthird")
    assert blocks == (Paragraph(("first", "second")), Paragraph(("third",)))


def test_consecutive_blank_lines_collapse() -> None:
    """Runs of blank or whitespace-only lines produce a single break."""
    blocks = parse_blocks("one\n\n \n\t\n\ntwo\n\n")
    assert blocks == (Paragraph(("one",)), Paragraph(("two",)))


def test_sub_heading_flushes_open_paragraph() -> None:
    """A sub-heading directly after text closes the paragraph."""
    blocks = parse_blocks("text\n### Heading\nmore")
    assert blocks == (
        Paragraph(("text",)),
        SubHeading("Heading"),
        Paragraph(("more",)),
    )


def test_empty_sub_section_is_legal() -> None:
    """Sub-headings without a body, including a trailing one, are kept."""
    blocks = parse_blocks("### First\n### Second\n")
    assert blocks == (SubHeading("First"), SubHeading("Second"))


def test_sub_heading_marker_requires_space_and_text() -> None:
    """Only ``###`` followed by whitespace and text introduces a heading."""
    blocks = parse_blocks("###NoSpace\n#### Deeper\n###\n\n## Higher")
    assert blocks == (
        Paragraph(("###NoSpace", "#### Deeper", "###")),
        Paragraph(("## Higher",)),
    )


def test_sub_heading_text_is_kept_verbatim() -> None:
    """Extra spaces after the marker are stripped; the heading text is not."""
    assert parse_blocks("###    **Bold** title") == (SubHeading("**Bold** title"),)


def test_empty_and_whitespace_content_yield_no_blocks() -> None:
    """Empty bodies parse to an empty block sequence rather than failing."""
    assert parse_blocks("") == ()
    assert parse_blocks("  \n\n\t") == ()


def test_windows_line_endings() -> None:
    """CRLF input parses like LF input."""
    assert parse_blocks("a\r\n\r\n### B\r\nc") == (
        Paragraph(("a",)),
        SubHeading("B"),
        Paragraph(("c",)),
    )


def test_per_target_paragraph_helpers() -> None:
    """Preview keeps separate lines; the HTML run joins them with newlines."""
    paragraph = Paragraph(("line one", "line two"))
    assert preview_lines(paragraph) == ("line one", "line two")
    assert html_run(paragraph) == "line one\nline two"
