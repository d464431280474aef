r"""Parse a section body into ordered sub-heading and paragraph blocks.

The body language is deliberately small: ``### `` lines introduce
sub-headings, blank lines separate paragraphs, and every other line belongs to
the paragraph currently being collected. The scan is a single left-to-right
pass with one explicit paragraph buffer, so the result depends only on the
input text.

Example
-------
>>> from article_pages.markdown_parser import parse_blocks
>>> parse_blocks("Intro\n\n### Details\nMore")
(Paragraph(lines=('Intro',)), SubHeading(text='Details'), Paragraph(lines=('More',)))
"""

from __future__ import annotations

import re

from .models import Block, Paragraph, SubHeading

SUBHEADING_PATTERN = re.compile(r"^###[ \t]+(\S.*)$")


def parse_blocks(content: str) -> tuple[Block, ...]:
    """Split a section body into blocks in source order.

    Parameters
    ----------
    content : str
        Raw section text. May be empty or contain no sub-headings.

    Returns
    -------
    tuple[Block, ...]
        ``SubHeading`` and ``Paragraph`` blocks. Paragraphs always hold at
        least one line; blank and whitespace-only lines never appear in them.
    """
    blocks: list[Block] = []
    buffer: list[str] = []

    def _flush() -> None:
        if buffer:
            blocks.append(Paragraph(lines=tuple(buffer)))
            buffer.clear()

    for line in content.splitlines():
        match = SUBHEADING_PATTERN.match(line)
        if match:
            _flush()
            blocks.append(SubHeading(text=match.group(1)))
        elif not line.strip():
            _flush()
        else:
            buffer.append(line)
    _flush()
    return tuple(blocks)


def preview_lines(paragraph: Paragraph) -> tuple[str, ...]:
    """Return the visual lines of ``paragraph`` for the interactive preview.

    Each line is transformed and displayed on its own, separated from its
    neighbours by a line-break element.
    """
    return paragraph.lines


def html_run(paragraph: Paragraph) -> str:
    """Return ``paragraph`` as one newline-joined run for the HTML document.

    The run is transformed as a whole, so emphasis may span lines; remaining
    newlines become ``<br>`` elements when the run is rendered.
    """
    return "\n".join(paragraph.lines)


__all__ = ["SUBHEADING_PATTERN", "html_run", "parse_blocks", "preview_lines"]
