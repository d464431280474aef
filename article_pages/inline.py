"""Shared inline emphasis handling for every output target.

``transform_inline`` is the only place that understands ``**bold**`` and
``*italic*``. The HTML document renders its spans through
``render_inline_html`` and the preview builder turns the same spans into tree
elements, so the two outputs cannot disagree about emphasis.

Examples
--------
>>> from article_pages.inline import render_inline_html, transform_inline
>>> transform_inline("a **b** *c*")
(InlineSpan(kind='text', text='a '), InlineSpan(kind='strong', text='b'), InlineSpan(kind='text', text=' '), InlineSpan(kind='em', text='c'))
>>> str(render_inline_html(transform_inline("x < **y**")))
'x &lt; <strong>y</strong>'
"""

from __future__ import annotations

import re
import typing as typ

from markupsafe import Markup, escape

BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
ITALIC_PATTERN = re.compile(r"(?<!\*)\*(?!\*)(.+?)(?<!\*)\*(?!\*)", re.DOTALL)
LINE_BREAK = Markup("<br>")

SpanKind = typ.Literal["text", "strong", "em"]


class InlineSpan(typ.NamedTuple):
    """A run of text with at most one emphasis style."""

    kind: SpanKind
    text: str


def _split(text: str, pattern: re.Pattern[str], kind: SpanKind) -> list[InlineSpan]:
    """Split ``text`` on ``pattern`` into literal runs and ``kind`` spans."""
    spans: list[InlineSpan] = []
    cursor = 0
    for match in pattern.finditer(text):
        if match.start() > cursor:
            spans.append(InlineSpan("text", text[cursor : match.start()]))
        spans.append(InlineSpan(kind, match.group(1)))
        cursor = match.end()
    if cursor < len(text):
        spans.append(InlineSpan("text", text[cursor:]))
    return spans


def transform_inline(text: str) -> tuple[InlineSpan, ...]:
    """Convert emphasis markup in ``text`` into typed spans.

    Bold is matched first over the whole input; italics are then matched only
    inside the literal runs that bold left behind. Neither pass rescans an
    emphasised span. Unbalanced asterisks stay in the literal text.

    Parameters
    ----------
    text : str
        A paragraph line (preview) or a newline-joined paragraph run (HTML).

    Returns
    -------
    tuple[InlineSpan, ...]
        Spans whose concatenated ``text`` equals the input minus the consumed
        delimiters. Empty input yields an empty tuple.
    """
    spans: list[InlineSpan] = []
    for span in _split(text, BOLD_PATTERN, "strong"):
        if span.kind == "text":
            spans.extend(_split(span.text, ITALIC_PATTERN, "em"))
        else:
            spans.append(span)
    return tuple(spans)


def _escape_with_breaks(text: str) -> Markup:
    return LINE_BREAK.join(escape(part) for part in text.split("\n"))


def render_inline_html(spans: typ.Iterable[InlineSpan]) -> Markup:
    """Render spans as an escaped HTML fragment.

    Literal text is escaped and newlines become ``<br>``; only the emphasis
    and break elements are emitted as markup.

    Parameters
    ----------
    spans : Iterable[InlineSpan]
        Output of :func:`transform_inline`.
    """
    parts: list[Markup] = []
    for span in spans:
        body = _escape_with_breaks(span.text)
        if span.kind == "strong":
            parts.append(Markup("<strong>") + body + Markup("</strong>"))
        elif span.kind == "em":
            parts.append(Markup("<em>") + body + Markup("</em>"))
        else:
            parts.append(body)
    return Markup("").join(parts)


__all__ = [
    "BOLD_PATTERN",
    "ITALIC_PATTERN",
    "InlineSpan",
    "render_inline_html",
    "transform_inline",
]
