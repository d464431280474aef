"""Build the interactive preview render tree for an article.

The preview is an :mod:`xml.etree.ElementTree` tree: a title, a table of
contents panel whose level-2 links list their level-3 children as nested
sub-items, and one section container per article section. Anchors come from
the shared :class:`~article_pages.outline.ArticleOutline` and emphasis from
:func:`~article_pages.inline.transform_inline`, exactly as the HTML document
uses them. Wiring clicks to scrolling is left to the hosting UI.
"""

from __future__ import annotations

import typing as typ
from xml.etree.ElementTree import Element, SubElement, tostring

from article_pages.config import RenderConfig
from article_pages.inline import InlineSpan, transform_inline
from article_pages.markdown_parser import preview_lines
from article_pages.models import Article, Paragraph, SubHeading
from article_pages.outline import ArticleOutline, OutlineSection, outline_article

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def _append_text(parent: Element, text: str) -> None:
    """Append character data after the last child of ``parent``."""
    if len(parent):
        last = parent[-1]
        last.tail = (last.tail or "") + text
    else:
        parent.text = (parent.text or "") + text


class ArticlePreviewBuilder:
    """Produce the preview render tree from an article or its outline."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : RenderConfig, optional
            Presentation settings; defaults to ``RenderConfig()``.
        """
        self.config = config or RenderConfig()

    def build(self, source: Article | ArticleOutline) -> Element:
        """Return the render tree rooted at an ``article`` element."""
        outline = source if isinstance(source, ArticleOutline) else outline_article(source)
        root = Element("article", {"class": "article-preview"})
        title = SubElement(root, "h1", {"class": "article-title"})
        title.text = outline.title
        self._build_toc(root, outline)
        for section in outline.sections:
            self._build_section(root, section)
        return root

    def _build_toc(self, root: Element, outline: ArticleOutline) -> None:
        panel = SubElement(root, "nav", {"class": "toc"})
        label = SubElement(panel, "p", {"class": "toc-title"})
        label.text = self.config.toc_title
        listing = SubElement(panel, "ul", {"class": "toc-list"})
        for section in outline.sections:
            item = SubElement(listing, "li", {"class": "toc-item-2"})
            link = SubElement(item, "a", {"href": f"#{section.entry.id}"})
            link.text = section.entry.text
            children = section.children
            if not children:
                continue
            sublist = SubElement(item, "ul", {"class": "toc-sublist"})
            for child in children:
                sub_item = SubElement(sublist, "li", {"class": "toc-item-3"})
                sub_link = SubElement(sub_item, "a", {"href": f"#{child.id}"})
                sub_link.text = child.text

    def _build_section(self, root: Element, section: OutlineSection) -> None:
        container = SubElement(root, "section", {"class": "article-section"})
        heading = SubElement(container, "h2", {"id": section.anchor})
        heading.text = section.heading
        for item in section.blocks:
            match item.block:
                case SubHeading(text=text):
                    sub = SubElement(container, "h3", {"id": item.anchor or ""})
                    sub.text = text
                case Paragraph() as paragraph:
                    self._build_paragraph(container, paragraph)

    def _build_paragraph(self, container: Element, paragraph: Paragraph) -> None:
        element = SubElement(container, "p")
        for position, line in enumerate(preview_lines(paragraph)):
            if position:
                SubElement(element, "br")
            self._append_spans(element, transform_inline(line))

    def _append_spans(self, parent: Element, spans: cabc.Iterable[InlineSpan]) -> None:
        for span in spans:
            match span.kind:
                case "strong":
                    attrs = (
                        {"class": self.config.highlight_class}
                        if self.config.highlight_class
                        else {}
                    )
                    strong = SubElement(parent, "strong", attrs)
                    strong.text = span.text
                case "em":
                    emphasis = SubElement(parent, "em")
                    emphasis.text = span.text
                case _:
                    _append_text(parent, span.text)


def render_preview_html(tree: Element) -> str:
    """Serialise a preview render tree to an HTML fragment.

    Text is escaped the same way the document escapes it: a literal ``&``
    always becomes ``&amp;``, even when it already reads like an entity.
    """
    return tostring(tree, encoding="unicode", method="html")


__all__ = ["ArticlePreviewBuilder", "render_preview_html"]
