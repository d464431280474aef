"""Serialize an article into one self-contained HTML document.

The document carries its own ``<style>`` block and no scripts, fonts, or
external stylesheets, so the returned string can be copied or saved as-is.
Structure comes from the shared :class:`~article_pages.outline.ArticleOutline`
and paragraph emphasis from :func:`~article_pages.inline.transform_inline`.
Rendering holds no timestamps or generated ids: the same article always
serializes to the same string.

Example
-------
>>> from article_pages.models import Article, Section
>>> from article_pages.generator import HtmlDocumentSerializer
>>> html = HtmlDocumentSerializer().serialize(
...     Article("Title", "Summary", (Section("Intro", "**Hi**"),))
... )
>>> '<h2 id="section-1">Intro</h2>' in html
True
"""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup

from article_pages.config import RenderConfig
from article_pages.generator.models import BlockModel, SectionModel
from article_pages.inline import render_inline_html, transform_inline
from article_pages.markdown_parser import html_run
from article_pages.models import Article, Paragraph, SubHeading
from article_pages.outline import ArticleOutline, OutlineSection, outline_article

logger = logging.getLogger(__name__)


class HtmlDocumentSerializer:
    """Render articles into standalone HTML documents."""

    def __init__(
        self, config: RenderConfig | None = None, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the serializer and its Jinja environment.

        Parameters
        ----------
        config : RenderConfig, optional
            Presentation settings; defaults to ``RenderConfig()``.
        templates_dir : Path, optional
            Directory containing ``article_document.jinja``,
            ``preview_snapshot.jinja`` and ``article_styles.css``; defaults to
            the package templates.
        """
        self.config = config or RenderConfig()
        self.templates_dir = templates_dir or Path(__file__).resolve().parents[1] / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("article_document.jinja")
        self.snapshot_template = self.env.get_template("preview_snapshot.jinja")

    def serialize(self, source: Article | ArticleOutline) -> str:
        """Return the complete HTML document for ``source``.

        Parameters
        ----------
        source : Article or ArticleOutline
            The article to render, or an outline already built for it.

        Returns
        -------
        str
            A single ``<!DOCTYPE html>`` document ending with a newline.
        """
        outline = source if isinstance(source, ArticleOutline) else outline_article(source)
        context = {
            "config": self.config,
            "title": outline.title,
            "meta_description": outline.meta_description,
            "toc": outline.toc,
            "sections": [self._build_section_model(section) for section in outline.sections],
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        logger.debug("serialized %r into %d characters", outline.title, len(html))
        return html

    def wrap_preview(self, title: str, fragment: str) -> str:
        """Embed a serialised preview tree in a minimal UTF-8 page.

        ``fragment`` must already be escaped HTML, as returned by
        :func:`~article_pages.generator.preview.render_preview_html`.
        """
        page = self.snapshot_template.render(
            config=self.config, title=title, fragment=Markup(fragment)
        )
        if not page.endswith("\n"):
            page += "\n"
        return page

    @staticmethod
    def _build_section_model(section: OutlineSection) -> SectionModel:
        """Construct a SectionModel with rendered paragraph runs."""
        blocks: list[BlockModel] = []
        for item in section.blocks:
            match item.block:
                case SubHeading(text=text):
                    blocks.append(
                        BlockModel(kind="subheading", anchor=item.anchor, text=text, html="")
                    )
                case Paragraph() as paragraph:
                    html = render_inline_html(transform_inline(html_run(paragraph)))
                    blocks.append(
                        BlockModel(kind="paragraph", anchor=None, text="", html=html)
                    )
        return SectionModel(anchor=section.anchor, heading=section.heading, blocks=blocks)


__all__ = ["HtmlDocumentSerializer"]
