"""Render one article into both the preview tree and the HTML document."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from article_pages.config import RenderConfig
from article_pages.generator.document import HtmlDocumentSerializer
from article_pages.generator.preview import ArticlePreviewBuilder, render_preview_html
from article_pages.outline import ArticleOutline, outline_article

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from article_pages.models import Article


@dc.dataclass(frozen=True, slots=True)
class RenderedArticle:
    """Both render targets derived from a single outline.

    Attributes
    ----------
    outline : ArticleOutline
        The anchored structure both outputs were built from.
    preview : Element
        Root of the preview render tree.
    html : str
        The standalone HTML document.
    preview_page : str
        The preview tree serialised inside a minimal UTF-8 page.
    """

    outline: ArticleOutline
    preview: Element
    html: str
    preview_page: str

    @property
    def preview_html(self) -> str:
        """HTML serialisation of the preview tree."""
        return render_preview_html(self.preview)


class ArticleRenderer:
    """Parse an article once and feed the outline to both serializers."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self.preview_builder = ArticlePreviewBuilder(self.config)
        self.serializer = HtmlDocumentSerializer(self.config)

    def render(self, article: Article) -> RenderedArticle:
        """Return the preview tree and HTML document for ``article``."""
        outline = outline_article(article)
        preview = self.preview_builder.build(outline)
        return RenderedArticle(
            outline=outline,
            preview=preview,
            html=self.serializer.serialize(outline),
            preview_page=self.serializer.wrap_preview(
                outline.title, render_preview_html(preview)
            ),
        )


__all__ = ["ArticleRenderer", "RenderedArticle"]
