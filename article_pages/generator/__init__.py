"""Utilities for rendering articles into preview trees and HTML documents."""

from .document import HtmlDocumentSerializer
from .exporter import ArticleExporter, download_filename
from .models import BlockModel, SectionModel
from .preview import ArticlePreviewBuilder, render_preview_html
from .renderer import ArticleRenderer, RenderedArticle

__all__ = [
    "ArticleExporter",
    "ArticlePreviewBuilder",
    "ArticleRenderer",
    "BlockModel",
    "HtmlDocumentSerializer",
    "RenderedArticle",
    "SectionModel",
    "download_filename",
    "render_preview_html",
]
