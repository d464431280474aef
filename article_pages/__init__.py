"""Render generated articles into a navigable preview and a portable HTML file.

This package exposes the CLI entry points used by ``article-pages`` together
with the rendering API consumed by hosting applications.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``ArticleRenderer``: Renders both outputs from one parsed outline.

Examples
--------
>>> from article_pages import ArticleRenderer
>>> from article_pages.models import Article, Section
>>> rendered = ArticleRenderer().render(Article("T", "D", (Section("A", "x"),)))
>>> [entry.id for entry in rendered.outline.toc]
['section-1']
"""

from __future__ import annotations

from .cli import app, main
from .generator import ArticleRenderer

__all__ = ["ArticleRenderer", "app", "main"]
