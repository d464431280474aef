"""Write rendered articles to disk for download or hand-off.

:class:`ArticleExporter` renders an article with :class:`ArticleRenderer` and
writes two files into the configured output directory: the standalone HTML
document and a ``.preview.html`` snapshot of the preview tree. File names come
from :func:`download_filename`, which keeps only ASCII letters and digits from
the title.

Example
-------
>>> from article_pages.generator.exporter import download_filename
>>> download_filename("SEO Guide 2025!")
'SEO_Guide_2025_.html'
"""

from __future__ import annotations

import logging
import re
import typing as typ

from article_pages.config import RenderConfig
from article_pages.generator.renderer import ArticleRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from article_pages.models import Article

PREVIEW_SUFFIX = ".preview"
_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9]")

logger = logging.getLogger(__name__)


def download_filename(title: str, suffix: str = ".html") -> str:
    """Return the download name for a document titled ``title``.

    Every character outside ``[A-Za-z0-9]`` becomes ``_``; an empty title
    falls back to ``article``.
    """
    stem = _UNSAFE_FILENAME_CHARS.sub("_", title) or "article"
    return f"{stem}{suffix}"


class ArticleExporter:
    """Render an article and persist both outputs."""

    def __init__(
        self, config: RenderConfig | None = None, *, output_dir: Path | None = None
    ) -> None:
        """Initialize the exporter.

        Parameters
        ----------
        config : RenderConfig, optional
            Presentation and output settings; defaults to ``RenderConfig()``.
        output_dir : Path, optional
            Override for ``config.output_dir``.
        """
        self.config = config or RenderConfig()
        self.output_dir = output_dir or self.config.output_dir
        self.renderer = ArticleRenderer(self.config)

    def run(self, article: Article) -> list[Path]:
        """Write the HTML document and the preview snapshot.

        Returns
        -------
        list[Path]
            The document path followed by the preview snapshot path.

        Notes
        -----
        Creates the output directory when missing and overwrites existing
        files of the same name.
        """
        rendered = self.renderer.render(article)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        suffix = self.config.filename_suffix
        document_path = self.output_dir / download_filename(article.title, suffix)
        preview_path = self.output_dir / download_filename(
            article.title, f"{PREVIEW_SUFFIX}{suffix}"
        )
        document_path.write_text(rendered.html, encoding="utf-8")
        preview_path.write_text(rendered.preview_page, encoding="utf-8")
        logger.debug("exported %s and %s", document_path, preview_path)
        return [document_path, preview_path]


__all__ = ["PREVIEW_SUFFIX", "ArticleExporter", "download_filename"]
