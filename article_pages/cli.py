"""Cyclopts CLI entrypoint for rendering generated articles.

The ``article-pages`` console script defined here reads an article payload
(JSON, optionally wrapped in a fenced block as returned by a language model),
renders the standalone HTML document and the preview snapshot, and writes both
into the output directory. ``toc`` prints the table of contents the renderers
would link to.

Examples
--------
Render an article into ``public/``:

>>> from article_pages.cli import app
>>> app(["render", "--article", "article.json"])  # doctest: +SKIP

Inspect the anchors assigned to an article:

>>> app(["toc", "--article", "article.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG, TOC_INDENT
from .article_loader import load_article
from .config import RenderConfig, load_render_config
from .generator import ArticleExporter
from .outline import outline_article

app = App(name="article-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def _resolve_config(path: Path) -> RenderConfig:
    """Load ``path`` when it exists; fall back to the built-in defaults."""
    if path.exists():
        return load_render_config(path)
    logging.getLogger(__name__).debug("no config at %s, using defaults", path)
    return RenderConfig()


@app.command(help="Render an article into a standalone HTML document and preview.")
def render(
    *,
    article: typ.Annotated[
        Path, Parameter(help="Path to the article JSON", env_var="INPUT_ARTICLE")
    ],
    config: typ.Annotated[
        Path, Parameter(help="Path to render config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Render ``article`` and write the document and preview snapshot.

    Parameters
    ----------
    article : Path
        Article payload with ``title``, ``metaDescription`` and ``sections``.
    config : Path, optional
        YAML render configuration; defaults apply when the file is absent.
    output_dir : Path or None, optional
        Override for the configured output directory.
    verbose : bool, optional
        Emit debug logging while rendering.

    Raises
    ------
    FileNotFoundError
        If ``article`` does not exist.
    ArticleFormatError
        If the article payload has an invalid shape.
    RenderConfigError
        If the configuration file is invalid.
    """
    _configure_logging(verbose)
    render_config = _resolve_config(config)
    payload = load_article(article)
    written = ArticleExporter(render_config, output_dir=output_dir).run(payload)
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the table of contents and anchors for an article.")
def toc(
    *,
    article: typ.Annotated[
        Path, Parameter(help="Path to the article JSON", env_var="INPUT_ARTICLE")
    ],
) -> None:
    """Print one line per TOC entry, indenting sub-headings."""
    outline = outline_article(load_article(article))
    for entry in outline.toc:
        indent = TOC_INDENT * (entry.level - 2)
        print(f"{indent}{entry.text} #{entry.id}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``article-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
