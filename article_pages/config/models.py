"""Typed dataclasses describing article rendering configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class RenderConfigError(ValueError):
    """Raised when the render configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class RenderConfig:
    """Presentation settings shared by the preview and the HTML document.

    Attributes
    ----------
    lang : str
        Value of the document's ``lang`` attribute.
    toc_title : str
        Label shown above the table of contents.
    highlight_class : str
        CSS class added to bold spans in the preview.
    output_dir : Path
        Directory the exporter writes into.
    filename_suffix : str
        Extension appended to exported document names.
    """

    lang: str = "ja"
    toc_title: str = "目次"
    highlight_class: str = "highlight"
    output_dir: Path = Path("public")
    filename_suffix: str = ".html"


__all__ = ["RenderConfig", "RenderConfigError"]
