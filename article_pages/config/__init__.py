"""Load and validate render configuration for article documents.

This subpackage parses an optional YAML file, overlays its ``render`` mapping
on the built-in defaults, and returns a frozen :class:`RenderConfig` consumed
by the preview builder, the HTML serializer, and the exporter.

Examples
--------
>>> from article_pages.config import RenderConfig
>>> RenderConfig().toc_title
'目次'
"""

from .loader import load_render_config
from .models import RenderConfig, RenderConfigError

__all__ = ["RenderConfig", "RenderConfigError", "load_render_config"]
