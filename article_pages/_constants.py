"""Common literal values used across article_pages.

These constants keep default paths centralized so the CLI, the exporter, and
tests import the same values without drifting.

Examples
--------
>>> from article_pages import _constants
>>> _constants.DEFAULT_CONFIG.name
'article.yaml'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/article.yaml")
TOC_INDENT = "  "
