"""Shared fixtures for the article rendering tests."""

from __future__ import annotations

import pytest

from article_pages.models import Article, Section

SAMPLE_CONTENT = "Intro line.\n\n### Sub One\nBody one.\n\n### Sub Two\nBody two."


@pytest.fixture
def sample_article() -> Article:
    """Return an article mixing sub-headings, emphasis, and a plain section."""
    return Article(
        title="【完全ガイド】SEOとは？",
        meta_description="SEOの基礎から実践まで解説します。",
        sections=(
            Section(heading="概要", content=SAMPLE_CONTENT),
            Section(
                heading="メリット",
                content=(
                    "**1. 業務効率の向上**\n"
                    "作業時間を*大幅に*短縮できます。\n\n\n"
                    "### 注意点\n"
                    "コストが 5 * 2 倍になることもあります。"
                ),
            ),
            Section(heading="まとめ", content="要点を振り返ります。"),
        ),
    )
