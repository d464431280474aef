"""Behaviour tests for exporting a generated article.

These pytest-bdd scenarios export an article whose sections repeat the same
heading text and then inspect the written files. They prove that the
standalone document and the preview snapshot link to the same anchors and
that every table-of-contents link resolves to a heading in its own file.

Usage
-----
Run ``pytest tests/bdd/test_article_export.py -v`` after installing the test
extra (``pip install -e .[test]``). The scenario writes into ``tmp_path`` only.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from article_pages.generator import ArticleExporter
from article_pages.models import Article, Section

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "article_export.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soups(scenario_state: dict[str, object]) -> list[BeautifulSoup]:
    written = typ.cast("list[Path]", scenario_state["written"])
    return [
        BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser") for path in written
    ]


@given("a generated article with repeated section headings")
def given_article(scenario_state: dict[str, object]) -> None:
    """Store an article whose sections share heading text."""
    scenario_state["article"] = Article(
        title="概要ガイド",
        meta_description="重複する見出しを含む記事",
        sections=(
            Section("概要", "導入\n\n### ポイント\n**重要**な点"),
            Section("概要", "### ポイント\n*補足*です"),
        ),
    )


@when("I export the article")
def when_export(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write the document and preview snapshot into a temp directory."""
    article = typ.cast("Article", scenario_state["article"])
    scenario_state["written"] = ArticleExporter(output_dir=tmp_path).run(article)


@then("the document and the preview link to the same anchors")
def then_same_anchors(scenario_state: dict[str, object]) -> None:
    """Both files list identical TOC targets in identical order."""
    document, preview = _soups(scenario_state)
    document_links = [a["href"] for a in document.select(".toc-list a")]
    preview_links = [a["href"] for a in preview.select("nav.toc a")]
    assert document_links == preview_links == [
        "#section-1",
        "#section-1-h3-1",
        "#section-2",
        "#section-2-h3-1",
    ]


@then("every table of contents link resolves to a heading")
def then_links_resolve(scenario_state: dict[str, object]) -> None:
    """Each TOC target matches exactly one heading id in the same file."""
    for soup in _soups(scenario_state):
        headings = {tag["id"] for tag in soup.select("h2[id], h3[id]")}
        targets = {a["href"].removeprefix("#") for a in soup.select("ul a")}
        assert targets == headings
