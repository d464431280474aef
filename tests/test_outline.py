"""Unit tests for anchor assignment and table-of-contents construction."""

from __future__ import annotations

import pytest

from article_pages.markdown_parser import parse_blocks
from article_pages.models import Article, Paragraph, Section, SubHeading, TocEntry
from article_pages.outline import (
    build_outline,
    outline_article,
    section_anchor,
    subheading_anchor,
)

SAMPLE_CONTENT = "Intro line.\n\n### Sub One\nBody one.\n\n### Sub Two\nBody two."


def test_anchor_scheme_is_one_based() -> None:
    assert section_anchor(0) == "section-1"
    assert subheading_anchor("section-3", 2) == "section-3-h3-2"


def test_section_toc_lists_sub_headings_in_order() -> None:
    """One level-2 entry followed by its sub-headings at level 3."""
    outline = build_outline([("Heading", parse_blocks(SAMPLE_CONTENT))])
    assert outline.toc == (
        TocEntry("section-1", "Heading", 2),
        TocEntry("section-1-h3-1", "Sub One", 3),
        TocEntry("section-1-h3-2", "Sub Two", 3),
    )


def test_toc_is_depth_first_across_sections(sample_article: Article) -> None:
    outline = outline_article(sample_article)
    assert [(entry.id, entry.level) for entry in outline.toc] == [
        ("section-1", 2),
        ("section-1-h3-1", 3),
        ("section-1-h3-2", 3),
        ("section-2", 2),
        ("section-2-h3-1", 3),
        ("section-3", 2),
    ]


def test_sub_heading_ordinals_reset_per_section() -> None:
    outline = build_outline([("A", (SubHeading("x"),)), ("B", (SubHeading("y"),))])
    assert [child.id for section in outline.sections for child in section.children] == [
        "section-1-h3-1",
        "section-2-h3-1",
    ]


def test_identical_headings_get_distinct_anchors() -> None:
    """Anchors ignore heading text, so repeated headings never collide."""
    article = Article(
        title="T",
        meta_description="D",
        sections=(
            Section("概要", "### 概要\nbody"),
            Section("概要", "### 概要\nbody"),
        ),
    )
    ids = [entry.id for entry in outline_article(article).toc]
    assert len(ids) == len(set(ids)) == 4


def test_level_three_count_matches_parsed_sub_headings(sample_article: Article) -> None:
    outline = outline_article(sample_article)
    for section, outline_section in zip(sample_article.sections, outline.sections, strict=True):
        parsed = parse_blocks(section.content)
        expected = sum(isinstance(block, SubHeading) for block in parsed)
        assert len(outline_section.children) == expected


def test_sections_without_sub_headings_have_no_children() -> None:
    article = Article(
        title="T",
        meta_description="D",
        sections=(Section("A", "one\n\ntwo"), Section("B", "")),
    )
    toc = outline_article(article).toc
    assert [entry.level for entry in toc] == [2, 2]


def test_blocks_carry_anchors_only_for_sub_headings() -> None:
    outline = build_outline([("A", (Paragraph(("p",)), SubHeading("s")))])
    anchored = outline.sections[0].blocks
    assert [item.anchor for item in anchored] == [None, "section-1-h3-1"]


def test_anchor_lookup(sample_article: Article) -> None:
    outline = outline_article(sample_article)
    assert outline.anchor_for(1) == "section-2"
    assert outline.anchor_for(0, 2) == "section-1-h3-2"
    assert outline.anchors == frozenset(entry.id for entry in outline.toc)
    with pytest.raises(IndexError):
        outline.anchor_for(2, 1)
    with pytest.raises(IndexError):
        outline.anchor_for(0, 0)
    with pytest.raises(IndexError):
        outline.anchor_for(-1)


def test_outline_preserves_section_order_and_metadata(sample_article: Article) -> None:
    outline = outline_article(sample_article)
    assert outline.title == sample_article.title
    assert outline.meta_description == sample_article.meta_description
    assert [section.heading for section in outline.sections] == [
        section.heading for section in sample_article.sections
    ]
