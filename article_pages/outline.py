"""Assign anchors and build the two-level table of contents for an article.

Anchors depend only on position: section ``i`` (0-based) becomes
``section-{i + 1}`` and the ``k``-th sub-heading inside it becomes
``section-{i + 1}-h3-{k}``. Heading text never contributes, so repeated
headings cannot collide. Both serializers read anchors from the
:class:`ArticleOutline` produced here instead of deriving their own.

Example
-------
>>> from article_pages.models import Article, Section
>>> from article_pages.outline import outline_article
>>> article = Article("T", "D", (Section("A", "### One\\nBody"),))
>>> [(entry.id, entry.level) for entry in outline_article(article).toc]
[('section-1', 2), ('section-1-h3-1', 3)]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from .markdown_parser import parse_blocks
from .models import Article, Block, SubHeading, TocEntry

logger = logging.getLogger(__name__)


def section_anchor(index: int) -> str:
    """Return the anchor for the section at 0-based ``index``."""
    return f"section-{index + 1}"


def subheading_anchor(section_id: str, ordinal: int) -> str:
    """Return the anchor for the 1-based ``ordinal`` sub-heading of a section."""
    return f"{section_id}-h3-{ordinal}"


@dc.dataclass(frozen=True, slots=True)
class AnchoredBlock:
    """A parsed block paired with its anchor (``None`` for paragraphs)."""

    block: Block
    anchor: str | None


@dc.dataclass(frozen=True, slots=True)
class OutlineSection:
    """One section with its anchor, TOC entries, and anchored blocks.

    Attributes
    ----------
    index : int
        0-based position of the section within the article.
    anchor : str
        Anchor of the section heading.
    heading : str
        Section heading text.
    blocks : tuple[AnchoredBlock, ...]
        Parsed body blocks in source order.
    """

    index: int
    anchor: str
    heading: str
    blocks: tuple[AnchoredBlock, ...]

    @property
    def entry(self) -> TocEntry:
        """Level-2 TOC entry for the section heading."""
        return TocEntry(id=self.anchor, text=self.heading, level=2)

    @property
    def children(self) -> tuple[TocEntry, ...]:
        """Level-3 TOC entries for the section's sub-headings, in order."""
        return tuple(
            TocEntry(id=item.anchor, text=item.block.text, level=3)
            for item in self.blocks
            if isinstance(item.block, SubHeading) and item.anchor is not None
        )


@dc.dataclass(frozen=True, slots=True)
class ArticleOutline:
    """Anchored structure of a whole article, shared by every serializer."""

    title: str
    meta_description: str
    sections: tuple[OutlineSection, ...]

    @property
    def toc(self) -> tuple[TocEntry, ...]:
        """Depth-first TOC: each section entry followed by its sub-headings."""
        entries: list[TocEntry] = []
        for section in self.sections:
            entries.append(section.entry)
            entries.extend(section.children)
        return tuple(entries)

    @property
    def anchors(self) -> frozenset[str]:
        """Every anchor the rendered body must carry."""
        return frozenset(entry.id for entry in self.toc)

    def anchor_for(self, section_index: int, ordinal: int | None = None) -> str:
        """Look up the anchor of a section or of one of its sub-headings.

        Parameters
        ----------
        section_index : int
            0-based section position.
        ordinal : int, optional
            1-based sub-heading ordinal; ``None`` selects the section heading.

        Raises
        ------
        IndexError
            If no section or sub-heading exists at the requested position.
        """
        if section_index < 0:
            msg = f"Section positions start at 0, got {section_index}."
            raise IndexError(msg)
        section = self.sections[section_index]
        if ordinal is None:
            return section.anchor
        if ordinal < 1:
            msg = f"Sub-heading ordinals start at 1, got {ordinal}."
            raise IndexError(msg)
        return section.children[ordinal - 1].id


def _anchor_blocks(section_id: str, blocks: typ.Iterable[Block]) -> list[AnchoredBlock]:
    anchored: list[AnchoredBlock] = []
    ordinal = 0
    for block in blocks:
        match block:
            case SubHeading():
                ordinal += 1
                anchored.append(AnchoredBlock(block, subheading_anchor(section_id, ordinal)))
            case _:
                anchored.append(AnchoredBlock(block, None))
    return anchored


def build_outline(
    parsed: typ.Iterable[tuple[str, typ.Sequence[Block]]],
    *,
    title: str = "",
    meta_description: str = "",
) -> ArticleOutline:
    """Anchor parsed sections and return the article outline.

    Parameters
    ----------
    parsed : Iterable[tuple[str, Sequence[Block]]]
        ``(heading, blocks)`` pairs in section order.
    title : str, optional
        Article title carried through to the serializers.
    meta_description : str, optional
        Article description carried through to the serializers.

    Returns
    -------
    ArticleOutline
        Outline whose ``toc`` and body anchors are set-equal by construction.
    """
    sections: list[OutlineSection] = []
    for index, (heading, blocks) in enumerate(parsed):
        anchor = section_anchor(index)
        sections.append(
            OutlineSection(
                index=index,
                anchor=anchor,
                heading=heading,
                blocks=tuple(_anchor_blocks(anchor, blocks)),
            )
        )
    outline = ArticleOutline(
        title=title, meta_description=meta_description, sections=tuple(sections)
    )
    logger.debug(
        "built outline with %d sections and %d toc entries",
        len(outline.sections),
        len(outline.toc),
    )
    return outline


def outline_article(article: Article) -> ArticleOutline:
    """Parse every section of ``article`` and build its outline."""
    return build_outline(
        ((section.heading, parse_blocks(section.content)) for section in article.sections),
        title=article.title,
        meta_description=article.meta_description,
    )


__all__ = [
    "AnchoredBlock",
    "ArticleOutline",
    "OutlineSection",
    "build_outline",
    "outline_article",
    "section_anchor",
    "subheading_anchor",
]
