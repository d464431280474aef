r"""Data shapes that flow through the article rendering pipeline.

An :class:`Article` arrives fully formed from the content-generation step and
is never mutated. Parsing a :class:`Section` body yields transient
:class:`SubHeading` and :class:`Paragraph` blocks, and the outline builder
derives :class:`TocEntry` rows from them.

Example
-------
>>> from article_pages.models import Article, Section
>>> article = Article(
...     title="Guide",
...     meta_description="A short guide",
...     sections=(Section(heading="Intro", content="Hello"),),
... )
>>> article.sections[0].heading
'Intro'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Section:
    """One top-level heading plus its raw body text.

    Attributes
    ----------
    heading : str
        Text of the section heading, rendered as a second-level heading.
    content : str
        Raw body text using the ``###`` sub-heading and ``**``/``*`` emphasis
        markup.
    """

    heading: str
    content: str


@dc.dataclass(frozen=True, slots=True)
class Article:
    """Generated article content: title, meta description, ordered sections.

    Attributes
    ----------
    title : str
        Document title used for ``<h1>`` and ``<title>``.
    meta_description : str
        Summary emitted as the document's ``description`` meta tag.
    sections : tuple[Section, ...]
        Sections in document order. Position determines anchor numbering.
    """

    title: str
    meta_description: str
    sections: tuple[Section, ...]


@dc.dataclass(frozen=True, slots=True)
class SubHeading:
    """Third-level heading found inside a section body."""

    text: str


@dc.dataclass(frozen=True, slots=True)
class Paragraph:
    """Contiguous run of non-blank lines inside a section body."""

    lines: tuple[str, ...]


Block: typ.TypeAlias = SubHeading | Paragraph


@dc.dataclass(frozen=True, slots=True)
class TocEntry:
    """Table-of-contents row linking to an anchor in the rendered body.

    Attributes
    ----------
    id : str
        Anchor identifier, used as both element ``id`` and link target.
    text : str
        Display label (the heading text).
    level : int
        ``2`` for section headings, ``3`` for sub-headings.
    """

    id: str
    text: str
    level: typ.Literal[2, 3]


__all__ = ["Article", "Block", "Paragraph", "Section", "SubHeading", "TocEntry"]
