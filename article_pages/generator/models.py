"""Shared dataclasses used by the document serializer's template context."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from markupsafe import Markup


@dc.dataclass(slots=True)
class BlockModel:
    """Structured data for one body block in the document template.

    Attributes
    ----------
    kind : str
        ``"subheading"`` or ``"paragraph"``.
    anchor : str or None
        Element id for sub-headings; ``None`` for paragraphs.
    text : str
        Plain heading text (empty for paragraphs).
    html : Markup
        Rendered paragraph run (empty for sub-headings).
    """

    kind: typ.Literal["subheading", "paragraph"]
    anchor: str | None
    text: str
    html: Markup | str


@dc.dataclass(slots=True)
class SectionModel:
    """Structured data passed to the article section markup.

    Attributes
    ----------
    anchor : str
        Element id of the section heading.
    heading : str
        Section heading text.
    blocks : list[BlockModel]
        Body blocks in source order.
    """

    anchor: str
    heading: str
    blocks: list[BlockModel]


__all__ = ["BlockModel", "SectionModel"]
