r"""Validate generated article payloads before they reach the renderer.

Language models usually wrap their JSON reply in a ```` ```json ```` fence or
surround it with prose. :func:`extract_json_payload` pulls out the fenced body
(or, failing that, the outermost ``{...}`` span) and :func:`decode_article`
decodes it with ``msgspec`` into an immutable :class:`~article_pages.models.Article`.
Shape errors surface as :class:`ArticleFormatError`; the renderer itself never
sees an invalid article.

Example
-------
>>> from article_pages.article_loader import decode_article
>>> article = decode_article(
...     '{"title": "T", "metaDescription": "D",'
...     ' "sections": [{"heading": "H", "content": "C"}]}'
... )
>>> article.sections[0].heading
'H'
"""

from __future__ import annotations

import re
from pathlib import Path

import msgspec

from .models import Article, Section

FENCED_JSON_PATTERN = re.compile(r"```json\n(.*?)\n```", re.DOTALL)
OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


class ArticleFormatError(ValueError):
    """Raised when an article payload does not have the expected shape."""


class SectionPayload(msgspec.Struct):
    """Wire shape of one generated section."""

    heading: str
    content: str


class ArticlePayload(msgspec.Struct, rename="camel"):
    """Wire shape of a generated article (``metaDescription`` on the wire)."""

    title: str
    meta_description: str
    sections: list[SectionPayload]


def extract_json_payload(text: str) -> str:
    """Return the JSON document embedded in a model reply.

    The body of the first ```` ```json ```` fence wins; otherwise the span from
    the first ``{`` to the last ``}``; otherwise the text unchanged.
    """
    fenced = FENCED_JSON_PATTERN.search(text)
    if fenced:
        return fenced.group(1)
    bare = OBJECT_PATTERN.search(text)
    if bare:
        return bare.group(0)
    return text


def decode_article(payload: str | bytes) -> Article:
    """Decode a JSON article payload into an :class:`Article`.

    Parameters
    ----------
    payload : str or bytes
        JSON text, optionally wrapped in a fenced block or surrounding prose.

    Returns
    -------
    Article
        Immutable article with sections in payload order.

    Raises
    ------
    ArticleFormatError
        If the payload is not valid JSON, misses required fields, holds values
        of the wrong type, or has no sections.
    """
    try:
        text = payload.decode("utf-8") if isinstance(payload, bytes) else payload
        decoded = msgspec.json.decode(extract_json_payload(text), type=ArticlePayload)
    except (UnicodeDecodeError, msgspec.DecodeError) as exc:
        msg = f"Invalid article payload: {exc}"
        raise ArticleFormatError(msg) from exc
    if not decoded.sections:
        msg = "Article payload must contain at least one section."
        raise ArticleFormatError(msg)
    return Article(
        title=decoded.title,
        meta_description=decoded.meta_description,
        sections=tuple(
            Section(heading=section.heading, content=section.content)
            for section in decoded.sections
        ),
    )


def load_article(path: Path) -> Article:
    """Read and decode the article stored at ``path``.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ArticleFormatError
        If the file content is not a valid article payload.
    """
    if not path.exists():
        msg = f"Article file '{path}' not found."
        raise FileNotFoundError(msg)
    return decode_article(path.read_bytes())


__all__ = [
    "ArticleFormatError",
    "ArticlePayload",
    "SectionPayload",
    "decode_article",
    "extract_json_payload",
    "load_article",
]
