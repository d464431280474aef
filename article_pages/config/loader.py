"""Load render configuration YAML into a typed dataclass."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .models import RenderConfig, RenderConfigError

_STRING_FIELDS = ("lang", "toc_title", "highlight_class", "filename_suffix")


def _optional_str(payload: typ.Mapping[str, typ.Any], key: str) -> str | None:
    """Return a stripped string for ``key`` or None when absent."""
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"render.{key} must be a string, got {type(value).__name__}."
        raise RenderConfigError(msg)
    text = value.strip()
    if not text:
        msg = f"render.{key} must not be empty."
        raise RenderConfigError(msg)
    return text


def _build_render_config(payload: typ.Mapping[str, typ.Any]) -> RenderConfig:
    """Merge a ``render`` mapping over the default RenderConfig."""
    known = {field.name for field in dc.fields(RenderConfig)}
    unknown = sorted(set(payload) - known)
    if unknown:
        msg = f"Unknown render settings: {', '.join(unknown)}."
        raise RenderConfigError(msg)

    overrides: dict[str, typ.Any] = {}
    for key in _STRING_FIELDS:
        value = _optional_str(payload, key)
        if value is not None:
            overrides[key] = value
    output_dir = _optional_str(payload, "output_dir")
    if output_dir is not None:
        overrides["output_dir"] = Path(output_dir)
    return dc.replace(RenderConfig(), **overrides)


def load_render_config(path: Path) -> RenderConfig:
    """Load the YAML file describing how articles are rendered.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``config/article.yaml``).

    Returns
    -------
    RenderConfig
        Defaults overlaid with the values of the file's ``render`` mapping.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    RenderConfigError
        If the ``render`` section is not a mapping, names unknown settings, or
        holds values of the wrong type.

    Examples
    --------
    >>> from pathlib import Path
    >>> from article_pages.config import load_render_config
    >>> load_render_config(Path("config/article.yaml")).lang  # doctest: +SKIP
    'ja'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)

    match loaded.get("render"):
        case None:
            return RenderConfig()
        case dict() as render:
            return _build_render_config(render)
        case _:
            msg = "The 'render' section must be a mapping."
            raise RenderConfigError(msg)


__all__ = ["load_render_config"]
