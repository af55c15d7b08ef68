"""Registry mapping file extensions to formats.

A :class:`Formats` registry answers "which format handles this path?" by
picking the longest registered extension the path ends with, so
``card.jinja.md`` resolves to ``.jinja.md`` rather than ``.md``.

Example
-------
>>> from pagekit.formats import Formats
>>> from pagekit.models import Format
>>> formats = Formats()
>>> formats.set(Format(ext=".md"))
>>> formats.set(Format(ext=".jinja.md"))
>>> formats.search("_components/card.jinja.md").ext
'.jinja.md'
>>> formats.search("logo.svg") is None
True
"""

from __future__ import annotations

import typing as typ

from ._constants import DEFAULT_PYGMENTS_STYLE
from .engines import JinjaEngine, MarkdownEngine
from .models import Format
from .parsers import asset_loader, json_loader, text_loader, yaml_loader

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .config import EngineSettings


class Formats:
    """Collection of formats keyed by extension."""

    def __init__(self) -> None:
        self._entries: dict[str, Format] = {}

    def set(self, fmt: Format) -> None:
        """Register ``fmt``, replacing any format with the same extension."""
        self._entries[fmt.ext] = fmt
        # Longest extensions first so ``search`` returns the most specific match.
        self._entries = dict(
            sorted(self._entries.items(), key=lambda item: len(item[0]), reverse=True)
        )

    def get(self, ext: str) -> Format | None:
        """Return the format registered for exactly ``ext``."""
        return self._entries.get(ext)

    def search(self, path: str) -> Format | None:
        """Return the most specific format whose extension ends ``path``."""
        for ext, fmt in self._entries.items():
            if path.endswith(ext):
                return fmt
        return None

    def __iter__(self) -> cabc.Iterator[Format]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def build_default_formats(settings: EngineSettings | None = None) -> Formats:
    """Return a registry holding the built-in template, data, and asset formats.

    Parameters
    ----------
    settings : EngineSettings, optional
        Engine options from the site config; defaults apply when omitted.

    Returns
    -------
    Formats
        Registry with ``.jinja``, ``.md``, ``.jinja.md``, ``.css``, ``.js``,
        ``.yaml``, ``.yml``, and ``.json`` formats.
    """
    pygments_style = settings.pygments_style if settings else DEFAULT_PYGMENTS_STYLE
    autoescape = settings.autoescape if settings else True
    jinja = JinjaEngine(autoescape=autoescape)
    markdown = MarkdownEngine(pygments_style)

    formats = Formats()
    formats.set(
        Format(
            ext=".jinja",
            component_loader=text_loader,
            page_loader=text_loader,
            engines=[jinja],
        )
    )
    formats.set(
        Format(
            ext=".md",
            component_loader=text_loader,
            page_loader=text_loader,
            engines=[markdown],
        )
    )
    formats.set(
        Format(ext=".jinja.md", component_loader=text_loader, engines=[jinja, markdown])
    )
    for ext in (".css", ".js"):
        formats.set(Format(ext=ext, asset=True, page_loader=asset_loader))
    for ext in (".yaml", ".yml"):
        formats.set(Format(ext=ext, page_loader=yaml_loader))
    formats.set(Format(ext=".json", page_loader=json_loader))
    return formats


__all__ = ["Formats", "build_default_formats"]
