"""Markdown engine with Pygments-highlighted fenced code blocks."""

from __future__ import annotations

import typing as typ

from markdown import Markdown

if typ.TYPE_CHECKING:
    import collections.abc as cabc

EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")


class MarkdownEngine:
    """Render Markdown component bodies into HTML.

    Template data is ignored; pair this engine with :class:`JinjaEngine`
    earlier in the chain when a Markdown component needs interpolation. One
    converter is built per engine and reset before every render, so renders
    run one at a time on the calling thread.
    """

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Build the converter used for every render.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style applied by ``codehilite``. Defaults to ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._converter = Markdown(
            extensions=list(EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "css_class": "codehilite",
                    "guess_lang": False,
                    "pygments_style": pygments_style,
                }
            },
        )

    def render_sync(
        self, content: typ.Any, data: cabc.Mapping[str, typ.Any], path: str
    ) -> str:
        """Convert ``content`` from Markdown to HTML."""
        del data, path
        self._converter.reset()
        return self._converter.convert(str(content))


__all__ = ["MarkdownEngine"]
