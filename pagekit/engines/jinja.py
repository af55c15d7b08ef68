"""Jinja2 engine for component templates."""

from __future__ import annotations

import typing as typ

from jinja2 import Environment

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class JinjaEngine:
    """Render component content as a Jinja2 template string."""

    def __init__(self, *, autoescape: bool = True) -> None:
        """Configure the Jinja environment shared by every render call.

        Parameters
        ----------
        autoescape : bool, optional
            Escape interpolated values as HTML. Defaults to ``True``.
        """
        self.env = Environment(
            autoescape=autoescape,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_sync(
        self, content: typ.Any, data: cabc.Mapping[str, typ.Any], path: str
    ) -> str:
        """Compile ``content`` and render it with ``data``.

        Template syntax errors propagate as ``jinja2`` exceptions.
        """
        del path
        template = self.env.from_string(str(content))
        return template.render(**data)


__all__ = ["JinjaEngine"]
