"""Wire the loaders to a site configuration.

:class:`SiteLoader` builds the default reader and format registry for a
:class:`~pagekit.config.SiteConfig`, owns the :class:`Directory` seeded with
the configured data, and exposes the component and page loaders behind a
small facade used by the CLI.

Example
-------
>>> import asyncio
>>> from pathlib import Path
>>> from pagekit.config import load_site_config
>>> from pagekit.site import SiteLoader
>>> site = SiteLoader(load_site_config(Path("pagekit.yaml")))  # doctest: +SKIP
>>> asyncio.run(site.load_components())  # doctest: +SKIP
>>> site.component("card").render({"title": "Hello"})  # doctest: +SKIP
'<div class="card">Hello</div>'
"""

from __future__ import annotations

import typing as typ

from .formats import Formats, build_default_formats
from .loaders import ComponentsLoader, Directory, PageLoader, find_component
from .reader import FileSystemReader

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .loaders import Component
    from .models import Page
    from .reader import Reader


class SiteLoader:
    """Load components and asset pages for one configured site."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        reader: Reader | None = None,
        formats: Formats | None = None,
    ) -> None:
        """Initialize the collaborators shared by both loaders.

        Parameters
        ----------
        config : SiteConfig
            Parsed site configuration.
        reader : Reader, optional
            Source reader; defaults to :class:`FileSystemReader`.
        formats : Formats, optional
            Format registry; defaults to the built-in formats configured with
            ``config.engines``.
        """
        self.config = config
        self.reader = reader or FileSystemReader()
        self.formats = formats or build_default_formats(config.engines)
        self.directory = Directory(data=dict(config.data))
        self.components_loader = ComponentsLoader(
            reader=self.reader, formats=self.formats
        )
        self.page_loader = PageLoader(reader=self.reader)

    async def load_components(self) -> None:
        """Populate ``self.directory`` from the configured component root."""
        await self.components_loader.load(
            self.config.components_path.as_posix(), self.directory
        )

    async def load_page(self, path: str) -> Page | None:
        """Load ``path`` as an asset page, or return ``None`` if it is not one."""
        fmt = self.formats.search(path)
        if fmt is None:
            return None
        return await self.page_loader.load(path, fmt)

    def component(self, name: str) -> Component | None:
        """Return the loaded component registered under the dotted ``name``."""
        return find_component(self.directory.components, name)


__all__ = ["SiteLoader"]
