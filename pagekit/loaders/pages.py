"""Load single source files that generate site assets (CSS, JS, data)."""

from __future__ import annotations

import typing as typ

from pagekit.logging import get_logger
from pagekit.models import Page

if typ.TYPE_CHECKING:
    from pagekit.models import Format
    from pagekit.reader import Reader

logger = get_logger(__name__.removeprefix("pagekit."))


class PageLoader:
    """Build :class:`Page` records for asset-producing source files."""

    def __init__(self, *, reader: Reader) -> None:
        self.reader = reader

    async def load(self, path: str, fmt: Format) -> Page | None:
        """Load the page at ``path`` using the already resolved ``fmt``.

        Parameters
        ----------
        path : str
            Source file path; it must end with ``fmt.ext``.
        fmt : Format
            Format resolved for ``path`` by the registry.

        Returns
        -------
        Page or None
            The loaded page, or ``None`` when ``fmt`` cannot load pages or the
            file does not exist.

        Raises
        ------
        Exception
            Whatever the format's page parser raises is propagated unchanged.
        """
        if fmt.page_loader is None:
            return None

        info = await self.reader.get_info(path)
        if info is None:
            logger.debug("no page at %s", path)
            return None

        page = Page(
            path=path[: -len(fmt.ext)] if fmt.ext else path,
            ext=fmt.ext,
            asset=fmt.asset,
            remote=info.remote,
            last_modified=info.mtime or None,
            created=info.birthtime or None,
        )
        data = await self.reader.read(path, fmt.page_loader)
        page.base_data.update(data)
        logger.debug("loaded page %s%s", page.path, page.ext)
        return page


__all__ = ["PageLoader"]
