"""Reader abstraction and the local filesystem implementation.

Loaders never touch the disk directly. They ask a :class:`Reader` for path
metadata, enumerate directories through an async iterator, and delegate file
decoding to the parser supplied by a format. Each call is an await point so
remote or streamed readers can slot in without changing the loaders.

Example
-------
>>> import asyncio
>>> from pagekit.reader import FileSystemReader
>>> reader = FileSystemReader()
>>> asyncio.run(reader.get_info("/definitely/missing")) is None
True
"""

from __future__ import annotations

import asyncio
import collections.abc as cabc
import datetime as dt
import os
import typing as typ
from pathlib import Path

from .models import DirEntry, FileInfo

if typ.TYPE_CHECKING:
    from .models import Parser


@typ.runtime_checkable
class Reader(typ.Protocol):
    """Resolve path metadata, enumerate directories, and parse files."""

    async def get_info(self, path: str) -> FileInfo | None:
        """Return metadata for ``path`` or ``None`` when it does not exist."""
        ...

    def read_dir(self, path: str) -> cabc.AsyncIterator[DirEntry]:
        """Yield the entries of the directory at ``path`` one at a time."""
        ...

    async def read(self, path: str, parser: Parser) -> cabc.Mapping[str, typ.Any]:
        """Decode the file at ``path`` with ``parser``."""
        ...


def _timestamp(value: float | None) -> dt.datetime | None:
    if not value:
        return None
    return dt.datetime.fromtimestamp(value, tz=dt.UTC)


class FileSystemReader:
    """Read sources from the local filesystem.

    Relative paths are resolved against ``root`` when one is given. Directory
    entries are yielded sorted by name so that case-insensitive collisions
    resolve identically on every platform.
    """

    def __init__(self, root: Path | None = None) -> None:
        self.root = root

    def _resolve(self, path: str) -> Path:
        candidate = Path(path)
        if self.root is not None and not candidate.is_absolute():
            return self.root / candidate
        return candidate

    async def get_info(self, path: str) -> FileInfo | None:
        target = self._resolve(path)
        try:
            link_stat = await asyncio.to_thread(target.lstat)
        except FileNotFoundError:
            return None
        is_symlink = target.is_symlink()
        try:
            stat = await asyncio.to_thread(target.stat) if is_symlink else link_stat
        except FileNotFoundError:
            # Dangling symlink.
            stat = link_stat
        return FileInfo(
            is_directory=target.is_dir(),
            is_symlink=is_symlink,
            mtime=_timestamp(stat.st_mtime),
            birthtime=_timestamp(getattr(stat, "st_birthtime", None)),
            remote=False,
        )

    async def read_dir(self, path: str) -> cabc.AsyncIterator[DirEntry]:
        target = self._resolve(path)
        entries = await asyncio.to_thread(_scan_sorted, target)
        for entry in entries:
            yield DirEntry(
                name=entry.name,
                is_directory=entry.is_dir(follow_symlinks=False),
                is_symlink=entry.is_symlink(),
            )

    async def read(self, path: str, parser: Parser) -> cabc.Mapping[str, typ.Any]:
        return await asyncio.to_thread(parser, self._resolve(path))


def _scan_sorted(path: Path) -> list[os.DirEntry[str]]:
    with os.scandir(path) as iterator:
        return sorted(iterator, key=lambda entry: entry.name)


__all__ = ["FileSystemReader", "Reader"]
