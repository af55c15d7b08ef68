"""Shared fixtures for the pagekit test suite.

The in-memory reader stands in for the filesystem so loader tests can control
directory enumeration order, inject parse failures, and observe exactly when
entries are pulled relative to file reads.
"""

from __future__ import annotations

import collections.abc as cabc
import datetime as dt
import posixpath
import typing as typ

import pytest

from pagekit.models import DirEntry, FileInfo

if typ.TYPE_CHECKING:
    from pagekit.models import Parser

FIXED_MTIME = dt.datetime(2024, 5, 1, 12, 0, tzinfo=dt.UTC)
FIXED_BIRTHTIME = dt.datetime(2024, 4, 1, 9, 30, tzinfo=dt.UTC)


class MemoryReader:
    """Reader backed by dictionaries, preserving insertion order of entries."""

    def __init__(self) -> None:
        self.info: dict[str, FileInfo] = {}
        self.entries: dict[str, list[DirEntry]] = {}
        self.payloads: dict[str, cabc.Mapping[str, typ.Any] | Exception] = {}
        self.events: list[str] = []
        self.parsers: dict[str, Parser] = {}

    def _attach(self, path: str, entry: DirEntry) -> None:
        parent = posixpath.dirname(path)
        self.entries.setdefault(parent, []).append(entry)

    def add_dir(self, path: str) -> None:
        self.info[path] = FileInfo(is_directory=True)
        self.entries.setdefault(path, [])
        self._attach(path, DirEntry(posixpath.basename(path), is_directory=True))

    def add_file(
        self,
        path: str,
        payload: cabc.Mapping[str, typ.Any] | Exception,
        *,
        remote: bool = False,
    ) -> None:
        self.info[path] = FileInfo(
            is_directory=False,
            mtime=FIXED_MTIME,
            birthtime=FIXED_BIRTHTIME,
            remote=remote,
        )
        self.payloads[path] = payload
        self._attach(path, DirEntry(posixpath.basename(path), is_directory=False))

    def add_symlink(self, path: str, *, is_directory: bool = False) -> None:
        self.info[path] = FileInfo(is_directory=is_directory, is_symlink=True)
        self.payloads[path] = {"content": "linked"}
        self._attach(
            path,
            DirEntry(
                posixpath.basename(path), is_directory=is_directory, is_symlink=True
            ),
        )

    async def get_info(self, path: str) -> FileInfo | None:
        return self.info.get(path)

    async def read_dir(self, path: str) -> cabc.AsyncIterator[DirEntry]:
        for entry in self.entries.get(path, []):
            self.events.append(f"pull {posixpath.join(path, entry.name)}")
            yield entry

    async def read(self, path: str, parser: Parser) -> cabc.Mapping[str, typ.Any]:
        self.events.append(f"read {path}")
        self.parsers[path] = parser
        payload = self.payloads[path]
        if isinstance(payload, Exception):
            raise payload
        return dict(payload)


class TagEngine:
    """Engine that appends a tag and records the data it was given."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        self.calls: list[tuple[typ.Any, dict[str, typ.Any], str]] = []

    def render_sync(
        self, content: typ.Any, data: cabc.Mapping[str, typ.Any], path: str
    ) -> str:
        self.calls.append((content, dict(data), path))
        return f"{content}|{self.tag}"


class IdentityEngine:
    """Engine that returns its input unchanged."""

    def render_sync(
        self, content: typ.Any, data: cabc.Mapping[str, typ.Any], path: str
    ) -> str:
        return str(content)


def unused_parser(path: object) -> dict[str, typ.Any]:
    """Parser placeholder; the memory reader never invokes parsers."""
    msg = f"memory reader should not call parsers ({path})"
    raise AssertionError(msg)


@pytest.fixture
def memory_reader() -> MemoryReader:
    """Return an empty in-memory reader."""
    return MemoryReader()


@pytest.fixture
def tag_engine_factory() -> cabc.Callable[[str], TagEngine]:
    """Return a factory for recording engines."""
    return TagEngine


@pytest.fixture
def identity_engine() -> IdentityEngine:
    """Return an engine that passes content through unchanged."""
    return IdentityEngine()


@pytest.fixture
def parser() -> Parser:
    """Return a parser placeholder suitable for memory-reader formats."""
    return unused_parser
