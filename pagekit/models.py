"""Shared records exchanged between the readers, formats, and loaders."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import datetime as dt
    from pathlib import Path

Parser = cabc.Callable[["Path"], cabc.Mapping[str, typ.Any]]
"""Callable that reads one file from disk and decodes it into a mapping."""


@typ.runtime_checkable
class Engine(typ.Protocol):
    """Synchronous content transformer used in a format's render chain."""

    def render_sync(
        self, content: typ.Any, data: cabc.Mapping[str, typ.Any], path: str
    ) -> str:
        """Return ``content`` transformed with ``data``; ``path`` is diagnostic."""
        ...


@dc.dataclass(slots=True)
class Format:
    """Bind a file extension to its parsing and rendering capabilities.

    Attributes
    ----------
    ext : str
        Extension suffix including the leading dot (for example ``".jinja.md"``).
    asset : bool
        ``True`` when pages of this format generate a static asset.
    component_loader : Parser or None
        Parser used to read component files; ``None`` disables components.
    page_loader : Parser or None
        Parser used to read page files; ``None`` disables pages.
    engines : list[Engine] or None
        Ordered render chain applied to component content.
    """

    ext: str
    asset: bool = False
    component_loader: Parser | None = None
    page_loader: Parser | None = None
    engines: list[Engine] | None = None


@dc.dataclass(slots=True, frozen=True)
class FileInfo:
    """Metadata resolved for a path by a reader."""

    is_directory: bool
    is_symlink: bool = False
    mtime: dt.datetime | None = None
    birthtime: dt.datetime | None = None
    remote: bool = False


@dc.dataclass(slots=True, frozen=True)
class DirEntry:
    """Single entry yielded while enumerating a directory."""

    name: str
    is_directory: bool
    is_symlink: bool = False


@dc.dataclass(slots=True)
class Page:
    """Source file that becomes a generated site asset.

    Attributes
    ----------
    path : str
        Source path with the format extension removed.
    ext : str
        Extension of the format the page was loaded with.
    asset : bool
        Copied from the format; asset pages are emitted verbatim downstream.
    remote : bool
        ``True`` when the reader fetched the file from a remote location.
    last_modified : datetime or None
        Modification timestamp, when the reader could resolve one.
    created : datetime or None
        Creation timestamp, when the platform exposes one.
    base_data : dict[str, Any]
        Data parsed from the source file.
    """

    path: str
    ext: str
    asset: bool = False
    remote: bool = False
    last_modified: dt.datetime | None = None
    created: dt.datetime | None = None
    base_data: dict[str, typ.Any] = dc.field(default_factory=dict)


__all__ = ["DirEntry", "Engine", "FileInfo", "Format", "Page", "Parser"]
