"""Tests for the local filesystem reader."""

from __future__ import annotations

import asyncio
import typing as typ

from pagekit.models import DirEntry
from pagekit.parsers import text_loader
from pagekit.reader import FileSystemReader, Reader

if typ.TYPE_CHECKING:
    from pathlib import Path


async def _collect(reader: FileSystemReader, path: str) -> list[DirEntry]:
    return [entry async for entry in reader.read_dir(path)]


def test_reader_satisfies_protocol() -> None:
    """The filesystem reader implements the Reader protocol."""
    assert isinstance(FileSystemReader(), Reader)


def test_get_info_for_missing_path(tmp_path: Path) -> None:
    """Missing paths resolve to None rather than raising."""
    reader = FileSystemReader()
    assert asyncio.run(reader.get_info(str(tmp_path / "missing"))) is None


def test_get_info_for_file_and_directory(tmp_path: Path) -> None:
    """Files and directories report their kind and a modification time."""
    (tmp_path / "card.jinja").write_text("x", encoding="utf-8")
    reader = FileSystemReader()

    file_info = asyncio.run(reader.get_info(str(tmp_path / "card.jinja")))
    dir_info = asyncio.run(reader.get_info(str(tmp_path)))

    assert file_info is not None
    assert file_info.is_directory is False
    assert file_info.is_symlink is False
    assert file_info.mtime is not None
    assert file_info.remote is False
    assert dir_info is not None
    assert dir_info.is_directory is True


def test_get_info_detects_symlinks(tmp_path: Path) -> None:
    """Symlinks, including dangling ones, are reported as such."""
    target = tmp_path / "target.jinja"
    target.write_text("x", encoding="utf-8")
    (tmp_path / "link.jinja").symlink_to(target)
    (tmp_path / "dangling.jinja").symlink_to(tmp_path / "gone.jinja")
    reader = FileSystemReader()

    link = asyncio.run(reader.get_info(str(tmp_path / "link.jinja")))
    dangling = asyncio.run(reader.get_info(str(tmp_path / "dangling.jinja")))

    assert link is not None
    assert link.is_symlink is True
    assert dangling is not None
    assert dangling.is_symlink is True


def test_read_dir_is_sorted_and_flags_entries(tmp_path: Path) -> None:
    """Entries are yielded by name with directory and symlink flags set."""
    (tmp_path / "b.jinja").write_text("b", encoding="utf-8")
    (tmp_path / "Card").mkdir()
    (tmp_path / "a.jinja").write_text("a", encoding="utf-8")
    (tmp_path / "z").symlink_to(tmp_path / "Card", target_is_directory=True)

    entries = asyncio.run(_collect(FileSystemReader(), str(tmp_path)))

    assert entries == [
        DirEntry("Card", is_directory=True),
        DirEntry("a.jinja", is_directory=False),
        DirEntry("b.jinja", is_directory=False),
        DirEntry("z", is_directory=False, is_symlink=True),
    ]


def test_relative_paths_resolve_against_root(tmp_path: Path) -> None:
    """A configured root anchors relative paths for every operation."""
    (tmp_path / "card.jinja").write_text("---\nname: Card\n---\n<div/>", encoding="utf-8")
    reader = FileSystemReader(root=tmp_path)

    info = asyncio.run(reader.get_info("card.jinja"))
    data = asyncio.run(reader.read("card.jinja", text_loader))

    assert info is not None
    assert data == {"name": "Card", "content": "<div/>"}
