"""Discover components by walking a directory tree.

:class:`ComponentsLoader` mirrors a source directory into a nested,
case-insensitive namespace. Subdirectories become nested mappings and every
file whose format supports components becomes a :class:`Component` leaf whose
``render`` pipes the file content through the format's engines. Entries whose
name starts with ``.`` or ``_`` and symbolic links are never visited.

Example
-------
>>> import asyncio
>>> from pagekit.formats import build_default_formats
>>> from pagekit.loaders import ComponentsLoader, Directory
>>> from pagekit.reader import FileSystemReader
>>> loader = ComponentsLoader(
...     reader=FileSystemReader(), formats=build_default_formats()
... )
>>> directory = Directory(data={"site": "Example"})
>>> asyncio.run(loader.load("src/_components", directory))  # doctest: +SKIP
>>> directory.components["card"].render({"title": "Hi"})  # doctest: +SKIP
'<div class="card">Hi</div>'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import posixpath
import typing as typ

from pagekit._constants import HIDDEN_PREFIXES
from pagekit.errors import ParseError
from pagekit.logging import get_logger

if typ.TYPE_CHECKING:
    from pagekit.formats import Formats
    from pagekit.reader import Reader

logger = get_logger(__name__.removeprefix("pagekit."))

RenderFunction = cabc.Callable[[cabc.Mapping[str, typ.Any]], str]


@dc.dataclass(slots=True)
class Component:
    """Named, renderable template fragment.

    Attributes
    ----------
    name : str
        Component name with its original case; namespace keys are lower-cased.
    render : Callable[[Mapping[str, Any]], str]
        Render the component with the given props. Performs no I/O.
    css : str or None
        Global stylesheet needed by the component, inserted once per site.
    js : str or None
        Global script needed by the component, inserted once per site.
    """

    name: str
    render: RenderFunction
    css: str | None = None
    js: str | None = None


Components = dict[str, "Components | Component"]


@dc.dataclass(slots=True)
class ComponentFile:
    """Decoded shape of a component source file."""

    content: typ.Any
    name: str | None = None
    css: str | None = None
    js: str | None = None
    inherit_data: bool = True

    @classmethod
    def from_mapping(
        cls, raw: cabc.Mapping[str, typ.Any], path: str
    ) -> ComponentFile:
        """Build a component file from the mapping a parser returned for ``path``.

        Raises
        ------
        ParseError
            If ``name`` is present but not a string.
        """
        name = raw.get("name")
        if name is not None and not isinstance(name, str):
            msg = f"component name must be a string, got {name!r}"
            raise ParseError(path, msg)
        return cls(
            content=raw.get("content"),
            name=name,
            css=raw.get("css"),
            js=raw.get("js"),
            inherit_data=raw.get("inherit_data", True) is not False,
        )


@dc.dataclass(slots=True)
class Directory:
    """Scope whose components share a set of inheritable default data.

    ``data`` is read on every render, so changes made after loading are seen
    by components loaded earlier.
    """

    data: dict[str, typ.Any] = dc.field(default_factory=dict)
    components: Components = dc.field(default_factory=dict)


def normalize_path(path: str) -> str:
    """Return ``path`` in POSIX form without redundant separators."""
    return posixpath.normpath(path.replace("\\", "/"))


def find_component(components: Components, name: str) -> Component | None:
    """Resolve a dotted, case-insensitive ``name`` such as ``"forms.Button"``."""
    current: Components | Component = components
    for segment in name.lower().split("."):
        match current:
            case dict():
                if segment not in current:
                    return None
                current = current[segment]
            case _:
                return None
    match current:
        case Component():
            return current
        case _:
            return None


def iter_components(
    components: Components, prefix: str = ""
) -> cabc.Iterator[tuple[str, Component]]:
    """Yield ``(dotted_name, component)`` pairs for every leaf in the namespace."""
    for key, entry in components.items():
        dotted = f"{prefix}{key}"
        match entry:
            case Component():
                yield dotted, entry
            case dict():
                yield from iter_components(entry, f"{dotted}.")


class ComponentsLoader:
    """Load components from a directory tree into a :class:`Directory`."""

    def __init__(self, *, reader: Reader, formats: Formats) -> None:
        """Bind the loader to its I/O and format dispatch collaborators.

        Parameters
        ----------
        reader : Reader
            Source of path metadata, directory listings, and parsed files.
        formats : Formats
            Registry used to find the format of each visited file.
        """
        self.reader = reader
        self.formats = formats

    async def load(self, path: str, directory: Directory) -> None:
        """Populate ``directory.components`` from the tree rooted at ``path``.

        Missing paths and plain files are ignored. Errors raised while parsing
        a component file propagate unchanged and abort the load.
        """
        path = normalize_path(path)
        info = await self.reader.get_info(path)
        if info is None or not info.is_directory:
            logger.debug("no component directory at %s", path)
            return
        count = await self._load_directory(path, directory, directory.components)
        logger.info("loaded %d components from %s", count, path)

    async def _load_directory(
        self, path: str, directory: Directory, components: Components
    ) -> int:
        """Load the entries under ``path`` and return how many components loaded."""
        count = 0
        async for entry in self.reader.read_dir(path):
            if entry.is_symlink or entry.name.startswith(HIDDEN_PREFIXES):
                continue

            sub_path = posixpath.join(path, entry.name)

            if entry.is_directory:
                key = entry.name.lower()
                existing = components.get(key)
                sub_components: Components = (
                    existing if isinstance(existing, dict) else {}
                )
                components[key] = sub_components
                count += await self._load_directory(
                    sub_path, directory, sub_components
                )
                continue

            component = await self._load_component(sub_path, directory)
            if component is not None:
                components[component.name.lower()] = component
                count += 1
        return count

    async def _load_component(
        self, path: str, directory: Directory
    ) -> Component | None:
        fmt = self.formats.search(path)
        if fmt is None:
            logger.debug("skipping %s: no format", path)
            return None
        if fmt.component_loader is None or not fmt.engines:
            logger.debug("skipping %s: %s has no component support", path, fmt.ext)
            return None

        raw = await self.reader.read(path, fmt.component_loader)
        component_file = ComponentFile.from_mapping(raw, path)
        engines = list(fmt.engines)
        content = component_file.content

        def get_data(props: cabc.Mapping[str, typ.Any]) -> dict[str, typ.Any]:
            if not component_file.inherit_data:
                return dict(props)
            return {**directory.data, **props}

        def render(props: cabc.Mapping[str, typ.Any]) -> str:
            result = content
            for engine in engines:
                result = engine.render_sync(result, get_data(props), path)
            return result

        name = component_file.name
        if name is None:
            name = posixpath.basename(path).removesuffix(fmt.ext)
        logger.debug("loaded component %s from %s", name, path)
        return Component(
            name=name,
            render=render,
            css=component_file.css,
            js=component_file.js,
        )


__all__ = [
    "Component",
    "ComponentFile",
    "Components",
    "ComponentsLoader",
    "Directory",
    "find_component",
    "iter_components",
    "normalize_path",
]
