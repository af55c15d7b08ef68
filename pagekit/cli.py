"""Cyclopts CLI entrypoint for inspecting pagekit components and asset pages.

The ``pagekit`` console script defined here loads the component tree described
by ``pagekit.yaml``, renders individual components with JSON props, and loads
asset-producing source files as pages. It is mostly useful when authoring
components, to check how names resolve and what a component renders to before
wiring it into a build.

Examples
--------
List every component under the configured component root:

>>> from pagekit.cli import main
>>> main()  # doctest: +SKIP

Render a nested component with props:

>>> from pagekit.cli import app
>>> app.run(
...     ["render", "forms.button", "--props", '{"label": "Save"}']
... )  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import typing as typ
from pathlib import Path

import cyclopts
import msgspec
import msgspec.json as msgspec_json
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG
from .config import load_site_config
from .loaders import Component
from .logging import configure_logging
from .site import SiteLoader

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .loaders import Components

app = App(name="pagekit", config=cyclopts.config.Env("PAGEKIT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="PAGEKIT_CONFIG")
]
VerboseOption = typ.Annotated[bool, Parameter(help="Enable debug logging")]


def _load_site(config: Path, *, verbose: bool) -> SiteLoader:
    configure_logging(verbose=verbose)
    return SiteLoader(load_site_config(config))


def _format_tree(components: Components, depth: int = 0) -> cabc.Iterator[str]:
    """Yield one indented line per namespace entry, sorted by key."""
    indent = "  " * depth
    for key in sorted(components):
        entry = components[key]
        match entry:
            case Component():
                markers = "".join(
                    f" [{kind}]"
                    for kind, value in (("css", entry.css), ("js", entry.js))
                    if value
                )
                yield f"{indent}{key}{markers}"
            case dict():
                yield f"{indent}{key}/"
                yield from _format_tree(entry, depth + 1)


@app.command(help="List the components discovered under the component root.")
def components(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
) -> None:
    """Print the component namespace as an indented tree.

    Parameters
    ----------
    config : Path, optional
        Path to the ``pagekit.yaml`` configuration file (overridable via
        ``PAGEKIT_CONFIG``).
    verbose : bool, optional
        Log skipped files and loaded components at debug level.
    """
    site = _load_site(config, verbose=verbose)
    asyncio.run(site.load_components())
    for line in _format_tree(site.directory.components):
        print(line)


@app.command(help="Render a single component with JSON props.")
def render(
    name: typ.Annotated[str, Parameter(help="Dotted component name")],
    *,
    props: typ.Annotated[str, Parameter(help="JSON object of props")] = "{}",
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
) -> None:
    """Render the component ``name`` and print the output.

    Raises
    ------
    ValueError
        If ``props`` is not valid JSON or does not decode to an object.
    KeyError
        If no component is registered under ``name``.
    """
    try:
        decoded = msgspec_json.decode(props)
    except msgspec.DecodeError as exc:
        msg = f"Props are not valid JSON: {exc}"
        raise ValueError(msg) from exc
    if not isinstance(decoded, dict):
        msg = "Props must be a JSON object."
        raise ValueError(msg)

    site = _load_site(config, verbose=verbose)
    asyncio.run(site.load_components())
    component = site.component(name)
    if component is None:
        msg = f"Unknown component '{name}'."
        raise KeyError(msg)
    print(component.render(decoded))


@app.command(help="Load an asset-producing source file as a page.")
def page(
    path: typ.Annotated[str, Parameter(help="Source file path")],
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
) -> None:
    """Print the page record loaded from ``path``.

    Prints ``not a page: <path>`` when no format can load ``path`` as a page
    or the file does not exist.
    """
    site = _load_site(config, verbose=verbose)
    loaded = asyncio.run(site.load_page(path))
    if loaded is None:
        print(f"not a page: {path}")
        return
    print(f"path: {loaded.path}")
    print(f"ext: {loaded.ext}")
    print(f"asset: {str(loaded.asset).lower()}")
    print(f"data: {msgspec_json.encode(loaded.base_data).decode('utf-8')}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pagekit`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
