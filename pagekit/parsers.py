r"""File parsers handed to the reader by each registered format.

Every parser accepts a filesystem path, reads the file itself, and returns a
mapping. Text templates may open with a YAML front-matter block delimited by
``---`` lines; the block is decoded with ``ruamel.yaml`` and the remaining body
is exposed under the ``content`` key.

Example
-------
>>> from pathlib import Path
>>> from pagekit.parsers import split_front_matter
>>> split_front_matter("---\nname: Card\n---\n<div/>\n", Path("card.jinja"))
({'name': 'Card'}, '<div/>\n')
"""

from __future__ import annotations

import io
import typing as typ

import msgspec
import msgspec.json as msgspec_json
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import FRONT_MATTER_DELIMITER
from .errors import ParseError

if typ.TYPE_CHECKING:
    from pathlib import Path


def _build_yaml() -> YAML:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    return loader


def _load_yaml_mapping(text: str, path: Path) -> dict[str, typ.Any]:
    """Decode ``text`` as a YAML mapping, treating an empty document as ``{}``."""
    try:
        loaded = _build_yaml().load(io.StringIO(text))
    except YAMLError as exc:
        raise ParseError(path, f"invalid YAML: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ParseError(path, "YAML content must be a mapping")
    return dict(loaded)


def split_front_matter(text: str, path: Path) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its front-matter mapping and the remaining body.

    Parameters
    ----------
    text : str
        Raw file contents.
    path : Path
        Source path, used in error messages.

    Returns
    -------
    tuple[dict[str, Any], str]
        The decoded front matter (empty when absent) and the body text.

    Raises
    ------
    ParseError
        If the front matter is not closed, not valid YAML, or not a mapping.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != FRONT_MATTER_DELIMITER:
        return {}, text
    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip("\r\n") == FRONT_MATTER_DELIMITER:
            header = "".join(lines[1:index])
            body = "".join(lines[index + 1 :])
            return _load_yaml_mapping(header, path), body
    raise ParseError(path, "front matter is not terminated")


def text_loader(path: Path) -> dict[str, typ.Any]:
    """Read a text template, returning its front matter plus ``content``."""
    text = path.read_text(encoding="utf-8")
    data, body = split_front_matter(text, path)
    data["content"] = body
    return data


def yaml_loader(path: Path) -> dict[str, typ.Any]:
    """Read a YAML data file into a mapping."""
    return _load_yaml_mapping(path.read_text(encoding="utf-8"), path)


def json_loader(path: Path) -> dict[str, typ.Any]:
    """Read a JSON data file into a mapping."""
    try:
        loaded = msgspec_json.decode(path.read_bytes())
    except msgspec.DecodeError as exc:
        raise ParseError(path, f"invalid JSON: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ParseError(path, "JSON content must be an object")
    return loaded


def asset_loader(path: Path) -> dict[str, typ.Any]:
    """Read a stylesheet or script verbatim."""
    return {"content": path.read_text(encoding="utf-8")}


__all__ = [
    "asset_loader",
    "json_loader",
    "split_front_matter",
    "text_loader",
    "yaml_loader",
]
