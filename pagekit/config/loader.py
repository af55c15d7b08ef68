"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from pagekit._constants import DEFAULT_COMPONENTS_DIR, DEFAULT_SRC_DIR

from .helpers import _build_engine_settings, _optional_str, _section
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site sources.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``pagekit.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with the source root resolved relative to the
        config file's directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pagekit.config import load_site_config
    >>> config = load_site_config(Path("pagekit.yaml"))  # doctest: +SKIP
    >>> config.components_dir  # doctest: +SKIP
    '_components'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    defaults = _section(raw, "defaults")
    components = _section(raw, "components")
    engines = _section(raw, "engines")

    src = Path(_optional_str(defaults.get("src")) or DEFAULT_SRC_DIR)
    if not src.is_absolute():
        src = path.parent / src

    data = components.get("data") or {}
    if not isinstance(data, dict):
        msg = "'components.data' must be a mapping."
        raise SiteConfigError(msg)

    return SiteConfig(
        src=src,
        components_dir=_optional_str(components.get("dir")) or DEFAULT_COMPONENTS_DIR,
        data=dict(data),
        engines=_build_engine_settings(engines),
    )


__all__ = ["load_site_config"]
