"""Load and validate pagekit site configuration YAML.

This subpackage parses the project's ``pagekit.yaml`` file, applies defaults
for the source root, component directory, and engine options, and produces
typed dataclasses (:class:`SiteConfig`, :class:`EngineSettings`) that the
loaders consume. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from pagekit.config import load_site_config
>>> site = load_site_config(Path("pagekit.yaml"))  # doctest: +SKIP
>>> site.components_path  # doctest: +SKIP
PosixPath('src/_components')
"""

from .loader import load_site_config
from .models import EngineSettings, SiteConfig, SiteConfigError

__all__ = [
    "EngineSettings",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
