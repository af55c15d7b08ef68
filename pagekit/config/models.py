"""Typed dataclasses describing pagekit site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from pagekit._constants import DEFAULT_COMPONENTS_DIR, DEFAULT_PYGMENTS_STYLE


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class EngineSettings:
    """Options shared by the built-in render engines."""

    pygments_style: str = DEFAULT_PYGMENTS_STYLE
    autoescape: bool = True


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved site definition sourced from YAML config.

    Attributes
    ----------
    src : Path
        Site source root; relative entries in the YAML resolve against the
        directory holding the config file.
    components_dir : str
        Component root, relative to ``src``.
    data : dict[str, Any]
        Default data inherited by every component.
    engines : EngineSettings
        Options applied to the built-in engines.
    """

    src: Path
    components_dir: str = DEFAULT_COMPONENTS_DIR
    data: dict[str, typ.Any] = dc.field(default_factory=dict)
    engines: EngineSettings = dc.field(default_factory=EngineSettings)

    @property
    def components_path(self) -> Path:
        """Return the absolute-or-relative path of the component root."""
        return self.src / self.components_dir


__all__ = ["EngineSettings", "SiteConfig", "SiteConfigError"]
