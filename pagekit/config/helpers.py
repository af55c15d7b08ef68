"""Utility helpers shared by the pagekit configuration loader."""

from __future__ import annotations

import typing as typ

from .models import EngineSettings, SiteConfigError


def _section(
    raw: typ.Mapping[str, typ.Any], key: str
) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key``, treating a missing value as empty."""
    value = raw.get(key)
    match value:
        case None:
            return {}
        case dict():
            return value
        case _:
            msg = f"Section '{key}' must be a mapping."
            raise SiteConfigError(msg)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_engine_settings(payload: typ.Mapping[str, typ.Any]) -> EngineSettings:
    """Build EngineSettings from the ``engines`` mapping, keeping defaults."""
    base = EngineSettings()
    autoescape = payload.get("autoescape", base.autoescape)
    if not isinstance(autoescape, bool):
        msg = "'engines.autoescape' must be a boolean."
        raise SiteConfigError(msg)
    return EngineSettings(
        pygments_style=_optional_str(payload.get("pygments_style"))
        or base.pygments_style,
        autoescape=autoescape,
    )


__all__ = ["_build_engine_settings", "_optional_str", "_section"]
