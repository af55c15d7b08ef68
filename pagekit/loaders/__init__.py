"""Loaders that turn source files into components and asset pages."""

from .components import (
    Component,
    ComponentFile,
    Components,
    ComponentsLoader,
    Directory,
    find_component,
    iter_components,
)
from .pages import PageLoader

__all__ = [
    "Component",
    "ComponentFile",
    "Components",
    "ComponentsLoader",
    "Directory",
    "PageLoader",
    "find_component",
    "iter_components",
]
