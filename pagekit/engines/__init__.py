"""Render engines applied to component content in format order."""

from .jinja import JinjaEngine
from .markdown import MarkdownEngine

__all__ = ["JinjaEngine", "MarkdownEngine"]
